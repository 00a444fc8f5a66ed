from typing import Any, Callable, Optional

from PyQt5.QtWidgets import QMainWindow, QTabWidget

from PX_Libs.constants import APP_TITLE, DEFAULT_WINDOW_HEIGHT, DEFAULT_WINDOW_WIDTH
from PX_Libs.ImageEditingLib.photo_editor import PhotoEditor
from PX_Libs.InteractionLib.interaction_controller import EditorMode, InteractionController
from PX_Libs.PosterLib.poster_editor import PosterEditor
from PX_Libs.UILib.photo_editor_widget import PhotoEditorWidget
from PX_Libs.UILib.poster_editor_widget import PosterEditorWidget

_TAB_MODES = (EditorMode.PHOTO, EditorMode.POSTER)


class PicXMainWindow(QMainWindow):
    def __init__(self, relay: Optional[Callable[[Any], Any]] = None) -> None:
        super().__init__()
        self.setWindowTitle(APP_TITLE)
        self.resize(DEFAULT_WINDOW_WIDTH, DEFAULT_WINDOW_HEIGHT)

        self.photo_editor = PhotoEditor()
        self.poster_editor = PosterEditor()
        self.controller = InteractionController(self.photo_editor, self.poster_editor)
        self.relay = relay

        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        self.tabs = QTabWidget(self)
        self.setCentralWidget(self.tabs)

        self.photo_tab = PhotoEditorWidget(self.controller, self.relay)
        self.poster_tab = PosterEditorWidget(self.controller)
        self.tabs.addTab(self.photo_tab, "Photo Editor")
        self.tabs.addTab(self.poster_tab, "Poster Editor")

    def _connect_signals(self) -> None:
        self.tabs.currentChanged.connect(self.on_tab_changed)

    def on_tab_changed(self, index: int) -> None:
        if 0 <= index < len(_TAB_MODES):
            self.controller.set_mode(_TAB_MODES[index])
            self.photo_tab.refresh_buttons()
            self.photo_tab.canvas.update()
            self.poster_tab.canvas.update()
