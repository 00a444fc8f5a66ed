from pathlib import Path
from typing import Any, Optional
import logging

from PyQt5.QtCore import QRectF, Qt
from PyQt5.QtGui import QColor, QPainter, QPen
from PyQt5.QtWidgets import (
    QComboBox,
    QFileDialog,
    QGridLayout,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QListWidget,
    QMessageBox,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from PX_Libs.constants import (
    COLOR_SWATCHES,
    ELEMENT_TYPE_IMAGE,
    ELEMENT_TYPE_TEXT,
    FONT_FAMILIES,
    IMAGE_FILE_FILTER,
    POSTER_DOWNLOAD_FILENAME,
    SELECTION_RING_COLOR,
    TEXT_ALIGNMENTS,
    TEXT_KINDS,
)
from PX_Libs.ImageEditingLib.image_models import Point, Size
from PX_Libs.InteractionLib.interaction_controller import InteractionController
from PX_Libs.PosterLib.templates import list_templates
from PX_Libs.RenderLib.compositor import element_at, element_bounds
from PX_Libs.RenderLib.download import DownloadConfig, save_download
from PX_Libs.UILib.photo_editor_widget import client_point, container_rect
from PX_Libs.UILib.qt_image import pil_to_pixmap

logger = logging.getLogger(__name__)


class PosterCanvas(QWidget):
    """
    Poster editing surface.

    Press on the selected element starts a drag; a press and release on the
    same element selects it. Double-clicking a text element edits its content.
    """

    def __init__(self, controller: InteractionController, on_change=None,
                 parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.editor = controller.poster_editor
        self.on_change = on_change
        self._pressed_id: Optional[str] = None
        self.setMinimumSize(int(self.editor.canvas_size.width), int(self.editor.canvas_size.height))

    def resizeEvent(self, event) -> None:
        self.editor.set_canvas_size(Size(max(1, self.width()), max(1, self.height())))
        super().resizeEvent(event)

    def _local(self, event) -> Point:
        return container_rect(self).to_local(client_point(event))

    def _changed(self) -> None:
        self.update()
        if self.on_change is not None:
            self.on_change()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        pixmap = pil_to_pixmap(self.editor.render())
        if pixmap is not None:
            painter.drawPixmap(0, 0, pixmap)

        for element in self.editor.scene.elements:
            left, top, right, bottom = element_bounds(element)
            box = QRectF(left, top, right - left, bottom - top)
            if element.element_type == ELEMENT_TYPE_IMAGE and element.cropping:
                painter.setPen(QPen(QColor("#f59e0b"), 2, Qt.DashLine))
                painter.drawRect(box)
            if element.id == self.editor.scene.selected_id:
                painter.setPen(QPen(QColor(SELECTION_RING_COLOR), 2))
                painter.drawRect(box.adjusted(-2, -2, 2, 2))

        placeholder = self.editor.placeholder_text
        if placeholder is not None:
            painter.setPen(QColor("#6b7280"))
            painter.drawText(self.rect(), Qt.AlignCenter, placeholder)

    def mousePressEvent(self, event) -> None:
        hit = element_at(self.editor.scene.elements, self._local(event))
        self._pressed_id = None if hit is None else hit.id
        if hit is not None:
            self.controller.element_pressed(hit.id)

    def mouseMoveEvent(self, event) -> None:
        if self.controller.pointer_move(client_point(event), container_rect(self)):
            self.update()

    def mouseReleaseEvent(self, event) -> None:
        self.controller.pointer_up()
        hit = element_at(self.editor.scene.elements, self._local(event))
        if hit is not None and hit.id == self._pressed_id:
            self.controller.element_clicked(hit.id)
        self._pressed_id = None
        self._changed()

    def mouseDoubleClickEvent(self, event) -> None:
        hit = element_at(self.editor.scene.elements, self._local(event))
        if hit is None or hit.element_type != ELEMENT_TYPE_TEXT:
            return

        text, ok = QInputDialog.getText(self, "Edit Text", "Text:", text=hit.content)
        if ok and text:
            self.editor.scene.edit_text_content(hit.id, text)
            self._changed()


class PosterEditorWidget(QWidget):
    def __init__(self, controller: InteractionController, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.editor = controller.poster_editor

        self._build_ui()
        self._connect_signals()
        self.refresh_panels()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        controls_col = QVBoxLayout()

        controls_col.addWidget(QLabel("Templates"))
        self.templates_list = QListWidget()
        for template in list_templates():
            self.templates_list.addItem(template.name)
        controls_col.addWidget(self.templates_list)

        self.btn_add_heading = QPushButton("Add Heading")
        self.btn_add_subheading = QPushButton("Add Subheading")
        self.btn_add_body = QPushButton("Add Body Text")
        self.btn_add_image = QPushButton("Add Image")
        for button in (self.btn_add_heading, self.btn_add_subheading,
                       self.btn_add_body, self.btn_add_image):
            controls_col.addWidget(button)

        self.text_panel = QWidget()
        text_layout = QVBoxLayout(self.text_panel)
        text_layout.setContentsMargins(0, 0, 0, 0)
        self.combo_family = QComboBox()
        self.combo_family.addItems(FONT_FAMILIES)
        self.spin_font_size = QSpinBox()
        self.spin_font_size.setRange(1, 200)
        self.combo_align = QComboBox()
        self.combo_align.addItems(TEXT_ALIGNMENTS)
        swatches = QGridLayout()
        self.swatch_buttons = []
        for index, color in enumerate(COLOR_SWATCHES):
            button = QPushButton()
            button.setFixedSize(24, 24)
            button.setStyleSheet(f"background-color: {color}; border: 1px solid #888;")
            self.swatch_buttons.append((color, button))
            swatches.addWidget(button, index // 5, index % 5)
        text_layout.addWidget(QLabel("Font"))
        text_layout.addWidget(self.combo_family)
        text_layout.addWidget(QLabel("Size"))
        text_layout.addWidget(self.spin_font_size)
        text_layout.addWidget(QLabel("Color"))
        text_layout.addLayout(swatches)
        text_layout.addWidget(QLabel("Align"))
        text_layout.addWidget(self.combo_align)
        controls_col.addWidget(self.text_panel)

        self.image_panel = QWidget()
        image_layout = QVBoxLayout(self.image_panel)
        image_layout.setContentsMargins(0, 0, 0, 0)
        self.spin_width = QSpinBox()
        self.spin_width.setRange(1, 4000)
        self.spin_height = QSpinBox()
        self.spin_height.setRange(1, 4000)
        self.btn_toggle_crop = QPushButton("Toggle Crop")
        image_layout.addWidget(QLabel("Width"))
        image_layout.addWidget(self.spin_width)
        image_layout.addWidget(QLabel("Height"))
        image_layout.addWidget(self.spin_height)
        image_layout.addWidget(self.btn_toggle_crop)
        controls_col.addWidget(self.image_panel)

        self.btn_download = QPushButton("Download Poster")
        controls_col.addWidget(self.btn_download)
        controls_col.addStretch(1)

        self.canvas = PosterCanvas(self.controller, self.refresh_panels, self)

        root.addLayout(controls_col, stretch=1)
        root.addWidget(self.canvas, stretch=3)

    def _connect_signals(self) -> None:
        self.templates_list.currentRowChanged.connect(self.on_template_selected)
        for kind, button in zip(TEXT_KINDS, (self.btn_add_heading, self.btn_add_subheading,
                                             self.btn_add_body)):
            button.clicked.connect(lambda _checked, k=kind: self.add_text(k))
        self.btn_add_image.clicked.connect(self.add_image)
        self.combo_family.currentTextChanged.connect(
            lambda value: self.update_style("font_family", value))
        self.spin_font_size.valueChanged.connect(
            lambda value: self.update_style("font_size", value))
        self.combo_align.currentTextChanged.connect(
            lambda value: self.update_style("align", value))
        for color, button in self.swatch_buttons:
            button.clicked.connect(lambda _checked, c=color: self.update_style("color", c))
        self.spin_width.valueChanged.connect(self.on_image_size_changed)
        self.spin_height.valueChanged.connect(self.on_image_size_changed)
        self.btn_toggle_crop.clicked.connect(self.toggle_crop)
        self.btn_download.clicked.connect(self.download)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def on_template_selected(self, index: int) -> None:
        templates = list_templates()
        if 0 <= index < len(templates) and self.editor.select_template(templates[index].id):
            self.canvas.update()

    def add_text(self, kind: str) -> None:
        self.editor.scene.add_text(kind)
        self.refresh_panels()
        self.canvas.update()

    def add_image(self) -> None:
        path_str, _ = QFileDialog.getOpenFileName(self, "Select Image", "", IMAGE_FILE_FILTER)
        if not path_str:
            return

        try:
            self.editor.add_image(Path(path_str))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not load {path_str}: {e}")
            QMessageBox.warning(self, "Upload Failed", f"Could not load image:\n{e}")
            return

        self.refresh_panels()
        self.canvas.update()

    def update_style(self, field: str, value: Any) -> None:
        selected_id = self.editor.scene.selected_id
        if selected_id is None:
            return
        if self.editor.scene.update_text_style(selected_id, field, value):
            self.canvas.update()

    def on_image_size_changed(self, _value: int) -> None:
        selected_id = self.editor.scene.selected_id
        if selected_id is None:
            return
        if self.editor.scene.resize_image(selected_id, self.spin_width.value(),
                                          self.spin_height.value()):
            self.canvas.update()

    def toggle_crop(self) -> None:
        selected_id = self.editor.scene.selected_id
        if selected_id is not None and self.editor.scene.toggle_crop(selected_id):
            self.canvas.update()

    def download(self) -> None:
        image = self.editor.export()
        if image is None:
            QMessageBox.information(self, "Choose a Template", "Select a template before downloading.")
            return

        save_path, _ = QFileDialog.getSaveFileName(
            self,
            "Download Poster",
            POSTER_DOWNLOAD_FILENAME,
            "PNG Images (*.png)",
        )
        if not save_path:
            return

        target = Path(save_path)
        config = DownloadConfig(filename=target.name, directory=str(target.parent), overwrite=True)
        try:
            save_download(image, config)
        except (OSError, ValueError) as e:
            QMessageBox.warning(self, "Download Failed", str(e))

    # ------------------------------------------------------------------
    # View refresh
    # ------------------------------------------------------------------

    def refresh_panels(self) -> None:
        """Show the style panel matching the selected element's variant."""
        element = self.editor.scene.selected()
        is_text = element is not None and element.element_type == ELEMENT_TYPE_TEXT
        is_image = element is not None and element.element_type == ELEMENT_TYPE_IMAGE
        self.text_panel.setVisible(is_text)
        self.image_panel.setVisible(is_image)

        widgets = (self.combo_family, self.spin_font_size, self.combo_align,
                   self.spin_width, self.spin_height)
        for widget in widgets:
            widget.blockSignals(True)
        if is_text:
            self.combo_family.setCurrentText(element.style.font_family)
            self.spin_font_size.setValue(int(element.style.font_size))
            self.combo_align.setCurrentText(element.style.align)
        if is_image:
            self.spin_width.setValue(int(round(element.size.width)))
            self.spin_height.setValue(int(round(element.size.height)))
        for widget in widgets:
            widget.blockSignals(False)
