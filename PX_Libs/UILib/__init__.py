"""
UILib - PyQt5 desktop surface for PicX
"""

from .main_window import PicXMainWindow
from .photo_editor_widget import PhotoEditorWidget
from .poster_editor_widget import PosterEditorWidget

__all__ = ["PicXMainWindow", "PhotoEditorWidget", "PosterEditorWidget"]
