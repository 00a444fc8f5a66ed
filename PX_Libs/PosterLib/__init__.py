"""
PosterLib - Poster composition functionality

This module provides the poster scene model, the template catalog and the
poster-mode editor state for PicX.
"""

from PX_Libs.PosterLib.scene_models import (
    ImageElement,
    SelectionState,
    TextElement,
    TextStyle,
)
from PX_Libs.PosterLib.scene import Scene, STYLE_FIELDS
from PX_Libs.PosterLib.templates import Template, get_template, list_templates
from PX_Libs.PosterLib.poster_editor import PosterEditor

__all__ = [
    "ImageElement",
    "SelectionState",
    "TextElement",
    "TextStyle",
    "Scene",
    "STYLE_FIELDS",
    "Template",
    "get_template",
    "list_templates",
    "PosterEditor",
]
