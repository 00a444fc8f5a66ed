"""
Poster Scene Model.

An insertion-ordered collection of text and image elements plus the
selection/drag state. Operations addressing an unknown element id, or an
element of the wrong variant, do nothing and report False. Values that would
break an element's invariants raise ValueError.

Dragging is absolute: the dragged element's position snaps to the pointer,
and only the selected element can be dragged.

Example:
    >>> scene = Scene()
    >>> heading = scene.add_text("heading")
    >>> scene.begin_drag(heading.id)
    True
    >>> scene.update_drag(Point(120, 80))
    True
    >>> scene.end_drag()
    >>> heading.position
    Point(x=120, y=80)
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional
import logging
import math
import uuid

from PX_Libs.constants import ELEMENT_TYPE_IMAGE, ELEMENT_TYPE_TEXT
from PX_Libs.ImageEditingLib.image_models import Point, Size
from PX_Libs.PosterLib.scene_models import (
    Element,
    ImageElement,
    SelectionState,
    TextElement,
    TextStyle,
)

logger = logging.getLogger(__name__)

STYLE_FIELDS = ("color", "font_size", "font_family", "font_weight", "align")


class Scene:
    """Poster elements, selection and drag state."""

    def __init__(self) -> None:
        self._elements: Dict[str, Element] = {}
        self.selection = SelectionState()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def elements(self) -> List[Element]:
        """All elements in insertion order."""
        return list(self._elements.values())

    @property
    def selected_id(self) -> Optional[str]:
        return self.selection.selected_id

    @property
    def dragging_id(self) -> Optional[str]:
        return self.selection.dragging_id

    def get(self, element_id: Optional[str]) -> Optional[Element]:
        if element_id is None:
            return None
        return self._elements.get(element_id)

    def selected(self) -> Optional[Element]:
        return self.get(self.selection.selected_id)

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, element_id: str) -> bool:
        return element_id in self._elements

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def _new_id(self, element_type: str) -> str:
        while True:
            element_id = f"{element_type}-{uuid.uuid4().hex[:12]}"
            if element_id not in self._elements:
                return element_id

    def _append(self, element: Element) -> None:
        self._elements[element.id] = element
        self.selection.selected_id = element.id
        logger.debug(f"Added {element.element_type} element {element.id}")

    def add_text(self, kind: str) -> TextElement:
        """Append a text element with the kind's default style and select it."""
        element = TextElement(
            id=self._new_id(ELEMENT_TYPE_TEXT),
            kind=kind,
            style=TextStyle.for_kind(kind),
        )
        self._append(element)
        return element

    def add_image(self, raster: Any) -> ImageElement:
        """Append an image element at the default position and size and select it."""
        element = ImageElement(id=self._new_id(ELEMENT_TYPE_IMAGE), raster=raster)
        self._append(element)
        return element

    # ------------------------------------------------------------------
    # Selection and dragging
    # ------------------------------------------------------------------

    def select(self, element_id: str) -> bool:
        if element_id not in self._elements:
            return False
        if self.selection.dragging_id not in (None, element_id):
            self.selection.dragging_id = None
        self.selection.selected_id = element_id
        return True

    def begin_drag(self, element_id: str) -> bool:
        """Start dragging; only the selected element may be dragged."""
        if element_id is None or element_id != self.selection.selected_id:
            logger.debug(f"Ignoring drag of unselected element {element_id}")
            return False
        if element_id not in self._elements:
            return False
        self.selection.dragging_id = element_id
        return True

    def update_drag(self, point: Point) -> bool:
        """Move the dragged element's top-left corner to point."""
        element = self.get(self.selection.dragging_id)
        if element is None:
            return False
        element.position = Point(point.x, point.y)
        return True

    def end_drag(self) -> None:
        self.selection.dragging_id = None

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def _text(self, element_id: str) -> Optional[TextElement]:
        element = self.get(element_id)
        if element is None or element.element_type != ELEMENT_TYPE_TEXT:
            return None
        return element

    def _image(self, element_id: str) -> Optional[ImageElement]:
        element = self.get(element_id)
        if element is None or element.element_type != ELEMENT_TYPE_IMAGE:
            return None
        return element

    def edit_text_content(self, element_id: str, content: str) -> bool:
        element = self._text(element_id)
        if element is None:
            return False
        element.content = str(content)
        return True

    def update_text_style(self, element_id: str, field: str, value: Any) -> bool:
        """
        Replace one style field of a text element.

        Raises:
            ValueError: If field is unknown or value breaks the style invariants
        """
        if field not in STYLE_FIELDS:
            raise ValueError(
                f"Unknown style field: {field}. Valid fields: {', '.join(STYLE_FIELDS)}"
            )
        element = self._text(element_id)
        if element is None:
            return False
        if field == "font_size":
            size = float(value)
            if not math.isfinite(size):
                raise ValueError(f"font_size must be finite, got {value}")
            # Sub-pixel sizes round up to 1; non-positive sizes fail TextStyle validation
            value = max(1, int(round(size))) if size > 0 else size
        element.style = replace(element.style, **{field: value})
        return True

    def resize_image(self, element_id: str, width: float, height: float) -> bool:
        """
        Replace an image element's box size.

        Raises:
            ValueError: If width or height is not positive
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        element = self._image(element_id)
        if element is None:
            return False
        element.size = Size(width, height)
        return True

    def toggle_crop(self, element_id: str) -> bool:
        """Flip the crop indicator of an image element (no pixels are cropped)."""
        element = self._image(element_id)
        if element is None:
            return False
        element.cropping = not element.cropping
        return True
