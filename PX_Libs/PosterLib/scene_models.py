"""
Poster scene data models for PicX.

Elements are a tagged variant: every element carries an element_type
discriminant fixed at creation ('text' or 'image'). Identifiers are opaque
and never inspected to decide an element's kind.

Classes:
    TextStyle: Font and colour styling for a text element
    TextElement: Positioned, styled text
    ImageElement: Positioned, sized raster
    SelectionState: Ids of the selected and dragged element
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union

from PIL import ImageColor

from PX_Libs.constants import (
    DEFAULT_ELEMENT_X,
    DEFAULT_ELEMENT_Y,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZES,
    DEFAULT_FONT_WEIGHTS,
    DEFAULT_IMAGE_HEIGHT,
    DEFAULT_IMAGE_WIDTH,
    DEFAULT_TEXT_ALIGN,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TEXT_CONTENT,
    ELEMENT_TYPE_IMAGE,
    ELEMENT_TYPE_TEXT,
    TEXT_ALIGNMENTS,
    TEXT_KINDS,
)
from PX_Libs.ImageEditingLib.image_models import Point, Size


@dataclass
class TextStyle:
    """Styling for a text element.

    Attributes:
        color: CSS-style colour string (e.g. '#000000')
        font_size: Font size in pixels (> 0)
        font_family: Font family name
        font_weight: 'normal' or 'bold'
        align: 'left', 'center' or 'right'
    """
    color: str = DEFAULT_TEXT_COLOR
    font_size: int = DEFAULT_FONT_SIZES["body"]
    font_family: str = DEFAULT_FONT_FAMILY
    font_weight: str = "normal"
    align: str = DEFAULT_TEXT_ALIGN

    def __post_init__(self):
        """Validate style parameters."""
        if self.font_size <= 0:
            raise ValueError(f"font_size must be > 0, got {self.font_size}")
        try:
            ImageColor.getrgb(self.color)
        except (ValueError, AttributeError) as e:
            raise ValueError(f"Invalid colour: {self.color!r}") from e
        if self.align not in TEXT_ALIGNMENTS:
            raise ValueError(
                f"align must be one of {', '.join(TEXT_ALIGNMENTS)}, got {self.align}"
            )

    @classmethod
    def for_kind(cls, kind: str) -> "TextStyle":
        """Default style for a heading, subheading or body element."""
        if kind not in TEXT_KINDS:
            raise ValueError(f"Unknown text kind: {kind}. Valid kinds: {', '.join(TEXT_KINDS)}")
        return cls(
            font_size=DEFAULT_FONT_SIZES[kind],
            font_weight=DEFAULT_FONT_WEIGHTS[kind],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "color": self.color,
            "font_size": self.font_size,
            "font_family": self.font_family,
            "font_weight": self.font_weight,
            "align": self.align,
        }


@dataclass
class TextElement:
    id: str
    kind: str
    content: str = DEFAULT_TEXT_CONTENT
    position: Point = field(default_factory=lambda: Point(DEFAULT_ELEMENT_X, DEFAULT_ELEMENT_Y))
    style: TextStyle = field(default_factory=TextStyle)

    element_type = ELEMENT_TYPE_TEXT

    def __post_init__(self):
        if self.kind not in TEXT_KINDS:
            raise ValueError(f"Unknown text kind: {self.kind}. Valid kinds: {', '.join(TEXT_KINDS)}")


@dataclass
class ImageElement:
    """A raster placed on the poster.

    Attributes:
        id: Unique element id
        raster: PIL Image drawn into the element's box
        position: Top-left corner in editor coordinates
        size: Box size (width and height > 0)
        cropping: Crop indicator shown around the element (display only)
    """
    id: str
    raster: Any
    position: Point = field(default_factory=lambda: Point(DEFAULT_ELEMENT_X, DEFAULT_ELEMENT_Y))
    size: Size = field(default_factory=lambda: Size(DEFAULT_IMAGE_WIDTH, DEFAULT_IMAGE_HEIGHT))
    cropping: bool = False

    element_type = ELEMENT_TYPE_IMAGE

    def __post_init__(self):
        if not hasattr(self.raster, "size") or not hasattr(self.raster, "convert"):
            raise TypeError(f"Expected PIL Image, got {type(self.raster)}")
        if self.size.width <= 0 or self.size.height <= 0:
            raise ValueError(
                f"Image element size must be positive, got {self.size.width}x{self.size.height}"
            )


Element = Union[TextElement, ImageElement]


@dataclass
class SelectionState:
    """Which element is selected and which is being dragged.

    Both fields reference elements by id only; the scene owns the elements.
    dragging_id is only ever set to the selected element's id.
    """
    selected_id: Optional[str] = None
    dragging_id: Optional[str] = None

    @property
    def is_dragging(self) -> bool:
        return self.dragging_id is not None
