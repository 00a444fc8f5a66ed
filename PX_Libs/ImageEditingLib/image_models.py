"""
Image editing data models for PicX.

This module defines core data structures used throughout the image editing system.

Classes:
    Point: A pointer position in display coordinates
    Size: Width/height pair in pixels
    CropRect: Axis-aligned rectangle in display coordinates
    LoadedImage: Decoded raster plus its natural and display dimensions

Functions:
    fit_display_size: Contain-fit a natural size into a display box
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float

    def as_int_tuple(self) -> Tuple[int, int]:
        return int(round(self.width)), int(round(self.height))


@dataclass(frozen=True)
class CropRect:
    """Axis-aligned rectangle in display pixels.

    Attributes:
        x: Left edge
        y: Top edge
        width: Width (never negative)
        height: Height (never negative)
    """
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"CropRect size must be non-negative, got {self.width}x{self.height}"
            )

    @classmethod
    def spanning(cls, start: Point, end: Point) -> "CropRect":
        """Build the rectangle spanning two corner points in any drag direction."""
        return cls(
            x=min(start.x, end.x),
            y=min(start.y, end.y),
            width=abs(start.x - end.x),
            height=abs(start.y - end.y),
        )

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def intersect(self, width: float, height: float) -> Optional["CropRect"]:
        """
        Intersect with the box (0, 0, width, height).

        Returns:
            The overlapping rectangle, or None if the overlap is empty
        """
        left = max(0.0, self.x)
        top = max(0.0, self.y)
        right = min(float(width), self.right)
        bottom = min(float(height), self.bottom)
        if right <= left or bottom <= top:
            return None
        return CropRect(left, top, right - left, bottom - top)


@dataclass(frozen=True)
class LoadedImage:
    """A decoded image owned by one editor mode.

    Crops replace the instance instead of mutating it.

    Attributes:
        raster: RGBA PIL Image at natural resolution
        display_size: Size of the on-screen rendering
    """
    raster: Any
    display_size: Size

    def __post_init__(self):
        if not hasattr(self.raster, "size") or not hasattr(self.raster, "mode"):
            raise TypeError(f"Expected PIL Image, got {type(self.raster)}")

    @property
    def natural_size(self) -> Size:
        width, height = self.raster.size
        return Size(width, height)

    @property
    def scale_factor(self) -> float:
        """Source pixels per display pixel, measured on the width."""
        if self.display_size.width <= 0:
            return 0.0
        return self.natural_size.width / self.display_size.width

    def with_display_size(self, display_size: Size) -> "LoadedImage":
        return replace(self, display_size=display_size)


def fit_display_size(natural: Size, max_width: float, max_height: float) -> Size:
    """
    Contain-fit an image into a display box without upscaling.

    Args:
        natural: Natural image size in pixels
        max_width: Maximum display width
        max_height: Maximum display height

    Returns:
        Display size preserving the aspect ratio, at least 1x1
    """
    if natural.width <= 0 or natural.height <= 0:
        raise ValueError(f"Image size must be positive, got {natural.width}x{natural.height}")

    ratio = min(1.0, max_width / natural.width, max_height / natural.height)
    return Size(
        max(1, int(round(natural.width * ratio))),
        max(1, int(round(natural.height * ratio))),
    )
