"""
Crop Engine for PicX.

Tracks a drag-defined rectangle in display coordinates and rasterizes the
matching region of the source image at natural resolution.

State machine:
    IDLE --begin_crop--> SELECTING --end_drag--> PENDING --apply/cancel--> IDLE
                              |
                              +--end_drag (no rectangle)--> IDLE

Calling begin_crop() from any state resets the anchor and rectangle.

Example:
    >>> engine = CropEngine()
    >>> engine.begin_crop()
    >>> engine.press(Point(40, 30))
    >>> engine.update_drag(Point(10, 10))
    >>> engine.rect
    CropRect(x=10, y=10, width=30, height=20)
    >>> engine.end_drag()
    >>> cropped = engine.apply(loaded_image, adjustments.derive_effect_descriptor())
"""

from enum import Enum
from typing import Any, Optional, Sequence
import logging

from PIL import Image

from PX_Libs.ImageEditingLib.effects import EffectOp, apply_effects
from PX_Libs.ImageEditingLib.image_models import (
    CropRect,
    LoadedImage,
    Point,
    Size,
)

logger = logging.getLogger(__name__)


class CropState(Enum):
    IDLE = "idle"
    SELECTING = "selecting"
    PENDING = "pending"


def map_to_source(rect: CropRect, scale: float) -> CropRect:
    """Scale a display-space rectangle into source pixel space."""
    return CropRect(rect.x * scale, rect.y * scale, rect.width * scale, rect.height * scale)


def crop_output_size(rect: CropRect, scale: float) -> Size:
    """Pixel size of the raster produced by cropping rect at scale."""
    return Size(int(round(rect.width * scale)), int(round(rect.height * scale)))


def rasterize_crop(
    raster: Any,
    rect: CropRect,
    scale: float,
    ops: Sequence[EffectOp] = (),
) -> Optional[Any]:
    """
    Render the display-space rect of raster at natural resolution.

    The output is always round(w*scale) x round(h*scale); any part of the
    rectangle outside the source stays transparent.

    Args:
        raster: Source PIL Image at natural resolution
        rect: Rectangle in display coordinates
        scale: Source pixels per display pixel
        ops: Effect descriptor applied to the cropped pixels

    Returns:
        New RGBA PIL Image, or None if the output would be empty
    """
    out_width, out_height = crop_output_size(rect, scale).as_int_tuple()
    if out_width <= 0 or out_height <= 0:
        return None

    output = Image.new("RGBA", (out_width, out_height), (0, 0, 0, 0))

    source = map_to_source(rect, scale)
    covered = source.intersect(raster.width, raster.height)
    if covered is not None:
        offset_x = int(round(covered.x - source.x))
        offset_y = int(round(covered.y - source.y))
        region_width = min(out_width - offset_x, int(round(covered.width)))
        region_height = min(out_height - offset_y, int(round(covered.height)))
        if region_width > 0 and region_height > 0:
            region = raster.convert("RGBA").resize(
                (region_width, region_height),
                Image.Resampling.LANCZOS,
                box=(covered.x, covered.y, covered.right, covered.bottom),
            )
            output.paste(region, (offset_x, offset_y))

    return apply_effects(output, ops)


class CropEngine:
    """Crop gesture state plus crop application."""

    def __init__(self) -> None:
        self.state = CropState.IDLE
        self.anchor: Optional[Point] = None
        self.rect: Optional[CropRect] = None

    @property
    def is_selecting(self) -> bool:
        return self.state is CropState.SELECTING

    @property
    def is_pending(self) -> bool:
        return self.state is CropState.PENDING

    def begin_crop(self) -> None:
        self.state = CropState.SELECTING
        self.anchor = None
        self.rect = None
        logger.debug("Crop selection started")

    def press(self, point: Point) -> None:
        if self.state is not CropState.SELECTING:
            return
        self.anchor = point
        self.rect = None

    def update_drag(self, point: Point) -> Optional[CropRect]:
        """
        Recompute the rectangle spanning the anchor and the pointer.

        Returns:
            The current rectangle, or None when no drag is in progress
        """
        if self.state is not CropState.SELECTING or self.anchor is None:
            return None
        self.rect = CropRect.spanning(self.anchor, point)
        return self.rect

    def end_drag(self) -> None:
        if self.state is not CropState.SELECTING:
            return
        self.anchor = None
        if self.rect is not None:
            self.state = CropState.PENDING
            logger.debug(f"Crop rectangle pending: {self.rect}")
        else:
            self.state = CropState.IDLE

    def cancel(self) -> None:
        self.state = CropState.IDLE
        self.anchor = None
        self.rect = None

    def apply(
        self,
        image: Optional[LoadedImage],
        ops: Sequence[EffectOp] = (),
    ) -> Optional[LoadedImage]:
        """
        Rasterize the pending rectangle into a replacement image.

        The rectangle is mapped into source pixels with
        scale = natural width / display width and rendered with the effect
        descriptor applied. A rectangle running past the image edge keeps its
        full size; the uncovered area is transparent.

        Args:
            image: Currently loaded image
            ops: Effect descriptor to bake into the cropped pixels

        Returns:
            New LoadedImage (display size scaled by the same factor), or None
            when there is no image, no pending rectangle or nothing to crop
        """
        if image is None or self.state is not CropState.PENDING or self.rect is None:
            return None

        scale = image.scale_factor
        if scale <= 0:
            return None

        rect = self.rect
        raster = rasterize_crop(image.raster, rect, scale, ops)
        if raster is None:
            logger.debug("Crop rectangle rounds to an empty image; discarded")
            self.cancel()
            return None

        cropped = LoadedImage(
            raster=raster,
            display_size=Size(
                max(1, int(round(rect.width))),
                max(1, int(round(rect.height))),
            ),
        )
        self.cancel()
        logger.debug(f"Crop applied; new natural size {raster.size}")
        return cropped
