"""
Photo editor state for PicX.

PhotoEditor owns the photo-mode state tree exclusively: the loaded image, its
adjustments and the crop engine. File decoding is modelled as a request with
a monotonically increasing id; only the completion for the latest request is
applied, so a slow decode can never overwrite a newer upload.

Classes:
    PhotoEditor: Photo-mode state and operations
"""

from itertools import count
from typing import Any, Optional
import logging

from PX_Libs.constants import (
    CROP_BAKED_HINT,
    PHOTO_DISPLAY_MAX_HEIGHT,
    PHOTO_DISPLAY_MAX_WIDTH,
)
from PX_Libs.ImageEditingLib.adjustments import Adjustments
from PX_Libs.ImageEditingLib.crop_engine import CropEngine
from PX_Libs.ImageEditingLib.effects import EffectDescriptor, effects_to_css
from PX_Libs.ImageEditingLib.image_io import ImageSource, decode_image
from PX_Libs.ImageEditingLib.image_models import (
    LoadedImage,
    Size,
    fit_display_size,
)

logger = logging.getLogger(__name__)


class PhotoEditor:
    """Photo-mode model: one image, its adjustments and a crop gesture."""

    def __init__(
        self,
        display_max_width: float = PHOTO_DISPLAY_MAX_WIDTH,
        display_max_height: float = PHOTO_DISPLAY_MAX_HEIGHT,
    ) -> None:
        self.display_max = Size(display_max_width, display_max_height)
        self.image: Optional[LoadedImage] = None
        self.adjustments = Adjustments()
        self.crop = CropEngine()
        self.effects_baked = False
        self._request_ids = count(1)
        self._latest_request: Optional[int] = None

    @property
    def has_image(self) -> bool:
        return self.image is not None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def request_load(self) -> int:
        """Start a load; returns the id its completion must present."""
        self._latest_request = next(self._request_ids)
        return self._latest_request

    def complete_load(self, request_id: int, raster: Any) -> bool:
        """
        Install a decoded raster if it answers the latest load request.

        Installing resets adjustments to defaults and clears any crop.

        Returns:
            True if applied, False if the completion was stale
        """
        if request_id != self._latest_request:
            logger.warning(
                f"Dropping stale image load {request_id} "
                f"(latest is {self._latest_request})"
            )
            return False

        self.image = self._fit(raster)
        self.adjustments.reset()
        self.crop.cancel()
        self.effects_baked = False
        logger.info(f"Loaded image {raster.width}x{raster.height}")
        return True

    def load_image(self, source: ImageSource) -> LoadedImage:
        """Decode and install an image synchronously."""
        request_id = self.request_load()
        raster = decode_image(source)
        self.complete_load(request_id, raster)
        return self.image

    def _fit(self, raster: Any) -> LoadedImage:
        natural = Size(raster.width, raster.height)
        display = fit_display_size(natural, self.display_max.width, self.display_max.height)
        return LoadedImage(raster=raster, display_size=display)

    def set_display_size(self, display_size: Size) -> None:
        """Record the size the image is currently rendered at on screen."""
        if self.image is None:
            return
        if display_size.width <= 0 or display_size.height <= 0:
            raise ValueError(f"Display size must be positive, got {display_size}")
        self.image = self.image.with_display_size(display_size)

    # ------------------------------------------------------------------
    # Adjustments
    # ------------------------------------------------------------------

    def set_adjustment(self, field: str, value: Any) -> int:
        return self.adjustments.set_adjustment(field, value)

    def apply_named_filter(self, name: Optional[str]) -> None:
        self.adjustments.apply_named_filter(name)

    def effect_descriptor(self) -> EffectDescriptor:
        return self.adjustments.derive_effect_descriptor()

    def effect_css(self) -> str:
        return effects_to_css(self.effect_descriptor())

    # ------------------------------------------------------------------
    # Cropping
    # ------------------------------------------------------------------

    def begin_crop(self) -> None:
        if self.image is None:
            return
        self.crop.begin_crop()

    def cancel_crop(self) -> None:
        self.crop.cancel()

    def apply_crop(self) -> bool:
        """
        Replace the loaded image with the pending crop region.

        Returns:
            True if the image was replaced
        """
        cropped = self.crop.apply(self.image, self.effect_descriptor())
        if cropped is None:
            return False
        self.image = self._fit(cropped.raster)
        self.effects_baked = self.effects_baked or not self.adjustments.is_default()
        return True

    @property
    def crop_hint(self) -> Optional[str]:
        """Notice shown while baked-in adjustments are also applied live."""
        if self.effects_baked and not self.adjustments.is_default():
            return CROP_BAKED_HINT
        return None

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_preview(self) -> Optional[Any]:
        from PX_Libs.RenderLib.compositor import render_preview

        if self.image is None:
            return None
        return render_preview(self.image, self.effect_descriptor())

    def export(self) -> Optional[Any]:
        """Render the download image at natural resolution, or None without an image."""
        from PX_Libs.RenderLib.compositor import render_photo

        if self.image is None:
            return None
        return render_photo(self.image, self.effect_descriptor())
