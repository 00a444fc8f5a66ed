"""
ImageEditingLib - Photo editing functionality

This module provides photo adjustments, effect descriptors, cropping,
image decoding and the photo-mode editor state for PicX.
"""

from PX_Libs.ImageEditingLib.image_models import (
    CropRect,
    LoadedImage,
    Point,
    Size,
    fit_display_size,
)
from PX_Libs.ImageEditingLib.effects import (
    EffectOp,
    NAMED_FILTER_OPS,
    apply_effects,
    effects_to_css,
    named_filter_ops,
)
from PX_Libs.ImageEditingLib.adjustments import Adjustments, clamp_adjustment
from PX_Libs.ImageEditingLib.crop_engine import CropEngine, CropState
from PX_Libs.ImageEditingLib.image_io import decode_image, is_supported_format
from PX_Libs.ImageEditingLib.photo_editor import PhotoEditor

__all__ = [
    "CropRect",
    "LoadedImage",
    "Point",
    "Size",
    "fit_display_size",
    "EffectOp",
    "NAMED_FILTER_OPS",
    "apply_effects",
    "effects_to_css",
    "named_filter_ops",
    "Adjustments",
    "clamp_adjustment",
    "CropEngine",
    "CropState",
    "decode_image",
    "is_supported_format",
    "PhotoEditor",
]
