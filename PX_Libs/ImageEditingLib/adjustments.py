"""
Photo adjustment model for PicX.

Holds the slider values and the named filter for one loaded image and derives
the effect descriptor consumed by both the preview and the exports.

Out-of-range slider values are clamped into their closed range rather than
rejected.

Classes:
    Adjustments: Slider values plus optional named filter

Functions:
    clamp_adjustment: Coerce and clamp a value for a numeric field
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
import logging
import math

from PX_Libs.constants import (
    BRIGHTNESS_RANGE,
    CONTRAST_RANGE,
    SATURATION_RANGE,
    ROTATION_RANGE,
    DEFAULT_BRIGHTNESS,
    DEFAULT_CONTRAST,
    DEFAULT_SATURATION,
    DEFAULT_ROTATION,
    NAMED_FILTERS,
)
from PX_Libs.ImageEditingLib.effects import (
    EffectDescriptor,
    EffectOp,
    OP_BRIGHTNESS,
    OP_CONTRAST,
    OP_ROTATE,
    OP_SATURATE,
    named_filter_ops,
)

logger = logging.getLogger(__name__)

ADJUSTMENT_RANGES: Dict[str, Tuple[int, int]] = {
    "brightness": BRIGHTNESS_RANGE,
    "contrast": CONTRAST_RANGE,
    "saturation": SATURATION_RANGE,
    "rotation": ROTATION_RANGE,
}


def clamp_adjustment(field: str, value: Any) -> int:
    """
    Coerce a slider value to int and clamp it into the field's range.

    Args:
        field: One of 'brightness', 'contrast', 'saturation', 'rotation'
        value: Numeric value (floats are rounded)

    Returns:
        Clamped integer value

    Raises:
        ValueError: If field is unknown, or value is NaN or non-numeric text
        TypeError: If value cannot be converted to a number
    """
    if field not in ADJUSTMENT_RANGES:
        raise ValueError(
            f"Unknown adjustment: {field}. "
            f"Valid adjustments: {', '.join(ADJUSTMENT_RANGES)}"
        )
    low, high = ADJUSTMENT_RANGES[field]
    number = float(value)
    if math.isnan(number):
        raise ValueError(f"{field} must be a number, got {value}")
    # Clamp before int conversion so infinities land on the range ends
    return int(round(max(low, min(high, number))))


@dataclass
class Adjustments:
    """Adjustment parameters for a single loaded image.

    Attributes:
        brightness: Brightness percent (0-200)
        contrast: Contrast percent (0-200)
        saturation: Saturation percent (0-200)
        rotation: Rotation in degrees (0-360)
        filter: Named filter, or None
    """
    brightness: int = DEFAULT_BRIGHTNESS
    contrast: int = DEFAULT_CONTRAST
    saturation: int = DEFAULT_SATURATION
    rotation: int = DEFAULT_ROTATION
    filter: Optional[str] = None

    def __post_init__(self):
        for field_name in ADJUSTMENT_RANGES:
            setattr(self, field_name, clamp_adjustment(field_name, getattr(self, field_name)))
        if self.filter is not None and self.filter not in NAMED_FILTERS:
            raise ValueError(f"Unknown filter: {self.filter}")

    def set_adjustment(self, field: str, value: Any) -> int:
        """
        Set a numeric adjustment, clamping into range.

        Returns:
            The value actually stored
        """
        stored = clamp_adjustment(field, value)
        setattr(self, field, stored)
        logger.debug(f"Adjustment {field} set to {stored}")
        return stored

    def apply_named_filter(self, name: Optional[str]) -> None:
        """Select a named filter, or clear it with None."""
        if name is not None and name not in NAMED_FILTERS:
            raise ValueError(
                f"Unknown filter: {name}. Valid filters: {', '.join(NAMED_FILTERS)}"
            )
        self.filter = name
        logger.debug(f"Named filter set to {name}")

    def reset(self) -> None:
        self.brightness = DEFAULT_BRIGHTNESS
        self.contrast = DEFAULT_CONTRAST
        self.saturation = DEFAULT_SATURATION
        self.rotation = DEFAULT_ROTATION
        self.filter = None

    def is_default(self) -> bool:
        return self == Adjustments()

    def derive_effect_descriptor(self) -> EffectDescriptor:
        """
        Build the ordered effect descriptor.

        Slider terms come first in the fixed order brightness, contrast,
        saturate, rotate; the named filter's terms are appended last.
        """
        base = (
            EffectOp(OP_BRIGHTNESS, self.brightness),
            EffectOp(OP_CONTRAST, self.contrast),
            EffectOp(OP_SATURATE, self.saturation),
            EffectOp(OP_ROTATE, self.rotation),
        )
        return base + named_filter_ops(self.filter)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "brightness": self.brightness,
            "contrast": self.contrast,
            "saturation": self.saturation,
            "rotation": self.rotation,
            "filter": self.filter,
        }
