"""
Effect Descriptors and Effect Rasterizer.

An effect descriptor is an ordered tuple of EffectOp values. The same
descriptor drives the live preview and both exports, so the two can never
apply operations in a different order.

Supported operations (CSS filter semantics):
- brightness, contrast, saturate, grayscale, sepia: percent amounts
- hue-rotate, rotate: degrees
- blur: pixels

Example:
    >>> from PIL import Image
    >>> img = Image.open("photo.jpg")
    >>> ops = (EffectOp("brightness", 150), EffectOp("sepia", 100))
    >>> effects_to_css(ops)
    'brightness(150%) sepia(100%)'
    >>> result = apply_effects(img, ops)
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple
import math

import numpy as np
from PIL import Image, ImageFilter

from PX_Libs.constants import (
    FILTER_BLUR,
    FILTER_COOL,
    FILTER_DRAMATIC,
    FILTER_GRAYSCALE,
    FILTER_SEPIA,
    FILTER_SHARPEN,
    FILTER_VINTAGE,
    FILTER_WARM,
)


OP_BRIGHTNESS = "brightness"
OP_CONTRAST = "contrast"
OP_SATURATE = "saturate"
OP_GRAYSCALE = "grayscale"
OP_SEPIA = "sepia"
OP_HUE_ROTATE = "hue-rotate"
OP_BLUR = "blur"
OP_ROTATE = "rotate"

OP_UNITS: Dict[str, str] = {
    OP_BRIGHTNESS: "%",
    OP_CONTRAST: "%",
    OP_SATURATE: "%",
    OP_GRAYSCALE: "%",
    OP_SEPIA: "%",
    OP_HUE_ROTATE: "deg",
    OP_BLUR: "px",
    OP_ROTATE: "deg",
}


@dataclass(frozen=True)
class EffectOp:
    """A single visual-adjustment operation.

    Attributes:
        name: Operation name (one of OP_UNITS)
        amount: Amount in the operation's unit (percent, degrees or pixels)
    """
    name: str
    amount: float

    def __post_init__(self):
        if self.name not in OP_UNITS:
            raise ValueError(
                f"Unknown effect operation: {self.name}. "
                f"Valid operations: {', '.join(sorted(OP_UNITS))}"
            )

    @property
    def unit(self) -> str:
        return OP_UNITS[self.name]

    def css(self) -> str:
        """Render as a CSS filter function, e.g. 'hue-rotate(-30deg)'."""
        amount = self.amount
        if float(amount).is_integer():
            amount = int(amount)
        return f"{self.name}({amount}{self.unit})"


EffectDescriptor = Tuple[EffectOp, ...]


NAMED_FILTER_OPS: Dict[str, EffectDescriptor] = {
    FILTER_GRAYSCALE: (EffectOp(OP_GRAYSCALE, 100),),
    FILTER_SEPIA: (EffectOp(OP_SEPIA, 100),),
    FILTER_BLUR: (EffectOp(OP_BLUR, 2),),
    FILTER_SHARPEN: (EffectOp(OP_CONTRAST, 150), EffectOp(OP_BRIGHTNESS, 150)),
    FILTER_VINTAGE: (
        EffectOp(OP_SEPIA, 50),
        EffectOp(OP_HUE_ROTATE, -30),
        EffectOp(OP_SATURATE, 140),
    ),
    FILTER_COOL: (EffectOp(OP_HUE_ROTATE, 180),),
    FILTER_WARM: (EffectOp(OP_HUE_ROTATE, -30), EffectOp(OP_SATURATE, 150)),
    FILTER_DRAMATIC: (
        EffectOp(OP_CONTRAST, 150),
        EffectOp(OP_BRIGHTNESS, 90),
        EffectOp(OP_SATURATE, 150),
    ),
}


def named_filter_ops(name: Optional[str]) -> EffectDescriptor:
    """
    Get the operations a named filter appends to the descriptor.

    Args:
        name: Filter name, or None for no filter

    Returns:
        Tuple of EffectOp (empty for None)

    Raises:
        ValueError: If name is not a known filter
    """
    if name is None:
        return ()
    try:
        return NAMED_FILTER_OPS[name]
    except KeyError:
        raise ValueError(
            f"Unknown filter: {name}. Valid filters: {', '.join(NAMED_FILTER_OPS)}"
        )


def effects_to_css(ops: Iterable[EffectOp]) -> str:
    """Render a descriptor as a CSS filter string (for display and logging)."""
    return " ".join(op.css() for op in ops)


# ============================================================================
# Color Matrices
# ============================================================================

def _saturate_matrix(s: float) -> np.ndarray:
    return np.array([
        [0.213 + 0.787 * s, 0.715 - 0.715 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 + 0.285 * s, 0.072 - 0.072 * s],
        [0.213 - 0.213 * s, 0.715 - 0.715 * s, 0.072 + 0.928 * s],
    ], dtype=np.float32)


def _sepia_matrix(amount: float) -> np.ndarray:
    a = 1.0 - amount
    return np.array([
        [0.393 + 0.607 * a, 0.769 - 0.769 * a, 0.189 - 0.189 * a],
        [0.349 - 0.349 * a, 0.686 + 0.314 * a, 0.168 - 0.168 * a],
        [0.272 - 0.272 * a, 0.534 - 0.534 * a, 0.131 + 0.869 * a],
    ], dtype=np.float32)


def _hue_rotate_matrix(degrees: float) -> np.ndarray:
    rad = math.radians(degrees)
    c = math.cos(rad)
    s = math.sin(rad)
    return np.array([
        [0.213 + c * 0.787 - s * 0.213, 0.715 - c * 0.715 - s * 0.715, 0.072 - c * 0.072 + s * 0.928],
        [0.213 - c * 0.213 + s * 0.143, 0.715 + c * 0.285 + s * 0.140, 0.072 - c * 0.072 - s * 0.283],
        [0.213 - c * 0.213 - s * 0.787, 0.715 - c * 0.715 + s * 0.715, 0.072 + c * 0.928 + s * 0.072],
    ], dtype=np.float32)


def color_matrix_for(op: EffectOp) -> Optional[np.ndarray]:
    """
    Get the 3x3 RGB matrix for a matrix-expressible operation.

    Returns:
        Matrix, or None for operations that are not a pure matrix
        (brightness/contrast use a linear transfer, blur/rotate are spatial)
    """
    if op.name == OP_SATURATE:
        return _saturate_matrix(max(0.0, op.amount / 100.0))
    if op.name == OP_GRAYSCALE:
        return _saturate_matrix(1.0 - min(1.0, max(0.0, op.amount / 100.0)))
    if op.name == OP_SEPIA:
        return _sepia_matrix(min(1.0, max(0.0, op.amount / 100.0)))
    if op.name == OP_HUE_ROTATE:
        return _hue_rotate_matrix(op.amount)
    return None


# ============================================================================
# Rasterizer
# ============================================================================

def _apply_color_op(image: Any, op: EffectOp) -> Any:
    """Apply a per-pixel colour op to an RGBA image, preserving alpha."""
    pixels = np.asarray(image, dtype=np.float32) / 255.0
    rgb = pixels[..., :3]

    if op.name == OP_BRIGHTNESS:
        rgb = rgb * max(0.0, op.amount / 100.0)
    elif op.name == OP_CONTRAST:
        slope = max(0.0, op.amount / 100.0)
        rgb = (rgb - 0.5) * slope + 0.5
    else:
        matrix = color_matrix_for(op)
        rgb = rgb @ matrix.T

    pixels[..., :3] = np.clip(rgb, 0.0, 1.0)
    out = np.rint(pixels * 255.0).astype(np.uint8)
    return Image.fromarray(out)


def _apply_blur(image: Any, radius: float) -> Any:
    if radius <= 0:
        return image
    return image.filter(ImageFilter.GaussianBlur(radius=radius))


def _apply_rotation(image: Any, degrees: float) -> Any:
    # Clockwise about the centre on a fixed canvas; uncovered corners stay transparent
    if degrees % 360 == 0:
        return image
    return image.rotate(-degrees, resample=Image.Resampling.BICUBIC, expand=False)


def apply_effects(image: Any, ops: Sequence[EffectOp]) -> Any:
    """
    Apply an effect descriptor to an image.

    Operations run in descriptor order, each on the previous result, and
    colour channels are clamped to the displayable range after every step.

    Args:
        image: PIL Image (converted to RGBA)
        ops: Ordered effect operations

    Returns:
        New RGBA PIL Image of the same size

    Raises:
        TypeError: If image is not a PIL Image
    """
    if not hasattr(image, "convert"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    result = image.convert("RGBA")

    for op in ops:
        if op.name == OP_BLUR:
            result = _apply_blur(result, op.amount)
        elif op.name == OP_ROTATE:
            result = _apply_rotation(result, op.amount)
        else:
            result = _apply_color_op(result, op)

    return result
