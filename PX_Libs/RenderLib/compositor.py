"""
Compositor for PicX.

Rasterizes editor state into output images. The compositor holds no state:
every function is a pure mapping from a LoadedImage or Scene (plus an effect
descriptor or canvas size) to a new PIL Image.

Photo export:
    Output sized to the image's natural resolution, effect descriptor applied,
    source drawn once.

Poster export:
    White surface the size of the editor container. Elements are drawn in
    ascending order of position.y (ties keep insertion order). Text is drawn
    as left-baseline text at its position; images are resized into their
    box. The cropping indicator and text alignment do not affect output.

Functions:
    render_photo: Full-resolution photo export
    render_preview: Display-resolution photo preview with the same effects
    poster_draw_order: Z-order used by render_poster
    render_poster: Flatten a poster scene
    element_bounds: Drawn bounding box of an element
    element_at: Topmost element under a point
    encode_png: Encode an image to PNG bytes
    to_data_uri: Encode an image as a PNG data URI
"""

from io import BytesIO
from typing import Any, Iterable, List, Optional, Sequence, Tuple
import base64

from PIL import Image, ImageDraw, ImageFont

from PX_Libs.constants import (
    DEFAULT_OUTPUT_FORMAT,
    ELEMENT_TYPE_TEXT,
    PNG_DATA_URI_PREFIX,
    POSTER_BACKGROUND_COLOR,
)
from PX_Libs.ImageEditingLib.effects import EffectOp, apply_effects
from PX_Libs.ImageEditingLib.image_models import LoadedImage, Size
from PX_Libs.RenderLib.fonts import resolve_font


# ============================================================================
# Photo Mode
# ============================================================================

def render_photo(image: LoadedImage, ops: Sequence[EffectOp]) -> Any:
    """
    Render a photo at natural resolution with the effect descriptor applied.

    Args:
        image: Loaded image (display size is ignored)
        ops: Effect descriptor

    Returns:
        RGBA PIL Image with the image's natural size
    """
    return apply_effects(image.raster, ops)


def render_preview(image: LoadedImage, ops: Sequence[EffectOp]) -> Any:
    """Render a photo at its display size with the same effect descriptor."""
    display = image.display_size.as_int_tuple()
    raster = image.raster
    if raster.size != display:
        raster = raster.resize(display, Image.Resampling.LANCZOS)
    return apply_effects(raster, ops)


# ============================================================================
# Poster Mode
# ============================================================================

def poster_draw_order(elements: Iterable[Any]) -> List[Any]:
    """Sort elements by ascending position.y; stable for equal y."""
    return sorted(elements, key=lambda element: element.position.y)


def _draw_text(surface: Any, element: Any) -> None:
    style = element.style
    font = resolve_font(style.font_family, style.font_weight, int(style.font_size))
    draw = ImageDraw.Draw(surface)
    x, y = element.position.x, element.position.y
    if isinstance(font, ImageFont.FreeTypeFont):
        draw.text((x, y), element.content, fill=style.color, font=font, anchor="ls")
    else:
        # bitmap fonts only support top-left anchoring
        draw.text((x, y - font.getbbox(element.content)[3]), element.content,
                  fill=style.color, font=font)


def _draw_image(surface: Any, element: Any) -> None:
    width = max(1, int(round(element.size.width)))
    height = max(1, int(round(element.size.height)))
    raster = element.raster.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)
    origin = (int(round(element.position.x)), int(round(element.position.y)))
    surface.paste(raster, origin, raster)


def render_poster(scene: Any, canvas_size: Size) -> Any:
    """
    Flatten a poster scene onto a white surface.

    Args:
        scene: Scene (or any object with an `elements` sequence)
        canvas_size: Editor container size in pixels

    Returns:
        RGB PIL Image of canvas_size

    Raises:
        ValueError: If canvas_size is not positive
    """
    width, height = canvas_size.as_int_tuple()
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")

    surface = Image.new("RGB", (width, height), POSTER_BACKGROUND_COLOR)
    for element in poster_draw_order(scene.elements):
        if element.element_type == ELEMENT_TYPE_TEXT:
            _draw_text(surface, element)
        else:
            _draw_image(surface, element)
    return surface


# ============================================================================
# Encoding
# ============================================================================

def encode_png(image: Any) -> bytes:
    """Encode a PIL Image losslessly as PNG bytes."""
    if not hasattr(image, "save"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")
    buffer = BytesIO()
    image.save(buffer, format=DEFAULT_OUTPUT_FORMAT)
    return buffer.getvalue()


def to_data_uri(image: Any) -> str:
    """Encode a PIL Image as a 'data:image/png;base64,...' URI."""
    return PNG_DATA_URI_PREFIX + base64.b64encode(encode_png(image)).decode("ascii")


# ============================================================================
# Hit Testing
# ============================================================================

def element_bounds(element: Any) -> Tuple[float, float, float, float]:
    """
    Bounding box of an element as drawn by render_poster.

    Returns:
        (left, top, right, bottom) in canvas coordinates
    """
    x, y = element.position.x, element.position.y
    if element.element_type != ELEMENT_TYPE_TEXT:
        return (x, y, x + element.size.width, y + element.size.height)

    style = element.style
    font = resolve_font(style.font_family, style.font_weight, int(style.font_size))
    if isinstance(font, ImageFont.FreeTypeFont):
        left, top, right, bottom = font.getbbox(element.content, anchor="ls")
        return (x + left, y + top, x + right, y + bottom)
    left, top, right, bottom = font.getbbox(element.content)
    return (x + left, y - bottom + top, x + right, y)


def element_at(elements: Iterable[Any], point: Any) -> Optional[Any]:
    """Return the topmost element whose bounds contain point, if any."""
    for element in reversed(poster_draw_order(elements)):
        left, top, right, bottom = element_bounds(element)
        if left <= point.x <= right and top <= point.y <= bottom:
            return element
    return None
