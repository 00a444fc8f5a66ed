"""
Font resolution for poster text.

Maps a style's font family and weight to a TrueType font, trying common
system locations for the family first, then DejaVu, then Pillow's built-in
scalable default font.
"""

from functools import lru_cache
from typing import Dict, List, Tuple
import logging

from PIL import ImageFont

logger = logging.getLogger(__name__)

# (family, bold) -> candidate font files
_FAMILY_FILES: Dict[Tuple[str, bool], List[str]] = {
    ("arial", False): ["arial.ttf", "Arial.ttf", "LiberationSans-Regular.ttf"],
    ("arial", True): ["arialbd.ttf", "Arial Bold.ttf", "LiberationSans-Bold.ttf"],
    ("helvetica", False): ["Helvetica.ttc", "LiberationSans-Regular.ttf"],
    ("helvetica", True): ["Helvetica.ttc", "LiberationSans-Bold.ttf"],
    ("times new roman", False): ["times.ttf", "Times New Roman.ttf", "LiberationSerif-Regular.ttf"],
    ("times new roman", True): ["timesbd.ttf", "Times New Roman Bold.ttf", "LiberationSerif-Bold.ttf"],
    ("georgia", False): ["georgia.ttf", "Georgia.ttf", "DejaVuSerif.ttf"],
    ("georgia", True): ["georgiab.ttf", "Georgia Bold.ttf", "DejaVuSerif-Bold.ttf"],
    ("verdana", False): ["verdana.ttf", "Verdana.ttf", "DejaVuSans.ttf"],
    ("verdana", True): ["verdanab.ttf", "Verdana Bold.ttf", "DejaVuSans-Bold.ttf"],
}

_FONT_DIRS = [
    "",
    "/usr/share/fonts/truetype/dejavu/",
    "/usr/share/fonts/truetype/liberation/",
    "/usr/share/fonts/truetype/msttcorefonts/",
    "/Library/Fonts/",
    "/System/Library/Fonts/",
    "/System/Library/Fonts/Supplemental/",
    "C:\\Windows\\Fonts\\",
]

_GENERIC_FILES = {
    False: ["DejaVuSans.ttf"],
    True: ["DejaVuSans-Bold.ttf"],
}


def is_bold(font_weight: str) -> bool:
    """Treat 'bold', 'bolder' and numeric weights >= 600 as bold."""
    weight = str(font_weight).strip().lower()
    if weight in ("bold", "bolder"):
        return True
    return weight.isdigit() and int(weight) >= 600


def font_candidates(font_family: str, font_weight: str) -> List[str]:
    """Font file names to try, most specific first."""
    bold = is_bold(font_weight)
    names = list(_FAMILY_FILES.get((font_family.strip().lower(), bold), []))
    names.extend(_GENERIC_FILES[bold])
    return names


@lru_cache(maxsize=64)
def resolve_font(font_family: str, font_weight: str, size: int):
    """
    Load the best available font for a family, weight and pixel size.

    Args:
        font_family: Family name from the text style
        font_weight: CSS-style weight ('normal', 'bold', '700', ...)
        size: Font size in pixels

    Returns:
        A Pillow font object
    """
    for name in font_candidates(font_family, font_weight):
        for directory in _FONT_DIRS:
            try:
                return ImageFont.truetype(f"{directory}{name}", size)
            except OSError:
                continue

    logger.debug(f"No TrueType font for {font_family!r}/{font_weight}; using Pillow default")
    return ImageFont.load_default(size=size)
