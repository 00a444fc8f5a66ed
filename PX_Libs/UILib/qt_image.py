"""Pillow to Qt conversion helpers."""

from io import BytesIO
from typing import Any, Optional

from PyQt5.QtGui import QPixmap


def to_png_bytes(image: Any) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def pil_to_pixmap(image: Any) -> Optional[QPixmap]:
    """Convert a PIL Image to a QPixmap, or None if Qt cannot decode it."""
    pixmap = QPixmap()
    if not pixmap.loadFromData(to_png_bytes(image), "PNG"):
        return None
    return pixmap
