"""
Image file decoding for PicX.

This module turns a user-selected file into an RGBA raster usable both as a
display source and by the compositor. Format validation is left to Pillow's
decoder: anything it accepts is accepted, and its errors propagate.

Functions:
    get_supported_image_formats: Get list of file-picker image extensions
    is_supported_format: Check a path against the file-picker extensions
    decode_image: Decode a path, bytes or file object into an RGBA image
"""

from io import BytesIO
from pathlib import Path
from typing import Any, List, Union

from PIL import Image

from PX_Libs.constants import SUPPORTED_STANDARD_IMAGES


ImageSource = Union[str, Path, bytes, Any]


def get_supported_image_formats() -> List[str]:
    """
    Get list of supported standard image formats.

    Returns:
        List of file extensions (e.g., ['.bmp', '.gif', ...])
    """
    return sorted(SUPPORTED_STANDARD_IMAGES)


def is_supported_format(file_path: Path) -> bool:
    """
    Check if a file path has a supported image extension.

    Args:
        file_path: Path to the file

    Returns:
        True if file extension is supported
    """
    return Path(file_path).suffix.lower() in SUPPORTED_STANDARD_IMAGES


def decode_image(source: ImageSource) -> Any:
    """
    Decode an image into a fully loaded RGBA raster.

    Args:
        source: File path, raw bytes, a binary file object, or a PIL Image

    Returns:
        RGBA PIL Image detached from the source file

    Raises:
        FileNotFoundError: If a path does not exist
        PIL.UnidentifiedImageError: If the data is not a decodable image
    """
    if hasattr(source, "mode") and hasattr(source, "convert"):
        return source.convert("RGBA")

    if isinstance(source, (bytes, bytearray)):
        source = BytesIO(source)
    elif isinstance(source, (str, Path)):
        source = Path(source)
        if not source.exists():
            raise FileNotFoundError(f"Image file not found: {source}")

    with Image.open(source) as img:
        img.load()
        return img.convert("RGBA")
