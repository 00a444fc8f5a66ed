"""
Download boundary for PicX.

Writes an exported image to disk as a named PNG file. This replaces the
browser's synthetic save-link click: no server round-trip, just a local file.

Classes:
    DownloadConfig: Target filename, directory and overwrite policy

Functions:
    save_download: Validate the target path and write the PNG
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict
import logging

from PX_Libs.constants import DEFAULT_OUTPUT_FORMAT, PHOTO_DOWNLOAD_FILENAME

logger = logging.getLogger(__name__)


@dataclass
class DownloadConfig:
    """Configuration for a download.

    Attributes:
        filename: Bare file name (no directory parts)
        directory: Directory the file is written into
        overwrite: Overwrite existing files (default: False)
        create_directories: Create the directory if it doesn't exist (default: True)
    """
    filename: str = PHOTO_DOWNLOAD_FILENAME
    directory: str = "."
    overwrite: bool = False
    create_directories: bool = True

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def resolve_path(self) -> Path:
        """
        Resolve the output file path.

        Returns:
            Absolute path of the output file

        Raises:
            ValueError: If filename is empty or contains directory parts
        """
        name = str(self.filename).strip()
        if not name:
            raise ValueError("Download filename cannot be empty")

        parts = Path(name).parts
        if len(parts) != 1 or name in (".", "..") or "/" in name or "\\" in name:
            raise ValueError(
                f"Download filename must not contain directory parts: {self.filename}"
            )

        if not name.lower().endswith(".png"):
            name = f"{name}.png"

        return (Path(self.directory) / name).resolve()


def save_download(image: Any, config: DownloadConfig) -> Path:
    """
    Save an exported image as PNG.

    Args:
        image: PIL Image to save
        config: Download target

    Returns:
        Path where the image was saved

    Raises:
        TypeError: If image is not a PIL Image
        ValueError: If the filename is invalid
        FileExistsError: If the file exists and overwrite=False
        OSError: If the file cannot be written
    """
    if not hasattr(image, "save"):
        raise TypeError(f"Expected PIL Image, got {type(image)}")

    output_file = config.resolve_path()

    if config.create_directories:
        output_file.parent.mkdir(parents=True, exist_ok=True)

    if output_file.exists() and not config.overwrite:
        raise FileExistsError(
            f"Output file already exists: {output_file}. "
            f"Set overwrite=True to replace."
        )

    try:
        image.save(output_file, format=DEFAULT_OUTPUT_FORMAT)
    except (OSError, ValueError) as e:
        raise OSError(f"Failed to save image to {output_file}: {str(e)}") from e

    logger.info(f"Saved {image.width}x{image.height} image to {output_file}")
    return output_file
