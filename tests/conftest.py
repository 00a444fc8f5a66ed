"""
Pytest configuration and shared fixtures for PicX tests.

This module provides shared test images and configuration
used across multiple test modules.
"""

import pytest
from PIL import Image


@pytest.fixture
def temp_output_dir(tmp_path):
    """
    Provide a temporary directory for downloaded files.

    Args:
        tmp_path: Pytest's built-in temporary directory fixture

    Returns:
        Path object pointing to a temporary directory
    """
    return tmp_path


@pytest.fixture
def wide_image():
    """
    Provide a 1000x500 image: left half red, right half blue.

    Returns:
        RGBA PIL Image
    """
    image = Image.new("RGBA", (1000, 500), (255, 0, 0, 255))
    image.paste((0, 0, 255, 255), (500, 0, 1000, 500))
    return image


@pytest.fixture
def gray_image():
    """Provide a uniform mid-gray 40x30 image."""
    return Image.new("RGBA", (40, 30), (100, 100, 100, 255))


@pytest.fixture
def small_red_image():
    """Provide a 10x10 opaque red image."""
    return Image.new("RGBA", (10, 10), (255, 0, 0, 255))
