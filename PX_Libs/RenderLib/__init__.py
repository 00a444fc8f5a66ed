"""
RenderLib - Output side of PicX

Compositing of photo and poster state into PIL Images, plus the download and
email-relay boundaries.
"""

from .compositor import (
    element_at,
    element_bounds,
    encode_png,
    poster_draw_order,
    render_photo,
    render_poster,
    render_preview,
    to_data_uri,
)
from .download import DownloadConfig, save_download
from .fonts import resolve_font
from .share import ShareRequest, is_valid_recipient, share_image

__all__ = [
    "element_at",
    "element_bounds",
    "encode_png",
    "poster_draw_order",
    "render_photo",
    "render_poster",
    "render_preview",
    "to_data_uri",
    "DownloadConfig",
    "save_download",
    "resolve_font",
    "ShareRequest",
    "is_valid_recipient",
    "share_image",
]
