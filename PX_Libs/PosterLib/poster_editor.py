"""
Poster editor state for PicX.

PosterEditor owns the poster-mode state tree exclusively: the scene, the
selected template and the current editor surface size. Image uploads follow
the same latest-request-wins rule as photo loads.
"""

from itertools import count
from typing import Any, Optional
import logging

from PX_Libs.constants import (
    DEFAULT_POSTER_CANVAS_HEIGHT,
    DEFAULT_POSTER_CANVAS_WIDTH,
    POSTER_PLACEHOLDER_TEXT,
)
from PX_Libs.ImageEditingLib.image_io import ImageSource, decode_image
from PX_Libs.ImageEditingLib.image_models import Size
from PX_Libs.PosterLib.scene import Scene
from PX_Libs.PosterLib.scene_models import ImageElement
from PX_Libs.PosterLib.templates import Template, get_template

logger = logging.getLogger(__name__)


class PosterEditor:
    def __init__(
        self,
        canvas_width: int = DEFAULT_POSTER_CANVAS_WIDTH,
        canvas_height: int = DEFAULT_POSTER_CANVAS_HEIGHT,
    ) -> None:
        self.scene = Scene()
        self.selected_template_id: Optional[str] = None
        self.canvas_size = Size(canvas_width, canvas_height)
        self._request_ids = count(1)
        self._latest_request: Optional[int] = None

    @property
    def selected_template(self) -> Optional[Template]:
        return get_template(self.selected_template_id)

    @property
    def placeholder_text(self) -> Optional[str]:
        """Prompt shown over the editor until a template is chosen."""
        if self.selected_template_id is None:
            return POSTER_PLACEHOLDER_TEXT
        return None

    def select_template(self, template_id: str) -> bool:
        if get_template(template_id) is None:
            logger.debug(f"Ignoring unknown template {template_id}")
            return False
        self.selected_template_id = template_id
        return True

    def set_canvas_size(self, size: Size) -> None:
        """Track the editor container's current pixel size."""
        if size.width <= 0 or size.height <= 0:
            raise ValueError(f"Canvas size must be positive, got {size}")
        self.canvas_size = size

    # ------------------------------------------------------------------
    # Image uploads
    # ------------------------------------------------------------------

    def request_image(self) -> int:
        self._latest_request = next(self._request_ids)
        return self._latest_request

    def complete_image(self, request_id: int, raster: Any) -> Optional[ImageElement]:
        """
        Add a decoded upload to the scene if it answers the latest request.

        Returns:
            The new element, or None for a stale completion
        """
        if request_id != self._latest_request:
            logger.warning(
                f"Dropping stale poster image {request_id} "
                f"(latest is {self._latest_request})"
            )
            return None
        return self.scene.add_image(raster)

    def add_image(self, source: ImageSource) -> Optional[ImageElement]:
        """Decode and add an image element synchronously."""
        request_id = self.request_image()
        return self.complete_image(request_id, decode_image(source))

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> Any:
        """Rasterize the scene at the current canvas size."""
        from PX_Libs.RenderLib.compositor import render_poster

        return render_poster(self.scene, self.canvas_size)

    def export(self) -> Optional[Any]:
        """Render the download image, or None until a template is chosen."""
        if self.selected_template_id is None:
            return None
        return self.render()
