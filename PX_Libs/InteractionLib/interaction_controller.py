"""
Interaction Controller for PicX.

Routes raw pointer events to the active mode's model. Client coordinates are
converted to container-local coordinates using the container rectangle passed
with each event, so layout changes between events are always honoured.

Photo mode:
    pointer_down/move/up drive the crop engine while a crop selection is
    active.

Poster mode:
    element_clicked selects, element_pressed starts a drag of the selected
    element, pointer_move moves it and pointer_up ends it.

At most one gesture is live at a time: switching modes ends whatever the
mode being left had in progress.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional
import logging

from PX_Libs.ImageEditingLib.image_models import CropRect, Point

logger = logging.getLogger(__name__)


class EditorMode(Enum):
    PHOTO = "photo"
    POSTER = "poster"


@dataclass(frozen=True)
class ContainerRect:
    """Position and size of an editor container in client coordinates."""
    left: float
    top: float
    width: float = 0.0
    height: float = 0.0

    def to_local(self, client_point: Point) -> Point:
        return Point(client_point.x - self.left, client_point.y - self.top)


class InteractionController:
    """Pointer-event router for the photo and poster editors."""

    def __init__(self, photo_editor: Any, poster_editor: Any,
                 mode: EditorMode = EditorMode.PHOTO) -> None:
        self.photo_editor = photo_editor
        self.poster_editor = poster_editor
        self.mode = mode

    @property
    def is_cropping(self) -> bool:
        crop = self.photo_editor.crop
        return crop.is_selecting or crop.is_pending

    @property
    def is_dragging(self) -> bool:
        return self.poster_editor.scene.selection.is_dragging

    def set_mode(self, mode: EditorMode) -> None:
        """Switch the active mode, ending the gesture of the mode being left."""
        if mode is self.mode:
            return
        if self.mode is EditorMode.PHOTO:
            self.photo_editor.cancel_crop()
        else:
            self.poster_editor.scene.end_drag()
        logger.debug(f"Editor mode {self.mode.value} -> {mode.value}")
        self.mode = mode

    # ------------------------------------------------------------------
    # Photo mode
    # ------------------------------------------------------------------

    def begin_crop(self) -> None:
        if self.mode is EditorMode.PHOTO:
            self.photo_editor.begin_crop()

    def pointer_down(self, client_point: Point, container_rect: ContainerRect) -> None:
        if self.mode is not EditorMode.PHOTO:
            return
        self.photo_editor.crop.press(container_rect.to_local(client_point))

    def pointer_move(self, client_point: Point,
                     container_rect: ContainerRect) -> Optional[Any]:
        """
        Feed a pointer move to the active mode.

        Returns:
            The updated crop rectangle in photo mode, True/False for whether
            an element moved in poster mode
        """
        local = container_rect.to_local(client_point)
        if self.mode is EditorMode.PHOTO:
            return self.photo_editor.crop.update_drag(local)
        return self.poster_editor.scene.update_drag(local)

    def pointer_up(self, client_point: Optional[Point] = None,
                   container_rect: Optional[ContainerRect] = None) -> None:
        if self.mode is EditorMode.PHOTO:
            if client_point is not None and container_rect is not None:
                self.photo_editor.crop.update_drag(container_rect.to_local(client_point))
            self.photo_editor.crop.end_drag()
        else:
            self.poster_editor.scene.end_drag()

    @property
    def crop_rect(self) -> Optional[CropRect]:
        return self.photo_editor.crop.rect

    # ------------------------------------------------------------------
    # Poster mode
    # ------------------------------------------------------------------

    def element_clicked(self, element_id: str) -> bool:
        if self.mode is not EditorMode.POSTER:
            return False
        return self.poster_editor.scene.select(element_id)

    def element_pressed(self, element_id: str) -> bool:
        """Start dragging element_id if it is the selected element."""
        if self.mode is not EditorMode.POSTER:
            return False
        return self.poster_editor.scene.begin_drag(element_id)
