"""
Unit tests for the crop engine.

Tests the selection state machine, drag geometry in every direction and
natural-resolution rasterization of the cropped region.
"""

import pytest
from PIL import Image

from PX_Libs.ImageEditingLib.crop_engine import (
    CropEngine,
    CropState,
    crop_output_size,
    map_to_source,
    rasterize_crop,
)
from PX_Libs.ImageEditingLib.effects import EffectOp
from PX_Libs.ImageEditingLib.image_models import CropRect, LoadedImage, Point, Size


def drag(engine, start, end):
    engine.press(start)
    engine.update_drag(end)
    engine.end_drag()


@pytest.fixture
def loaded(wide_image):
    """The 1000x500 test image displayed at half size (scale 2)."""
    return LoadedImage(raster=wide_image, display_size=Size(500, 250))


class TestCropRect:
    """Tests for CropRect geometry."""

    @pytest.mark.parametrize("start, end", [
        (Point(10, 20), Point(110, 70)),
        (Point(110, 70), Point(10, 20)),
        (Point(110, 20), Point(10, 70)),
        (Point(10, 70), Point(110, 20)),
    ])
    def test_spanning_any_direction(self, start, end):
        rect = CropRect.spanning(start, end)

        assert rect == CropRect(10, 20, 100, 50)

    def test_negative_size_rejected(self):
        with pytest.raises(ValueError):
            CropRect(0, 0, -1, 10)

    def test_intersect_clips_to_bounds(self):
        rect = CropRect(450, 200, 150, 100).intersect(500, 250)

        assert rect == CropRect(450, 200, 50, 50)

    def test_intersect_outside_is_none(self):
        assert CropRect(600, 300, 10, 10).intersect(500, 250) is None

    def test_map_to_source(self):
        assert map_to_source(CropRect(10, 20, 100, 50), 2.0) == CropRect(20, 40, 200, 100)

    def test_crop_output_size_rounds(self):
        size = crop_output_size(CropRect(0, 0, 100, 50), 1000 / 860)

        assert size == Size(116, 58)


class TestCropStateMachine:
    """Tests for CropEngine state transitions."""

    def test_starts_idle(self):
        engine = CropEngine()

        assert engine.state is CropState.IDLE
        assert engine.rect is None

    def test_press_ignored_when_idle(self):
        engine = CropEngine()
        engine.press(Point(5, 5))

        assert engine.update_drag(Point(50, 50)) is None
        assert engine.rect is None

    def test_drag_makes_pending(self):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(40, 30), Point(10, 10))

        assert engine.state is CropState.PENDING
        assert engine.rect == CropRect(10, 10, 30, 20)

    def test_release_without_drag_returns_idle(self):
        engine = CropEngine()
        engine.begin_crop()
        engine.press(Point(40, 30))
        engine.end_drag()

        assert engine.state is CropState.IDLE

    def test_begin_crop_resets_pending(self):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(0, 0), Point(20, 20))

        engine.begin_crop()

        assert engine.state is CropState.SELECTING
        assert engine.rect is None
        assert engine.anchor is None

    def test_cancel(self):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(0, 0), Point(20, 20))
        engine.cancel()

        assert engine.state is CropState.IDLE
        assert engine.rect is None


class TestCropApply:
    """Tests for CropEngine.apply and rasterize_crop."""

    def test_apply_natural_size(self, loaded):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(110, 70), Point(10, 20))

        cropped = engine.apply(loaded)

        assert cropped.raster.size == (200, 100)
        assert cropped.display_size == Size(100, 50)
        assert engine.state is CropState.IDLE
        assert engine.rect is None

    def test_apply_non_integer_scale(self, wide_image):
        image = LoadedImage(raster=wide_image, display_size=Size(860, 430))
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(0, 0), Point(100, 50))

        cropped = engine.apply(image)

        assert cropped.raster.size == (round(100 * 1000 / 860), round(50 * 1000 / 860))

    def test_apply_copies_region(self, loaded):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(0, 0), Point(100, 100))

        cropped = engine.apply(loaded)

        assert cropped.raster.getpixel((100, 100)) == (255, 0, 0, 255)

    def test_apply_past_edge_keeps_full_size(self, loaded):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(450, 200), Point(600, 300))

        cropped = engine.apply(loaded)

        assert cropped.raster.size == (300, 200)
        assert cropped.display_size == Size(150, 100)
        assert cropped.raster.getpixel((50, 50)) == (0, 0, 255, 255)
        assert cropped.raster.getpixel((150, 150)) == (0, 0, 0, 0)

    def test_apply_past_top_left_edge_offsets_region(self, loaded):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(-50, -50), Point(50, 50))

        cropped = engine.apply(loaded)

        assert cropped.raster.size == (200, 200)
        assert cropped.raster.getpixel((50, 50)) == (0, 0, 0, 0)
        assert cropped.raster.getpixel((150, 150)) == (255, 0, 0, 255)

    def test_apply_outside_image_is_transparent(self, loaded):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(600, 300), Point(700, 400))

        cropped = engine.apply(loaded)

        assert cropped.raster.size == (200, 200)
        assert cropped.raster.getextrema()[3] == (0, 0)
        assert engine.state is CropState.IDLE

    def test_apply_empty_size_discards(self, loaded):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(10, 10), Point(10.1, 60))

        assert engine.apply(loaded) is None
        assert engine.state is CropState.IDLE

    def test_apply_bakes_effects(self, loaded):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(0, 0), Point(50, 50))

        cropped = engine.apply(loaded, (EffectOp("brightness", 0),))

        assert cropped.raster.getpixel((10, 10)) == (0, 0, 0, 255)

    def test_apply_without_image_is_noop(self):
        engine = CropEngine()
        engine.begin_crop()
        drag(engine, Point(0, 0), Point(50, 50))

        assert engine.apply(None) is None
        assert engine.state is CropState.PENDING

    def test_apply_without_pending_rect_is_noop(self, loaded):
        engine = CropEngine()
        engine.begin_crop()

        assert engine.apply(loaded) is None
        assert engine.state is CropState.SELECTING

    def test_rasterize_empty_region(self, wide_image):
        assert rasterize_crop(wide_image, CropRect(0, 0, 0.1, 10), 1.0) is None

    def test_rasterize_returns_rgba(self):
        raster = Image.new("RGB", (20, 20), "white")

        region = rasterize_crop(raster, CropRect(5, 5, 10, 10), 1.0)

        assert region.mode == "RGBA"
        assert region.size == (10, 10)
