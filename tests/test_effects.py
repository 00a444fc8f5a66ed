"""
Tests for Effect Descriptors and the Effect Rasterizer.

Tests cover:
- EffectOp validation and CSS rendering
- Named filter table
- Colour operations on known pixels
- Blur and rotation
- Error handling
"""

import unittest
from PIL import Image

from PX_Libs.ImageEditingLib.effects import (
    EffectOp,
    NAMED_FILTER_OPS,
    apply_effects,
    color_matrix_for,
    effects_to_css,
    named_filter_ops,
)


class TestEffectOp(unittest.TestCase):
    """Test EffectOp value type."""

    def test_unknown_operation_rejected(self):
        """Test that unknown operation names raise ValueError."""
        with self.assertRaises(ValueError):
            EffectOp("posterize", 10)

    def test_units(self):
        """Test operation units."""
        self.assertEqual(EffectOp("brightness", 100).unit, "%")
        self.assertEqual(EffectOp("hue-rotate", 30).unit, "deg")
        self.assertEqual(EffectOp("blur", 2).unit, "px")
        self.assertEqual(EffectOp("rotate", 90).unit, "deg")

    def test_css_rendering(self):
        """Test CSS rendering of single ops and descriptors."""
        self.assertEqual(EffectOp("hue-rotate", -30).css(), "hue-rotate(-30deg)")
        self.assertEqual(EffectOp("blur", 2.5).css(), "blur(2.5px)")
        self.assertEqual(
            effects_to_css(named_filter_ops("vintage")),
            "sepia(50%) hue-rotate(-30deg) saturate(140%)",
        )


class TestNamedFilters(unittest.TestCase):
    """Test the named filter table."""

    def test_all_filters_present(self):
        """Test the eight named filters."""
        self.assertEqual(
            set(NAMED_FILTER_OPS),
            {"grayscale", "sepia", "blur", "sharpen", "vintage", "cool", "warm", "dramatic"},
        )

    def test_filter_compositions(self):
        """Test each filter's exact operations."""
        self.assertEqual(named_filter_ops("grayscale"), (EffectOp("grayscale", 100),))
        self.assertEqual(named_filter_ops("sepia"), (EffectOp("sepia", 100),))
        self.assertEqual(named_filter_ops("blur"), (EffectOp("blur", 2),))
        self.assertEqual(
            named_filter_ops("sharpen"),
            (EffectOp("contrast", 150), EffectOp("brightness", 150)),
        )
        self.assertEqual(named_filter_ops("cool"), (EffectOp("hue-rotate", 180),))
        self.assertEqual(
            named_filter_ops("warm"),
            (EffectOp("hue-rotate", -30), EffectOp("saturate", 150)),
        )
        self.assertEqual(
            named_filter_ops("dramatic"),
            (EffectOp("contrast", 150), EffectOp("brightness", 90), EffectOp("saturate", 150)),
        )

    def test_none_has_no_ops(self):
        """Test that no filter contributes nothing."""
        self.assertEqual(named_filter_ops(None), ())

    def test_unknown_filter_raises(self):
        """Test unknown filter name."""
        with self.assertRaises(ValueError):
            named_filter_ops("posterize")


class TestColorOperations(unittest.TestCase):
    """Test colour operations on known pixels."""

    def setUp(self):
        """Create test images."""
        self.gray = Image.new("RGBA", (8, 8), (100, 100, 100, 255))
        self.red = Image.new("RGBA", (8, 8), (255, 0, 0, 255))
        self.white = Image.new("RGBA", (8, 8), (255, 255, 255, 255))

    def test_brightness_scales_channels(self):
        """Test brightness 150% on gray."""
        result = apply_effects(self.gray, [EffectOp("brightness", 150)])

        self.assertEqual(result.getpixel((4, 4)), (150, 150, 150, 255))

    def test_brightness_zero_is_black(self):
        """Test brightness 0% keeps alpha."""
        result = apply_effects(self.gray, [EffectOp("brightness", 0)])

        self.assertEqual(result.getpixel((0, 0)), (0, 0, 0, 255))

    def test_contrast_zero_is_mid_gray(self):
        """Test contrast 0% collapses to mid-gray."""
        result = apply_effects(self.red, [EffectOp("contrast", 0)])
        r, g, b, a = result.getpixel((0, 0))

        self.assertIn(r, (127, 128))
        self.assertEqual(r, g)
        self.assertEqual(g, b)
        self.assertEqual(a, 255)

    def test_identity_descriptor(self):
        """Test the default slider descriptor leaves pixels unchanged."""
        ops = [
            EffectOp("brightness", 100),
            EffectOp("contrast", 100),
            EffectOp("saturate", 100),
            EffectOp("rotate", 0),
        ]
        result = apply_effects(self.red, ops)

        for actual, expected in zip(result.getpixel((3, 3)), (255, 0, 0, 255)):
            self.assertLessEqual(abs(actual - expected), 1)

    def test_grayscale_equalises_channels(self):
        """Test full grayscale on pure red."""
        result = apply_effects(self.red, [EffectOp("grayscale", 100)])
        r, g, b, _ = result.getpixel((0, 0))

        self.assertEqual(r, g)
        self.assertEqual(g, b)
        self.assertLessEqual(abs(r - 54), 1)

    def test_sepia_on_white(self):
        """Test full sepia tints white toward yellow."""
        result = apply_effects(self.white, [EffectOp("sepia", 100)])
        r, g, b, _ = result.getpixel((0, 0))

        self.assertEqual((r, g), (255, 255))
        self.assertLessEqual(abs(b - 239), 1)

    def test_hue_rotate_keeps_gray(self):
        """Test hue rotation leaves neutral pixels neutral."""
        result = apply_effects(self.gray, [EffectOp("hue-rotate", 180)])

        for channel in result.getpixel((0, 0))[:3]:
            self.assertLessEqual(abs(channel - 100), 1)

    def test_saturate_zero_matches_grayscale(self):
        """Test saturate 0% and grayscale 100% share a matrix."""
        saturate = color_matrix_for(EffectOp("saturate", 0))
        grayscale = color_matrix_for(EffectOp("grayscale", 100))

        self.assertTrue((abs(saturate - grayscale) < 1e-6).all())

    def test_spatial_ops_have_no_matrix(self):
        """Test blur and rotate are not matrix operations."""
        self.assertIsNone(color_matrix_for(EffectOp("blur", 2)))
        self.assertIsNone(color_matrix_for(EffectOp("rotate", 90)))

    def test_alpha_preserved(self):
        """Test colour ops never touch alpha."""
        translucent = Image.new("RGBA", (4, 4), (200, 100, 50, 80))
        result = apply_effects(translucent, [EffectOp("sepia", 100), EffectOp("brightness", 50)])

        self.assertEqual(result.getpixel((0, 0))[3], 80)


class TestSpatialOperations(unittest.TestCase):
    """Test blur and rotation."""

    def setUp(self):
        """Create a square image: left half red, right half blue."""
        self.image = Image.new("RGBA", (20, 20), (255, 0, 0, 255))
        self.image.paste((0, 0, 255, 255), (10, 0, 20, 20))

    def test_blur_keeps_size(self):
        """Test blur output size."""
        result = apply_effects(self.image, [EffectOp("blur", 2)])

        self.assertEqual(result.size, self.image.size)
        self.assertEqual(result.mode, "RGBA")

    def test_blur_softens_edge(self):
        """Test blur mixes colours across the edge."""
        result = apply_effects(self.image, [EffectOp("blur", 2)])
        r, _, b, _ = result.getpixel((10, 10))

        self.assertGreater(r, 0)
        self.assertGreater(b, 0)

    def test_zero_blur_is_noop(self):
        """Test blur radius 0."""
        result = apply_effects(self.image, [EffectOp("blur", 0)])

        self.assertEqual(list(result.getdata()), list(self.image.getdata()))

    def test_rotate_clockwise(self):
        """Test rotate 90 turns the left half to the top."""
        result = apply_effects(self.image, [EffectOp("rotate", 90)])

        self.assertEqual(result.size, (20, 20))
        self.assertEqual(result.getpixel((10, 3)), (255, 0, 0, 255))
        self.assertEqual(result.getpixel((10, 16)), (0, 0, 255, 255))

    def test_full_turn_is_noop(self):
        """Test rotate 360 leaves the image unchanged."""
        result = apply_effects(self.image, [EffectOp("rotate", 360)])

        self.assertEqual(list(result.getdata()), list(self.image.getdata()))

    def test_rotate_keeps_canvas_size(self):
        """Test non-square rotation does not expand the canvas."""
        wide = Image.new("RGBA", (40, 10), (0, 255, 0, 255))
        result = apply_effects(wide, [EffectOp("rotate", 45)])

        self.assertEqual(result.size, (40, 10))


class TestApplyEffectsErrors(unittest.TestCase):
    """Test error handling."""

    def test_non_image_rejected(self):
        """Test TypeError for non-image input."""
        with self.assertRaises(TypeError):
            apply_effects("not an image", [])

    def test_rgb_input_converted(self):
        """Test RGB input returns RGBA."""
        result = apply_effects(Image.new("RGB", (5, 5), "white"), [])

        self.assertEqual(result.mode, "RGBA")


if __name__ == "__main__":
    unittest.main()
