"""
Unit tests for the adjustment model.

Tests slider clamping, named filters and effect descriptor ordering.
"""

import pytest

from PX_Libs.ImageEditingLib.adjustments import Adjustments, clamp_adjustment
from PX_Libs.ImageEditingLib.effects import NAMED_FILTER_OPS, EffectOp
from PX_Libs.constants import NAMED_FILTERS


class TestClampAdjustment:
    """Tests for clamp_adjustment function."""

    def test_in_range_value_unchanged(self):
        assert clamp_adjustment("brightness", 150) == 150

    def test_above_range_clamped(self):
        assert clamp_adjustment("contrast", 250) == 200
        assert clamp_adjustment("rotation", 400) == 360

    def test_below_range_clamped(self):
        assert clamp_adjustment("saturation", -5) == 0

    def test_float_rounded(self):
        assert clamp_adjustment("brightness", 150.6) == 151

    def test_numeric_string_accepted(self):
        assert clamp_adjustment("rotation", "90") == 90

    def test_infinity_clamped_to_range_ends(self):
        assert clamp_adjustment("brightness", float("inf")) == 200
        assert clamp_adjustment("rotation", float("-inf")) == 0

    def test_nan_rejected(self):
        with pytest.raises(ValueError):
            clamp_adjustment("contrast", float("nan"))

    def test_unknown_field_raises(self):
        with pytest.raises(ValueError, match="Unknown adjustment"):
            clamp_adjustment("hue", 10)


class TestAdjustments:
    """Tests for the Adjustments dataclass."""

    def test_defaults(self):
        adjustments = Adjustments()

        assert adjustments.brightness == 100
        assert adjustments.contrast == 100
        assert adjustments.saturation == 100
        assert adjustments.rotation == 0
        assert adjustments.filter is None
        assert adjustments.is_default()

    def test_constructor_clamps(self):
        adjustments = Adjustments(brightness=500, rotation=-20)

        assert adjustments.brightness == 200
        assert adjustments.rotation == 0

    def test_constructor_rejects_unknown_filter(self):
        with pytest.raises(ValueError):
            Adjustments(filter="posterize")

    def test_set_adjustment_returns_stored_value(self):
        adjustments = Adjustments()

        assert adjustments.set_adjustment("brightness", 300) == 200
        assert adjustments.brightness == 200

    def test_set_adjustment_infinite_value(self):
        adjustments = Adjustments()

        assert adjustments.set_adjustment("brightness", float("inf")) == 200
        assert adjustments.set_adjustment("saturation", float("-inf")) == 0

    def test_apply_named_filter(self):
        adjustments = Adjustments()
        adjustments.apply_named_filter("sepia")

        assert adjustments.filter == "sepia"

    def test_apply_none_clears_filter(self):
        adjustments = Adjustments(filter="cool")
        adjustments.apply_named_filter(None)

        assert adjustments.filter is None

    def test_apply_unknown_filter_raises(self):
        adjustments = Adjustments()

        with pytest.raises(ValueError, match="Unknown filter"):
            adjustments.apply_named_filter("posterize")
        assert adjustments.filter is None

    def test_reset(self):
        adjustments = Adjustments(brightness=20, contrast=30, saturation=40, rotation=90, filter="warm")
        adjustments.reset()

        assert adjustments.is_default()

    def test_to_dict(self):
        data = Adjustments(brightness=120, filter="blur").to_dict()

        assert data == {
            "brightness": 120,
            "contrast": 100,
            "saturation": 100,
            "rotation": 0,
            "filter": "blur",
        }


class TestEffectDescriptor:
    """Tests for derive_effect_descriptor."""

    def test_numeric_terms_in_fixed_order(self):
        adjustments = Adjustments(brightness=150, contrast=80, saturation=0, rotation=45)

        descriptor = adjustments.derive_effect_descriptor()

        assert descriptor == (
            EffectOp("brightness", 150),
            EffectOp("contrast", 80),
            EffectOp("saturate", 0),
            EffectOp("rotate", 45),
        )

    @pytest.mark.parametrize("name", NAMED_FILTERS)
    def test_named_filter_terms_appended_last(self, name):
        adjustments = Adjustments(brightness=150, filter=name)

        descriptor = adjustments.derive_effect_descriptor()

        assert descriptor[0] == EffectOp("brightness", 150)
        assert descriptor[3].name == "rotate"
        assert descriptor[4:] == NAMED_FILTER_OPS[name]

    def test_brightness_then_sepia(self):
        adjustments = Adjustments()
        adjustments.set_adjustment("brightness", 150)
        adjustments.apply_named_filter("sepia")

        names = [op.name for op in adjustments.derive_effect_descriptor()]

        assert names == ["brightness", "contrast", "saturate", "rotate", "sepia"]
