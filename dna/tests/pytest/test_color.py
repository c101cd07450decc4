"""
Tests for OKLCH conversions and WCAG contrast.
"""

from __future__ import annotations

import math

import pytest

from dna.color import (
    OKLCH,
    coerce_color,
    contrast_ratio,
    in_gamut,
    normalize_hue,
    relative_luminance,
    text_grade,
    to_css,
    to_hex,
)

WHITE = OKLCH(1.0, 0.0, 0.0)
BLACK = OKLCH(0.0, 0.0, 0.0)


@pytest.mark.evergreen
class TestNormalizeHue:
    """Hue wrapping."""

    @pytest.mark.parametrize(
        "hue,expected",
        [
            (0, 0.0),
            (220, 220.0),
            (360, 0.0),
            (-30, 330.0),
            (725.5, 5.5),
        ],
    )
    def test_wraps_into_range(self, hue, expected):
        """Any angle lands in [0, 360)."""
        assert normalize_hue(hue) == pytest.approx(expected)

    @pytest.mark.parametrize("hue", [0.1, 12.3, 45.0, 199.9, 359.9])
    def test_full_turn_is_identity(self, hue):
        """h and h + 360 normalize to exactly the same value."""
        assert normalize_hue(hue) == normalize_hue(hue + 360)

    def test_never_returns_360(self):
        """Values a hair under 360 do not round up out of range."""
        assert 0.0 <= normalize_hue(-1e-12) < 360.0


@pytest.mark.evergreen
class TestContrastRatio:
    """WCAG contrast."""

    def test_black_on_white_is_21(self):
        assert contrast_ratio(BLACK, WHITE) == pytest.approx(21.0, rel=1e-4)

    def test_identical_colours_is_1(self):
        color = OKLCH(0.6, 0.1, 140)
        assert contrast_ratio(color, color) == pytest.approx(1.0)

    @pytest.mark.parametrize(
        "a,b",
        [
            (OKLCH(0.2, 0.05, 30), OKLCH(0.9, 0.02, 200)),
            (OKLCH(0.5, 0.2, 300), OKLCH(0.55, 0.1, 120)),
            (WHITE, OKLCH(0.45, 0.15, 220)),
        ],
    )
    def test_symmetric_and_at_least_one(self, a, b):
        """Order of arguments does not matter; ratio is never below 1."""
        assert contrast_ratio(a, b) == contrast_ratio(b, a)
        assert contrast_ratio(a, b) >= 1.0

    def test_out_of_gamut_is_finite(self):
        """Colours outside sRGB are clipped, never producing NaN."""
        vivid = OKLCH(0.7, 0.4, 145)
        assert not in_gamut(vivid)
        ratio = contrast_ratio(vivid, BLACK)
        assert math.isfinite(ratio)
        assert 1.0 <= ratio <= 21.0

    @pytest.mark.parametrize(
        "color",
        [
            OKLCH(float("nan"), 0.1, 10),
            OKLCH(0.5, float("inf"), 10),
            OKLCH(0.5, 0.1, float("-inf")),
            OKLCH(2.0, -1.0, 10),
        ],
    )
    def test_degenerate_input_is_finite(self, color):
        """Non-finite or out-of-range channels still yield a finite ratio."""
        ratio = contrast_ratio(color, WHITE)
        assert math.isfinite(ratio)
        assert 1.0 <= ratio <= 21.0 + 1e-6

    def test_neutral_luminance_is_lightness_cubed(self):
        """For gray, OKLab lightness cubed is the relative luminance."""
        assert relative_luminance(OKLCH(0.5, 0.0, 0.0)) == pytest.approx(0.125, abs=1e-4)


@pytest.mark.evergreen
class TestTextGrade:
    @pytest.mark.parametrize(
        "ratio,grade",
        [(21.0, "AAA"), (7.0, "AAA"), (6.99, "AA"), (4.5, "AA"), (4.49, "FAIL"), (1.0, "FAIL")],
    )
    def test_thresholds(self, ratio, grade):
        assert text_grade(ratio) == grade


@pytest.mark.evergreen
class TestFormatting:
    def test_hex_extremes(self):
        assert to_hex(WHITE) == "#ffffff"
        assert to_hex(BLACK) == "#000000"

    def test_hex_shape(self):
        value = to_hex(OKLCH(0.45, 0.15, 220))
        assert len(value) == 7
        assert value.startswith("#")
        int(value[1:], 16)

    def test_css(self):
        assert to_css(OKLCH(0.45, 0.15, 220)) == "oklch(45.0% 0.150 220.0)"


@pytest.mark.evergreen
class TestCoerceColor:
    def test_mapping(self):
        assert coerce_color({"l": 0.5, "c": 0.1, "h": 20}) == OKLCH(0.5, 0.1, 20.0)

    def test_missing_channels_default_to_zero(self):
        assert coerce_color({"l": 0.5}) == OKLCH(0.5, 0.0, 0.0)

    @pytest.mark.parametrize("value", [None, "red", 12, [0.5, 0.1, 20], {"l": "bright"}, {"l": [1]}])
    def test_unusable_values(self, value):
        assert coerce_color(value) is None

    def test_passthrough(self):
        color = OKLCH(0.3, 0.0, 0.0)
        assert coerce_color(color) is color
