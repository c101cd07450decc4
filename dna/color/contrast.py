"""
WCAG contrast utilities.

Relative luminance and contrast ratio for OKLCH colours. Colours are gamut
clipped before luminance is taken, so any input yields a finite ratio.
"""

from __future__ import annotations

from .oklch import OKLCH, clamp_to_gamut, oklch_to_linear_srgb


# =============================================================================
# Thresholds
# =============================================================================

AA_TEXT = 4.5
AAA_TEXT = 7.0
AA_UI = 3.0


# =============================================================================
# Luminance / Contrast
# =============================================================================


def relative_luminance(color: OKLCH) -> float:
    """WCAG relative luminance of a colour, in [0, 1]."""
    r, g, b = clamp_to_gamut(oklch_to_linear_srgb(color))
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def contrast_ratio(first: OKLCH, second: OKLCH) -> float:
    """WCAG contrast ratio between two colours.

    Symmetric in its arguments; ranges from 1.0 (identical luminance) to 21.0
    (black on white).
    """
    lum_a = relative_luminance(first)
    lum_b = relative_luminance(second)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def text_grade(ratio: float) -> str:
    """Grade a text/background ratio: 'AAA', 'AA' or 'FAIL'."""
    if ratio >= AAA_TEXT:
        return "AAA"
    if ratio >= AA_TEXT:
        return "AA"
    return "FAIL"
