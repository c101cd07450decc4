"""
Colour-space package.

OKLCH conversions, gamut clipping and WCAG contrast shared by the palette
generator and the Design DNA validators.
"""

from .contrast import AA_TEXT, AA_UI, AAA_TEXT, contrast_ratio, relative_luminance, text_grade
from .oklch import (
    OKLCH,
    clamp_to_gamut,
    coerce_color,
    in_gamut,
    normalize_hue,
    oklch_to_linear_srgb,
    to_css,
    to_hex,
)

__all__ = [
    # Types
    "OKLCH",
    # Conversions
    "oklch_to_linear_srgb",
    "clamp_to_gamut",
    "in_gamut",
    "coerce_color",
    "normalize_hue",
    # Formatting
    "to_hex",
    "to_css",
    # Contrast
    "relative_luminance",
    "contrast_ratio",
    "text_grade",
    "AA_TEXT",
    "AAA_TEXT",
    "AA_UI",
]
