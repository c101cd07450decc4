"""
Palette generation package.

Usage:
    from dna.palette import generate_palette, HarmonyMode

    palette = generate_palette(220, HarmonyMode.ANALOGOUS, is_dark=True)
    palette.text  # OKLCH(l=0.92, c=0.02, h=220.0)
"""

from .generator import (
    DEFAULT_MODE,
    ROLES,
    HarmonyMode,
    Palette,
    ensure_contrast,
    generate_palette,
)
from .render import (
    contrast_ratios,
    contrast_summary,
    preview_rows,
    to_css_variables,
    to_dna_fragment,
)

__all__ = [
    "HarmonyMode",
    "DEFAULT_MODE",
    "ROLES",
    "Palette",
    "generate_palette",
    "ensure_contrast",
    "contrast_ratios",
    "contrast_summary",
    "preview_rows",
    "to_css_variables",
    "to_dna_fragment",
]
