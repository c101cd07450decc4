"""
Palette renderings: preview table, Design DNA JSON fragment, CSS variables.
"""

from __future__ import annotations

from typing import Any

from ..color import AA_UI, OKLCH, contrast_ratio, text_grade, to_css, to_hex
from .generator import Palette


def contrast_ratios(palette: Palette) -> dict[str, float]:
    """Unrounded contrast of text, primary and accent against the background."""
    background = palette.background
    return {
        "textOnBackground": contrast_ratio(palette.text, background),
        "primaryOnBackground": contrast_ratio(palette.primary, background),
        "accentOnBackground": contrast_ratio(palette.accent, background),
    }


def _rounded(color: OKLCH) -> dict[str, float]:
    return {"l": round(color.l, 3), "c": round(color.c, 3), "h": round(color.h, 1)}


def to_dna_fragment(palette: Palette) -> dict[str, Any]:
    """Build the ``color`` section of a Design DNA document.

    Channels are rounded (l/c to 3 places, h to 1) and ratios to 2 places,
    matching what authors paste into ``primitives.color``.
    """
    return {
        "color": {
            "model": "oklch",
            "palette": {role: _rounded(color) for role, color in palette},
            "contrastRatios": {
                name: round(value, 2) for name, value in contrast_ratios(palette).items()
            },
        }
    }


def to_css_variables(palette: Palette) -> str:
    """Render as a ``:root`` block of ``--color-<role>`` custom properties."""
    lines = [":root {"]
    for role, color in palette:
        lines.append(f"  --color-{role}: {to_hex(color)}; /* {to_css(color)} */")
    lines.append("}")
    return "\n".join(lines)


def preview_rows(palette: Palette) -> list[str]:
    """One line per role: name, hex, oklch() and contrast for text/primary."""
    rows = []
    for role, color in palette:
        suffix = ""
        if role in ("text", "primary"):
            suffix = f" (contrast: {contrast_ratio(color, palette.background):.2f}:1)"
        rows.append(f"{role:<12} {to_hex(color)}  {to_css(color)}{suffix}")
    return rows


def contrast_summary(palette: Palette) -> list[tuple[str, float, str]]:
    """(label, ratio, grade) for the three ratios shown under a preview."""
    ratios = contrast_ratios(palette)
    text = ratios["textOnBackground"]
    primary = ratios["primaryOnBackground"]
    accent = ratios["accentOnBackground"]
    return [
        ("Text on Background", text, text_grade(text)),
        ("Primary on Background", primary, "AA" if primary >= 4.5 else "FAIL"),
        ("Accent on Background", accent, "UI" if accent >= AA_UI else "FAIL"),
    ]
