"""
Colour system validator.

Checks the declared colour model and independently recomputes the
text-on-background contrast from the palette, cross-checking it against the
ratio the author stated in ``contrastRatios``.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ...color import coerce_color, contrast_ratio
from ..base import BaseValidator, Rule, Severity, ValidationContext
from ..registry import register_validator


# =============================================================================
# Helpers
# =============================================================================


def text_contrast(context: ValidationContext) -> Optional[float]:
    """Recomputed text/background contrast, or None if either colour is absent."""
    palette = context.lookup("primitives.color.palette")
    if not isinstance(palette, Mapping):
        return None
    text = coerce_color(palette.get("text"))
    background = coerce_color(palette.get("background"))
    if text is None or background is None:
        return None
    return contrast_ratio(text, background)


def _stated_contrast(context: ValidationContext) -> Optional[float]:
    stated = context.lookup("primitives.color.contrastRatios.textOnBackground")
    if isinstance(stated, bool) or not isinstance(stated, (int, float)):
        return None
    return float(stated)


# =============================================================================
# Rules
# =============================================================================


def _check_model(context: ValidationContext) -> Optional[str]:
    model = context.lookup("primitives.color.model")
    expected = context.rules.color_model
    if model == expected:
        return None
    found = "missing" if model is None else f'found "{model}"'
    return f'Color model must be "{expected}" ({found})'


def _check_contrast_floor(context: ValidationContext) -> Optional[str]:
    ratio = text_contrast(context)
    floor = context.rules.min_text_contrast
    if ratio is None or ratio >= floor:
        return None
    return f"Text contrast ratio ({ratio:.2f}) fails WCAG AA (needs {floor}+)"


def _check_contrast_aaa(context: ValidationContext) -> Optional[str]:
    ratio = text_contrast(context)
    rules = context.rules
    if ratio is None or not (rules.min_text_contrast <= ratio < rules.aaa_text_contrast):
        return None
    return f"Text contrast ratio ({ratio:.2f}) meets AA but not AAA ({rules.aaa_text_contrast}+)"


def _check_stated_drift(context: ValidationContext) -> Optional[str]:
    ratio = text_contrast(context)
    stated = _stated_contrast(context)
    if ratio is None or stated is None:
        return None
    if abs(ratio - stated) <= context.rules.contrast_drift_tolerance:
        return None
    return f"Stated contrast ({stated:g}) differs from calculated ({ratio:.2f})"


COLOR_RULES: list[Rule] = [
    Rule("color-model", ceiling=1, severity=Severity.ERROR, check=_check_model,
         description="Colour model must be OKLCH"),
    Rule("text-contrast-floor", ceiling=1, severity=Severity.ERROR, check=_check_contrast_floor,
         description="Recomputed text/background contrast must reach WCAG AA"),
    Rule("text-contrast-aaa", ceiling=3, severity=Severity.NOTE, check=_check_contrast_aaa,
         description="Full marks require WCAG AAA text contrast"),
    Rule("stated-contrast-drift", ceiling=4, severity=Severity.WARNING, check=_check_stated_drift,
         description="Stated textOnBackground should match the recomputed ratio"),
]


# =============================================================================
# Validator
# =============================================================================


@register_validator
class ColorSystemValidator(BaseValidator):
    """Validates ``primitives.color``.

    Recorded metrics:
        text_contrast: float | None - recomputed text/background ratio
        stated_contrast: float | None - author-stated ratio
    """

    rules = COLOR_RULES

    def __init__(self) -> None:
        super().__init__("color-system", "color", "colorSystem")

    def collect_metrics(self, context: ValidationContext) -> dict[str, Any]:
        return {
            "text_contrast": text_contrast(context),
            "stated_contrast": _stated_contrast(context),
        }
