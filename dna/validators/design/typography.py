"""
Typography validator.

Rejects overused primary fonts (with Inter tolerated for body text only),
requires a modular scale ratio and asks for fallback fonts in the heading
stack.
"""

from __future__ import annotations

from typing import Optional

from ..base import BaseValidator, Rule, Severity, ValidationContext
from ..registry import register_validator


def _font_stack(context: ValidationContext, role: str) -> Optional[list]:
    stack = context.lookup(f"primitives.typography.families.{role}")
    return stack if isinstance(stack, (list, tuple)) else None


def _primary_font(context: ValidationContext, role: str) -> Optional[str]:
    stack = _font_stack(context, role)
    if not stack or not isinstance(stack[0], str):
        return None
    return stack[0]


def _check_heading_font(context: ValidationContext) -> Optional[str]:
    font = _primary_font(context, "heading")
    if font is None or context.rules.banned_font_match(font) is None:
        return None
    return f'Heading font "{font}" is banned (too common)'


def _check_body_font(context: ValidationContext) -> Optional[str]:
    font = _primary_font(context, "body")
    if font is None or context.rules.banned_font_match(font) is None:
        return None
    if font.lower() in context.rules.body_font_exceptions:
        return None
    return f'Body font "{font}" is banned (too common)'


def _check_body_font_tolerated(context: ValidationContext) -> Optional[str]:
    font = _primary_font(context, "body")
    if font is None or font.lower() not in context.rules.body_font_exceptions:
        return None
    return f'Body font "{font}" is tolerated for body text only; consider a more distinctive choice'


def _check_scale_ratio(context: ValidationContext) -> Optional[str]:
    if context.lookup("primitives.typography.scale.ratio"):
        return None
    return "Typography must define a modular scale ratio"


def _check_heading_fallbacks(context: ValidationContext) -> Optional[str]:
    stack = _font_stack(context, "heading")
    if stack is None or len(stack) >= context.rules.min_heading_stack:
        return None
    return "Heading font stack should include fallbacks"


TYPOGRAPHY_RULES: list[Rule] = [
    Rule("heading-font-banned", ceiling=1, severity=Severity.ERROR, check=_check_heading_font),
    Rule("body-font-banned", ceiling=2, severity=Severity.ERROR, check=_check_body_font),
    Rule("body-font-tolerated", ceiling=2, severity=Severity.WARNING,
         check=_check_body_font_tolerated),
    Rule("scale-ratio-missing", ceiling=1, severity=Severity.ERROR, check=_check_scale_ratio),
    Rule("heading-fallbacks", ceiling=4, severity=Severity.WARNING, check=_check_heading_fallbacks),
]


@register_validator
class TypographyValidator(BaseValidator):
    """Validates ``primitives.typography``."""

    rules = TYPOGRAPHY_RULES

    def __init__(self) -> None:
        super().__init__("typography-system", "typography", "typographySystem")
