"""
Geometry validator: border-radius variety and the spacing base unit.

Radii of "0px" and "9999px" are neutral (square and pill) and do not count
towards variety.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..base import BaseValidator, Rule, Severity, ValidationContext
from ..registry import register_validator


def distinct_radii(context: ValidationContext) -> set[str]:
    """Distinct non-neutral border-radius values."""
    radii = context.lookup("primitives.geometry.borderRadius")
    if not isinstance(radii, Mapping):
        return set()
    neutral = set(context.rules.neutral_radii)
    return {str(value) for value in radii.values() if str(value) not in neutral}


def _check_radius_variety(context: ValidationContext) -> Optional[str]:
    found = len(distinct_radii(context))
    if found >= context.rules.min_distinct_radii:
        return None
    return f"Border radius should vary by component type (found {found} distinct values)"


def _check_spacing_base(context: ValidationContext) -> Optional[str]:
    if context.lookup("primitives.geometry.spacing.base"):
        return None
    return "Spacing must define a base unit"


GEOMETRY_RULES: list[Rule] = [
    Rule("radius-variety", ceiling=3, severity=Severity.WARNING, check=_check_radius_variety),
    Rule("spacing-base-missing", ceiling=2, severity=Severity.ERROR, check=_check_spacing_base),
]


@register_validator
class GeometryValidator(BaseValidator):
    """Validates ``primitives.geometry``."""

    rules = GEOMETRY_RULES

    def __init__(self) -> None:
        super().__init__("geometric-system", "geometry", "geometricSystem")

    def collect_metrics(self, context: ValidationContext) -> dict[str, Any]:
        return {"distinct_radii": sorted(distinct_radii(context))}
