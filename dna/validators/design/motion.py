"""
Motion validator: spring physics, default spring and reduced-motion policy.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..base import BaseValidator, Rule, Severity, ValidationContext
from ..registry import register_validator


def _springs(context: ValidationContext) -> Optional[Mapping[str, Any]]:
    springs = context.lookup("primitives.motion.springs")
    return springs if isinstance(springs, Mapping) else None


def _check_springs(context: ValidationContext) -> Optional[str]:
    if _springs(context):
        return None
    return "Motion must define spring physics (not just easing)"


def _check_reduced_motion(context: ValidationContext) -> Optional[str]:
    expected = context.rules.reduced_motion
    if context.lookup("primitives.motion.reducedMotion") == expected:
        return None
    return f'Consider setting reducedMotion to "{expected}" for accessibility'


def _check_default_spring(context: ValidationContext) -> Optional[str]:
    springs = _springs(context) or {}
    default = context.lookup("primitives.motion.defaultSpring")
    if isinstance(default, str) and springs.get(default):
        return None
    return f'Default spring "{default}" not found in springs'


MOTION_RULES: list[Rule] = [
    Rule("springs-missing", ceiling=1, severity=Severity.ERROR, check=_check_springs),
    Rule("reduced-motion", ceiling=3, severity=Severity.WARNING, check=_check_reduced_motion),
    Rule("default-spring-undefined", ceiling=2, severity=Severity.ERROR,
         check=_check_default_spring),
]


@register_validator
class MotionValidator(BaseValidator):
    """Validates ``primitives.motion``."""

    rules = MOTION_RULES

    def __init__(self) -> None:
        super().__init__("motion-system", "motion", "motionSystem")

    def collect_metrics(self, context: ValidationContext) -> dict[str, Any]:
        return {"spring_count": len(_springs(context) or {})}
