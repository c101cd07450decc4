"""
Uniqueness validator.

Flags generic personality adjectives and requires anti-patterns plus a seeded
generative-noise configuration. The noise checks are independent: a noise
block missing both its seed and its layoutJitter yields two errors.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from ..base import BaseValidator, Rule, Severity, ValidationContext
from ..registry import register_validator


def generic_keywords(context: ValidationContext) -> list[str]:
    """Personality keywords that appear on the generic-word list."""
    personality = context.lookup("meta.personality")
    if not isinstance(personality, (list, tuple)):
        return []
    return [
        word
        for word in personality
        if isinstance(word, str) and context.rules.is_generic_word(word)
    ]


def _noise(context: ValidationContext) -> Optional[Mapping[str, Any]]:
    noise = context.lookup("generative.noise")
    return noise if isinstance(noise, Mapping) else None


def _check_generic_personality(context: ValidationContext) -> Optional[str]:
    generic = generic_keywords(context)
    if not generic:
        return None
    return f"Generic personality words detected: {', '.join(generic)}"


def _check_anti_patterns(context: ValidationContext) -> Optional[str]:
    anti_patterns = context.lookup("meta.antiPatterns")
    if isinstance(anti_patterns, (list, tuple)) and anti_patterns:
        return None
    return "Must define at least one anti-pattern to avoid"


def _check_noise(context: ValidationContext) -> Optional[str]:
    if _noise(context) is not None:
        return None
    return "Generative noise configuration is required"


def _check_noise_seed(context: ValidationContext) -> Optional[str]:
    noise = _noise(context)
    if noise is None:
        return None
    seed = noise.get("seed")
    if isinstance(seed, str) and seed:
        return None
    return "Generative noise must include a deterministic seed"


def _check_noise_jitter(context: ValidationContext) -> Optional[str]:
    noise = _noise(context)
    if noise is None or isinstance(noise.get("layoutJitter"), Mapping):
        return None
    return "Generative noise must include layoutJitter settings"


UNIQUENESS_RULES: list[Rule] = [
    Rule("generic-personality", ceiling=2, severity=Severity.WARNING,
         check=_check_generic_personality),
    Rule("anti-patterns-missing", ceiling=2, severity=Severity.ERROR, check=_check_anti_patterns),
    Rule("noise-missing", ceiling=2, severity=Severity.ERROR, check=_check_noise),
    Rule("noise-seed-missing", ceiling=2, severity=Severity.ERROR, check=_check_noise_seed),
    Rule("noise-jitter-missing", ceiling=2, severity=Severity.ERROR, check=_check_noise_jitter),
]


@register_validator
class UniquenessValidator(BaseValidator):
    """Validates ``meta`` wording and ``generative.noise``."""

    rules = UNIQUENESS_RULES

    def __init__(self) -> None:
        super().__init__("uniqueness", "uniqueness", "uniqueness")
