"""
Pluggable validator system for Design DNA documents.

Each scored category is a validator made of independent rules; the runner
folds their results into one report.

Usage:
    from dna.validators import validate_document

    report = validate_document(json.loads(path.read_text()))
    report.valid   # False if any error or any score < 3
    report.scores  # {"colorSystem": 4, ..., "technicalValidity": 4}

Writing a validator:
    from dna.validators import BaseValidator, Rule, Severity, register_validator

    @register_validator
    class MyValidator(BaseValidator):
        rules = [Rule("my-rule", ceiling=2, severity=Severity.WARNING, check=...)]

        def __init__(self):
            super().__init__("my-validator", "geometry", "mySystem")
"""

from .base import (
    MAX_SCORE,
    MIN_SCORE,
    PASSING_SCORE,
    BaseValidator,
    Rule,
    RuleOutcome,
    Severity,
    ValidationContext,
    Validator,
    ValidatorResult,
)
from .registry import CATEGORY_ORDER, discover_validators, register_validator, registry
from .runner import TECHNICAL_VALIDITY_KEY, ValidationReport, run_validators, validate_document

__all__ = [
    # Base types
    "ValidationContext",
    "ValidatorResult",
    "Rule",
    "RuleOutcome",
    "Severity",
    "MAX_SCORE",
    "MIN_SCORE",
    "PASSING_SCORE",
    # Protocols
    "Validator",
    # Base class
    "BaseValidator",
    # Registry
    "registry",
    "register_validator",
    "discover_validators",
    "CATEGORY_ORDER",
    # Runner
    "ValidationReport",
    "run_validators",
    "validate_document",
    "TECHNICAL_VALIDITY_KEY",
]
