"""
Validator runner: runs every category validator against one document and
folds the results into a single report.

A document is valid only if there are no errors at all AND every category
(including technicalValidity) scores at least 3. A single weak category
fails the whole document.
"""

from __future__ import annotations

import logging
import traceback
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from ..rules import RuleTables, load_rules
from .base import MAX_SCORE, MIN_SCORE, PASSING_SCORE, ValidationContext, ValidatorResult
from .registry import discover_validators, registry

log = logging.getLogger(__name__)

TECHNICAL_VALIDITY_KEY = "technicalValidity"
TECHNICAL_VALIDITY_DEGRADED = 2


# =============================================================================
# Result Type
# =============================================================================


@dataclass
class ValidationReport:
    """Aggregated result from running all category validators."""

    valid: bool
    """No errors and every score >= 3."""

    errors: list[str] = field(default_factory=list)
    """Hard failures, in category order."""

    warnings: list[str] = field(default_factory=list)
    """Soft concerns, in category order."""

    scores: dict[str, int] = field(default_factory=dict)
    """Score key -> 1..4, ending with technicalValidity."""

    results: dict[str, ValidatorResult] = field(default_factory=dict)
    """Score key -> full ValidatorResult for each category validator."""

    @property
    def min_score(self) -> int:
        return min(self.scores.values()) if self.scores else MIN_SCORE

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON report shape (valid, errors, warnings, scores)."""
        return {
            "valid": self.valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "scores": dict(self.scores),
        }


# =============================================================================
# Running
# =============================================================================


def _run_one(validator: Any, context: ValidationContext) -> ValidatorResult:
    """Run a validator, converting an unexpected exception into an error result."""
    try:
        return validator.validate(context)
    except Exception as e:
        log.debug("validator %s raised:\n%s", validator.name, traceback.format_exc())
        return ValidatorResult(
            validator=validator.name,
            score_key=validator.score_key,
            score=MIN_SCORE,
            errors=[f"Validator '{validator.name}' crashed: {e}"],
        )


def run_validators(context: ValidationContext) -> ValidationReport:
    """Run every registered category validator against the context."""
    discover_validators()

    results: dict[str, ValidatorResult] = {}
    errors: list[str] = []
    warnings: list[str] = []
    scores: dict[str, int] = {}

    for validator in registry.list_all():
        result = _run_one(validator, context)
        log.debug("%s: %d/%d", result.score_key, result.score, MAX_SCORE)
        results[result.score_key] = result
        scores[result.score_key] = result.score
        errors.extend(result.errors)
        warnings.extend(result.warnings)

    scores[TECHNICAL_VALIDITY_KEY] = MAX_SCORE if not errors else TECHNICAL_VALIDITY_DEGRADED

    valid = not errors and min(scores.values()) >= PASSING_SCORE
    return ValidationReport(
        valid=valid,
        errors=errors,
        warnings=warnings,
        scores=scores,
        results=results,
    )


def validate_document(
    document: Mapping[str, Any],
    rules: Optional[RuleTables] = None,
    source: Optional[Path] = None,
) -> ValidationReport:
    """Validate a parsed Design DNA document.

    Args:
        document: Parsed JSON mapping; not modified.
        rules: Rule tables to use (default: packaged rules.yaml).
        source: Optional path the document came from, for reporting.

    Returns:
        ValidationReport with valid/errors/warnings/scores.
    """
    context = ValidationContext(
        document=document,
        rules=rules if rules is not None else load_rules(),
        source=source,
    )
    return run_validators(context)
