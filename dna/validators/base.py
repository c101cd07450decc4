"""
Base types and protocols for the pluggable Design DNA validator system.

Defines the contract every category validator follows, the data containers
for validation context and results, and the Rule record that category
validators are built from.

A category validator is an ordered list of independent rules. Each rule has
a predicate, a score ceiling and a severity. The category score is the lowest
ceiling among the rules that fire (4 when none do), so no rule can undo
another.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

from ..rules import RuleTables, load_rules


# =============================================================================
# Scores
# =============================================================================

MAX_SCORE = 4
MIN_SCORE = 1
PASSING_SCORE = 3


# =============================================================================
# Data Containers
# =============================================================================


@dataclass
class ValidationContext:
    """Context provided to validators for execution.

    Wraps the parsed Design DNA document (never mutated) together with the
    rule tables the validators consult.
    """

    document: Mapping[str, Any]
    """Parsed Design DNA document."""

    rules: RuleTables = field(default_factory=load_rules)
    """Denylists and thresholds (default: packaged rules.yaml)."""

    source: Optional[Path] = None
    """Path the document was read from, if any."""

    extra: dict[str, Any] = field(default_factory=dict)
    """Extension point for validator-specific context data."""

    def lookup(self, path: str, default: Any = None) -> Any:
        """Fetch a nested value by dotted path, e.g. ``"primitives.color.model"``.

        Returns default when any segment is missing or is not a mapping.
        """
        current: Any = self.document
        for key in path.split("."):
            if not isinstance(current, Mapping) or key not in current:
                return default
            current = current[key]
        return current


@dataclass
class ValidatorResult:
    """Result returned by a category validator after execution."""

    validator: str
    """Name of the validator that produced this result."""

    score_key: str
    """Key under which the score is reported (e.g. 'colorSystem')."""

    score: int
    """Category score, 1 (worst) to 4 (best)."""

    errors: list[str] = field(default_factory=list)
    """Hard failures; any error makes the whole document invalid."""

    warnings: list[str] = field(default_factory=list)
    """Soft concerns; only lower the score ceiling."""

    findings: list[str] = field(default_factory=list)
    """Informational notes explaining silent score ceilings."""

    metrics: dict[str, Any] = field(default_factory=dict)
    """Optional measurements (e.g. recomputed contrast)."""

    criteria_results: dict[str, bool] = field(default_factory=dict)
    """Per-rule pass/fail results, keyed by rule ID."""

    @property
    def passed(self) -> bool:
        """No errors and the score meets the passing floor."""
        return not self.errors and self.score >= PASSING_SCORE


# =============================================================================
# Rules
# =============================================================================


class Severity(str, Enum):
    """What a fired rule contributes besides its score ceiling."""

    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


@dataclass(frozen=True)
class RuleOutcome:
    """A fired rule: its ceiling, severity and rendered message."""

    rule_id: str
    ceiling: int
    severity: Severity
    message: str


@dataclass(frozen=True)
class Rule:
    """One independent check within a category.

    ``check`` returns a message when the rule fires and None otherwise. It
    must tolerate any document shape.
    """

    id: str
    ceiling: int
    severity: Severity
    check: Callable[[ValidationContext], Optional[str]]
    description: str = ""

    def evaluate(self, context: ValidationContext) -> Optional[RuleOutcome]:
        message = self.check(context)
        if message is None:
            return None
        return RuleOutcome(
            rule_id=self.id,
            ceiling=self.ceiling,
            severity=self.severity,
            message=message,
        )


# =============================================================================
# Protocols (Interfaces)
# =============================================================================


@runtime_checkable
class Validator(Protocol):
    """Protocol for category validators.

    Categories:
        - "color": colour model and contrast
        - "typography": font choices and modular scale
        - "motion": spring physics and reduced-motion policy
        - "geometry": radii and spacing
        - "uniqueness": personality, anti-patterns, generative noise
    """

    @property
    def name(self) -> str:
        """Unique identifier for this validator."""
        ...

    @property
    def category(self) -> str:
        """Validator category (see above)."""
        ...

    @property
    def score_key(self) -> str:
        """Report key for this validator's score."""
        ...

    def validate(self, context: ValidationContext) -> ValidatorResult:
        """Execute validation and return results."""
        ...


# =============================================================================
# Base Classes
# =============================================================================


class BaseValidator:
    """Base class for rule-list validators.

    Subclasses set ``rules`` (an ordered list of Rule) and may override
    ``collect_metrics`` to attach measurements to the result.
    """

    rules: list[Rule] = []

    def __init__(self, name: str, category: str, score_key: str) -> None:
        self._name = name
        self._category = category
        self._score_key = score_key

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> str:
        return self._category

    @property
    def score_key(self) -> str:
        return self._score_key

    def collect_metrics(self, context: ValidationContext) -> dict[str, Any]:
        """Override to report measurements alongside the score."""
        return {}

    def validate(self, context: ValidationContext) -> ValidatorResult:
        """Evaluate every rule independently and fold the outcomes."""
        outcomes: list[RuleOutcome] = []
        criteria: dict[str, bool] = {}
        for rule in self.rules:
            outcome = rule.evaluate(context)
            criteria[rule.id] = outcome is None
            if outcome is not None:
                outcomes.append(outcome)

        return self._make_result(
            outcomes,
            metrics=self.collect_metrics(context),
            criteria_results=criteria,
        )

    def _make_result(self, outcomes: list[RuleOutcome], **kwargs: Any) -> ValidatorResult:
        """Helper to build a ValidatorResult from fired rules."""
        score = min([MAX_SCORE] + [o.ceiling for o in outcomes])
        return ValidatorResult(
            validator=self.name,
            score_key=self.score_key,
            score=max(score, MIN_SCORE),
            errors=[o.message for o in outcomes if o.severity is Severity.ERROR],
            warnings=[o.message for o in outcomes if o.severity is Severity.WARNING],
            findings=[o.message for o in outcomes if o.severity is Severity.NOTE],
            **kwargs,
        )
