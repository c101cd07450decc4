"""
Shared pytest fixtures for validator tests.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import pytest

from dna.rules import RuleTables, load_rules
from dna.validators import ValidationContext


@pytest.fixture
def make_context() -> Callable[..., ValidationContext]:
    """Build a ValidationContext around a document, with optional rules."""

    def _make(document: Any, rules: Optional[RuleTables] = None) -> ValidationContext:
        return ValidationContext(document=document, rules=rules or load_rules())

    return _make
