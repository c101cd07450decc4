"""
Shared pytest fixtures for dna tests.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip (production tests)
  @pytest.mark.dev       - Development/WIP tests, toggle-able
  @pytest.mark.temporary - Tests with explicit discard flag
"""

from __future__ import annotations

import io
import json
from contextlib import redirect_stdout
from pathlib import Path
from typing import Any, Generator

import pytest

from dna.rules import _reset_rules_cache, load_rules, RuleTables

from .helpers import make_document


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def valid_document() -> dict[str, Any]:
    """A fresh Design DNA document that passes every check."""
    return make_document()


@pytest.fixture
def rules() -> RuleTables:
    """The packaged rule tables."""
    return load_rules()


@pytest.fixture
def clean_rules_cache() -> Generator[None, None, None]:
    """Clear the rule table cache before and after a test that swaps rules."""
    _reset_rules_cache()
    yield
    _reset_rules_cache()


@pytest.fixture
def write_document(tmp_path: Path):
    """Write a document to a temp design-dna.json and return its path."""

    def _write(document: Any, name: str = "design-dna.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        return path

    return _write


# =============================================================================
# CLI Runner
# =============================================================================


class CLIResult:
    """Result of running a CLI command."""

    def __init__(self, returncode: int, stdout: str):
        self.returncode = returncode
        self.stdout = stdout

    def __repr__(self) -> str:
        return f"CLIResult(returncode={self.returncode}, stdout={self.stdout[:100]!r}...)"


class CLIRunner:
    """Helper class to run CLI commands in-process with captured output."""

    def run(self, args: list[str]) -> CLIResult:
        """Run CLI with given args (without the 'dna' prefix)."""
        from dna.cli import main

        stdout_capture = io.StringIO()

        with redirect_stdout(stdout_capture):
            try:
                returncode = main(["--no-color", *args])
            except SystemExit as e:
                returncode = e.code if isinstance(e.code, int) else 1

        return CLIResult(
            returncode=returncode or 0,
            stdout=stdout_capture.getvalue(),
        )


@pytest.fixture
def cli_runner() -> CLIRunner:
    """Create an in-process CLI runner."""
    return CLIRunner()
