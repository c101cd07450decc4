"""
Shared utilities for the dna CLI.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

# =============================================================================
# Constants
# =============================================================================

RULE_WIDTH = 60


# =============================================================================
# Logging
# =============================================================================


class Logger:
    """Simple colored logger with --no-color support."""

    COLORS = {
        "reset": "\033[0m",
        "red": "\033[91m",
        "green": "\033[92m",
        "yellow": "\033[93m",
        "cyan": "\033[96m",
        "bold": "\033[1m",
    }

    def __init__(self, use_color: Optional[bool] = None):
        if use_color is None:
            self._use_color = sys.stdout.isatty()
        else:
            self._use_color = use_color

    def set_color(self, use_color: bool) -> None:
        """Set whether to use color output."""
        self._use_color = use_color

    def _color(self, text: str, color: str) -> str:
        if not self._use_color:
            return text
        return f"{self.COLORS.get(color, '')}{text}{self.COLORS['reset']}"

    def banner(self, *lines: str) -> None:
        """Print lines framed by full-width rules."""
        rule = self._color("=" * RULE_WIDTH, "cyan")
        print(f"\n{rule}")
        for line in lines:
            print(f"  {self._color(line, 'bold')}")
        print(f"{rule}\n")

    def header(self, message: str) -> None:
        """Print a section header."""
        print(f"\n{self._color('===', 'cyan')} {self._color(message, 'bold')} {self._color('===', 'cyan')}")

    def info(self, message: str) -> None:
        """Print an info message."""
        print(f"  {message}")

    def success(self, message: str) -> None:
        """Print a success message."""
        print(f"  {self._color('[OK]', 'green')} {message}")

    def warning(self, message: str) -> None:
        """Print a warning message."""
        print(f"  {self._color('[WARN]', 'yellow')} {message}")

    def error(self, message: str) -> None:
        """Print an error message."""
        print(f"  {self._color('[ERROR]', 'red')} {message}")


# Global logger instance
log = Logger()


def configure_logging(verbose: bool = False) -> None:
    """Route library diagnostics (logging module) to stderr.

    Only warnings are shown unless verbose is set.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


# =============================================================================
# File Utilities
# =============================================================================


def load_json(path: Path) -> Any:
    """Read and parse one JSON file.

    Raises:
        FileNotFoundError: If path does not exist.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return json.loads(path.read_text(encoding="utf-8"))


def write_text(path: Path, content: str) -> None:
    """Write a report/fragment, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content if content.endswith("\n") else content + "\n", encoding="utf-8")
