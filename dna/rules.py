"""
Rule table loader for the Design DNA validators.

Loads the denylists and thresholds from rules.yaml (shipped next to this
module) and exposes them as an immutable RuleTables. The file can be swapped
by passing a path or by setting DNA_RULES_PATH.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import yaml

log = logging.getLogger(__name__)


# =============================================================================
# Paths
# =============================================================================

DEFAULT_RULES_PATH = Path(__file__).resolve().parent / "rules.yaml"
RULES_PATH_ENV = "DNA_RULES_PATH"


def _rules_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve the rules file: explicit path, then $DNA_RULES_PATH, then default."""
    if path is not None:
        return Path(path)
    env_path = os.environ.get(RULES_PATH_ENV)
    if env_path:
        return Path(env_path)
    return DEFAULT_RULES_PATH


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class RuleTables:
    """Denylists and thresholds consulted by the rule validators.

    String lists are stored lower-cased so that matching is case-insensitive.
    """

    banned_fonts: tuple[str, ...]
    body_font_exceptions: tuple[str, ...]
    generic_personality_words: tuple[str, ...]
    neutral_radii: tuple[str, ...]
    color_model: str = "oklch"
    reduced_motion: str = "respectSystem"
    min_text_contrast: float = 4.5
    aaa_text_contrast: float = 7.0
    contrast_drift_tolerance: float = 0.5
    min_distinct_radii: int = 2
    min_heading_stack: int = 2

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RuleTables:
        """Create RuleTables from parsed YAML.

        Missing lists default to empty; missing thresholds keep their defaults.
        """

        def _lower(key: str) -> tuple[str, ...]:
            return tuple(str(item).lower() for item in data.get(key) or [])

        thresholds = data.get("thresholds") or {}
        defaults = cls(banned_fonts=(), body_font_exceptions=(),
                       generic_personality_words=(), neutral_radii=())
        return cls(
            banned_fonts=_lower("banned_fonts"),
            body_font_exceptions=_lower("body_font_exceptions"),
            generic_personality_words=_lower("generic_personality_words"),
            neutral_radii=tuple(str(item) for item in data.get("neutral_radii") or []),
            color_model=str(data.get("color_model", defaults.color_model)),
            reduced_motion=str(data.get("reduced_motion", defaults.reduced_motion)),
            min_text_contrast=float(
                thresholds.get("min_text_contrast", defaults.min_text_contrast)
            ),
            aaa_text_contrast=float(
                thresholds.get("aaa_text_contrast", defaults.aaa_text_contrast)
            ),
            contrast_drift_tolerance=float(
                thresholds.get("contrast_drift_tolerance", defaults.contrast_drift_tolerance)
            ),
            min_distinct_radii=int(
                thresholds.get("min_distinct_radii", defaults.min_distinct_radii)
            ),
            min_heading_stack=int(
                thresholds.get("min_heading_stack", defaults.min_heading_stack)
            ),
        )

    def banned_font_match(self, font: str) -> Optional[str]:
        """Return the denylisted name contained in font, or None."""
        lowered = font.lower()
        for banned in self.banned_fonts:
            if banned in lowered:
                return banned
        return None

    def is_generic_word(self, word: str) -> bool:
        return word.lower() in self.generic_personality_words


# =============================================================================
# Loading (cached)
# =============================================================================


@lru_cache(maxsize=8)
def _load_cached(path: Path) -> RuleTables:
    log.debug("loading rule tables from %s", path)
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Rules file {path} must contain a mapping at the top level")
    return RuleTables.from_dict(data)


def load_rules(path: Optional[Union[str, Path]] = None) -> RuleTables:
    """Load and return the rule tables.

    Results are cached per resolved path for the lifetime of the process.

    Raises:
        FileNotFoundError: If the rules file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the top level is not a mapping.
    """
    return _load_cached(_rules_path(path).resolve())


def _reset_rules_cache() -> None:
    """Reset the rule table cache (for testing)."""
    _load_cached.cache_clear()
