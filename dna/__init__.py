"""
dna - Design DNA palette generator and validator.

Generates accessible OKLCH palettes from a base hue and harmony mode, and
validates design-dna.json documents against a scored rule set.

Usage:
    python -m dna <command> [options]

Commands:
    palette     Generate an accessible OKLCH palette
    validate    Validate a design-dna.json file

Library:
    from dna import generate_palette, validate_document, contrast_ratio
"""

from .cli import __version__, main
from .color import OKLCH, contrast_ratio
from .palette import HarmonyMode, Palette, generate_palette
from .validators import ValidationReport, validate_document

__all__ = [
    "__version__",
    "main",
    "OKLCH",
    "contrast_ratio",
    "HarmonyMode",
    "Palette",
    "generate_palette",
    "ValidationReport",
    "validate_document",
]
