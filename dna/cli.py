"""
Main CLI for the dna tool.

Provides one entry point for the palette generator and the Design DNA
validator.
"""

from __future__ import annotations

import argparse
import sys

from .palette import DEFAULT_MODE, HarmonyMode
from .utils import configure_logging, log


# =============================================================================
# Version
# =============================================================================

__version__ = "0.1.0"


# =============================================================================
# Argument Parsing
# =============================================================================


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser with all subcommands."""

    parser = argparse.ArgumentParser(
        prog="dna",
        description="Design DNA palette generator and validator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  palette     Generate an accessible OKLCH palette
  validate    Validate a design-dna.json file

Examples:
  dna palette --hue 45 --mode analogous
  dna palette --hue 180 --mode triadic --dark --json
  dna validate design-dna.json
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show diagnostic logging on stderr",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )

    # --- palette ---
    palette_parser = subparsers.add_parser(
        "palette",
        help="Generate an accessible OKLCH palette",
        description="Generate a seven-role OKLCH palette from a base hue and harmony mode.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dna palette                                # Hue 220, split-complementary, light
  dna palette --hue 45 --mode monochromatic --dark
  dna palette --hue 180 --json               # Design DNA colour fragment
  dna palette --css --output tokens.css      # CSS custom properties
        """,
    )
    palette_parser.add_argument(
        "--hue",
        type=float,
        default=220.0,
        help="Base hue in degrees; wrapped into 0-360 (default: 220)",
    )
    palette_parser.add_argument(
        "--mode", "-m",
        choices=[mode.value for mode in HarmonyMode],
        default=DEFAULT_MODE.value,
        help=f"Harmony mode (default: {DEFAULT_MODE.value})",
    )
    palette_parser.add_argument(
        "--dark", "-d",
        action="store_true",
        help="Generate the dark-theme palette",
    )
    output_group = palette_parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--json",
        action="store_true",
        help="Output as a Design DNA JSON fragment",
    )
    output_group.add_argument(
        "--css",
        action="store_true",
        help="Output as CSS variables",
    )
    palette_parser.add_argument(
        "--output", "-o",
        help="Write the JSON/CSS output to this file instead of stdout",
    )

    # --- validate ---
    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a design-dna.json file",
        description="Check a Design DNA document's structure, then score it against the rule set.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  dna validate design-dna.json               # Schema check + scored report
  dna validate design-dna.json --no-schema   # Skip the structural check
  dna validate design-dna.json --json        # Machine-readable report
  dna validate design-dna.json --rules my-rules.yaml
        """,
    )
    validate_parser.add_argument(
        "path",
        help="Path to the design-dna.json file",
    )
    validate_parser.add_argument(
        "--no-schema",
        action="store_true",
        help="Skip the structural schema check",
    )
    validate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    validate_parser.add_argument(
        "--rules",
        help="Rule tables YAML to use instead of the packaged rules.yaml",
    )
    validate_parser.add_argument(
        "--output", "-o",
        help="Also write the JSON report to this file",
    )

    return parser


# =============================================================================
# Command Dispatch
# =============================================================================


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.no_color:
        log.set_color(False)

    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "palette":
            from .palette_cmd import cmd_palette
            return cmd_palette(args)

        elif args.command == "validate":
            from .validate_cmd import cmd_validate
            return cmd_validate(args)

        else:
            log.error(f"Unknown command: {args.command}")
            return 1

    except KeyboardInterrupt:
        log.warning("\nInterrupted")
        return 130
    except Exception as e:
        log.error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
