"""
``dna palette``: generate and render an OKLCH palette.
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from .palette import (
    contrast_summary,
    generate_palette,
    preview_rows,
    to_css_variables,
    to_dna_fragment,
)
from .utils import log, write_text


def cmd_palette(args: argparse.Namespace) -> int:
    """Generate a palette and print (or write) the requested rendering."""
    palette = generate_palette(args.hue, args.mode, args.dark)

    if args.json:
        content = json.dumps(to_dna_fragment(palette), indent=2)
    elif args.css:
        content = to_css_variables(palette)
    else:
        content = None

    if args.output:
        path = Path(args.output)
        write_text(path, content if content is not None else "\n".join(preview_rows(palette)))
        log.success(f"Wrote palette to {path}")
        return 0

    if content is not None:
        # Raw output so it can be piped into a file or another tool
        print(content)
        return 0

    theme = "Dark" if args.dark else "Light"
    log.banner("OKLCH Palette Generator", f"Hue: {args.hue:g}° | Mode: {args.mode} | Theme: {theme}")

    for row in preview_rows(palette):
        log.info(row)

    log.header("Contrast Ratios")
    for label, ratio, grade in contrast_summary(palette):
        line = f"{ratio:.2f}:1 {grade}"
        if grade == "FAIL":
            log.error(f"{label + ':':<24} {line}")
        else:
            log.success(f"{label + ':':<24} {line}")

    return 0
