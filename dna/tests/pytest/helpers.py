"""
Test helpers: a known-good Design DNA document and dotted-path editing.
"""

from __future__ import annotations

import copy
from typing import Any

from dna.palette import generate_palette, to_dna_fragment


def make_document(hue: float = 220, mode: str = "split-complementary", is_dark: bool = False) -> dict[str, Any]:
    """Build a document that passes the schema and every rule with full marks.

    The colour section comes from the palette generator, so the stated
    contrast ratios match the recomputed ones.
    """
    color = to_dna_fragment(generate_palette(hue, mode, is_dark))["color"]
    return {
        "meta": {
            "projectName": "tidewater-atlas",
            "version": "1.0.0",
            "personality": ["tidal", "cartographic", "weathered"],
            "antiPatterns": ["glassmorphism cards", "purple gradients"],
        },
        "primitives": {
            "color": color,
            "typography": {
                "scale": {"base": 18, "ratio": 1.333, "ratioName": "perfectFourth"},
                "families": {
                    "heading": ["Fraunces", "Georgia", "serif"],
                    "body": ["Literata", "Georgia", "serif"],
                },
            },
            "motion": {
                "springs": {
                    "gentle": {"stiffness": 120, "damping": 14, "mass": 1},
                    "snappy": {"stiffness": 400, "damping": 30, "mass": 1},
                },
                "defaultSpring": "gentle",
                "reducedMotion": "respectSystem",
            },
            "geometry": {
                "borderRadius": {
                    "none": "0px",
                    "sm": "2px",
                    "md": "6px",
                    "lg": "12px",
                    "pill": "9999px",
                },
                "spacing": {"base": 4, "scale": "fibonacci"},
            },
        },
        "generative": {
            "noise": {
                "seed": "tidewater-0413",
                "layoutJitter": {"maxOffset": 6, "rotationRange": [-2, 2]},
            }
        },
    }


def set_path(document: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Return a deep copy of document with the dotted path set to value."""
    result = copy.deepcopy(document)
    *parents, leaf = path.split(".")
    node = result
    for key in parents:
        node = node.setdefault(key, {})
    node[leaf] = value
    return result


def drop_path(document: dict[str, Any], path: str) -> dict[str, Any]:
    """Return a deep copy of document with the dotted path removed."""
    result = copy.deepcopy(document)
    *parents, leaf = path.split(".")
    node = result
    for key in parents:
        node = node[key]
    del node[leaf]
    return result
