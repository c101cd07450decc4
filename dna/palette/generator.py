"""
OKLCH palette generator.

Derives a seven-role palette (primary, secondary, accent, background, text,
muted, border) from a base hue and a colour-harmony mode, then runs a greedy
contrast-repair pass so that text and primary stay readable on the background.

The generator is deterministic: identical inputs always produce identical
palettes, and ``h`` and ``h + 360`` are treated as the same hue.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Iterator, Union

from ..color import OKLCH, contrast_ratio, normalize_hue

log = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

ROLES: tuple[str, ...] = (
    "primary",
    "secondary",
    "accent",
    "background",
    "text",
    "muted",
    "border",
)

# Contrast targets against the background
TEXT_CONTRAST_TARGET = 7.0
PRIMARY_CONTRAST_TARGET = 4.5

# Repair loop: lightness step and the open interval it may move within
REPAIR_STEP = 0.02
LIGHTNESS_FLOOR = 0.05
LIGHTNESS_CEILING = 0.95


# =============================================================================
# Harmony Modes
# =============================================================================


class HarmonyMode(str, Enum):
    """Rule for deriving secondary/accent hues from the base hue."""

    MONOCHROMATIC = "monochromatic"
    ANALOGOUS = "analogous"
    SPLIT_COMPLEMENTARY = "split-complementary"
    TRIADIC = "triadic"

    @classmethod
    def parse(cls, value: Union[str, HarmonyMode]) -> HarmonyMode:
        """Resolve a mode name, raising ValueError for anything unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown harmony mode '{value}'. "
                f"Must be one of: {', '.join(mode.value for mode in cls)}"
            ) from None


DEFAULT_MODE = HarmonyMode.SPLIT_COMPLEMENTARY


# =============================================================================
# Role Tables
# =============================================================================


@dataclass(frozen=True)
class ThemePreset:
    """Fixed lightness/chroma for the background and text roles."""

    background_l: float
    background_c: float
    text_l: float
    text_c: float = 0.02


LIGHT_PRESET = ThemePreset(background_l=0.98, background_c=0.01, text_l=0.18)
DARK_PRESET = ThemePreset(background_l=0.12, background_c=0.02, text_l=0.92)


@dataclass(frozen=True)
class RoleSpec:
    """Lightness/chroma for one role, plus hue offsets from the base hue.

    Offsets are applied one after another, each wrapped through
    normalize_hue (split-complementary goes via the complement).
    """

    light_l: float
    dark_l: float
    chroma: float
    hue_offsets: tuple[float, ...] = ()

    def build(self, base_hue: float, is_dark: bool) -> OKLCH:
        return OKLCH(
            l=self.dark_l if is_dark else self.light_l,
            c=self.chroma,
            h=_offset_hue(base_hue, self.hue_offsets),
        )


_PRIMARY = RoleSpec(light_l=0.45, dark_l=0.65, chroma=0.15)
_MUTED = RoleSpec(light_l=0.65, dark_l=0.35, chroma=0.04)
_BORDER = RoleSpec(light_l=0.85, dark_l=0.25, chroma=0.02)

MODE_ROLES: dict[HarmonyMode, dict[str, RoleSpec]] = {
    HarmonyMode.MONOCHROMATIC: {
        "primary": _PRIMARY,
        "secondary": RoleSpec(light_l=0.55, dark_l=0.55, chroma=0.10),
        "accent": RoleSpec(light_l=0.55, dark_l=0.70, chroma=0.20, hue_offsets=(180,)),
        "muted": _MUTED,
        "border": _BORDER,
    },
    HarmonyMode.ANALOGOUS: {
        "primary": _PRIMARY,
        "secondary": RoleSpec(light_l=0.50, dark_l=0.60, chroma=0.12, hue_offsets=(30,)),
        "accent": RoleSpec(light_l=0.55, dark_l=0.70, chroma=0.18, hue_offsets=(-30,)),
        "muted": RoleSpec(light_l=0.65, dark_l=0.35, chroma=0.04, hue_offsets=(15,)),
        "border": _BORDER,
    },
    HarmonyMode.SPLIT_COMPLEMENTARY: {
        "primary": _PRIMARY,
        "secondary": RoleSpec(light_l=0.52, dark_l=0.60, chroma=0.12, hue_offsets=(180, 30)),
        "accent": RoleSpec(light_l=0.58, dark_l=0.70, chroma=0.18, hue_offsets=(180, -30)),
        "muted": _MUTED,
        "border": _BORDER,
    },
    HarmonyMode.TRIADIC: {
        "primary": _PRIMARY,
        "secondary": RoleSpec(light_l=0.50, dark_l=0.60, chroma=0.12, hue_offsets=(120,)),
        "accent": RoleSpec(light_l=0.55, dark_l=0.70, chroma=0.18, hue_offsets=(240,)),
        "muted": _MUTED,
        "border": _BORDER,
    },
}

# Text follows the secondary hue in triadic mode only (kept for compatibility
# with palettes generated by earlier releases).
TEXT_HUE_OFFSETS: dict[HarmonyMode, tuple[float, ...]] = {
    HarmonyMode.TRIADIC: (120,),
}


def _offset_hue(base_hue: float, offsets: tuple[float, ...]) -> float:
    hue = normalize_hue(base_hue)
    for offset in offsets:
        hue = normalize_hue(hue + offset)
    return hue


# =============================================================================
# Palette
# =============================================================================


@dataclass(frozen=True)
class Palette:
    """The seven named colours of a generated palette."""

    primary: OKLCH
    secondary: OKLCH
    accent: OKLCH
    background: OKLCH
    text: OKLCH
    muted: OKLCH
    border: OKLCH

    def __iter__(self) -> Iterator[tuple[str, OKLCH]]:
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def __getitem__(self, role: str) -> OKLCH:
        if role not in ROLES:
            raise KeyError(role)
        return getattr(self, role)

    def to_dict(self) -> dict[str, dict[str, float]]:
        """Convert to a JSON-serializable ``{role: {l, c, h}}`` mapping."""
        return {role: color.to_dict() for role, color in self}


# =============================================================================
# Contrast Repair
# =============================================================================


def ensure_contrast(
    foreground: OKLCH,
    background: OKLCH,
    min_ratio: float = PRIMARY_CONTRAST_TARGET,
) -> OKLCH:
    """Step the foreground's lightness until it reaches min_ratio.

    Darkens on light backgrounds (L > 0.5) and lightens on dark ones, 0.02 at
    a time, stopping once the ratio is met or lightness leaves
    (LIGHTNESS_FLOOR, LIGHTNESS_CEILING). An unreachable target returns the
    best effort with lightness clamped to that interval; it never raises.
    """
    adjusted = foreground
    ratio = contrast_ratio(adjusted, background)
    direction = -1 if background.l > 0.5 else 1
    steps = 0

    while ratio < min_ratio and LIGHTNESS_FLOOR < adjusted.l < LIGHTNESS_CEILING:
        adjusted = adjusted.with_lightness(round(adjusted.l + direction * REPAIR_STEP, 10))
        ratio = contrast_ratio(adjusted, background)
        steps += 1

    if ratio < min_ratio:
        clamped = min(max(adjusted.l, LIGHTNESS_FLOOR), LIGHTNESS_CEILING)
        adjusted = adjusted.with_lightness(clamped)
        log.debug(
            "contrast target %.1f unreachable after %d steps (best %.2f at L=%.2f)",
            min_ratio,
            steps,
            contrast_ratio(adjusted, background),
            clamped,
        )
    elif steps:
        log.debug(
            "repaired contrast to %.2f in %d steps (L %.2f -> %.2f)",
            ratio,
            steps,
            foreground.l,
            adjusted.l,
        )

    return adjusted


# =============================================================================
# Generation
# =============================================================================


def generate_palette(
    base_hue: float,
    mode: Union[str, HarmonyMode] = DEFAULT_MODE,
    is_dark: bool = False,
) -> Palette:
    """Generate an accessible palette for a base hue and harmony mode.

    Args:
        base_hue: Any real hue angle; wrapped into [0, 360).
        mode: Harmony mode (enum or its string value).
        is_dark: Generate the dark-theme variant.

    Returns:
        Palette whose text meets 7:1 and primary 4.5:1 against the
        background wherever the colour space allows it.

    Raises:
        ValueError: If mode is not a known harmony mode.
    """
    harmony = HarmonyMode.parse(mode)
    hue = normalize_hue(base_hue)
    preset = DARK_PRESET if is_dark else LIGHT_PRESET

    colors = {
        role: role_spec.build(hue, is_dark) for role, role_spec in MODE_ROLES[harmony].items()
    }
    colors["background"] = OKLCH(l=preset.background_l, c=preset.background_c, h=hue)
    colors["text"] = OKLCH(
        l=preset.text_l,
        c=preset.text_c,
        h=_offset_hue(hue, TEXT_HUE_OFFSETS.get(harmony, ())),
    )

    background = colors["background"]
    colors["text"] = ensure_contrast(colors["text"], background, TEXT_CONTRAST_TARGET)
    colors["primary"] = ensure_contrast(colors["primary"], background, PRIMARY_CONTRAST_TARGET)

    log.debug("generated %s palette for hue %.1f (dark=%s)", harmony.value, hue, is_dark)
    return Palette(**colors)
