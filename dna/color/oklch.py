"""
OKLCH colour math.

Converts OKLCH (lightness, chroma, hue) colours into OKLab and linear sRGB
using Björn Ottosson's published matrices, clips results that fall outside
the displayable gamut, and formats colours for display (hex and CSS
``oklch()`` strings).

Everything here is pure and allocation-only; no state is shared between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional


# =============================================================================
# Data Structures
# =============================================================================


@dataclass(frozen=True)
class OKLCH:
    """A colour in the OKLCH space.

    Attributes:
        l: Lightness, 0 (black) to 1 (white).
        c: Chroma, 0 (gray) to roughly 0.4 (most saturated displayable).
        h: Hue angle in degrees, [0, 360).
    """

    l: float
    c: float
    h: float

    def with_lightness(self, lightness: float) -> OKLCH:
        """Return a copy of this colour with a different lightness."""
        return replace(self, l=lightness)

    def to_dict(self) -> dict[str, float]:
        """Convert to the ``{"l", "c", "h"}`` mapping used in Design DNA files."""
        return {"l": self.l, "c": self.c, "h": self.h}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> OKLCH:
        """Create a colour from a ``{"l", "c", "h"}`` mapping.

        Missing channels default to 0.

        Raises:
            TypeError, ValueError: If a channel is not numeric.
        """
        return cls(
            l=float(data.get("l", 0.0)),
            c=float(data.get("c", 0.0)),
            h=float(data.get("h", 0.0)),
        )


def coerce_color(value: Any) -> Optional[OKLCH]:
    """Best-effort conversion of an arbitrary document value to OKLCH.

    Returns None when the value is not a mapping or has non-numeric channels.
    """
    if isinstance(value, OKLCH):
        return value
    if not isinstance(value, Mapping):
        return None
    try:
        return OKLCH.from_dict(value)
    except (TypeError, ValueError):
        return None


# =============================================================================
# Hue Arithmetic
# =============================================================================


def normalize_hue(hue: float) -> float:
    """Wrap any hue angle into [0, 360).

    The result is rounded to 9 decimal places so that ``h`` and ``h + 360``
    normalize to the same value despite float representation error.
    """
    wrapped = round(float(hue) % 360.0, 9)
    return wrapped % 360.0


# =============================================================================
# Conversions
# =============================================================================


def _finite(x: float) -> float:
    return x if math.isfinite(x) else 0.0


def oklch_to_oklab(color: OKLCH) -> tuple[float, float, float]:
    """Convert OKLCH to OKLab (L, a, b).

    Lightness is clamped into [0, 1] and chroma floored at 0; non-finite
    channels are treated as 0.
    """
    lightness = min(max(_finite(color.l), 0.0), 1.0)
    chroma = max(_finite(color.c), 0.0)
    hue = math.radians(_finite(color.h))
    return lightness, chroma * math.cos(hue), chroma * math.sin(hue)


def oklab_to_linear_srgb(L: float, a: float, b: float) -> tuple[float, float, float]:
    """Convert OKLab to linear-light sRGB. Output may lie outside [0, 1]."""
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l = l_ ** 3
    m = m_ ** 3
    s = s_ ** 3

    return (
        4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def oklch_to_linear_srgb(color: OKLCH) -> tuple[float, float, float]:
    """Convert OKLCH straight to (unclipped) linear sRGB."""
    return oklab_to_linear_srgb(*oklch_to_oklab(color))


def clamp_to_gamut(rgb: tuple[float, float, float]) -> tuple[float, float, float]:
    """Clip each linear channel into [0, 1]."""
    return tuple(min(max(channel, 0.0), 1.0) for channel in rgb)  # type: ignore[return-value]


def in_gamut(color: OKLCH, tolerance: float = 1e-6) -> bool:
    """Whether the colour is displayable in sRGB without clipping."""
    return all(
        -tolerance <= channel <= 1.0 + tolerance
        for channel in oklch_to_linear_srgb(color)
    )


def linear_to_srgb(channel: float) -> float:
    """Apply the sRGB transfer function to one linear channel in [0, 1]."""
    if channel <= 0.0031308:
        return 12.92 * channel
    return 1.055 * channel ** (1 / 2.4) - 0.055


# =============================================================================
# Formatting
# =============================================================================


def to_hex(color: OKLCH) -> str:
    """Format as a ``#rrggbb`` hex string (gamut-clipped)."""
    r, g, b = clamp_to_gamut(oklch_to_linear_srgb(color))
    return "#" + "".join(
        f"{round(linear_to_srgb(channel) * 255):02x}" for channel in (r, g, b)
    )


def to_css(color: OKLCH) -> str:
    """Format as a CSS ``oklch(L% C H)`` string."""
    return f"oklch({color.l * 100:.1f}% {color.c:.3f} {color.h:.1f})"
