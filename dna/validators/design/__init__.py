"""
Design DNA category validators.

Importing this package registers one validator per scored category:
- colorSystem: colour model, recomputed contrast, stated-ratio drift
- typographySystem: font denylist, modular scale, heading fallbacks
- motionSystem: springs, default spring, reduced motion
- geometricSystem: radius variety, spacing base
- uniqueness: generic wording, anti-patterns, generative noise
"""

from .color_system import COLOR_RULES, ColorSystemValidator, text_contrast
from .geometry import GEOMETRY_RULES, GeometryValidator, distinct_radii
from .motion import MOTION_RULES, MotionValidator
from .typography import TYPOGRAPHY_RULES, TypographyValidator
from .uniqueness import UNIQUENESS_RULES, UniquenessValidator, generic_keywords

__all__ = [
    # Colour
    "ColorSystemValidator",
    "COLOR_RULES",
    "text_contrast",
    # Typography
    "TypographyValidator",
    "TYPOGRAPHY_RULES",
    # Motion
    "MotionValidator",
    "MOTION_RULES",
    # Geometry
    "GeometryValidator",
    "GEOMETRY_RULES",
    "distinct_radii",
    # Uniqueness
    "UniquenessValidator",
    "UNIQUENESS_RULES",
    "generic_keywords",
]
