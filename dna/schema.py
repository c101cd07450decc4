"""Pydantic models for the structural shape of a Design DNA document.

This module is the structural pre-check the ``validate`` command runs before
the rule validators:
- Meta: DNAMeta
- Primitives: ColorSystem, TypographySystem, MotionSystem, GeometrySystem
- Generative: NoiseConfig, LayoutJitter, ColorVariation

Numeric ranges follow the Design DNA authoring schema. Anything the rule
validators judge (colour model value, font choices, generic wording, empty
anti-pattern lists, stated contrast levels) is left to them, so the schema
only rejects documents whose shape or ranges are wrong.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class _DNAModel(BaseModel):
    """Base model: unknown keys are kept, not rejected."""

    model_config = ConfigDict(extra="allow")


# =============================================================================
# Meta
# =============================================================================


class DNAMeta(_DNAModel):
    """Project identity and aesthetic intent."""

    projectName: str = Field(pattern=r"^[a-z0-9-]+$", description="Kebab-case project identifier")
    version: str = Field(pattern=r"^\d+\.\d+\.\d+$", description="Semantic version")
    personality: List[str] = Field(
        min_length=1, max_length=5, description="Specific aesthetic descriptors"
    )
    antiPatterns: List[str] = Field(description="Aesthetic patterns to explicitly avoid")


# =============================================================================
# Colour
# =============================================================================


class OKLCHColor(_DNAModel):
    l: float = Field(ge=0, le=1, description="0 = black, 1 = white")
    c: float = Field(ge=0, le=0.4, description="0 = gray, 0.4 = maximum saturation")
    h: float = Field(ge=0, le=360, description="Hue angle in degrees")


class PaletteSpec(_DNAModel):
    primary: OKLCHColor
    secondary: OKLCHColor
    accent: OKLCHColor
    background: OKLCHColor
    text: OKLCHColor
    muted: Optional[OKLCHColor] = None
    border: Optional[OKLCHColor] = None


class ContrastRatios(_DNAModel):
    textOnBackground: float = Field(ge=1, le=21)
    primaryOnBackground: Optional[float] = Field(None, ge=1, le=21)
    accentOnBackground: Optional[float] = Field(None, ge=1, le=21)


class ColorSystem(_DNAModel):
    model: str
    palette: PaletteSpec
    contrastRatios: ContrastRatios


# =============================================================================
# Typography
# =============================================================================


class TypeScale(_DNAModel):
    base: float = Field(ge=14, le=24, description="Base size in px")
    ratio: float = Field(ge=1.1, le=1.618, description="Modular scale multiplier")
    ratioName: Optional[str] = None


class FontFamilies(_DNAModel):
    heading: List[str] = Field(min_length=1)
    body: List[str] = Field(min_length=1)
    mono: Optional[List[str]] = None


class TypographySystem(_DNAModel):
    scale: TypeScale
    families: FontFamilies
    weights: Optional[Dict[str, List[float]]] = None


# =============================================================================
# Motion
# =============================================================================


class SpringConfig(_DNAModel):
    stiffness: float = Field(ge=50, le=1000, description="Higher = snappier")
    damping: float = Field(ge=1, le=100, description="Higher = less oscillation")
    mass: float = Field(1.0, ge=0.1, le=10)


class MotionSystem(_DNAModel):
    springs: Dict[str, SpringConfig]
    defaultSpring: str
    reducedMotion: str


# =============================================================================
# Geometry
# =============================================================================


class Spacing(_DNAModel):
    base: float = Field(gt=0, description="Spacing base unit in px")
    scale: Optional[str] = None


class GeometrySystem(_DNAModel):
    borderRadius: Dict[str, str]
    spacing: Spacing
    radiusPersonality: Optional[str] = None
    aspectRatios: Optional[Dict[str, str]] = None


class Primitives(_DNAModel):
    color: ColorSystem
    typography: TypographySystem
    motion: MotionSystem
    geometry: GeometrySystem


# =============================================================================
# Generative
# =============================================================================


class LayoutJitter(_DNAModel):
    maxOffset: float = Field(ge=0, le=20, description="Max offset in px")
    rotationRange: List[float] = Field(min_length=2, max_length=2)


class ColorVariation(_DNAModel):
    hueShift: Optional[float] = Field(None, ge=0, le=15)
    lightnessVariation: Optional[float] = Field(None, ge=0, le=0.1)


class NoiseConfig(_DNAModel):
    seed: str = Field(min_length=8, description="Seed for reproducible generative effects")
    layoutJitter: LayoutJitter
    colorVariation: Optional[ColorVariation] = None


class Generative(_DNAModel):
    noise: NoiseConfig


# =============================================================================
# Document
# =============================================================================


class DesignDNA(_DNAModel):
    """A complete Design DNA document."""

    meta: DNAMeta
    primitives: Primitives
    generative: Generative
    components: Optional[Dict[str, Any]] = None


def format_schema_errors(exc: ValidationError) -> List[str]:
    """Render pydantic errors as ``/json/pointer: message`` lines."""
    lines = []
    for error in exc.errors():
        pointer = "/" + "/".join(str(part) for part in error["loc"])
        lines.append(f"{pointer}: {error['msg']}")
    return lines


def check_schema(document: Any) -> List[str]:
    """Check a parsed document's structure.

    Returns:
        Human-readable error lines; empty when the document conforms.
    """
    try:
        DesignDNA.model_validate(document)
    except ValidationError as e:
        return format_schema_errors(e)
    return []
