from pydantic import BaseModel, Field

from style_engine.models.axes import AxisVector, empty_axes
from style_engine.models.base import CamelModel


class Evidence(BaseModel):
    """
    One unit of proof extracted from a single answer.

    `delta` is the signed pull on the narrow scale, `weight` how decisive the
    answer type is.
    """

    axis: str
    delta: float
    weight: float = Field(ge=0.0, le=1.0)
    source: str = ""


class Archetype(CamelModel):
    """Reference style vector with descriptive metadata."""

    name: str
    axes: dict[str, float]
    description: str
    personality: list[str] = Field(default_factory=list)
    website: str | None = None


class FontProfile(CamelModel):
    name: str
    category: str
    google_fonts_family: str
    axes: dict[str, float]


class PaletteProfile(CamelModel):
    name: str
    colors: list[str]
    mood: str
    axes: dict[str, float]


class ArchetypeMatch(CamelModel):
    name: str
    match_score: int
    description: str
    personality: list[str] = Field(default_factory=list)
    website: str | None = None


class FontRecommendation(CamelModel):
    name: str
    category: str
    google_fonts_family: str
    reason: str
    score: float


class PaletteRecommendation(CamelModel):
    name: str
    colors: list[str]
    mood: str
    reason: str
    score: float


class StyleRecommendations(CamelModel):
    fonts: list[FontRecommendation] = Field(default_factory=list)
    color_palettes: list[PaletteRecommendation] = Field(default_factory=list)
    layout_style: str = ""
    imagery_style: str = ""
    brand_personality: list[str] = Field(default_factory=list)


class StyleProfile(CamelModel):
    """
    Aggregated style profile for one project at one point in time.

    A derived view: always recomputed from the full answer set, never mutated
    in place and stored as the source of truth.
    """

    axes: AxisVector = Field(default_factory=empty_axes)
    confidence: AxisVector = Field(default_factory=empty_axes)
    signal_count: int = Field(default=0, ge=0)
    archetypes: list[ArchetypeMatch] = Field(default_factory=list)
    recommendations: StyleRecommendations = Field(default_factory=StyleRecommendations)

    @property
    def top_archetype(self) -> ArchetypeMatch | None:
        return self.archetypes[0] if self.archetypes else None
