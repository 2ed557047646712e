from datetime import datetime, timezone

from pydantic import Field

from style_engine.models.axes import AxisVector, empty_axes
from style_engine.models.base import CamelModel


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class IndustryDefaults(CamelModel):
    """
    Running aggregate for one industry category.

    `style_scores` is kept on the wide scale, which is how the aggregate row
    is persisted and shown.
    """

    industry: str
    sample_size: int = Field(default=0, ge=0)
    style_scores: AxisVector = Field(default_factory=empty_axes)
    common_styles: list[str] = Field(default_factory=list)
    preferred_colors: list[str] = Field(default_factory=list)
    common_typography: list[str] = Field(default_factory=list)
    average_budget: str = ""
    average_timeline: str = ""
    confidence_level: float = Field(default=0.0, ge=0.0, le=1.0)
    last_updated: str = Field(default_factory=utc_now_iso)


class CompletedProject(CamelModel):
    """What a finished project contributes to its industry aggregate."""

    # Narrow-scale profile axes; None leaves the aggregate scores untouched
    axes: AxisVector | None = None
    budget_range: str | None = None
    timeline: str | None = None


class SmartSuggestions(CamelModel):
    style_preselections: list[str] = Field(default_factory=list)
    color_suggestions: list[str] = Field(default_factory=list)
    budget_suggestion: str = ""
    timeline_suggestion: str = ""
    confidence_hints: dict[str, str] = Field(default_factory=dict)


class ComparativeInsights(CamelModel):
    similar_industries: list[str] = Field(default_factory=list)
    unique_aspects: list[str] = Field(default_factory=list)
    average_comparison: str = ""
