from typing import Literal

from pydantic import Field

from style_engine.models.base import CamelModel

InsightType = Literal["confidence", "conflict", "recommendation", "risk", "opportunity"]
Severity = Literal["important", "warning", "info"]

SEVERITY_ORDER: dict[str, int] = {"important": 0, "warning": 1, "info": 2}


class Insight(CamelModel):
    type: InsightType
    severity: Severity
    title: str
    description: str
    related_axes: list[str] = Field(default_factory=list)


class StyleInsightsReport(CamelModel):
    """Designer-facing explanation of a profile."""

    insights: list[Insight] = Field(default_factory=list)
    summary: str = ""
    strong_areas: list[str] = Field(default_factory=list)
    uncertain_areas: list[str] = Field(default_factory=list)
    conflicts: list[Insight] = Field(default_factory=list)
    overall_clarity: int = 0
