from typing import Literal

from pydantic import Field

from style_engine.models.axes import AxisVector, empty_axes
from style_engine.models.base import CamelModel

Uniqueness = Literal["typical", "unusual", "unique"]


class ProfileSnapshot(CamelModel):
    """
    A profile as it is kept for comparison with other clients of the same designer.

    `axes` is on the narrow scale; `tags` are the short style tags derived when
    the snapshot was taken.
    """

    id: str
    axes: AxisVector = Field(default_factory=empty_axes)
    tags: list[str] = Field(default_factory=list)
    average_confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    client_name: str | None = None
    project_type: str | None = None
    completed_at: str | None = None


class ProjectComparison(CamelModel):
    project_id: str
    client_name: str
    project_type: str
    similarity: float
    completed_at: str | None = None
    key_matches: list[str] = Field(default_factory=list)
    differences: list[str] = Field(default_factory=list)


class UniquenessResult(CamelModel):
    uniqueness: Uniqueness
    score: float
    description: str
    top_matches: list[ProjectComparison] = Field(default_factory=list)


class DesignerInsights(CamelModel):
    client_profile: str
    uniqueness: Uniqueness
    uniqueness_description: str
    similar_projects: list[ProjectComparison] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    warning_flags: list[str] = Field(default_factory=list)
    strengths: list[str] = Field(default_factory=list)
