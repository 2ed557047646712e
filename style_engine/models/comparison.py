import math
from typing import Literal

from pydantic import Field, computed_field, field_validator

from style_engine.models.axes import AxisVector, empty_axes, to_wide_scale
from style_engine.models.base import CamelModel


class ComparisonChoice(CamelModel):
    """One forced-choice event. Order in a sequence is significant."""

    pair_id: str
    picked: Literal["A", "B", "skip"]
    confidence: float = 0.8
    timestamp: str | None = None

    @field_validator("confidence", mode="before")
    @classmethod
    def _bound_confidence(cls, value):
        try:
            value = float(value)
        except (TypeError, ValueError, OverflowError):
            return 0.8
        if not math.isfinite(value):
            return 0.8
        return min(1.0, max(0.0, value))

    @property
    def is_skip(self) -> bool:
        return self.picked == "skip"


class PairOption(CamelModel):
    label: str
    sublabel: str = ""
    image: str = ""
    # Authored on the wide scale, e.g. {"modern_classic": -20}
    deltas: dict[str, float] = Field(default_factory=dict)


class ComparisonPair(CamelModel):
    id: str
    category: str
    question: str
    option_a: PairOption
    option_b: PairOption
    target_dims: list[str] = Field(default_factory=list)

    def option(self, picked: str) -> PairOption | None:
        if picked == "A":
            return self.option_a
        if picked == "B":
            return self.option_b
        return None


class PairwiseScore(CamelModel):
    """Result of folding a comparison sequence."""

    axes: AxisVector = Field(default_factory=empty_axes)
    total_choices: int = 0
    average_confidence: float = 0.0

    @computed_field
    @property
    def scores(self) -> AxisVector:
        """Wide-scale view of `axes` for display."""
        return to_wide_scale(self.axes)


class Reliability(CamelModel):
    score: float
    level: Literal["high", "good", "moderate", "low"]
    label: str
    description: str
