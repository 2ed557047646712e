"""
Axis model: the fixed set of bipolar style dimensions.

Scores live on the narrow [-1, 1] scale everywhere inside the engine. The wide
[-100, 100] scale only exists at the boundaries that display or persist it,
and is reached exclusively through `to_wide_scale` / `to_narrow_scale`.
"""

import math
from typing import Final, Literal

from pydantic import BaseModel

from style_engine.core.constants import NARROW_SCALE_MAX, WIDE_PER_NARROW, WIDE_SCALE_MAX

AxisKey = Literal[
    "modern_classic",
    "bold_subtle",
    "warm_cool",
    "minimal_ornate",
    "playful_serious",
    "geometric_organic",
    "luxury_accessible",
]

AxisVector = dict[str, float]


class Axis(BaseModel, frozen=True):
    id: str
    negative_label: str
    positive_label: str

    def pole(self, score: float) -> str:
        """Label of the pole the score leans toward (positive when > 0)."""
        return self.positive_label if score > 0 else self.negative_label

    @property
    def span_label(self) -> str:
        return f"{self.negative_label}/{self.positive_label}"


AXES: Final[tuple[Axis, ...]] = (
    Axis(id="modern_classic", negative_label="Classic", positive_label="Modern"),
    Axis(id="bold_subtle", negative_label="Subtle", positive_label="Bold"),
    Axis(id="warm_cool", negative_label="Cool", positive_label="Warm"),
    Axis(id="minimal_ornate", negative_label="Ornate", positive_label="Minimal"),
    Axis(id="playful_serious", negative_label="Serious", positive_label="Playful"),
    Axis(id="geometric_organic", negative_label="Organic", positive_label="Geometric"),
    Axis(id="luxury_accessible", negative_label="Accessible", positive_label="Luxury"),
)

AXIS_KEYS: Final[tuple[str, ...]] = tuple(axis.id for axis in AXES)
AXES_BY_KEY: Final[dict[str, Axis]] = {axis.id: axis for axis in AXES}


def clamp(value: float, low: float, high: float) -> float:
    """Saturate value into [low, high]. Non-finite input collapses to 0."""
    if not math.isfinite(value):
        return 0.0
    return min(high, max(low, value))


def empty_axes() -> AxisVector:
    return {key: 0.0 for key in AXIS_KEYS}


def complete_vector(partial: dict[str, float] | None) -> AxisVector:
    """Expand a partial vector to every axis in catalogue order; unknown keys are dropped."""
    partial = partial or {}
    return {key: float(partial.get(key, 0.0)) for key in AXIS_KEYS}


def as_ordered_list(vector: dict[str, float]) -> list[float]:
    return [float(vector.get(key, 0.0)) for key in AXIS_KEYS]


def to_wide_scale(vector: dict[str, float]) -> AxisVector:
    """Convert a narrow [-1, 1] vector to the wide [-100, 100] display scale."""
    return {
        key: clamp(float(vector.get(key, 0.0)) * WIDE_PER_NARROW, -WIDE_SCALE_MAX, WIDE_SCALE_MAX)
        for key in AXIS_KEYS
    }


def to_narrow_scale(vector: dict[str, float]) -> AxisVector:
    """Convert a wide [-100, 100] vector to the canonical narrow [-1, 1] scale."""
    return {
        key: clamp(float(vector.get(key, 0.0)) / WIDE_PER_NARROW, -NARROW_SCALE_MAX, NARROW_SCALE_MAX)
        for key in AXIS_KEYS
    }


def wide_to_narrow(value: float) -> float:
    """Single-value form of `to_narrow_scale`, for thresholds authored on the wide scale."""
    return value / WIDE_PER_NARROW


def resolve_pole(axis_key: str, score: float, threshold: float) -> str | None:
    """Pole label when |score| exceeds the threshold, otherwise None (too weak to call)."""
    if abs(score) <= threshold:
        return None
    return AXES_BY_KEY[axis_key].pole(score)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up, not to even."""
    return math.floor(value + 0.5)
