from collections.abc import Iterable, Mapping, Sequence

from loguru import logger

from style_engine.core.config import settings
from style_engine.models.axes import clamp, empty_axes, wide_to_narrow
from style_engine.models.comparison import ComparisonChoice, ComparisonPair, PairwiseScore, Reliability
from style_engine.services.profile.catalog import COMPARISON_PAIRS
from style_engine.services.profile.constants import (
    PAIRWISE_RECENCY_SPAN,
    RELIABILITY_COMPLETENESS_WEIGHT,
    RELIABILITY_CONFIDENCE_WEIGHT,
    RELIABILITY_FULL_CHOICES,
)

# (minimum score, level, label, description), checked top-down
RELIABILITY_LEVELS: tuple[tuple[float, str, str, str], ...] = (
    (0.85, "high", "High Confidence", "Your style profile is very reliable based on strong preferences."),
    (0.65, "good", "Good Confidence", "Your style profile has good reliability with clear preferences."),
    (
        0.45,
        "moderate",
        "Moderate Confidence",
        "Your style profile shows some clear directions but could benefit from more input.",
    ),
)
LOW_RELIABILITY: tuple[str, str, str] = (
    "low",
    "Low Confidence",
    "Consider answering a few more questions to strengthen your style profile.",
)


def calculate_average_confidence(choices: Sequence[ComparisonChoice]) -> float:
    """Mean reported confidence over non-skip choices, 0 when there are none."""
    picked = [choice.confidence for choice in choices if not choice.is_skip]
    if not picked:
        return 0.0
    return sum(picked) / len(picked)


def calculate_reliability(choices: Sequence[ComparisonChoice]) -> Reliability:
    """
    How much a human should trust a comparison sequence.

    Blends answer volume (saturating at eight picks) with average reported
    confidence. Independent of the weighted scores themselves.
    """
    non_skip = sum(1 for choice in choices if not choice.is_skip)
    completeness = min(non_skip / RELIABILITY_FULL_CHOICES, 1.0)
    score = (
        completeness * RELIABILITY_COMPLETENESS_WEIGHT
        + calculate_average_confidence(choices) * RELIABILITY_CONFIDENCE_WEIGHT
    )

    for minimum, level, label, description in RELIABILITY_LEVELS:
        if score >= minimum:
            return Reliability(score=score, level=level, label=label, description=description)
    level, label, description = LOW_RELIABILITY
    return Reliability(score=score, level=level, label=label, description=description)


def rank_pairs_to_probe(
    confidence: Mapping[str, float],
    choices: Sequence[ComparisonChoice],
    pairs: Iterable[ComparisonPair] = COMPARISON_PAIRS,
) -> list[ComparisonPair]:
    """
    Unused pairs ordered by how much uncertainty they can resolve.

    A pair's value is the summed remaining doubt (1 - confidence) over its
    target axes. Equal values keep catalogue order.
    """
    used = {choice.pair_id for choice in choices}
    candidates = [pair for pair in pairs if pair.id not in used]

    def remaining_doubt(pair: ComparisonPair) -> float:
        return sum(1.0 - clamp(float(confidence.get(axis, 0.0)), 0.0, 1.0) for axis in pair.target_dims)

    return sorted(candidates, key=remaining_doubt, reverse=True)


class PairwiseChoiceAggregator:
    """
    Folds an ordered sequence of A/B choices into axis scores.

    Each pick pulls the axes named in the chosen option's deltas, scaled by a
    recency multiplier (later picks count more) and a confidence multiplier
    (a zero-confidence pick still keeps the floor share of its pull).
    Accumulation runs on the narrow scale and saturates at its bounds.
    """

    def __init__(
        self,
        pairs: Iterable[ComparisonPair] = COMPARISON_PAIRS,
        recency_base: float | None = None,
        confidence_floor: float | None = None,
    ):
        self.pairs: dict[str, ComparisonPair] = {pair.id: pair for pair in pairs}
        self.recency_base = settings.PAIRWISE_RECENCY_BASE if recency_base is None else recency_base
        self.confidence_floor = settings.PAIRWISE_CONFIDENCE_FLOOR if confidence_floor is None else confidence_floor

    def recency_multiplier(self, position: int, total: int) -> float:
        """`base ** (2 * position / max(total - 1, 1))`: 1.0 for the first choice."""
        return self.recency_base ** (PAIRWISE_RECENCY_SPAN * position / max(total - 1, 1))

    def confidence_multiplier(self, confidence: float) -> float:
        return self.confidence_floor + (1.0 - self.confidence_floor) * confidence

    def score(
        self,
        choices: Sequence[ComparisonChoice],
        pairs: Iterable[ComparisonPair] | None = None,
    ) -> PairwiseScore:
        """
        Score a choice sequence.

        Args:
            choices: Choices in the order they were made. Positions count skips
                and unknown pairs, since position reflects real chronology.
            pairs: Optional catalogue overriding the one given at construction.

        Returns:
            PairwiseScore with narrow-scale axes; `scores` is the wide view.
        """
        catalogue = {pair.id: pair for pair in pairs} if pairs is not None else self.pairs
        axes = empty_axes()
        total_choices = 0
        total = len(choices)

        for position, choice in enumerate(choices):
            if choice.is_skip:
                continue
            pair = catalogue.get(choice.pair_id)
            if pair is None:
                logger.debug(f"Ignoring choice for unknown comparison pair '{choice.pair_id}'")
                continue

            option = pair.option(choice.picked)
            multiplier = self.recency_multiplier(position, total) * self.confidence_multiplier(choice.confidence)
            for axis, delta in option.deltas.items():
                if axis not in axes:
                    continue
                axes[axis] = clamp(axes[axis] + wide_to_narrow(delta) * multiplier, -1.0, 1.0)
            total_choices += 1

        return PairwiseScore(
            axes=axes,
            total_choices=total_choices,
            average_confidence=calculate_average_confidence(choices),
        )
