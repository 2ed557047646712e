import math
from collections.abc import Iterable

from style_engine.models.axes import AXIS_KEYS, clamp, complete_vector, empty_axes, to_narrow_scale
from style_engine.models.industry import IndustryDefaults
from style_engine.models.profile import Evidence, StyleProfile
from style_engine.services.profile.constants import CONFIDENCE_GROWTH_RATE
from style_engine.services.profile.recommendations import RecommendationDeriver
from style_engine.services.profile.similarity import ArchetypeMatcher


def seed_profile(defaults: IndustryDefaults) -> StyleProfile:
    """
    Prior built from an industry aggregate.

    Carries the industry lean on the narrow scale but no confidence and no
    signals: the prior says where to start, not how sure to be.
    """
    return StyleProfile(axes=to_narrow_scale(defaults.style_scores), confidence=empty_axes(), signal_count=0)


def lowest_confidence_axis(profile: StyleProfile) -> str:
    """Least certain axis; ties resolve to the first in catalogue order."""
    return min(AXIS_KEYS, key=lambda axis: profile.confidence.get(axis, 0.0))


class ProfileBuilder:
    """
    Folds evidence into a style profile by additive accumulation.

    - score += delta * weight, saturating at [-1, 1]
    - confidence closes part of its remaining gap to 1 with each piece of evidence
    - one signal counted per evidence item
    Matching and recommendations run afterwards and never feed back.
    """

    def __init__(
        self,
        matcher: ArchetypeMatcher | None = None,
        recommender: RecommendationDeriver | None = None,
        confidence_rate: float = CONFIDENCE_GROWTH_RATE,
    ):
        self.matcher = matcher or ArchetypeMatcher()
        self.recommender = recommender or RecommendationDeriver()
        self.confidence_rate = confidence_rate

    def confidence_step(self, confidence: float, weight: float) -> float:
        """
        Confidence after one more piece of evidence.

        Args:
            confidence: Current confidence in [0, 1]
            weight: Evidence weight in [0, 1]

        Returns:
            Updated confidence; repeated steps compound to 1 - exp(-rate * total weight).
        """
        gained = (1.0 - confidence) * (1.0 - math.exp(-self.confidence_rate * weight))
        return clamp(confidence + gained, 0.0, 1.0)

    def fold(self, prior: StyleProfile | None, evidence: Iterable[Evidence]) -> StyleProfile:
        """
        Build a profile from a prior and an evidence stream, in arrival order.

        Args:
            prior: Starting point (e.g. an industry seed) or None for a neutral start
            evidence: Evidence items in submission order

        Returns:
            A fresh StyleProfile with archetypes and recommendations derived
        """
        axes = complete_vector(prior.axes) if prior else empty_axes()
        confidence = complete_vector(prior.confidence) if prior else empty_axes()
        signal_count = prior.signal_count if prior else 0

        for item in evidence:
            if item.axis not in axes or item.weight <= 0:
                continue
            axes[item.axis] = clamp(axes[item.axis] + item.delta * item.weight, -1.0, 1.0)
            confidence[item.axis] = self.confidence_step(confidence[item.axis], item.weight)
            signal_count += 1

        axes = {axis: clamp(value, -1.0, 1.0) for axis, value in axes.items()}
        confidence = {axis: clamp(value, 0.0, 1.0) for axis, value in confidence.items()}

        return StyleProfile(
            axes=axes,
            confidence=confidence,
            signal_count=signal_count,
            archetypes=self.matcher.match(axes),
            recommendations=self.recommender.derive(axes, confidence),
        )
