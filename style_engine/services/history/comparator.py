from collections.abc import Sequence

from style_engine.models.axes import AXES, AXIS_KEYS, resolve_pole, round_half_up, wide_to_narrow
from style_engine.models.history import (
    DesignerInsights,
    ProfileSnapshot,
    ProjectComparison,
    UniquenessResult,
)
from style_engine.models.profile import StyleProfile
from style_engine.services.profile.recommendations import derive_style_tags
from style_engine.services.profile.similarity import cosine_similarity

TYPICAL_MAX_SIMILARITY = 0.8
UNUSUAL_MAX_SIMILARITY = 0.5
CLOSE_SIMILARITY = 0.7
TOP_MATCHES = 3

# Thresholds below are authored on the wide scale
POLE_THRESHOLD = wide_to_narrow(5)
DESCRIPTION_THRESHOLD = wide_to_narrow(10)
DOMINANT_THRESHOLD = wide_to_narrow(15)
VERY_STRONG_THRESHOLD = wide_to_narrow(20)

CLEAR_CONFIDENCE = 0.8
UNCLEAR_CONFIDENCE = 0.5


def snapshot_from_profile(
    profile: StyleProfile,
    project_id: str,
    client_name: str | None = None,
    project_type: str | None = None,
    completed_at: str | None = None,
) -> ProfileSnapshot:
    """Freeze a live profile into the shape kept for later comparisons."""
    average_confidence = sum(profile.confidence.get(axis, 0.0) for axis in AXIS_KEYS) / len(AXIS_KEYS)
    return ProfileSnapshot(
        id=project_id,
        axes=dict(profile.axes),
        tags=derive_style_tags(profile.axes),
        average_confidence=average_confidence,
        client_name=client_name,
        project_type=project_type,
        completed_at=completed_at,
    )


def _strongest_axes(axes: dict[str, float], threshold: float) -> list[str]:
    strong = [axis for axis in AXIS_KEYS if abs(axes.get(axis, 0.0)) > threshold]
    return sorted(strong, key=lambda axis: abs(axes[axis]), reverse=True)


def _direction(axis: str, score: float) -> str:
    return resolve_pole(axis, score, 0.0).lower()


class HistoricalComparator:
    """
    Places one client's profile against the same designer's past clients.

    Similarity is the cosine primitive shared with archetype matching, over
    narrow-scale axis vectors.
    """

    def __init__(self, top_matches: int = TOP_MATCHES):
        self.top_matches = top_matches

    @staticmethod
    def analyze_matches(current: ProfileSnapshot, other: ProfileSnapshot) -> tuple[list[str], list[str]]:
        """
        Axis-by-axis agreement between two profiles.

        Args:
            current: Profile being evaluated
            other: Historical profile

        Returns:
            (matches, differences). Axes too weak on either side are not compared.
        """
        matches = []
        differences = []
        for axis in AXES:
            mine = resolve_pole(axis.id, current.axes.get(axis.id, 0.0), POLE_THRESHOLD)
            theirs = resolve_pole(axis.id, other.axes.get(axis.id, 0.0), POLE_THRESHOLD)
            if mine is None or theirs is None:
                continue
            if mine == theirs:
                matches.append(f"Both prefer {mine.lower()} aesthetics")
            else:
                differences.append(f"{mine} vs {theirs} preference")
        return matches, differences

    def rank_similar(self, current: ProfileSnapshot, history: Sequence[ProfileSnapshot]) -> list[ProjectComparison]:
        comparisons = []
        for past in history:
            matches, differences = self.analyze_matches(current, past)
            comparisons.append(
                ProjectComparison(
                    project_id=past.id,
                    client_name=past.client_name or "Previous Client",
                    project_type=past.project_type or "Project",
                    similarity=cosine_similarity(current.axes, past.axes),
                    completed_at=past.completed_at,
                    key_matches=matches,
                    differences=differences,
                )
            )
        comparisons.sort(key=lambda c: c.similarity, reverse=True)
        return comparisons[: self.top_matches]

    def compare(self, current: ProfileSnapshot, history: Sequence[ProfileSnapshot]) -> UniquenessResult:
        if not history:
            return UniquenessResult(
                uniqueness="unique",
                score=1.0,
                description="This is your first project with this style profile",
            )

        similarities = [cosine_similarity(current.axes, past.axes) for past in history]
        average = sum(similarities) / len(similarities)
        highest = max(similarities)

        if highest > TYPICAL_MAX_SIMILARITY:
            close = sum(1 for s in similarities if s > CLOSE_SIMILARITY)
            pct = round_half_up(close / len(similarities) * 100)
            uniqueness = "typical"
            description = f"Very similar to {pct}% of your past clients"
        elif highest > UNUSUAL_MAX_SIMILARITY:
            uniqueness = "unusual"
            description = "Shows some unique preferences compared to your typical clients"
        else:
            uniqueness = "unique"
            description = "Significantly different from your previous clients - new territory!"

        return UniquenessResult(
            uniqueness=uniqueness,
            score=1.0 - average,
            description=description,
            top_matches=self.rank_similar(current, history),
        )

    @staticmethod
    def describe(current: ProfileSnapshot) -> str:
        strongest = _strongest_axes(current.axes, DESCRIPTION_THRESHOLD)[:3]
        if not strongest:
            return "Balanced aesthetic preferences"
        traits = [_direction(axis, current.axes[axis]) for axis in strongest]
        return f"{', '.join(traits)} aesthetic with {round_half_up(current.average_confidence * 100)}% confidence"

    def generate_comparison_insights(
        self, current: ProfileSnapshot, history: Sequence[ProfileSnapshot]
    ) -> DesignerInsights:
        """
        Full designer-facing comparison report.

        Args:
            current: Snapshot of the client being onboarded
            history: Snapshots of the designer's past clients

        Returns:
            DesignerInsights with uniqueness, the closest past projects and advice
        """
        result = self.compare(current, history)
        recommendations: list[str] = []
        warning_flags: list[str] = []
        strengths: list[str] = []

        if current.average_confidence >= CLEAR_CONFIDENCE:
            strengths.append("Client has strong, clear preferences")
            recommendations.append("Focus on precise execution of their vision")
        elif current.average_confidence < UNCLEAR_CONFIDENCE:
            warning_flags.append("Client shows uncertainty in style preferences")
            recommendations.append("Consider presenting multiple concept directions")

        if result.uniqueness == "unique":
            recommendations.append(
                "This client's style is unlike your previous work - embrace the creative challenge"
            )
            warning_flags.append("New territory - allow extra time for exploration and iteration")
        elif result.uniqueness == "typical" and result.top_matches:
            closest = result.top_matches[0]
            if closest.similarity > TYPICAL_MAX_SIMILARITY:
                recommendations.append(
                    f"This client's preferences are very similar to {closest.client_name}, "
                    "you could reference that successful approach"
                )
                strengths.append("Leverageable past experience")

        dominant = _strongest_axes(current.axes, DOMINANT_THRESHOLD)
        if dominant:
            axis = dominant[0]
            score = current.axes[axis]
            if abs(score) > VERY_STRONG_THRESHOLD:
                direction = _direction(axis, score)
                strengths.append(f"Very strong {direction} preference")
                recommendations.append(f"Lean heavily into {direction} aesthetic choices")

        past_tags = {tag for past in history for tag in past.tags}
        shared_tags = [tag for tag in current.tags if tag in past_tags]
        if shared_tags:
            strengths.append(f"Familiar style tags: {', '.join(shared_tags)}")

        return DesignerInsights(
            client_profile=self.describe(current),
            uniqueness=result.uniqueness,
            uniqueness_description=result.description,
            similar_projects=result.top_matches,
            recommendations=recommendations,
            warning_flags=warning_flags,
            strengths=strengths,
        )
