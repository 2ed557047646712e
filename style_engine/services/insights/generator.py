from collections.abc import Iterable, Mapping

from style_engine.core.constants import HIGH_CONFIDENCE_THRESHOLD, LOW_CONFIDENCE_THRESHOLD
from style_engine.models.answers import StepAnswers
from style_engine.models.axes import AXES, round_half_up
from style_engine.models.insights import SEVERITY_ORDER, Insight, StyleInsightsReport
from style_engine.models.profile import StyleProfile
from style_engine.services.insights.rules import REFERENCE_MATCH_MIN, RULES, InsightContext, Rule

CLEAR_VISION_CLARITY = 70
MODERATE_CLARITY = 40


def deduplicate(insights: Iterable[Insight]) -> list[Insight]:
    """Keep the first insight for each (type, title)."""
    seen: set[tuple[str, str]] = set()
    unique = []
    for insight in insights:
        key = (insight.type, insight.title)
        if key in seen:
            continue
        seen.add(key)
        unique.append(insight)
    return unique


class InsightGenerator:
    """Runs the rule set over a finished profile and assembles the designer report."""

    def __init__(self, rules: Iterable[Rule] = RULES):
        self.rules = tuple(rules)

    def generate(self, profile: StyleProfile, answers: Mapping[str, StepAnswers] | None = None) -> StyleInsightsReport:
        ctx = InsightContext(profile=profile, answers=dict(answers or {}))

        fired: list[Insight] = []
        for rule in self.rules:
            fired.extend(rule(ctx))
        fired = deduplicate(fired)
        # Stable: declaration order survives within a severity tier
        insights = sorted(fired, key=lambda insight: SEVERITY_ORDER[insight.severity])

        clarity = self.overall_clarity(profile)
        conflicts = [insight for insight in fired if insight.type == "conflict"]
        return StyleInsightsReport(
            insights=insights,
            summary=self.summary(profile, clarity, len(conflicts)),
            strong_areas=self.strong_areas(profile),
            uncertain_areas=self.uncertain_areas(profile),
            conflicts=conflicts,
            overall_clarity=clarity,
        )

    @staticmethod
    def overall_clarity(profile: StyleProfile) -> int:
        mean = sum(profile.confidence.get(axis.id, 0.0) for axis in AXES) / len(AXES)
        return round_half_up(mean * 100)

    @staticmethod
    def strong_areas(profile: StyleProfile) -> list[str]:
        return [
            axis.pole(profile.axes.get(axis.id, 0.0))
            for axis in AXES
            if profile.confidence.get(axis.id, 0.0) >= HIGH_CONFIDENCE_THRESHOLD
        ]

    @staticmethod
    def uncertain_areas(profile: StyleProfile) -> list[str]:
        return [axis.span_label for axis in AXES if profile.confidence.get(axis.id, 0.0) < LOW_CONFIDENCE_THRESHOLD]

    @staticmethod
    def summary(profile: StyleProfile, clarity: int, conflict_count: int) -> str:
        parts = []
        if clarity >= CLEAR_VISION_CLARITY:
            parts.append("This client has a clear design vision.")
        elif clarity >= MODERATE_CLARITY:
            parts.append("This client has moderate clarity on their style preferences.")
        else:
            parts.append("This client needs guidance, their style preferences are still forming.")

        if conflict_count == 1:
            parts.append("There is 1 tension in their choices worth exploring.")
        elif conflict_count > 1:
            parts.append(f"There are {conflict_count} tensions in their choices worth exploring.")

        top = profile.top_archetype
        if top is not None and top.match_score > REFERENCE_MATCH_MIN:
            parts.append(f"Closest reference: {top.name}.")
        return " ".join(parts)
