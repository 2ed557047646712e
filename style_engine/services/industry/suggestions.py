import math
from collections.abc import Iterable

from style_engine.models.axes import AXES, AXIS_KEYS, complete_vector
from style_engine.models.industry import ComparativeInsights, IndustryDefaults, SmartSuggestions
from style_engine.services.industry.defaults import normalize_industry

PRESELECTION_COUNT = 3
COLOR_SUGGESTION_COUNT = 3
SIMILAR_INDUSTRY_COUNT = 3
UNIQUE_ASPECT_COUNT = 2
# Industry-wide hint only once the aggregate is backed by enough projects
INDUSTRY_HINT_MIN_SAMPLES = 50
# Wide scale
UNIQUE_ASPECT_THRESHOLD = 15.0


def _display_name(industry: str) -> str:
    return industry.replace("_", " ")


def _strongest_styles(style_scores: dict[str, float]) -> list[str]:
    scores = complete_vector(style_scores)
    ranked = sorted(AXES, key=lambda axis: abs(scores[axis.id]), reverse=True)
    return [axis.pole(scores[axis.id]).lower() for axis in ranked[:PRESELECTION_COUNT]]


def generate_smart_suggestions(defaults: IndustryDefaults) -> SmartSuggestions:
    """
    Pre-fill hints for a new project from its industry aggregate.

    Args:
        defaults: Aggregate (or seed) row for the client's industry

    Returns:
        SmartSuggestions: top styles, colours, budget/timeline and hint sentences
    """
    hints: dict[str, str] = {}
    if defaults.sample_size > INDUSTRY_HINT_MIN_SAMPLES:
        styles = " and ".join(defaults.common_styles[:2])
        hints["industry"] = f"Most {_display_name(defaults.industry)} businesses prefer {styles} styles"
    if defaults.preferred_colors:
        hints["colors"] = f"Popular color choices: {', '.join(defaults.preferred_colors[:COLOR_SUGGESTION_COUNT])}"
    hints["budget"] = f"Typical budget range: {defaults.average_budget}"
    hints["timeline"] = f"Expected timeline: {defaults.average_timeline}"

    # dict.fromkeys keeps first-seen order while dropping repeats
    preselections = list(dict.fromkeys(_strongest_styles(defaults.style_scores) + defaults.common_styles))

    return SmartSuggestions(
        style_preselections=preselections[:PRESELECTION_COUNT],
        color_suggestions=defaults.preferred_colors[:COLOR_SUGGESTION_COUNT],
        budget_suggestion=defaults.average_budget,
        timeline_suggestion=defaults.average_timeline,
        confidence_hints=hints,
    )


def style_distance(a: dict[str, float], b: dict[str, float]) -> float:
    """Euclidean distance between two wide-scale style vectors."""
    return math.sqrt(sum((a.get(axis, 0.0) - b.get(axis, 0.0)) ** 2 for axis in AXIS_KEYS))


def generate_comparative_insights(industry: str, all_defaults: Iterable[IndustryDefaults]) -> ComparativeInsights:
    """
    Place one industry's aggregate among the others.

    Args:
        industry: Free-text industry; normalised before lookup
        all_defaults: Rows for every known industry

    Returns:
        ComparativeInsights with the nearest industries and the industry's standout leanings
    """
    rows = list(all_defaults)
    category = normalize_industry(industry)
    own = next((row for row in rows if row.industry == category), None)
    if own is None:
        return ComparativeInsights(average_comparison="Insufficient data for comparison")

    others = [row for row in rows if row.industry != own.industry]
    # sorted() is stable: equal distances keep input order
    nearest = sorted(others, key=lambda row: style_distance(own.style_scores, row.style_scores))

    scores = complete_vector(own.style_scores)
    standout = [axis for axis in AXES if abs(scores[axis.id]) > UNIQUE_ASPECT_THRESHOLD]
    standout.sort(key=lambda axis: abs(scores[axis.id]), reverse=True)
    unique_aspects = [
        f"Strong preference for {axis.pole(scores[axis.id]).lower()} aesthetics"
        for axis in standout[:UNIQUE_ASPECT_COUNT]
    ]

    verdict = "distinctive" if unique_aspects else "typical"
    return ComparativeInsights(
        similar_industries=[_display_name(row.industry) for row in nearest[:SIMILAR_INDUSTRY_COUNT]],
        unique_aspects=unique_aspects,
        average_comparison=f"Compared to similar industries, shows {verdict} style preferences",
    )
