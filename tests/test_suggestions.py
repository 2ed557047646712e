"""Tests for industry-driven suggestions and cross-industry comparison."""

from style_engine.services.industry.defaults import INDUSTRY_CATEGORIES, fallback_defaults
from style_engine.services.industry.suggestions import (
    generate_comparative_insights,
    generate_smart_suggestions,
    style_distance,
)


def seed_rows():
    return [fallback_defaults(category) for category in INDUSTRY_CATEGORIES]


class TestSmartSuggestions:
    def test_from_seed(self):
        suggestions = generate_smart_suggestions(fallback_defaults("fitness"))
        # Ties on strength keep axis order
        assert suggestions.style_preselections == ["bold", "modern", "playful"]
        assert suggestions.color_suggestions == ["energetic reds", "vibrant oranges", "fitness greens"]
        assert suggestions.budget_suggestion == "$5,000-$15,000"
        assert suggestions.timeline_suggestion == "4-6 weeks"
        assert suggestions.confidence_hints == {
            "colors": "Popular color choices: energetic reds, vibrant oranges, fitness greens",
            "budget": "Typical budget range: $5,000-$15,000",
            "timeline": "Expected timeline: 4-6 weeks",
        }

    def test_industry_hint_needs_enough_projects(self):
        row = fallback_defaults("real estate").model_copy(update={"sample_size": 51})
        hints = generate_smart_suggestions(row).confidence_hints
        assert hints["industry"] == "Most real estate businesses prefer professional and trustworthy styles"

        row = row.model_copy(update={"sample_size": 50})
        assert "industry" not in generate_smart_suggestions(row).confidence_hints

    def test_preselections_are_unique(self):
        row = fallback_defaults("fitness").model_copy(update={"common_styles": ["bold", "bold"]})
        preselections = generate_smart_suggestions(row).style_preselections
        assert len(preselections) == len(set(preselections))


class TestComparativeInsights:
    def test_distance(self):
        assert style_distance({"warm_cool": 3}, {"bold_subtle": 4}) == 5.0

    def test_neutral_industry(self):
        insights = generate_comparative_insights("Quarry", seed_rows())
        assert insights.similar_industries == ["retail", "real estate", "beauty"]
        assert insights.unique_aspects == []
        assert insights.average_comparison == "Compared to similar industries, shows typical style preferences"

    def test_distinctive_industry(self):
        insights = generate_comparative_insights("Law firm", seed_rows())
        assert insights.unique_aspects == ["Strong preference for serious aesthetics"]
        assert "legal" not in insights.similar_industries
        assert insights.average_comparison.endswith("shows distinctive style preferences")

    def test_aspects_capped_and_ordered(self):
        rows = seed_rows()
        rows[0] = rows[0].model_copy(
            update={"style_scores": {"warm_cool": 20.0, "bold_subtle": -40.0, "luxury_accessible": 30.0}}
        )
        insights = generate_comparative_insights(rows[0].industry, rows)
        assert insights.unique_aspects == [
            "Strong preference for subtle aesthetics",
            "Strong preference for luxury aesthetics",
        ]

    def test_missing_industry(self):
        insights = generate_comparative_insights("fashion", [])
        assert insights.similar_industries == []
        assert insights.average_comparison == "Insufficient data for comparison"
