"""Tests for comparing a client against the designer's past clients."""

import pytest

from style_engine.models.axes import AXIS_KEYS, complete_vector
from style_engine.models.history import ProfileSnapshot
from style_engine.models.profile import StyleProfile
from style_engine.services.history.comparator import HistoricalComparator, snapshot_from_profile


def snapshot(project_id: str, confidence: float = 0.6, tags=None, client_name=None, **axes) -> ProfileSnapshot:
    return ProfileSnapshot(
        id=project_id,
        axes=complete_vector(axes),
        tags=tags or [],
        average_confidence=confidence,
        client_name=client_name,
    )


@pytest.fixture
def comparator():
    return HistoricalComparator()


@pytest.fixture
def current():
    return snapshot("current", modern_classic=0.4, warm_cool=0.3, bold_subtle=-0.1)


class TestSnapshot:
    def test_from_profile(self):
        profile = StyleProfile(
            axes=complete_vector({"minimal_ornate": 0.4}),
            confidence={axis: 0.5 for axis in AXIS_KEYS},
        )
        snap = snapshot_from_profile(profile, "p-1", client_name="Acme")
        assert snap.id == "p-1"
        assert snap.tags == ["minimalist", "balanced"]
        assert snap.average_confidence == pytest.approx(0.5)
        assert snap.client_name == "Acme"


class TestAnalyzeMatches:
    def test_matches_and_differences(self, current):
        other = snapshot("other", modern_classic=0.2, warm_cool=-0.3, bold_subtle=-0.2)
        matches, differences = HistoricalComparator.analyze_matches(current, other)
        assert matches == ["Both prefer modern aesthetics", "Both prefer subtle aesthetics"]
        assert differences == ["Warm vs Cool preference"]

    def test_weak_axes_not_compared(self, current):
        other = snapshot("other", modern_classic=0.05, warm_cool=0.3)
        matches, differences = HistoricalComparator.analyze_matches(current, other)
        assert matches == ["Both prefer warm aesthetics"]
        assert differences == []


class TestCompare:
    def test_first_project_is_unique(self, comparator, current):
        result = comparator.compare(current, [])
        assert result.uniqueness == "unique"
        assert result.score == 1.0
        assert result.description == "This is your first project with this style profile"
        assert result.top_matches == []

    def test_typical(self, comparator, current):
        history = [
            snapshot("twin", modern_classic=0.4, warm_cool=0.3, bold_subtle=-0.1),
            snapshot("opposite", modern_classic=-0.4, warm_cool=-0.3, bold_subtle=0.1),
        ]
        result = comparator.compare(current, history)
        assert result.uniqueness == "typical"
        assert result.description == "Very similar to 50% of your past clients"
        assert result.score == pytest.approx(1.0)
        assert [match.project_id for match in result.top_matches] == ["twin", "opposite"]
        assert result.top_matches[0].client_name == "Previous Client"
        assert result.top_matches[0].project_type == "Project"

    def test_unusual(self, comparator):
        current = snapshot("current", modern_classic=1.0, warm_cool=1.0)
        result = comparator.compare(current, [snapshot("past", modern_classic=1.0)])
        # cos = 1/sqrt(2)
        assert result.uniqueness == "unusual"

    def test_unique(self, comparator, current):
        result = comparator.compare(current, [snapshot("past", luxury_accessible=0.8)])
        assert result.uniqueness == "unique"
        assert result.description == "Significantly different from your previous clients - new territory!"

    def test_top_matches_are_capped(self, current):
        history = [snapshot(f"p{i}", modern_classic=0.1 * (i + 1)) for i in range(5)]
        result = HistoricalComparator(top_matches=2).compare(current, history)
        assert len(result.top_matches) == 2


class TestDesignerInsights:
    def test_describe(self, comparator, current):
        assert comparator.describe(current) == "modern, warm aesthetic with 60% confidence"
        assert comparator.describe(snapshot("flat")) == "Balanced aesthetic preferences"

    def test_typical_client_with_history(self, comparator):
        current = snapshot("current", confidence=0.85, tags=["inviting"], modern_classic=0.4, warm_cool=0.3)
        history = [
            snapshot("twin", tags=["inviting", "retro"], client_name="Bloom Bakery", modern_classic=0.4, warm_cool=0.3)
        ]
        report = comparator.generate_comparison_insights(current, history)
        assert report.uniqueness == "typical"
        assert report.similar_projects[0].client_name == "Bloom Bakery"
        assert report.recommendations == [
            "Focus on precise execution of their vision",
            "This client's preferences are very similar to Bloom Bakery, you could reference that successful approach",
            "Lean heavily into modern aesthetic choices",
        ]
        assert report.strengths == [
            "Client has strong, clear preferences",
            "Leverageable past experience",
            "Very strong modern preference",
            "Familiar style tags: inviting",
        ]
        assert report.warning_flags == []

    def test_uncertain_first_client(self, comparator):
        report = comparator.generate_comparison_insights(snapshot("current", confidence=0.3), [])
        assert report.uniqueness == "unique"
        assert report.client_profile == "Balanced aesthetic preferences"
        assert report.warning_flags == [
            "Client shows uncertainty in style preferences",
            "New territory - allow extra time for exploration and iteration",
        ]
        assert report.recommendations[0] == "Consider presenting multiple concept directions"
        assert report.similar_projects == []

    def test_missing_completion_date_stays_missing(self, comparator, current):
        history = [snapshot("twin", modern_classic=0.4, warm_cool=0.3)]
        result = comparator.compare(current, history)
        assert result.top_matches[0].completed_at is None

    def test_report_is_repeatable(self, comparator, current):
        history = [snapshot("twin", modern_classic=0.4, warm_cool=0.3)]
        first = comparator.generate_comparison_insights(current, history)
        assert comparator.generate_comparison_insights(current, history) == first
