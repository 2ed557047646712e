"""Tests for pairwise choice aggregation and reliability."""

import pytest

from style_engine.models.comparison import ComparisonChoice
from style_engine.services.profile.catalog import COMPARISON_PAIRS
from style_engine.services.profile.pairwise import (
    PairwiseChoiceAggregator,
    calculate_average_confidence,
    calculate_reliability,
    rank_pairs_to_probe,
)


def pick(pair_id: str, picked: str = "A", confidence: float = 1.0) -> ComparisonChoice:
    return ComparisonChoice(pair_id=pair_id, picked=picked, confidence=confidence)


@pytest.fixture
def aggregator(classic_pair, modern_pair, warm_pair):
    return PairwiseChoiceAggregator(pairs=[classic_pair, modern_pair, warm_pair])


class TestScore:
    def test_no_choices(self, aggregator):
        result = aggregator.score([])
        assert result.total_choices == 0
        assert result.average_confidence == 0.0
        assert all(value == 0.0 for value in result.axes.values())

    def test_repeated_picks_saturate(self, aggregator):
        result = aggregator.score([pick("classic")] * 5)
        assert result.axes["modern_classic"] == -1.0
        assert result.scores["modern_classic"] == -100.0
        assert result.total_choices == 5

    def test_later_choices_weigh_more(self, aggregator):
        result = aggregator.score([pick("modern"), pick("classic")])
        assert result.axes["modern_classic"] == pytest.approx(0.2 - 0.512)
        assert result.axes["modern_classic"] < 0

    def test_recency_grows_with_sequence_length(self, aggregator):
        skip = pick("classic", "skip", 0.0)
        first = aggregator.score([pick("modern")] + [skip] * 4).axes["modern_classic"]
        last = aggregator.score([skip] * 4 + [pick("modern")]).axes["modern_classic"]
        assert first == pytest.approx(0.2)
        assert last == pytest.approx(0.512)
        assert last / first == pytest.approx(1.6**2)

    def test_middle_of_a_long_sequence(self, aggregator):
        skip = pick("classic", "skip", 0.0)
        result = aggregator.score([skip, skip, pick("modern"), skip, skip])
        assert result.axes["modern_classic"] == pytest.approx(0.32)

    def test_flat_recency(self, classic_pair, modern_pair):
        flat = PairwiseChoiceAggregator(pairs=[classic_pair, modern_pair], recency_base=1.0)
        assert flat.score([pick("modern"), pick("classic")]).axes["modern_classic"] == pytest.approx(0.0)

    def test_zero_confidence_keeps_floor(self, aggregator):
        result = aggregator.score([pick("modern", confidence=0.0)])
        assert result.axes["modern_classic"] == pytest.approx(0.06)

    def test_skips_keep_their_position(self, aggregator):
        result = aggregator.score([pick("classic", "skip", 0.0), pick("modern")])
        assert result.axes["modern_classic"] == pytest.approx(0.512)
        assert result.total_choices == 1
        assert result.average_confidence == 1.0

    def test_option_b(self, aggregator):
        result = aggregator.score([pick("warm", "B")])
        assert result.axes["warm_cool"] == pytest.approx(-0.15)
        assert result.axes["playful_serious"] == pytest.approx(-0.05)

    def test_unknown_pair_is_ignored_but_counts_for_confidence(self, aggregator):
        result = aggregator.score([pick("modern"), pick("retired-pair", confidence=0.4)])
        assert result.total_choices == 1
        assert result.average_confidence == pytest.approx(0.7)

    def test_catalogue_override(self, aggregator, warm_pair):
        result = aggregator.score([pick("modern")], pairs=[warm_pair])
        assert result.total_choices == 0

    def test_default_catalogue(self):
        pair = COMPARISON_PAIRS[0]
        result = PairwiseChoiceAggregator().score([pick(pair.id)])
        assert result.total_choices == 1
        assert any(value != 0.0 for value in result.axes.values())


class TestReliability:
    def test_average_confidence_skips_skips(self):
        choices = [pick("a", confidence=0.6), pick("b", "skip", 0.0), pick("c", confidence=1.0)]
        assert calculate_average_confidence(choices) == pytest.approx(0.8)

    def test_many_confident_choices(self):
        reliability = calculate_reliability([pick("a", confidence=0.9)] * 10)
        assert reliability.score == pytest.approx(0.94)
        assert reliability.level == "high"
        assert reliability.label == "High Confidence"

    def test_more_answers_raise_reliability(self):
        one = calculate_reliability([pick("a", confidence=0.8)])
        eight = calculate_reliability([pick("a", confidence=0.8)] * 8)
        assert one.score == pytest.approx(0.53)
        assert one.level == "moderate"
        assert eight.score == pytest.approx(0.88)
        assert eight.score > one.score

    def test_only_skips(self):
        reliability = calculate_reliability([pick("a", "skip", 0.0)] * 3)
        assert reliability.score == 0.0
        assert reliability.level == "low"


class TestRankPairsToProbe:
    def test_most_doubt_first(self, classic_pair, warm_pair):
        ranked = rank_pairs_to_probe({"modern_classic": 0.9}, [], pairs=[classic_pair, warm_pair])
        assert [pair.id for pair in ranked] == ["warm", "classic"]

    def test_used_pairs_excluded(self, classic_pair, warm_pair):
        ranked = rank_pairs_to_probe({}, [pick("warm")], pairs=[classic_pair, warm_pair])
        assert [pair.id for pair in ranked] == ["classic"]

    def test_ties_keep_catalogue_order(self, classic_pair, modern_pair):
        ranked = rank_pairs_to_probe({}, [], pairs=[modern_pair, classic_pair])
        assert [pair.id for pair in ranked] == ["modern", "classic"]
