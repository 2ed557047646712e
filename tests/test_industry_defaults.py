"""Tests for industry normalisation and the static seed table."""

import pytest

from style_engine.models.axes import AXIS_KEYS
from style_engine.services.industry.defaults import (
    INDUSTRY_CATEGORIES,
    SEED_DEFAULTS,
    fallback_defaults,
    normalize_industry,
)


class TestNormalizeIndustry:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("Real Estate", "real_estate"),
            ("  TECH-STARTUP ", "tech_startup"),
            ("creative agency", "creative_agency"),
            ("Dental Clinic", "healthcare"),
            ("Apparel & Accessories", "fashion"),
            ("Architecture firm", "real_estate"),
            ("Bakery & Cafe", "restaurant"),
            ("Gym and yoga studio", "fitness"),
            ("Wellness retreat", "beauty"),
            ("Family law practice", "legal"),
            ("Steel manufacturing", "manufacturing"),
            ("Mobile app", "tech_startup"),
        ],
    )
    def test_known_industries(self, text, expected):
        assert normalize_industry(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "Quarry"])
    def test_fallback(self, text):
        assert normalize_industry(text) == "other"

    def test_always_a_category(self):
        for text in ["Bakery", "SaaS", "Charity shop", "Accounting firm", "Gallery"]:
            assert normalize_industry(text) in INDUSTRY_CATEGORIES


class TestSeeds:
    def test_every_category_seeded(self):
        assert set(SEED_DEFAULTS) == set(INDUSTRY_CATEGORIES)
        for seed in SEED_DEFAULTS.values():
            assert list(seed["style_scores"]) == list(AXIS_KEYS)

    def test_luxury_column_is_seeded_per_industry(self):
        assert fallback_defaults("fashion").style_scores["luxury_accessible"] == 12
        assert fallback_defaults("legal").style_scores["luxury_accessible"] == 8
        assert fallback_defaults("healthcare").style_scores["luxury_accessible"] == -5

    def test_fallback_defaults(self):
        row = fallback_defaults("Dental Clinic")
        assert row.industry == "healthcare"
        assert row.sample_size == 0
        assert row.confidence_level == 0.3
        assert row.style_scores["playful_serious"] == -15
        assert row.average_budget == "$7,000-$18,000"

    def test_unknown_industry_uses_neutral_seed(self):
        row = fallback_defaults("Quarry")
        assert row.industry == "other"
        assert all(value == 0 for value in row.style_scores.values())
        assert row.average_budget == "$5,000-$15,000"
        assert row.average_timeline == "4-6 weeks"

    def test_rows_are_independent_copies(self):
        fallback_defaults("fashion").common_styles.append("mutated")
        assert "mutated" not in fallback_defaults("fashion").common_styles
