"""Tests for font, palette and layout recommendations."""

import pytest

from style_engine.models.axes import AXIS_KEYS, complete_vector
from style_engine.models.profile import StyleProfile
from style_engine.services.profile.catalog import FONTS, PALETTES
from style_engine.services.profile.recommendations import RecommendationDeriver, derive_style_tags


def axes(**values):
    return complete_vector(values)


@pytest.fixture
def deriver():
    return RecommendationDeriver()


class TestStyleTags:
    def test_neutral_profile_is_balanced(self):
        assert derive_style_tags({}) == ["balanced"]

    def test_leans_become_tags(self):
        tags = derive_style_tags(axes(minimal_ornate=0.2, warm_cool=0.11, modern_classic=-0.11, bold_subtle=0.3))
        assert tags == ["minimalist", "high-contrast", "inviting", "retro"]

    def test_weak_leans_do_not_tag(self):
        assert "minimalist" not in derive_style_tags(axes(minimal_ornate=0.14))
        assert "premium" in derive_style_tags(axes(luxury_accessible=0.16))


class TestFontsAndPalettes:
    def test_unconfident_profile_keeps_catalogue_order(self, deriver):
        fonts = deriver.font_recommendations(axes(modern_classic=0.9), axes())
        assert [font.name for font in fonts] == [font.name for font in FONTS]
        assert all(font.score == 0.5 for font in fonts)
        assert fonts[0].reason == "A versatile sans-serif option"

    def test_confident_profile_explains_its_pick(self, deriver):
        confidence = {axis: 0.9 for axis in AXIS_KEYS}
        fonts = deriver.font_recommendations(axes(modern_classic=0.9, geometric_organic=0.9), confidence)
        assert fonts[0].name == "Space Grotesk"
        assert fonts[0].score == 1.0
        assert fonts[0].reason == "Matches your modern + geometric preference"

    def test_palette_reasons(self, deriver):
        confidence = {axis: 0.9 for axis in AXIS_KEYS}
        palettes = deriver.palette_recommendations(axes(warm_cool=0.9), confidence)
        assert palettes[0].name == "Warm Terracotta"
        assert palettes[0].reason == "Complements your warm style"
        assert palettes[-1].reason == "A versatile palette for your brand"
        assert len(palettes) == len(PALETTES)

    def test_scores_stay_in_unit_range(self, deriver):
        confidence = {axis: 1.0 for axis in AXIS_KEYS}
        fonts = deriver.font_recommendations({axis: -1.0 for axis in AXIS_KEYS}, confidence)
        assert all(0.0 <= font.score <= 1.0 for font in fonts)


class TestLayoutImageryPersonality:
    def test_layout_defaults(self, deriver):
        assert deriver.layout_style(axes()) == "Balanced two-column layout with clear hierarchy"

    def test_layout_first_strong_lean_wins(self, deriver):
        assert deriver.layout_style(axes(bold_subtle=0.6, geometric_organic=-0.6)) == (
            "Full-bleed hero sections with bold typography"
        )
        assert deriver.layout_style(axes(geometric_organic=-0.6)) == "Flowing asymmetric layout with organic shapes"

    def test_imagery(self, deriver):
        assert deriver.imagery_style(axes()) == "Mixed photography with consistent color grading"
        assert deriver.imagery_style(axes(minimal_ornate=0.6, modern_classic=0.4)) == (
            "Product-focused with clean backgrounds"
        )
        assert deriver.imagery_style(axes(warm_cool=-0.6)) == "High-contrast studio photography with cool tones"
        assert deriver.imagery_style(axes(minimal_ornate=0.6, modern_classic=0.3)) == (
            "Mixed photography with consistent color grading"
        )
        assert deriver.imagery_style(axes(warm_cool=0.5)) == "Mixed photography with consistent color grading"

    def test_personality_defaults(self, deriver):
        assert deriver.brand_personality(axes()) == ["Versatile", "Balanced"]

    def test_personality_capped_at_five(self, deriver):
        words = deriver.brand_personality({axis: 0.5 for axis in AXIS_KEYS})
        assert words == ["Modern", "Bold", "Warm", "Clean", "Friendly"]

    def test_negative_leans(self, deriver):
        assert deriver.brand_personality(axes(playful_serious=-0.4, luxury_accessible=-0.4)) == [
            "Professional",
            "Approachable",
        ]


class TestSurpriseFont:
    def test_pick_from_past_the_middle(self, deriver):
        profile = StyleProfile(recommendations=deriver.derive(axes(), axes()))
        surprise = RecommendationDeriver.surprise_font(profile)
        assert surprise.name == profile.recommendations.fonts[12].name
        assert surprise.reason.startswith("A curveball pick")
        # The profile's own list is untouched
        assert profile.recommendations.fonts[12].reason != surprise.reason

    def test_no_fonts(self):
        assert RecommendationDeriver.surprise_font(StyleProfile()) is None
