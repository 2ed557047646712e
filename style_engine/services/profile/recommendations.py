from collections.abc import Iterable, Mapping

from style_engine.models.axes import AXES_BY_KEY, clamp, to_wide_scale
from style_engine.models.profile import (
    FontProfile,
    FontRecommendation,
    PaletteProfile,
    PaletteRecommendation,
    StyleProfile,
    StyleRecommendations,
)
from style_engine.services.profile.catalog import FONTS, PALETTES
from style_engine.services.profile.constants import (
    LAYOUT_STRONG_LEAN,
    PERSONALITY_LEAN,
    PERSONALITY_MAX_WORDS,
    RECOMMENDATION_ALIGNMENT_MIN,
    RECOMMENDATION_CONFIDENCE_MIN,
    RECOMMENDATION_REASON_PARTS,
    SURPRISE_FONT_POSITION,
    TAG_BALANCED_BAND,
    TAG_LEAN,
    TAG_STRONG_LEAN,
)

# (axis, word when the lean is positive, word when negative)
PERSONALITY_WORDS: tuple[tuple[str, str, str], ...] = (
    ("modern_classic", "Modern", "Classic"),
    ("bold_subtle", "Bold", "Refined"),
    ("warm_cool", "Warm", "Cool"),
    ("minimal_ornate", "Clean", "Rich"),
    ("playful_serious", "Friendly", "Professional"),
    ("geometric_organic", "Precise", "Natural"),
    ("luxury_accessible", "Premium", "Approachable"),
)
DEFAULT_PERSONALITY: tuple[str, ...] = ("Versatile", "Balanced")


def _alignment(
    item_axes: Mapping[str, float], axes: Mapping[str, float], confidence: Mapping[str, float]
) -> tuple[float, list[str]]:
    """Confidence-weighted agreement between an item and the profile, plus the pole words that agree."""
    score = 0.0
    directions: list[str] = []
    for axis, item_value in item_axes.items():
        profile_value = axes.get(axis, 0.0)
        conf = confidence.get(axis, 0.0)
        alignment = item_value * profile_value
        score += alignment * conf
        if alignment > RECOMMENDATION_ALIGNMENT_MIN and conf > RECOMMENDATION_CONFIDENCE_MIN:
            directions.append(AXES_BY_KEY[axis].pole(profile_value).lower())
    return clamp((score + 1) / 2, 0.0, 1.0), directions


def derive_style_tags(axes: Mapping[str, float]) -> list[str]:
    """Short descriptive tags, thresholds read on the wide scale."""
    wide = to_wide_scale(axes)
    tags = []
    if wide["minimal_ornate"] > TAG_STRONG_LEAN:
        tags.append("minimalist")
    if wide["bold_subtle"] > TAG_STRONG_LEAN:
        tags.append("high-contrast")
    if wide["warm_cool"] > TAG_LEAN:
        tags.append("inviting")
    if wide["geometric_organic"] > TAG_STRONG_LEAN:
        tags.append("structured")
    if wide["playful_serious"] > TAG_STRONG_LEAN:
        tags.append("friendly")
    if wide["modern_classic"] < -TAG_LEAN:
        tags.append("retro")
    if wide["luxury_accessible"] > TAG_STRONG_LEAN:
        tags.append("premium")
    if abs(wide["warm_cool"]) < TAG_BALANCED_BAND and abs(wide["bold_subtle"]) < TAG_BALANCED_BAND:
        tags.append("balanced")
    return tags


class RecommendationDeriver:
    """Read-only pass over finished axis/confidence maps."""

    def __init__(self, fonts: Iterable[FontProfile] = FONTS, palettes: Iterable[PaletteProfile] = PALETTES):
        self.fonts = tuple(fonts)
        self.palettes = tuple(palettes)

    def font_recommendations(
        self, axes: Mapping[str, float], confidence: Mapping[str, float]
    ) -> list[FontRecommendation]:
        scored = []
        for font in self.fonts:
            score, directions = _alignment(font.axes, axes, confidence)
            if directions:
                reason = f"Matches your {' + '.join(directions[:RECOMMENDATION_REASON_PARTS])} preference"
            else:
                reason = f"A versatile {font.category} option"
            scored.append(
                FontRecommendation(
                    name=font.name,
                    category=font.category,
                    google_fonts_family=font.google_fonts_family,
                    reason=reason,
                    score=score,
                )
            )
        return sorted(scored, key=lambda rec: rec.score, reverse=True)

    def palette_recommendations(
        self, axes: Mapping[str, float], confidence: Mapping[str, float]
    ) -> list[PaletteRecommendation]:
        scored = []
        for palette in self.palettes:
            score, directions = _alignment(palette.axes, axes, confidence)
            if directions:
                reason = f"Complements your {' + '.join(directions[:RECOMMENDATION_REASON_PARTS])} style"
            else:
                reason = "A versatile palette for your brand"
            scored.append(
                PaletteRecommendation(
                    name=palette.name,
                    colors=list(palette.colors),
                    mood=palette.mood,
                    reason=reason,
                    score=score,
                )
            )
        return sorted(scored, key=lambda rec: rec.score, reverse=True)

    @staticmethod
    def layout_style(axes: Mapping[str, float]) -> str:
        if axes["minimal_ornate"] > LAYOUT_STRONG_LEAN:
            return "Spacious single-column with generous whitespace"
        if axes["bold_subtle"] > LAYOUT_STRONG_LEAN:
            return "Full-bleed hero sections with bold typography"
        if axes["geometric_organic"] > LAYOUT_STRONG_LEAN:
            return "Grid-based layout with structured sections"
        if axes["geometric_organic"] < -LAYOUT_STRONG_LEAN:
            return "Flowing asymmetric layout with organic shapes"
        if axes["luxury_accessible"] > LAYOUT_STRONG_LEAN:
            return "Centered editorial layout with dramatic spacing"
        return "Balanced two-column layout with clear hierarchy"

    @staticmethod
    def imagery_style(axes: Mapping[str, float]) -> str:
        if axes["minimal_ornate"] > LAYOUT_STRONG_LEAN and axes["modern_classic"] > PERSONALITY_LEAN:
            return "Product-focused with clean backgrounds"
        if axes["warm_cool"] > LAYOUT_STRONG_LEAN:
            return "Warm lifestyle photography with natural light"
        if axes["warm_cool"] < -LAYOUT_STRONG_LEAN:
            return "High-contrast studio photography with cool tones"
        if axes["playful_serious"] > LAYOUT_STRONG_LEAN:
            return "Colorful illustrations and candid photography"
        if axes["luxury_accessible"] > LAYOUT_STRONG_LEAN:
            return "Cinematic editorial photography"
        if axes["geometric_organic"] < -LAYOUT_STRONG_LEAN:
            return "Textural close-ups and nature photography"
        return "Mixed photography with consistent color grading"

    @staticmethod
    def brand_personality(axes: Mapping[str, float]) -> list[str]:
        words = []
        for axis, positive, negative in PERSONALITY_WORDS:
            if axes[axis] > PERSONALITY_LEAN:
                words.append(positive)
            elif axes[axis] < -PERSONALITY_LEAN:
                words.append(negative)
        return words[:PERSONALITY_MAX_WORDS] if words else list(DEFAULT_PERSONALITY)

    def derive(self, axes: Mapping[str, float], confidence: Mapping[str, float]) -> StyleRecommendations:
        return StyleRecommendations(
            fonts=self.font_recommendations(axes, confidence),
            color_palettes=self.palette_recommendations(axes, confidence),
            layout_style=self.layout_style(axes),
            imagery_style=self.imagery_style(axes),
            brand_personality=self.brand_personality(axes),
        )

    @staticmethod
    def surprise_font(profile: StyleProfile) -> FontRecommendation | None:
        """A pick from past the middle of the ranking: close enough to fit, far enough to surprise."""
        fonts = profile.recommendations.fonts
        if not fonts:
            return None
        font = fonts[min(int(len(fonts) * SURPRISE_FONT_POSITION), len(fonts) - 1)]
        return font.model_copy(
            update={"reason": "A curveball pick, slightly outside your profile but could add an interesting twist"}
        )
