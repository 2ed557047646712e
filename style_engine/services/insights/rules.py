"""
Insight rules.

Each rule is an independent function of an immutable context and returns zero
or more insights. Rules never look at each other's output; order only matters
as the minor sort key within a severity tier.
"""

from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field

from style_engine.core.constants import HIGH_CONFIDENCE_THRESHOLD, LOW_CONFIDENCE_THRESHOLD
from style_engine.models.answers import ColorPreferencesAnswers, StepAnswers, TypographyFeelAnswers, find_step
from style_engine.models.axes import AXES, AXES_BY_KEY, round_half_up
from style_engine.models.insights import Insight
from style_engine.models.profile import StyleProfile

REFERENCE_MATCH_MIN = 70
BLEND_MATCH_MIN = 60
BLEND_MATCH_GAP = 10
LOW_SIGNAL_COUNT = 5
RICH_SIGNAL_COUNT = 15
PERSONALITY_SUMMARY_MIN = 3


class InsightContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    profile: StyleProfile
    answers: dict[str, StepAnswers] = Field(default_factory=dict)

    def strong_axes(self) -> list[str]:
        return [axis.id for axis in AXES if self.profile.confidence.get(axis.id, 0.0) >= HIGH_CONFIDENCE_THRESHOLD]

    def uncertain_axes(self) -> list[str]:
        return [axis.id for axis in AXES if self.profile.confidence.get(axis.id, 0.0) < LOW_CONFIDENCE_THRESHOLD]

    def axis(self, key: str) -> float:
        return self.profile.axes.get(key, 0.0)

    @property
    def selected_palettes(self) -> list[str]:
        step = find_step(self.answers, ColorPreferencesAnswers)
        return step.selected_palettes if step else []

    @property
    def font_styles(self) -> list[str]:
        step = find_step(self.answers, TypographyFeelAnswers)
        return step.font_styles if step else []


Rule = Callable[[InsightContext], list[Insight]]


def strong_opinions(ctx: InsightContext) -> list[Insight]:
    strong = ctx.strong_axes()
    if not strong:
        return []
    labels = [AXES_BY_KEY[axis].pole(ctx.axis(axis)).lower() for axis in strong]
    peak = round_half_up(max(ctx.profile.confidence[axis] for axis in strong) * 100)
    return [
        Insight(
            type="confidence",
            severity="info",
            title=f"Strong opinions on {', '.join(labels[:3])}",
            description=(
                f"This client feels strongly about their {', '.join(labels)} preferences (confidence: {peak}%). "
                "Respect these choices closely in your design."
            ),
            related_axes=strong,
        )
    ]


def uncertain_areas(ctx: InsightContext) -> list[Insight]:
    uncertain = ctx.uncertain_axes()
    if not uncertain:
        return []
    labels = [AXES_BY_KEY[axis].span_label for axis in uncertain]
    return [
        Insight(
            type="confidence",
            severity="warning",
            title=f"Uncertain about {' and '.join(labels[:2])}",
            description=(
                "The client hasn't expressed strong preferences here. Present 2-3 options in these areas "
                "and guide them through the decision."
            ),
            related_axes=uncertain,
        )
    ]


def warm_modern_tension(ctx: InsightContext) -> list[Insight]:
    if not (ctx.axis("warm_cool") > 0.3 and ctx.axis("modern_classic") > 0.5):
        return []
    return [
        Insight(
            type="conflict",
            severity="warning",
            title="Warm tones with ultra-modern layout",
            description=(
                "Their color preferences lean warm and inviting, but their layout preference is very modern and "
                "technical. This can work beautifully (think Airbnb) but needs careful balancing. Consider warm "
                "accent colors within a clean modern structure."
            ),
            related_axes=["warm_cool", "modern_classic"],
        )
    ]


def playful_luxury_tension(ctx: InsightContext) -> list[Insight]:
    if not (ctx.axis("playful_serious") > 0.3 and ctx.axis("luxury_accessible") > 0.5):
        return []
    return [
        Insight(
            type="conflict",
            severity="warning",
            title="Playful personality with luxury positioning",
            description=(
                "The client wants to feel premium but also approachable. This is a sophisticated balance, "
                "think Glossier or Away. Avoid being either too corporate or too casual."
            ),
            related_axes=["playful_serious", "luxury_accessible"],
        )
    ]


def bold_minimalism(ctx: InsightContext) -> list[Insight]:
    if not (ctx.axis("bold_subtle") > 0.4 and ctx.axis("minimal_ornate") > 0.5):
        return []
    return [
        Insight(
            type="opportunity",
            severity="info",
            title="Bold minimalism, a powerful combo",
            description=(
                "They want bold impact through simplicity, not complexity. Think one strong typeface, dramatic "
                "whitespace and a single accent color. Less is more, but what's there should punch."
            ),
            related_axes=["bold_subtle", "minimal_ornate"],
        )
    ]


def classic_geometric_tension(ctx: InsightContext) -> list[Insight]:
    if not (ctx.axis("modern_classic") < -0.3 and ctx.axis("geometric_organic") > 0.4):
        return []
    return [
        Insight(
            type="conflict",
            severity="info",
            title="Classic style with geometric precision",
            description=(
                "They lean traditional but want structured geometry. Consider Art Deco-inspired approaches that "
                "bridge both worlds: geometric patterns with classic serif typography."
            ),
            related_axes=["modern_classic", "geometric_organic"],
        )
    ]


def archetype_reference(ctx: InsightContext) -> list[Insight]:
    top = ctx.profile.top_archetype
    if top is None or top.match_score <= REFERENCE_MATCH_MIN:
        return []
    return [
        Insight(
            type="recommendation",
            severity="info",
            title=f"Reference: {top.name} ({top.match_score}% match)",
            description=(
                f"{top.description}. Study their approach for tone and execution, but create something original. "
                f"Key traits: {', '.join(top.personality)}."
            ),
        )
    ]


def blended_reference(ctx: InsightContext) -> list[Insight]:
    if len(ctx.profile.archetypes) < 2:
        return []
    first, second = ctx.profile.archetypes[:2]
    if not (first.match_score - second.match_score < BLEND_MATCH_GAP and first.match_score > BLEND_MATCH_MIN):
        return []
    return [
        Insight(
            type="recommendation",
            severity="info",
            title=f"Blended reference: {first.name} meets {second.name}",
            description=(
                f"This client sits between {first.name} and {second.name}. Consider blending elements from both: "
                f"{', '.join(first.personality[:2])} from {first.name} with "
                f"{', '.join(second.personality[:2])} from {second.name}."
            ),
        )
    ]


def serif_with_bold_palette(ctx: InsightContext) -> list[Insight]:
    if "serif" not in ctx.font_styles or not {"Midnight", "Coral"}.intersection(ctx.selected_palettes):
        return []
    return [
        Insight(
            type="conflict",
            severity="warning",
            title="Serif typography with bold color palette",
            description=(
                "Classic serif fonts paired with vibrant or dramatic colors creates tension. This can be "
                "intentional and striking (editorial style) or feel disjointed. Clarify if they want editorial "
                "contrast or harmonious elegance."
            ),
            related_axes=["modern_classic", "bold_subtle"],
        )
    ]


def handwritten_with_monochrome(ctx: InsightContext) -> list[Insight]:
    if "handwritten" not in ctx.font_styles or "Monochrome" not in ctx.selected_palettes:
        return []
    return [
        Insight(
            type="risk",
            severity="warning",
            title="Handwritten style with monochrome palette",
            description=(
                "Handwritten fonts typically pair with warm, colorful palettes. The monochrome choice may make "
                "handwriting feel cold. Consider adding a warm accent color to bridge this gap."
            ),
        )
    ]


def signal_volume(ctx: InsightContext) -> list[Insight]:
    count = ctx.profile.signal_count
    if count < LOW_SIGNAL_COUNT:
        return [
            Insight(
                type="confidence",
                severity="warning",
                title="Limited data, early in the questionnaire",
                description=(
                    "The style profile is still forming. Current recommendations are based on limited signals. "
                    "As the client answers more questions, the profile will sharpen significantly."
                ),
            )
        ]
    if count > RICH_SIGNAL_COUNT:
        return [
            Insight(
                type="confidence",
                severity="info",
                title="Rich profile data available",
                description=(
                    f"Built from {count} data points. This is a well-informed profile: trust the recommendations "
                    "and use them as a strong starting point."
                ),
            )
        ]
    return []


def personality_summary(ctx: InsightContext) -> list[Insight]:
    personality = ctx.profile.recommendations.brand_personality
    if len(personality) < PERSONALITY_SUMMARY_MIN:
        return []
    return [
        Insight(
            type="recommendation",
            severity="info",
            title=f"Brand personality: {', '.join(personality)}",
            description=(
                f"Every design decision should feel {', '.join(personality[:3]).lower()}. Use this as a gut-check: "
                "if a design element doesn't feel like these words, reconsider."
            ),
        )
    ]


RULES: tuple[Rule, ...] = (
    strong_opinions,
    uncertain_areas,
    warm_modern_tension,
    playful_luxury_tension,
    bold_minimalism,
    classic_geometric_tension,
    archetype_reference,
    blended_reference,
    serif_with_bold_palette,
    handwritten_with_monochrome,
    signal_volume,
    personality_summary,
)
