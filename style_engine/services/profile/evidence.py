import colorsys
import re
from collections.abc import Callable, Mapping
from typing import get_args

from loguru import logger

from style_engine.models.answers import (
    BusinessInfoAnswers,
    ColorPreferencesAnswers,
    ProjectScopeAnswers,
    QuickStyleAnswers,
    StepAnswers,
    StyleDirectionAnswers,
    TypographyFeelAnswers,
    UnknownStepAnswers,
)
from style_engine.models.axes import AXES_BY_KEY, clamp
from style_engine.models.profile import Evidence
from style_engine.services.profile.catalog import (
    DELIVERABLE_SIGNALS,
    DESCRIPTION_KEYWORDS,
    FONT_STYLES,
    FONT_WEIGHTS,
    PALETTE_CHOICES,
    PALETTES,
    STYLE_CARDS,
    TYPE_COMPARISONS,
    translate_legacy_vector,
)
from style_engine.services.profile.constants import (
    DEFAULT_CHOICE_CONFIDENCE,
    LEGACY_SLIDER_RANGE,
    MULTI_SELECT_FULL_WEIGHT_LIMIT,
    QUICK_STYLE_DELTA,
    WEIGHT_COMPARISON_AGGREGATE,
    WEIGHT_CUSTOM_COLOR,
    WEIGHT_DELIVERABLE,
    WEIGHT_DESCRIPTION_KEYWORD,
    WEIGHT_FONT_STYLE,
    WEIGHT_FONT_WEIGHT,
    WEIGHT_PALETTE,
    WEIGHT_QUICK_STYLE,
    WEIGHT_STYLE_CARD,
    WEIGHT_TYPE_COMPARISON,
)
from style_engine.services.profile.pairwise import PairwiseChoiceAggregator

HEX_COLOR = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")

PALETTES_BY_NAME = {palette.name: palette.axes for palette in PALETTES}

HANDLED_VARIANTS: tuple[type, ...] = get_args(get_args(StepAnswers)[0])


def evidence_from_vector(vector: Mapping[str, float], weight: float, source: str) -> list[Evidence]:
    """One Evidence per known axis with a non-zero pull. Zero weight yields nothing."""
    weight = clamp(weight, 0.0, 1.0)
    if weight <= 0:
        return []
    return [
        Evidence(axis=axis, delta=float(delta), weight=weight, source=source)
        for axis, delta in vector.items()
        if axis in AXES_BY_KEY and delta
    ]


def spread_weight(weight: float, selected: int) -> float:
    """Share one multi-select field's weight once more than a few chips are picked."""
    if selected <= MULTI_SELECT_FULL_WEIGHT_LIMIT:
        return weight
    return weight * MULTI_SELECT_FULL_WEIGHT_LIMIT / selected


def color_vector(hex_color: str) -> dict[str, float]:
    """
    Warmth and boldness lean of a single hex colour.

    Greys carry no warmth. Saturated mid-lightness colours read bold; washed
    out or very light ones read subtle.
    """
    match = HEX_COLOR.match(hex_color.strip())
    if not match:
        return {}
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i : i + 2], 16) / 255 for i in (0, 2, 4))
    hue, lightness, saturation = colorsys.rgb_to_hls(r, g, b)
    degrees = hue * 360

    vector: dict[str, float] = {}
    if saturation >= 0.15:
        if degrees < 70 or degrees >= 330:
            vector["warm_cool"] = 0.4
        elif 170 <= degrees < 270:
            vector["warm_cool"] = -0.4
    if saturation >= 0.6 and 0.25 <= lightness <= 0.75:
        vector["bold_subtle"] = 0.3
    elif saturation < 0.25 or lightness > 0.85:
        vector["bold_subtle"] = -0.2
    return vector


class SignalExtractor:
    """
    Maps each questionnaire step to the evidence it carries.

    Pure: no side effects, never raises on partial answers. Every step variant
    has exactly one handler; a variant without one fails at construction.
    """

    def __init__(self, pairwise: PairwiseChoiceAggregator | None = None):
        self.pairwise = pairwise or PairwiseChoiceAggregator()
        self._handlers: dict[type, Callable[..., list[Evidence]]] = {
            BusinessInfoAnswers: self._business_info,
            ProjectScopeAnswers: self._project_scope,
            StyleDirectionAnswers: self._style_direction,
            ColorPreferencesAnswers: self._color_preferences,
            TypographyFeelAnswers: self._typography_feel,
            QuickStyleAnswers: self._quick_style,
            UnknownStepAnswers: self._unknown,
        }
        missing = [variant.__name__ for variant in HANDLED_VARIANTS if variant not in self._handlers]
        if missing:
            raise RuntimeError(f"No evidence handler for step variants: {', '.join(missing)}")

    def extract(self, step: StepAnswers) -> list[Evidence]:
        return self._handlers[type(step)](step)

    def extract_all(self, answers: Mapping[str, StepAnswers]) -> list[Evidence]:
        """Evidence for every step, in the snapshot's step order."""
        evidence: list[Evidence] = []
        for step in answers.values():
            evidence.extend(self.extract(step))
        return evidence

    def _business_info(self, step: BusinessInfoAnswers) -> list[Evidence]:
        # The industry answer seeds the prior instead of adding evidence
        if not step.description:
            return []
        text = step.description.lower()
        evidence: list[Evidence] = []
        for keyword, vector in DESCRIPTION_KEYWORDS.items():
            if keyword in text:
                evidence.extend(evidence_from_vector(vector, WEIGHT_DESCRIPTION_KEYWORD, f"keyword:{keyword}"))
        return evidence

    def _project_scope(self, step: ProjectScopeAnswers) -> list[Evidence]:
        chosen = set(step.deliverables)
        evidence: list[Evidence] = []
        for name, chips, vector in DELIVERABLE_SIGNALS:
            if chosen.intersection(chips):
                evidence.extend(evidence_from_vector(vector, WEIGHT_DELIVERABLE, f"deliverable:{name}"))
        return evidence

    def _style_direction(self, step: StyleDirectionAnswers) -> list[Evidence]:
        evidence: list[Evidence] = []

        known_cards = [style for style in step.selected_styles if style in STYLE_CARDS]
        card_weight = spread_weight(WEIGHT_STYLE_CARD, len(known_cards))
        for style in known_cards:
            evidence.extend(evidence_from_vector(STYLE_CARDS[style], card_weight, f"style_pick:{style}"))

        if step.choices:
            result = self.pairwise.score(step.choices)
            if result.total_choices > 0:
                weight = WEIGHT_COMPARISON_AGGREGATE * result.average_confidence
                evidence.extend(evidence_from_vector(result.axes, weight, "ab_aggregate"))
                return evidence

        # Older wizard versions only saved slider totals
        if step.scores:
            scaled = {key: value / LEGACY_SLIDER_RANGE for key, value in step.scores.items()}
            vector = {axis: clamp(value, -1.0, 1.0) for axis, value in translate_legacy_vector(scaled).items()}
            confidence = (
                step.average_confidence if step.average_confidence is not None else DEFAULT_CHOICE_CONFIDENCE
            )
            evidence.extend(evidence_from_vector(vector, WEIGHT_COMPARISON_AGGREGATE * confidence, "ab_sliders"))
        return evidence

    def _color_preferences(self, step: ColorPreferencesAnswers) -> list[Evidence]:
        evidence: list[Evidence] = []

        known_palettes = [name for name in step.selected_palettes if name in PALETTE_CHOICES or name in PALETTES_BY_NAME]
        palette_weight = spread_weight(WEIGHT_PALETTE, len(known_palettes))
        for name in known_palettes:
            vector = PALETTE_CHOICES.get(name) or PALETTES_BY_NAME[name]
            evidence.extend(evidence_from_vector(vector, palette_weight, f"palette:{name}"))

        colors = [color for color in step.custom_colors if HEX_COLOR.match(color)]
        color_weight = spread_weight(WEIGHT_CUSTOM_COLOR, len(colors))
        for color in colors:
            evidence.extend(evidence_from_vector(color_vector(color), color_weight, f"color:{color.lower()}"))
        return evidence

    def _typography_feel(self, step: TypographyFeelAnswers) -> list[Evidence]:
        evidence: list[Evidence] = []

        known_styles = [style for style in step.font_styles if style in FONT_STYLES]
        style_weight = spread_weight(WEIGHT_FONT_STYLE, len(known_styles))
        for style in known_styles:
            evidence.extend(evidence_from_vector(FONT_STYLES[style], style_weight, f"font:{style}"))

        if step.font_weight in FONT_WEIGHTS:
            evidence.extend(evidence_from_vector(FONT_WEIGHTS[step.font_weight], WEIGHT_FONT_WEIGHT, "font_weight"))

        for comparison_id, side in step.comparisons.items():
            vector = TYPE_COMPARISONS.get(comparison_id, {}).get(side)
            if vector:
                evidence.extend(evidence_from_vector(vector, WEIGHT_TYPE_COMPARISON, f"type_comparison:{comparison_id}"))
        return evidence

    def _quick_style(self, step: QuickStyleAnswers) -> list[Evidence]:
        evidence: list[Evidence] = []
        for axis, side in step.choices.items():
            if axis not in AXES_BY_KEY:
                continue
            delta = QUICK_STYLE_DELTA if side == "A" else -QUICK_STYLE_DELTA
            evidence.extend(evidence_from_vector({axis: delta}, WEIGHT_QUICK_STYLE, f"quick_style:{axis}"))
        return evidence

    def _unknown(self, step: UnknownStepAnswers) -> list[Evidence]:
        logger.debug(f"No evidence mapping for step '{step.step_key}'")
        return []
