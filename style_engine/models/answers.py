"""
Questionnaire step payloads as a tagged union keyed by step key.

The wizard is resumable, so any step may be half filled. Validators here are
lenient: a malformed item is dropped from its field, and a payload that cannot
be read at all becomes an empty variant. Nothing in this module raises for
partial data.
"""

import math
from typing import Annotated, Any, Literal, TypeVar, Union

from loguru import logger
from pydantic import BeforeValidator, Field, TypeAdapter, ValidationError

from style_engine.models.base import CamelModel
from style_engine.models.comparison import ComparisonChoice


def _text_or_none(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _finite_float(value: Any) -> float | None:
    """Numeric JSON value as a finite float, None for anything else (bools, huge ints, NaN)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _number_map(value: Any) -> dict[str, float]:
    if not isinstance(value, dict):
        return {}
    numbers = {}
    for key, raw in value.items():
        number = _finite_float(raw)
        if number is not None:
            numbers[str(key)] = number
    return numbers


def _side_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(key): side for key, side in value.items() if side in ("A", "B")}


def _choice_list(value: Any) -> list[ComparisonChoice]:
    if not isinstance(value, (list, tuple)):
        return []
    choices = []
    for raw in value:
        if isinstance(raw, ComparisonChoice):
            choices.append(raw)
            continue
        try:
            choices.append(ComparisonChoice.model_validate(raw))
        except ValidationError:
            logger.debug(f"Dropping malformed comparison choice: {raw!r}")
    return choices


def _optional_fraction(value: Any) -> float | None:
    number = _finite_float(value)
    if number is None:
        return None
    return min(1.0, max(0.0, number))


Text = Annotated[str | None, BeforeValidator(_text_or_none)]
StringList = Annotated[list[str], BeforeValidator(_string_list)]
NumberMap = Annotated[dict[str, float], BeforeValidator(_number_map)]
SideMap = Annotated[dict[str, str], BeforeValidator(_side_map)]
ChoiceList = Annotated[list[ComparisonChoice], BeforeValidator(_choice_list)]
Fraction = Annotated[float | None, BeforeValidator(_optional_fraction)]


class BusinessInfoAnswers(CamelModel):
    step: Literal["business_info"] = "business_info"
    industry: Text = None
    description: Text = None


class ProjectScopeAnswers(CamelModel):
    step: Literal["project_scope"] = "project_scope"
    deliverables: StringList = Field(default_factory=list)


class StyleDirectionAnswers(CamelModel):
    step: Literal["style_direction"] = "style_direction"
    selected_styles: StringList = Field(default_factory=list)
    choices: ChoiceList = Field(default_factory=list)
    # Legacy slider totals from older wizard versions, -25..25 per axis
    scores: NumberMap = Field(default_factory=dict)
    average_confidence: Fraction = None


class ColorPreferencesAnswers(CamelModel):
    step: Literal["color_preferences"] = "color_preferences"
    selected_palettes: StringList = Field(default_factory=list)
    custom_colors: StringList = Field(default_factory=list)


class TypographyFeelAnswers(CamelModel):
    step: Literal["typography_feel"] = "typography_feel"
    font_styles: StringList = Field(default_factory=list)
    font_weight: Text = None
    comparisons: SideMap = Field(default_factory=dict)


class QuickStyleAnswers(CamelModel):
    step: Literal["quick_style"] = "quick_style"
    choices: SideMap = Field(default_factory=dict)


class UnknownStepAnswers(CamelModel):
    """Any step key the engine has no mapping for. Carries no evidence."""

    step: Literal["unknown"] = "unknown"
    step_key: str = ""


StepAnswers = Annotated[
    Union[
        BusinessInfoAnswers,
        ProjectScopeAnswers,
        StyleDirectionAnswers,
        ColorPreferencesAnswers,
        TypographyFeelAnswers,
        QuickStyleAnswers,
        UnknownStepAnswers,
    ],
    Field(discriminator="step"),
]

STEP_VARIANTS: tuple[type[CamelModel], ...] = (
    BusinessInfoAnswers,
    ProjectScopeAnswers,
    StyleDirectionAnswers,
    ColorPreferencesAnswers,
    TypographyFeelAnswers,
    QuickStyleAnswers,
)
KNOWN_STEP_KEYS: frozenset[str] = frozenset(variant.model_fields["step"].default for variant in STEP_VARIANTS)

_step_adapter: TypeAdapter = TypeAdapter(StepAnswers)

StepT = TypeVar("StepT", bound=CamelModel)


def parse_step(step_key: str, payload: Any) -> StepAnswers:
    """
    Parse one raw step payload into its variant.

    Unknown keys map to `UnknownStepAnswers`; unreadable payloads map to the
    empty variant for that key.
    """
    if step_key not in KNOWN_STEP_KEYS:
        return UnknownStepAnswers(step_key=step_key)

    data = dict(payload) if isinstance(payload, dict) else {}
    data["step"] = step_key
    try:
        return _step_adapter.validate_python(data)
    except ValidationError as exc:
        logger.debug(f"Unreadable payload for step '{step_key}', treating as empty: {exc.error_count()} errors")
        return _step_adapter.validate_python({"step": step_key})


def parse_answers(responses: dict[str, Any] | None) -> dict[str, StepAnswers]:
    """Parse a step-key → payload snapshot, preserving the snapshot's key order."""
    if not responses:
        return {}
    return {str(key): parse_step(str(key), payload) for key, payload in responses.items()}


def find_step(answers: dict[str, StepAnswers], variant: type[StepT]) -> StepT | None:
    for step in answers.values():
        if isinstance(step, variant):
            return step
    return None
