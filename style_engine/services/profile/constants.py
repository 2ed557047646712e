from typing import Final

# Evidence weights (how decisive each answer type is)
WEIGHT_DESCRIPTION_KEYWORD: Final[float] = 0.15
WEIGHT_DELIVERABLE: Final[float] = 0.15
WEIGHT_STYLE_CARD: Final[float] = 0.6
WEIGHT_COMPARISON_AGGREGATE: Final[float] = 0.85  # Scaled by average reported confidence
WEIGHT_PALETTE: Final[float] = 0.45
WEIGHT_CUSTOM_COLOR: Final[float] = 0.25
WEIGHT_FONT_STYLE: Final[float] = 0.5
WEIGHT_FONT_WEIGHT: Final[float] = 0.35
WEIGHT_TYPE_COMPARISON: Final[float] = 0.4
WEIGHT_QUICK_STYLE: Final[float] = 0.5

# Confidence assumed when a comparison step reports none
DEFAULT_CHOICE_CONFIDENCE: Final[float] = 0.8

# Multi-select spreading: more chips than this share the weight
MULTI_SELECT_FULL_WEIGHT_LIMIT: Final[int] = 3

# Legacy slider totals run -25..25
LEGACY_SLIDER_RANGE: Final[float] = 25.0

# Quick-style A/B pull (A is the positive pole)
QUICK_STYLE_DELTA: Final[float] = 0.6

# Confidence growth: remaining gap shrinks by 1 - exp(-rate * weight)
CONFIDENCE_GROWTH_RATE: Final[float] = 1.5

# Pairwise aggregation
PAIRWISE_RECENCY_SPAN: Final[float] = 2.0  # Exponent reached by the last choice
RELIABILITY_FULL_CHOICES: Final[int] = 8
RELIABILITY_COMPLETENESS_WEIGHT: Final[float] = 0.4
RELIABILITY_CONFIDENCE_WEIGHT: Final[float] = 0.6

# Recommendation derivation
RECOMMENDATION_ALIGNMENT_MIN: Final[float] = 0.15
RECOMMENDATION_CONFIDENCE_MIN: Final[float] = 0.3
RECOMMENDATION_REASON_PARTS: Final[int] = 2
LAYOUT_STRONG_LEAN: Final[float] = 0.5
PERSONALITY_LEAN: Final[float] = 0.3
PERSONALITY_MAX_WORDS: Final[int] = 5
SURPRISE_FONT_POSITION: Final[float] = 0.6

# Style tags, authored on the wide scale
TAG_STRONG_LEAN: Final[float] = 15.0
TAG_LEAN: Final[float] = 10.0
TAG_BALANCED_BAND: Final[float] = 5.0
