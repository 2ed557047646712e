"""
Core constants used across the engine. Keep these simple and documented.
"""

from typing import Final

# Canonical scale every computation runs on
NARROW_SCALE_MAX: Final[float] = 1.0
# Display / persistence scale for pairwise scores and industry aggregates
WIDE_SCALE_MAX: Final[float] = 100.0
WIDE_PER_NARROW: Final[float] = WIDE_SCALE_MAX / NARROW_SCALE_MAX

# Confidence thresholds shared by insights and derived area lists
HIGH_CONFIDENCE_THRESHOLD: Final[float] = 0.7
LOW_CONFIDENCE_THRESHOLD: Final[float] = 0.35
