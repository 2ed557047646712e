"""
Style profile - additive, evidence-based.

Answers become evidence, evidence folds into a profile, and matching and
recommendations read the finished profile without feeding back into it.
"""

from style_engine.services.profile.builder import ProfileBuilder, lowest_confidence_axis, seed_profile
from style_engine.services.profile.evidence import SignalExtractor
from style_engine.services.profile.pairwise import (
    PairwiseChoiceAggregator,
    calculate_average_confidence,
    calculate_reliability,
    rank_pairs_to_probe,
)
from style_engine.services.profile.recommendations import RecommendationDeriver, derive_style_tags
from style_engine.services.profile.similarity import ArchetypeMatcher, cosine_similarity

__all__ = [
    "ProfileBuilder",
    "SignalExtractor",
    "PairwiseChoiceAggregator",
    "ArchetypeMatcher",
    "RecommendationDeriver",
    "calculate_average_confidence",
    "calculate_reliability",
    "cosine_similarity",
    "derive_style_tags",
    "lowest_confidence_axis",
    "rank_pairs_to_probe",
    "seed_profile",
]
