"""
Industry defaults: per-category running averages with static seeds.

Every industry string entering the engine goes through `normalize_industry`
so aggregates never fragment across spellings of the same category.
"""

from style_engine.services.industry.defaults import INDUSTRY_CATEGORIES, fallback_defaults, normalize_industry
from style_engine.services.industry.store import IndustryDefaultsStore, IndustryDefaultsStoreError, merge_completion
from style_engine.services.industry.suggestions import generate_comparative_insights, generate_smart_suggestions

__all__ = [
    "INDUSTRY_CATEGORIES",
    "IndustryDefaultsStore",
    "IndustryDefaultsStoreError",
    "fallback_defaults",
    "generate_comparative_insights",
    "generate_smart_suggestions",
    "merge_completion",
    "normalize_industry",
]
