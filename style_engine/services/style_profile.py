from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from style_engine.models.answers import (
    BusinessInfoAnswers,
    StepAnswers,
    StyleDirectionAnswers,
    find_step,
    parse_answers,
)
from style_engine.models.comparison import ComparisonPair, Reliability
from style_engine.models.history import DesignerInsights, ProfileSnapshot
from style_engine.models.industry import (
    CompletedProject,
    ComparativeInsights,
    IndustryDefaults,
    SmartSuggestions,
)
from style_engine.models.insights import StyleInsightsReport
from style_engine.models.profile import StyleProfile
from style_engine.services.history.comparator import HistoricalComparator
from style_engine.services.industry.defaults import INDUSTRY_CATEGORIES, fallback_defaults, normalize_industry
from style_engine.services.industry.store import IndustryDefaultsStore, IndustryDefaultsStoreError
from style_engine.services.industry.suggestions import generate_comparative_insights, generate_smart_suggestions
from style_engine.services.insights.generator import InsightGenerator
from style_engine.services.insights_cache import InsightsCache, fingerprint
from style_engine.services.profile.builder import ProfileBuilder, seed_profile
from style_engine.services.profile.evidence import SignalExtractor
from style_engine.services.profile.pairwise import calculate_reliability, rank_pairs_to_probe


class StyleProfileService:
    """
    Entry point for the surrounding app.

    Profiles are always rebuilt from the full answer snapshot. Reports are
    memoised in an injected cache keyed by a fingerprint of their inputs.
    Industry aggregates are best effort: a store outage degrades to the static
    seeds on read and is logged and skipped on write.
    """

    def __init__(
        self,
        store: IndustryDefaultsStore | None = None,
        extractor: SignalExtractor | None = None,
        builder: ProfileBuilder | None = None,
        insights: InsightGenerator | None = None,
        comparator: HistoricalComparator | None = None,
        cache: InsightsCache | None = None,
    ):
        self.store = store or IndustryDefaultsStore()
        self.extractor = extractor or SignalExtractor()
        self.builder = builder or ProfileBuilder()
        self.insights = insights or InsightGenerator()
        self.comparator = comparator or HistoricalComparator()
        self.cache = cache or InsightsCache()

    async def industry_defaults(self, industry: str | None) -> IndustryDefaults:
        """Aggregate row for the industry, or its seed when the store is unavailable."""
        category = normalize_industry(industry)
        try:
            return await self.store.get(category)
        except IndustryDefaultsStoreError as exc:
            logger.warning(f"Using seed defaults for '{category}': {exc}")
            return fallback_defaults(category)

    def profile_from_answers(
        self, answers: Mapping[str, StepAnswers], prior: StyleProfile | None = None
    ) -> StyleProfile:
        """Synchronous core: extract evidence from parsed answers and fold it onto the prior."""
        evidence = self.extractor.extract_all(answers)
        return self.builder.fold(prior, evidence)

    async def build_profile(self, responses: Mapping[str, Any] | None) -> StyleProfile:
        """
        Build the live style profile for a questionnaire snapshot.

        Args:
            responses: Raw step-key → payload map as stored by the wizard

        Returns:
            StyleProfile seeded from the client's industry (when one was given)
        """
        answers = parse_answers(dict(responses or {}))
        business = find_step(answers, BusinessInfoAnswers)
        prior = None
        if business is not None and business.industry:
            prior = seed_profile(await self.industry_defaults(business.industry))
        profile = self.profile_from_answers(answers, prior)
        logger.debug(f"Built style profile from {len(answers)} steps, {profile.signal_count} signals")
        return profile

    def style_insights(
        self, profile: StyleProfile, answers: Mapping[str, StepAnswers] | None = None
    ) -> StyleInsightsReport:
        answers = dict(answers or {})
        key = fingerprint("style-insights", profile, answers)
        return self.cache.get_or_compute(key, lambda: self.insights.generate(profile, answers))

    def designer_insights(self, current: ProfileSnapshot, history: Sequence[ProfileSnapshot]) -> DesignerInsights:
        history = list(history)
        key = fingerprint("designer-insights", current, history)
        return self.cache.get_or_compute(key, lambda: self.comparator.generate_comparison_insights(current, history))

    @staticmethod
    def reliability(answers: Mapping[str, StepAnswers]) -> Reliability:
        """Reliability of the comparison step; low when no comparisons were made."""
        step = find_step(dict(answers), StyleDirectionAnswers)
        return calculate_reliability(step.choices if step else [])

    @staticmethod
    def next_pairs(profile: StyleProfile, answers: Mapping[str, StepAnswers], limit: int = 3) -> list[ComparisonPair]:
        """Comparison pairs worth asking next, most informative first."""
        step = find_step(dict(answers), StyleDirectionAnswers)
        return rank_pairs_to_probe(profile.confidence, step.choices if step else [])[:limit]

    async def record_completion(self, industry: str | None, project: CompletedProject) -> IndustryDefaults | None:
        """
        Feed a finished project into its industry aggregate.

        Returns:
            The updated row, or None if the store could not be written
        """
        category = normalize_industry(industry)
        try:
            return await self.store.update(category, project)
        except IndustryDefaultsStoreError as exc:
            logger.warning(f"Skipped industry defaults update for '{category}': {exc}")
            return None

    async def smart_suggestions(self, industry: str | None) -> SmartSuggestions:
        return generate_smart_suggestions(await self.industry_defaults(industry))

    async def comparative_insights(self, industry: str | None) -> ComparativeInsights:
        category = normalize_industry(industry)
        try:
            rows = await self.store.get_all()
        except IndustryDefaultsStoreError as exc:
            logger.warning(f"Comparing '{category}' against seed defaults only: {exc}")
            rows = [fallback_defaults(name) for name in INDUSTRY_CATEGORIES]
        return generate_comparative_insights(category, rows)
