"""Tests for the style profile service façade."""

import pytest
import redis.asyncio as redis

from style_engine.core.config import settings
from style_engine.models.answers import parse_answers
from style_engine.models.industry import CompletedProject
from style_engine.services.history.comparator import snapshot_from_profile
from style_engine.services.industry.store import IndustryDefaultsStore
from style_engine.services.insights_cache import InsightsCache
from style_engine.services.redis_service import RedisService
from style_engine.services.style_profile import StyleProfileService


class DownClient:
    async def get(self, key):
        raise redis.ConnectionError("connection refused")

    async def mget(self, keys):
        raise redis.ConnectionError("connection refused")

    def pipeline(self, transaction=True):
        raise redis.ConnectionError("connection refused")


@pytest.fixture
def service(industry_store):
    return StyleProfileService(store=industry_store, cache=InsightsCache(maxsize=8))


@pytest.fixture
def offline_service():
    return StyleProfileService(store=IndustryDefaultsStore(client=DownClient()), cache=InsightsCache(maxsize=8))


class TestBuildProfile:
    @pytest.mark.asyncio
    async def test_empty_snapshot_is_neutral(self, service):
        profile = await service.build_profile(None)
        assert profile.signal_count == 0
        assert all(value == 0.0 for value in profile.axes.values())

    @pytest.mark.asyncio
    async def test_industry_seeds_the_prior(self, service):
        profile = await service.build_profile({"business_info": {"industry": "Law firm"}})
        assert profile.signal_count == 0
        assert profile.axes["playful_serious"] == pytest.approx(-0.25)
        assert all(value == 0.0 for value in profile.confidence.values())

    @pytest.mark.asyncio
    async def test_full_questionnaire(self, service, full_responses):
        profile = await service.build_profile(full_responses)
        unseeded = service.profile_from_answers(parse_answers(full_responses))
        assert profile.signal_count == unseeded.signal_count > 0
        assert profile.axes != unseeded.axes
        assert profile.archetypes
        assert all(-1.0 <= value <= 1.0 for value in profile.axes.values())

    @pytest.mark.asyncio
    async def test_rebuild_is_deterministic(self, service, full_responses):
        assert await service.build_profile(full_responses) == await service.build_profile(full_responses)

    @pytest.mark.asyncio
    async def test_store_outage_uses_seed(self, service, offline_service, full_responses):
        assert await offline_service.build_profile(full_responses) == await service.build_profile(full_responses)

    @pytest.mark.asyncio
    async def test_unconfigured_redis_uses_seed(self, monkeypatch):
        monkeypatch.setattr(settings, "REDIS_URL", "")
        unconfigured = StyleProfileService(
            store=IndustryDefaultsStore(service=RedisService()), cache=InsightsCache(maxsize=8)
        )
        profile = await unconfigured.build_profile({"business_info": {"industry": "dental"}})
        assert profile.axes["playful_serious"] == pytest.approx(-0.15)

    @pytest.mark.asyncio
    async def test_out_of_range_numbers_do_not_fail(self, service):
        huge = 10**400
        profile = await service.build_profile(
            {
                "style_direction": {
                    "choices": [{"pairId": "mood-1", "picked": "A", "confidence": huge}],
                    "scores": {"modern_classic": huge, "warm_cool": 5},
                    "averageConfidence": huge,
                }
            }
        )
        assert all(-1.0 <= value <= 1.0 for value in profile.axes.values())


class TestReports:
    @pytest.mark.asyncio
    async def test_style_insights_are_cached(self, service, full_responses):
        profile = await service.build_profile(full_responses)
        answers = parse_answers(full_responses)
        first = service.style_insights(profile, answers)
        assert service.style_insights(profile, answers) is first
        assert len(service.cache) == 1
        assert first.overall_clarity >= 0

    @pytest.mark.asyncio
    async def test_designer_insights(self, service, full_responses):
        profile = await service.build_profile(full_responses)
        current = snapshot_from_profile(profile, "current")
        report = service.designer_insights(current, [snapshot_from_profile(profile, "past", client_name="Smile Co")])
        assert report.uniqueness == "typical"
        assert report.similar_projects[0].client_name == "Smile Co"
        assert service.designer_insights(current, [snapshot_from_profile(profile, "past", client_name="Smile Co")]) == (
            report
        )

    def test_reliability_without_comparisons(self, service):
        reliability = service.reliability({})
        assert reliability.level == "low"
        assert reliability.score == 0.0

    @pytest.mark.asyncio
    async def test_next_pairs_skip_answered(self, service, full_responses):
        answers = parse_answers(full_responses)
        profile = await service.build_profile(full_responses)
        pairs = service.next_pairs(profile, answers, limit=2)
        assert len(pairs) == 2
        assert not {"mood-1", "color-1", "structure-1", "mood-2"} & {pair.id for pair in pairs}


class TestIndustryOperations:
    @pytest.mark.asyncio
    async def test_record_completion(self, service):
        row = await service.record_completion("Dental Clinic", CompletedProject(axes={"warm_cool": 0.3}))
        assert row.industry == "healthcare"
        assert row.sample_size == 1
        defaults = await service.industry_defaults("healthcare")
        assert defaults.sample_size == 1

    @pytest.mark.asyncio
    async def test_record_completion_outage_is_skipped(self, offline_service):
        assert await offline_service.record_completion("retail", CompletedProject()) is None

    @pytest.mark.asyncio
    async def test_smart_suggestions(self, offline_service):
        suggestions = await offline_service.smart_suggestions("Fitness")
        assert suggestions.style_preselections == ["bold", "modern", "playful"]

    @pytest.mark.asyncio
    async def test_comparative_insights_outage(self, offline_service):
        insights = await offline_service.comparative_insights("Quarry")
        assert insights.similar_industries == ["retail", "real estate", "beauty"]


class TestRedisService:
    @pytest.mark.asyncio
    async def test_ping_and_close(self, redis_client):
        service = RedisService("redis://localhost:6379/0")
        service._client = redis_client
        assert await service.ping() is True
        await service.close()
        assert service._client is None

    @pytest.mark.asyncio
    async def test_ping_failure(self):
        service = RedisService("redis://localhost:6379/0")
        service._client = DownPing()
        assert await service.ping() is False

    @pytest.mark.asyncio
    async def test_missing_url_is_a_connection_error(self, monkeypatch):
        monkeypatch.setattr(settings, "REDIS_URL", "")
        service = RedisService()
        with pytest.raises(redis.ConnectionError):
            await service.get_client()
        assert await service.ping() is False

    @pytest.mark.asyncio
    async def test_malformed_url_is_a_connection_error(self):
        service = RedisService("localhost:6379")
        with pytest.raises(redis.ConnectionError):
            await service.get_client()
        assert await service.ping() is False


class DownPing:
    async def ping(self):
        raise redis.ConnectionError("connection refused")
