"""Tests for the insights memo cache and its input fingerprint."""

from style_engine.models.profile import StyleProfile
from style_engine.services.insights_cache import InsightsCache, fingerprint


class TestFingerprint:
    def test_dict_order_does_not_matter(self):
        assert fingerprint({"a": 1, "b": [1, 2]}) == fingerprint({"b": [1, 2], "a": 1})

    def test_models_and_their_dumps_agree(self):
        profile = StyleProfile(signal_count=4)
        assert fingerprint(profile) == fingerprint(profile.model_dump(mode="json", by_alias=True))

    def test_different_inputs_differ(self):
        assert fingerprint("style-insights", StyleProfile()) != fingerprint("designer-insights", StyleProfile())
        assert fingerprint(StyleProfile(signal_count=1)) != fingerprint(StyleProfile(signal_count=2))


class TestInsightsCache:
    def test_least_recently_used_is_evicted(self):
        cache = InsightsCache(maxsize=2)
        cache.put("a", 1)
        cache.put("b", 2)
        assert cache.get("a") == 1
        cache.put("c", 3)
        assert "a" in cache
        assert "b" not in cache
        assert len(cache) == 2

    def test_get_or_compute_runs_once(self):
        cache = InsightsCache(maxsize=4)
        calls = []

        def compute():
            calls.append(1)
            return "report"

        assert cache.get_or_compute("key", compute) == "report"
        assert cache.get_or_compute("key", compute) == "report"
        assert len(calls) == 1

    def test_clear(self):
        cache = InsightsCache(maxsize=4)
        cache.put("a", 1)
        cache.clear()
        assert cache.get("a") is None
        assert len(cache) == 0
