"""Shared fixtures for the style engine test suite."""

import pytest
from fakeredis import FakeServer
from fakeredis.aioredis import FakeRedis

from style_engine.models.comparison import ComparisonPair, PairOption
from style_engine.services.industry.store import IndustryDefaultsStore

# ── Redis ────────────────────────────────────────────────────────────────


@pytest.fixture
def redis_server():
    return FakeServer()


@pytest.fixture
def redis_client(redis_server):
    """Async fakeredis client (decode_responses=True like production)."""
    return FakeRedis(server=redis_server, decode_responses=True)


@pytest.fixture
def industry_store(redis_client):
    return IndustryDefaultsStore(client=redis_client)


# ── Comparison pairs ─────────────────────────────────────────────────────


def make_pair(pair_id: str, a: dict[str, float], b: dict[str, float] | None = None) -> ComparisonPair:
    return ComparisonPair(
        id=pair_id,
        category="test",
        question=f"Question {pair_id}",
        option_a=PairOption(label="A", deltas=a),
        option_b=PairOption(label="B", deltas=b or {axis: -delta for axis, delta in a.items()}),
        target_dims=list(a),
    )


@pytest.fixture
def classic_pair():
    """Option A pulls 20 points toward Classic."""
    return make_pair("classic", {"modern_classic": -20})


@pytest.fixture
def modern_pair():
    """Option A pulls 20 points toward Modern."""
    return make_pair("modern", {"modern_classic": 20})


@pytest.fixture
def warm_pair():
    return make_pair("warm", {"warm_cool": 15, "playful_serious": 5})


# ── Questionnaire answers ────────────────────────────────────────────────


@pytest.fixture
def full_responses():
    """A completed questionnaire snapshot as the wizard stores it (camelCase)."""
    return {
        "business_info": {"industry": "Dental Clinic", "description": "A friendly, modern practice"},
        "project_scope": {"deliverables": ["logo", "social_templates"]},
        "style_direction": {
            "selectedStyles": ["minimalist"],
            "choices": [
                {"pairId": "mood-1", "picked": "A", "confidence": 0.9},
                {"pairId": "color-1", "picked": "B", "confidence": 0.7},
                {"pairId": "structure-1", "picked": "skip", "confidence": 0.0},
                {"pairId": "mood-2", "picked": "A", "confidence": 0.8},
            ],
        },
        "color_preferences": {"selectedPalettes": ["Ocean", "Monochrome"], "customColors": ["#1E40AF"]},
        "typography_feel": {
            "fontStyles": ["sans-serif"],
            "fontWeight": "light",
            "comparisons": {"serif-vs-sans": "B"},
        },
        "budget": {"range": "$5k"},
    }
