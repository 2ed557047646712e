import hashlib
import json
from collections.abc import Callable
from typing import Any, TypeVar

from cachetools import LRUCache
from loguru import logger
from pydantic import BaseModel

from style_engine.core.config import settings

T = TypeVar("T")


def _plain(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, dict):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def fingerprint(*parts: Any) -> str:
    """
    Stable key for a combination of profiles, snapshots and answers.

    Models are dumped to JSON with sorted keys, so equal inputs always give the
    same digest regardless of dict ordering.
    """
    canonical = json.dumps([_plain(part) for part in parts], sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class InsightsCache:
    """
    Bounded in-process memo for computed insight reports.

    Injected where it is used rather than living at module level, so each
    owner decides its size and lifetime.
    """

    def __init__(self, maxsize: int | None = None) -> None:
        self._entries: LRUCache = LRUCache(maxsize=maxsize or settings.INSIGHTS_CACHE_SIZE)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any | None:
        return self._entries.get(key)

    def put(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def get_or_compute(self, key: str, compute: Callable[[], T]) -> T:
        """Cached value for key, computing and storing it on a miss."""
        if key in self._entries:
            return self._entries[key]
        logger.debug(f"Insights cache miss for {key[:12]}")
        value = compute()
        self._entries[key] = value
        return value

    def clear(self) -> None:
        self._entries.clear()
