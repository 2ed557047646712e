import redis.asyncio as redis
from loguru import logger
from pydantic import ValidationError
from redis.exceptions import WatchError

from style_engine.core.config import settings
from style_engine.models.axes import AXIS_KEYS, clamp, complete_vector, to_wide_scale
from style_engine.models.industry import CompletedProject, IndustryDefaults, utc_now_iso
from style_engine.services.industry.defaults import INDUSTRY_CATEGORIES, fallback_defaults, normalize_industry
from style_engine.services.redis_service import RedisService, redis_service

CONFIDENCE_INCREMENT = 0.02
FIRST_ROW_CONFIDENCE = 0.1


class IndustryDefaultsStoreError(Exception):
    """Raised when the aggregate store cannot be read or written."""


def merge_completion(current: IndustryDefaults | None, industry: str, project: CompletedProject) -> IndustryDefaults:
    """
    Fold one completed project into an industry aggregate.

    Args:
        current: Persisted row, or None when the industry has never been aggregated
        industry: Normalised industry category
        project: What the finished project contributes

    Returns:
        The new row. With an existing row, the project's scores get weight 1/(n+1)
        and the old aggregate keeps the rest.
    """
    new_scores = to_wide_scale(project.axes) if project.axes is not None else None

    if current is None:
        seed = fallback_defaults(industry)
        return seed.model_copy(
            update={
                "sample_size": 1,
                "style_scores": new_scores if new_scores is not None else seed.style_scores,
                "average_budget": project.budget_range or seed.average_budget,
                "average_timeline": project.timeline or seed.average_timeline,
                "confidence_level": FIRST_ROW_CONFIDENCE,
                "last_updated": utc_now_iso(),
            }
        )

    style_scores = complete_vector(current.style_scores)
    if new_scores is not None:
        weight = 1.0 / (current.sample_size + 1)
        style_scores = {
            axis: style_scores[axis] * (1.0 - weight) + new_scores[axis] * weight for axis in AXIS_KEYS
        }
    return current.model_copy(
        update={
            "sample_size": current.sample_size + 1,
            "style_scores": style_scores,
            "confidence_level": clamp(current.confidence_level + CONFIDENCE_INCREMENT, 0.0, 1.0),
            "last_updated": utc_now_iso(),
        }
    )


class IndustryDefaultsStore:
    """
    Redis-backed running averages per industry category.

    Each category is one JSON document under `REDIS_INDUSTRY_KEY + industry`.
    Updates are optimistic transactions (WATCH/MULTI/EXEC) on that key so two
    concurrent completions never overwrite each other.
    """

    KEY_PREFIX = settings.REDIS_INDUSTRY_KEY

    def __init__(
        self,
        client: redis.Redis | None = None,
        service: RedisService | None = None,
        max_retries: int | None = None,
    ) -> None:
        self._client = client
        self._service = service or redis_service
        self.max_retries = max_retries if max_retries is not None else settings.INDUSTRY_UPDATE_MAX_RETRIES

    async def _get_client(self) -> redis.Redis:
        if self._client is None:
            self._client = await self._service.get_client()
        return self._client

    def _format_key(self, industry: str) -> str:
        return f"{self.KEY_PREFIX}{industry}"

    @staticmethod
    def _decode(industry: str, raw: str | None) -> IndustryDefaults | None:
        if not raw:
            return None
        try:
            return IndustryDefaults.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning(f"Discarding unreadable industry row for '{industry}': {exc.error_count()} errors")
            return None

    async def load(self, industry: str) -> IndustryDefaults | None:
        """Persisted row for a category, or None when there is none."""
        category = normalize_industry(industry)
        try:
            client = await self._get_client()
            raw = await client.get(self._format_key(category))
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to read industry defaults for '{category}': {exc}")
            raise IndustryDefaultsStoreError(f"Could not read industry defaults for '{category}'") from exc
        return self._decode(category, raw)

    async def get(self, industry: str) -> IndustryDefaults:
        """
        Aggregate row for an industry, falling back to the static seed.

        Args:
            industry: Free-text industry; normalised before lookup

        Returns:
            The persisted aggregate if present, else the seed row (confidence 0.3)

        Raises:
            IndustryDefaultsStoreError: Redis could not be reached
        """
        row = await self.load(industry)
        if row is not None:
            return row
        return fallback_defaults(industry)

    async def update(self, industry: str, project: CompletedProject) -> IndustryDefaults:
        """
        Fold a completed project into its industry aggregate.

        Args:
            industry: Free-text industry; normalised before the write
            project: Scores, budget and timeline of the finished project

        Returns:
            The row as written

        Raises:
            IndustryDefaultsStoreError: Redis failed, or the key kept changing
                underneath us for every retry
        """
        category = normalize_industry(industry)
        key = self._format_key(category)
        try:
            client = await self._get_client()
            for attempt in range(1, self.max_retries + 1):
                async with client.pipeline(transaction=True) as pipe:
                    try:
                        await pipe.watch(key)
                        current = self._decode(category, await pipe.get(key))
                        updated = merge_completion(current, category, project)
                        pipe.multi()
                        pipe.set(key, updated.model_dump_json(by_alias=True))
                        await pipe.execute()
                    except WatchError:
                        logger.debug(f"Concurrent update on '{key}', retrying ({attempt}/{self.max_retries})")
                        continue
                logger.info(f"Updated industry defaults for '{category}' (sample size {updated.sample_size})")
                return updated
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to update industry defaults for '{category}': {exc}")
            raise IndustryDefaultsStoreError(f"Could not update industry defaults for '{category}'") from exc

        logger.error(f"Gave up updating industry defaults for '{category}' after {self.max_retries} conflicts")
        raise IndustryDefaultsStoreError(f"Too many concurrent updates for industry '{category}'")

    async def get_all(self) -> list[IndustryDefaults]:
        """Every category's current row (persisted or seed), in category order."""
        keys = [self._format_key(category) for category in INDUSTRY_CATEGORIES]
        try:
            client = await self._get_client()
            raws = await client.mget(keys)
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Failed to read industry defaults: {exc}")
            raise IndustryDefaultsStoreError("Could not read industry defaults") from exc

        rows = []
        for category, raw in zip(INDUSTRY_CATEGORIES, raws):
            rows.append(self._decode(category, raw) or fallback_defaults(category))
        return rows
