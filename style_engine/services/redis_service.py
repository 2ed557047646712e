import redis.asyncio as redis
from loguru import logger

from style_engine.core.config import settings


class RedisService:
    """Owns the process-wide Redis client. Created on first use, closed on shutdown."""

    def __init__(self, url: str | None = None) -> None:
        self._url = url or settings.REDIS_URL
        self._client: redis.Redis | None = None
        if not self._url:
            logger.warning("REDIS_URL is not set. Industry defaults will use static seeds until configured.")

    async def get_client(self) -> redis.Redis:
        if self._client is None:
            if not self._url:
                raise redis.ConnectionError("REDIS_URL is not configured")
            logger.info("Creating Redis client for RedisService")
            try:
                self._client = redis.from_url(
                    self._url,
                    decode_responses=True,
                    encoding="utf-8",
                    socket_connect_timeout=5,
                    socket_timeout=5,
                    max_connections=settings.REDIS_MAX_CONNECTIONS,
                    health_check_interval=30,
                    socket_keepalive=True,
                )
            except ValueError as exc:
                raise redis.ConnectionError(f"Invalid REDIS_URL: {exc}") from exc
        return self._client

    async def ping(self) -> bool:
        """Check that Redis answers.

        Returns:
            True if the server replied, False on any connection or protocol error
        """
        try:
            client = await self.get_client()
            return bool(await client.ping())
        except (redis.RedisError, OSError) as exc:
            logger.error(f"Redis ping failed: {exc}")
            return False

    async def close(self) -> None:
        """Close and disconnect the Redis client"""
        if self._client is not None:
            try:
                await self._client.aclose()
                logger.info("RedisService client closed")
            except (redis.RedisError, OSError) as exc:
                logger.warning(f"Failed to close RedisService client: {exc}")
            finally:
                self._client = None


redis_service = RedisService()
