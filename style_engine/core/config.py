from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    REDIS_URL: str = "redis://redis:6379/0"
    # Maximum number of connections Redis client will open per process
    REDIS_MAX_CONNECTIONS: int = 20
    REDIS_INDUSTRY_KEY: str = "style_engine:industry:"
    # Optimistic transaction retries before an industry update gives up
    INDUSTRY_UPDATE_MAX_RETRIES: int = 5

    # Pairwise comparison tuning. Defaults are hand-tuned, not derived.
    PAIRWISE_RECENCY_BASE: float = 1.6
    PAIRWISE_CONFIDENCE_FLOOR: float = 0.3

    INSIGHTS_CACHE_SIZE: int = 100


settings = Settings()
