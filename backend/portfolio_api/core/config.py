# portfolio_api/core/config.py
from __future__ import annotations

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


BACKEND_ROOT = Path(__file__).resolve().parents[2]
ENV_PATH = BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    env: str = "dev"
    log_level: str = "INFO"

    # Upstream feed
    medium_feed_url: str = "https://medium.com/feed/@{username}"
    http_user_agent: str = "portfolio-api/1.0 (+https://medium.com)"

    # Feed normalization
    feed_default_limit: int = 10
    # The standalone function endpoint used 150
    feed_description_max_length: int = 200

    # Freshness windows (seconds)
    feed_articles_max_age: int = 3600
    feed_profile_max_age: int = 86400
    feed_stale_while_revalidate: int = 86400

    cors_allow_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH) if ENV_PATH.exists() else None,
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
