from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


@dataclass(frozen=True)
class Settings:
    # Required at serve time
    db_path: str | None
    profiles_url: str | None

    # Server
    host: str
    port: int
    allowed_origins: list[str]

    log_level: str

    # Scraping
    github_base_url: str
    http_timeout_seconds: int
    scrape_concurrency: int


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        db_path=os.getenv("DB_PATH") or os.getenv("DATABASE_URL"),
        profiles_url=os.getenv("PROFILES_URL") or os.getenv("URL"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "3005")),
        allowed_origins=_split_csv(os.getenv("ALLOWED_ORIGINS", "*")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        github_base_url=os.getenv("GITHUB_BASE_URL", "https://github.com").rstrip("/"),
        http_timeout_seconds=int(os.getenv("HTTP_TIMEOUT_SECONDS", "20")),
        scrape_concurrency=int(os.getenv("SCRAPE_CONCURRENCY", "4")),
    )


def require_runtime_settings(settings: Settings) -> Settings:
    """Fail fast when the service cannot run without a value."""
    missing = []
    if not settings.db_path:
        missing.append("DB_PATH")
    if not settings.profiles_url:
        missing.append("PROFILES_URL")
    if missing:
        raise RuntimeError(
            f"Missing required environment variables: {', '.join(missing)}"
        )
    return settings
