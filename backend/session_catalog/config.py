"""
Environment-driven settings.

Values come from the process environment, optionally seeded from a .env file.
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///./sessions.db"
API_KEY_HEADER = "X-API-Key"


class ConfigError(RuntimeError):
    """Raised when required settings are missing or malformed."""


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name, "")
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    api_key: str
    database_url: str = DEFAULT_DATABASE_URL
    sql_echo: bool = False
    log_level: str = "INFO"
    cors_origins: List[str] = field(default_factory=list)
    host: str = "0.0.0.0"
    port: int = 8080

    def __post_init__(self):
        if not self.api_key:
            raise ConfigError("API_KEY must be set to a non-empty value")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build settings from the environment (and .env, if present)."""
    load_dotenv(env_file)

    port_raw = os.getenv("PORT", "8080")
    try:
        port = int(port_raw)
    except ValueError:
        raise ConfigError(f"PORT must be an integer, got {port_raw!r}")

    return Settings(
        api_key=os.getenv("API_KEY", ""),
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        sql_echo=_env_bool("SQL_ECHO"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        cors_origins=_env_list("CORS_ORIGINS"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
