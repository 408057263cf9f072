"""
kba_plugin.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the kernel, persistence and CI tooling.
- Offer a cached settings instance for entrypoints.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Every field can be overridden with a `KBA_`-prefixed environment variable,
    e.g. `KBA_DATABASE_URL` or `KBA_CI_PHP_VERSIONS='["8.2"]'`.
    """

    model_config = SettingsConfigDict(env_prefix="KBA_", case_sensitive=False)

    # `dev` and `test` install plugin migrations automatically on kernel boot.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "kba-plugin"
    log_level: str = "INFO"

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./kba.db"

    # CI matrix generation (paths are relative to the repository root)
    ci_php_versions: list[str] = Field(default_factory=lambda: ["8.2", "8.3"])
    ci_plugins_dir: str = "custom/plugins"
    ci_apps_dir: str = "custom/apps"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests build `Settings(...)` explicitly instead of going through the cache.
