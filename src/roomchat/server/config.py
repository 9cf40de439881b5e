from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Room server config.

    - Loaded from environment variables (`ROOMCHAT_SERVER_*`)
    - Also reads `.env` if present (via pydantic-settings + python-dotenv)
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ROOMCHAT_SERVER_", extra="ignore")

    host: str = "127.0.0.1"
    port: int = 8080

    # Debugging
    debug_log_msgs: bool = False
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
