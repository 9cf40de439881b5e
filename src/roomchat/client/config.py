from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .avatar import AVATAR_URL_TEMPLATE, PLACEHOLDER_AVATAR


class Settings(BaseSettings):
    """
    Client runtime config.

    - Loaded from environment variables (`ROOMCHAT_*`)
    - Also reads `.env` if present (via pydantic-settings + python-dotenv)
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ROOMCHAT_", extra="ignore")

    ws_url: str = "ws://127.0.0.1:8080/ws"

    # Identity source; the CLI's --username wins over this.
    username: str | None = None

    avatar_url_template: str = AVATAR_URL_TEMPLATE
    placeholder_avatar: str = PLACEHOLDER_AVATAR

    # Outbound frames buffered before the socket drains them
    outbox_size: int = 64
    # How long shutdown waits for the outbox to flush
    drain_timeout_s: float = 1.0

    # Debugging
    debug_log_msgs: bool = False
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
