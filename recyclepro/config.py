"""Application configuration loaded from environment variables."""

import logging
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_log_level(name: str, default: str) -> int:
    raw = (os.getenv(name) or default).strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.INFO


class Settings:
    LOG_LEVEL: int = _env_log_level("LOG_LEVEL", "INFO")
    LOG_JSON: bool = _env_bool("LOG_JSON", True)

    ROOT_PATH: str = os.getenv("ROOT_PATH", "")
    HOST: str = os.getenv("HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PORT", "8000"))

    POPULAR_ITEMS_LIMIT: int = int(os.getenv("POPULAR_ITEMS_LIMIT", "10"))
    LOG_ADDRESS_MAX_LEN: int = int(os.getenv("LOG_ADDRESS_MAX_LEN", "40"))


settings = Settings()
