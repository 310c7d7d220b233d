"""Runtime configuration, read once from the environment at startup."""

import os
import logging
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    bitscrunch_api_key: Optional[str] = None
    bitscrunch_api_base_url: Optional[str] = None
    request_timeout: Optional[float] = None  # seconds; None waits indefinitely
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        return float(value)
    except ValueError:
        logger.warning(f"{name}={value!r} is not a number; no timeout will be applied")
        return None


def _int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"{name}={value!r} is not an integer; using {default}")
        return default


def _log_level(name: str, default: str = "INFO") -> str:
    value = os.getenv(name, default).strip().upper()
    # getLevelName maps known level names to their numeric value
    if not isinstance(logging.getLevelName(value), int):
        logger.warning(f"{name}={value!r} is not a logging level; using {default}")
        return default
    return value


def load_settings() -> Settings:
    """
    Build settings from environment variables.

    A ``.env`` file in the working directory is loaded first if present;
    variables already set in the environment take precedence.
    """
    load_dotenv()

    settings = Settings(
        bitscrunch_api_key=os.getenv("BITSCRUNCH_API_KEY"),
        bitscrunch_api_base_url=os.getenv("BITSCRUNCH_API_BASE_URL"),
        request_timeout=_optional_float("BITSCRUNCH_TIMEOUT_SECONDS"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int("PORT", 3000),
        log_level=_log_level("LOG_LEVEL"),
    )

    if not settings.bitscrunch_api_key:
        logger.warning("BITSCRUNCH_API_KEY not found in environment variables")
    if not settings.bitscrunch_api_base_url:
        logger.warning("BITSCRUNCH_API_BASE_URL not found in environment variables")

    return settings


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()
