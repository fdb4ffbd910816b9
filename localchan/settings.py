# localchan/settings.py
from __future__ import annotations

from pydantic import BaseModel
import os


_TRUTHY = ("1", "true", "yes", "y", "on")


class Settings(BaseModel):
    APP_NAME: str = "localchan"

    # Logging
    LOG_LEVEL: str = "INFO"

    # Channels
    TRACE_CHANNELS: bool = False
    WRAP_MAPPING_ERRORS: bool = True


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def get_settings() -> Settings:
    return Settings(
        APP_NAME=os.getenv("APP_NAME", "localchan"),
        LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
        TRACE_CHANNELS=_flag("TRACE_CHANNELS", "false"),
        WRAP_MAPPING_ERRORS=_flag("WRAP_MAPPING_ERRORS", "true"),
    )
