# localchan/log.py
from __future__ import annotations

import logging
from typing import Optional

from localchan.settings import Settings, get_settings

LOGGER_NAME = "localchan"
_HANDLER_ATTR = "_localchan_handler"


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Set the package logger level and attach a single stream handler.
    Calling it again only updates the level.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.LOG_LEVEL.upper())

    if not any(getattr(h, _HANDLER_ATTR, False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(f"%(asctime)s {settings.APP_NAME} %(levelname)s %(name)s: %(message)s")
        )
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    return logger
