"""Logger wiring for the probe applications."""

from __future__ import annotations

import logging
import sys

from core.settings import LoggingSettings

LOGGER_NAME = "probe"
_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(settings: LoggingSettings) -> logging.Logger:
    """Attach exactly one handler to the ``probe`` logger.

    When logging is disabled a NullHandler is installed, so nothing but the
    probe's own output ever reaches stdout or stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = False

    if not settings.enabled:
        logger.addHandler(logging.NullHandler())
        return logger

    if settings.path is not None:
        settings.path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(settings.path, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(settings.level)
    return logger
