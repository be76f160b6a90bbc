"""Structured logging for the selector condition and its tooling."""

import logging
import os
import sys

from dotenv import load_dotenv

load_dotenv()

_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def _level_from(name: str | None) -> int:
    return getattr(logging, (name or "INFO").upper(), logging.INFO)


def get_logger(name: str) -> logging.Logger:
    """Return a pre-configured logger for the given module name."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(_level_from(os.getenv("LOG_LEVEL")))
    return logger


def set_level(level: str, *names: str) -> None:
    """Override the level of already created loggers, e.g. from a --log-level flag."""
    for name in names:
        logging.getLogger(name).setLevel(_level_from(level))
