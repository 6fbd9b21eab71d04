from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_QUOTE_CHAR = '"'

LOGGER_NAME = "slang"


def get_log_level() -> int:
    raw = os.environ.get("SLANG_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    # getLevelName returns "Level X" for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_quote_char() -> str:
    raw = os.environ.get("SLANG_QUOTE_CHAR")
    if not raw:
        return _DEFAULT_QUOTE_CHAR
    return raw[0]


def configure_logging(level: int | None = None) -> logging.Logger:
    """Apply `level` (or SLANG_LOG_LEVEL) to the package logger and return it."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(get_log_level() if level is None else level)
    return logger
