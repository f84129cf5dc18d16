"""Logging helpers shared by the CLI and library modules.

The library only creates module loggers; handlers are installed by
``configure_logging`` when running as a program.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from ..constants import Constants

_HANDLER_NAME = "browsergate-console"


def _level_from_env() -> int:
    name = os.environ.get(Constants.ENV_LOG_LEVEL, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: Optional[int] = None) -> None:
    """Install a console handler on the root logger.

    The level comes from ``level`` or the BROWSERGATE_LOG_LEVEL environment
    variable. Repeated calls only adjust the level.
    """
    root = logging.getLogger()
    root.setLevel(level if level is not None else _level_from_env())
    if any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(Constants.LOG_FORMAT))
    root.addHandler(handler)


def add_file_handler(path: str) -> logging.Handler:
    """Also write log records to ``path``."""
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(Constants.LOG_FILE_FORMAT))
    logging.getLogger().addHandler(handler)
    return handler


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when ``logger`` would emit DEBUG records."""
    return logger.isEnabledFor(logging.DEBUG)
