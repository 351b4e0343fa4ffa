"""Centralized logging configuration for the ``spend_summary`` package.

- ``configure_logging(...)`` attaches a single ``StreamHandler`` to the package
  root logger (``"spend_summary"``). Entrypoints (the CLI) call it once.
- ``get_logger(name)`` returns a module logger and makes sure the package root
  has a ``NullHandler`` until an application configures output.

Library modules never attach handlers of their own.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "spend_summary"
_LEVEL_ENV_VAR = "SPEND_SUMMARY_LOG_LEVEL"
_CONFIGURED = False


def _level_from(value: int | str | None) -> int | None:
    """Return the numeric level ``value`` denotes, or ``None`` if it names none."""

    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    name = value.strip().upper()
    if name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name)


def _resolve_level(level: int | str | None) -> int:
    # Explicit argument, then the environment, then INFO. Unknown names fall through.
    for candidate in (level, os.getenv(_LEVEL_ENV_VAR)):
        resolved = _level_from(candidate)
        if resolved is not None:
            return resolved
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configure the package root logger exactly once.

    Parameters
    ----------
    level:
        Logging level as ``int`` or level name (e.g. ``"DEBUG"``). When
        ``None`` the ``SPEND_SUMMARY_LOG_LEVEL`` environment variable is used,
        falling back to ``logging.INFO``.
    fmt:
        Optional format string. Defaults to
        ``"%(asctime)s %(name)s %(levelname)s %(message)s"``.
    stream:
        Output stream for the handler (``sys.stderr`` by default).
    """

    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or "%(asctime)s %(name)s %(levelname)s %(message)s"))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    # Avoid double emission via the root logger.
    logger.propagate = False

    _CONFIGURED = True


def reset_logging() -> None:
    """Drop handlers installed by :func:`configure_logging` (used by tests)."""

    global _CONFIGURED
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger by name, silent until the application configures output."""

    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
