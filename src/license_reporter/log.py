"""Package-wide logging helpers.

A NullHandler sits on the package logger so importing the library stays quiet
until an application (or the CLI) configures a handler.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Optional

PACKAGE_LOGGER_NAME = "license_reporter"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or PACKAGE_LOGGER_NAME)


def configure_logging(
    level: int | str = logging.INFO,
    stream: Optional[IO[str]] = None,
    fmt: str | None = None,
) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling this again replaces the handler installed by the previous call
    rather than stacking another one.
    """

    logger = get_logger()
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_license_reporter", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or "%(levelname)s %(name)s: %(message)s"))
    handler._license_reporter = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
