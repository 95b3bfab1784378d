"""Logging utilities for the crossword compiler."""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER_NAME = "crossword_compiler"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger namespaced under the package root logger.

    The package root carries a :class:`logging.NullHandler`, so nothing is
    emitted until the application configures logging itself.
    """

    if name and not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name or ROOT_LOGGER_NAME)


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())
