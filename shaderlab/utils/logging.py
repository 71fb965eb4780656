"""Logging helpers for ShaderLab."""

from __future__ import annotations

import logging
from typing import Optional

LOGGER_NAME = "shaderlab"

_LOGGER: Optional[logging.Logger] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return the package logger, or a child of it when ``name`` is given.

    The package logger gets a single stream handler on first use.
    """
    global _LOGGER
    if _LOGGER is None:
        _LOGGER = logging.getLogger(LOGGER_NAME)
        if not _LOGGER.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            handler.setFormatter(formatter)
            _LOGGER.addHandler(handler)
        _LOGGER.setLevel(logging.INFO)
    if name:
        return _LOGGER.getChild(name)
    return _LOGGER


def set_level(level_name: str) -> None:
    """Set the package log level by name, ignoring unknown names."""
    level = logging.getLevelName(level_name.upper())
    if isinstance(level, int):
        get_logger().setLevel(level)
