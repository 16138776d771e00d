"""Logger configuration for seqkit.

The package logs nothing unless the host application configures logging or
calls `setup_logger`."""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "seqkit"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Child logger under the package root, e.g. `seqkit.lazy.cell`."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logger(
    name: str = ROOT_LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Attach a stdout handler to the seqkit logger.

    Args:
        name: Logger name (the package root by default)
        level: Log level (DEBUG, INFO, ...); falls back to SEQKIT_LOG_LEVEL, then WARNING
        format_string: Custom format string

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("SEQKIT_LOG_LEVEL", "WARNING")
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logger = logging.getLogger(name)

    # Only configure once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))

    return logger


__all__ = ("ROOT_LOGGER_NAME", "get_logger", "setup_logger")
