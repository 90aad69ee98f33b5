"""Carousel logger access and calculation tracing.

The package never configures the root logger; hosts own handlers and
formatting. The ``carousel`` logger carries a ``NullHandler`` so importing
the calculators stays silent in hosts without logging configured.
"""

from __future__ import annotations

import logging

from carousel.runtime.debug_config import enabled_trace

ROOT_LOGGER_NAME = "carousel"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_carousel_logger(name: str) -> logging.Logger:
    """Return a logger under the ``carousel`` namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def trace_calculation(logger: logging.Logger, operation: str, **fields: object) -> None:
    """Emit a DEBUG trace of calculator inputs/results when tracing is enabled."""
    if not logger.isEnabledFor(logging.DEBUG) or not enabled_trace():
        return
    logger.debug("carousel.%s %s", operation, fields, extra={"operation": operation, **fields})
