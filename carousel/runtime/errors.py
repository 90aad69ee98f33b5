"""Fail-soft argument policy helpers for layout calculators.

Calculators never raise on missing inputs: they return a neutral result and
report the missing names here so that debugging sessions can spot callers
that forgot to pass list metadata or geometry.
"""

from __future__ import annotations

import logging

from carousel.runtime.debug_config import enabled_missing_args


def missing_arguments(**arguments: object) -> tuple[str, ...]:
    """Return names of arguments whose value is ``None``."""
    return tuple(name for name, value in arguments.items() if value is None)


def report_missing_arguments(
    logger: logging.Logger,
    operation: str,
    missing: tuple[str, ...],
) -> bool:
    """Log a neutral-result short circuit; return whether anything was missing."""
    if not missing:
        return False
    level = logging.WARNING if enabled_missing_args() else logging.DEBUG
    logger.log(
        level,
        "carousel.%s missing=%s returning neutral result",
        operation,
        ",".join(missing),
        extra={"operation": operation, "missing": list(missing)},
    )
    return True
