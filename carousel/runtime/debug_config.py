"""Carousel debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

TRACE_ENV = "CAROUSEL_DEBUG_TRACE"
MISSING_ARGS_ENV = "CAROUSEL_DEBUG_MISSING_ARGS"


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class CarouselDebugConfig:
    """Immutable carousel debug configuration."""

    trace_enabled: bool
    missing_args_enabled: bool


def load_debug_config() -> CarouselDebugConfig:
    """Load immutable debug configuration from env vars."""
    return CarouselDebugConfig(
        trace_enabled=_flag(TRACE_ENV, False),
        missing_args_enabled=_flag(MISSING_ARGS_ENV, False),
    )


def enabled_trace() -> bool:
    return _flag(TRACE_ENV, False)


def enabled_missing_args() -> bool:
    return _flag(MISSING_ARGS_ENV, False)
