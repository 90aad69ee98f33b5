"""Carousel runtime support: logging, debug configuration and error policy."""

from carousel.runtime.debug_config import (
    CarouselDebugConfig,
    load_debug_config,
)
from carousel.runtime.errors import missing_arguments, report_missing_arguments
from carousel.runtime.logging import get_carousel_logger, trace_calculation

__all__ = [
    "CarouselDebugConfig",
    "get_carousel_logger",
    "load_debug_config",
    "missing_arguments",
    "report_missing_arguments",
    "trace_calculation",
]
