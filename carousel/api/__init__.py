"""Public carousel API boundary."""

from carousel.api.layout import (
    Column,
    FocusDirection,
    Orientation,
    PositionTag,
    ScrollPosition,
    SpanItem,
    ViewportMetrics,
)

__all__ = [
    "Column",
    "FocusDirection",
    "Orientation",
    "PositionTag",
    "ScrollPosition",
    "SpanItem",
    "ViewportMetrics",
]
