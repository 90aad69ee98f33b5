"""Centering scroll calculators for uniform and column-span carousels."""

from __future__ import annotations

from collections.abc import Sequence

from carousel.api.layout import Orientation, PositionTag, ScrollPosition, SpanItem, ViewportMetrics
from carousel.layout.spans import (
    ColumnSpans,
    FixedSpans,
    SpanSource,
    VariableSpans,
    leading_offset,
    span_or_zero,
)
from carousel.layout.viewport import axis_center
from carousel.runtime.errors import missing_arguments, report_missing_arguments
from carousel.runtime.logging import get_carousel_logger, trace_calculation

_LOG = get_carousel_logger("carousel.layout")


def center_scroll(
    viewport: ViewportMetrics,
    *,
    extent: float | None = None,
    margin: float | None = None,
    focus: int | None = None,
    orientation: Orientation | str | None = None,
    inset: float | None = None,
) -> float:
    """Return the travel distance that keeps a fixed-size focused item centered.

    The result is zero until the focused item's leading edge passes the
    viewport center and negative afterwards. Missing inputs return 0.
    """
    missing = missing_arguments(extent=extent, margin=margin, focus=focus, orientation=orientation)
    if report_missing_arguments(_LOG, "center_scroll", missing):
        return 0
    center = axis_center(viewport, orientation, extent, inset)
    movement = uniform_movement(extent, margin, focus, center)
    trace_calculation(_LOG, "center_scroll", focus=focus, center=center, movement=movement)
    return movement


def uniform_movement(extent: float, margin: float, focus: int, center: float) -> float:
    """Return ``min(0, center - leading_edge)`` for a uniform item at ``focus``."""
    if focus <= 0:
        return 0
    leading_edge = focus * (extent + margin) + margin
    if leading_edge > center:
        return center - leading_edge
    return 0


def centered_position(offset: float, center: float) -> ScrollPosition:
    """Pin the view once ``offset`` passes ``center``; trail behind it before that."""
    distance = center - offset if offset > center else 0
    if offset < center:
        return ScrollPosition(distance=distance, position=PositionTag.TRAILING)
    return ScrollPosition(distance=distance, position=PositionTag.CENTERED)


def center_span_scroll(
    viewport: ViewportMetrics,
    source: SpanSource,
    *,
    margin: float,
    orientation: Orientation | str,
    focus: int,
    unit_width: float,
    inset: float,
    action_offset: float | None = None,
) -> ScrollPosition:
    """Center the focused item of a variable-width list."""
    focused_width = span_or_zero(source, focus) * unit_width
    center = axis_center(viewport, orientation, focused_width, inset)
    offset = leading_offset(source, focus, unit_width, margin, start=action_offset or 0)
    result = centered_position(offset, center)
    trace_calculation(
        _LOG,
        "center_span_scroll",
        focus=focus,
        center=center,
        offset=offset,
        distance=result.distance,
        position=str(result.position),
    )
    return result


def center_mix_scroll(
    viewport: ViewportMetrics,
    columns: Sequence[SpanItem] | None,
    *,
    margin: float | None = None,
    orientation: Orientation | str | None = None,
    focus: int | None = None,
    unit_width: float | None = None,
    inset: float | None = None,
    action_offset: float | None = None,
) -> ScrollPosition:
    """Center the focused column of a descriptor list."""
    missing = missing_arguments(
        columns=columns,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
    )
    if report_missing_arguments(_LOG, "center_mix_scroll", missing):
        return ScrollPosition.neutral()
    return center_span_scroll(
        viewport,
        ColumnSpans(columns),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )


def center_fixed_scroll(
    viewport: ViewportMetrics,
    count: int | None,
    *,
    margin: float | None = None,
    orientation: Orientation | str | None = None,
    focus: int | None = None,
    unit_width: float | None = None,
    inset: float | None = None,
    action_offset: float | None = None,
    span: float | None = None,
) -> ScrollPosition:
    """Center the focused item of a list whose items all share ``span``."""
    missing = missing_arguments(
        count=count,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        span=span,
    )
    if report_missing_arguments(_LOG, "center_fixed_scroll", missing):
        return ScrollPosition.neutral()
    return center_span_scroll(
        viewport,
        FixedSpans(count, span),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )


def center_variable_scroll(
    viewport: ViewportMetrics,
    count: int | None,
    *,
    margin: float | None = None,
    orientation: Orientation | str | None = None,
    focus: int | None = None,
    unit_width: float | None = None,
    inset: float | None = None,
    action_offset: float | None = None,
    spans: Sequence[float] | None = None,
) -> ScrollPosition:
    """Center the focused item of a list with spans from a parallel array."""
    missing = missing_arguments(
        count=count,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        spans=spans,
    )
    if report_missing_arguments(_LOG, "center_variable_scroll", missing):
        return ScrollPosition.neutral()
    return center_span_scroll(
        viewport,
        VariableSpans(count, spans),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )
