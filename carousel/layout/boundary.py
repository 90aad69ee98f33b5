"""End-of-list clamped scroll calculators.

Once focus reaches the trailing static region the carousel stops scrolling
and is shifted by an overflow correction so the last item sits flush with
the viewport edge instead of exposing blank space past the list's end.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from carousel.api.layout import Orientation, PositionTag, ScrollPosition, SpanItem, ViewportMetrics
from carousel.layout.centering import centered_position, uniform_movement
from carousel.layout.spans import (
    ColumnSpans,
    FixedSpans,
    SpanSource,
    VariableSpans,
    leading_offset,
    measured_width,
    span_or_zero,
    total_extent,
)
from carousel.layout.viewport import axis_center, axis_extent
from carousel.runtime.errors import missing_arguments, report_missing_arguments
from carousel.runtime.logging import get_carousel_logger, trace_calculation

_LOG = get_carousel_logger("carousel.layout")


@dataclass(frozen=True, slots=True)
class TailRegion:
    """Trailing static region of a carousel list."""

    last_static: int
    tail_extent: float
    overflow: float
    fits: bool = False


def _item_count(size: int | float | str) -> int | None:
    """Coerce a numeric or numeric-string item count, truncating fractions."""
    try:
        return int(float(size))
    except (TypeError, ValueError):
        return None


def boundary_scroll(
    viewport: ViewportMetrics,
    *,
    extent: float | None = None,
    margin: float | None = None,
    focus: int | None = None,
    size: int | str | None = None,
    orientation: Orientation | str | None = None,
    inset: float | None = None,
) -> float:
    """Return centering travel for a uniform list, clamped at the list's end."""
    missing = missing_arguments(
        extent=extent, margin=margin, focus=focus, size=size, orientation=orientation
    )
    if report_missing_arguments(_LOG, "boundary_scroll", missing):
        return 0
    count = _item_count(size)
    if count is None:
        report_missing_arguments(_LOG, "boundary_scroll", ("size",))
        return 0
    pitch = extent + margin
    if count * pitch <= axis_extent(viewport, orientation, inset):
        return 0

    center = axis_center(viewport, orientation, extent, inset)
    end_count = math.ceil(center / pitch)
    last_static = count - end_count
    overflow = end_count * pitch - center - extent

    movement = uniform_movement(extent, margin, min(focus, last_static), center)
    if focus >= last_static:
        movement -= overflow
    trace_calculation(
        _LOG,
        "boundary_scroll",
        focus=focus,
        center=center,
        last_static=last_static,
        overflow=overflow,
        movement=movement,
    )
    return movement


def tail_region(
    source: SpanSource,
    unit_width: float,
    margin: float,
    available: float,
) -> TailRegion:
    """Locate the static tail of ``source`` within ``available`` trailing space.

    The backward scan stops on the item that pushes the running total past
    ``available``; the region after that item is then measured again because
    heterogeneous widths make the crossing point an estimate, not an edge.
    """
    scanned = 0.0
    last_static = 0
    for index in reversed(range(len(source))):
        if scanned > available:
            break
        scanned += measured_width(source, index, unit_width, margin)
        last_static = index + 1

    tail_extent = 0.0
    for index in range(len(source) - 1, last_static - 1, -1):
        tail_extent += measured_width(source, index, unit_width, margin)
    return TailRegion(last_static=last_static, tail_extent=tail_extent, overflow=available - tail_extent)


def clamp_region(
    source: SpanSource,
    *,
    unit_width: float,
    margin: float,
    available: float,
    viewport_extent: float,
    action_offset: float | None = None,
) -> TailRegion:
    """Return the tail region, or an all-static region when the list fits the viewport.

    Items are laid out after ``action_offset``, so it counts toward the fit.
    """
    extent = total_extent(source, unit_width, margin)
    if (action_offset or 0) + extent <= viewport_extent:
        return TailRegion(last_static=0, tail_extent=extent, overflow=0, fits=True)
    return tail_region(source, unit_width, margin, available)


def clamped_position(
    source: SpanSource,
    region: TailRegion,
    *,
    focus: int,
    unit_width: float,
    margin: float,
    baseline: float,
    action_offset: float | None = None,
) -> ScrollPosition:
    """Apply the static tail clamp and margin normalization to a scroll."""
    if region.fits:
        return ScrollPosition(distance=0, position=PositionTag.LEADING)

    effective_focus = min(focus, region.last_static)
    offset = leading_offset(source, effective_focus, unit_width, margin, start=action_offset or 0)
    result = centered_position(offset, baseline)
    distance = result.distance
    position = result.position
    if focus >= region.last_static:
        distance += region.overflow
        position = PositionTag.LEADING
    # TODO: confirm with product whether this should skip calls that already added overflow.
    if focus > 0:
        distance -= margin
    return ScrollPosition(distance=distance, position=position)


def span_boundary_scroll(
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
    """Center the focused item of a variable-width list, clamped at the list's end."""
    focused_width = span_or_zero(source, focus) * unit_width
    center = axis_center(viewport, orientation, focused_width, inset)
    viewport_extent = axis_extent(viewport, orientation, inset)
    region = clamp_region(
        source,
        unit_width=unit_width,
        margin=margin,
        available=viewport_extent - center,
        viewport_extent=viewport_extent,
        action_offset=action_offset,
    )
    result = clamped_position(
        source,
        region,
        focus=focus,
        unit_width=unit_width,
        margin=margin,
        baseline=center,
        action_offset=action_offset,
    )
    trace_calculation(
        _LOG,
        "span_boundary_scroll",
        focus=focus,
        center=center,
        last_static=region.last_static,
        overflow=region.overflow,
        distance=result.distance,
        position=str(result.position),
    )
    return result


def mix_scroll(
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
    """Clamped centering scroll over a column descriptor list."""
    missing = missing_arguments(
        columns=columns,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
    )
    if report_missing_arguments(_LOG, "mix_scroll", missing):
        return ScrollPosition.neutral()
    return span_boundary_scroll(
        viewport,
        ColumnSpans(columns),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )


def mix_scroll_fixed(
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
    """Clamped centering scroll over ``count`` items sharing one span."""
    missing = missing_arguments(
        count=count,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        span=span,
    )
    if report_missing_arguments(_LOG, "mix_scroll_fixed", missing):
        return ScrollPosition.neutral()
    return span_boundary_scroll(
        viewport,
        FixedSpans(count, span),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )


def mix_scroll_variable(
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
    """Clamped centering scroll over spans from a parallel array."""
    missing = missing_arguments(
        count=count,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        spans=spans,
    )
    if report_missing_arguments(_LOG, "mix_scroll_variable", missing):
        return ScrollPosition.neutral()
    return span_boundary_scroll(
        viewport,
        VariableSpans(count, spans),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )
