"""Page-at-a-time scroll calculators.

A page advances by one full viewport extent of content rather than keeping
the focused item centered; the end-of-list clamp is shared with the
centering calculators in ``carousel.layout.boundary``.
"""

from __future__ import annotations

from collections.abc import Sequence

from carousel.api.layout import Orientation, ScrollPosition, SpanItem, ViewportMetrics
from carousel.layout.boundary import clamp_region, clamped_position
from carousel.layout.spans import ColumnSpans, FixedSpans, SpanSource, VariableSpans
from carousel.layout.viewport import axis_extent
from carousel.runtime.errors import missing_arguments, report_missing_arguments
from carousel.runtime.logging import get_carousel_logger, trace_calculation

_LOG = get_carousel_logger("carousel.layout")


def span_page_scroll(
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
    """Scroll so the page starting at ``focus`` is shown, clamped at the list's end."""
    viewport_extent = axis_extent(viewport, orientation, inset)
    region = clamp_region(
        source,
        unit_width=unit_width,
        margin=margin,
        available=viewport_extent,
        viewport_extent=viewport_extent,
        action_offset=action_offset,
    )
    result = clamped_position(
        source,
        region,
        focus=focus,
        unit_width=unit_width,
        margin=margin,
        baseline=margin,
        action_offset=action_offset,
    )
    trace_calculation(
        _LOG,
        "span_page_scroll",
        focus=focus,
        viewport_extent=viewport_extent,
        last_static=region.last_static,
        overflow=region.overflow,
        distance=result.distance,
        position=str(result.position),
    )
    return result


def page_scroll(
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
    """Page scroll over a column descriptor list."""
    missing = missing_arguments(
        columns=columns,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
    )
    if report_missing_arguments(_LOG, "page_scroll", missing):
        return ScrollPosition.neutral()
    return span_page_scroll(
        viewport,
        ColumnSpans(columns),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )


def page_scroll_fixed(
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
    """Page scroll over ``count`` items sharing one span."""
    missing = missing_arguments(
        count=count,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        span=span,
    )
    if report_missing_arguments(_LOG, "page_scroll_fixed", missing):
        return ScrollPosition.neutral()
    return span_page_scroll(
        viewport,
        FixedSpans(count, span),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )


def page_scroll_variable(
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
    """Page scroll over spans from a parallel array."""
    missing = missing_arguments(
        count=count,
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        spans=spans,
    )
    if report_missing_arguments(_LOG, "page_scroll_variable", missing):
        return ScrollPosition.neutral()
    return span_page_scroll(
        viewport,
        VariableSpans(count, spans),
        margin=margin,
        orientation=orientation,
        focus=focus,
        unit_width=unit_width,
        inset=inset,
        action_offset=action_offset,
    )
