"""Focus steppers for page-wise directional navigation.

These work purely in grid units: one directional input moves focus by as
many items as fit in a fixed page budget, independent of pixel geometry.
"""

from __future__ import annotations

from collections.abc import Sequence

from carousel.api.layout import FocusDirection, SpanItem
from carousel.layout.spans import ColumnSpans, FixedSpans, SpanSource, VariableSpans
from carousel.runtime.errors import missing_arguments, report_missing_arguments
from carousel.runtime.logging import get_carousel_logger, trace_calculation

_LOG = get_carousel_logger("carousel.layout")

PAGE_BUDGET = 12


def _walk_indices(source: SpanSource, focus: int, direction: FocusDirection | str) -> range:
    if direction == FocusDirection.RIGHT:
        return range(max(0, focus), len(source))
    if direction == FocusDirection.LEFT:
        return range(min(focus, len(source) - 1), -1, -1)
    return range(0)


def step_focus(
    source: SpanSource,
    focus: int,
    direction: FocusDirection | str,
    budget: float = PAGE_BUDGET,
) -> int:
    """Return how many items one input in ``direction`` should move focus by."""
    consumed = 0
    steps = 0
    for index in _walk_indices(source, focus, direction):
        if consumed >= budget:
            break
        span = source.span_of(index)
        consumed += int(span) if source.quantized else span
        steps += 1
    trace_calculation(
        _LOG, "step_focus", focus=focus, direction=str(direction), consumed=consumed, steps=steps
    )
    return steps


def next_focus(
    columns: Sequence[SpanItem] | None,
    focus: int | None,
    direction: FocusDirection | str | None,
) -> int:
    """Step focus over a column descriptor list."""
    missing = missing_arguments(columns=columns, focus=focus, direction=direction)
    if report_missing_arguments(_LOG, "next_focus", missing):
        return 0
    return step_focus(ColumnSpans(columns), focus, direction)


def next_focus_fixed(
    count: int | None,
    focus: int | None,
    direction: FocusDirection | str | None,
    span: float = 1,
) -> int:
    """Step focus over ``count`` items sharing one span."""
    missing = missing_arguments(count=count, focus=focus, direction=direction)
    if report_missing_arguments(_LOG, "next_focus_fixed", missing):
        return 0
    return step_focus(FixedSpans(count, span), focus, direction)


def next_focus_variable(
    count: int | None,
    focus: int | None,
    direction: FocusDirection | str | None,
    spans: Sequence[float] | None = None,
) -> int:
    """Step focus over spans from a parallel array."""
    missing = missing_arguments(count=count, focus=focus, direction=direction, spans=spans)
    if report_missing_arguments(_LOG, "next_focus_variable", missing):
        return 0
    return step_focus(VariableSpans(count, spans), focus, direction)
