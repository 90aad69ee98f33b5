"""Carousel scroll-offset and focus-stepping calculators."""

from carousel.layout.boundary import (
    TailRegion,
    boundary_scroll,
    clamp_region,
    mix_scroll,
    mix_scroll_fixed,
    mix_scroll_variable,
    span_boundary_scroll,
    tail_region,
)
from carousel.layout.centering import (
    center_fixed_scroll,
    center_mix_scroll,
    center_scroll,
    center_span_scroll,
    center_variable_scroll,
)
from carousel.layout.focus import (
    PAGE_BUDGET,
    next_focus,
    next_focus_fixed,
    next_focus_variable,
    step_focus,
)
from carousel.layout.paging import (
    page_scroll,
    page_scroll_fixed,
    page_scroll_variable,
    span_page_scroll,
)
from carousel.layout.spans import ColumnSpans, FixedSpans, SpanSource, VariableSpans
from carousel.layout.viewport import ScreenViewport, axis_center, axis_extent

__all__ = [
    "PAGE_BUDGET",
    "ColumnSpans",
    "FixedSpans",
    "ScreenViewport",
    "SpanSource",
    "TailRegion",
    "VariableSpans",
    "axis_center",
    "axis_extent",
    "boundary_scroll",
    "center_fixed_scroll",
    "center_mix_scroll",
    "center_scroll",
    "center_span_scroll",
    "center_variable_scroll",
    "clamp_region",
    "mix_scroll",
    "mix_scroll_fixed",
    "mix_scroll_variable",
    "next_focus",
    "next_focus_fixed",
    "next_focus_variable",
    "page_scroll",
    "page_scroll_fixed",
    "page_scroll_variable",
    "span_boundary_scroll",
    "span_page_scroll",
    "step_focus",
    "tail_region",
]
