"""Stateless carousel positioning and scroll-offset calculations."""

from carousel.api import Column, FocusDirection, Orientation, PositionTag, ScrollPosition
from carousel.layout import (
    PAGE_BUDGET,
    ScreenViewport,
    boundary_scroll,
    center_fixed_scroll,
    center_mix_scroll,
    center_scroll,
    center_variable_scroll,
    mix_scroll,
    mix_scroll_fixed,
    mix_scroll_variable,
    next_focus,
    next_focus_fixed,
    next_focus_variable,
    page_scroll,
    page_scroll_fixed,
    page_scroll_variable,
)

__all__ = [
    "PAGE_BUDGET",
    "Column",
    "FocusDirection",
    "Orientation",
    "PositionTag",
    "ScreenViewport",
    "ScrollPosition",
    "boundary_scroll",
    "center_fixed_scroll",
    "center_mix_scroll",
    "center_scroll",
    "center_variable_scroll",
    "mix_scroll",
    "mix_scroll_fixed",
    "mix_scroll_variable",
    "next_focus",
    "next_focus_fixed",
    "next_focus_variable",
    "page_scroll",
    "page_scroll_fixed",
    "page_scroll_variable",
]
