import logging

import pytest

from carousel.api.layout import Column, PositionTag, ScrollPosition
from carousel.layout.centering import (
    center_fixed_scroll,
    center_mix_scroll,
    center_scroll,
    center_variable_scroll,
)
from carousel.layout.viewport import ScreenViewport


def test_center_scroll_is_zero_at_first_item(viewport) -> None:
    for extent, margin, center in ((100, 10, 400), (50, 500, 20), (300, 0, -10)):
        viewport.center = center
        assert center_scroll(viewport, extent=extent, margin=margin, focus=0, orientation="X") == 0


def test_center_scroll_waits_until_leading_edge_passes_center(viewport) -> None:
    assert center_scroll(viewport, extent=100, margin=10, focus=3, orientation="X") == 0
    assert center_scroll(viewport, extent=100, margin=10, focus=6, orientation="X") == -270


def test_center_scroll_is_non_increasing_in_focus(viewport) -> None:
    movements = [
        center_scroll(viewport, extent=100, margin=10, focus=focus, orientation="Y")
        for focus in range(30)
    ]
    assert all(later <= earlier for earlier, later in zip(movements, movements[1:]))
    assert movements[-1] < 0


def test_center_scroll_missing_input_is_neutral(viewport, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="carousel.layout"):
        assert center_scroll(viewport, extent=100, margin=10, orientation="X") == 0
    assert "missing=focus" in caplog.text
    assert viewport.calls == []


def test_center_scroll_uses_item_extent_against_screen() -> None:
    screen = ScreenViewport(width=1000, height=500)
    # center = (1000 - 200) / 2 = 400; leading edge of focus 4 = 4 * 220 + 20 = 900
    assert center_scroll(screen, extent=200, margin=20, focus=4, orientation="X") == -500
    # vertical center = (500 - 100 - 200) / 2 = 100; leading edge of focus 1 = 240
    assert center_scroll(screen, extent=200, margin=20, focus=1, orientation="Y", inset=100) == -140


@pytest.mark.parametrize("focus", range(12))
def test_unit_spans_match_uniform_centering(viewport, focus: int) -> None:
    uniform = center_scroll(viewport, extent=100, margin=10, focus=focus, orientation="X")
    spans = center_variable_scroll(
        viewport,
        12,
        margin=10,
        orientation="X",
        focus=focus,
        unit_width=100,
        inset=0,
        action_offset=10,
        spans=[1] * 12,
    )
    assert spans.distance == uniform


def test_span_centering_position_tags(viewport) -> None:
    kwargs = dict(margin=10, orientation="X", unit_width=100, inset=0, action_offset=70, span=1)
    before = center_fixed_scroll(viewport, 10, focus=2, **kwargs)
    at_center = center_fixed_scroll(viewport, 10, focus=3, **kwargs)
    past = center_fixed_scroll(viewport, 10, focus=6, **kwargs)
    assert before == ScrollPosition(distance=0, position=PositionTag.TRAILING)
    assert at_center == ScrollPosition(distance=0, position=PositionTag.CENTERED)
    assert past == ScrollPosition(distance=-330, position=PositionTag.CENTERED)


def test_center_mix_scroll_sums_preceding_columns() -> None:
    screen = ScreenViewport(width=1000, height=600)
    columns = [Column(2), Column(1), Column(3), Column(1), Column(2), Column(2)]
    # focused span 2 -> center = (1000 - 200) / 2 = 400; offset = 210 + 110 + 310 + 110 = 740
    result = center_mix_scroll(screen, columns, margin=10, orientation="X", focus=4, unit_width=100, inset=0)
    assert result == ScrollPosition(distance=-340, position=PositionTag.CENTERED)


def test_center_mix_scroll_tolerates_focus_past_end() -> None:
    screen = ScreenViewport(width=600, height=400)
    # no focused column -> center = 600 / 2; offset stops at the list end = 330
    result = center_mix_scroll(
        screen, [Column(1)] * 3, margin=10, orientation="X", focus=5, unit_width=100, inset=0
    )
    assert result == ScrollPosition(distance=-30, position=PositionTag.CENTERED)


def test_span_centering_missing_inputs_are_neutral(viewport) -> None:
    assert center_mix_scroll(viewport, None, margin=10, orientation="X", focus=1, unit_width=1, inset=0) == (
        ScrollPosition.neutral()
    )
    assert center_fixed_scroll(viewport, 5, margin=10, orientation="X", focus=1, unit_width=1) == (
        ScrollPosition.neutral()
    )
    assert center_variable_scroll(
        viewport, 5, margin=10, orientation="X", focus=1, unit_width=1, inset=0
    ) == ScrollPosition.neutral()
