from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from carousel.api.layout import Orientation


@dataclass(slots=True)
class FakeViewport:
    """Viewport with a fixed extent and a fixed center for every item size."""

    extent: float = 1000.0
    center: float = 400.0
    calls: list[tuple[str, Orientation, float]] = field(default_factory=list)

    def axis_extent(self, orientation: Orientation, inset: float) -> float:
        self.calls.append(("extent", orientation, inset))
        return self.extent

    def axis_center(self, orientation: Orientation, item_extent: float, inset: float) -> float:
        self.calls.append(("center", orientation, inset))
        return self.center


@pytest.fixture
def viewport() -> FakeViewport:
    return FakeViewport()
