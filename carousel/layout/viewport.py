"""Viewport axis dispatch and a screen-backed metrics provider."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from carousel.api.layout import Orientation, ViewportMetrics


@dataclass(frozen=True, slots=True)
class ScreenViewport:
    """Viewport metrics for a fixed screen size."""

    width: float
    height: float

    @classmethod
    def from_size(cls, size: Sequence[float]) -> ScreenViewport:
        """Build from a ``(width, height)`` pair."""
        if len(size) < 2:
            raise ValueError(f"screen size needs width and height: {size!r}")
        return cls(width=float(size[0]), height=float(size[1]))

    def _dimension(self, orientation: Orientation) -> float:
        if orientation is Orientation.HORIZONTAL:
            return self.width
        return self.height

    def axis_extent(self, orientation: Orientation, inset: float) -> float:
        return self._dimension(orientation) - inset

    def axis_center(self, orientation: Orientation, item_extent: float, inset: float) -> float:
        return (self.axis_extent(orientation, inset) - item_extent) / 2


def axis_extent(
    viewport: ViewportMetrics,
    orientation: Orientation | str,
    inset: float | None = None,
) -> float:
    """Return usable viewport extent along the carousel axis."""
    return viewport.axis_extent(Orientation.parse(orientation), inset or 0)


def axis_center(
    viewport: ViewportMetrics,
    orientation: Orientation | str,
    item_extent: float,
    inset: float | None = None,
) -> float:
    """Return the leading-edge coordinate that centers an item of ``item_extent``."""
    return viewport.axis_center(Orientation.parse(orientation), item_extent, inset or 0)
