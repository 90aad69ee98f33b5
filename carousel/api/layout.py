"""Public carousel layout value types and provider contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


class Orientation(StrEnum):
    """Carousel scroll axis."""

    HORIZONTAL = "X"
    VERTICAL = "Y"

    @classmethod
    def parse(cls, value: Orientation | str) -> Orientation:
        """Normalize an axis token (``X``/``Y`` or ``horizontal``/``vertical``)."""
        if isinstance(value, Orientation):
            return value
        normalized = str(value).strip().lower()
        if normalized in {"x", "horizontal"}:
            return cls.HORIZONTAL
        if normalized in {"y", "vertical"}:
            return cls.VERTICAL
        raise ValueError(f"unknown carousel orientation: {value!r}")


class PositionTag(StrEnum):
    """Clamp state of a carousel after a scroll calculation."""

    LEADING = "leading"
    CENTERED = "centered"
    TRAILING = "trailing"


class FocusDirection(StrEnum):
    """Directional input accepted by focus steppers."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class ScrollPosition:
    """Signed travel distance plus the clamp state it leaves the carousel in."""

    distance: float
    position: PositionTag

    @classmethod
    def neutral(cls) -> ScrollPosition:
        return cls(distance=0, position=PositionTag.CENTERED)


@dataclass(frozen=True, slots=True)
class Column:
    """Carousel item descriptor measured in grid units."""

    span: float = 1


class SpanItem(Protocol):
    """Any item descriptor that carries a grid-unit span."""

    span: float


class ViewportMetrics(Protocol):
    """Screen geometry queries consumed by layout calculators."""

    def axis_extent(self, orientation: Orientation, inset: float) -> float:
        """Return usable extent along the axis after removing ``inset``."""

    def axis_center(self, orientation: Orientation, item_extent: float, inset: float) -> float:
        """Return the leading-edge coordinate that visually centers an item."""
