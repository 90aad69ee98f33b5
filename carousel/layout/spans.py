"""Width-resolution strategies shared by carousel calculators.

Every variable-width calculator runs one algorithm over a ``SpanSource``:
something with a length and a ``span_of(index)`` lookup in grid units.
Descriptor lists are ``quantized``: their pixel widths and spans are
truncated to whole numbers before accumulation.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from carousel.api.layout import SpanItem


class SpanSource(Protocol):
    """Read-only grid-unit width lookup for a carousel list."""

    quantized: bool

    def __len__(self) -> int: ...

    def span_of(self, index: int) -> float: ...


@dataclass(frozen=True, slots=True)
class ColumnSpans:
    """Per-item lookup into a list of column descriptors."""

    columns: Sequence[SpanItem]
    quantized: bool = True

    def __len__(self) -> int:
        return len(self.columns)

    def span_of(self, index: int) -> float:
        return self.columns[index].span


@dataclass(frozen=True, slots=True)
class FixedSpans:
    """``count`` items sharing one span."""

    count: int
    span: float
    quantized: bool = False

    def __len__(self) -> int:
        return max(0, int(self.count))

    def span_of(self, index: int) -> float:
        return self.span


@dataclass(frozen=True, slots=True)
class VariableSpans:
    """``count`` items with spans from a parallel array."""

    count: int
    spans: Sequence[float]
    quantized: bool = False

    def __len__(self) -> int:
        return max(0, int(self.count))

    def span_of(self, index: int) -> float:
        return self.spans[index]


def span_or_zero(source: SpanSource, index: int) -> float:
    """Return the span at ``index`` or 0 when the index is past either end."""
    if 0 <= index < len(source):
        return source.span_of(index)
    return 0


def item_width(source: SpanSource, index: int, unit_width: float) -> float:
    """Return the pixel width of one item."""
    return source.span_of(index) * unit_width


def measured_width(source: SpanSource, index: int, unit_width: float, margin: float) -> float:
    """Return one item's width plus its margin, truncated for quantized sources."""
    width = item_width(source, index, unit_width) + margin
    if source.quantized:
        return int(width)
    return width


def leading_offset(
    source: SpanSource,
    stop: int,
    unit_width: float,
    margin: float,
    start: float = 0,
) -> float:
    """Return ``start`` plus the width and margin of every item before ``stop``."""
    offset = start
    for index in range(min(stop, len(source))):
        offset += item_width(source, index, unit_width) + margin
    return offset


def total_extent(source: SpanSource, unit_width: float, margin: float) -> float:
    """Return the measured extent of the whole list."""
    return sum(measured_width(source, index, unit_width, margin) for index in range(len(source)))
