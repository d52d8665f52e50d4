"""Map calendar intervals onto the positions of a category axis."""

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Sequence

from econ_series_dashboard.models import AxisSpan, BandEdges, RecessionInterval


def map_interval(dates: Sequence[str], interval: RecessionInterval) -> AxisSpan | None:
    """
    Find the labels covered by an interval on an ascending, unique date axis.

    Returns:
        AxisSpan from the first label on/after ``start`` to the last label
        on/before ``end``, or None when the interval misses the axis
    """
    start_index = bisect_left(dates, interval.start)
    end_index = bisect_right(dates, interval.end) - 1

    if start_index >= len(dates) or end_index < 0 or end_index < start_index:
        return None
    return AxisSpan(start_index=start_index, end_index=end_index)


def band_edges(
    span: AxisSpan, positions: Sequence[float], fallback_spacing: float = 1.0
) -> BandEdges:
    """
    Widen a span by half a label step on each side.

    Args:
        span: Index range returned by map_interval
        positions: Axis coordinate of every label (pixels or category units)
        fallback_spacing: Label step to assume when the axis has one label

    Returns:
        BandEdges in the same coordinates as ``positions``
    """
    count = len(positions)
    first, last = span.start_index, span.end_index
    if not 0 <= first <= last < count:
        raise ValueError(f"Span {first}..{last} outside axis of {count} labels")

    if count == 1:
        half = fallback_spacing / 2
        return BandEdges(x0=positions[0] - half, x1=positions[0] + half)

    # Mirror the inner step at either end of the axis
    if first > 0:
        left_step = positions[first] - positions[first - 1]
    else:
        left_step = positions[first + 1] - positions[first]
    if last < count - 1:
        right_step = positions[last + 1] - positions[last]
    else:
        right_step = positions[last] - positions[last - 1]

    return BandEdges(
        x0=positions[first] - left_step / 2,
        x1=positions[last] + right_step / 2,
    )


def pixel_positions(
    count: int, left: float, right: float, offset: bool = False
) -> list[float]:
    """
    Pixel centre of each label on a category axis spanning ``left``..``right``.

    With ``offset`` the labels sit in the middle of equal slots (bar-chart
    layout); otherwise the first and last labels sit on the plot edges.
    """
    if count <= 0:
        return []
    width = right - left
    if offset:
        return [left + width * (i + 0.5) / count for i in range(count)]
    if count == 1:
        return [left + width / 2]
    return [left + width * i / (count - 1) for i in range(count)]


def recession_bands(
    dates: Sequence[str],
    recessions: Iterable[RecessionInterval],
    positions: Sequence[float] | None = None,
    fallback_spacing: float = 1.0,
) -> list[tuple[RecessionInterval, AxisSpan, BandEdges]]:
    """
    Compute the shaded band for every recession that overlaps the axis.

    Called on every redraw: ``positions`` must describe the axis as currently
    laid out. When omitted, category coordinates ``0..n-1`` are used.
    """
    if positions is None:
        positions = range(len(dates))
    if len(positions) != len(dates):
        raise ValueError(
            f"Got {len(positions)} axis positions for {len(dates)} dates"
        )

    bands = []
    for interval in recessions:
        span = map_interval(dates, interval)
        if span is None:
            continue
        bands.append((interval, span, band_edges(span, positions, fallback_spacing)))
    return bands
