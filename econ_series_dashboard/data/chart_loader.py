"""Request/response boundary between the dashboard and the series core."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from econ_series_dashboard.alignment import clip_bundle
from econ_series_dashboard.config import ALL_SERIES, Settings
from econ_series_dashboard.data.fred_fetcher import FredFetcher
from econ_series_dashboard.models import DateWindow, MergedBundle


logger = logging.getLogger(__name__)


class UnknownSeriesError(ValueError):
    """Raised when a request names series outside the catalog."""


@dataclass(frozen=True)
class ChartRequest:
    """What the UI asks the core to draw."""

    series_ids: Sequence[str] = ()
    window: DateWindow = field(default_factory=DateWindow)
    dual_axis: bool = False


@dataclass
class ChartResult:
    """What the core hands back to the UI."""

    bundle: MergedBundle
    view: MergedBundle
    window: DateWindow
    dual_axis: bool = False

    @property
    def available_range(self) -> tuple[str, str] | None:
        """First and last date of the unclipped bundle."""
        if self.bundle.is_empty:
            return None
        return self.bundle.dates[0], self.bundle.dates[-1]


def normalize_series_ids(series_ids: Sequence[str], max_series: int = 3) -> list[str]:
    """
    Clean up a requested list of series.

    Drops blanks and duplicates (keeping first occurrence order), rejects ids
    outside the catalog and keeps at most ``max_series``.
    """
    unique_ids = list(dict.fromkeys(sid for sid in series_ids if sid))

    unknown = [sid for sid in unique_ids if sid not in ALL_SERIES]
    if unknown:
        raise UnknownSeriesError(f"Unknown series: {', '.join(unknown)}")

    if len(unique_ids) > max_series:
        logger.warning(f"Keeping first {max_series} of {len(unique_ids)} requested series")
    return unique_ids[:max_series]


def clamp_window(window: DateWindow, dates: Sequence[str]) -> DateWindow:
    """
    Fit a previously selected window into the dates now available.

    A bound survives only if it lies inside the available range; otherwise it
    snaps to that end of the range.
    """
    if not dates:
        return DateWindow()

    first, last = dates[0], dates[-1]

    def inside(value: str | None) -> bool:
        return value is not None and first <= value <= last

    return DateWindow(
        min_date=window.min_date if inside(window.min_date) else first,
        max_date=window.max_date if inside(window.max_date) else last,
    )


def adjust_window(window: DateWindow, changed: str, value: str) -> DateWindow:
    """
    Apply a user edit to one bound, dragging the other along to keep min <= max.

    Args:
        window: Current window
        changed: "min" or "max"
        value: New ISO date for that bound
    """
    if changed == "min":
        max_date = window.max_date
        if not max_date or max_date < value:
            max_date = value
        return DateWindow(min_date=value, max_date=max_date)
    if changed == "max":
        min_date = window.min_date
        if not min_date or min_date > value:
            min_date = value
        return DateWindow(min_date=min_date, max_date=value)
    raise ValueError(f"Unknown window bound: {changed}")


def load_chart(
    request: ChartRequest,
    fetcher: FredFetcher | None = None,
    settings: Settings | None = None,
) -> ChartResult:
    """
    Fetch, align and clip the series a chart request names.

    A request without series returns an empty result and never builds a
    fetcher or touches the network.
    """
    settings = settings or (fetcher.settings if fetcher else Settings())
    series_ids = normalize_series_ids(request.series_ids, settings.max_series)

    if not series_ids:
        empty = MergedBundle(dates=[], series=[])
        return ChartResult(
            bundle=empty,
            view=MergedBundle(dates=[], series=[]),
            window=DateWindow(),
            dual_axis=request.dual_axis,
        )

    if fetcher is None:
        with FredFetcher(settings) as owned:
            bundle = owned.fetch_bundle(series_ids)
    else:
        bundle = fetcher.fetch_bundle(series_ids)

    window = clamp_window(request.window, bundle.dates)
    view = clip_bundle(bundle, window)
    logger.info(
        f"Chart: {len(series_ids)} series, {len(view.dates)} of {len(bundle.dates)} dates "
        f"in {window.min_date}..{window.max_date}"
    )
    return ChartResult(bundle=bundle, view=view, window=window, dual_axis=request.dual_axis)
