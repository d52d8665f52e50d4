"""Restrict a merged bundle to a date window."""

from econ_series_dashboard.models import AlignedSeries, DateWindow, MergedBundle


def clip_bundle(bundle: MergedBundle, window: DateWindow | None = None) -> MergedBundle:
    """
    Keep only the dates inside ``window`` (inclusive) and the matching values.

    An empty result is a valid bundle with empty dates and empty value lists.
    The caller guarantees ``min_date <= max_date`` when both are set.
    """
    window = window or DateWindow()
    keep = [i for i, date in enumerate(bundle.dates) if window.contains(date)]

    return MergedBundle(
        dates=[bundle.dates[i] for i in keep],
        series=[
            AlignedSeries(
                id=s.id,
                title=s.title,
                units=s.units,
                frequency=s.frequency,
                values=[s.values[i] for i in keep],
            )
            for s in bundle.series
        ],
    )
