"""Merge independently-sampled series onto one shared date axis."""

import logging
from collections.abc import Sequence

import pandas as pd

from econ_series_dashboard.models import AlignedSeries, MergedBundle, NormalizedSeries


logger = logging.getLogger(__name__)


def _to_series(series: NormalizedSeries) -> pd.Series:
    values = pd.Series(
        [obs.value for obs in series.observations],
        index=pd.Index([obs.date for obs in series.observations], dtype=object),
        dtype="float64",
    )
    # Later entries win when a provider repeats a date
    return values[~values.index.duplicated(keep="last")]


def align_series(series_list: Sequence[NormalizedSeries]) -> MergedBundle:
    """
    Merge series of any frequency onto the sorted union of their dates.

    Each series gets a value slot for every date; dates it never observed are
    None. The date axis depends only on the set of inputs, not their order.
    Series keep the order they were given in.
    """
    if not series_list:
        return MergedBundle(dates=[], series=[])

    # Positional keys so two inputs sharing an id stay separate columns;
    # zero-padded ISO dates sort correctly as strings
    frame = pd.concat(
        [_to_series(series) for series in series_list],
        axis=1,
        join="outer",
        keys=list(range(len(series_list))),
    ).sort_index()

    aligned = [
        AlignedSeries(
            id=series.id,
            title=series.title,
            units=series.units,
            frequency=series.frequency,
            values=[None if pd.isna(v) else float(v) for v in frame[pos]],
        )
        for pos, series in enumerate(series_list)
    ]
    dates = [str(date) for date in frame.index]
    logger.debug(f"Aligned {len(aligned)} series onto {len(dates)} dates")
    return MergedBundle(dates=dates, series=aligned)


def bundle_to_frame(bundle: MergedBundle) -> pd.DataFrame:
    """
    Tabular view of a bundle for display and export.

    Returns:
        DataFrame indexed by date string with one float column per series id
    """
    frame = pd.DataFrame(
        {s.id: s.values for s in bundle.series},
        index=pd.Index(bundle.dates, name="date"),
        columns=[s.id for s in bundle.series],
    )
    return frame.astype("float64")
