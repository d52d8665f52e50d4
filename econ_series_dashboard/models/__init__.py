"""Data models."""

from econ_series_dashboard.models.series import (
    AlignedSeries,
    AxisSpan,
    BandEdges,
    DateWindow,
    MergedBundle,
    NormalizedSeries,
    Observation,
    RecessionInterval,
)

__all__ = [
    "AlignedSeries",
    "AxisSpan",
    "BandEdges",
    "DateWindow",
    "MergedBundle",
    "NormalizedSeries",
    "Observation",
    "RecessionInterval",
]
