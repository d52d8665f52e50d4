"""Data fetching and chart loading."""

from .fred_fetcher import FredFetcher
from .chart_loader import ChartRequest, ChartResult, UnknownSeriesError, load_chart
from .recessions import NBER_RECESSIONS

__all__ = [
    "FredFetcher",
    "ChartRequest",
    "ChartResult",
    "UnknownSeriesError",
    "load_chart",
    "NBER_RECESSIONS",
]
