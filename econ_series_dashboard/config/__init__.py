"""Dashboard configuration."""

from econ_series_dashboard.config.settings import (
    ALL_SERIES,
    DERIVED_SERIES,
    FRED_SERIES,
    DerivedSeries,
    Settings,
)

__all__ = ["ALL_SERIES", "DERIVED_SERIES", "FRED_SERIES", "DerivedSeries", "Settings"]
