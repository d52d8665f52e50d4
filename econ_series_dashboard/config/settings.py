"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
import os

from dotenv import load_dotenv


load_dotenv()


# FRED series offered in the selectors
FRED_SERIES: dict[str, str] = {
    "GDP": "Real Gross Domestic Product",
    "UNRATE": "Unemployment Rate",
    "CPIAUCSL": "Consumer Price Index (CPI-U, All Items)",
    "FEDFUNDS": "Federal Funds Effective Rate",
    "PCE": "Personal Consumption Expenditures",
    "PAYEMS": "All Employees: Total Nonfarm Payrolls",
    "DGS10": "10-Year Treasury Constant Maturity Rate",
}


@dataclass(frozen=True)
class DerivedSeries:
    """A requestable series computed from a FRED source series."""

    source_id: str
    label: str
    transform: str
    units: str


# Derived series - fetched from their source and transformed locally
DERIVED_SERIES: dict[str, DerivedSeries] = {
    "CPIAUCSL_ANN": DerivedSeries(
        source_id="CPIAUCSL",
        label="CPI Inflation (annualized month-over-month)",
        transform="annualized_mom",
        units="Percent, annualized",
    ),
    "PCE_ANN": DerivedSeries(
        source_id="PCE",
        label="PCE Growth (annualized month-over-month)",
        transform="annualized_mom",
        units="Percent, annualized",
    ),
}

# All requestable series combined for selectors and validation
ALL_SERIES: dict[str, str] = {
    **FRED_SERIES,
    **{series_id: derived.label for series_id, derived in DERIVED_SERIES.items()},
}


@dataclass
class Settings:
    """Application settings."""

    fred_api_key: str = field(default_factory=lambda: os.getenv("FRED_API_KEY", ""))
    observation_start: str = field(
        default_factory=lambda: os.getenv("FRED_OBSERVATION_START", "1950-01-01")
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("FRED_REQUEST_TIMEOUT", "30"))
    )
    max_series: int = 3

    def validate(self) -> None:
        """Validate required settings."""
        if not self.fred_api_key:
            raise ValueError(
                "FRED_API_KEY not set. Get one at: "
                "https://fred.stlouisfed.org/docs/api/api_key.html"
            )
        if self.max_series < 1:
            raise ValueError(f"max_series must be at least 1, got {self.max_series}")
