"""FRED API client producing normalized and merged series."""

import logging
from collections.abc import Iterable

import httpx

from econ_series_dashboard.alignment import align_series, apply_derived, normalize_observations
from econ_series_dashboard.config import ALL_SERIES, DERIVED_SERIES, Settings
from econ_series_dashboard.models import MergedBundle, NormalizedSeries


logger = logging.getLogger(__name__)


class FredFetcher:
    """Fetches observations and metadata from the FRED API."""

    BASE_URL = "https://api.stlouisfed.org/fred"

    def __init__(
        self, settings: Settings | None = None, client: httpx.Client | None = None
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(timeout=self.settings.request_timeout)
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "FredFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _get(self, path: str, **params) -> dict:
        """GET a FRED endpoint and return the decoded JSON body."""
        response = self.client.get(
            f"{self.BASE_URL}/{path}",
            params={
                "api_key": self.settings.fred_api_key,
                "file_type": "json",
                **params,
            },
        )
        response.raise_for_status()
        return response.json()

    def fetch_series_info(self, series_id: str) -> dict:
        """Fetch metadata for a series from FRED."""
        data = self._get("series", series_id=series_id)

        if "seriess" not in data or not data["seriess"]:
            raise ValueError(f"Series {series_id} not found")

        return data["seriess"][0]

    def fetch_observations(self, series_id: str) -> list[dict]:
        """
        Fetch raw observations from FRED API.

        Args:
            series_id: FRED series ID

        Returns:
            List of ``{"date": ..., "value": ...}`` dicts, values still strings
        """
        data = self._get(
            "series/observations",
            series_id=series_id,
            observation_start=self.settings.observation_start,
        )
        return data.get("observations", [])

    def _fetch_fred_series(self, series_id: str) -> NormalizedSeries:
        observations = normalize_observations(self.fetch_observations(series_id))

        title = ALL_SERIES.get(series_id, series_id)
        units = frequency = None
        try:
            info = self.fetch_series_info(series_id)
            title = info.get("title") or title
            units = info.get("units") or None
            frequency = info.get("frequency") or None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"  Could not fetch metadata for {series_id}: {e}")

        return NormalizedSeries(
            id=series_id,
            title=title,
            units=units,
            frequency=frequency,
            observations=observations,
        )

    def fetch_series(self, series_id: str) -> NormalizedSeries:
        """
        Fetch a single series, applying its derived transform if it has one.

        Args:
            series_id: FRED series ID or a derived series ID from the catalog

        Returns:
            NormalizedSeries with missing values as None
        """
        logger.info(f"Fetching {series_id}...")

        derived = DERIVED_SERIES.get(series_id)
        if derived is None:
            series = self._fetch_fred_series(series_id)
        else:
            logger.info(f"  Derived from {derived.source_id} ({derived.transform})")
            series = apply_derived(series_id, self._fetch_fred_series(derived.source_id), derived)

        logger.info(f"  Got {len(series.observations)} observations")
        return series

    def fetch_bundle(self, series_ids: Iterable[str]) -> MergedBundle:
        """
        Fetch several series and merge them onto one date axis.

        An empty request returns an empty bundle without any network call.
        """
        unique_ids = list(dict.fromkeys(sid for sid in series_ids if sid))
        if not unique_ids:
            return MergedBundle(dates=[], series=[])

        return align_series([self.fetch_series(sid) for sid in unique_ids])

    def fetch_category_children(self, category_id: int) -> list[dict]:
        """Fetch child categories of a FRED category (0 is the root)."""
        data = self._get("category/children", category_id=category_id)
        return [
            {
                "id": item["id"],
                "name": item.get("name", ""),
                "parent_id": item.get("parent_id"),
            }
            for item in data.get("categories", [])
        ]

    def fetch_category_series(self, category_id: int) -> list[dict]:
        """Fetch metadata for the series filed under a FRED category."""
        data = self._get("category/series", category_id=category_id)
        return [
            {
                "id": item["id"],
                "title": item.get("title", item["id"]),
                "units": item.get("units"),
                "frequency": item.get("frequency"),
            }
            for item in data.get("seriess", [])
        ]


def main() -> None:
    """CLI entry point for fetching and summarizing series."""
    import argparse
    import json
    import sys

    from econ_series_dashboard.data.chart_loader import (
        ChartRequest,
        UnknownSeriesError,
        load_chart,
    )
    from econ_series_dashboard.data.recessions import NBER_RECESSIONS
    from econ_series_dashboard.alignment import recession_bands
    from econ_series_dashboard.models import DateWindow

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Fetch and align FRED series")
    parser.add_argument(
        "--series",
        nargs="+",
        default=[],
        help="Series IDs to fetch (up to three)",
    )
    parser.add_argument("--start", type=str, help="First date to keep (YYYY-MM-DD)")
    parser.add_argument("--end", type=str, help="Last date to keep (YYYY-MM-DD)")
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available series and exit",
    )
    parser.add_argument(
        "--category",
        type=int,
        help="List subcategories and series of a FRED category and exit",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the merged, clipped series as JSON",
    )
    args = parser.parse_args()

    if args.list:
        for series_id, label in ALL_SERIES.items():
            print(f"{series_id:15} | {label}")
        return

    try:
        if args.category is not None:
            with FredFetcher() as fetcher:
                print(f"\nCategory {args.category}:")
                for child in fetcher.fetch_category_children(args.category):
                    print(f"  [{child['id']}] {child['name']}")
                for meta in fetcher.fetch_category_series(args.category):
                    print(f"  {meta['id']:20} | {meta['frequency'] or '-':10} | {meta['title']}")
            return

        request = ChartRequest(
            series_ids=args.series,
            window=DateWindow(min_date=args.start, max_date=args.end),
        )
        result = load_chart(request)

        view = result.view
        if args.json:
            print(json.dumps(view.to_dict(), indent=2))
            return

        if view.is_empty:
            print("No observations to show.")
            return

        print(f"\n{len(view.dates)} dates from {view.dates[0]} to {view.dates[-1]}")
        print("-" * 70)
        for series in view.series:
            known = sum(1 for v in series.values if v is not None)
            print(f"{series.id:15} | {known:6} obs | {series.units or '-':20} | {series.title}")

        bands = recession_bands(view.dates, NBER_RECESSIONS)
        if bands:
            print("\nRecessions in range:")
            for interval, span, _ in bands:
                print(f"  {interval.start} to {interval.end}: "
                      f"{view.dates[span.start_index]} .. {view.dates[span.end_index]}")

    except UnknownSeriesError as e:
        print(f"{e}")
        print(f"Available: {', '.join(ALL_SERIES.keys())}")
        sys.exit(1)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except httpx.HTTPStatusError as e:
        print(f"API error: {e.response.status_code} - {e.response.text}")
        sys.exit(1)
    except httpx.HTTPError as e:
        print(f"Could not reach FRED: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
