"""Shared fixtures for the test suite."""

import httpx
import pytest

from econ_series_dashboard.config import Settings
from econ_series_dashboard.data.fred_fetcher import FredFetcher
from econ_series_dashboard.models import NormalizedSeries, Observation


def make_series(series_id: str, points: dict, units: str | None = None) -> NormalizedSeries:
    """Build a NormalizedSeries from a {date: value} dict."""
    return NormalizedSeries(
        id=series_id,
        title=f"{series_id} title",
        units=units,
        frequency=None,
        observations=tuple(Observation(date=d, value=v) for d, v in points.items()),
    )


class FakeFred:
    """In-memory stand-in for the FRED HTTP API, served via httpx.MockTransport."""

    def __init__(self) -> None:
        self.observations: dict[str, list[dict]] = {}
        self.info: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self.fail_paths: dict[str, int] = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/fred/")
        params = request.url.params

        if path in self.fail_paths:
            return httpx.Response(self.fail_paths[path], json={"error_message": "boom"})

        if path == "series/observations":
            return httpx.Response(
                200, json={"units": "lin", "observations": self.observations.get(params["series_id"], [])}
            )
        if path == "series":
            info = self.info.get(params["series_id"])
            return httpx.Response(200, json={"seriess": [info] if info else []})
        if path == "category/children":
            return httpx.Response(200, json={"categories": [
                {"id": 32991, "name": "Money, Banking, & Finance", "parent_id": 0},
                {"id": 10, "name": "Population, Employment, & Labor Markets", "parent_id": 0},
            ]})
        if path == "category/series":
            return httpx.Response(200, json={"seriess": [
                {"id": "UNRATE", "title": "Unemployment Rate", "units": "Percent", "frequency": "Monthly"},
            ]})
        return httpx.Response(404, json={"error_message": "not found"})


@pytest.fixture
def settings():
    return Settings(fred_api_key="test-key", observation_start="1950-01-01")


@pytest.fixture
def fake_fred():
    fred = FakeFred()
    fred.observations["UNRATE"] = [
        {"date": "2020-01-01", "value": "3.5"},
        {"date": "2020-02-01", "value": "3.5"},
        {"date": "2020-03-01", "value": "4.5"},
        {"date": "2020-04-01", "value": "14.75"},
        {"date": "2020-05-01", "value": "."},
    ]
    fred.info["UNRATE"] = {
        "id": "UNRATE", "title": "Unemployment Rate", "units": "Percent", "frequency": "Monthly",
    }
    fred.observations["CPIAUCSL"] = [
        {"date": "2020-01-01", "value": "100.0"},
        {"date": "2020-02-01", "value": "."},
        {"date": "2020-03-01", "value": "101.0"},
    ]
    fred.info["CPIAUCSL"] = {
        "id": "CPIAUCSL",
        "title": "Consumer Price Index for All Urban Consumers",
        "units": "Index 1982-1984=100",
        "frequency": "Monthly",
    }
    fred.observations["GDP"] = [
        {"date": "2019-10-01", "value": "21694.5"},
        {"date": "2020-01-01", "value": "21481.25"},
        {"date": "2020-04-01", "value": "19477.75"},
    ]
    fred.info["GDP"] = {
        "id": "GDP", "title": "Gross Domestic Product", "units": "Billions of Dollars", "frequency": "Quarterly",
    }
    return fred


@pytest.fixture
def fetcher(settings, fake_fred):
    client = httpx.Client(transport=httpx.MockTransport(fake_fred.handler))
    with FredFetcher(settings, client=client) as fred_fetcher:
        yield fred_fetcher
