"""
Unit tests for mapping recession intervals onto a category axis

Tests cover:
- map_interval() index search and no-overlap cases
- band_edges() half-step widening and boundary mirroring
- pixel_positions() layouts
- recession_bands() over the NBER catalog
"""
import pytest

from econ_series_dashboard.alignment.axis_mapper import (
    band_edges,
    map_interval,
    pixel_positions,
    recession_bands,
)
from econ_series_dashboard.data.recessions import NBER_RECESSIONS
from econ_series_dashboard.models import AxisSpan, BandEdges, RecessionInterval


DATES = ["2020-01-01", "2020-02-01", "2020-03-01", "2020-04-01"]


class TestMapInterval:
    """Test map_interval function"""

    def test_partial_overlap(self):
        """Test an interval ending between labels"""
        span = map_interval(DATES, RecessionInterval("2020-02-01", "2020-03-15"))

        assert span == AxisSpan(1, 2)

    def test_fully_outside(self):
        """Test an interval after the axis reports no overlap"""
        assert map_interval(DATES, RecessionInterval("2021-01-01", "2021-06-01")) is None

    def test_before_axis(self):
        """Test an interval ending before the first label"""
        assert map_interval(DATES, RecessionInterval("2019-01-01", "2019-12-31")) is None

    def test_between_two_labels(self):
        """Test an interval that contains no label at all"""
        assert map_interval(DATES, RecessionInterval("2020-02-10", "2020-02-20")) is None

    def test_covers_whole_axis(self):
        """Test an interval wider than the axis clamps to both ends"""
        span = map_interval(DATES, RecessionInterval("2019-06-01", "2021-06-01"))

        assert span == AxisSpan(0, 3)

    def test_single_day_interval_on_label(self):
        """Test start == end landing on a label"""
        assert map_interval(DATES, RecessionInterval("2020-03-01", "2020-03-01")) == AxisSpan(2, 2)

    def test_empty_axis(self):
        """Test an empty axis never overlaps"""
        assert map_interval([], RecessionInterval("2020-01-01", "2020-12-31")) is None


class TestBandEdges:
    """Test band_edges function"""

    def test_interior_span_uniform(self):
        """Test half a step is added on each side"""
        edges = band_edges(AxisSpan(1, 2), [0, 1, 2, 3])

        assert edges == BandEdges(0.5, 2.5)

    def test_non_uniform_steps(self):
        """Test each side uses its own neighbour distance"""
        edges = band_edges(AxisSpan(1, 2), [0.0, 10.0, 40.0, 100.0])

        assert edges.x0 == pytest.approx(5.0)
        assert edges.x1 == pytest.approx(70.0)

    def test_first_label_mirrors_next_step(self):
        """Test the left edge at index 0 mirrors the 0->1 spacing"""
        edges = band_edges(AxisSpan(0, 0), [10.0, 20.0, 40.0])

        assert edges == BandEdges(5.0, 15.0)

    def test_last_label_mirrors_previous_step(self):
        """Test the right edge at the last index mirrors the n-2->n-1 spacing"""
        edges = band_edges(AxisSpan(2, 2), [10.0, 20.0, 40.0])

        assert edges == BandEdges(30.0, 50.0)

    def test_single_label_uses_fallback(self):
        """Test an axis with one label uses the fallback spacing"""
        assert band_edges(AxisSpan(0, 0), [50.0], fallback_spacing=20.0) == BandEdges(40.0, 60.0)

    def test_span_outside_positions(self):
        """Test a span that does not fit the axis raises ValueError"""
        with pytest.raises(ValueError, match="outside axis"):
            band_edges(AxisSpan(2, 5), [0, 1, 2])


class TestPixelPositions:
    """Test pixel_positions function"""

    def test_edge_aligned(self):
        """Test first and last labels on the plot edges"""
        assert pixel_positions(4, 0.0, 300.0) == [0.0, 100.0, 200.0, 300.0]

    def test_offset(self):
        """Test labels centred in equal slots"""
        assert pixel_positions(4, 0.0, 300.0, offset=True) == [37.5, 112.5, 187.5, 262.5]

    def test_single_and_empty(self):
        """Test degenerate label counts"""
        assert pixel_positions(1, 100.0, 200.0) == [150.0]
        assert pixel_positions(0, 100.0, 200.0) == []

    def test_resize_moves_bands(self):
        """Test the same span maps to new pixels when the plot width changes"""
        span = AxisSpan(1, 2)
        narrow = band_edges(span, pixel_positions(4, 0.0, 300.0))
        wide = band_edges(span, pixel_positions(4, 0.0, 600.0))

        assert narrow == BandEdges(50.0, 250.0)
        assert wide == BandEdges(100.0, 500.0)


class TestRecessionBands:
    """Test recession_bands function"""

    def test_covid_recession_on_monthly_axis(self):
        """Test only the 2020 recession overlaps a 2019-2021 monthly axis"""
        dates = [f"{year}-{month:02d}-01" for year in (2019, 2020, 2021) for month in range(1, 13)]
        bands = recession_bands(dates, NBER_RECESSIONS)

        assert len(bands) == 1
        interval, span, edges = bands[0]
        assert interval == RecessionInterval("2020-02-01", "2020-04-01")
        assert dates[span.start_index] == "2020-02-01"
        assert dates[span.end_index] == "2020-04-01"
        assert edges == BandEdges(span.start_index - 0.5, span.end_index + 0.5)

    def test_quarterly_axis(self):
        """Test a quarterly axis still shades the labels inside the interval"""
        dates = ["2008-01-01", "2008-04-01", "2008-07-01", "2008-10-01", "2009-01-01",
                 "2009-04-01", "2009-07-01", "2009-10-01"]
        bands = recession_bands(dates, NBER_RECESSIONS)

        assert len(bands) == 1
        _, span, _ = bands[0]
        assert (span.start_index, span.end_index) == (0, 5)

    def test_pixel_positions(self):
        """Test bands computed in pixel space"""
        positions = pixel_positions(len(DATES), 0.0, 300.0)
        bands = recession_bands(DATES, [RecessionInterval("2020-02-01", "2020-04-01")], positions)

        assert bands[0][2] == BandEdges(50.0, 350.0)

    def test_empty_axis(self):
        """Test no dates means no bands"""
        assert recession_bands([], NBER_RECESSIONS) == []

    def test_position_count_mismatch(self):
        """Test positions must describe every label"""
        with pytest.raises(ValueError, match="axis positions"):
            recession_bands(DATES, NBER_RECESSIONS, positions=[0.0, 1.0])
