"""Data models for economic series and chart geometry."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Observation:
    """Single observation from a FRED series. ``value`` is None when missing."""

    date: str
    value: float | None


@dataclass(frozen=True)
class NormalizedSeries:
    """A fetched series with provider sentinels resolved to None."""

    id: str
    title: str
    units: str | None
    frequency: str | None
    observations: tuple[Observation, ...] = ()


@dataclass
class AlignedSeries:
    """One series re-expressed over a bundle's shared date axis."""

    id: str
    title: str
    units: str | None
    frequency: str | None
    values: list[float | None] = field(default_factory=list)


@dataclass
class MergedBundle:
    """Several series over one sorted, gap-filled date axis."""

    dates: list[str] = field(default_factory=list)
    series: list[AlignedSeries] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.dates

    def to_dict(self) -> dict:
        """JSON-ready representation, matching the FRED bundle response shape."""
        return {
            "dates": list(self.dates),
            "series": [
                {
                    "id": s.id,
                    "title": s.title,
                    "units": s.units,
                    "frequency": s.frequency,
                    "values": list(s.values),
                }
                for s in self.series
            ],
        }


@dataclass(frozen=True)
class DateWindow:
    """Inclusive date bounds on ISO ``YYYY-MM-DD`` strings. None means open."""

    min_date: str | None = None
    max_date: str | None = None

    def contains(self, date: str) -> bool:
        if self.min_date is not None and date < self.min_date:
            return False
        if self.max_date is not None and date > self.max_date:
            return False
        return True


@dataclass(frozen=True)
class RecessionInterval:
    """A historical recession period to shade on a chart."""

    start: str
    end: str


@dataclass(frozen=True)
class AxisSpan:
    """Inclusive index range of axis labels covered by an interval."""

    start_index: int
    end_index: int


@dataclass(frozen=True)
class BandEdges:
    """Rendered x-extent of an axis span, in the axis' own coordinates."""

    x0: float
    x1: float
