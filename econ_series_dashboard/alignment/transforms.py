"""Derived transforms applied to a normalized series before alignment."""

import math
from dataclasses import dataclass, replace
from collections.abc import Callable, Sequence

from econ_series_dashboard.config import DerivedSeries
from econ_series_dashboard.models import NormalizedSeries, Observation


PERIODS_PER_YEAR = 12


@dataclass(frozen=True)
class AnnualizationState:
    """Fold accumulator: the most recent known value seen so far."""

    last_known: float | None = None


def annualize_step(
    state: AnnualizationState, value: float | None
) -> tuple[AnnualizationState, float | None]:
    """
    Advance the annualization fold by one observation.

    Missing values leave the state untouched, so the next known value is
    compared against the last known one rather than its direct predecessor.

    Returns:
        (next state, annualized percent change or None)
    """
    if value is None:
        return state, None

    previous = state.last_known
    next_state = AnnualizationState(last_known=value)
    if previous is None:
        return next_state, None

    ratio = value / previous if previous != 0 else math.nan
    if not math.isfinite(ratio) or ratio <= 0:
        return next_state, None

    try:
        annualized = (ratio**PERIODS_PER_YEAR - 1) * 100
    except OverflowError:
        return next_state, None
    return next_state, annualized if math.isfinite(annualized) else None


def annualized_change(observations: Sequence[Observation]) -> tuple[Observation, ...]:
    """Compound each month-over-month ratio to an annualized percent change."""
    state = AnnualizationState()
    transformed = []
    for obs in observations:
        state, value = annualize_step(state, obs.value)
        transformed.append(Observation(date=obs.date, value=value))
    return tuple(transformed)


TRANSFORMS: dict[str, Callable[[Sequence[Observation]], tuple[Observation, ...]]] = {
    "annualized_mom": annualized_change,
}


def apply_derived(
    series_id: str, source: NormalizedSeries, derived: DerivedSeries
) -> NormalizedSeries:
    """
    Build the requested derived series from its fetched source.

    Args:
        series_id: Identifier the caller requested (e.g. ``CPIAUCSL_ANN``)
        source: The normalized source series
        derived: Catalog entry naming the transform and derived units

    Returns:
        New NormalizedSeries with transformed observations and derived units
    """
    transform = TRANSFORMS.get(derived.transform)
    if transform is None:
        raise ValueError(f"Unknown transform: {derived.transform}")

    return replace(
        source,
        id=series_id,
        title=derived.label,
        units=derived.units,
        observations=transform(source.observations),
    )
