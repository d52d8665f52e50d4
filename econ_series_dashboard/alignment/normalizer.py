"""Parse raw FRED observations into typed, nullable values."""

from collections.abc import Iterable, Mapping

import numpy as np
import pandas as pd

from econ_series_dashboard.models import Observation


# FRED marks missing data with "." (and occasionally an empty string)
MISSING_SENTINELS = (".", "")


def normalize_observations(raw: Iterable[Mapping[str, str]]) -> tuple[Observation, ...]:
    """
    Convert raw ``{date, value}`` entries into Observations.

    Order and count are preserved. Sentinels, unparsable tokens and non-finite
    numbers all become None; nothing here raises on bad values.

    Args:
        raw: FRED ``observations`` entries, each with string ``date`` and ``value``

    Returns:
        Tuple of Observation in input order
    """
    entries = list(raw)
    if not entries:
        return ()

    df = pd.DataFrame(
        {
            "date": [str(entry["date"]) for entry in entries],
            "value": [entry.get("value") for entry in entries],
        }
    )
    text = df["value"].astype(str).str.strip()
    text = text.mask(text.isin(MISSING_SENTINELS) | df["value"].isna())
    numeric = pd.to_numeric(text, errors="coerce").astype(float)

    return tuple(
        Observation(date=date, value=float(value) if np.isfinite(value) else None)
        for date, value in zip(df["date"], numeric)
    )
