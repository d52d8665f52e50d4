"""Series alignment, transforms, clipping and recession-band geometry."""

from econ_series_dashboard.alignment.aligner import align_series, bundle_to_frame
from econ_series_dashboard.alignment.axis_mapper import (
    band_edges,
    map_interval,
    pixel_positions,
    recession_bands,
)
from econ_series_dashboard.alignment.clipper import clip_bundle
from econ_series_dashboard.alignment.normalizer import normalize_observations
from econ_series_dashboard.alignment.transforms import annualized_change, apply_derived

__all__ = [
    "align_series",
    "annualized_change",
    "apply_derived",
    "band_edges",
    "bundle_to_frame",
    "clip_bundle",
    "map_interval",
    "normalize_observations",
    "pixel_positions",
    "recession_bands",
]
