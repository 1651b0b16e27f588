"""Sampler — scatters non-overlapping items with Poisson-disc sampling.

Submodules:
  models        Input/output dataclasses and derived grid parameters.
  geometry      Low-level helpers (radii, bounds test, shapely footprints).
  grid          Uniform background grid for neighbour lookups.
  engine        Main sampling algorithm (Bridson, grid-accelerated).
  checks        Spacing/containment verification of a result.
  serialization JSON conversion (samples_to_dict, parse_samples).
"""

from .models import Bounds, ImageSize, Sample, SampleList, SamplerParams
from .engine import poisson_sample
from .grid import SampleGrid
from .checks import check_layout
from .serialization import samples_to_dict, parse_samples, parse_bounds
from .geometry import radius_for_size, effective_radius, is_in_bounds

__all__ = [
    # Models
    "Bounds", "ImageSize", "Sample", "SampleList", "SamplerParams",
    # Engine
    "poisson_sample", "SampleGrid",
    # Checks
    "check_layout",
    # Serialization
    "samples_to_dict", "parse_samples", "parse_bounds",
    # Geometry (used by tests)
    "radius_for_size", "effective_radius", "is_in_bounds",
]
