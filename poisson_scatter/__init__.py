"""poisson-scatter — Poisson-disc placement of non-overlapping items.

Stages:

  options  — validate and default raw user options, collecting diagnostics
  sampler  — Bridson's algorithm on a uniform grid; returns the sample grid
  runner   — glue: options → sampler → SamplingOutcome (logs diagnostics)
"""

from .config import SAMPLER_DEFAULTS, SamplerDefaults
from .runner import SamplingOutcome, poisson_image_sampler
from .sampler import Bounds, ImageSize, Sample, poisson_sample

__all__ = [
    "SAMPLER_DEFAULTS", "SamplerDefaults",
    "SamplingOutcome", "poisson_image_sampler",
    "Bounds", "ImageSize", "Sample", "poisson_sample",
]
