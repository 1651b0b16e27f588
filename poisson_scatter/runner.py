"""Sampler entry point — validate options, run the engine, report diagnostics."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Callable, Optional

from poisson_scatter.options import Diagnostic, ResolvedOptions, SamplerOptions, validate_options
from poisson_scatter.sampler import SampleList, poisson_sample


log = logging.getLogger(__name__)

TOO_SMALL_ERROR = (
    "The bounds are smaller than the generated samples. Please make sure "
    "the bounds are big enough to contain at least one sample"
)

_LOG_LEVELS = {"warning": logging.WARNING, "error": logging.ERROR}


@dataclass
class SamplingOutcome:
    """Sampler result plus everything worth telling the caller about it."""

    result: SampleList
    diagnostics: list[Diagnostic] = field(default_factory=list)
    options: ResolvedOptions | None = None    # None when bounds or images were unusable

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.level == "error"]

    @property
    def warnings(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.level == "warning"]


def poisson_image_sampler(
    options: SamplerOptions | Mapping | None,
    *,
    rng: Optional[Callable[[], float]] = None,
    max_iterations: Optional[int] = None,
) -> SamplingOutcome:
    """Run the Poisson-disc sampler on raw user options.

    Invalid bounds or images yield an empty result.  Missing or invalid
    optional values fall back to their defaults.  Every diagnostic is
    returned and also logged.
    """
    validation = validate_options(options)
    diagnostics = list(validation.diagnostics)
    result: SampleList = []

    opts = validation.options
    if opts is not None:
        result = poisson_sample(
            opts.bounds, opts.sizes, opts.min_dist, opts.max_tries, opts.is_circle,
            rng=rng, max_iterations=max_iterations,
        )
        if not result:
            diagnostics.append(Diagnostic("error", TOO_SMALL_ERROR))
        else:
            log.info(
                "Placed %d samples in %.1f×%.1f bounds (min_dist=%.1f, max_tries=%d)",
                sum(1 for s in result if s is not None),
                opts.bounds.width, opts.bounds.height,
                opts.min_dist, opts.max_tries,
            )

    for d in diagnostics:
        log.log(_LOG_LEVELS.get(d.level, logging.WARNING), "%s", d.message)

    return SamplingOutcome(result=result, diagnostics=diagnostics, options=opts)
