"""Shared sampling defaults.

The options layer falls back to these values when a user leaves an option
out or supplies one that cannot be used.  The CLI reads the same values for
its argument defaults, so changing a value here keeps both in sync.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SamplerDefaults:
    """Fallback values for optional sampler options."""

    min_dist: float = 20
    """Minimum gap between the surfaces of two placed items."""

    max_tries: int = 30
    """Candidates generated per active sample before it is retired."""

    is_circle: bool = False
    """Treat sizes as circle radii instead of square side lengths."""


# Module-level singleton — importable everywhere.
SAMPLER_DEFAULTS = SamplerDefaults()
