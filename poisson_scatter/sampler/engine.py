"""Main sampling engine — Bridson's Poisson-disc algorithm on a uniform grid."""

from __future__ import annotations

import math
import random
from typing import Callable, Optional, Sequence

from .geometry import clamp_random, effective_radius, is_in_bounds, required_gap
from .grid import SampleGrid
from .models import Bounds, Sample, SampleList, SamplerParams, SizeEntry, size_values


Rng = Callable[[], float]


# ── Sample generation ──────────────────────────────────────────────


def create_first_sample(
    bounds: Bounds, size: float, is_circle: bool, rng: Rng,
) -> Sample:
    """Seed sample at a random position, inset by *size* on every side."""
    return Sample(
        x=clamp_random(bounds.x + size, bounds.right - size, rng),
        y=clamp_random(bounds.y + size, bounds.bottom - size, rng),
        radius=effective_radius(size, is_circle),
        size_index=0,
    )


def create_sample_from_sample(
    seed: Sample,
    sizes: Sequence[float],
    min_dist: float,
    is_circle: bool,
    rng: Rng,
) -> Sample:
    """Candidate in the annulus around *seed*.

    The candidate's size is drawn uniformly from *sizes*.  Its centre
    lies between one and two minimum gaps away from the seed's surface,
    measured to the candidate's own surface.
    """
    size_index = math.floor(rng() * len(sizes))
    size = sizes[size_index]
    angle = rng() * math.pi * 2
    inner = min_dist + seed.radius + size
    distance = clamp_random(inner, inner + min_dist, rng)
    return Sample(
        x=seed.x + math.cos(angle) * distance,
        y=seed.y + math.sin(angle) * distance,
        radius=effective_radius(size, is_circle),
        size_index=size_index,
    )


# ── Acceptance test ────────────────────────────────────────────────


def is_allowed_to_draw(
    sample: Sample,
    grid: SampleGrid,
    min_dist: float,
    neighbour_range: int,
) -> bool:
    """True if no placed sample within range is closer than the required gap.

    A candidate whose own cell is already taken is always rejected, so
    the grid never has to overwrite a placed sample.
    """
    col, row = grid.cell_of(sample.x, sample.y)
    if grid.is_occupied(col, row):
        return False
    for other in grid.neighbours(col, row, neighbour_range):
        if math.hypot(other.x - sample.x, other.y - sample.y) < required_gap(sample, other, min_dist):
            return False
    return True


# ── Main sampling function ─────────────────────────────────────────


def poisson_sample(
    bounds: Bounds,
    sizes: Sequence[SizeEntry],
    min_dist: float,
    max_tries: int,
    is_circle: bool = False,
    *,
    rng: Optional[Rng] = None,
    max_iterations: Optional[int] = None,
) -> SampleList:
    """Scatter non-overlapping items across *bounds*.

    Parameters
    ----------
    bounds : Bounds
        Placement rectangle.
    sizes : sequence of float or ImageSize
        Item sizes to draw from.  Non-empty, all positive.
    min_dist : float
        Minimum gap between item surfaces (>= 0).
    max_tries : int
        Candidates per active sample per iteration (>= 1).
    is_circle : bool
        Sizes are circle radii rather than square side lengths.
    rng : callable, optional
        Uniform [0, 1) source.  Defaults to ``random.random``.
    max_iterations : int, optional
        Stop after this many seed picks even if samples are still active.

    Returns
    -------
    list of Sample or None
        Dense grid slots in cell-index order.  Empty when the first
        sample cannot be placed inside the bounds.
    """
    rng = rng or random.random
    size_list = size_values(sizes)
    params = SamplerParams.derive(size_list, min_dist)
    grid = SampleGrid(bounds, params.cell_size)

    first = create_first_sample(bounds, size_list[0], is_circle, rng)
    col, row = grid.cell_of(first.x, first.y)
    if not is_in_bounds(first, col, row, grid.num_cols, grid.num_rows, bounds):
        return []

    grid.insert(first)
    active: list[Sample] = [first]
    iterations = 0

    while active:
        if max_iterations is not None and iterations >= max_iterations:
            break
        iterations += 1

        active_index = math.floor(rng() * len(active))
        seed = active[active_index]
        found = False

        for _ in range(max_tries):
            candidate = create_sample_from_sample(seed, size_list, min_dist, is_circle, rng)
            c_col, c_row = grid.cell_of(candidate.x, candidate.y)
            if not is_in_bounds(candidate, c_col, c_row, grid.num_cols, grid.num_rows, bounds):
                continue
            if not is_allowed_to_draw(candidate, grid, min_dist, params.neighbour_range):
                continue

            grid.insert(candidate)
            active.append(candidate)
            found = True

        if not found:
            active.pop(active_index)

    return grid.slots()
