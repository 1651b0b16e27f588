"""Low-level geometry helpers for the sampler."""

from __future__ import annotations

import math
from typing import Callable

from shapely.geometry import Point, box as shapely_box

from .models import Bounds, Sample


def clamp_random(lo: float, hi: float, rng: Callable[[], float]) -> float:
    """Uniform value between *lo* and *hi*."""
    return lo + rng() * (hi - lo)


def radius_for_size(size: float) -> float:
    """Radius of the smallest circle that encloses a square of side *size*."""
    return math.sqrt(size * size * 2) * 0.5


def effective_radius(size: float, is_circle: bool) -> float:
    """Exclusion radius of an item.

    Circles use the size as their radius.  Squares get the circumscribed
    circle so a rendered square never pokes out of its exclusion zone.
    """
    return size if is_circle else radius_for_size(size)


def is_in_bounds(
    sample: Sample,
    col: int, row: int,
    num_cols: int, num_rows: int,
    bounds: Bounds,
) -> bool:
    """True if the sample's cell is on the grid and its circle fits in bounds."""
    return (
        0 <= col < num_cols
        and 0 <= row < num_rows
        and sample.x - sample.radius >= bounds.x
        and sample.x + sample.radius <= bounds.right
        and sample.y - sample.radius >= bounds.y
        and sample.y + sample.radius <= bounds.bottom
    )


def required_gap(a: Sample, b: Sample, min_dist: float) -> float:
    """Minimum centre-to-centre distance between two samples."""
    return min_dist + a.radius + b.radius


# ── Footprints ─────────────────────────────────────────────────────


def exclusion_footprint(sample: Sample):
    """Circular exclusion zone of a sample as a shapely polygon."""
    return Point(sample.x, sample.y).buffer(sample.radius)


def item_footprint(sample: Sample, size: float, is_circle: bool):
    """The rendered item: a circle of radius *size* or a square of side *size*."""
    if is_circle:
        return Point(sample.x, sample.y).buffer(size)
    half = size / 2
    return shapely_box(sample.x - half, sample.y - half, sample.x + half, sample.y + half)
