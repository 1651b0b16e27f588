"""Sampler dataclasses and derived grid parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from shapely.geometry import box as shapely_box


# ── Input dataclasses ──────────────────────────────────────────────


@dataclass(frozen=True)
class Bounds:
    """Placement rectangle: origin (x, y) plus extents."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def to_box(self):
        """Shapely polygon covering the rectangle."""
        return shapely_box(self.x, self.y, self.right, self.bottom)


@dataclass(frozen=True)
class ImageSize:
    """A square image footprint (side length, or radius for circles)."""

    size: float


SizeEntry = Union[float, int, ImageSize]


def size_values(sizes: Sequence[SizeEntry]) -> list[float]:
    """Flatten a size spec given as numbers or ImageSize entries."""
    return [float(s.size) if isinstance(s, ImageSize) else float(s) for s in sizes]


# ── Output dataclasses ─────────────────────────────────────────────


@dataclass(frozen=True)
class Sample:
    """A placed item: centre, effective exclusion radius and size index."""

    x: float
    y: float
    radius: float
    size_index: int


# Dense grid slots in cell-index order; None marks an empty cell.
SampleList = list[Optional[Sample]]


# ── Derived parameters ─────────────────────────────────────────────


@dataclass(frozen=True)
class SamplerParams:
    """Grid constants derived from the size spec and minimum gap.

    ``cell_size`` is chosen so that, at the densest packing of the
    smallest items, a grid cell holds at most one sample.
    ``neighbour_range`` is how many cells to scan outward so that the
    largest items can never hide a conflicting neighbour.
    The grid shape itself comes from ``SampleGrid``, which clamps
    degenerate bounds to zero cells.
    """

    min_size: float
    max_size: float
    cell_size: float
    neighbour_range: int

    @classmethod
    def derive(
        cls,
        sizes: Sequence[float],
        min_dist: float,
    ) -> SamplerParams:
        min_size = min(sizes)
        max_size = max(sizes)
        cell_size = (min_dist + 2 * min_size) / math.sqrt(2)
        return cls(
            min_size=min_size,
            max_size=max_size,
            cell_size=cell_size,
            neighbour_range=math.ceil((min_dist + 2 * max_size) / cell_size),
        )
