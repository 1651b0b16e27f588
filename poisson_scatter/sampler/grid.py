"""Uniform background grid for constant-time neighbour lookups.

The grid covers the placement bounds with square cells of ``cell_size``.
Cell (col, row) is stored at flat index ``col + row * num_cols``; columns
and rows are counted from the bounds origin.  Only whole cells are
created, so a strip narrower than one cell along the right and bottom
edges has no cells at all.
"""

from __future__ import annotations

import math
from typing import Iterator, Optional

from .models import Bounds, Sample, SampleList


class SampleGrid:
    """Flat mapping from cell index to at most one placed Sample.

    The grid owns every placed sample.  It only grows: samples are
    inserted, never moved or removed.
    """

    def __init__(self, bounds: Bounds, cell_size: float) -> None:
        self.bounds = bounds
        self.cell_size = cell_size
        self.num_cols = max(0, math.floor(bounds.width / cell_size))
        self.num_rows = max(0, math.floor(bounds.height / cell_size))

        self._cells: SampleList = [None] * (self.num_cols * self.num_rows)
        self._count = 0

    # ── Coordinate conversion ──────────────────────────────────────

    def cell_of(self, x: float, y: float) -> tuple[int, int]:
        """Return (col, row) for a world position.  Not clamped."""
        col = math.floor((x - self.bounds.x) / self.cell_size)
        row = math.floor((y - self.bounds.y) / self.cell_size)
        return (col, row)

    def index_of(self, sample: Sample) -> int:
        col, row = self.cell_of(sample.x, sample.y)
        return col + row * self.num_cols

    # ── Cell queries ───────────────────────────────────────────────

    def contains_cell(self, col: int, row: int) -> bool:
        return 0 <= col < self.num_cols and 0 <= row < self.num_rows

    def get(self, col: int, row: int) -> Optional[Sample]:
        if not self.contains_cell(col, row):
            return None
        return self._cells[col + row * self.num_cols]

    def is_occupied(self, col: int, row: int) -> bool:
        return self.get(col, row) is not None

    def neighbours(self, col: int, row: int, cell_range: int) -> Iterator[Sample]:
        """Yield occupied samples within *cell_range* cells of (col, row).

        Scans the square of side ``2 * cell_range + 1`` centred on the
        cell, clipped to the grid.
        """
        col_lo = max(0, col - cell_range)
        col_hi = min(self.num_cols - 1, col + cell_range)
        row_lo = max(0, row - cell_range)
        row_hi = min(self.num_rows - 1, row + cell_range)
        for r in range(row_lo, row_hi + 1):
            base = r * self.num_cols
            for c in range(col_lo, col_hi + 1):
                s = self._cells[base + c]
                if s is not None:
                    yield s

    # ── Cell mutation ──────────────────────────────────────────────

    def insert(self, sample: Sample) -> int:
        """Store a sample in its cell and return the cell index."""
        col, row = self.cell_of(sample.x, sample.y)
        if not self.contains_cell(col, row):
            raise ValueError(
                f"Sample at ({sample.x:.2f}, {sample.y:.2f}) falls outside the "
                f"{self.num_cols}×{self.num_rows} grid"
            )
        idx = col + row * self.num_cols
        if self._cells[idx] is not None:
            raise ValueError(f"Grid cell ({col}, {row}) is already occupied")
        self._cells[idx] = sample
        self._count += 1
        return idx

    # ── Output ─────────────────────────────────────────────────────

    def samples(self) -> list[Sample]:
        """Occupied cells in index order."""
        return [s for s in self._cells if s is not None]

    def slots(self) -> SampleList:
        """Copy of the dense cell list, with None for empty cells."""
        return list(self._cells)

    def __len__(self) -> int:
        return self._count
