"""Layout checks — re-verify spacing and containment of a sampled layout."""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence

from shapely.prepared import prep as shapely_prep

from .geometry import exclusion_footprint, item_footprint, required_gap
from .models import Bounds, Sample, SizeEntry, size_values


_TOLERANCE = 1e-9


def check_layout(
    result: Iterable[Optional[Sample]],
    bounds: Bounds,
    min_dist: float,
    *,
    sizes: Optional[Sequence[SizeEntry]] = None,
    is_circle: bool = False,
) -> list[str]:
    """Check a sampler result. Returns violation messages (empty = valid).

    Every exclusion circle must lie inside *bounds* and every pair of
    samples must be at least ``min_dist + r_a + r_b`` apart.  When
    *sizes* is given, the rendered items (squares or circles) are also
    checked for overlap.
    """
    samples = [s for s in result if s is not None]
    errors: list[str] = []

    # ── Containment ──
    bounds_poly = shapely_prep(bounds.to_box().buffer(_TOLERANCE))
    for i, s in enumerate(samples):
        if s.radius <= 0:
            errors.append(f"Sample {i} at ({s.x:.2f}, {s.y:.2f}) has non-positive radius {s.radius}")
        if not bounds_poly.contains(exclusion_footprint(s)):
            errors.append(
                f"Sample {i} at ({s.x:.2f}, {s.y:.2f}) r={s.radius:.2f} "
                f"extends outside bounds"
            )

    # ── Spacing ──
    for i in range(len(samples)):
        a = samples[i]
        for j in range(i + 1, len(samples)):
            b = samples[j]
            dist = math.hypot(a.x - b.x, a.y - b.y)
            need = required_gap(a, b, min_dist)
            if dist < need - _TOLERANCE:
                errors.append(
                    f"Samples {i} and {j} too close: "
                    f"distance={dist:.2f} < required={need:.2f}"
                )

    # ── Rendered items ──
    if sizes is not None:
        size_list = size_values(sizes)
        items = [item_footprint(s, size_list[s.size_index], is_circle) for s in samples]
        for i in range(len(items)):
            for j in range(i + 1, len(items)):
                if items[i].intersection(items[j]).area > _TOLERANCE:
                    errors.append(f"Items {i} and {j} overlap")

    return errors
