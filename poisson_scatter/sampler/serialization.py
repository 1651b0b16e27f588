"""Sample serialization — JSON conversion."""

from __future__ import annotations

from typing import Optional

from .models import Bounds, Sample, SampleList


def samples_to_dict(result: SampleList, bounds: Optional[Bounds] = None) -> dict:
    """Serialize a sampler result to a JSON-safe dict.

    Only occupied slots are listed; each keeps its cell index so the
    dense list can be rebuilt.
    """
    data = {
        "slots": len(result),
        "samples": [
            {
                "x": s.x,
                "y": s.y,
                "radius": s.radius,
                "size_index": s.size_index,
                "cell": i,
            }
            for i, s in enumerate(result)
            if s is not None
        ],
    }
    if bounds is not None:
        data["bounds"] = {
            "x": bounds.x,
            "y": bounds.y,
            "width": bounds.width,
            "height": bounds.height,
        }
    return data


def parse_samples(data: dict) -> SampleList:
    """Parse a samples_to_dict() dict back into the dense slot list."""
    slots: SampleList = [None] * int(data["slots"])
    for s in data["samples"]:
        cell = int(s["cell"])
        if not 0 <= cell < len(slots):
            raise ValueError(f"Cell index {cell} out of range (0–{len(slots) - 1})")
        slots[cell] = Sample(
            x=float(s["x"]),
            y=float(s["y"]),
            radius=float(s["radius"]),
            size_index=int(s["size_index"]),
        )
    return slots


def parse_bounds(data: dict) -> Bounds:
    """Parse a bounds dict ``{x, y, width, height}``."""
    return Bounds(
        x=float(data["x"]),
        y=float(data["y"]),
        width=float(data["width"]),
        height=float(data["height"]),
    )
