"""Option validation — check and default raw sampler options.

Problems are returned as diagnostics instead of being printed, so the
caller decides how to surface them.  Missing optional values produce a
warning; values that are present but unusable produce an error.  In
both cases the shared default from ``SAMPLER_DEFAULTS`` is used.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from poisson_scatter.config import SAMPLER_DEFAULTS
from poisson_scatter.sampler.models import Bounds, ImageSize

from .models import Diagnostic, ResolvedOptions, SamplerOptions, ValidationResult


BOUNDS_ERROR = "Please provide valid bounds in options object: { bounds: { x, y, width, height } }"
IMAGES_ERROR = "Please provide valid images in options object: { image: { size } }"

_BOUNDS_FIELDS = ("x", "y", "width", "height")
_OPTION_FIELDS = ("bounds", "images", "min_dist", "max_tries", "is_circle")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


# ── Predicates ─────────────────────────────────────────────────────


def has_valid_bounds(bounds: Any) -> bool:
    """True if *bounds* has numeric x, y, width and height."""
    if bounds is None:
        return False
    return all(_is_number(_field(bounds, name)) for name in _BOUNDS_FIELDS)


def has_valid_image_list(images: Any) -> bool:
    """True if *images* is a non-empty list whose entries all have a positive size."""
    if not isinstance(images, (list, tuple)) or not images:
        return False
    for img in images:
        if img is None:
            return False
        size = _field(img, "size")
        if not _is_number(size) or size <= 0:
            return False
    return True


def has_valid_min_dist(min_dist: Any) -> bool:
    return _is_number(min_dist)


def has_valid_max_tries(max_tries: Any) -> bool:
    return _is_number(max_tries)


# ── Main validation ───────────────────────────────────────────────


def validate_options(options: SamplerOptions | Mapping | None) -> ValidationResult:
    """Validate raw options. Returns resolved options (None = unusable) and diagnostics."""
    if isinstance(options, Mapping):
        options = parse_options(options)
    elif not isinstance(options, SamplerOptions):
        # Anything else is read attribute by attribute; missing ones stay None
        options = SamplerOptions(**{name: _field(options, name) for name in _OPTION_FIELDS})

    diagnostics: list[Diagnostic] = []

    # ── Bounds and images are required ──
    if not has_valid_bounds(options.bounds):
        diagnostics.append(Diagnostic("error", BOUNDS_ERROR))
        return ValidationResult(None, diagnostics)

    if not has_valid_image_list(options.images):
        diagnostics.append(Diagnostic("error", IMAGES_ERROR))
        return ValidationResult(None, diagnostics)

    bounds = Bounds(*(float(_field(options.bounds, name)) for name in _BOUNDS_FIELDS))
    images = [ImageSize(size=float(_field(img, "size"))) for img in options.images]

    # ── Optional numeric values ──
    min_dist = SAMPLER_DEFAULTS.min_dist
    if not options.min_dist:
        diagnostics.append(Diagnostic(
            "warning",
            f"The options.minDist is not set. Falling back to default of {SAMPLER_DEFAULTS.min_dist}",
        ))
        if has_valid_min_dist(options.min_dist):
            min_dist = float(options.min_dist)
    elif not has_valid_min_dist(options.min_dist):
        diagnostics.append(Diagnostic(
            "error",
            f"The given minDist value is not a valid number. "
            f"Falling back to default of {SAMPLER_DEFAULTS.min_dist}",
        ))
    elif options.min_dist < 0:
        diagnostics.append(Diagnostic(
            "error",
            f"The given minDist value must not be negative. "
            f"Falling back to default of {SAMPLER_DEFAULTS.min_dist}",
        ))
    else:
        min_dist = float(options.min_dist)

    max_tries = SAMPLER_DEFAULTS.max_tries
    if not options.max_tries:
        diagnostics.append(Diagnostic(
            "warning",
            f"The options.maxTries is not set. Falling back to default of {SAMPLER_DEFAULTS.max_tries}",
        ))
    elif not has_valid_max_tries(options.max_tries):
        diagnostics.append(Diagnostic(
            "error",
            f"The given maxTries value is not a valid number. "
            f"Falling back to default of {SAMPLER_DEFAULTS.max_tries}",
        ))
    elif options.max_tries < 1:
        diagnostics.append(Diagnostic(
            "error",
            f"The given maxTries value must be at least 1. "
            f"Falling back to default of {SAMPLER_DEFAULTS.max_tries}",
        ))
    else:
        # A fractional budget still runs every try that starts below it
        max_tries = math.ceil(options.max_tries)

    is_circle = bool(options.is_circle) if options.is_circle is not None else SAMPLER_DEFAULTS.is_circle

    return ValidationResult(
        ResolvedOptions(
            bounds=bounds,
            images=images,
            min_dist=min_dist,
            max_tries=max_tries,
            is_circle=is_circle,
        ),
        diagnostics,
    )


def parse_options(data: Mapping) -> SamplerOptions:
    """Build SamplerOptions from a dict.

    Accepts snake_case keys as well as their camelCase spellings
    (``minDist``, ``maxTries``, ``isCircle``).
    """
    def pick(snake: str, camel: str) -> Any:
        return data[snake] if snake in data else data.get(camel)

    return SamplerOptions(
        bounds=data.get("bounds"),
        images=data.get("images"),
        min_dist=pick("min_dist", "minDist"),
        max_tries=pick("max_tries", "maxTries"),
        is_circle=pick("is_circle", "isCircle"),
    )
