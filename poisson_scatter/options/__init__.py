"""Sampler options — dataclasses and validation with diagnostics."""

from .models import Diagnostic, SamplerOptions, ResolvedOptions, ValidationResult
from .validation import (
    validate_options, parse_options,
    has_valid_bounds, has_valid_image_list, has_valid_min_dist, has_valid_max_tries,
    BOUNDS_ERROR, IMAGES_ERROR,
)

__all__ = [
    # Models
    "Diagnostic", "SamplerOptions", "ResolvedOptions", "ValidationResult",
    # Validation
    "validate_options", "parse_options",
    "has_valid_bounds", "has_valid_image_list", "has_valid_min_dist", "has_valid_max_tries",
    "BOUNDS_ERROR", "IMAGES_ERROR",
]
