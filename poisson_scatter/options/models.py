"""Option dataclasses — raw user input, resolved values, diagnostics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from poisson_scatter.sampler.models import Bounds, ImageSize


@dataclass
class Diagnostic:
    """A user-facing validation message."""

    level: str      # "warning" | "error"
    message: str


@dataclass
class SamplerOptions:
    """Options exactly as a caller supplied them.

    Nothing here is trusted: any field may be missing (None) or hold a
    value of the wrong type.  ``validate_options`` turns this into
    ``ResolvedOptions`` plus diagnostics.
    """

    bounds: Any = None
    images: Any = None
    min_dist: Any = None
    max_tries: Any = None
    is_circle: Any = None


@dataclass
class ResolvedOptions:
    """Validated, defaulted values ready for the sampling engine."""

    bounds: Bounds
    images: list[ImageSize]
    min_dist: float
    max_tries: int
    is_circle: bool = False

    @property
    def sizes(self) -> list[float]:
        return [img.size for img in self.images]


@dataclass
class ValidationResult:
    """Outcome of option validation."""

    options: ResolvedOptions | None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.options is not None
