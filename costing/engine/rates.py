"""
Circle (raw material) rate resolution.

An item may carry its own circle rate per part (box/cover). Older records
do not, and fall back to the organization-wide rate from AppSettings.
"""

import math
from dataclasses import dataclass

from ..errors import InputValidationError
from ..schemas import AppSettings, PartSpec


def fallback_circle_rate(settings: AppSettings) -> float:
    """Base + per-kg add + optional extra add (e.g. 170 + 5 + 0)."""
    return (
        settings.circle_base_rate
        + settings.circle_add_per_kg
        + (settings.circle_extra_add_per_kg or 0)
    )


def has_explicit_rate(part: PartSpec) -> bool:
    rate = part.circle_rate_per_kg
    return rate is not None and math.isfinite(rate) and rate > 0


def resolve_circle_rate(part: PartSpec, settings: AppSettings) -> float:
    """The part's own rate wins when present, finite and > 0."""
    if has_explicit_rate(part):
        return part.circle_rate_per_kg
    return fallback_circle_rate(settings)


@dataclass(frozen=True)
class CircleRatePolicy:
    """
    Fixed adjustment applied to an already-resolved circle rate before
    costing. Kept apart from the resolver so it can be switched off or
    changed without touching item data.
    """
    offset_per_kg: float = 0.0

    def __post_init__(self):
        if not math.isfinite(self.offset_per_kg):
            raise InputValidationError(f"Circle rate offset must be finite, got {self.offset_per_kg}")

    def apply(self, resolved_rate: float) -> float:
        rate = resolved_rate + self.offset_per_kg
        if rate < 0:
            raise InputValidationError(
                f"Circle rate {resolved_rate} with offset {self.offset_per_kg} is negative"
            )
        return rate

    @classmethod
    def from_config(cls) -> "CircleRatePolicy":
        from ..config import settings
        return cls(offset_per_kg=settings.CIRCLE_RATE_OFFSET_PER_KG)
