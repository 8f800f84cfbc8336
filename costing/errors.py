"""
Costing errors.

The engine is deterministic: on any of these it stops immediately and
produces no partial result. Callers (the HTTP layer) turn them into 422s.
"""

from typing import Optional


class CostingError(ValueError):
    """Base class for everything the costing engine refuses to compute."""


class InputValidationError(CostingError):
    """
    Malformed input: a numeric field is missing, non-finite, or out of range
    (negative rate, percentage >= 100, non-positive dimension...).

    `errors` holds pydantic-style error dicts when the failure came from
    record validation, otherwise a single synthesized entry.
    """

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or [{"loc": (), "msg": message, "type": "value_error"}]


class YieldDomainError(CostingError):
    """
    A stage's combined loss fraction reaches or exceeds 1.

    The required input mass would be infinite or negative, so there is
    no meaningful cost to report.
    """

    def __init__(self, stage: str, loss_fraction: float):
        super().__init__(
            f"Stage '{stage}' loses {loss_fraction:.2%} of its input, "
            f"no finite input mass can satisfy the required output"
        )
        self.stage = stage
        self.loss_fraction = loss_fraction
