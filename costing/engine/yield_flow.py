"""
Yield flow: how much metal each stage has to receive.

Production is an ordered chain of lossy stages (press -> polish -> packing).
Every stage turns an input mass into

    output = input * (1 - tut) * (1 - retained)

where `tut` is breakage that comes back as scrap and `retained` is material
that never comes back (press job-wastage, polish wastage). Given the mass
that must come out of the last stage, the solver walks the chain backward
and reports input, output and scrap mass at every stage.
"""

import math
from dataclasses import dataclass
from typing import Sequence, Tuple

from ..errors import InputValidationError, YieldDomainError


@dataclass(frozen=True)
class StageCharge:
    """A paid process billed per kg of the stage's output."""
    name: str
    rate_per_kg: float


@dataclass(frozen=True)
class Stage:
    name: str
    tut_fraction: float = 0.0
    retained_fraction: float = 0.0
    charges: Tuple[StageCharge, ...] = ()
    # 0 when scrap return is disabled for this stage
    scrap_rate_per_kg: float = 0.0

    @property
    def loss_fraction(self) -> float:
        """Combined share of the input that does not come out."""
        return 1 - self.yield_factor

    @property
    def yield_factor(self) -> float:
        return (1 - self.tut_fraction) * (1 - self.retained_fraction)


@dataclass(frozen=True)
class StageFlow:
    stage: Stage
    input_kg: float
    output_kg: float
    scrap_kg: float


@dataclass(frozen=True)
class YieldFlow:
    """Solved chain, stages in production order."""
    stages: Tuple[StageFlow, ...] = ()

    @property
    def input_kg(self) -> float:
        return self.stages[0].input_kg

    @property
    def output_kg(self) -> float:
        return self.stages[-1].output_kg

    @property
    def scrap_kg(self) -> float:
        return sum(s.scrap_kg for s in self.stages)

    def by_name(self, name: str) -> StageFlow:
        for s in self.stages:
            if s.stage.name == name:
                return s
        raise KeyError(name)


def check_stage(stage: Stage) -> None:
    """Raise if a stage cannot pass any metal through."""
    for label, fraction in (("tut", stage.tut_fraction), ("retained", stage.retained_fraction)):
        if not math.isfinite(fraction) or fraction < 0:
            raise InputValidationError(
                f"Stage '{stage.name}' {label} fraction must be a finite number >= 0, got {fraction}"
            )
        # Two losses above 1 would multiply back to a positive yield
        if fraction >= 1:
            raise YieldDomainError(stage.name, max(fraction, stage.loss_fraction))
    if stage.yield_factor <= 0:
        raise YieldDomainError(stage.name, stage.loss_fraction)


def solve_yield_flow(final_output_kg: float, stages: Sequence[Stage]) -> YieldFlow:
    """
    Invert the stage chain from the required final output back to the
    input of the first stage.

    Args:
        final_output_kg: mass that must leave the last stage
        stages: stages in production order (first stage first)

    Raises:
        YieldDomainError: a stage loses its whole input (loss fraction >= 1)
        InputValidationError: negative/non-finite target or loss fraction
    """
    if not stages:
        raise InputValidationError("At least one stage is required")
    if not math.isfinite(final_output_kg) or final_output_kg < 0:
        raise InputValidationError(
            f"Final output mass must be a finite number >= 0, got {final_output_kg}"
        )
    for stage in stages:
        check_stage(stage)

    flows = []
    output_kg = final_output_kg
    for stage in reversed(stages):
        input_kg = output_kg / stage.yield_factor
        flows.append(StageFlow(
            stage=stage,
            input_kg=input_kg,
            output_kg=output_kg,
            scrap_kg=input_kg * stage.tut_fraction,
        ))
        output_kg = input_kg

    flows.reverse()
    return YieldFlow(stages=tuple(flows))


def forward_output(input_kg: float, stages: Sequence[Stage]) -> float:
    """Run a mass forward through the chain. Inverse of solve_yield_flow."""
    for stage in stages:
        check_stage(stage)
        input_kg = input_kg * stage.yield_factor
    return input_kg
