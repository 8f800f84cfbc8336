"""
Per-part cost from a solved yield flow.

Billing convention: every paid stage is billed on the mass the contractor
delivers back (stage output), never on what was sent to them. Raw circle
metal is bought at the first stage's input. Only tut comes back as scrap,
so only tut earns scrap credit.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from .yield_flow import YieldFlow

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PartCost:
    flow: YieldFlow
    circle_rate_per_kg: float
    circle_cost: float
    # charge name -> amount, e.g. {"press": .., "induction": .., "polish": ..}
    charges: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))
    # stage name -> credit
    scrap_credits: Mapping[str, float] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def scrap_credit(self) -> float:
        return sum(self.scrap_credits.values())

    @property
    def total(self) -> float:
        return self.circle_cost + sum(self.charges.values()) - self.scrap_credit

    @property
    def rate_per_kg(self) -> float:
        """Cost per kg of the part's final (packed) output."""
        output_kg = self.flow.output_kg
        if output_kg == 0:
            return 0.0
        return self.total / output_kg

    def charge(self, name: str) -> float:
        return self.charges.get(name, 0.0)


def aggregate_part_cost(flow: YieldFlow, circle_rate_per_kg: float) -> PartCost:
    """
    Price a solved flow.

        circle cost  = first stage input kg * circle rate
        stage charge = stage output kg * charge rate   (for each charge)
        scrap credit = stage scrap kg * scrap rate     (for each stage)
    """
    circle_cost = flow.input_kg * circle_rate_per_kg

    charges = {}
    scrap_credits = {}
    for stage_flow in flow.stages:
        stage = stage_flow.stage
        for charge in stage.charges:
            amount = stage_flow.output_kg * charge.rate_per_kg
            charges[charge.name] = charges.get(charge.name, 0.0) + amount
        scrap_credits[stage.name] = stage_flow.scrap_kg * stage.scrap_rate_per_kg

    cost = PartCost(
        flow=flow,
        circle_rate_per_kg=circle_rate_per_kg,
        circle_cost=circle_cost,
        charges=MappingProxyType(charges),
        scrap_credits=MappingProxyType(scrap_credits),
    )
    logger.debug(
        "Part cost: circle %.4f kg @ %.2f, charges %s, scrap credit %.4f, total %.4f",
        flow.input_kg, circle_rate_per_kg, charges, cost.scrap_credit, cost.total,
    )
    return cost
