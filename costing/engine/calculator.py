"""
Costing calculator: Item + AppSettings -> CalcResult.

Pure math, no I/O, no state between calls.

    1. grams per piece (circle weight less actual/polish wastage, plus
       kunda, polybag and pipe share)
    2. pieces per bag = bag kg * 1000 / packed grams (NOT rounded)
    3. packed kg per part for one bag -> yield flow -> part cost
    4. kunda, plastic, and one packing charge for the whole bag
    5. per-kg and per-piece rates

Values are rounded exactly once, when the CalcResult is built.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple, Union

from pydantic import ValidationError

from ..errors import InputValidationError
from ..schemas import (
    AppSettings, CalcResult, CostDebug, Item, PackingStage, PartBreakdown,
    PartSpec, PerPieceWeights, PolishStage, ScrapReturn,
)
from ..weights import circle_weight_g, pipe_share_g, polybag_weight_g, reduce_by_pct
from .aggregator import PartCost, aggregate_part_cost
from .rates import CircleRatePolicy, resolve_circle_rate
from .yield_flow import Stage, StageCharge, solve_yield_flow

logger = logging.getLogger(__name__)

PRESS = "press"
INDUCTION = "induction"
POLISH = "polish"
PACKING = "packing"


def _r2(value: float) -> float:
    return round(value, 2)


def _r3(value: float) -> float:
    return round(value, 3)


def _fraction(pct: float) -> float:
    return pct / 100.0


def _scrap_rate(scrap_return: ScrapReturn) -> float:
    return scrap_return.rate_per_kg if scrap_return.enabled else 0.0


# --- Input boundary ---

def load_item(data: Union[Item, Mapping]) -> Item:
    """
    Validate an item record (camelCase or snake_case keys). Item instances
    are checked again, including ones built with model_copy/model_construct.
    """
    try:
        return Item.model_validate(data)
    except ValidationError as e:
        raise InputValidationError(f"Invalid item: {e.error_count()} error(s)", e.errors()) from e


def load_settings(data: Union[AppSettings, Mapping]) -> AppSettings:
    try:
        return AppSettings.model_validate(data)
    except ValidationError as e:
        raise InputValidationError(f"Invalid settings: {e.error_count()} error(s)", e.errors()) from e


# --- Stage pipeline ---

def build_stages(part: PartSpec, polish: PolishStage, packing: PackingStage) -> Tuple[Stage, ...]:
    """
    The production chain for one metal part, in order.

    Press costing uses tut + job-wastage (actual wastage only affects grams).
    Packing has no per-part charge (billed once per bag) but its tut still
    comes off the metal parts.
    """
    press_charges = [StageCharge(PRESS, part.press.rate_per_kg)]
    induction = part.induction
    if induction is not None and induction.enabled and induction.rate_per_kg > 0:
        press_charges.append(StageCharge(INDUCTION, induction.rate_per_kg))

    return (
        Stage(
            name=PRESS,
            tut_fraction=_fraction(part.press.tut_pct),
            retained_fraction=_fraction(part.press.job_wastage_pct),
            charges=tuple(press_charges),
            scrap_rate_per_kg=_scrap_rate(part.press.scrap_return),
        ),
        Stage(
            name=POLISH,
            tut_fraction=_fraction(polish.tut_pct),
            retained_fraction=_fraction(polish.wastage_pct),
            charges=(StageCharge(POLISH, polish.rate_per_kg),),
            scrap_rate_per_kg=_scrap_rate(polish.scrap_return),
        ),
        Stage(
            name=PACKING,
            tut_fraction=_fraction(packing.tut_pct),
            scrap_rate_per_kg=_scrap_rate(packing.scrap_return),
        ),
    )


@dataclass(frozen=True)
class ResolvedPart:
    """A part with every optional setting decided."""
    spec: PartSpec
    circle_rate_per_kg: float
    stages: Tuple[Stage, ...]


def _part_breakdown(cost: PartCost) -> PartBreakdown:
    flow = cost.flow
    return PartBreakdown(
        circle_rate_per_kg=_r2(cost.circle_rate_per_kg),
        circle_kg_in=_r3(flow.input_kg),
        kala_kg_out=_r3(flow.by_name(PRESS).output_kg),
        polish_kg_out=_r3(flow.by_name(POLISH).output_kg),
        packed_kg_out=_r3(flow.output_kg),
        scrap_kg=_r3(flow.scrap_kg),
        circle_cost=_r2(cost.circle_cost),
        press_cost=_r2(cost.charge(PRESS)),
        induction_cost=_r2(cost.charge(INDUCTION)),
        polish_cost=_r2(cost.charge(POLISH)),
        scrap_credit_press=_r2(cost.scrap_credits.get(PRESS, 0.0)),
        scrap_credit_polish=_r2(cost.scrap_credits.get(POLISH, 0.0)),
        scrap_credit_packing=_r2(cost.scrap_credits.get(PACKING, 0.0)),
        part_cost=_r2(cost.total),
        rate_per_kg_packed=_r2(cost.rate_per_kg),
    )


class CostingCalculator:
    """
    Prices one item for one standard bag.

    The circle rate policy is applied after the part's rate is resolved;
    it defaults to the configured offset (0 unless set).
    """

    def __init__(self, rate_policy: Optional[CircleRatePolicy] = None):
        self.rate_policy = rate_policy if rate_policy is not None else CircleRatePolicy.from_config()

    def resolve_part(self, part: PartSpec, item: Item, settings: AppSettings) -> ResolvedPart:
        rate = self.rate_policy.apply(resolve_circle_rate(part, settings))
        return ResolvedPart(
            spec=part,
            circle_rate_per_kg=rate,
            stages=build_stages(part, item.polish, item.packing),
        )

    def calculate(self, item: Union[Item, Mapping], settings: Union[AppSettings, Mapping]) -> CalcResult:
        item = load_item(item)
        settings = load_settings(settings)
        bag_kg = settings.bag_standard_kg

        box = self.resolve_part(item.box, item, settings)
        cover = self.resolve_part(item.cover, item, settings)

        # --- Grams per piece ---
        box_g = self._finished_part_g(item.box, item.polish)
        cover_g = self._finished_part_g(item.cover, item.polish)
        kunda_g = item.kunda.weight_g if item.kunda.enabled else 0.0
        polybag = item.bag_profile.polybag
        pipe = item.bag_profile.pipe
        polybag_g = polybag_weight_g(polybag.size_in, polybag.gauge)
        pipe_g = pipe_share_g(pipe.width_in, pipe.length_in, pipe.gauge, pipe.pcs_per_pipe)

        total_packed_g = box_g + cover_g + kunda_g + polybag_g + pipe_g
        if total_packed_g <= 0:
            raise InputValidationError(f"Item '{item.id}' has no packed weight")

        # Shipped by bag mass, so pieces is fractional
        pcs = (bag_kg * 1000) / total_packed_g

        # --- Metal parts ---
        box_cost = self._part_cost(box, pcs * box_g / 1000)
        cover_cost = self._part_cost(cover, pcs * cover_g / 1000)

        # --- Bought-in and batch costs ---
        kunda_cost = (pcs * kunda_g / 1000) * item.kunda.rate_per_kg if item.kunda.enabled else 0.0
        plastic_cost = (
            (pcs * polybag_g / 1000) * polybag.rate_per_kg
            + (pcs * pipe_g / 1000) * pipe.rate_per_kg
        )
        packing_cost = bag_kg * item.packing.packing_rate_per_kg

        final_cost = box_cost.total + cover_cost.total + kunda_cost + plastic_cost + packing_cost
        per_kg_rate = final_cost / bag_kg
        per_pc_rate = per_kg_rate * (total_packed_g / 1000)

        parts = (box_cost, cover_cost)
        logger.debug(
            "Calculated %s: %.3f pcs/bag, final %.4f, %.4f/kg",
            item.id, pcs, final_cost, per_kg_rate,
        )

        return CalcResult(
            item_id=item.id,
            item_name=item.name,
            per_pc=PerPieceWeights(
                box_g=_r2(box_g),
                cover_g=_r2(cover_g),
                kunda_g=_r2(kunda_g),
                polybag_g=_r2(polybag_g),
                pipe_g=_r2(pipe_g),
                total_packed_g=_r2(total_packed_g),
            ),
            pcs_per_bag=_r2(pcs),
            per_kg_rate=_r2(per_kg_rate),
            per_pc_rate=_r2(per_pc_rate),
            debug=CostDebug(
                bag_kg=bag_kg,
                pcs=_r3(pcs),
                circle_kg_in_total=_r3(sum(p.flow.input_kg for p in parts)),
                circle_cost=_r2(sum(p.circle_cost for p in parts)),
                press_cost=_r2(sum(p.charge(PRESS) for p in parts)),
                induction_cost=_r2(sum(p.charge(INDUCTION) for p in parts)),
                polish_cost=_r2(sum(p.charge(POLISH) for p in parts)),
                packing_cost=_r2(packing_cost),
                kunda_cost=_r2(kunda_cost),
                plastic_cost=_r2(plastic_cost),
                scrap_credit=_r2(sum(p.scrap_credit for p in parts)),
                final_cost=_r2(final_cost),
            ),
            parts={
                "box": _part_breakdown(box_cost),
                "cover": _part_breakdown(cover_cost),
            },
        )

    def _finished_part_g(self, part: PartSpec, polish: PolishStage) -> float:
        """Circle grams less press actual wastage, then polish wastage."""
        after_press = reduce_by_pct(circle_weight_g(part.circle_size_in, part.thickness_mm),
                                    part.press.actual_wastage_pct)
        return reduce_by_pct(after_press, polish.wastage_pct)

    def _part_cost(self, part: ResolvedPart, packed_kg: float) -> PartCost:
        flow = solve_yield_flow(packed_kg, part.stages)
        return aggregate_part_cost(flow, part.circle_rate_per_kg)


def calculate(item: Union[Item, Mapping], settings: Union[AppSettings, Mapping],
              rate_policy: Optional[CircleRatePolicy] = None) -> CalcResult:
    """Convenience wrapper around CostingCalculator."""
    return CostingCalculator(rate_policy).calculate(item, settings)
