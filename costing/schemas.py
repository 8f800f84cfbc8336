"""
Input and output records for the costing engine.

Input records (Item, AppSettings and their parts) are frozen: the engine
reads them and never writes back. Attribute names are snake_case; the
camelCase keys used by exported item files (circleSizeIn, bagStandardKg...)
are accepted as aliases and emitted on the HTTP output.
"""

from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _Record(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        allow_inf_nan=False,
        alias_generator=to_camel,
        populate_by_name=True,
        # model_copy(update=...) and model_construct skip validation
        revalidate_instances="always",
    )


# Percentages are losses of a stage's input, so 100 is never valid.
def _pct(description: str):
    return Field(ge=0, lt=100, description=description)


def _rate(description: str = "currency per kg"):
    return Field(ge=0, description=description)


# --- Stage specs ---

class ScrapReturn(_Record):
    enabled: bool
    rate_per_kg: float = _rate("credit per kg of tut scrap returned")


class PressStage(_Record):
    rate_per_kg: float = _rate("charged on kala delivered back")
    actual_wastage_pct: float = _pct("material actually lost; piece weight only")
    job_wastage_pct: float = _pct("kept by the job worker; costing only")
    tut_pct: float = _pct("breakage returned as scrap")
    scrap_return: ScrapReturn


class InductionStage(_Record):
    enabled: bool
    rate_per_kg: float = _rate("charged on kala delivered after press")


class PolishStage(_Record):
    rate_per_kg: float = _rate("charged on polished output received")
    wastage_pct: float = _pct("lost, no return")
    tut_pct: float = _pct("breakage returned as scrap")
    scrap_return: ScrapReturn


class PackingStage(_Record):
    packing_rate_per_kg: float = _rate("charged once on the full bag")
    tut_pct: float = _pct("sorting tut on metal parts")
    scrap_return: ScrapReturn


# --- Item ---

class PartSpec(_Record):
    label: Literal["box", "cover"]
    circle_size_in: float = Field(gt=0, description="circle blank diameter")
    thickness_mm: float = Field(gt=0)
    # Missing on older records; resolved against AppSettings when absent.
    circle_rate_per_kg: Optional[float] = Field(default=None, ge=0)
    press: PressStage
    induction: Optional[InductionStage] = None


class KundaSpec(_Record):
    enabled: bool
    weight_g: float = Field(ge=0)
    rate_per_kg: float = _rate()


class Polybag(_Record):
    size_in: float = Field(ge=0)
    gauge: float = Field(ge=0)
    rate_per_kg: float = _rate()


class Pipe(_Record):
    width_in: float = Field(ge=0)
    length_in: float = Field(ge=0)
    gauge: float = Field(ge=0)
    pcs_per_pipe: float = Field(gt=0)
    rate_per_kg: float = _rate()


class BagProfile(_Record):
    name: Literal["heavy", "light", "custom"]
    polybag: Polybag
    pipe: Pipe


class Item(_Record):
    id: str
    name: str
    box: PartSpec
    cover: PartSpec
    kunda: KundaSpec
    bag_profile: BagProfile
    polish: PolishStage
    packing: PackingStage


class AppSettings(_Record):
    circle_base_rate: float = _rate()
    circle_add_per_kg: float = _rate()
    circle_extra_add_per_kg: float = Field(default=0.0, ge=0)
    bag_standard_kg: float = Field(gt=0, description="defines batch size")


# --- Result ---

class PerPieceWeights(_Record):
    box_g: float
    cover_g: float
    kunda_g: float
    polybag_g: float
    pipe_g: float
    total_packed_g: float


class CostDebug(_Record):
    bag_kg: float
    pcs: float
    circle_kg_in_total: float
    circle_cost: float
    press_cost: float
    induction_cost: float
    polish_cost: float
    packing_cost: float
    kunda_cost: float
    plastic_cost: float
    scrap_credit: float
    final_cost: float


class PartBreakdown(_Record):
    """Stage flow and costs for one metal part over a whole bag."""
    circle_rate_per_kg: float
    circle_kg_in: float
    kala_kg_out: float
    polish_kg_out: float
    packed_kg_out: float
    scrap_kg: float
    circle_cost: float
    press_cost: float
    induction_cost: float
    polish_cost: float
    scrap_credit_press: float
    scrap_credit_polish: float
    scrap_credit_packing: float
    part_cost: float
    rate_per_kg_packed: float


class CalcResult(_Record):
    item_id: str
    item_name: str
    per_pc: PerPieceWeights
    pcs_per_bag: float
    per_kg_rate: float
    per_pc_rate: float
    debug: CostDebug
    parts: Dict[str, PartBreakdown]
