"""
Seed catalog: the standard product lines and default settings.

Belly and Plain pots (7"-10", heavy or light bag), 11" items, and the
Chennai pot variants. Circle sizes and bag sizes below are the locked shop
mappings; edit items after seeding rather than changing these.
"""

import uuid
from typing import List

from .config import settings
from .schemas import AppSettings, BagProfile, Item

# Belly/plain size -> circle sizes (in) for box and cover, polybag size, pipe width
BELLY_SIZES = {
    7: {"box": 7.0, "cover": 5.5, "poly": 8, "pipe": 7},
    8: {"box": 7.75, "cover": 6.0, "poly": 9, "pipe": 8},
    9: {"box": 8.5, "cover": 6.5, "poly": 10, "pipe": 9},
    10: {"box": 9.25, "cover": 7.25, "poly": 11, "pipe": 10},
}

PLAIN_SIZES = {
    7: {"box": 6.75, "cover": 5.5, "poly": 8, "pipe": 7},
    8: {"box": 7.5, "cover": 6.0, "poly": 9, "pipe": 8},
    9: {"box": 8.25, "cover": 6.5, "poly": 10, "pipe": 9},
    10: {"box": 9.0, "cover": 7.25, "poly": 11, "pipe": 10},
}

SCRAP_RETURN = {"enabled": True, "rate_per_kg": 50}

# Off by default; enable per item
DEFAULT_INDUCTION = {"enabled": False, "rate_per_kg": 10}

DEFAULT_POLISH = {"rate_per_kg": 72, "wastage_pct": 2, "tut_pct": 2, "scrap_return": SCRAP_RETURN}

COVER_PRESS = {
    "rate_per_kg": 14, "actual_wastage_pct": 0, "job_wastage_pct": 6, "tut_pct": 2,
    "scrap_return": SCRAP_RETURN,
}

NO_KUNDA = {"enabled": False, "weight_g": 0, "rate_per_kg": 205}


def make_id(prefix: str = "it") -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def default_app_settings() -> AppSettings:
    """Organization defaults from config (170 + 5 + 0, 80 kg bag)."""
    return AppSettings(
        circle_base_rate=settings.CIRCLE_BASE_RATE,
        circle_add_per_kg=settings.CIRCLE_ADD_PER_KG,
        circle_extra_add_per_kg=settings.CIRCLE_EXTRA_ADD_PER_KG,
        bag_standard_kg=settings.BAG_STANDARD_KG,
    )


def heavy_bag(poly_in: float, pipe_width_in: float) -> dict:
    """225 gauge film at 135/kg."""
    return {
        "name": "heavy",
        "polybag": {"size_in": poly_in, "gauge": 225, "rate_per_kg": 135},
        "pipe": {"width_in": pipe_width_in, "length_in": 25, "gauge": 225, "pcs_per_pipe": 8, "rate_per_kg": 135},
    }


def light_bag(poly_in: float, pipe_width_in: float) -> dict:
    """100 gauge film at 150/kg."""
    return {
        "name": "light",
        "polybag": {"size_in": poly_in, "gauge": 100, "rate_per_kg": 150},
        "pipe": {"width_in": pipe_width_in, "length_in": 25, "gauge": 100, "pcs_per_pipe": 8, "rate_per_kg": 150},
    }


def _bag(kind: str, poly_in: float, pipe_width_in: float) -> dict:
    return heavy_bag(poly_in, pipe_width_in) if kind == "heavy" else light_bag(poly_in, pipe_width_in)


def _press(rate: float, actual: float, job: float, tut: float) -> dict:
    return {
        "rate_per_kg": rate, "actual_wastage_pct": actual, "job_wastage_pct": job, "tut_pct": tut,
        "scrap_return": SCRAP_RETURN,
    }


def _part(label: str, circle_in: float, thickness_mm: float, press: dict) -> dict:
    return {
        "label": label,
        "circle_size_in": circle_in,
        "thickness_mm": thickness_mm,
        "press": press,
        "induction": dict(DEFAULT_INDUCTION),
    }


def _pot(name: str, sizes: dict, box_press_rate: float, bag: str) -> Item:
    return Item(
        id=make_id(),
        name=name,
        box=_part("box", sizes["box"], 0.26, _press(box_press_rate, 4, 8, 3)),
        cover=_part("cover", sizes["cover"], 0.26, COVER_PRESS),
        kunda=NO_KUNDA,
        bag_profile=_bag(bag, sizes["poly"], sizes["pipe"]),
        polish=DEFAULT_POLISH,
        packing={"packing_rate_per_kg": 10, "tut_pct": 2, "scrap_return": SCRAP_RETURN},
    )


def belly_item(size: int, bag: str) -> Item:
    return _pot(f'Belly {size}" ({bag})', BELLY_SIZES[size], 20, bag)


def plain_item(size: int, bag: str) -> Item:
    return _pot(f'Plain {size}" ({bag})', PLAIN_SIZES[size], 16, bag)


def item_11() -> Item:
    bag = BagProfile.model_validate(light_bag(12, 12))
    return Item(
        id=make_id(),
        name='11" Items (0.26, light bag, kunda 5g)',
        box=_part("box", 11, 0.26, _press(20, 4, 8, 2)),
        cover=_part("cover", 8.5, 0.26, _press(18, 3, 7, 2)),
        kunda={"enabled": True, "weight_g": 5, "rate_per_kg": 205},
        bag_profile=bag.model_copy(update={"pipe": bag.pipe.model_copy(update={"pcs_per_pipe": 6})}),
        polish=DEFAULT_POLISH,
        packing={"packing_rate_per_kg": 15, "tut_pct": 2, "scrap_return": SCRAP_RETURN},
    )


def chennai_pot(name: str, box_in: float, cover_in: float, box_mm: float, cover_mm: float,
                kunda_g: float, kunda_rate: float, bag: str, poly_in: float, pipe_width_in: float) -> Item:
    return Item(
        id=make_id(),
        name=name,
        box=_part("box", box_in, box_mm, _press(20, 4, 8, 3)),
        cover=_part("cover", cover_in, cover_mm, _press(18, 0, 0, 2)),
        kunda={"enabled": True, "weight_g": kunda_g, "rate_per_kg": kunda_rate},
        bag_profile=_bag(bag, poly_in, pipe_width_in),
        polish=DEFAULT_POLISH,
        packing={"packing_rate_per_kg": 15, "tut_pct": 2, "scrap_return": SCRAP_RETURN},
    )


def seed_items() -> List[Item]:
    """Fresh copies of the full seed catalog (new ids every call)."""
    items = []
    for make in (belly_item, plain_item):
        for bag in ("heavy", "light"):
            items.extend(make(size, bag) for size in (7, 8, 9, 10))
    items.append(item_11())
    items.extend([
        chennai_pot('Chennai Pot 9" (all 0.33, kunda10g, heavy)', 8.25, 5.75, 0.33, 0.33, 10, 185, "heavy", 9, 8),
        chennai_pot('Chennai Pot 10" (all 0.33, kunda10g, heavy)', 9.0, 6.25, 0.33, 0.33, 10, 185, "heavy", 10, 9),
        chennai_pot('Chennai Pot 9" (box0.33 cover0.26, kunda5g, light)', 8.25, 5.75, 0.33, 0.26, 5, 205, "light", 9, 8),
        chennai_pot('Chennai Pot 10" (box0.33 cover0.26, kunda5g, light)', 9.0, 6.25, 0.33, 0.26, 5, 205, "light", 10, 9),
    ])
    return items
