from typing import List

from fastapi import APIRouter

from ..schemas import AppSettings, Item
from ..seed import default_app_settings, seed_items

router = APIRouter(prefix="/seed", tags=["seed"])


@router.get("/items", response_model=List[Item])
def list_seed_items():
    """The standard catalog with fresh ids. Nothing is stored."""
    return seed_items()


@router.get("/settings", response_model=AppSettings)
def get_default_settings():
    return default_app_settings()
