import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..engine.calculator import CostingCalculator
from ..errors import CostingError
from ..schemas import AppSettings, CalcResult, Item
from ..seed import default_app_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/calculate", tags=["calculate"])


class CalculateRequest(BaseModel):
    item: Item
    settings: Optional[AppSettings] = None


class BatchCalculateRequest(BaseModel):
    items: List[Item]
    settings: Optional[AppSettings] = None


def _calculate(calculator: CostingCalculator, item: Item, settings: AppSettings) -> CalcResult:
    try:
        return calculator.calculate(item, settings)
    except CostingError as e:
        logger.warning("Cannot price item %s: %s", item.id, e)
        raise HTTPException(status_code=422, detail=f"Item {item.id}: {e}")


@router.post("", response_model=CalcResult)
def calculate_item(request: CalculateRequest):
    """Price one item for one standard bag. Settings default to the org defaults."""
    settings = request.settings or default_app_settings()
    return _calculate(CostingCalculator(), request.item, settings)


@router.post("/batch", response_model=List[CalcResult])
def calculate_items(request: BatchCalculateRequest):
    """Price several items against the same settings. Fails on the first bad item."""
    settings = request.settings or default_app_settings()
    calculator = CostingCalculator()
    return [_calculate(calculator, item, settings) for item in request.items]
