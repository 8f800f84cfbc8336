"""
Shared test fixtures: seed item, settings, calculator, test client.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Pin config before importing app modules so a local .env can't skew results
os.environ["CIRCLE_BASE_RATE"] = "170"
os.environ["CIRCLE_ADD_PER_KG"] = "5"
os.environ["CIRCLE_EXTRA_ADD_PER_KG"] = "0"
os.environ["BAG_STANDARD_KG"] = "80"
os.environ["CIRCLE_RATE_OFFSET_PER_KG"] = "0"

from costing.engine.calculator import CostingCalculator
from costing.engine.rates import CircleRatePolicy
from costing.main import app
from costing.schemas import AppSettings
from costing.seed import belly_item


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def settings():
    """Seed defaults: 170 + 5 + 0 circle rate, 80 kg bag."""
    return AppSettings(
        circle_base_rate=170,
        circle_add_per_kg=5,
        circle_extra_add_per_kg=0,
        bag_standard_kg=80,
    )


@pytest.fixture
def calculator():
    """Calculator with no circle rate offset."""
    return CostingCalculator(CircleRatePolicy(offset_per_kg=0))


@pytest.fixture
def belly7():
    """
    Belly 7" heavy bag, the reference item.
    Box: 7in circle, 0.26mm, press 20/kg, actual 4%, job 8%, tut 3%, scrap 50/kg.
    """
    return belly_item(7, "heavy")
