"""
Yield flow solver tests.

Tests:
1-2.   Backward inversion matches the stage formulas
3-4.   Round trip and monotonicity
5-6.   Scrap comes only from tut; zero target
7-11.  Domain and validation errors
"""

import math

import pytest

from costing.engine.yield_flow import Stage, forward_output, solve_yield_flow
from costing.errors import CostingError, InputValidationError, YieldDomainError


def _stages(press_tut=0.03, press_job=0.08, polish_tut=0.02, polish_wastage=0.02, packing_tut=0.02):
    return [
        Stage("press", tut_fraction=press_tut, retained_fraction=press_job),
        Stage("polish", tut_fraction=polish_tut, retained_fraction=polish_wastage),
        Stage("packing", tut_fraction=packing_tut),
    ]


# ============================================================
# Inversion
# ============================================================

def test_inversion_matches_stage_formulas():
    """packing → polish → press, each divided by its yield."""
    final = 45.0
    flow = solve_yield_flow(final, _stages())

    packing_in = final / (1 - 0.02)
    polish_in = packing_in / ((1 - 0.02) * (1 - 0.02))
    press_in = polish_in / ((1 - 0.03) * (1 - 0.08))

    assert abs(flow.by_name("packing").input_kg - packing_in) < 1e-9
    assert abs(flow.by_name("polish").input_kg - polish_in) < 1e-9
    assert abs(flow.by_name("press").input_kg - press_in) < 1e-9
    assert abs(flow.input_kg - press_in) < 1e-9
    assert flow.output_kg == final


def test_stage_outputs_chain_into_next_inputs():
    flow = solve_yield_flow(10.0, _stages())
    names = [s.stage.name for s in flow.stages]
    assert names == ["press", "polish", "packing"]
    assert isinstance(flow.stages, tuple)
    for upstream, downstream in zip(flow.stages, flow.stages[1:]):
        assert abs(upstream.output_kg - downstream.input_kg) < 1e-9


def test_round_trip_reproduces_target():
    """Feeding the solved input forward gives the target back."""
    for fractions in [(0, 0, 0, 0, 0), (0.03, 0.08, 0.02, 0.02, 0.02),
                      (0.5, 0.5, 0.5, 0.5, 0.5), (0.99, 0.0, 0.0, 0.9, 0.25)]:
        stages = _stages(*fractions)
        flow = solve_yield_flow(80.0, stages)
        assert abs(forward_output(flow.input_kg, stages) - 80.0) < 1e-9


def test_every_loss_increases_required_input():
    """Raising any tut/wastage/job-wastage strictly raises press input."""
    base = dict(press_tut=0.03, press_job=0.08, polish_tut=0.02, polish_wastage=0.02, packing_tut=0.02)
    base_input = solve_yield_flow(50.0, _stages(**base)).input_kg
    for key in base:
        bumped = dict(base)
        bumped[key] += 0.01
        assert solve_yield_flow(50.0, _stages(**bumped)).input_kg > base_input, key


def test_scrap_comes_only_from_tut():
    """Job-wastage and polish wastage never come back as scrap."""
    flow = solve_yield_flow(10.0, _stages(press_tut=0, polish_tut=0, packing_tut=0))
    assert flow.scrap_kg == 0
    assert flow.input_kg > 10.0  # retained losses still cost metal

    flow = solve_yield_flow(10.0, _stages())
    press = flow.by_name("press")
    assert abs(press.scrap_kg - press.input_kg * 0.03) < 1e-12


def test_zero_target_gives_zero_flow():
    flow = solve_yield_flow(0.0, _stages())
    assert flow.input_kg == 0
    assert flow.scrap_kg == 0


# ============================================================
# Errors
# ============================================================

def test_total_loss_is_domain_error():
    with pytest.raises(YieldDomainError) as exc:
        solve_yield_flow(10.0, _stages(polish_tut=1.0))
    assert exc.value.stage == "polish"


def test_double_overloss_is_domain_error():
    """Two losses above 1 multiply to a positive yield but are still impossible."""
    with pytest.raises(YieldDomainError):
        solve_yield_flow(10.0, _stages(press_tut=1.5, press_job=1.5))


def test_negative_fraction_is_validation_error():
    with pytest.raises(InputValidationError):
        solve_yield_flow(10.0, _stages(packing_tut=-0.1))


def test_bad_target_is_validation_error():
    for bad in (-1.0, math.inf, math.nan):
        with pytest.raises(InputValidationError):
            solve_yield_flow(bad, _stages())
    with pytest.raises(InputValidationError) as exc:
        solve_yield_flow(10.0, [])
    assert exc.value.errors == [{"loc": (), "msg": "At least one stage is required", "type": "value_error"}]


def test_errors_are_costing_errors():
    assert issubclass(YieldDomainError, CostingError)
    assert issubclass(InputValidationError, CostingError)
    assert issubclass(CostingError, ValueError)
