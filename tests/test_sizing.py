import math

import pytest

from solarquote.calculators.sizing import (
    appliance_daily_consumption,
    estimate_from_consumption,
    get_strategy,
    size_for_calculator,
    size_for_wizard,
)


def test_calculator_strategy_five_kw():
    s = size_for_calculator(5)
    assert s.daily_consumption_kwh == 40
    assert s.recommended_capacity_kw == 10
    assert s.panels == 19
    assert s.batteries == 17
    assert s.inverter_size_kw == 7
    assert s.estimated_cost == 1_000_000
    assert s.battery_capacity_kwh == pytest.approx(40.8)


def test_wizard_strategy_five_thousand_watts():
    s = size_for_wizard(5000)
    assert s.recommended_capacity_kw == 7
    assert s.panels_required == 13
    assert s.inverter_size_kw == 9
    assert s.battery_capacity_kwh == 28
    assert s.estimated_cost == 1_050_000


def test_strategies_stay_divergent_for_same_load():
    a = size_for_calculator(5)
    b = size_for_wizard(5000)
    assert a.system_size_kw != b.system_size_kw
    assert a.cost / a.system_size_kw == 100_000
    assert b.cost / b.system_size_kw == 150_000


@pytest.mark.parametrize("total_kw", [0.015, 0.3, 1, 2.25, 3.7, 5, 12.35, 40])
def test_calculator_quantities_are_ceilings(total_kw):
    s = size_for_calculator(total_kw)
    daily = total_kw * 8
    raw_capacity = daily / 5 / 0.85
    assert raw_capacity - 1e-9 <= s.recommended_capacity_kw < raw_capacity + 1
    assert s.panels >= s.recommended_capacity_kw * 1000 / 550 - 1e-9
    assert s.batteries >= daily / 2.4 - 1e-9
    assert s.inverter_size_kw >= total_kw * 1.25 - 1e-9
    assert all(isinstance(v, int) for v in (s.recommended_capacity_kw, s.panels, s.batteries, s.inverter_size_kw))


@pytest.mark.parametrize("watts", [15, 400, 2250, 5000, 8800, 17350])
def test_wizard_quantities_are_ceilings(watts):
    s = size_for_wizard(watts)
    raw = watts * 1.25 / 1000
    assert raw - 1e-9 <= s.recommended_capacity_kw < raw + 1
    assert s.panels_required == math.ceil(round(s.recommended_capacity_kw / 0.55, 9))
    assert s.inverter_size_kw >= s.recommended_capacity_kw * 1.2 - 1e-9
    assert s.battery_capacity_kwh == s.recommended_capacity_kw * 4


def test_exact_ratios_do_not_step_up_on_float_noise():
    # 11 / 0.55 and 0.3 * 8 / 2.4 land a hair above whole numbers in binary floats
    assert size_for_wizard(8800).panels_required == 20
    assert size_for_calculator(0.3).batteries == 1


def test_zero_load_sizes_to_zero():
    s = size_for_calculator(0)
    assert (s.recommended_capacity_kw, s.panels, s.batteries, s.inverter_size_kw, s.estimated_cost) == (0, 0, 0, 0, 0)
    assert size_for_wizard(0).recommended_capacity_kw == 0


def test_quick_estimate_from_daily_consumption():
    q = estimate_from_consumption(10)
    assert q.recommended_capacity_kw == 3
    assert q.estimated_cost == 150_000
    assert q.panel_count == 0


def test_quick_appliance_consumption():
    daily = appliance_daily_consumption(lights=10, fans=4, acs=1, computers=1, kitchen_wh=1000, misc_wh=500)
    assert daily == pytest.approx(15.7)


def test_strategy_registry():
    assert get_strategy("calculator") is size_for_calculator
    assert get_strategy("wizard") is size_for_wizard
    assert get_strategy("quick") is estimate_from_consumption
    with pytest.raises(ValueError):
        get_strategy("unified")
