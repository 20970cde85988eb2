"""
Solar system sizing strategies.

Three independent formulas are kept side by side because each one backs a
different customer flow and produces different figures for the same load:

    - size_for_calculator: standalone load calculator page
    - size_for_wizard: multi-step installation wizard
    - estimate_from_consumption: quick estimate from daily kWh

Every derived quantity is rounded up. Zero load is a validation concern of
the caller; the sizers simply return zero capacity for it.
"""
from __future__ import annotations

import logging
from math import ceil
from typing import Callable, Dict

from solarquote.knowledge.price_tables import (
    CALCULATOR_ASSUMPTIONS,
    QUICK_APPLIANCE_PROFILE,
    QUICK_ASSUMPTIONS,
    WIZARD_ASSUMPTIONS,
)
from solarquote.models import CalculatorSizing, QuickEstimate, WizardSizing

logger = logging.getLogger(__name__)


def _ceil(value: float) -> int:
    # 7 / 0.55 or 0.3 * 8 / 2.4 must not climb a step on float noise
    return int(ceil(round(value, 9)))


# -------------------------------------------------------------------
# Calculator page
# -------------------------------------------------------------------
def size_for_calculator(total_kw: float) -> CalculatorSizing:
    """
    Size a system from the calculator page's connected load.

    Formula:
        daily_kWh = kW * 8 h
        capacity = ceil(daily_kWh / 5 sun-hours / 0.85 efficiency)
        panels = ceil(capacity * 1000 / 550 W)
        batteries = ceil(daily_kWh / 2.4 kWh)
        inverter = ceil(kW * 1.25)
        cost = capacity * 100,000
    """
    a = CALCULATOR_ASSUMPTIONS
    daily = total_kw * a["daily_usage_hours"]
    capacity = _ceil((daily / a["sun_hours"]) / a["system_efficiency"])
    result = CalculatorSizing(
        total_kw=total_kw,
        daily_consumption_kwh=daily,
        recommended_capacity_kw=capacity,
        panels=_ceil(capacity * 1000 / a["panel_watts"]),
        batteries=_ceil(daily / a["battery_unit_kwh"]),
        inverter_size_kw=_ceil(total_kw * a["inverter_overhead"]),
        estimated_cost=int(capacity * a["cost_per_kw"]),
        battery_unit_kwh=a["battery_unit_kwh"],
    )
    logger.debug(f"Calculator sizing for {total_kw} kW: {result}")
    return result


# -------------------------------------------------------------------
# Installation wizard
# -------------------------------------------------------------------
def size_for_wizard(total_load_w: int) -> WizardSizing:
    """
    Size a system from the wizard's total load in watts.

    Formula:
        capacity = ceil(W * 1.25 / 1000)
        panels = ceil(capacity / 0.55 kW)
        inverter = ceil(capacity * 1.2)
        battery_kWh = ceil(capacity * 4)
        cost = capacity * 150,000
    """
    a = WIZARD_ASSUMPTIONS
    capacity = _ceil((total_load_w * a["safety_factor"]) / 1000)
    result = WizardSizing(
        total_load_w=total_load_w,
        recommended_capacity_kw=capacity,
        panels_required=_ceil(capacity / a["panel_kw"]),
        inverter_size_kw=_ceil(capacity * a["inverter_factor"]),
        battery_capacity_kwh=_ceil(capacity * a["battery_kwh_per_kw"]),
        estimated_cost=int(capacity * a["cost_per_kw"]),
    )
    logger.debug(f"Wizard sizing for {total_load_w} W: {result}")
    return result


# -------------------------------------------------------------------
# Quick estimate
# -------------------------------------------------------------------
def appliance_daily_consumption(
    lights: int = 0,
    fans: int = 0,
    acs: int = 0,
    computers: int = 0,
    kitchen_wh: float = 0,
    misc_wh: float = 0,
) -> float:
    """Daily kWh of the quick estimator's appliance form."""
    counts = {"lights": lights, "fans": fans, "acs": acs, "computers": computers}
    wh = sum(
        counts[name] * watts * hours
        for name, (watts, hours) in QUICK_APPLIANCE_PROFILE.items()
    )
    return (wh + kitchen_wh + misc_wh) / 1000


def estimate_from_consumption(daily_consumption_kwh: float) -> QuickEstimate:
    """Capacity from a directly supplied daily consumption (20% buffer, 4.5 peak sun-hours)."""
    a = QUICK_ASSUMPTIONS
    capacity = _ceil((daily_consumption_kwh * a["buffer"]) / a["peak_sun_hours"])
    return QuickEstimate(
        daily_consumption_kwh=daily_consumption_kwh,
        recommended_capacity_kw=capacity,
        estimated_cost=int(capacity * a["cost_per_kw"]),
    )


SIZING_STRATEGIES: Dict[str, Callable] = {
    "calculator": size_for_calculator,
    "wizard": size_for_wizard,
    "quick": estimate_from_consumption,
}


def get_strategy(name: str) -> Callable:
    """Return the sizing function registered under *name*."""
    try:
        return SIZING_STRATEGIES[name]
    except KeyError:
        raise ValueError(
            f"Unknown sizing strategy '{name}' (expected one of {sorted(SIZING_STRATEGIES)})"
        ) from None
