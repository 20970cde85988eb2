"""
Quote pipeline.

Runs one customer flow end to end: parse form values, validate, aggregate the
load, size the system and attach the projections used on screen and in the PDF.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from solarquote.calculators.load import aggregate_calculator_load, aggregate_load
from solarquote.calculators.pricing import price_components
from solarquote.calculators.projections import carbon_reduction_percent, project_quote
from solarquote.calculators.sizing import (
    appliance_daily_consumption,
    estimate_from_consumption,
    size_for_calculator,
    size_for_wizard,
)
from solarquote.checks.validation import require_consumption, require_load
from solarquote.models import (
    ApplianceInventory,
    CalculatorLoadInput,
    ComponentPriceResult,
    Customer,
    LoadResult,
    QuoteProjection,
)
from solarquote.parsers.form_inputs import (
    calculator_load_from_form,
    component_input_from_form,
    inventory_from_form,
    parse_float,
    quick_inputs_from_form,
)

logger = logging.getLogger(__name__)


@dataclass
class Quote:
    """Everything a flow produced for one customer interaction."""
    flow: str
    inventory: ApplianceInventory
    load: LoadResult
    sizing: Any
    projection: QuoteProjection
    customer: Customer = field(default_factory=Customer)
    carbon_reduction_pct: Optional[int] = None
    calculator_input: Optional[CalculatorLoadInput] = None

    def summary(self) -> Dict[str, Any]:
        return {
            "flow": self.flow,
            "total_watts": self.load.total_watts,
            "system_size_kw": self.sizing.system_size_kw,
            "panels": self.sizing.panel_count,
            "inverter_kw": self.sizing.inverter_kw,
            "battery_kwh": self.sizing.battery_kwh,
            "estimated_cost": self.sizing.cost,
        }


def run_calculator_flow(load_input: CalculatorLoadInput, customer: Optional[Customer] = None) -> Quote:
    """Calculator page: variant selections -> kW -> calculator sizing."""
    load = aggregate_calculator_load(load_input)
    require_load(load)
    sizing = size_for_calculator(load.total_kw)
    quote = Quote(
        flow="calculator",
        inventory=ApplianceInventory(),
        load=load,
        sizing=sizing,
        projection=project_quote(sizing, "calculator"),
        customer=customer or Customer(),
        carbon_reduction_pct=carbon_reduction_percent(sizing.recommended_capacity_kw, load.total_kw),
        calculator_input=load_input,
    )
    logger.info(f"Calculator quote: {quote.summary()}")
    return quote


def run_wizard_flow(inventory: ApplianceInventory, customer: Optional[Customer] = None) -> Quote:
    """Installation wizard: inventory -> watts -> wizard sizing."""
    load = aggregate_load(inventory)
    require_load(load)
    sizing = size_for_wizard(load.total_watts)
    quote = Quote(
        flow="wizard",
        inventory=inventory,
        load=load,
        sizing=sizing,
        projection=project_quote(sizing, "wizard"),
        customer=customer or Customer(),
    )
    logger.info(f"Wizard quote: {quote.summary()}")
    return quote


def run_quick_flow(form: Mapping[str, Any]) -> Quote:
    """
    Quick estimate from either a direct ``dailyConsumption`` (kWh) field or the
    short appliance form (lights, fans, acs, computers, kitchen, misc).
    """
    daily = parse_float(form.get("dailyConsumption"))
    if daily <= 0:
        daily = appliance_daily_consumption(**quick_inputs_from_form(form))
    require_consumption(daily)
    sizing = estimate_from_consumption(daily)
    quote = Quote(
        flow="quick",
        inventory=ApplianceInventory(),
        load=LoadResult(total_watts=0),
        sizing=sizing,
        projection=project_quote(sizing, "calculator"),
    )
    logger.info(f"Quick estimate: {daily:.2f} kWh/day -> {sizing.recommended_capacity_kw} kW")
    return quote


def quote_from_form(flow: str, form: Mapping[str, Any], customer: Optional[Customer] = None) -> Quote:
    """Dispatch raw form values to the named flow."""
    if flow == "calculator":
        return run_calculator_flow(calculator_load_from_form(form), customer)
    if flow == "wizard":
        return run_wizard_flow(inventory_from_form(form), customer)
    if flow == "quick":
        return run_quick_flow(form)
    raise ValueError(f"Unknown quotation flow: {flow}")


def price_from_form(form: Mapping[str, Any]) -> ComponentPriceResult:
    """Configurator: form values -> priced bundle (raises ValidationError)."""
    return price_components(component_input_from_form(form))
