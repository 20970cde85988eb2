"""Component bundle pricing for the new-installation configurator."""
from __future__ import annotations

import logging

from solarquote.checks.validation import require_component_selection
from solarquote.knowledge.price_tables import (
    STAND_PRICE_PER_PANEL,
    get_battery_option,
    get_inverter_price,
)
from solarquote.models import ComponentPriceInput, ComponentPriceResult, StandType

logger = logging.getLogger(__name__)


def stand_label(stand_type: StandType, level: str) -> str:
    if stand_type == StandType.CUSTOM:
        return "Custom Stand Structure"
    return f"Standard Stand Structure ({level})"


def price_components(selection: ComponentPriceInput) -> ComponentPriceResult:
    """
    Price a stand + inverter + battery bundle.

    Raises:
        ValidationError: if any required selection is missing. No partial
            price is produced in that case.
    """
    require_component_selection(selection)

    stand_type = StandType(selection.stand_type)
    stand_price = selection.panel_quantity * STAND_PRICE_PER_PANEL[stand_type.value]

    inverter_price = get_inverter_price(selection.inverter_model, selection.inverter_capacity)
    inverter_description = (
        f"{selection.inverter_model} {selection.inverter_capacity}Kw "
        f"{selection.inverter_category} Inverter"
    )

    battery_label, battery_price = get_battery_option(selection.battery_type)

    total = stand_price + inverter_price + battery_price
    logger.info(
        f"Priced bundle: stand={stand_price} inverter={inverter_price} "
        f"battery={battery_price} total={total}"
    )
    return ComponentPriceResult(
        selection=selection,
        stand_label=stand_label(stand_type, selection.standard_stand_level),
        stand_price=stand_price,
        inverter_description=inverter_description,
        inverter_price=inverter_price,
        battery_label=battery_label,
        battery_price=battery_price,
        total_price=total,
    )
