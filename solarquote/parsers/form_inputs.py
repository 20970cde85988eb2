from __future__ import annotations

import math
import re
from typing import Any, Dict, Mapping, Optional

from solarquote.knowledge.price_tables import CALCULATOR_CATALOG, EXTRA_APPLIANCES
from solarquote.models import (
    ApplianceInventory,
    CalculatorLoadInput,
    ComponentPriceInput,
    ExtraLoad,
    StandType,
    VariantLoad,
)

# Leading integer, as a browser's parseInt reads it ("12abc" -> 12, "3.7" -> 3)
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Wizard form field -> inventory field
INVENTORY_FORM_FIELDS: Dict[str, str] = {
    "ac15Ton": "ac_15_ton",
    "ac1Ton": "ac_1_ton",
    "fans": "fans",
    "refrigerator": "refrigerators",
    "lights": "lights",
    "motors": "motors",
    "iron": "irons",
    "washingMachine": "washing_machines",
    "computerTV": "computer_tv",
    "cctv": "cctv",
    "waterDispenser": "water_dispensers",
}


def parse_int(value: Any, default: int = 0) -> int:
    """
    Lenient integer parse for form values.
    Missing, empty or non-numeric input returns *default* instead of raising.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            return default
        return int(value)
    m = _LEADING_INT.match(str(value))
    return int(m.group(1)) if m else default


def parse_float(value: Any, default: float = 0.0) -> float:
    """Lenient float parse; non-numeric input returns *default*."""
    if value is None or isinstance(value, bool):
        return default
    try:
        parsed = float(str(value).strip())
    except ValueError:
        return default
    return parsed if math.isfinite(parsed) else default


def parse_count(value: Any) -> int:
    """Non-negative appliance count; anything unparseable counts as 0."""
    return max(0, parse_int(value))


def parse_watts(value: Any) -> int:
    return max(0, parse_int(value))


def parse_panel_quantity(value: Any) -> int:
    """The configurator never goes below one panel."""
    return max(1, parse_int(value, default=1))


def _text(value: Any) -> str:
    return "" if value is None else str(value).strip()


def inventory_from_form(form: Mapping[str, Any]) -> ApplianceInventory:
    """Build an inventory from the wizard's load-demand fields."""
    counts = {field: parse_count(form.get(key)) for key, field in INVENTORY_FORM_FIELDS.items()}
    return ApplianceInventory(
        **counts,
        other_watts=parse_watts(form.get("other")),
        other_description=_text(form.get("otherDescription")),
    )


def inventory_to_form(inventory: ApplianceInventory) -> Dict[str, Any]:
    """Inverse of inventory_from_form, used for the stored ``items`` JSON."""
    data: Dict[str, Any] = {key: getattr(inventory, field) for key, field in INVENTORY_FORM_FIELDS.items()}
    data["other"] = inventory.other_watts
    data["otherDescription"] = inventory.other_description
    return data


def calculator_load_from_form(form: Mapping[str, Any]) -> CalculatorLoadInput:
    """
    Build the load calculator selection.

    Each catalog category reads ``<key>Type`` and ``<key>Quantity``; each extra
    appliance reads ``<key>Watts`` (catalog default when absent) and ``<key>Quantity``.
    """
    variants = [
        VariantLoad(
            category=category,
            variant=_text(form.get(f"{key}Type")),
            quantity=parse_count(form.get(f"{key}Quantity")),
        )
        for category, key, _title, _variants in CALCULATOR_CATALOG
    ]
    extras = [
        ExtraLoad(
            appliance=key,
            watts=parse_watts(form.get(f"{key}Watts", default_watts)),
            quantity=parse_count(form.get(f"{key}Quantity")),
        )
        for key, _title, default_watts in EXTRA_APPLIANCES
    ]
    return CalculatorLoadInput(variants=variants, extras=extras)


def _stand_type(value: Any) -> Optional[StandType]:
    text = _text(value).lower()
    try:
        return StandType(text)
    except ValueError:
        return None


def component_input_from_form(form: Mapping[str, Any]) -> ComponentPriceInput:
    """
    Build a configurator selection from form fields.

    Unknown or empty selections are carried as empty values so that the
    validation layer can name the missing fields.
    """
    level = _text(form.get("standardStandLevel")) or "L2"
    return ComponentPriceInput(
        panel_quantity=parse_panel_quantity(form.get("panelQuantity")),
        stand_type=_stand_type(form.get("standType")),
        inverter_company=_text(form.get("inverterCompany")),
        inverter_capacity=_text(form.get("inverterCapacity")),
        inverter_category=_text(form.get("inverterCategory")),
        inverter_model=_text(form.get("inverterModel")),
        battery_type=_text(form.get("batteryType")),
        standard_stand_level=level,
    )


def quick_inputs_from_form(form: Mapping[str, Any]) -> Dict[str, float]:
    """Quick estimator fields; kitchen and misc are already in watt-hours."""
    return {
        "lights": parse_count(form.get("lights")),
        "fans": parse_count(form.get("fans")),
        "acs": parse_count(form.get("acs")),
        "computers": parse_count(form.get("computers")),
        "kitchen_wh": parse_watts(form.get("kitchen")),
        "misc_wh": parse_watts(form.get("misc")),
    }
