"""
Mapping of engine results onto the quotation / installation records.

The CRUD service stores the calculated figures as strings
(systemSize, panelsRequired, inverterSize, batteryCapacityCalc, totalLoad)
and the money figures as numbers (estimatedCost, amount). These field names
are a stable contract shared with the dashboards and the PDF export.
"""
from __future__ import annotations

import json
from typing import Any, Dict, Optional

from solarquote.checks.validation import require_component_selection
from solarquote.models import ApplianceInventory, ComponentPriceResult, Customer, LoadResult, StandType
from solarquote.parsers.form_inputs import inventory_to_form

INSTALLATION_TIMELINE = "2-4 weeks"


def _num_str(value: Any) -> str:
    """Render 7.0 as "7" and 2.4 as "2.4", matching String(n) on the client."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def sizing_fields(sizing) -> Dict[str, Any]:
    """Calculated figures of any sizing result under the record's field names."""
    return {
        "systemSize": _num_str(sizing.system_size_kw or 0),
        "panelsRequired": _num_str(sizing.panel_count or 0),
        "inverterSize": _num_str(sizing.inverter_kw or 0),
        "batteryCapacityCalc": _num_str(sizing.battery_kwh or 0),
        "estimatedCost": sizing.cost,
        "amount": sizing.cost,
    }


def quotation_payload(
    customer: Customer,
    inventory: ApplianceInventory,
    load: LoadResult,
    sizing,
    installation_type: str = "",
    notes: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build the body of ``POST /api/quotations``.

    Args:
        customer: Contact details gathered by the wizard
        inventory: Appliance inventory, stored verbatim as ``items`` JSON
        load: Aggregated load of the inventory
        sizing: Sizing result of the flow that produced the quote
        installation_type: Wizard step-1 selection (residential, commercial, ...)
        notes: Free-text notes; a default summary is used when omitted
    """
    payload: Dict[str, Any] = {
        "customerName": customer.full_name,
        "customerEmail": customer.email,
        "phone": customer.phone,
        "propertyAddress": customer.address,
        "city": customer.city,
        "society": customer.society,
        "installationType": installation_type,
        "energyConsumption": _num_str(load.total_watts),
        "totalLoad": _num_str(load.total_watts),
        "installationTimeline": INSTALLATION_TIMELINE,
        "items": json.dumps(inventory_to_form(inventory)),
        "notes": notes if notes is not None else f"Installation Type: {installation_type or 'n/a'}",
    }
    payload.update(sizing_fields(sizing))
    return payload


def installation_payload(result: ComponentPriceResult) -> Dict[str, Any]:
    """Build the body of ``POST /api/installations`` for a priced bundle."""
    sel = result.selection
    require_component_selection(sel)
    stand_type = StandType(sel.stand_type)
    return {
        "panelQuantity": sel.panel_quantity,
        "standType": stand_type.value,
        "standardStandLevel": sel.standard_stand_level if stand_type == StandType.STANDARD else None,
        "inverterCompany": sel.inverter_company,
        "inverterCapacity": sel.inverter_capacity,
        "inverterCategory": sel.inverter_category,
        "inverterModel": sel.inverter_model,
        "batteryType": sel.battery_type,
        "totalPrice": result.total_price,
    }
