"""
Appliance load aggregation.

Two inventories feed the sizers: the installation wizard counts fixed
categories, while the load calculator page picks a wattage variant per
category and accepts typed-in wattages for a few extra appliances.
"""
from __future__ import annotations

import logging
from typing import List

from solarquote.knowledge.price_tables import (
    APPLIANCE_CATALOG,
    CALCULATOR_CATEGORY_TITLES,
    EXTRA_APPLIANCE_TITLES,
    OTHER_LOAD_LABEL,
    get_variant_watts,
)
from solarquote.models import ApplianceInventory, CalculatorLoadInput, LoadItem, LoadResult

logger = logging.getLogger(__name__)


def load_breakdown(inventory: ApplianceInventory) -> List[LoadItem]:
    """
    Itemize an inventory into per-category rows.

    Only categories with a non-zero quantity are listed. The "other" load is
    appended last as a single row carrying its watts verbatim.
    """
    items: List[LoadItem] = []
    for field_name, label, watts in APPLIANCE_CATALOG:
        qty = getattr(inventory, field_name)
        if qty > 0:
            items.append(LoadItem(label=label, quantity=qty, watts=qty * watts))

    if inventory.other_watts > 0:
        items.append(
            LoadItem(
                label=inventory.other_description or OTHER_LOAD_LABEL,
                quantity=1,
                watts=inventory.other_watts,
            )
        )
    return items


def aggregate_load(inventory: ApplianceInventory) -> LoadResult:
    """Sum count x per-unit watts over every category plus the "other" watts."""
    items = load_breakdown(inventory)
    total_watts = sum(item.watts for item in items)
    logger.debug(f"Aggregated {len(items)} load rows -> {total_watts} W")
    return LoadResult(total_watts=total_watts, items=items)


# -------------------------------------------------------------------
# Load calculator page
# -------------------------------------------------------------------
def calculator_load_breakdown(load_input: CalculatorLoadInput) -> List[LoadItem]:
    """
    Itemize the calculator page's selections.

    A row is listed only when both its wattage and its quantity are non-zero;
    an unselected variant counts as 0 W. Extra appliances follow the catalog rows.
    """
    items: List[LoadItem] = []
    for sel in load_input.variants:
        watts = get_variant_watts(sel.category, sel.variant)
        if watts and sel.quantity:
            items.append(
                LoadItem(
                    label=f"{CALCULATOR_CATEGORY_TITLES[sel.category]} ({sel.variant})",
                    quantity=sel.quantity,
                    watts=watts * sel.quantity,
                )
            )

    for extra in load_input.extras:
        if extra.watts and extra.quantity:
            items.append(
                LoadItem(
                    label=EXTRA_APPLIANCE_TITLES[extra.appliance],
                    quantity=extra.quantity,
                    watts=extra.watts * extra.quantity,
                )
            )
    return items


def aggregate_calculator_load(load_input: CalculatorLoadInput) -> LoadResult:
    items = calculator_load_breakdown(load_input)
    total_watts = sum(item.watts for item in items)
    logger.debug(f"Aggregated {len(items)} calculator rows -> {total_watts} W")
    return LoadResult(total_watts=total_watts, items=items)
