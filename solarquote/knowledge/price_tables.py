"""
ElectroCare Sizing and Price Tables.

Sources:
    - Appliance wattages printed on the installation wizard load-demand step
    - Component prices from the new-installation configurator (PKR)
    - Regional sizing assumptions for Pakistan (sun-hours, efficiency)

This module provides read-only access to the constants used by the
load, sizing and pricing calculators.

Note: These are FIXED tables compiled into the engine.
      They are NOT read from configuration and must not be mutated at runtime.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


# -------------------------------------------------------------------
# Appliance Wattages (W per unit)
# -------------------------------------------------------------------
# (inventory field, display label, watts per unit), in wizard order
APPLIANCE_CATALOG: Tuple[Tuple[str, str, int], ...] = (
    ("ac_15_ton", "AC 1.5 Ton", 2000),
    ("ac_1_ton", "AC 1 Ton", 1500),
    ("fans", "Fans", 100),
    ("refrigerators", "Refrigerator", 400),
    ("lights", "Lights", 15),
    ("motors", "Motors", 1000),
    ("irons", "Iron", 1000),
    ("washing_machines", "Washing Machine", 350),
    ("computer_tv", "Computer/TV", 300),
    ("cctv", "CCTV", 350),
    ("water_dispensers", "Water Dispenser", 300),
)

APPLIANCE_WATTS: Mapping[str, int] = MappingProxyType(
    {field: watts for field, _label, watts in APPLIANCE_CATALOG}
)

OTHER_LOAD_LABEL = "Other"


# -------------------------------------------------------------------
# Load Calculator Catalog (W per unit, by variant)
# -------------------------------------------------------------------
# (category, form key, title, variant -> watts), in page order
CALCULATOR_CATALOG: Tuple[Tuple[str, str, str, Mapping[str, int]], ...] = (
    ("fans", "fans", "Fans", MappingProxyType({
        "A/C Fan": 75,
        "D/C Fan": 50,
        "Inverter Fan": 35,
    })),
    ("tube_lights", "tubeLights", "Tubelights", MappingProxyType({
        "36W": 36,
        "40W": 40,
        "60W": 60,
    })),
    ("led_bulbs", "ledBulbs", "LED Bulbs", MappingProxyType({
        "5W": 5,
        "7W": 7,
        "12W": 12,
        "15W": 15,
        "18W": 18,
    })),
    ("led_tvs", "ledTVs", "LED TVs", MappingProxyType({
        '32"': 65,
        '42"': 100,
        '55"': 155,
        '65"': 200,
        '75"': 250,
    })),
    ("refrigerators", "refrigerators", "Refrigerators", MappingProxyType({
        "Inverter Refrigerator": 150,
        "AC Refrigerator": 300,
    })),
    ("washing_machines", "washingMachines", "Washing Machines", MappingProxyType({
        "Inverter Washing Machine": 400,
        "AC Washing Machine": 600,
    })),
    ("irons", "irons", "Irons", MappingProxyType({
        "Iron (Plastic body)": 1000,
        "Iron (Metal body)": 1500,
    })),
    ("split_acs", "splitACs", "Split ACs", MappingProxyType({
        "Split AC 1.0 Ton": 1200,
        "Split AC 1.5 Ton": 1800,
        "Split AC 2.0 Ton": 2400,
        "Split AC 4.0 Ton": 4800,
    })),
    ("inverter_acs", "inverterACs", "Inverter ACs", MappingProxyType({
        "Inverter AC 1.0 Ton": 900,
        "Inverter AC 1.5 Ton": 1350,
        "Inverter AC 2.0 Ton": 1800,
        "Inverter AC 4.0 Ton": 3600,
    })),
    ("water_pumps", "waterPumps", "Water Pumps", MappingProxyType({
        "Water Pump 0.5 HP": 375,
        "Water Pump 1.0 HP": 750,
        "Water Pump 1.5 HP": 1125,
        "Water Pump 2.0 HP": 1500,
    })),
)

CALCULATOR_VARIANT_WATTS: Mapping[str, Mapping[str, int]] = MappingProxyType(
    {category: variants for category, _key, _title, variants in CALCULATOR_CATALOG}
)

CALCULATOR_CATEGORY_TITLES: Mapping[str, str] = MappingProxyType(
    {category: title for category, _key, title, _variants in CALCULATOR_CATALOG}
)

# (appliance, title, default watts); wattage is editable per quote
EXTRA_APPLIANCES: Tuple[Tuple[str, str, int], ...] = (
    ("microwave", "Microwave", 1200),
    ("computer", "Computer", 300),
    ("laptop", "Laptop", 65),
)

EXTRA_APPLIANCE_TITLES: Mapping[str, str] = MappingProxyType(
    {key: title for key, title, _watts in EXTRA_APPLIANCES}
)


# -------------------------------------------------------------------
# Sizing Assumptions
# -------------------------------------------------------------------
# Calculator page
CALCULATOR_ASSUMPTIONS: Mapping[str, float] = MappingProxyType({
    "daily_usage_hours": 8,
    "sun_hours": 5,             # Average sun hours in Pakistan
    "system_efficiency": 0.85,
    "panel_watts": 550,
    "battery_unit_kwh": 2.4,
    "inverter_overhead": 1.25,
    "cost_per_kw": 100_000,
})

# Installation wizard
WIZARD_ASSUMPTIONS: Mapping[str, float] = MappingProxyType({
    "safety_factor": 1.25,
    "panel_kw": 0.55,
    "inverter_factor": 1.2,
    "battery_kwh_per_kw": 4,
    "cost_per_kw": 150_000,
})

# Quick estimator (direct daily consumption)
QUICK_ASSUMPTIONS: Mapping[str, float] = MappingProxyType({
    "buffer": 1.2,
    "peak_sun_hours": 4.5,
    "cost_per_kw": 50_000,
})

# (watts per unit, hours per day) for the quick estimator's appliance form
QUICK_APPLIANCE_PROFILE: Mapping[str, Tuple[int, int]] = MappingProxyType({
    "lights": (5, 8),           # LED lights
    "fans": (75, 8),            # Ceiling fans
    "acs": (1500, 6),           # Inverter ACs
    "computers": (300, 8),
})


# -------------------------------------------------------------------
# Component Prices (PKR)
# -------------------------------------------------------------------
STAND_PRICE_PER_PANEL: Mapping[str, int] = MappingProxyType({
    "custom": 1200,
    "standard": 1000,
})

STANDARD_STAND_LEVELS: Tuple[str, ...] = ("L2", "L3")

INVERTER_PRICES: Mapping[str, Mapping[str, int]] = MappingProxyType({
    "IP21": MappingProxyType({"4": 5000, "6": 8000, "8": 14000, "11": 18000}),
    "IP65": MappingProxyType({"6": 12000, "8": 16000, "12": 21000}),
    "IP66": MappingProxyType({"6": 12000, "8": 16000, "12": 21000}),
})

# Flat price regardless of capacity
FLAT_INVERTER_PRICES: Mapping[str, int] = MappingProxyType({
    "Non": 4000,
})

# Only lithium carries an upcharge
BATTERY_OPTIONS: Mapping[str, Tuple[str, int]] = MappingProxyType({
    "lithium": ("Lithium Battery", 2000),
    "tubular": ("Tubular Battery", 0),
    "truck": ("Truck Battery", 0),
    "none": ("No Battery", 0),
})

INVERTER_COMPANIES: Mapping[str, str] = MappingProxyType({
    "fronius": "Fronius",
    "greentech": "GreenTech",
    "huawei": "Huawei",
    "goodwe": "GoodWe",
    "other": "Other",
})

INVERTER_CAPACITIES: Tuple[str, ...] = ("3", "4", "6", "8", "10", "11", "12")

INVERTER_CATEGORIES: Mapping[str, str] = MappingProxyType({
    "hybrid": "Hybrid Inverter",
    "on-grid": "ON-Grid Inverter",
    "off-grid": "OFF-Grid (Local Inverter)",
})

INVERTER_MODELS: Tuple[str, ...] = ("IP21", "IP65", "IP66", "Non")


# -------------------------------------------------------------------
# Quote Projection Factors
# -------------------------------------------------------------------
PROJECTION_FACTORS: Mapping[str, float] = MappingProxyType({
    "installation_rate": 0.15,
    "generation_hours": 5,
    "monthly_savings_rate": 0.02,
    "annual_savings_rate": 0.24,
    "co2_tons_per_kw": 1.2,
    "trees_per_kw": 30,
    "co2_25y_tons_per_kw": 30,
    "max_carbon_reduction_pct": 95,
})

# Per-flow return figures as shown on the calculator page and wizard quote
FLOW_RETURNS: Mapping[str, Mapping[str, Optional[float]]] = MappingProxyType({
    "calculator": MappingProxyType({"savings_25y_factor": 6, "roi_percent": 520, "payback_years": None}),
    "wizard": MappingProxyType({"savings_25y_factor": 4.5, "roi_percent": 450, "payback_years": 5.5}),
})


# -------------------------------------------------------------------
# Helper Functions
# -------------------------------------------------------------------
def get_variant_watts(category: str, variant: str) -> int:
    """
    Get the per-unit wattage of a load calculator variant.

    Args:
        category: Catalog category (e.g. "split_acs")
        variant: Variant label (e.g. "Split AC 1.5 Ton")

    Returns:
        Watts per unit; an unselected or unknown variant is 0.
        Unknown categories raise KeyError.
    """
    return CALCULATOR_VARIANT_WATTS[category].get(variant, 0)


def get_inverter_price(model: str, capacity: str) -> int:
    """Look up the inverter price for a (model, capacity) pair, 0 if unlisted."""
    if model in FLAT_INVERTER_PRICES:
        return FLAT_INVERTER_PRICES[model]
    return INVERTER_PRICES.get(model, {}).get(str(capacity), 0)


def get_battery_option(battery_type: str) -> Tuple[str, int]:
    """Return (display name, price) for a battery type."""
    return BATTERY_OPTIONS.get(battery_type, BATTERY_OPTIONS["none"])


def get_flow_returns(flow: str) -> Dict[str, Optional[float]]:
    """Get the return-on-investment factors for a quotation flow."""
    if flow not in FLOW_RETURNS:
        raise KeyError(f"Unknown quotation flow: {flow}")
    return dict(FLOW_RETURNS[flow])
