from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional


class StandType(str, Enum):
    CUSTOM = "custom"
    STANDARD = "standard"


@dataclass
class ApplianceInventory:
    ac_15_ton: int = 0
    ac_1_ton: int = 0
    fans: int = 0
    refrigerators: int = 0
    lights: int = 0
    motors: int = 0
    irons: int = 0
    washing_machines: int = 0
    computer_tv: int = 0
    cctv: int = 0
    water_dispensers: int = 0
    # Watts, not a count
    other_watts: int = 0
    other_description: str = ""

    def __post_init__(self) -> None:
        for f in fields(self):
            if f.name == "other_description":
                continue
            setattr(self, f.name, max(0, int(getattr(self, f.name) or 0)))
        self.other_description = (self.other_description or "").strip()


@dataclass
class VariantLoad:
    """One load calculator row: a catalog category, the chosen variant and a count."""

    category: str
    variant: str = ""
    quantity: int = 0

    def __post_init__(self) -> None:
        self.quantity = max(0, int(self.quantity or 0))


@dataclass
class ExtraLoad:
    """Appliance whose per-unit wattage is typed in (microwave, computer, laptop)."""

    appliance: str
    watts: int = 0
    quantity: int = 0

    def __post_init__(self) -> None:
        self.watts = max(0, int(self.watts or 0))
        self.quantity = max(0, int(self.quantity or 0))


@dataclass
class CalculatorLoadInput:
    variants: List[VariantLoad] = field(default_factory=list)
    extras: List[ExtraLoad] = field(default_factory=list)


@dataclass
class LoadItem:
    label: str
    quantity: int
    watts: int


@dataclass
class LoadResult:
    total_watts: int
    items: List[LoadItem] = field(default_factory=list)

    @property
    def total_kw(self) -> float:
        return self.total_watts / 1000


@dataclass
class CalculatorSizing:
    """Calculator page result; batteries are counted in 2.4 kWh units."""

    total_kw: float
    daily_consumption_kwh: float
    recommended_capacity_kw: int
    panels: int
    batteries: int
    inverter_size_kw: int
    estimated_cost: int
    battery_unit_kwh: float = 2.4

    @property
    def battery_capacity_kwh(self) -> float:
        return round(self.batteries * self.battery_unit_kwh, 2)

    # Common names used by records and reports
    @property
    def system_size_kw(self) -> int:
        return self.recommended_capacity_kw

    @property
    def panel_count(self) -> int:
        return self.panels

    @property
    def inverter_kw(self) -> int:
        return self.inverter_size_kw

    @property
    def battery_kwh(self) -> float:
        return self.battery_capacity_kwh

    @property
    def cost(self) -> int:
        return self.estimated_cost


@dataclass
class WizardSizing:
    """Installation wizard result; battery is sized directly in kWh."""

    total_load_w: int
    recommended_capacity_kw: int
    panels_required: int
    inverter_size_kw: int
    battery_capacity_kwh: int
    estimated_cost: int

    @property
    def system_size_kw(self) -> int:
        return self.recommended_capacity_kw

    @property
    def panel_count(self) -> int:
        return self.panels_required

    @property
    def inverter_kw(self) -> int:
        return self.inverter_size_kw

    @property
    def battery_kwh(self) -> int:
        return self.battery_capacity_kwh

    @property
    def cost(self) -> int:
        return self.estimated_cost


@dataclass
class QuickEstimate:
    daily_consumption_kwh: float
    recommended_capacity_kw: int
    estimated_cost: int

    @property
    def system_size_kw(self) -> int:
        return self.recommended_capacity_kw

    @property
    def panel_count(self) -> int:
        return 0

    @property
    def inverter_kw(self) -> int:
        return 0

    @property
    def battery_kwh(self) -> int:
        return 0

    @property
    def cost(self) -> int:
        return self.estimated_cost


@dataclass
class ComponentPriceInput:
    panel_quantity: int
    stand_type: Optional[StandType]
    inverter_company: str
    inverter_capacity: str
    inverter_category: str
    inverter_model: str
    battery_type: str
    # Display only, never priced
    standard_stand_level: str = "L2"


@dataclass
class ComponentPriceResult:
    selection: ComponentPriceInput
    stand_label: str
    stand_price: int
    inverter_description: str
    inverter_price: int
    battery_label: str
    battery_price: int
    total_price: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "panelQuantity": self.selection.panel_quantity,
            "standTypeName": self.stand_label,
            "totalStandPrice": self.stand_price,
            "inverterDescription": self.inverter_description,
            "inverterCompany": self.selection.inverter_company,
            "inverterPrice": self.inverter_price,
            "batteryName": self.battery_label,
            "batteryPrice": self.battery_price,
            "totalPrice": self.total_price,
        }


@dataclass
class QuoteProjection:
    installation_charge: int
    total_investment: int
    daily_generation_kwh: float
    monthly_generation_kwh: float
    yearly_generation_kwh: float
    monthly_savings: int
    annual_savings: int
    savings_25_years: float
    roi_percent: float
    payback_years: Optional[float]
    co2_tons_per_year: float
    trees_equivalent: int
    co2_tons_25_years: float


@dataclass
class Customer:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    city: str = ""
    society: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
