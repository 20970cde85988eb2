"""
Input validation for the quotation flows.

Validation failures are reported as a field -> message map so the UI can
re-prompt next to the offending input. Nothing here retries or corrects.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from solarquote.models import ComponentPriceInput, Customer, LoadResult, StandType

logger = logging.getLogger(__name__)


class ValidationError(ValueError):
    """Raised when user input cannot be sized or priced."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        summary = "; ".join(f"{k}: {v}" for k, v in self.errors.items())
        super().__init__(summary or "Validation failed")


# Order matches the configurator form
REQUIRED_COMPONENT_FIELDS = (
    ("stand_type", "standType", "Please select a stand type"),
    ("inverter_company", "inverterCompany", "Please select an inverter company"),
    ("inverter_capacity", "inverterCapacity", "Please select an inverter capacity"),
    ("inverter_category", "inverterCategory", "Please select an inverter category"),
    ("inverter_model", "inverterModel", "Please select an inverter model"),
    ("battery_type", "batteryType", "Please select a battery type"),
)


def validate_load(load: LoadResult) -> Dict[str, str]:
    """A load must draw something before it can be sized."""
    errors: Dict[str, str] = {}
    if load.total_watts <= 0:
        errors["loadDemand"] = "Please specify at least one appliance"
    return errors


def validate_consumption(daily_consumption_kwh: float) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    if daily_consumption_kwh <= 0:
        errors["dailyConsumption"] = "Please enter your energy usage"
    return errors


def validate_component_selection(selection: ComponentPriceInput) -> Dict[str, str]:
    """Every configurator selection is required; panel quantity must be positive."""
    errors: Dict[str, str] = {}
    for attr, key, message in REQUIRED_COMPONENT_FIELDS:
        value = getattr(selection, attr)
        if value is None or (isinstance(value, str) and not value.strip()):
            errors[key] = message
    if "standType" not in errors:
        try:
            StandType(selection.stand_type)
        except ValueError:
            errors["standType"] = "Please select a valid stand type"
    if selection.panel_quantity < 1:
        errors["panelQuantity"] = "Panel quantity must be at least 1"
    return errors


def validate_customer(customer: Customer) -> Dict[str, str]:
    """Contact details required before a wizard quotation can be submitted."""
    errors: Dict[str, str] = {}
    if not customer.first_name:
        errors["firstName"] = "First name is required"
    if not customer.last_name:
        errors["lastName"] = "Last name is required"
    if not customer.email:
        errors["email"] = "Email is required"
    if not customer.phone:
        errors["phone"] = "Phone number is required"
    if not customer.address:
        errors["address"] = "Address is required"
    if not customer.city:
        errors["city"] = "Please select a city"
    return errors


def _raise_if(errors: Dict[str, str], context: Optional[str] = None) -> None:
    if errors:
        logger.warning(f"Validation failed{f' ({context})' if context else ''}: {sorted(errors)}")
        raise ValidationError(errors)


def require_load(load: LoadResult) -> None:
    _raise_if(validate_load(load), "load")


def require_consumption(daily_consumption_kwh: float) -> None:
    _raise_if(validate_consumption(daily_consumption_kwh), "consumption")


def require_component_selection(selection: ComponentPriceInput) -> None:
    _raise_if(validate_component_selection(selection), "components")


def require_customer(customer: Customer) -> None:
    _raise_if(validate_customer(customer), "customer")
