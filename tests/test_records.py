import dataclasses
import json

import pytest

from solarquote.calculators.load import aggregate_load
from solarquote.calculators.pricing import price_components
from solarquote.calculators.sizing import size_for_calculator, size_for_wizard
from solarquote.checks.validation import ValidationError
from solarquote.models import StandType
from solarquote.records import installation_payload, quotation_payload, sizing_fields


def test_wizard_sizing_fields():
    fields = sizing_fields(size_for_wizard(5000))
    assert fields == {
        "systemSize": "7",
        "panelsRequired": "13",
        "inverterSize": "9",
        "batteryCapacityCalc": "28",
        "estimatedCost": 1_050_000,
        "amount": 1_050_000,
    }


def test_calculator_battery_capacity_is_kwh_string():
    assert sizing_fields(size_for_calculator(5))["batteryCapacityCalc"] == "40.8"


def test_quotation_payload(customer, five_kw_inventory):
    load = aggregate_load(five_kw_inventory)
    payload = quotation_payload(
        customer, five_kw_inventory, load, size_for_wizard(load.total_watts), installation_type="residential"
    )
    assert payload["customerName"] == "Ali Khan"
    assert payload["customerEmail"] == "ali@example.com"
    assert payload["totalLoad"] == "5000"
    assert payload["energyConsumption"] == "5000"
    assert payload["systemSize"] == "7"
    assert payload["installationTimeline"] == "2-4 weeks"
    assert payload["notes"] == "Installation Type: residential"
    items = json.loads(payload["items"])
    assert items["ac15Ton"] == 2
    assert items["fans"] == 10


def test_custom_stand_has_no_level(custom_selection):
    payload = installation_payload(price_components(custom_selection))
    assert payload["standType"] == "custom"
    assert payload["standardStandLevel"] is None
    assert payload["totalPrice"] == 22000


def test_standard_stand_carries_level(custom_selection):
    sel = dataclasses.replace(custom_selection, stand_type=StandType.STANDARD, standard_stand_level="L3")
    payload = installation_payload(price_components(sel))
    assert payload["standType"] == "standard"
    assert payload["standardStandLevel"] == "L3"
    assert payload["panelQuantity"] == 10


def test_installation_payload_rejects_unknown_stand_type(custom_selection):
    result = price_components(custom_selection)
    result.selection = dataclasses.replace(custom_selection, stand_type="bogus")
    with pytest.raises(ValidationError) as exc:
        installation_payload(result)
    assert "standType" in exc.value.errors
