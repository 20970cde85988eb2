import pytest

from solarquote.checks.validation import ValidationError
from solarquote.pipelines import price_from_form, quote_from_form, run_calculator_flow, run_wizard_flow

FIVE_KW_FORM = {"ac15Ton": "2", "fans": "10"}

FIVE_KW_CALCULATOR_FORM = {
    "splitACsType": "Split AC 1.5 Ton",
    "splitACsQuantity": "2",
    "inverterACsType": "Inverter AC 1.0 Ton",
    "inverterACsQuantity": "1",
    "fansType": "A/C Fan",
    "fansQuantity": "4",
    "computerWatts": "200",
    "computerQuantity": "1",
}


def test_calculator_flow_from_form():
    quote = quote_from_form("calculator", FIVE_KW_CALCULATOR_FORM)
    assert quote.flow == "calculator"
    assert quote.load.total_watts == 5000
    assert quote.sizing.recommended_capacity_kw == 10
    assert quote.carbon_reduction_pct == 95
    assert quote.projection.roi_percent == 520


def test_wizard_flow_keeps_customer(customer):
    quote = quote_from_form("wizard", FIVE_KW_FORM, customer=customer)
    assert quote.sizing.recommended_capacity_kw == 7
    assert quote.customer.full_name == "Ali Khan"
    assert quote.carbon_reduction_pct is None
    assert quote.summary()["estimated_cost"] == 1_050_000


def test_flows_accept_parsed_inputs(five_kw_inventory, five_kw_calculator_load):
    assert run_calculator_flow(five_kw_calculator_load).summary()["panels"] == 19
    assert run_wizard_flow(five_kw_inventory).summary()["panels"] == 13


def test_quick_flow_prefers_daily_consumption():
    quote = quote_from_form("quick", {"dailyConsumption": "10", "acs": "5"})
    assert quote.sizing.recommended_capacity_kw == 3
    assert quote.load.items == []


def test_quick_flow_from_appliances():
    quote = quote_from_form("quick", {"lights": "10", "fans": "4", "acs": "1", "computers": "1", "kitchen": "1000", "misc": "500"})
    assert quote.sizing.daily_consumption_kwh == pytest.approx(15.7)
    assert quote.sizing.recommended_capacity_kw == 5


@pytest.mark.parametrize("flow,key", [("calculator", "loadDemand"), ("wizard", "loadDemand"), ("quick", "dailyConsumption")])
def test_empty_forms_are_rejected(flow, key):
    with pytest.raises(ValidationError) as exc:
        quote_from_form(flow, {})
    assert key in exc.value.errors


def test_unknown_flow():
    with pytest.raises(ValueError, match="Unknown quotation flow"):
        quote_from_form("unified", FIVE_KW_FORM)


def test_price_from_form():
    result = price_from_form(
        {
            "panelQuantity": "10",
            "standType": "custom",
            "inverterCompany": "fronius",
            "inverterCapacity": "6",
            "inverterCategory": "hybrid",
            "inverterModel": "IP21",
            "batteryType": "lithium",
        }
    )
    assert result.total_price == 22000


def test_price_from_form_reports_every_missing_field():
    with pytest.raises(ValidationError) as exc:
        price_from_form({"panelQuantity": "4"})
    assert len(exc.value.errors) == 6


def test_calculator_flow_ignores_wizard_fields():
    with pytest.raises(ValidationError):
        quote_from_form("calculator", FIVE_KW_FORM)


def test_calculator_flow_keeps_selection_and_breakdown():
    quote = quote_from_form("calculator", FIVE_KW_CALCULATOR_FORM)
    assert quote.calculator_input is not None
    assert [item.label for item in quote.load.items] == [
        "Fans (A/C Fan)",
        "Split ACs (Split AC 1.5 Ton)",
        "Inverter ACs (Inverter AC 1.0 Ton)",
        "Computer",
    ]
