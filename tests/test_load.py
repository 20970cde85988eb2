import pytest

from solarquote.calculators.load import (
    aggregate_calculator_load,
    aggregate_load,
    calculator_load_breakdown,
    load_breakdown,
)
from solarquote.checks.validation import ValidationError, require_load
from solarquote.knowledge.price_tables import APPLIANCE_WATTS
from solarquote.models import ApplianceInventory, CalculatorLoadInput, ExtraLoad, VariantLoad


def test_weighted_sum_with_other_load():
    inv = ApplianceInventory(ac_15_ton=1, fans=2, other_watts=50)
    assert aggregate_load(inv).total_watts == 2250


def test_every_category_contributes_its_wattage():
    counts = {field: 1 for field in APPLIANCE_WATTS}
    result = aggregate_load(ApplianceInventory(**counts))
    assert result.total_watts == sum(APPLIANCE_WATTS.values())
    assert len(result.items) == len(APPLIANCE_WATTS)


def test_total_kw(five_kw_inventory):
    result = aggregate_load(five_kw_inventory)
    assert result.total_watts == 5000
    assert result.total_kw == 5.0


def test_breakdown_skips_zero_rows_and_puts_other_last():
    inv = ApplianceInventory(lights=4, refrigerators=1, other_watts=750, other_description="Water pump")
    rows = load_breakdown(inv)
    assert [(r.label, r.quantity, r.watts) for r in rows] == [
        ("Refrigerator", 1, 400),
        ("Lights", 4, 60),
        ("Water pump", 1, 750),
    ]


def test_other_load_without_description_uses_default_label():
    rows = load_breakdown(ApplianceInventory(other_watts=100))
    assert rows[0].label == "Other"


def test_order_invariant_and_idempotent():
    a = ApplianceInventory(fans=3, motors=1, cctv=2)
    b = ApplianceInventory(cctv=2, motors=1, fans=3)
    first = aggregate_load(a)
    assert aggregate_load(b).total_watts == first.total_watts
    assert aggregate_load(a) == first


def test_negative_counts_are_clamped():
    inv = ApplianceInventory(fans=-3, other_watts=-10)
    assert inv.fans == 0
    assert aggregate_load(inv).total_watts == 0


def test_empty_inventory_is_rejected_before_sizing():
    load = aggregate_load(ApplianceInventory())
    assert load.total_watts == 0
    assert load.items == []
    with pytest.raises(ValidationError) as exc:
        require_load(load)
    assert "loadDemand" in exc.value.errors


def test_calculator_variant_wattages(five_kw_calculator_load):
    result = aggregate_calculator_load(five_kw_calculator_load)
    assert result.total_watts == 5000
    assert [(r.quantity, r.watts) for r in result.items] == [(2, 3600), (1, 900), (4, 300), (1, 200)]


@pytest.mark.parametrize(
    "category,variant,watts",
    [
        ("fans", "Inverter Fan", 35),
        ("tube_lights", "60W", 60),
        ("led_bulbs", "18W", 18),
        ("led_tvs", '55"', 155),
        ("refrigerators", "Inverter Refrigerator", 150),
        ("washing_machines", "AC Washing Machine", 600),
        ("irons", "Iron (Metal body)", 1500),
        ("split_acs", "Split AC 4.0 Ton", 4800),
        ("inverter_acs", "Inverter AC 4.0 Ton", 3600),
        ("water_pumps", "Water Pump 0.5 HP", 375),
    ],
)
def test_calculator_catalog_variants(category, variant, watts):
    result = aggregate_calculator_load(CalculatorLoadInput(variants=[VariantLoad(category, variant, 3)]))
    assert result.total_watts == 3 * watts


def test_unselected_variant_draws_nothing():
    load_input = CalculatorLoadInput(
        variants=[VariantLoad("fans", "", 5), VariantLoad("irons", "Iron (Plastic body)", 0)]
    )
    assert calculator_load_breakdown(load_input) == []


def test_extra_appliances_use_typed_wattage():
    load_input = CalculatorLoadInput(
        extras=[ExtraLoad("microwave", watts=1200, quantity=1), ExtraLoad("laptop", watts=90, quantity=2)]
    )
    rows = calculator_load_breakdown(load_input)
    assert [(r.label, r.watts) for r in rows] == [("Microwave", 1200), ("Laptop", 180)]


def test_unknown_calculator_category():
    with pytest.raises(KeyError):
        aggregate_calculator_load(CalculatorLoadInput(variants=[VariantLoad("heaters", "2kW", 1)]))


def test_calculator_catalog_is_read_only():
    from solarquote.knowledge.price_tables import CALCULATOR_VARIANT_WATTS

    with pytest.raises(TypeError):
        CALCULATOR_VARIANT_WATTS["fans"]["A/C Fan"] = 1
