import pytest

from solarquote.models import (
    ApplianceInventory,
    CalculatorLoadInput,
    ComponentPriceInput,
    Customer,
    ExtraLoad,
    StandType,
    VariantLoad,
)


@pytest.fixture
def five_kw_inventory():
    # 2 x 2000 W + 10 x 100 W
    return ApplianceInventory(ac_15_ton=2, fans=10)


@pytest.fixture
def customer():
    return Customer(
        first_name="Ali",
        last_name="Khan",
        email="ali@example.com",
        phone="03001234567",
        address="House 12, Street 4",
        city="lahore",
        society="DHA",
    )


@pytest.fixture
def custom_selection():
    return ComponentPriceInput(
        panel_quantity=10,
        stand_type=StandType.CUSTOM,
        inverter_company="huawei",
        inverter_capacity="6",
        inverter_category="hybrid",
        inverter_model="IP21",
        battery_type="lithium",
    )


@pytest.fixture
def five_kw_calculator_load():
    # 2 x 1800 W + 900 W + 4 x 75 W + one 200 W computer
    return CalculatorLoadInput(
        variants=[
            VariantLoad("split_acs", "Split AC 1.5 Ton", 2),
            VariantLoad("inverter_acs", "Inverter AC 1.0 Ton", 1),
            VariantLoad("fans", "A/C Fan", 4),
        ],
        extras=[ExtraLoad("computer", watts=200, quantity=1)],
    )
