import pytest

from solarquote.calculators.projections import carbon_reduction_percent, project_quote
from solarquote.calculators.sizing import estimate_from_consumption, size_for_calculator, size_for_wizard


def test_calculator_projection_ten_kw():
    p = project_quote(size_for_calculator(5), "calculator")
    assert p.installation_charge == 150_000
    assert p.total_investment == 1_150_000
    assert p.monthly_savings == 20_000
    assert p.annual_savings == 240_000
    assert p.savings_25_years == 6_000_000
    assert p.roi_percent == 520
    assert p.payback_years is None
    assert p.co2_tons_per_year == pytest.approx(12.0)
    assert p.trees_equivalent == 300
    assert p.co2_tons_25_years == 300


def test_generation_figures():
    p = project_quote(size_for_calculator(5))
    assert p.daily_generation_kwh == 50
    assert p.monthly_generation_kwh == 1500
    assert p.yearly_generation_kwh == 18250


def test_wizard_projection_uses_wizard_returns():
    p = project_quote(size_for_wizard(5000), "wizard")
    assert p.savings_25_years == 4_725_000
    assert p.roi_percent == 450
    assert p.payback_years == 5.5
    assert p.co2_tons_per_year == pytest.approx(8.4)


def test_quick_estimate_projection():
    p = project_quote(estimate_from_consumption(10))
    assert p.installation_charge == 22_500
    assert p.trees_equivalent == 90


def test_unknown_flow():
    with pytest.raises(KeyError):
        project_quote(size_for_wizard(5000), "quick")


@pytest.mark.parametrize("capacity,load,expected", [(10, 5, 95), (3, 5, 60), (4, 0, 0)])
def test_carbon_reduction_percent(capacity, load, expected):
    assert carbon_reduction_percent(capacity, load) == expected
