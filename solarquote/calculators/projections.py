"""
Quote projections shown beside a sizing result.

Generation, savings, return and environmental figures are simple multiples of
the system size and estimated cost. The calculator page and the wizard quote
print different return figures; both are kept, keyed by flow name.
"""
from __future__ import annotations

from solarquote.knowledge.price_tables import PROJECTION_FACTORS, get_flow_returns
from solarquote.models import QuoteProjection


def project_quote(sizing, flow: str = "calculator") -> QuoteProjection:
    """
    Build the projection block for any sizing result.

    Args:
        sizing: CalculatorSizing, WizardSizing or QuickEstimate
        flow: "calculator" or "wizard"; selects the return figures
    """
    f = PROJECTION_FACTORS
    returns = get_flow_returns(flow)
    kw = sizing.system_size_kw
    cost = sizing.cost

    daily = kw * f["generation_hours"]
    return QuoteProjection(
        installation_charge=round(cost * f["installation_rate"]),
        total_investment=round(cost * (1 + f["installation_rate"])),
        daily_generation_kwh=daily,
        monthly_generation_kwh=daily * 30,
        yearly_generation_kwh=daily * 365,
        monthly_savings=round(cost * f["monthly_savings_rate"]),
        annual_savings=round(cost * f["annual_savings_rate"]),
        savings_25_years=round(cost * returns["savings_25y_factor"]),
        roi_percent=returns["roi_percent"],
        payback_years=returns["payback_years"],
        co2_tons_per_year=round(kw * f["co2_tons_per_kw"], 1),
        trees_equivalent=round(kw * f["trees_per_kw"]),
        co2_tons_25_years=kw * f["co2_25y_tons_per_kw"],
    )


def carbon_reduction_percent(capacity_kw: float, load_kw: float) -> int:
    """Share of the connected load offset by the array, capped at 95%."""
    if load_kw <= 0:
        return 0
    cap = int(PROJECTION_FACTORS["max_carbon_reduction_pct"])
    return min(cap, round((capacity_kw / load_kw) * 100))
