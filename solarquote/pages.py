"""
Streamlit pages: load calculator, installation wizard, component
configurator and quick estimate.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

import streamlit as st

from solarquote.api_client import ApiError, QuoteApiClient
from solarquote.checks.validation import ValidationError, require_customer
from solarquote.config import Settings
from solarquote.currency import CurrencyFormatter
from solarquote.knowledge.price_tables import (
    APPLIANCE_WATTS,
    BATTERY_OPTIONS,
    CALCULATOR_CATALOG,
    EXTRA_APPLIANCES,
    INVERTER_CAPACITIES,
    INVERTER_CATEGORIES,
    INVERTER_COMPANIES,
    INVERTER_MODELS,
    STANDARD_STAND_LEVELS,
)
from solarquote.parsers.form_inputs import INVENTORY_FORM_FIELDS
from solarquote.pipelines.bom_generator import (
    components_from_price,
    components_from_sizing,
    generate_bom_file,
)
from solarquote.pipelines.quote_pipeline import Quote, price_from_form, quote_from_form
from solarquote.pipelines.report_generator import generate_quote_pdf
from solarquote.records import installation_payload, quotation_payload
from solarquote.state import get_customer, get_price_result, reset_wizard, set_customer_form, set_price_result
from solarquote.ui_components import kpi_row, load_breakdown_table, price_summary, total_card

logger = logging.getLogger(__name__)

PAGES = {
    "calculator": "Load Calculator",
    "wizard": "Installation Wizard",
    "configurator": "New Installation",
    "quick": "Quick Estimate",
}

INSTALLATION_TYPES = {
    "residential": "Residential",
    "commercial": "Commercial",
    "industrial": "Industrial",
    "agricultural": "Agricultural",
}

CITIES = {
    "islamabad": "Islamabad",
    "karachi": "Karachi",
    "lahore": "Lahore",
    "rawalpindi": "Rawalpindi",
    "faisalabad": "Faisalabad",
    "multan": "Multan",
    "peshawar": "Peshawar",
    "quetta": "Quetta",
}

FORM_LABELS = {
    "ac15Ton": "AC 1.5 Ton",
    "ac1Ton": "AC 1 Ton",
    "fans": "Fans",
    "refrigerator": "Refrigerator",
    "lights": "Lights",
    "motors": "Motors",
    "iron": "Iron",
    "washingMachine": "Washing Machine",
    "computerTV": "Computer/TV",
    "cctv": "CCTV",
    "waterDispenser": "Water Dispenser",
}


# -------------------------------------------------------------------
# Shared helpers
# -------------------------------------------------------------------
def _formatter(settings: Settings) -> CurrencyFormatter:
    return CurrencyFormatter(settings.currency, settings.usd_rate)


def _show_validation(e: ValidationError) -> None:
    for message in e.errors.values():
        st.error(message)


def _appliance_inputs(prefix: str, form: Dict[str, Any]) -> Dict[str, Any]:
    """Number inputs for every appliance category plus the free "other" load."""
    values: Dict[str, Any] = {}
    cols = st.columns(3)
    for i, key in enumerate(INVENTORY_FORM_FIELDS):
        watts = APPLIANCE_WATTS[INVENTORY_FORM_FIELDS[key]]
        with cols[i % 3]:
            values[key] = st.number_input(
                f"{FORM_LABELS[key]} ({watts} W)",
                min_value=0,
                step=1,
                value=int(form.get(key, 0) or 0),
                key=f"{prefix}_{key}",
            )
    a, b = st.columns([1, 2])
    with a:
        values["other"] = st.number_input(
            "Other load (W)", min_value=0, step=50, value=int(form.get("other", 0) or 0), key=f"{prefix}_other"
        )
    with b:
        values["otherDescription"] = st.text_input(
            "Other load description", value=form.get("otherDescription", ""), key=f"{prefix}_otherDescription"
        )
    return values


def _calculator_inputs() -> Dict[str, Any]:
    """Variant picker and quantity per catalog category, then the typed-in extras."""
    values: Dict[str, Any] = {}
    for _category, key, title, variants in CALCULATOR_CATALOG:
        a, b = st.columns([2, 1])
        with a:
            values[f"{key}Type"] = st.selectbox(
                title,
                [""] + list(variants),
                format_func=lambda v, t=title, w=variants: f"{v} ({w[v]} W)" if v else f"Select {t}",
                key=f"calc_{key}Type",
            )
        with b:
            values[f"{key}Quantity"] = st.number_input(
                f"{title} quantity", min_value=0, step=1, key=f"calc_{key}Quantity"
            )

    st.markdown("#### Additional appliances")
    for key, title, default_watts in EXTRA_APPLIANCES:
        a, b = st.columns(2)
        with a:
            values[f"{key}Watts"] = st.number_input(
                f"{title} (W)", min_value=0, step=5, value=default_watts, key=f"calc_{key}Watts"
            )
        with b:
            values[f"{key}Quantity"] = st.number_input(
                f"{title} quantity", min_value=0, step=1, key=f"calc_{key}Quantity"
            )
    return values


def _sizing_kpis(quote: Quote, fmt: CurrencyFormatter) -> None:
    sizing = quote.sizing
    kpi_row(
        [
            ("System Capacity", f"{sizing.system_size_kw} kW"),
            ("Solar Panels", f"{sizing.panel_count}"),
            ("Inverter", f"{sizing.inverter_kw} kW"),
            ("Battery", f"{sizing.battery_kwh:g} kWh"),
        ]
    )
    st.markdown("<br>", unsafe_allow_html=True)
    proj = quote.projection
    total_card(
        "Estimated Cost",
        fmt.display(sizing.cost),
        f"Total with installation: {fmt.display(proj.total_investment)}",
    )


def _projection_details(quote: Quote, fmt: CurrencyFormatter) -> None:
    proj = quote.projection
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Monthly Savings", fmt.display(proj.monthly_savings))
        st.metric("Annual Savings", fmt.display(proj.annual_savings))
    with c2:
        st.metric("Daily Generation", f"{proj.daily_generation_kwh:g} kWh")
        st.metric("Yearly Generation", f"{proj.yearly_generation_kwh:,.0f} kWh")
    with c3:
        st.metric("CO2 Reduction", f"{proj.co2_tons_per_year:.1f} t/yr")
        st.metric("Trees Equivalent", f"{proj.trees_equivalent}")
    if quote.carbon_reduction_pct is not None:
        st.caption(f"Carbon reduction: {quote.carbon_reduction_pct}% of connected load")


def _downloads(quote: Quote, settings: Settings, key: str) -> None:
    a, b = st.columns(2)
    with a:
        try:
            pdf = generate_quote_pdf(quote, company_name=settings.company_name, formatter=_formatter(settings))
            st.download_button(
                "Download Quote (PDF)",
                data=pdf,
                file_name="solar_quotation.pdf",
                mime="application/pdf",
                use_container_width=True,
                key=f"{key}_pdf",
            )
        except Exception as e:
            logger.exception("PDF generation failed")
            st.error(f"❌ Report generation failed: {str(e)}")
    with b:
        try:
            bom = generate_bom_file(components_from_sizing(quote.sizing))
            st.download_button(
                "Download BoM (Excel)",
                data=bom,
                file_name="solar_bom.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                use_container_width=True,
                key=f"{key}_bom",
            )
        except Exception as e:
            logger.exception("BoM generation failed")
            st.error(f"❌ BoM generation failed: {str(e)}")


# -------------------------------------------------------------------
# Load calculator
# -------------------------------------------------------------------
def render_calculator(settings: Settings) -> None:
    st.markdown('<div class="sg-h2">Load Calculator</div>', unsafe_allow_html=True)
    fmt = _formatter(settings)
    form = _calculator_inputs()

    if st.button("Calculate", type="primary", use_container_width=True):
        try:
            st.session_state["calculator_quote"] = quote_from_form("calculator", form)
        except ValidationError as e:
            st.session_state["calculator_quote"] = None
            _show_validation(e)

    quote = st.session_state.get("calculator_quote")
    if quote is None:
        return

    st.markdown('<div class="sg-divider"></div>', unsafe_allow_html=True)
    _sizing_kpis(quote, fmt)
    st.caption(
        f"Daily consumption {quote.sizing.daily_consumption_kwh:.1f} kWh, "
        f"{quote.sizing.batteries} battery units of {quote.sizing.battery_unit_kwh:g} kWh"
    )
    with st.expander("Load breakdown"):
        load_breakdown_table(quote.load)
    _projection_details(quote, fmt)
    _downloads(quote, settings, "calc")


# -------------------------------------------------------------------
# Installation wizard
# -------------------------------------------------------------------
def _wizard_customer_step() -> None:
    st.markdown("### Step 1: Customer details")
    st.session_state["installation_type"] = st.selectbox(
        "Installation type",
        list(INSTALLATION_TYPES),
        format_func=INSTALLATION_TYPES.get,
        index=list(INSTALLATION_TYPES).index(st.session_state.get("installation_type", "residential")),
    )
    current = st.session_state["customer"]
    a, b = st.columns(2)
    form = {
        "firstName": a.text_input("First name *", value=current.get("firstName", "")),
        "lastName": b.text_input("Last name *", value=current.get("lastName", "")),
        "email": a.text_input("Email *", value=current.get("email", "")),
        "phone": b.text_input("Phone *", value=current.get("phone", "")),
        "address": st.text_input("Address *", value=current.get("address", "")),
    }
    city_keys = [""] + list(CITIES)
    form["city"] = a.selectbox(
        "City *",
        city_keys,
        format_func=lambda k: CITIES.get(k, "Select city"),
        index=city_keys.index(current.get("city", "")) if current.get("city", "") in city_keys else 0,
    )
    form["society"] = b.text_input("Society", value=current.get("society", ""))

    if st.button("Next", type="primary", use_container_width=True):
        set_customer_form(form)
        try:
            require_customer(get_customer())
        except ValidationError as e:
            _show_validation(e)
            return
        st.session_state["wizard_step"] = 2
        st.rerun()


def _wizard_load_step() -> None:
    st.markdown("### Step 2: Load demand")
    form = _appliance_inputs("wiz", st.session_state.get("load_form", {}))
    a, b = st.columns(2)
    if a.button("Back", use_container_width=True):
        st.session_state["load_form"] = form
        st.session_state["wizard_step"] = 1
        st.rerun()
    if b.button("Calculate", type="primary", use_container_width=True):
        st.session_state["load_form"] = form
        try:
            st.session_state["wizard_quote"] = quote_from_form("wizard", form, customer=get_customer())
        except ValidationError as e:
            _show_validation(e)
            return
        st.session_state["wizard_step"] = 3
        st.rerun()


def _wizard_review_step(settings: Settings) -> None:
    st.markdown("### Step 3: Review quotation")
    quote = st.session_state.get("wizard_quote")
    if quote is None:
        st.session_state["wizard_step"] = 2
        st.rerun()
        return

    fmt = _formatter(settings)
    _sizing_kpis(quote, fmt)
    load_breakdown_table(quote.load)
    _projection_details(quote, fmt)
    _downloads(quote, settings, "wiz")

    a, b = st.columns(2)
    if a.button("Back", use_container_width=True):
        st.session_state["wizard_step"] = 2
        st.rerun()
    if b.button("Submit Quotation", type="primary", use_container_width=True):
        payload = quotation_payload(
            quote.customer,
            quote.inventory,
            quote.load,
            quote.sizing,
            installation_type=st.session_state.get("installation_type", ""),
        )
        try:
            st.session_state["submitted_quotation"] = QuoteApiClient.from_settings(settings).create_quotation(payload)
        except ApiError as e:
            st.error(f"❌ Could not submit quotation: {e}")
            return
        st.success("Quotation submitted. Our team will contact you shortly.")

    if st.button("Start new quotation"):
        reset_wizard()
        st.rerun()


def render_wizard(settings: Settings) -> None:
    st.markdown('<div class="sg-h2">Installation Wizard</div>', unsafe_allow_html=True)
    step = st.session_state.get("wizard_step", 1)
    st.progress(step / 3)
    if step == 1:
        _wizard_customer_step()
    elif step == 2:
        _wizard_load_step()
    else:
        _wizard_review_step(settings)


# -------------------------------------------------------------------
# New installation configurator
# -------------------------------------------------------------------
def render_configurator(settings: Settings) -> None:
    st.markdown('<div class="sg-h2">New Installation</div>', unsafe_allow_html=True)
    fmt = _formatter(settings)

    a, b = st.columns(2)
    form: Dict[str, Any] = {
        "panelQuantity": a.number_input("Panel quantity", min_value=1, step=1, value=1),
        "standType": b.selectbox(
            "Stand type", ["", "custom", "standard"],
            format_func=lambda k: {"": "Select stand", "custom": "Custom", "standard": "Standard"}[k],
        ),
    }
    if form["standType"] == "standard":
        form["standardStandLevel"] = b.selectbox("Stand level", STANDARD_STAND_LEVELS)

    form["inverterCompany"] = a.selectbox(
        "Inverter company", [""] + list(INVERTER_COMPANIES),
        format_func=lambda k: INVERTER_COMPANIES.get(k, "Select company"),
    )
    form["inverterCapacity"] = b.selectbox(
        "Inverter capacity", [""] + list(INVERTER_CAPACITIES),
        format_func=lambda k: f"{k} kW" if k else "Select capacity",
    )
    form["inverterCategory"] = a.selectbox(
        "Inverter category", [""] + list(INVERTER_CATEGORIES),
        format_func=lambda k: INVERTER_CATEGORIES.get(k, "Select category"),
    )
    form["inverterModel"] = b.selectbox(
        "Inverter model", [""] + list(INVERTER_MODELS),
        format_func=lambda k: k or "Select model",
    )
    form["batteryType"] = a.selectbox(
        "Battery", [""] + list(BATTERY_OPTIONS),
        format_func=lambda k: BATTERY_OPTIONS[k][0] if k else "Select battery",
    )

    if st.button("Calculate Price", type="primary", use_container_width=True):
        try:
            set_price_result(price_from_form(form))
        except ValidationError as e:
            set_price_result(None)
            _show_validation(e)

    result = get_price_result()
    if result is None:
        return

    st.markdown('<div class="sg-divider"></div>', unsafe_allow_html=True)
    price_summary(result, fmt)

    c1, c2 = st.columns(2)
    with c1:
        try:
            bom = generate_bom_file(components_from_price(result))
            st.download_button(
                "Download BoM (Excel)",
                data=bom,
                file_name="installation_bom.xlsx",
                mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                use_container_width=True,
            )
        except Exception as e:
            logger.exception("BoM generation failed")
            st.error(f"❌ BoM generation failed: {str(e)}")
    with c2:
        if st.button("Request Installation", use_container_width=True):
            try:
                st.session_state["submitted_installation"] = QuoteApiClient.from_settings(
                    settings
                ).create_installation(installation_payload(result))
            except ApiError as e:
                st.error(f"❌ Could not submit installation request: {e}")
            else:
                st.success("Installation request submitted.")


# -------------------------------------------------------------------
# Quick estimate
# -------------------------------------------------------------------
def render_quick(settings: Settings) -> None:
    st.markdown('<div class="sg-h2">Quick Estimate</div>', unsafe_allow_html=True)
    fmt = _formatter(settings)

    mode = st.radio("Estimate from", ["Daily consumption", "Appliances"], horizontal=True)
    form: Dict[str, Any] = {}
    if mode == "Daily consumption":
        form["dailyConsumption"] = st.number_input("Daily consumption (kWh)", min_value=0.0, step=0.5)
    else:
        a, b = st.columns(2)
        form["lights"] = a.number_input("LED lights", min_value=0, step=1)
        form["fans"] = b.number_input("Ceiling fans", min_value=0, step=1)
        form["acs"] = a.number_input("Inverter ACs", min_value=0, step=1)
        form["computers"] = b.number_input("Computers", min_value=0, step=1)
        form["kitchen"] = a.number_input("Kitchen appliances (Wh/day)", min_value=0, step=100)
        form["misc"] = b.number_input("Miscellaneous (Wh/day)", min_value=0, step=100)

    if st.button("Estimate", type="primary", use_container_width=True):
        try:
            st.session_state["quick_quote"] = quote_from_form("quick", form)
        except ValidationError as e:
            st.session_state["quick_quote"] = None
            _show_validation(e)

    quote = st.session_state.get("quick_quote")
    if quote is None:
        return
    kpi_row(
        [
            ("Daily Consumption", f"{quote.sizing.daily_consumption_kwh:.2f} kWh"),
            ("Recommended System", f"{quote.sizing.system_size_kw} kW"),
            ("Monthly Savings", fmt.display(quote.projection.monthly_savings)),
        ]
    )
    st.markdown("<br>", unsafe_allow_html=True)
    total_card("Estimated Cost", fmt.display(quote.sizing.cost))


RENDERERS = {
    "calculator": render_calculator,
    "wizard": render_wizard,
    "configurator": render_configurator,
    "quick": render_quick,
}
