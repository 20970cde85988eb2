"""
Session state management for SolarQuote.
Holds the active page, the wizard step and the last result of each flow.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

import streamlit as st

from solarquote.models import ComponentPriceResult, Customer


# -------------------------------------------------------------------
# Default State Values
# -------------------------------------------------------------------
DEFAULT_STATE = {
    "page": "calculator",

    # Installation wizard
    "wizard_step": 1,
    "installation_type": "residential",
    "customer": {
        "firstName": "",
        "lastName": "",
        "email": "",
        "phone": "",
        "address": "",
        "city": "",
        "society": "",
    },
    "load_form": {},

    # Results
    "calculator_quote": None,
    "wizard_quote": None,
    "quick_quote": None,
    "price_result": None,
    "submitted_quotation": None,
    "submitted_installation": None,
}


def _deep_copy_dict(d: dict) -> dict:
    """Deep copy a nested dict."""
    result = {}
    for k, v in d.items():
        if isinstance(v, dict):
            result[k] = _deep_copy_dict(v)
        elif isinstance(v, list):
            result[k] = v.copy()
        else:
            result[k] = v
    return result


def _default(value: Any) -> Any:
    if isinstance(value, dict):
        return _deep_copy_dict(value)
    if isinstance(value, list):
        return value.copy()
    return value


def init_state() -> None:
    """Initialize session state with defaults."""
    for key, default_value in DEFAULT_STATE.items():
        if key not in st.session_state:
            st.session_state[key] = _default(default_value)


def reset_all() -> None:
    """Reset all session state to defaults."""
    for key, default_value in DEFAULT_STATE.items():
        st.session_state[key] = _default(default_value)


def reset_wizard() -> None:
    """Start the installation wizard over, keeping other pages' results."""
    for key in ("wizard_step", "installation_type", "customer", "load_form", "wizard_quote", "submitted_quotation"):
        st.session_state[key] = _default(DEFAULT_STATE[key])


# -------------------------------------------------------------------
# Customer Helpers
# -------------------------------------------------------------------
def set_customer_form(form: Dict[str, str]) -> None:
    st.session_state["customer"] = dict(form)


def get_customer() -> Customer:
    """Customer dataclass built from the wizard's contact form."""
    form = st.session_state.get("customer", DEFAULT_STATE["customer"])
    return Customer(
        first_name=(form.get("firstName") or "").strip(),
        last_name=(form.get("lastName") or "").strip(),
        email=(form.get("email") or "").strip(),
        phone=(form.get("phone") or "").strip(),
        address=(form.get("address") or "").strip(),
        city=(form.get("city") or "").strip(),
        society=(form.get("society") or "").strip(),
    )


# -------------------------------------------------------------------
# Result Helpers
# -------------------------------------------------------------------
def set_price_result(result: Optional[ComponentPriceResult]) -> None:
    st.session_state["price_result"] = result
    st.session_state["submitted_installation"] = None


def get_price_result() -> Optional[ComponentPriceResult]:
    return st.session_state.get("price_result")
