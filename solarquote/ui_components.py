from __future__ import annotations

from html import escape
from typing import List, Tuple

import pandas as pd
import streamlit as st

from solarquote.currency import CurrencyFormatter
from solarquote.models import ComponentPriceResult, LoadResult


def header(project_name: str):
    st.markdown('<div class="sg-header">', unsafe_allow_html=True)
    st.markdown(f'<div class="sg-title">{escape(project_name)}</div>', unsafe_allow_html=True)
    st.markdown(
        '<div class="sg-subtitle">Solar system sizing, pricing and quotations</div>',
        unsafe_allow_html=True,
    )
    st.markdown("</div>", unsafe_allow_html=True)
    st.markdown('<div class="sg-divider"></div>', unsafe_allow_html=True)


def kpi_row(items: List[Tuple[str, str]]):
    """
    items: [(label, value), ...]
    """
    cells = "".join(
        [
            f'<div class="sg-kpi"><div class="l">{escape(k)}</div><div class="v">{escape(v)}</div></div>'
            for k, v in items
        ]
    )
    st.markdown(f'<div class="sg-kpi-grid">{cells}</div>', unsafe_allow_html=True)


def total_card(title: str, value: str, subtitle: str = ""):
    st.markdown(
        f"""
        <div class="sg-total">
          <div>{escape(title)}</div>
          <div class="v">{escape(value)}</div>
          <div>{escape(subtitle)}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def load_breakdown_table(load: LoadResult) -> None:
    """Itemized load as a table; nothing is shown for an empty load."""
    if not load.items:
        return
    df = pd.DataFrame(
        [{"Appliance": it.label, "Quantity": it.quantity, "Watts": it.watts} for it in load.items]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)
    st.caption(f"Total connected load: {load.total_watts:,} W ({load.total_kw:.2f} kW)")


def price_summary(result: ComponentPriceResult, fmt: CurrencyFormatter) -> None:
    """Configurator price summary, one row per component."""
    sel = result.selection
    df = pd.DataFrame(
        [
            {
                "Component": result.stand_label,
                "Detail": f"{sel.panel_quantity} panels",
                "Price": fmt.display(result.stand_price),
            },
            {
                "Component": result.inverter_description,
                "Detail": sel.inverter_company,
                "Price": fmt.display(result.inverter_price),
            },
            {
                "Component": result.battery_label,
                "Detail": sel.battery_type,
                "Price": fmt.display(result.battery_price),
            },
        ]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)
    total_card("Total Price", fmt.display(result.total_price))
