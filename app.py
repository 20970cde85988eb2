import streamlit as st

from solarquote.config import configure_logging, load_settings
from solarquote.pages import PAGES, RENDERERS
from solarquote.state import init_state, reset_all
from solarquote.theme import apply_theme
from solarquote.ui_components import header


# -------------------------------------------------------------------
# Page / App Setup
# -------------------------------------------------------------------
settings = load_settings()
configure_logging(settings)

st.set_page_config(
    page_title=f"{settings.company_name} | Solar Quotation",
    page_icon="☀️",
    layout="wide",
    initial_sidebar_state="expanded",
)

apply_theme()
init_state()

header(settings.company_name)


# -------------------------------------------------------------------
# Navigation
# -------------------------------------------------------------------
with st.sidebar:
    page_keys = list(PAGES)
    st.session_state["page"] = st.radio(
        "Tools",
        page_keys,
        index=page_keys.index(st.session_state.get("page", "calculator")),
        format_func=PAGES.get,
    )
    st.caption(f"Prices in {settings.currency}")
    if st.button("Reset", use_container_width=True):
        reset_all()
        st.rerun()


RENDERERS[st.session_state["page"]](settings)
