import streamlit as st

CSS = """
<style>
.sg-header { padding: 0.5rem 0 0.25rem 0; }
.sg-title { font-size: 2.1rem; font-weight: 800; color: #2563eb; }
.sg-subtitle { color: #6b7280; font-size: 0.95rem; }
.sg-divider { height: 1px; background: #e5e7eb; margin: 0.75rem 0 1.25rem 0; }
.sg-h2 { font-size: 1.3rem; font-weight: 700; margin-bottom: 0.5rem; }
.sg-kpi-grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(150px, 1fr)); gap: 0.75rem; }
.sg-kpi { border: 1px solid #e5e7eb; border-radius: 10px; padding: 0.75rem; }
.sg-kpi .l { color: #6b7280; font-size: 0.8rem; }
.sg-kpi .v { font-size: 1.25rem; font-weight: 700; color: #1f2937; }
.sg-total { border-radius: 12px; padding: 1rem 1.25rem; background: #eff6ff; color: #1e3a8a; }
.sg-total .v { font-size: 1.8rem; font-weight: 800; }
</style>
"""


def apply_theme() -> None:
    st.markdown(CSS, unsafe_allow_html=True)
