"""
PDF quotation generator.

Renders a Quote into a printable quotation. The figures come straight from
the quote; this module only formats.
"""
from __future__ import annotations

import io
from datetime import datetime
from typing import List, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import cm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from solarquote.currency import CurrencyFormatter
from solarquote.knowledge.price_tables import CALCULATOR_ASSUMPTIONS
from solarquote.models import LoadResult
from solarquote.pipelines.quote_pipeline import Quote


# -------------------------------------------------------------------
# Color Scheme
# -------------------------------------------------------------------
COLORS = {
    "primary": colors.HexColor("#2563eb"),
    "secondary": colors.HexColor("#22c55e"),
    "text": colors.HexColor("#1f2937"),
    "light_gray": colors.HexColor("#9ca3af"),
    "header_bg": colors.HexColor("#f2f2f2"),
}

PACKAGE_INCLUDES = [
    "Tier-1 Solar Panels (550W each) with 25-year warranty",
    "MPPT Solar Inverter with 5-year warranty",
    "Lithium/Tubular Batteries with warranty",
    "Complete mounting structure and DC/AC cables",
    "Professional installation and commissioning",
    "Net metering application assistance",
    "Annual maintenance for 5 years",
    "24/7 customer support",
]

TERMS = [
    "This quotation is valid for 30 days from the date of issue.",
    "Prices are subject to change based on market conditions.",
    "Installation timeline: 7-10 working days after confirmation.",
    "Payment terms: 50% advance, 50% on completion.",
]


def now_date_str() -> str:
    return datetime.now().strftime("%Y-%m-%d")


def _p(text: str, style):
    return Paragraph(text, style)


def _kv_table(rows: List[List[str]]) -> Table:
    t = Table(rows, colWidths=[8.0 * cm, 8.5 * cm])
    t.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), COLORS["header_bg"]),
                ("TEXTCOLOR", (0, 0), (-1, -1), COLORS["text"]),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("PADDING", (0, 0), (-1, -1), 5),
            ]
        )
    )
    return t


def _section(title: str, story, styles, color=None):
    style = ParagraphStyle(
        "QuoteSection",
        parent=styles["Heading3"],
        textColor=color or COLORS["primary"],
    )
    story.append(_p(f"<b>{title}</b>", style))
    story.append(Spacer(1, 0.2 * cm))


def _bullet_list(items: List[str], story, styles):
    for it in items:
        story.append(_p(f"• {escape(it)}", styles["BodyText"]))
        story.append(Spacer(1, 0.05 * cm))


def _fmt_kw(value: float) -> str:
    return f"{value:g} kW"


def load_breakdown_rows(load: LoadResult) -> List[List[str]]:
    rows = [["Appliance", "Quantity / Total Watts"]]
    for item in load.items:
        rows.append([item.label, f"{item.quantity} / {item.watts} W"])
    return rows


def generate_quote_pdf(
    quote: Quote,
    company_name: str = "ElectroCare",
    formatter: Optional[CurrencyFormatter] = None,
    run_date: Optional[str] = None,
) -> bytes:
    """
    Build the quotation PDF for a quote.

    Args:
        quote: Result of one of the quote pipeline flows
        company_name: Name printed in the header and footer
        formatter: Currency used for money figures (PKR by default)
        run_date: Date printed on the quote, today when omitted

    Returns:
        PDF document bytes
    """
    fmt = formatter or CurrencyFormatter()
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf,
        pagesize=A4,
        leftMargin=2.0 * cm,
        rightMargin=2.0 * cm,
        topMargin=1.8 * cm,
        bottomMargin=1.8 * cm,
        title=f"{company_name} Solar System Quotation",
    )

    styles = getSampleStyleSheet()
    story = []
    sizing = quote.sizing
    proj = quote.projection

    # --- Header ---
    story.append(_p(f"<b>{escape(company_name)}</b>", styles["Title"]))
    story.append(_p("Powering Your Future with Solar Energy", styles["BodyText"]))
    story.append(Spacer(1, 0.4 * cm))
    story.append(_p("<b>Solar System Quotation</b>", styles["Heading2"]))
    story.append(_p(f"Date: {run_date or now_date_str()}", styles["BodyText"]))

    # --- Customer ---
    customer = quote.customer
    for label, value in (
        ("Customer", customer.full_name),
        ("Email", customer.email),
        ("Phone", customer.phone),
        ("Address", ", ".join(v for v in (customer.address, customer.city) if v)),
    ):
        if value:
            story.append(_p(f"{label}: {escape(value)}", styles["BodyText"]))
    story.append(Spacer(1, 0.5 * cm))

    # --- Load requirements ---
    _section("Load Requirements", story, styles)
    watts = quote.load.total_watts
    daily = getattr(sizing, "daily_consumption_kwh", None)
    if daily is None:
        daily = proj.daily_generation_kwh
    story.append(
        _kv_table(
            [
                ["Requirement", "Value"],
                ["Total Connected Load", f"{watts / 1000:.2f} kW ({watts} Watts)"],
                ["Daily Energy Consumption", f"{daily:.1f} kWh"],
            ]
        )
    )
    story.append(Spacer(1, 0.5 * cm))

    # --- System specifications ---
    _section("Recommended System Specifications", story, styles)
    panel_w = int(CALCULATOR_ASSUMPTIONS["panel_watts"])
    story.append(
        _kv_table(
            [
                ["Specification", "Value"],
                ["System Capacity", _fmt_kw(sizing.system_size_kw)],
                [f"Solar Panels ({panel_w}W each)", f"{sizing.panel_count} panels"],
                ["Total Panel Capacity", f"{sizing.panel_count * panel_w / 1000:.2f} kW"],
                ["Inverter Size", _fmt_kw(sizing.inverter_kw)],
                ["Battery Capacity", f"{sizing.battery_kwh:g} kWh"],
            ]
        )
    )
    story.append(Spacer(1, 0.5 * cm))

    # --- Cost breakdown ---
    _section("Cost Breakdown", story, styles)
    story.append(
        _kv_table(
            [
                ["Item", "Amount"],
                ["System Cost", fmt.display(sizing.cost)],
                ["Installation Charges (15%)", fmt.display(proj.installation_charge)],
                ["Total Investment", fmt.display(proj.total_investment)],
            ]
        )
    )
    story.append(Spacer(1, 0.5 * cm))

    # --- Load breakdown ---
    if quote.load.items:
        _section("Load Breakdown", story, styles)
        story.append(_kv_table(load_breakdown_rows(quote.load)))
        story.append(Spacer(1, 0.5 * cm))

    # --- Environmental impact ---
    _section("Environmental Impact", story, styles, color=COLORS["secondary"])
    story.append(
        _kv_table(
            [
                ["Metric", "Value"],
                ["Annual CO2 Reduction", f"{proj.co2_tons_per_year:.1f} tons"],
                ["Equivalent Trees Planted", f"{proj.trees_equivalent} trees"],
                ["25-Year CO2 Savings", f"{proj.co2_tons_25_years:.0f} tons"],
            ]
        )
    )
    story.append(Spacer(1, 0.5 * cm))

    # --- Return on investment ---
    _section("Return on Investment", story, styles)
    payback = f"{proj.payback_years:g}" if proj.payback_years is not None else "~4-5"
    story.append(
        _kv_table(
            [
                ["Metric", "Value"],
                ["Estimated Monthly Savings", fmt.display(proj.monthly_savings)],
                ["Estimated Annual Savings", fmt.display(proj.annual_savings)],
                ["Payback Period", f"{payback} Years"],
                ["25-Year Total Savings", fmt.display(proj.savings_25_years)],
                ["ROI Percentage", f"{proj.roi_percent:g}%"],
            ]
        )
    )
    story.append(Spacer(1, 0.5 * cm))

    # --- Package ---
    _section("Package Includes", story, styles)
    _bullet_list(PACKAGE_INCLUDES, story, styles)
    story.append(Spacer(1, 0.4 * cm))

    # --- Terms ---
    small = ParagraphStyle("QuoteSmall", parent=styles["BodyText"], fontSize=8, textColor=COLORS["light_gray"])
    story.append(_p("Terms &amp; Conditions:", small))
    for i, term in enumerate(TERMS, start=1):
        story.append(_p(f"{i}. {term}", small))

    def _footer(canvas, _doc):
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        canvas.setFillColor(COLORS["light_gray"])
        canvas.drawCentredString(A4[0] / 2, 1.0 * cm, f"{company_name} | Solar System Quotation")
        canvas.restoreState()

    doc.build(story, onFirstPage=_footer, onLaterPages=_footer)
    return buf.getvalue()
