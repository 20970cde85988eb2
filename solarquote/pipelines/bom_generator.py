import io
from typing import Dict, List, Optional

import xlsxwriter

from solarquote.knowledge.price_tables import CALCULATOR_ASSUMPTIONS
from solarquote.models import ComponentPriceResult

HEADERS = ["Component", "Description", "Quantity", "Unit", "Price (PKR)"]


def components_from_price(result: ComponentPriceResult) -> List[Dict]:
    """BoM rows for a priced configurator bundle."""
    sel = result.selection
    return [
        {
            "name": "Stand Structure",
            "description": result.stand_label,
            "quantity": sel.panel_quantity,
            "unit": "panel",
            "price": result.stand_price,
        },
        {
            "name": "Inverter",
            "description": f"{sel.inverter_company} {result.inverter_description}".strip(),
            "quantity": 1,
            "unit": "pc",
            "price": result.inverter_price,
        },
        {
            "name": "Battery",
            "description": result.battery_label,
            "quantity": 0 if sel.battery_type == "none" else 1,
            "unit": "pc",
            "price": result.battery_price,
        },
    ]


def components_from_sizing(sizing) -> List[Dict]:
    """BoM rows for a sized system (quantities only; cost is the system total)."""
    panel_w = int(CALCULATOR_ASSUMPTIONS["panel_watts"])
    rows = [
        {
            "name": "Solar Panel",
            "description": f"{panel_w}W mono PV module",
            "quantity": sizing.panel_count,
            "unit": "pc",
        },
        {
            "name": "Inverter",
            "description": f"{sizing.inverter_kw} kW inverter",
            "quantity": 1 if sizing.inverter_kw else 0,
            "unit": "pc",
        },
    ]
    batteries = getattr(sizing, "batteries", None)
    if batteries is not None:
        rows.append({
            "name": "Battery",
            "description": f"{sizing.battery_unit_kwh:g} kWh battery unit",
            "quantity": batteries,
            "unit": "pc",
        })
    else:
        rows.append({
            "name": "Battery Bank",
            "description": "Battery storage",
            "quantity": sizing.battery_kwh,
            "unit": "kWh",
        })
    rows.append({
        "name": "System Total",
        "description": f"{sizing.system_size_kw} kW solar system",
        "quantity": 1,
        "unit": "lot",
        "price": sizing.cost,
    })
    return rows


def generate_bom_file(components: List[Dict], output_path: Optional[str] = None) -> Optional[bytes]:
    """
    Generate a BOM (Bill of Materials) Excel file.

    Args:
        components (List[Dict]): Rows with name, description, quantity, unit and optional price.
        output_path (str | None): Path to save the generated BOM file. If None, returns bytes.
    """
    buffer = None

    if output_path:
        workbook = xlsxwriter.Workbook(output_path)
    else:
        buffer = io.BytesIO()
        workbook = xlsxwriter.Workbook(buffer, {"in_memory": True})
    worksheet = workbook.add_worksheet("BOM")

    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#2563eb',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})
    money_format = workbook.add_format({'border': 1, 'num_format': '#,##0'})
    total_format = workbook.add_format({'bold': True, 'border': 1, 'num_format': '#,##0'})

    for col, header in enumerate(HEADERS):
        worksheet.write(0, col, header, header_format)

    total = 0
    for row, component in enumerate(components, start=1):
        worksheet.write(row, 0, component.get("name", ""), cell_format)
        worksheet.write(row, 1, component.get("description", ""), cell_format)
        worksheet.write(row, 2, component.get("quantity", ""), cell_format)
        worksheet.write(row, 3, component.get("unit", ""), cell_format)
        price = component.get("price")
        if price is None:
            worksheet.write_blank(row, 4, None, cell_format)
        else:
            worksheet.write_number(row, 4, price, money_format)
            total += price

    total_row = len(components) + 1
    worksheet.write(total_row, 3, "Total", total_format)
    worksheet.write_number(total_row, 4, total, total_format)

    worksheet.set_column(0, 0, 20)  # Component
    worksheet.set_column(1, 1, 40)  # Description
    worksheet.set_column(2, 2, 10)  # Quantity
    worksheet.set_column(3, 3, 10)  # Unit
    worksheet.set_column(4, 4, 15)  # Price

    workbook.close()

    if buffer:
        buffer.seek(0)
        return buffer.getvalue()
    return None
