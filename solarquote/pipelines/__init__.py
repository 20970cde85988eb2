"""
SolarQuote Pipelines Package.
"""
from solarquote.pipelines.quote_pipeline import (
    Quote,
    run_calculator_flow,
    run_wizard_flow,
    run_quick_flow,
    quote_from_form,
    price_from_form,
)

from solarquote.pipelines.report_generator import (
    generate_quote_pdf,
)

from solarquote.pipelines.bom_generator import (
    generate_bom_file,
    components_from_price,
    components_from_sizing,
)

__all__ = [
    # Quotes
    "Quote",
    "run_calculator_flow",
    "run_wizard_flow",
    "run_quick_flow",
    "quote_from_form",
    "price_from_form",
    # Reports
    "generate_quote_pdf",
    # Bill of materials
    "generate_bom_file",
    "components_from_price",
    "components_from_sizing",
]
