"""PKR / USD display conversion."""
from __future__ import annotations

SUPPORTED_CURRENCIES = ("PKR", "USD")


class CurrencyFormatter:
    """Converts PKR amounts for display; all engine figures are PKR."""

    def __init__(self, currency: str = "PKR", usd_rate: float = 280.0):
        currency = currency.upper()
        if currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency: {currency}")
        if usd_rate <= 0:
            raise ValueError("usd_rate must be positive")
        self.currency = currency
        self.usd_rate = usd_rate

    def convert(self, amount: float, from_currency: str = "PKR") -> float:
        from_currency = from_currency.upper()
        if from_currency not in SUPPORTED_CURRENCIES:
            raise ValueError(f"Unsupported currency: {from_currency}")
        if self.currency == from_currency:
            return amount
        if self.currency == "USD":
            return round(amount / self.usd_rate)
        return round(amount * self.usd_rate)

    def format(self, amount: float) -> str:
        if self.currency == "PKR":
            return f"Rs. {amount:,.0f}"
        return f"${amount:,.0f}"

    def display(self, amount_pkr: float) -> str:
        """Convert a PKR figure and format it in one step."""
        return self.format(self.convert(amount_pkr))
