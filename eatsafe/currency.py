"""Currency symbols and price formatting."""

from __future__ import annotations

from eatsafe.registry.regions import REGIONS

CURRENCY_SYMBOLS: dict[str, str] = {
    "gbp": "£",
    "usd": "$",
    "aud": "A$",
    "inr": "₹",
    "aed": "د.إ",
    "sgd": "S$",
}


def currency_symbol(code: str | None) -> str:
    """Symbol for an ISO 4217 code; unknown codes render as ``"XYZ "``.

    A missing code renders as a single space, like any other unknown code.
    """
    code = code or ""
    return CURRENCY_SYMBOLS.get(code.lower(), f"{code.upper()} ")


def format_price(amount: float, currency: str | None) -> str:
    """Format an amount with its currency symbol and two decimals."""
    return f"{currency_symbol(currency)}{amount:,.2f}"


def format_aed(amount: float) -> str:
    return f"AED {amount:,.2f}"


def format_aed_ar(amount: float) -> str:
    return f"{amount:,.2f} د.إ"


def format_aud(amount: float) -> str:
    return f"${amount:,.2f}"


def format_region_amount(amount: float, region: str) -> str:
    """Format an amount the way a region displays prices.

    AU and UAE use their local conventions; other regions prefix the
    region's symbol. Unknown regions fall back to Australian dollars.
    """
    if region == "au":
        return format_aud(amount)
    if region == "uae":
        return format_aed(amount)
    config = REGIONS.get(region)
    if config is None:
        return format_aud(amount)
    return f"{config.currency_symbol}{amount:,.2f}"
