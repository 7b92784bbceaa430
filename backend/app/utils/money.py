from decimal import Decimal

CURRENCY_SYMBOLS = {
    "USD": "$",
    "CAD": "CA$",
    "EUR": "€",
    "GBP": "£",
}


def format_price(price_cents: int, currency: str = "USD") -> str:
    """
    Render minor units as a display price: 17500 -> "$175.00".
    Currencies without a known symbol fall back to "175.00 XYZ".
    """
    if price_cents < 0:
        raise ValueError("price_cents must be non-negative")
    amount = Decimal(int(price_cents)) / 100
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{amount:,.2f} {code}"
    return f"{symbol}{amount:,.2f}"
