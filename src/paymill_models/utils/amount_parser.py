"""Amount formatting utilities.

The API reports amounts in the smallest currency unit ("4200" for 42.00 EUR).
"""

from decimal import Decimal, InvalidOperation

# ISO 4217 currencies whose minor unit is not cents
CURRENCY_EXPONENTS = {
    "BIF": 0,
    "CLP": 0,
    "DJF": 0,
    "GNF": 0,
    "ISK": 0,
    "JPY": 0,
    "KMF": 0,
    "KRW": 0,
    "PYG": 0,
    "RWF": 0,
    "UGX": 0,
    "VND": 0,
    "VUV": 0,
    "XAF": 0,
    "XOF": 0,
    "XPF": 0,
    "BHD": 3,
    "IQD": 3,
    "JOD": 3,
    "KWD": 3,
    "LYD": 3,
    "OMR": 3,
    "TND": 3,
}
DEFAULT_EXPONENT = 2


def currency_exponent(currency: str | None) -> int:
    """Return the number of decimal places of a currency's minor unit."""
    if not currency:
        return DEFAULT_EXPONENT
    return CURRENCY_EXPONENTS.get(currency.strip().upper(), DEFAULT_EXPONENT)


def minor_to_major(amount: str | int, currency: str | None = None) -> Decimal:
    """Convert an amount in minor units to a Decimal in major units.

    Examples:
    - ("4200", "EUR") -> Decimal("42.00")
    - (500, "JPY") -> Decimal("500")
    - ("-150", "KWD") -> Decimal("-0.150")

    Args:
        amount: Amount in the smallest currency unit
        currency: ISO 4217 currency code

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount cannot be parsed as a whole number
    """
    if isinstance(amount, bool):
        raise ValueError(f"Could not parse amount '{amount}'")
    text = str(amount).strip()
    if not text:
        raise ValueError("Empty amount string")

    try:
        minor = Decimal(text)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{text}': {e}")
    if not minor.is_finite() or minor != minor.to_integral_value():
        raise ValueError(f"Amount '{text}' is not in minor units")

    exponent = currency_exponent(currency)
    return minor.scaleb(-exponent).quantize(Decimal(1).scaleb(-exponent))


def format_amount(amount: str | int, currency: str | None = None) -> str:
    """Render a minor-unit amount for display, e.g. ``"42.00 EUR"``."""
    value = minor_to_major(amount, currency)
    if currency:
        return f"{value} {currency.upper()}"
    return str(value)
