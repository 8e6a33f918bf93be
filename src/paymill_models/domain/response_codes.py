"""Meaning of the numeric ``response_code`` values reported on transactions and refunds."""

RESPONSE_CODES: dict[int, str] = {
    10001: "General undefined response",
    10002: "Still waiting on something",
    11000: "Retry later",
    20000: "General success response",
    20100: "Funds held by acquirer",
    20101: "Funds held by acquirer because merchant is new",
    20200: "Transaction reversed",
    20201: "Reversed due to chargeback",
    20202: "Reversed due to money-back guarantee",
    20203: "Reversed due to complaint by buyer",
    20204: "Payment has been refunded",
    20300: "Reversal has been canceled",
    22000: "Initiation of transaction successful",
    40000: "General problem with data",
    40001: "General problem with payment data",
    40100: "Problem with credit card data",
    40101: "Problem with CVV",
    40102: "Card expired or not yet valid",
    40103: "Limit exceeded",
    40104: "Card invalid",
    40105: "Expiry date not valid",
    40106: "Credit card brand required",
    40200: "Problem with bank account data",
    40201: "Bank account data combination mismatch",
    40202: "User authentication failed",
    40300: "Problem with 3-D Secure data",
    40301: "Currency or amount mismatch",
    40400: "Problem with input data",
    40401: "Amount too low or zero",
    40402: "Usage field too long",
    40403: "Currency not allowed",
    50000: "General problem with backend",
    50001: "Country blacklisted",
    50100: "Technical error with credit card",
    50101: "Error limit exceeded",
    50102: "Card declined by authorization system",
    50103: "Manipulation or stolen card",
    50104: "Card restricted",
    50105: "Invalid card configuration data",
    50200: "Technical error with bank account",
    50201: "Card blacklisted",
    50300: "Technical error with 3-D Secure",
    50400: "Decline because of risk issues",
    50500: "General timeout",
    50501: "Timeout on side of the acquirer",
    50502: "Risk management transaction timeout",
    50600: "Duplicate transaction",
}

CATEGORY_MESSAGES: dict[int, str] = {
    1: "Undefined or pending response",
    2: "Success",
    4: "Problem with data",
    5: "Problem with backend",
}

UNKNOWN_RESPONSE_CODE = "Unknown response code"


def _category(code: int) -> int:
    return code // 10000


def describe_response_code(code: int | str) -> str:
    """Return a human readable description of a response code.

    Codes without a documented message fall back to the message of their
    category (the leading digit of the five-digit code).

    Args:
        code: Response code as an integer or numeric string

    Returns:
        Description of the code
    """
    try:
        code = int(code)
    except (TypeError, ValueError):
        return UNKNOWN_RESPONSE_CODE

    if code in RESPONSE_CODES:
        return RESPONSE_CODES[code]
    if 10000 <= code <= 99999:
        return CATEGORY_MESSAGES.get(_category(code), UNKNOWN_RESPONSE_CODE)
    return UNKNOWN_RESPONSE_CODE


def is_success(code: int | str) -> bool:
    """Whether a response code belongs to the success family (2xxxx)."""
    try:
        code = int(code)
    except (TypeError, ValueError):
        return False
    return 20000 <= code <= 29999
