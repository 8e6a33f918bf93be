"""Scalar coercion utilities.

Payment APIs may send numbers as strings and vice versa. Values are coerced to
the declared primitive type where that is lossless; otherwise a ``ValueError``
or ``TypeError`` is raised and the caller decides whether to keep the raw value.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from paymill_models.domain.entities import ScalarType

TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def _to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # Never go through float formatting for amounts like 4200.0
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, Decimal):
        return str(value)
    raise TypeError(f"cannot coerce {type(value).__name__} to string")


def _to_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("cannot coerce bool to integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{value!r} is not integral")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = Decimal(text)
        except InvalidOperation:
            raise ValueError(f"could not parse integer '{value}'") from None
        if not number.is_finite() or number != number.to_integral_value():
            raise ValueError(f"'{value}' is not integral")
        return int(number)
    raise TypeError(f"cannot coerce {type(value).__name__} to integer")


def _to_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        text = value.strip().lower()
        if text in TRUE_STRINGS:
            return True
        if text in FALSE_STRINGS:
            return False
        raise ValueError(f"could not parse boolean '{value}'")
    raise TypeError(f"cannot coerce {type(value).__name__} to boolean")


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("cannot coerce bool to float")
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            raise ValueError(f"could not parse float '{value}'") from None
    raise TypeError(f"cannot coerce {type(value).__name__} to float")


_COERCERS = {
    ScalarType.STRING: _to_string,
    ScalarType.INTEGER: _to_integer,
    ScalarType.BOOLEAN: _to_boolean,
    ScalarType.FLOAT: _to_float,
}


def coerce_scalar(value: Any, scalar_type: ScalarType) -> Any:
    """Coerce a raw scalar to ``scalar_type``.

    ``None`` is passed through for every type, as is any value declared RAW.

    Args:
        value: Raw value from the payload
        scalar_type: Declared primitive type

    Returns:
        Coerced value

    Raises:
        ValueError: If the value has the right shape but cannot be converted
        TypeError: If the value's type cannot be converted at all
    """
    if value is None or scalar_type is ScalarType.RAW:
        return value
    return _COERCERS[scalar_type](value)
