"""
utils/decimals.py
-----------------
Coercion helpers for the NUMERIC(…, 2) columns (hours and cost).
"""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

TWO_PLACES = Decimal("0.01")

DecimalLike = Union[Decimal, int, float, str, None]


def normalize_decimal(value: DecimalLike) -> Optional[Decimal]:
    """
    Coerce a value to a Decimal with exactly two digits of scale.

    Floats go through ``str()`` so ``10.1`` becomes ``10.10`` rather than
    ``10.0999…``. ``None`` and blank strings map to ``None``.

    Raises:
        ValueError: If the value is not numeric.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{value!r} is not a valid decimal number.")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"{value!r} is not a valid decimal number.") from e
    if not number.is_finite():
        raise ValueError(f"{value!r} is not a valid decimal number.")
    return number.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def optional_int(value) -> Optional[int]:
    """Coerce to ``int`` while letting ``None`` through."""
    return None if value is None else int(value)
