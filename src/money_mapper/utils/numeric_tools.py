from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TypeAlias

# Use where optimal type is `int`, but other types are also acceptable (and will be converted to `int`)
IntLike: TypeAlias = int | float | str | Decimal

# Use where optimal type is `Decimal`, but other types are also acceptable (and will be converted to `Decimal`)
DecimalLike: TypeAlias = Decimal | int | str | float


def as_decimal(value: DecimalLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ensures floats are converted via string to avoid precision noise.

    Args:
        value: Input value as `DecimalLike`.

    Returns:
        Value converted to `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    return Decimal(str(value))


def as_exact_int(value: IntLike) -> int:
    """Converts input to `int` without losing information.

    Float-typed storage columns hand back integers as `float` (e.g. `279028.0`),
    so integral floats, Decimals and numeric strings are accepted. Anything with
    a fractional part is rejected instead of being truncated.

    Args:
        value: Input value as `IntLike`.

    Returns:
        Value converted to `int`.

    Raises:
        TypeError: If $value is a bool or not an `IntLike` type.
        ValueError: If $value is not numeric, not finite or has a fractional part.
    """
    # Raise: bool is an int subclass, but never a meaningful number here
    if isinstance(value, bool):
        raise TypeError(f"$value must be an integer-like number, but provided value is: {value!r}")

    if isinstance(value, int):
        return value

    if not isinstance(value, (float, str, Decimal)):
        raise TypeError(f"$value must be an integer-like number, but provided value is: {value!r}")

    try:
        decimal_value = as_decimal(value.strip() if isinstance(value, str) else value)
    except InvalidOperation as e:
        raise ValueError(f"$value ({value!r}) cannot be converted to a number") from e

    # Raise: NaN and infinities have no integer value
    if not decimal_value.is_finite():
        raise ValueError(f"$value must be finite, but provided value is: {value!r}")

    # Raise: truncating a fractional part would silently corrupt the value
    if decimal_value != decimal_value.to_integral_value():
        raise ValueError(f"$value must be a whole number, but provided value is: {value!r}")

    return int(decimal_value)
