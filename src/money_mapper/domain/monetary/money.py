from __future__ import annotations

from decimal import Decimal, InvalidOperation

from money_mapper.domain.monetary.currency import Currency
from money_mapper.utils.numeric_tools import DecimalLike, as_decimal


class Money:
    """Represents a monetary amount with currency.

    Uses Python's Decimal for the value, quantized to the precision of the
    currency. This is the domain-facing type; storage works with integer
    minor units (see `minor_units` and `from_minor_units`).
    """

    def __init__(self, value: DecimalLike, currency: Currency):
        """Initialize Money with value and currency.

        Args:
            value: Numeric value in major units (Decimal-like scalar).
            currency (Currency): Currency object.

        Raises:
            ValueError: If value cannot be converted to Decimal.
            TypeError: If currency is not Currency instance.
        """
        # Raise: currency must be an instance of Currency
        if not isinstance(currency, Currency):
            raise TypeError(f"$currency must be a Currency instance, but provided value is: {currency}")

        # Raise: $value must be convertible to Decimal
        try:
            decimal_value = as_decimal(value)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot init `Money` because $value ({value}) cannot be converted to Decimal") from e

        # Raise: $value must be a finite number
        if not decimal_value.is_finite():
            raise ValueError(f"Cannot init `Money` because $value ({value}) is not finite")

        # Round to currency precision
        precision_str = f"0.{'0' * currency.precision}" if currency.precision > 0 else "1"
        try:
            self._value = decimal_value.quantize(Decimal(precision_str))
        except InvalidOperation as e:
            raise ValueError(f"Cannot init `Money` because $value ({value}) has too many digits for precision {currency.precision}") from e
        self._currency = currency

    @classmethod
    def from_minor_units(cls, minor_units: int, currency: Currency) -> Money:
        """Create Money from an integer count of minor units (e.g. cents).

        Args:
            minor_units (int): Amount in minor units.
            currency (Currency): Currency object.

        Returns:
            Money: Value equal to $minor_units / 10 ** $currency.precision.
        """
        if not isinstance(minor_units, int) or isinstance(minor_units, bool):
            raise TypeError(f"$minor_units must be an int, but provided value is: {minor_units!r}")

        return cls(Decimal(minor_units).scaleb(-currency.precision), currency)

    @property
    def value(self) -> Decimal:
        """Get the decimal value."""
        return self._value

    @property
    def currency(self) -> Currency:
        """Get the currency."""
        return self._currency

    @property
    def minor_units(self) -> int:
        """Get the value as an integer count of minor units."""
        return int(self._value.scaleb(self._currency.precision))

    def __eq__(self, other) -> bool:
        """Check equality with another Money object."""
        if not isinstance(other, Money):
            return False
        if self.currency != other.currency:
            return False
        return self.value == other.value

    def __hash__(self) -> int:
        """Hash based on value and currency code."""
        return hash((self.value, self.currency.code))

    # String representations
    def __str__(self) -> str:
        """Return string like '5.00 EUR'."""
        return f"{self.value} {self.currency.code}"

    def __repr__(self) -> str:
        """Return string like 'Money(5.00, EUR)'."""
        return f"{self.__class__.__name__}({self.value}, {self.currency.code})"

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from string like '5.00 EUR'.

        Args:
            value_str (str): String representation.

        Returns:
            Money: Money object.

        Raises:
            ValueError: If string format is invalid.
        """
        value_str = value_str.strip()
        if not value_str:
            raise ValueError("Value string with $value_str = '' cannot be empty")

        # Split by whitespace
        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'value currency_code'")

        value_part, currency_part = parts

        try:
            value = Decimal(value_part)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Invalid value part '{value_part}' in string '{value_str}'") from e

        try:
            currency = Currency.from_str(currency_part)
        except ValueError as e:
            raise ValueError(f"Invalid currency part '{currency_part}' in string '{value_str}'") from e

        return cls(value, currency)
