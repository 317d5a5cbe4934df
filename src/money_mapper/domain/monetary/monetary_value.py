from __future__ import annotations


class MonetaryValue:
    """Integer amount of minor currency units paired with a currency code.

    This is what the storage codec reads and writes. It carries no precision
    or arithmetic; the `amount` is a unit-less count (cents, santims, ...).

    Attributes:
        amount (int): Non-negative count of minor units.
        currency_code (str): Currency code, normalized to upper case (e.g. "EUR").
    """

    __slots__ = ("_amount", "_currency_code")

    def __init__(self, amount: int, currency_code: str):
        """Initialize a MonetaryValue.

        Args:
            amount (int): Non-negative count of minor units.
            currency_code (str): Currency code (e.g. "EUR").

        Raises:
            TypeError: If $amount is not an int or $currency_code is not a string.
            ValueError: If $amount is negative or $currency_code is empty.
        """
        # Raise: bool is an int subclass, reject it explicitly
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError(f"$amount must be an int, but provided value is: {amount!r}")

        if amount < 0:
            raise ValueError(f"$amount must be non-negative, but provided value is: {amount}")

        if not isinstance(currency_code, str):
            raise TypeError(f"$currency_code must be a string, but provided value is: {currency_code!r}")

        if not currency_code.strip():
            raise ValueError(f"$currency_code must be a non-empty string, but provided value is: '{currency_code}'")

        self._amount = amount
        self._currency_code = currency_code.upper().strip()

    @classmethod
    def _unchecked(cls, amount: int, currency_code: str) -> MonetaryValue:
        """Create a MonetaryValue without the non-negative check on $amount.

        Only for plain storage values, which are decoded as they are.
        """
        instance = cls.__new__(cls)
        instance._amount = amount
        instance._currency_code = currency_code.upper().strip()
        return instance

    @property
    def amount(self) -> int:
        return self._amount

    @property
    def currency_code(self) -> str:
        return self._currency_code

    def __eq__(self, other) -> bool:
        if not isinstance(other, MonetaryValue):
            return False
        return self._amount == other._amount and self._currency_code == other._currency_code

    def __hash__(self) -> int:
        return hash((self._amount, self._currency_code))

    def __str__(self) -> str:
        """Return string like '500 EUR'."""
        return f"{self._amount} {self._currency_code}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._amount}, '{self._currency_code}')"

    @classmethod
    def from_str(cls, value_str: str) -> MonetaryValue:
        """Parse MonetaryValue from string like '500 EUR'.

        Raises:
            ValueError: If string format is invalid.
        """
        parts = value_str.split()
        if len(parts) != 2:
            raise ValueError(f"Value string with $value_str = '{value_str}' must be in format 'amount currency_code'")

        amount_part, currency_part = parts
        try:
            amount = int(amount_part)
        except ValueError as e:
            raise ValueError(f"Invalid amount part '{amount_part}' in string '{value_str}'") from e

        return cls(amount, currency_part)
