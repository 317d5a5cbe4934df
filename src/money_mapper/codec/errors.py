from __future__ import annotations


class MoneyCodecError(ValueError):
    """Base class for errors raised while converting money to or from a storage value."""


class AmountOutOfRangeError(MoneyCodecError):
    """Amount does not fit into the amount field of the storage layout.

    Attributes:
        amount (int): The rejected amount.
        bits (int): Width of the amount field in bits.
        max_amount (int): Largest amount the field can hold.
    """

    def __init__(self, amount: int, bits: int, max_amount: int):
        self.amount = amount
        self.bits = bits
        self.max_amount = max_amount
        super().__init__(f"Value {amount} does not fit in {bits} bits (max {max_amount})")


class UnsupportedCurrencyError(MoneyCodecError):
    """Currency has no entry in the currency table.

    Attributes:
        currency (str | int): The currency code (when encoding) or the
            currency index (when decoding) that could not be resolved.
    """

    def __init__(self, currency: str | int):
        self.currency = currency
        super().__init__(f"Currency code {currency} is not supported")
