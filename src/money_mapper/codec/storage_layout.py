from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StorageLayout:
    """Bit layout of a storage value, least-significant bit first.

    - bits `0 .. amount_bits-1`: amount
    - next `currency_bits` bits: currency index
    - bit `flag_bit`: set when the value carries a currency index. When it is
      clear, the whole value is a plain amount in the default currency.

    The default 14/4 layout gives a 19-bit value, the largest integer a MySQL
    FLOAT column stores without rounding.
    """

    amount_bits: int = 14
    currency_bits: int = 4

    def __post_init__(self):
        # Raise: both fields need at least one bit
        for field_name in ("amount_bits", "currency_bits"):
            bits = getattr(self, field_name)
            if not isinstance(bits, int) or isinstance(bits, bool) or bits < 1:
                raise ValueError(f"${field_name} must be a positive integer, but provided value is: {bits!r}")

    @property
    def flag_bit(self) -> int:
        """Position of the has-currency flag."""
        return self.amount_bits + self.currency_bits

    @property
    def flag_mask(self) -> int:
        return 1 << self.flag_bit

    @property
    def amount_mask(self) -> int:
        return (1 << self.amount_bits) - 1

    @property
    def currency_mask(self) -> int:
        return (1 << self.currency_bits) - 1

    @property
    def max_amount(self) -> int:
        return self.amount_mask

    @property
    def max_currency_index(self) -> int:
        return self.currency_mask

    @property
    def total_bits(self) -> int:
        """Number of bits a storage value produced by `MoneyCodec.encode` occupies."""
        return self.flag_bit + 1


@dataclass(frozen=True)
class StorageFields:
    """Raw fields of a storage value, before the currency index is resolved.

    For a plain (legacy) storage value `has_currency` is False, `currency_index`
    is 0 and `amount` is the whole value, which may exceed the amount field.
    """

    has_currency: bool
    currency_index: int
    amount: int
