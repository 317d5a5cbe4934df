from __future__ import annotations

import logging

from money_mapper.codec.errors import UnsupportedCurrencyError
from money_mapper.codec.money_codec import MoneyCodec
from money_mapper.domain.monetary.currency import Currency
from money_mapper.domain.monetary.money import Money
from money_mapper.domain.monetary.monetary_value import MonetaryValue
from money_mapper.utils.numeric_tools import IntLike

# Registers the currencies of the default currency table
import money_mapper.domain.monetary.currency_registry  # noqa: F401

logger = logging.getLogger(__name__)


class MoneyMapper:
    """Maps `Money` objects to storage values and back.

    This is the seam an ORM column type calls: it reads the raw integer from the
    column and hands it to `assemble_money_from_storage_value`, and writes the
    result of `convert_money_to_storage_value`. Bit packing is delegated to
    `MoneyCodec`; this class only converts between `Money` (Decimal value in
    major units) and integer minor units.
    """

    def __init__(self, codec: MoneyCodec | None = None):
        if codec is None:
            codec = MoneyCodec()

        if not isinstance(codec, MoneyCodec):
            raise TypeError(f"$codec must be a MoneyCodec instance, but provided value is: {codec!r}")

        self._codec = codec

    @property
    def codec(self) -> MoneyCodec:
        return self._codec

    def assemble_money_from_storage_value(self, storage_value: IntLike) -> Money:
        """Build `Money` from a value read from storage.

        Raises:
            UnsupportedCurrencyError: If the stored currency is unknown to the
                currency table or to the currency registry.
        """
        monetary_value = self._codec.decode(storage_value)
        currency = self._resolve_currency(monetary_value.currency_code)
        return Money.from_minor_units(monetary_value.amount, currency)

    def convert_money_to_storage_value(self, money: Money) -> int:
        """Convert $money into a value ready to be written to storage.

        Raises:
            AmountOutOfRangeError: If the amount in minor units does not fit into the amount field.
            UnsupportedCurrencyError: If the currency is not in the currency table.
            ValueError: If $money is negative.
        """
        if not isinstance(money, Money):
            raise TypeError(f"$money must be a Money instance, but provided value is: {money!r}")

        # Raise: storage holds only non-negative amounts
        if money.value < 0:
            raise ValueError(f"Cannot call `convert_money_to_storage_value` because $money ({money}) is negative")

        monetary_value = MonetaryValue(money.minor_units, money.currency.code)
        storage_value = self._codec.encode(monetary_value)
        logger.debug(f"Converted {money} to storage value {storage_value}")
        return storage_value

    def has_amount_only(self, storage_value: IntLike) -> bool:
        """Check whether $storage_value is in the plain (amount only) format."""
        return self._codec.has_amount_only(storage_value)

    @staticmethod
    def _resolve_currency(currency_code: str) -> Currency:
        try:
            return Currency.from_str(currency_code)
        except ValueError:
            raise UnsupportedCurrencyError(currency_code) from None
