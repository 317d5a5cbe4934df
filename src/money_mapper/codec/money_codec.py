from __future__ import annotations

import logging

from money_mapper.codec.currency_table import CurrencyTable
from money_mapper.codec.defaults import DEFAULT_CURRENCY_TABLE, DEFAULT_STORAGE_LAYOUT
from money_mapper.codec.errors import AmountOutOfRangeError, UnsupportedCurrencyError
from money_mapper.codec.storage_layout import StorageFields, StorageLayout
from money_mapper.domain.monetary.monetary_value import MonetaryValue
from money_mapper.utils.numeric_tools import IntLike, as_exact_int

logger = logging.getLogger(__name__)


class MoneyCodec:
    """Packs a MonetaryValue into one integer and unpacks it again.

    Two storage formats are read:

    - flagged: the has-currency flag is set and the value holds an amount field
      and a currency index field (see `StorageLayout`),
    - plain: the flag is clear and the whole value is an amount in the default
      currency. Values of this format predate currency tracking.

    Only the flagged format is ever written, so `encode` always sets the flag.

    The codec holds no mutable state; one instance can be shared freely.
    """

    def __init__(
        self,
        currency_table: CurrencyTable = DEFAULT_CURRENCY_TABLE,
        layout: StorageLayout = DEFAULT_STORAGE_LAYOUT,
    ):
        """Initialize the codec.

        Args:
            currency_table (CurrencyTable): Mapping between currency index and code.
            layout (StorageLayout): Bit layout of storage values.

        Raises:
            TypeError: If arguments have wrong types.
            ValueError: If an index of $currency_table does not fit into the currency field of $layout.
        """
        if not isinstance(currency_table, CurrencyTable):
            raise TypeError(f"$currency_table must be a CurrencyTable instance, but provided value is: {currency_table!r}")

        if not isinstance(layout, StorageLayout):
            raise TypeError(f"$layout must be a StorageLayout instance, but provided value is: {layout!r}")

        # Raise: every currency index must be representable in the currency field
        if not currency_table.fits(layout):
            raise ValueError(f"$currency_table index {currency_table.max_index} does not fit in {layout.currency_bits} bits (max {layout.max_currency_index})")

        self._currency_table = currency_table
        self._layout = layout

    @property
    def currency_table(self) -> CurrencyTable:
        return self._currency_table

    @property
    def layout(self) -> StorageLayout:
        return self._layout

    # region Storage format

    def has_amount_only(self, storage_value: IntLike) -> bool:
        """Check whether $storage_value is in the plain (amount only) format.

        Args:
            storage_value: Value as read from storage.

        Returns:
            bool: True if the has-currency flag is clear.
        """
        value = as_exact_int(storage_value)
        return (value & self._layout.flag_mask) == 0

    def unpack(self, storage_value: IntLike) -> StorageFields:
        """Split $storage_value into its fields without resolving the currency.

        A plain value is returned whole as the amount, without masking, so an
        amount too large for the amount field comes back unchanged.
        """
        value = as_exact_int(storage_value)

        if (value & self._layout.flag_mask) == 0:
            return StorageFields(has_currency=False, currency_index=CurrencyTable.DEFAULT_INDEX, amount=value)

        return StorageFields(
            has_currency=True,
            currency_index=(value >> self._layout.amount_bits) & self._layout.currency_mask,
            amount=value & self._layout.amount_mask,
        )

    def pack(self, fields: StorageFields) -> int:
        """Assemble a flagged storage value from $fields.

        The flag is set regardless of `fields.has_currency`.

        Raises:
            AmountOutOfRangeError: If the amount does not fit into the amount field.
            UnsupportedCurrencyError: If the currency index does not fit into the currency field.
        """
        layout = self._layout

        if not 0 <= fields.amount <= layout.max_amount:
            raise AmountOutOfRangeError(fields.amount, layout.amount_bits, layout.max_amount)

        if not 0 <= fields.currency_index <= layout.max_currency_index:
            raise UnsupportedCurrencyError(fields.currency_index)

        return layout.flag_mask | (fields.currency_index << layout.amount_bits) | fields.amount

    # endregion

    # region Conversion

    def decode(self, storage_value: IntLike) -> MonetaryValue:
        """Rebuild the MonetaryValue stored in $storage_value.

        Args:
            storage_value: Value as read from storage.

        Returns:
            MonetaryValue: Decoded amount and currency.

        Raises:
            UnsupportedCurrencyError: If the currency index has no entry in the currency table.
            TypeError: If $storage_value is not an integer-like number.
            ValueError: If $storage_value is not a whole number.
        """
        fields = self.unpack(storage_value)

        if not fields.has_currency:
            logger.debug(f"Decoding plain storage value {fields.amount} in default currency '{self._currency_table.default_code}'")
            # Plain values are taken as they are, even when no flagged value could hold them
            if fields.amount > self._layout.max_amount:
                logger.warning(f"Plain storage value {fields.amount} exceeds max amount {self._layout.max_amount} of {self._layout.amount_bits} bits; decoding it unchanged")
            elif fields.amount < 0:
                logger.warning(f"Plain storage value {fields.amount} is negative; decoding it unchanged")

            return MonetaryValue._unchecked(fields.amount, self._currency_table.default_code)

        currency_code = self._currency_table.code_for(fields.currency_index)
        return MonetaryValue(fields.amount, currency_code)

    def encode(self, money: MonetaryValue) -> int:
        """Pack $money into a flagged storage value.

        Args:
            money (MonetaryValue): Value to store.

        Returns:
            int: Storage value with the has-currency flag set.

        Raises:
            AmountOutOfRangeError: If the amount does not fit into the amount field.
            UnsupportedCurrencyError: If the currency code has no entry in the currency table.
            TypeError: If $money is not a MonetaryValue.
        """
        if not isinstance(money, MonetaryValue):
            raise TypeError(f"$money must be a MonetaryValue instance, but provided value is: {money!r}")

        # Raise: amount must fit into the amount field
        if money.amount > self._layout.max_amount:
            raise AmountOutOfRangeError(money.amount, self._layout.amount_bits, self._layout.max_amount)

        currency_index = self._currency_table.index_for(money.currency_code)
        return self.pack(StorageFields(has_currency=True, currency_index=currency_index, amount=money.amount))

    # endregion

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(currency_table={self._currency_table!r}, layout={self._layout!r})"
