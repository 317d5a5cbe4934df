__version__ = "0.0.1"

from money_mapper.codec.currency_table import CurrencyTable
from money_mapper.codec.defaults import DEFAULT_CURRENCY_TABLE, DEFAULT_STORAGE_LAYOUT
from money_mapper.codec.errors import AmountOutOfRangeError, MoneyCodecError, UnsupportedCurrencyError
from money_mapper.codec.money_codec import MoneyCodec
from money_mapper.codec.storage_layout import StorageFields, StorageLayout
from money_mapper.domain.monetary.monetary_value import MonetaryValue
from money_mapper.mapping.money_mapper import MoneyMapper

__all__ = [
    "AmountOutOfRangeError",
    "CurrencyTable",
    "DEFAULT_CURRENCY_TABLE",
    "DEFAULT_STORAGE_LAYOUT",
    "MonetaryValue",
    "MoneyCodec",
    "MoneyCodecError",
    "MoneyMapper",
    "StorageFields",
    "StorageLayout",
    "UnsupportedCurrencyError",
]
