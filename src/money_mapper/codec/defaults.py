from money_mapper.codec.currency_table import CurrencyTable
from money_mapper.codec.storage_layout import StorageLayout


# 14 bits amount + 4 bits currency index + 1 flag bit = 19 bits
DEFAULT_STORAGE_LAYOUT = StorageLayout(amount_bits=14, currency_bits=4)

# Index 0 is the currency of storage values written before currencies were tracked
DEFAULT_CURRENCY_TABLE = CurrencyTable(
    {
        0: "LVL",
        1: "EUR",
    }
)
