import logging
from decimal import Decimal

import pytest

from money_mapper.codec.currency_table import CurrencyTable
from money_mapper.codec.defaults import DEFAULT_CURRENCY_TABLE, DEFAULT_STORAGE_LAYOUT
from money_mapper.codec.errors import AmountOutOfRangeError, MoneyCodecError, UnsupportedCurrencyError
from money_mapper.codec.money_codec import MoneyCodec
from money_mapper.codec.storage_layout import StorageFields, StorageLayout
from money_mapper.domain.monetary.monetary_value import MonetaryValue

FLAG = 1 << 18
EUR_INDEX_BITS = 1 << 14


@pytest.fixture
def codec() -> MoneyCodec:
    return MoneyCodec()


# region Encode


def test_encode_eur_sets_flag_currency_index_and_amount(codec):
    storage_value = codec.encode(MonetaryValue(500, "EUR"))

    assert storage_value == (1 << 18) | (1 << 14) | 500
    assert codec.decode(storage_value) == MonetaryValue(500, "EUR")


def test_encode_zero_in_default_currency_still_sets_flag(codec):
    storage_value = codec.encode(MonetaryValue(0, "LVL"))

    assert storage_value == FLAG
    assert not codec.has_amount_only(storage_value)
    assert codec.decode(storage_value) == MonetaryValue(0, "LVL")

    # Plain zero is a different storage value with the same meaning
    assert codec.decode(0) == codec.decode(storage_value)


def test_encode_max_amount(codec):
    storage_value = codec.encode(MonetaryValue(16383, "EUR"))

    assert storage_value == FLAG | EUR_INDEX_BITS | 0x3FFF
    assert storage_value < 2**19


def test_encode_rejects_amount_out_of_range(codec):
    with pytest.raises(AmountOutOfRangeError, match=r"Value 16384 does not fit in 14 bits \(max 16383\)") as exc_info:
        codec.encode(MonetaryValue(16384, "EUR"))

    assert exc_info.value.amount == 16384
    assert exc_info.value.bits == 14
    assert exc_info.value.max_amount == 16383


def test_encode_rejects_unsupported_currency(codec):
    with pytest.raises(UnsupportedCurrencyError, match="Currency code USD is not supported") as exc_info:
        codec.encode(MonetaryValue(100, "USD"))

    assert exc_info.value.currency == "USD"


def test_encode_checks_amount_before_currency(codec):
    with pytest.raises(AmountOutOfRangeError):
        codec.encode(MonetaryValue(20000, "USD"))


def test_encode_rejects_non_monetary_value(codec):
    with pytest.raises(TypeError):
        codec.encode((500, "EUR"))


def test_codec_errors_are_value_errors(codec):
    with pytest.raises(ValueError):
        codec.encode(MonetaryValue(100, "USD"))

    assert issubclass(AmountOutOfRangeError, MoneyCodecError)
    assert issubclass(UnsupportedCurrencyError, MoneyCodecError)


# endregion

# region Decode


def test_decode_plain_value_uses_default_currency(codec, caplog):
    assert codec.has_amount_only(500)

    with caplog.at_level(logging.DEBUG, logger="money_mapper.codec.money_codec"):
        result = codec.decode(500)

    assert result == MonetaryValue(500, "LVL")
    assert "Decoding plain storage value 500 in default currency 'LVL'" in caplog.text


def test_decode_flagged_value_does_not_log_plain_format(codec, caplog):
    with caplog.at_level(logging.DEBUG, logger="money_mapper.codec.money_codec"):
        codec.decode(FLAG | EUR_INDEX_BITS | 500)

    assert "plain storage value" not in caplog.text


def test_decode_rejects_unknown_currency_index(codec):
    storage_value = FLAG | (15 << 14) | 100

    with pytest.raises(UnsupportedCurrencyError, match="Currency code 15 is not supported") as exc_info:
        codec.decode(storage_value)

    assert exc_info.value.currency == 15


def test_decode_plain_value_above_amount_range_is_not_masked(codec, caplog):
    # Bit 18 clear, but too large for the 14-bit amount field
    storage_value = 100_000
    assert storage_value & FLAG == 0

    with caplog.at_level(logging.WARNING, logger="money_mapper.codec.money_codec"):
        result = codec.decode(storage_value)

    assert result == MonetaryValue(100_000, "LVL")
    assert "exceeds max amount 16383" in caplog.text


def test_decode_plain_value_with_bits_above_flag(codec):
    # Bit 19 set, bit 18 clear: still the plain format
    storage_value = (1 << 19) | 7

    assert codec.has_amount_only(storage_value)
    assert codec.decode(storage_value) == MonetaryValue((1 << 19) | 7, "LVL")


def test_decode_flagged_value_discards_bits_above_flag(codec):
    storage_value = (1 << 20) | FLAG | EUR_INDEX_BITS | 42

    assert codec.decode(storage_value) == MonetaryValue(42, "EUR")


def test_decode_accepts_integral_float_and_decimal(codec):
    storage_value = FLAG | EUR_INDEX_BITS | 500

    assert codec.decode(float(storage_value)) == MonetaryValue(500, "EUR")
    assert codec.decode(Decimal(storage_value)) == MonetaryValue(500, "EUR")
    assert codec.decode(str(storage_value)) == MonetaryValue(500, "EUR")


def test_decode_rejects_fractional_value(codec):
    with pytest.raises(ValueError, match="whole number"):
        codec.decode(500.5)


def test_decode_rejects_non_numeric_types(codec):
    with pytest.raises(TypeError):
        codec.decode(None)

    with pytest.raises(TypeError):
        codec.decode(True)


def test_decode_negative_plain_value_is_taken_unchanged(codec, caplog):
    storage_value = -(1 << 19)
    # Negative, but bit 18 is clear
    assert codec.has_amount_only(storage_value)

    with caplog.at_level(logging.WARNING, logger="money_mapper.codec.money_codec"):
        result = codec.decode(storage_value)

    assert result.amount == -(1 << 19)
    assert result.currency_code == "LVL"
    assert "Plain storage value -524288 is negative" in caplog.text


def test_monetary_value_keeps_rejecting_negative_amounts():
    with pytest.raises(ValueError, match="non-negative"):
        MonetaryValue(-1, "LVL")


# endregion

# region Properties


def test_round_trip_for_every_amount_and_currency(codec):
    for code in DEFAULT_CURRENCY_TABLE.codes:
        for amount in range(DEFAULT_STORAGE_LAYOUT.max_amount + 1):
            money = MonetaryValue(amount, code)
            assert codec.decode(codec.encode(money)) == money


def test_every_value_without_flag_is_plain_amount_in_default_currency(codec):
    for storage_value in range(0, 1 << 18, 97):
        assert codec.has_amount_only(storage_value)
        assert codec.decode(storage_value) == MonetaryValue(storage_value, "LVL")


def test_encoded_values_are_never_plain(codec):
    for amount in (0, 1, 8191, 16383):
        for code in ("LVL", "EUR"):
            assert not codec.has_amount_only(codec.encode(MonetaryValue(amount, code)))


# endregion

# region Unpack / pack


def test_unpack_flagged_value(codec):
    fields = codec.unpack(FLAG | EUR_INDEX_BITS | 500)

    assert fields == StorageFields(has_currency=True, currency_index=1, amount=500)


def test_unpack_plain_value(codec):
    assert codec.unpack(500) == StorageFields(has_currency=False, currency_index=0, amount=500)


def test_unpack_does_not_resolve_currency(codec):
    fields = codec.unpack(FLAG | (15 << 14) | 3)

    assert fields.currency_index == 15
    assert fields.amount == 3


def test_pack_always_sets_flag(codec):
    storage_value = codec.pack(StorageFields(has_currency=False, currency_index=1, amount=500))

    assert storage_value == FLAG | EUR_INDEX_BITS | 500


def test_pack_rejects_fields_out_of_range(codec):
    with pytest.raises(AmountOutOfRangeError):
        codec.pack(StorageFields(has_currency=True, currency_index=0, amount=-1))

    with pytest.raises(UnsupportedCurrencyError):
        codec.pack(StorageFields(has_currency=True, currency_index=16, amount=0))


# endregion

# region Configuration


def test_codec_with_alternate_currency_table():
    codec = MoneyCodec(currency_table=CurrencyTable({0: "EUR", 1: "USD", 2: "GBP"}))

    assert codec.decode(500) == MonetaryValue(500, "EUR")
    assert codec.encode(MonetaryValue(7, "GBP")) == FLAG | (2 << 14) | 7

    with pytest.raises(UnsupportedCurrencyError):
        codec.encode(MonetaryValue(7, "LVL"))


def test_codec_with_alternate_layout():
    layout = StorageLayout(amount_bits=20, currency_bits=2)
    codec = MoneyCodec(layout=layout)

    storage_value = codec.encode(MonetaryValue(1_000_000, "EUR"))

    assert storage_value == (1 << 22) | (1 << 20) | 1_000_000
    assert codec.decode(storage_value) == MonetaryValue(1_000_000, "EUR")


def test_codec_rejects_table_that_does_not_fit_layout():
    table = CurrencyTable({0: "LVL", 1: "EUR", 4: "USD"})

    with pytest.raises(ValueError, match="does not fit in 2 bits"):
        MoneyCodec(currency_table=table, layout=StorageLayout(amount_bits=14, currency_bits=2))


def test_codec_rejects_wrong_argument_types():
    with pytest.raises(TypeError):
        MoneyCodec(currency_table={0: "LVL"})

    with pytest.raises(TypeError):
        MoneyCodec(layout=(14, 4))


# endregion
