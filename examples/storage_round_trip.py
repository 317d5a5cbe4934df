"""Show how amounts and currencies are packed into storage values."""

import logging

from money_mapper import MonetaryValue, MoneyCodec, MoneyMapper
from money_mapper.domain.monetary.currency_registry import EUR
from money_mapper.domain.monetary.money import Money


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    codec = MoneyCodec()

    for money in (MonetaryValue(500, "EUR"), MonetaryValue(0, "LVL"), MonetaryValue(16383, "EUR")):
        storage_value = codec.encode(money)
        fields = codec.unpack(storage_value)
        print(f"{str(money):>10} -> {storage_value:>7} ({storage_value:019b}) {fields}")

    # Values written before currencies were tracked
    for storage_value in (500, 100_000):
        print(f"{storage_value:>7} plain={codec.has_amount_only(storage_value)} -> {codec.decode(storage_value)}")

    mapper = MoneyMapper(codec)
    storage_value = mapper.convert_money_to_storage_value(Money("12.34", EUR))
    print(f"Money 12.34 EUR -> {storage_value} -> {mapper.assemble_money_from_storage_value(float(storage_value))}")


if __name__ == "__main__":
    main()
