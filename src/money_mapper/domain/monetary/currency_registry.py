from money_mapper.domain.monetary.currency import Currency


# Currencies known to the default storage currency table
LVL = Currency("LVL", 2, "Latvian Lats")
EUR = Currency("EUR", 2, "Euro")

# Register all predefined currencies
Currency.register(LVL, overwrite=True)
Currency.register(EUR, overwrite=True)
