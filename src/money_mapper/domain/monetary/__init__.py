"""Monetary domain package.

This package contains the value types the storage codec reads and writes:
MonetaryValue (integer minor units + currency code), and the richer Currency
and Money types used by the persistence mapping layer.
"""
