"""Storage codec package.

Packs `MonetaryValue` objects into single integers for storage columns with
limited exact-integer precision, and unpacks them again.
"""
