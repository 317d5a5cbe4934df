from __future__ import annotations

from typing import Iterator, Mapping

from bidict import frozenbidict, ValueDuplicationError

from money_mapper.codec.errors import UnsupportedCurrencyError
from money_mapper.codec.storage_layout import StorageLayout


class CurrencyTable:
    """Immutable two-way mapping between currency index and currency code.

    The index is what the storage value carries in its currency field. Index 0
    is the default currency, implied by storage values without the has-currency
    flag. Adding a currency means building a new table, never mutating one.

    Example:
        ```python
        table = CurrencyTable({0: "LVL", 1: "EUR"})
        table.index_for("EUR")  # 1
        table.code_for(0)  # "LVL"
        ```
    """

    DEFAULT_INDEX = 0

    def __init__(self, codes_by_index: Mapping[int, str]):
        """Initialize the table.

        Args:
            codes_by_index (Mapping[int, str]): Currency code for each index.

        Raises:
            ValueError: If the mapping is empty, lacks index 0, or holds a
                negative index, an empty code or a duplicated code.
            TypeError: If an index is not an int or a code is not a string.
        """
        if not codes_by_index:
            raise ValueError("$codes_by_index cannot be empty. At least the default currency (index 0) must be defined.")

        normalized: dict[int, str] = {}
        for index, code in codes_by_index.items():
            if not isinstance(index, int) or isinstance(index, bool):
                raise TypeError(f"Currency index must be an int, but provided value is: {index!r}")
            if index < 0:
                raise ValueError(f"Currency index must be non-negative, but provided value is: {index}")
            if not isinstance(code, str):
                raise TypeError(f"Currency code for index {index} must be a string, but provided value is: {code!r}")
            if not code.strip():
                raise ValueError(f"Currency code for index {index} must be a non-empty string")
            normalized[index] = code.upper().strip()

        if self.DEFAULT_INDEX not in normalized:
            raise ValueError(f"$codes_by_index must define the default currency at index {self.DEFAULT_INDEX}, but provided indexes are: {list(normalized)}")

        try:
            self._codes_by_index: frozenbidict[int, str] = frozenbidict(sorted(normalized.items()))
        except ValueDuplicationError as e:
            raise ValueError(f"Currency codes must be unique, but provided mapping is: {normalized}") from e

    @property
    def default_code(self) -> str:
        """Currency code implied by storage values without a currency index."""
        return self._codes_by_index[self.DEFAULT_INDEX]

    @property
    def codes(self) -> tuple[str, ...]:
        """Supported currency codes, ordered by index."""
        return tuple(self._codes_by_index.values())

    @property
    def max_index(self) -> int:
        return max(self._codes_by_index)

    def code_for(self, index: int) -> str:
        """Resolve a currency index to its code.

        Raises:
            UnsupportedCurrencyError: If $index has no entry.
        """
        try:
            return self._codes_by_index[index]
        except KeyError:
            raise UnsupportedCurrencyError(index) from None

    def index_for(self, code: str) -> int:
        """Resolve a currency code to its index.

        Raises:
            UnsupportedCurrencyError: If $code has no entry.
        """
        normalized = code.upper().strip() if isinstance(code, str) else code
        try:
            return self._codes_by_index.inverse[normalized]
        except (KeyError, TypeError):
            raise UnsupportedCurrencyError(code) from None

    def fits(self, layout: StorageLayout) -> bool:
        """Check that every index fits into the currency field of $layout."""
        return self.max_index <= layout.max_currency_index

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper().strip() in self._codes_by_index.inverse

    def __len__(self) -> int:
        return len(self._codes_by_index)

    def __iter__(self) -> Iterator[tuple[int, str]]:
        """Iterate `(index, code)` pairs ordered by index."""
        return iter(self._codes_by_index.items())

    def __eq__(self, other) -> bool:
        if not isinstance(other, CurrencyTable):
            return False
        return dict(self._codes_by_index) == dict(other._codes_by_index)

    def __hash__(self) -> int:
        return hash(self._codes_by_index)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._codes_by_index)})"
