"""
Key, value and ordering accessors for raw group items.
"""

import math
from collections.abc import Mapping
from typing import Any, Callable, Optional

import pandas as pd


def _field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item[name]
    return getattr(item, name)


def default_key_accessor(item: Any, index: Optional[int] = None) -> Any:
    """Read `key` from a mapping item, or the `key` attribute of any other item."""
    return _field(item, 'key')


def default_value_accessor(item: Any, index: Optional[int] = None) -> Any:
    """Read `value` from a mapping item, or the `value` attribute of any other item."""
    return _field(item, 'value')


def _require_callable(name: str, fn: Any) -> None:
    if not callable(fn):
        raise TypeError(f"{name} must be callable, got {type(fn).__name__}")


class AccessorConfiguration:
    """
    Pluggable functions that read a raw item.

    key_accessor and value_accessor are called as fn(item, index). ordering is
    called as fn(item) and items are sorted ascending on its result.

    When no ordering is supplied, items sort by the negated value of the
    *current* value accessor, largest value first, with missing values
    (None, NaN) last. Replacing value_accessor later therefore also changes
    the default ordering.

    Args:
        key_accessor: Extracts the category key (default: item['key'])
        value_accessor: Extracts the numeric value (default: item['value'])
        ordering: Maps an item to its sort key (default: -value)

    Example:
        accessors = AccessorConfiguration(
            key_accessor=lambda row, i: row['country'],
            value_accessor=lambda row, i: row['revenue'],
        )
        accessors.ordering({'country': 'TR', 'revenue': 10})  # -10
    """

    def __init__(
        self,
        key_accessor: Callable = default_key_accessor,
        value_accessor: Callable = default_value_accessor,
        ordering: Optional[Callable] = None
    ):
        _require_callable('key_accessor', key_accessor)
        _require_callable('value_accessor', value_accessor)
        if ordering is not None:
            _require_callable('ordering', ordering)

        self._key_accessor: Callable = key_accessor
        self._value_accessor: Callable = value_accessor
        self._ordering: Optional[Callable] = ordering

    @property
    def key_accessor(self) -> Callable:
        return self._key_accessor

    @key_accessor.setter
    def key_accessor(self, fn: Callable) -> None:
        _require_callable('key_accessor', fn)
        self._key_accessor = fn

    @property
    def value_accessor(self) -> Callable:
        return self._value_accessor

    @value_accessor.setter
    def value_accessor(self, fn: Callable) -> None:
        _require_callable('value_accessor', fn)
        self._value_accessor = fn

    @property
    def ordering(self) -> Callable:
        if self._ordering is None:
            return self._default_ordering
        return self._ordering

    @ordering.setter
    def ordering(self, fn: Optional[Callable]) -> None:
        """Set a custom ordering, or None to restore the default (-value)."""
        if fn is not None:
            _require_callable('ordering', fn)
        self._ordering = fn

    def _default_ordering(self, item: Any) -> Any:
        value = self._value_accessor(item, None)
        # missing values rank last
        if pd.isna(value):
            return math.inf
        return -value
