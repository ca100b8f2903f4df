"""
Key set filter - matches records whose dimension key is one of a set of keys.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional, Tuple

import pandas as pd
from .base import DataFrameFilter


@dataclass(frozen=True)
class KeySetFilter(DataFrameFilter):
    """
    Composite filter accepting any record whose key is in `keys`.

    This is the filter a click on an "Others" bucket issues: one filter
    covering every category the bucket absorbed, so drilling into it brings
    back exactly the records behind those categories.

    Filters are immutable and compare by (keys, column), so a chart can
    toggle a filter off by receiving an equal one again.

    Args:
        keys: A single key (strings count as one key) or any iterable of
            keys to match; iteration order is preserved
        column: Record column holding the key, needed for filter(df)

    Example:
        others = KeySetFilter(['c', 'd'], column='country')
        others.matches('c')        # True
        records = others.filter(sales_df)
    """

    keys: Tuple[Any, ...]
    column: Optional[str] = None

    def __post_init__(self):
        keys = self.keys
        if isinstance(keys, (str, bytes)) or not isinstance(keys, Iterable):
            keys = (keys,)
        else:
            keys = tuple(keys)
        object.__setattr__(self, 'keys', keys)

    def matches(self, key: Any) -> bool:
        return key in self.keys

    def __contains__(self, key: Any) -> bool:
        return self.matches(key)

    def __len__(self) -> int:
        return len(self.keys)

    def filter(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Keep the rows whose `column` value is one of the keys.

        Args:
            df: Input DataFrame of records

        Returns:
            pd.DataFrame: Matching rows (copy)

        Raises:
            ValueError: If no column was given or it is missing from df
        """
        if self.column is None:
            raise ValueError("KeySetFilter needs a column to filter a DataFrame")

        if df.empty:
            return df.copy()

        if self.column not in df.columns:
            raise ValueError(
                f"Filter column '{self.column}' not found in DataFrame. "
                f"Available columns: {sorted(df.columns)}"
            )

        return df[df[self.column].isin(list(self.keys))].copy()
