"""
The synthetic "Others" bucket and the default grouper that builds it.
"""

from dataclasses import dataclass
from typing import Any, Callable, List, Sequence, Tuple

import pandas as pd

DEFAULT_OTHERS_LABEL = "Others"


@dataclass(frozen=True)
class BucketItem:
    """
    Aggregate item standing in for every category removed by capping.

    Args:
        key: Display label of the bucket (e.g. "Others")
        value: Sum of the collapsed values
        absorbed_keys: Keys of the collapsed items, in ranked order
    """

    key: Any
    value: Any
    absorbed_keys: Tuple[Any, ...] = ()


def is_bucket(item: Any) -> bool:
    """Return True for synthetic bucket items, False for raw group items."""
    return isinstance(item, BucketItem)


def sum_values(items: Sequence[Any], value_accessor: Callable) -> Any:
    """
    Sum value_accessor(item, index) over items.

    Missing values (None, NaN) are skipped, so a partially empty remainder
    still sums to a number.
    """
    total = 0
    for index, item in enumerate(items):
        value = value_accessor(item, index)
        if pd.isna(value):
            continue
        total += value
    return total


def build_others_bucket(
    kept: Sequence[Any],
    collapsed: Sequence[Any],
    key_accessor: Callable,
    value_accessor: Callable,
    label: Any = DEFAULT_OTHERS_LABEL
) -> List[Any]:
    """
    Append one BucketItem summarising the collapsed items.

    The bucket is only added when the collapsed values sum to more than zero;
    an empty or zero-sum remainder is dropped and `kept` is returned as is.

    Args:
        kept: Items that stay visible, in display order
        collapsed: Items removed by capping, in ranked order
        key_accessor: Reads the key of a raw item as fn(item, index)
        value_accessor: Reads the value of a raw item as fn(item, index)
        label: Key given to the bucket

    Returns:
        list: kept, plus the bucket when the remainder is positive

    Example:
        build_others_bucket(
            [{'key': 'a', 'value': 10}],
            [{'key': 'b', 'value': 5}, {'key': 'c', 'value': 3}],
            default_key_accessor, default_value_accessor,
        )
        # [{'key': 'a', 'value': 10}, BucketItem('Others', 8, ('b', 'c'))]
    """
    total = sum_values(collapsed, value_accessor)
    result = list(kept)

    if total > 0:
        absorbed = tuple(key_accessor(item, index) for index, item in enumerate(collapsed))
        result.append(BucketItem(key=label, value=total, absorbed_keys=absorbed))

    return result
