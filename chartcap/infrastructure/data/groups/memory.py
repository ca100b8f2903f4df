"""
In-memory group source implementation.
"""

from typing import Any, Iterable, List
from .base import GroupSource


class InMemoryGroupSource(GroupSource):
    """
    Group source over a fixed list of already aggregated items.

    Args:
        items: Raw group items, e.g. [{'key': 'a', 'value': 10}, ...]

    Example:
        group = InMemoryGroupSource([{'key': 'a', 'value': 10}])
        chart = CategoryChart(group)
    """

    def __init__(self, items: Iterable[Any]):
        if isinstance(items, (str, bytes)):
            raise TypeError("items must be an iterable of group items, got str")

        self._items: list = list(items)

    def all(self) -> List[Any]:
        return list(self._items)
