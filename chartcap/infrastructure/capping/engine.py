"""
Ranking and capping of group items.
"""

import math
from typing import Any, Callable, Iterable, List, Tuple, Union

# Cap value meaning "show every category".
UNBOUNDED = math.inf

Cap = Union[int, float]


def is_unbounded(cap: Cap) -> bool:
    """Return True if cap is the UNBOUNDED sentinel (any positive infinity)."""
    return isinstance(cap, float) and math.isinf(cap) and cap > 0


def rank(items: Iterable[Any], ordering: Callable[[Any], Any]) -> List[Any]:
    """
    Sort items ascending by ordering(item).

    The sort is stable: items with equal ordering keys keep their input order.
    The input is never mutated.

    Args:
        items: Raw group items, in any order
        ordering: Maps an item to its sort key

    Returns:
        list: New list of the same items, ranked
    """
    return sorted(items, key=ordering)


def split(
    ordered: List[Any],
    cap: Cap,
    take_front: bool = True
) -> Tuple[List[Any], List[Any]]:
    """
    Partition ranked items into (kept, collapsed).

    With take_front the first `cap` items are kept; otherwise the last `cap`
    items are kept and the leading ones collapse. Both halves keep their
    ranked sub-order. cap <= 0 collapses everything, cap >= len(ordered)
    keeps everything, and UNBOUNDED never collapses.

    Args:
        ordered: Items already sorted by rank()
        cap: Number of items to keep, or UNBOUNDED
        take_front: Keep the front (True) or the back (False) of the ranking

    Returns:
        tuple: (kept, collapsed) as new lists
    """
    if is_unbounded(cap):
        return list(ordered), []

    cap = max(0, int(cap))

    if take_front:
        return list(ordered[:cap]), list(ordered[cap:])

    start = max(0, len(ordered) - cap)
    return list(ordered[start:]), list(ordered[:start])
