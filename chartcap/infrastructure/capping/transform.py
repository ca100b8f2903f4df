"""
Capping transform: ranks a group, caps it and folds the rest into "Others".
"""

from typing import Any, Callable, List, Optional, Sequence

from ..charts.base import ChartDataProvider
from ..data.groups.base import GroupSource
from .config import DEFAULT_GROUPER, CapConfig
from .engine import Cap, is_unbounded, rank, split
from .others import build_others_bucket, is_bucket


class CapTransform:
    """
    Turns the raw items of a group into the bounded list a chart renders.

    Items are ranked once with the chart's ordering, so the categories kept
    are always the ones displayed first (or last, with take_front=False).
    Collapsed items are handed to the others grouper together with the kept
    ones; the default grouper appends a single BucketItem holding their sum
    and their keys.

    Args:
        provider: Chart supplying accessors and ordering
        config: Capping configuration (default: unbounded, front, "Others")

    Example:
        transform = CapTransform(chart).configure(cap=2)
        transform.compute([
            {'key': 'a', 'value': 10},
            {'key': 'b', 'value': 5},
            {'key': 'c', 'value': 3},
        ])
        # [{'key': 'a', ...}, {'key': 'b', ...}, BucketItem('Others', 3, ('c',))]
    """

    def __init__(
        self,
        provider: ChartDataProvider,
        config: Optional[CapConfig] = None
    ):
        if not isinstance(provider, ChartDataProvider):
            raise TypeError(
                f"provider must be a ChartDataProvider, got {type(provider).__name__}"
            )

        self.provider: ChartDataProvider = provider
        self.config: CapConfig = config if config is not None else CapConfig()

    @property
    def cap(self) -> Cap:
        return self.config.cap

    @cap.setter
    def cap(self, value: Cap) -> None:
        self.config.cap = value

    @property
    def take_front(self) -> bool:
        return self.config.take_front

    @take_front.setter
    def take_front(self, value: bool) -> None:
        self.config.take_front = value

    @property
    def others_label(self) -> Any:
        return self.config.others_label

    @others_label.setter
    def others_label(self, value: Any) -> None:
        self.config.others_label = value

    @property
    def others_grouper(self) -> Optional[Callable]:
        """The active grouper; the bound default grouper unless replaced."""
        if self.config.others_grouper is DEFAULT_GROUPER:
            return self.default_others_grouper
        return self.config.others_grouper

    @others_grouper.setter
    def others_grouper(self, value: Optional[Callable]) -> None:
        self.config.others_grouper = value

    def configure(self, **fields: Any) -> 'CapTransform':
        """
        Set several configuration fields at once.

        Args:
            **fields: Any of cap, take_front, others_label, others_grouper

        Returns:
            CapTransform: self, for chaining

        Raises:
            TypeError: If an unknown field is given
        """
        allowed = ('cap', 'take_front', 'others_label', 'others_grouper')
        unknown = sorted(set(fields) - set(allowed))
        if unknown:
            raise TypeError(f"Unknown cap configuration fields: {unknown}")

        for name in allowed:
            if name in fields:
                setattr(self, name, fields[name])
        return self

    def default_others_grouper(self, kept: Sequence[Any], collapsed: Sequence[Any]) -> List[Any]:
        """Sum bucket built with the chart's current accessors and label."""
        return build_others_bucket(
            kept,
            collapsed,
            key_accessor=self.provider.key_accessor,
            value_accessor=self.provider.value_accessor,
            label=self.config.others_label
        )

    def compute(self, items: Sequence[Any]) -> List[Any]:
        """
        Rank, cap and group raw items.

        Args:
            items: Raw group items in any order

        Returns:
            list: Fresh presentation list (raw items and at most one bucket
                  with the default grouper). An unbounded cap returns the
                  ranked items without calling the grouper.
        """
        ordered = rank(items, self.provider.ordering)
        if is_unbounded(self.config.cap):
            return ordered

        kept, collapsed = split(ordered, self.config.cap, self.config.take_front)

        grouper = self.others_grouper
        if grouper is None:
            return kept
        return list(grouper(kept, collapsed))

    def data(self, group: GroupSource) -> List[Any]:
        """Per-refresh entry point: compute() over group.all()."""
        return self.compute(group.all())

    def __call__(self, group: GroupSource) -> List[Any]:
        return self.data(group)

    def capped_key_accessor(self, item: Any, index: Optional[int] = None) -> Any:
        """Key of a presentation item, bucket or raw."""
        if is_bucket(item):
            return item.key
        return self.provider.key_accessor(item, index)

    def capped_value_accessor(self, item: Any, index: Optional[int] = None) -> Any:
        """Value of a presentation item, bucket or raw."""
        if is_bucket(item):
            return item.value
        return self.provider.value_accessor(item, index)
