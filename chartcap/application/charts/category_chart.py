"""
Category chart host wiring accessors, capping and click handling together.
"""

from typing import Any, Callable, List, Optional, Set

from ...infrastructure.accessors import (
    AccessorConfiguration,
    default_key_accessor,
    default_value_accessor,
)
from ...infrastructure.capping.config import CapConfig
from ...infrastructure.capping.engine import Cap
from ...infrastructure.capping.transform import CapTransform
from ...infrastructure.charts.base import ChartDataProvider
from ...infrastructure.data.groups.base import GroupSource
from ...infrastructure.selection.bridge import OthersClickBridge
from ...infrastructure.selection.handlers import ClickHandlerChain


class CategoryChart(ChartDataProvider):
    """
    Data side of a pie or row chart with capping.

    The chart owns its accessors, a CapTransform with default configuration
    (unbounded, take front, "Others"), and a click handler chain. Its own
    click behaviour toggles the clicked element's key in `highlighted`; the
    OthersClickBridge is installed on top at construction, so clicking an
    "Others" bucket also filters the chart by the keys the bucket absorbed.

    Rendering is out of scope: a renderer calls data() on every refresh and
    reads elements through capped_key_accessor / capped_value_accessor.

    Args:
        group: Source of the raw key/value items
        dimension: Record column the keys come from (used by filters)
        key_accessor: fn(item, index) -> key (default: item['key'])
        value_accessor: fn(item, index) -> value (default: item['value'])
        ordering: fn(item) -> sort key (default: -value)
        config: Capping configuration (default: CapConfig())

    Example:
        chart = CategoryChart(group, dimension='country').configure_cap(cap=5)
        items = chart.data()
        chart.on_click(items[-1])   # drill into "Others"
        chart.filters               # [KeySetFilter(keys=(...), column='country')]
    """

    def __init__(
        self,
        group: GroupSource,
        dimension: Optional[str] = None,
        key_accessor: Callable = default_key_accessor,
        value_accessor: Callable = default_value_accessor,
        ordering: Optional[Callable] = None,
        config: Optional[CapConfig] = None
    ):
        if not isinstance(group, GroupSource):
            raise TypeError(
                f"group must be a GroupSource, got {type(group).__name__}"
            )

        self.group: GroupSource = group
        self._dimension: Optional[str] = dimension
        self.accessors: AccessorConfiguration = AccessorConfiguration(
            key_accessor=key_accessor,
            value_accessor=value_accessor,
            ordering=ordering
        )
        self.filters: List[Any] = []
        self.highlighted: Set[Any] = set()

        self.cap_transform: CapTransform = CapTransform(self, config)
        self._click_chain: ClickHandlerChain = ClickHandlerChain(self._toggle_highlight)
        OthersClickBridge(self).install()

    # ChartDataProvider

    @property
    def key_accessor(self) -> Callable:
        return self.accessors.key_accessor

    @key_accessor.setter
    def key_accessor(self, fn: Callable) -> None:
        self.accessors.key_accessor = fn

    @property
    def value_accessor(self) -> Callable:
        return self.accessors.value_accessor

    @value_accessor.setter
    def value_accessor(self, fn: Callable) -> None:
        self.accessors.value_accessor = fn

    @property
    def ordering(self) -> Callable:
        return self.accessors.ordering

    @ordering.setter
    def ordering(self, fn: Optional[Callable]) -> None:
        self.accessors.ordering = fn

    @property
    def dimension(self) -> Optional[str]:
        return self._dimension

    def filter(self, payload: Any) -> None:
        """
        Toggle a filter: add it, or remove it if an equal one is active.

        Args:
            payload: Filter value (a key, or a KeySetFilter for "Others")
        """
        if payload in self.filters:
            self.filters.remove(payload)
        else:
            self.filters.append(payload)

    def filter_all(self) -> None:
        """Remove every filter and highlight."""
        self.filters = []
        self.highlighted = set()

    def has_filter(self, payload: Any = None) -> bool:
        if payload is None:
            return bool(self.filters)
        return payload in self.filters

    def install_click_handler(self, before: Callable[[Any], None]) -> None:
        self._click_chain.install(before)

    # Capping configuration

    @property
    def cap(self) -> Cap:
        return self.cap_transform.cap

    @cap.setter
    def cap(self, value: Cap) -> None:
        self.cap_transform.cap = value

    @property
    def take_front(self) -> bool:
        return self.cap_transform.take_front

    @take_front.setter
    def take_front(self, value: bool) -> None:
        self.cap_transform.take_front = value

    @property
    def others_label(self) -> Any:
        return self.cap_transform.others_label

    @others_label.setter
    def others_label(self, value: Any) -> None:
        self.cap_transform.others_label = value

    @property
    def others_grouper(self) -> Optional[Callable]:
        return self.cap_transform.others_grouper

    @others_grouper.setter
    def others_grouper(self, value: Optional[Callable]) -> None:
        self.cap_transform.others_grouper = value

    def configure_cap(self, **fields: Any) -> 'CategoryChart':
        """
        Set capping fields (cap, take_front, others_label, others_grouper).

        Returns:
            CategoryChart: self, for chaining
        """
        self.cap_transform.configure(**fields)
        return self

    # Data and interaction

    def data(self) -> List[Any]:
        """Presentation items for the current refresh."""
        return self.cap_transform.data(self.group)

    def capped_key_accessor(self, item: Any, index: Optional[int] = None) -> Any:
        return self.cap_transform.capped_key_accessor(item, index)

    def capped_value_accessor(self, item: Any, index: Optional[int] = None) -> Any:
        return self.cap_transform.capped_value_accessor(item, index)

    def on_click(self, item: Any) -> None:
        """Run the click handler chain for a rendered item."""
        self._click_chain(item)

    def _toggle_highlight(self, item: Any) -> None:
        key = self.capped_key_accessor(item)
        if key in self.highlighted:
            self.highlighted.discard(key)
        else:
            self.highlighted.add(key)
