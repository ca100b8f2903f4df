"""
Click bridge turning a click on an "Others" bucket into a key set filter.
"""

from typing import Any

from ..capping.others import is_bucket
from ..charts.base import ChartDataProvider
from ..filters.key_set import KeySetFilter


class OthersClickBridge:
    """
    Click handler that filters the chart by the keys an "Others" bucket absorbed.

    On a bucket item it sends one KeySetFilter with the bucket's absorbed keys
    to the chart; raw items are ignored. Installed on the chart's click
    handler chain, so the chart's normal click behaviour still runs afterwards.

    Args:
        provider: Chart receiving the filter requests

    Example:
        OthersClickBridge(chart).install()
        chart.on_click(others_item)  # chart.filter(KeySetFilter(('c',), ...))
    """

    def __init__(self, provider: ChartDataProvider):
        if not isinstance(provider, ChartDataProvider):
            raise TypeError(
                f"provider must be a ChartDataProvider, got {type(provider).__name__}"
            )

        self.provider: ChartDataProvider = provider

    def install(self) -> 'OthersClickBridge':
        self.provider.install_click_handler(self)
        return self

    def __call__(self, item: Any) -> None:
        if is_bucket(item):
            self.provider.filter(
                KeySetFilter(item.absorbed_keys, column=self.provider.dimension)
            )
