"""
Base abstract class for chart hosts that feed the capping transform.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class ChartDataProvider(ABC):
    """
    Abstract base class for the chart a capping transform works for.

    The capping transform and the Others click bridge only talk to the chart
    through this interface: they read the accessors and ordering, push filter
    requests, and wrap the chart's click handling.
    """

    @property
    @abstractmethod
    def key_accessor(self) -> Callable:
        """fn(item, index) returning the category key of a raw item."""
        pass

    @property
    @abstractmethod
    def value_accessor(self) -> Callable:
        """fn(item, index) returning the numeric value of a raw item."""
        pass

    @property
    @abstractmethod
    def ordering(self) -> Callable:
        """fn(item) returning the ascending sort key of a raw item."""
        pass

    @property
    def dimension(self) -> Optional[str]:
        """Name of the record column the chart's keys come from, if any."""
        return None

    @abstractmethod
    def filter(self, payload: Any) -> None:
        """
        Receive a filter request.

        Args:
            payload: Filter to apply to the chart's dimension
        """
        pass

    @abstractmethod
    def install_click_handler(self, before: Callable[[Any], None]) -> None:
        """
        Wrap the current click handler.

        After installation a click runs before(item) first and then the
        handler that was installed previously.

        Args:
            before: fn(item) to run ahead of the existing handler
        """
        pass
