"""
Base abstract class for group sources.
"""

from abc import ABC, abstractmethod
from typing import Any, List


class GroupSource(ABC):
    """
    Abstract base class for sources of key/value groups.

    A group source produces the full current set of aggregated items for one
    chart dimension. No ordering is guaranteed; ranking is the job of the
    capping transform.
    """

    @abstractmethod
    def all(self) -> List[Any]:
        """
        Return every item of the group.

        Returns:
            list: Raw group items, in no particular order
        """
        pass
