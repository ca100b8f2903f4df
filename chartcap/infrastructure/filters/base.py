"""
Base class for record filters.
"""

from abc import ABC, abstractmethod
from typing import Any
import pandas as pd


class DataFrameFilter(ABC):
    """
    Abstract base class for filters over chart records.

    A filter answers two questions: does a single key match (used by chart
    hosts holding filter state), and which rows of a record DataFrame match
    (used to drill down to the records behind a chart element).
    """

    @abstractmethod
    def matches(self, key: Any) -> bool:
        """
        Check a single dimension key.

        Args:
            key: Dimension key

        Returns:
            bool: True if records with this key pass the filter
        """
        pass

    @abstractmethod
    def filter(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Filter a DataFrame of records.

        Args:
            df: Input DataFrame

        Returns:
            pd.DataFrame: Filtered DataFrame
        """
        pass
