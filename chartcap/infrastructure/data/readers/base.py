"""
Base abstract class for record readers.
"""

from abc import ABC, abstractmethod
import pandas as pd


class DataReader(ABC):
    """
    Abstract base class for readers of record-level data.

    A reader loads the records a chart aggregates; the records stay available
    afterwards so chart filters can drill back into them.
    """

    @abstractmethod
    def load(self) -> pd.DataFrame:
        """
        Load records.

        Returns:
            pd.DataFrame: Record-level data
        """
        pass
