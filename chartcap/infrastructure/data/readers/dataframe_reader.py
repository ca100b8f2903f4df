"""
In-memory DataFrame record reader.
"""

import pandas as pd
from typing import Optional, Dict, List, Callable
from .base import DataReader
from chartcap.shared import TransformableMixin


class DataFrameDataReader(DataReader, TransformableMixin):
    """
    Reader for records already held in a pandas DataFrame.

    Args:
        dataframe: Record-level DataFrame (copied on construction)
        transformers: Optional dict of transformer lists applied on load
                     Example: {'after': [KeySetFilter(['TR', 'DE'], column='country')]}

    Example:
        reader = DataFrameDataReader(sales_df)
        workflow = CappedChartWorkflow(reader, dimension='country', value='revenue')
    """

    def __init__(
        self,
        dataframe: pd.DataFrame,
        transformers: Optional[Dict[str, List[Callable]]] = None
    ):
        if not isinstance(dataframe, pd.DataFrame):
            raise TypeError(
                f"Expected pandas DataFrame, got {type(dataframe).__name__}"
            )

        self._dataframe: pd.DataFrame = dataframe.copy()
        self.transformers: dict[str, list[Callable]] = transformers or {}

    def load(self) -> pd.DataFrame:
        return self._apply_transformers(self._dataframe.copy(), 'after')
