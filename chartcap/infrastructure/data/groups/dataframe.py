"""
DataFrame group source implementation.
"""

import pandas as pd
from typing import Any, Callable, Dict, List, Optional, Union
from .base import GroupSource
from chartcap.shared import TransformableMixin


class DataFrameGroupSource(GroupSource, TransformableMixin):
    """
    Group source that aggregates a record DataFrame by one dimension column.

    Each call to all() re-reads the stored records, so filters added to the
    'before' stage between refreshes (e.g. a KeySetFilter issued by another
    chart) are reflected in the next refresh.

    Args:
        dataframe: Record-level DataFrame
        dimension: Column whose distinct values become the group keys
        value: Column aggregated into each key's value
        aggfunc: Any pandas groupby aggregation (default: 'sum')
        transformers: Optional dict of transformer lists
                     'before': applied to the records before aggregation
                     'after': applied to the aggregated key/value frame

    Example:
        from chartcap.infrastructure.data.groups import DataFrameGroupSource

        group = DataFrameGroupSource(sales_df, dimension='country', value='revenue')
        group.all()
        # [{'key': 'TR', 'value': 1200.0}, {'key': 'DE', 'value': 800.0}, ...]
    """

    def __init__(
        self,
        dataframe: pd.DataFrame,
        dimension: str,
        value: str,
        aggfunc: Union[str, Callable] = 'sum',
        transformers: Optional[Dict[str, List[Callable]]] = None
    ):
        if not isinstance(dataframe, pd.DataFrame):
            raise TypeError(
                f"Expected pandas DataFrame, got {type(dataframe).__name__}"
            )
        if not dimension:
            raise ValueError("dimension is required and cannot be empty")
        if not value:
            raise ValueError("value is required and cannot be empty")

        missing_columns = {dimension, value} - set(dataframe.columns)
        if missing_columns:
            raise ValueError(
                f"Required columns not found in DataFrame: {sorted(missing_columns)}. "
                f"Available columns: {sorted(dataframe.columns)}"
            )

        self._dataframe: pd.DataFrame = dataframe.copy()
        self.dimension: str = dimension
        self.value: str = value
        self.aggfunc: Union[str, Callable] = aggfunc
        self.transformers: dict[str, list[Callable]] = transformers or {}

    @property
    def records(self) -> pd.DataFrame:
        """Copy of the stored record-level DataFrame."""
        return self._dataframe.copy()

    def all(self) -> List[Dict[str, Any]]:
        """
        Aggregate the records into key/value items.

        Returns:
            list: One {'key': ..., 'value': ...} dict per distinct dimension
                  value, in first-appearance order
        """
        df = self._apply_transformers(self._dataframe.copy(), 'before')

        aggregated = (
            df.groupby(self.dimension, sort=False)[self.value]
            .agg(self.aggfunc)
            .reset_index()
            .rename(columns={self.dimension: 'key', self.value: 'value'})
        )
        aggregated = self._apply_transformers(aggregated, 'after')

        return aggregated[['key', 'value']].to_dict('records')
