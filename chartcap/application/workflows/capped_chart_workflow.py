"""
Capped chart workflow orchestrator.
"""

import pandas as pd
from typing import Any, Callable, List, Optional, Sequence, Union
from ...infrastructure.capping.config import CapConfig
from ...infrastructure.capping.others import is_bucket
from ...infrastructure.data.groups.dataframe import DataFrameGroupSource
from ...infrastructure.data.readers.base import DataReader
from ...infrastructure.filters.key_set import KeySetFilter
from ..charts.category_chart import CategoryChart

PRESENTATION_COLUMNS = ['key', 'value', 'others']


def presentation_frame(
    items: Sequence[Any],
    key_accessor: Callable,
    value_accessor: Callable
) -> pd.DataFrame:
    """
    Tabulate presentation items for DataFrame-based renderers.

    Args:
        items: Output of a capping transform
        key_accessor: Capped key accessor, fn(item, index)
        value_accessor: Capped value accessor, fn(item, index)

    Returns:
        pd.DataFrame: One row per item with columns key, value and others
                      (absorbed keys tuple for a bucket, None otherwise)
    """
    rows = [
        {
            'key': key_accessor(item, index),
            'value': value_accessor(item, index),
            'others': item.absorbed_keys if is_bucket(item) else None,
        }
        for index, item in enumerate(items)
    ]
    return pd.DataFrame(rows, columns=PRESENTATION_COLUMNS)


class CappedChartWorkflow:
    """
    Orchestrates one capped category chart over record-level data.

    This workflow:
    1. Loads records (via data_reader)
    2. Aggregates them by dimension (DataFrameGroupSource)
    3. Ranks, caps and buckets the groups (CategoryChart)
    4. Returns the result as a presentation DataFrame

    The chart is kept between runs, so its filters and highlights survive a
    refresh. drill_down() resolves the active filters, including a clicked
    "Others" bucket, back to the records behind them.

    Args:
        data_reader: Reader for the record-level data
        dimension: Record column used as the category key
        value: Record column aggregated into each category's value
        aggfunc: pandas aggregation for the value column (default: 'sum')
        config: Capping configuration (default: CapConfig())

    Example:
        workflow = CappedChartWorkflow(
            data_reader=DataFrameDataReader(sales_df),
            dimension='country',
            value='revenue',
            config=CapConfig(cap=5),
        )
        frame = workflow.run()
        workflow.click('Others')
        others_records = workflow.drill_down()
    """

    def __init__(
        self,
        data_reader: DataReader,
        dimension: str,
        value: str,
        aggfunc: Union[str, Callable] = 'sum',
        config: Optional[CapConfig] = None
    ):
        if not isinstance(data_reader, DataReader):
            raise TypeError(
                f"data_reader must be a DataReader instance, "
                f"got {type(data_reader).__name__}"
            )
        if not dimension:
            raise ValueError("dimension is required and cannot be empty")
        if not value:
            raise ValueError("value is required and cannot be empty")

        self.data_reader = data_reader
        self.dimension = dimension
        self.value = value
        self.aggfunc = aggfunc
        self.config = config if config is not None else CapConfig()

        self._chart: Optional[CategoryChart] = None
        self._records: Optional[pd.DataFrame] = None
        self._items: List[Any] = []

    @property
    def chart(self) -> CategoryChart:
        if self._chart is None:
            raise RuntimeError("Workflow has not been run yet. Call run() first.")
        return self._chart

    @property
    def items(self) -> List[Any]:
        """Presentation items of the last run."""
        return list(self._items)

    def run(self) -> pd.DataFrame:
        """
        Execute the complete capped chart workflow.

        Returns:
            pd.DataFrame: Presentation frame (key, value, others)

        Raises:
            ValueError: If the reader returns no records
        """
        records = self.data_reader.load()

        if records is None or records.empty:
            raise ValueError(
                "Data reader returned empty dataset. Cannot build chart data."
            )

        group = DataFrameGroupSource(
            records,
            dimension=self.dimension,
            value=self.value,
            aggfunc=self.aggfunc
        )

        if self._chart is None:
            self._chart = CategoryChart(group, dimension=self.dimension, config=self.config)
        else:
            self._chart.group = group

        self._records = records
        self._items = self._chart.data()

        return presentation_frame(
            self._items,
            self._chart.capped_key_accessor,
            self._chart.capped_value_accessor
        )

    def click(self, key: Any) -> None:
        """
        Simulate a click on the rendered element with the given key.

        Raises:
            KeyError: If no element of the last run has this key
        """
        chart = self.chart
        for index, item in enumerate(self._items):
            if chart.capped_key_accessor(item, index) == key:
                chart.on_click(item)
                return
        raise KeyError(f"No chart element with key {key!r}")

    def drill_down(self) -> pd.DataFrame:
        """
        Records matching the chart's active filters.

        Filters on one chart are alternatives: a record is returned if its
        key matches any of them. A KeySetFilter contributes all of its keys,
        any other filter value is taken as a single key.

        Returns:
            pd.DataFrame: Matching records, or all records if no filter is active
        """
        chart = self.chart
        records = self._records.copy()

        if not chart.filters:
            return records

        keys: List[Any] = []
        for payload in chart.filters:
            if isinstance(payload, KeySetFilter):
                keys.extend(payload.keys)
            else:
                keys.append(payload)

        return KeySetFilter(keys, column=self.dimension).filter(records)
