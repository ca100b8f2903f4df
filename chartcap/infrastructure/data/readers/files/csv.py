"""
CSV record reader.
"""

import pandas as pd
import os
from typing import Optional, Dict, Any, List, Callable
from ..base import DataReader
from chartcap.shared import TransformableMixin


class CSVDataReader(DataReader, TransformableMixin):
    """
    Reader for record-level data stored in a CSV file.

    Args:
        file_path: Path to the CSV file
        required_columns: Columns that must be present (e.g. the chart
            dimension and value columns)
        transformers: Optional dict of transformer lists applied on load
        **kwargs: Additional arguments to pass to pandas.read_csv()
    """

    def __init__(
        self,
        file_path: str,
        required_columns: Optional[List[str]] = None,
        transformers: Optional[Dict[str, List[Callable]]] = None,
        **kwargs: Any
    ):
        if not file_path:
            raise ValueError("file_path cannot be empty")

        abs_path = os.path.abspath(file_path)

        if not os.path.isfile(abs_path):
            raise FileNotFoundError(f"CSV file not found: {abs_path}")

        if not os.access(abs_path, os.R_OK):
            raise PermissionError(f"CSV file is not readable: {abs_path}")

        self.file_path: str = abs_path
        self.required_columns: list[str] = required_columns or []
        self.transformers: dict[str, list[Callable]] = transformers or {}
        self.read_csv_kwargs = kwargs

    def load(self) -> pd.DataFrame:
        """
        Load records from the CSV file.

        Returns:
            pd.DataFrame: The loaded records

        Raises:
            RuntimeError: If pandas cannot parse the file
            ValueError: If the file is empty or required columns are missing
        """
        try:
            df = pd.read_csv(self.file_path, **self.read_csv_kwargs)
        except Exception as e:
            raise RuntimeError(
                f"Failed to read CSV file '{self.file_path}': {str(e)}"
            ) from e

        if df.empty:
            raise ValueError(f"CSV file is empty: {self.file_path}")

        missing_columns = set(self.required_columns) - set(df.columns)
        if missing_columns:
            raise ValueError(
                f"Required columns not found in CSV file: {sorted(missing_columns)}. "
                f"Available columns: {list(df.columns)}"
            )

        return self._apply_transformers(df, 'after')
