"""
Readers for record-level chart data.
"""

from .base import DataReader
from .dataframe_reader import DataFrameDataReader
from .files import CSVDataReader

__all__ = [
    'DataReader',
    'DataFrameDataReader',
    'CSVDataReader'
]
