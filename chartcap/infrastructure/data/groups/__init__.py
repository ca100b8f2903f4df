"""
Group sources feeding category charts.
"""

from .base import GroupSource
from .memory import InMemoryGroupSource
from .dataframe import DataFrameGroupSource

__all__ = [
    'GroupSource',
    'InMemoryGroupSource',
    'DataFrameGroupSource'
]
