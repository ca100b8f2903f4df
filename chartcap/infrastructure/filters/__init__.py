"""
Record filters issued by charts.
"""

from .base import DataFrameFilter
from .key_set import KeySetFilter

__all__ = [
    'DataFrameFilter',
    'KeySetFilter'
]
