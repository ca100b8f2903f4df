"""
File-based record readers.
"""

from .csv import CSVDataReader

__all__ = ['CSVDataReader']
