"""
Chart host contract.
"""

from .base import ChartDataProvider

__all__ = ['ChartDataProvider']
