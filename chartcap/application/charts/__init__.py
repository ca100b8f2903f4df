"""
Chart hosts.
"""

from .category_chart import CategoryChart

__all__ = ['CategoryChart']
