"""
Capping of group items into a bounded list with an optional "Others" bucket.
"""

from .engine import UNBOUNDED, is_unbounded, rank, split
from .others import (
    DEFAULT_OTHERS_LABEL,
    BucketItem,
    build_others_bucket,
    is_bucket,
    sum_values,
)
from .config import DEFAULT_GROUPER, CapConfig
from .transform import CapTransform

__all__ = [
    'UNBOUNDED',
    'is_unbounded',
    'rank',
    'split',
    'DEFAULT_OTHERS_LABEL',
    'BucketItem',
    'build_others_bucket',
    'is_bucket',
    'sum_values',
    'DEFAULT_GROUPER',
    'CapConfig',
    'CapTransform'
]
