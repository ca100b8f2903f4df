"""
Shared building blocks.
"""

from .transformable import TransformableMixin

__all__ = ['TransformableMixin']
