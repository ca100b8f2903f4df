"""
Click handling for capped charts.
"""

from .handlers import ClickHandlerChain, chain_before
from .bridge import OthersClickBridge

__all__ = [
    'ClickHandlerChain',
    'chain_before',
    'OthersClickBridge'
]
