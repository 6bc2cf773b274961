"""High-level basket operations"""

from .basket import BasketQuery
from .liquidity import LiquidityManager
from .swap import SwapManager

__all__ = ["BasketQuery", "LiquidityManager", "SwapManager"]
