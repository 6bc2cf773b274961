"""Contract wrappers for the basket and its CW20 LP token"""

from .cw20 import CW20
from .basket import Basket

__all__ = ["CW20", "Basket"]
