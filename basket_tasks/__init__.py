"""
Basket Tasks - command-line tooling for a Terra liquidity basket contract
"""

from .core.connection import TerraManager
from .core.config import Config
from .core.exceptions import BasketError, ConfigError, ConnectionError, TransactionError

__version__ = "0.1.0"
__all__ = [
    "TerraManager",
    "Config",
    "BasketError",
    "ConfigError",
    "ConnectionError",
    "TransactionError",
]
