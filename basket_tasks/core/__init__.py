"""Core module - configuration, connection, exceptions, and shared queries"""

from .config import Config
from .connection import TerraManager
from .exceptions import BasketError, ConfigError, ConnectionError, TransactionError
from .balances import BalanceQuery
from .wallet import generate_wallet

__all__ = [
    "Config",
    "TerraManager",
    "BasketError",
    "ConfigError",
    "ConnectionError",
    "TransactionError",
    "BalanceQuery",
    "generate_wallet",
]
