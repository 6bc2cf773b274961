"""Utility functions for assets, gas and transactions"""

from .assets import asset, asset_info, native_asset_info, token_asset_info, parse_amount, encode_hook_msg
from .gas import GasConfig, GasManager, GasPriceTooHighError
from .transactions import TransactionBuilder

__all__ = [
    "asset",
    "asset_info",
    "native_asset_info",
    "token_asset_info",
    "parse_amount",
    "encode_hook_msg",
    "GasConfig",
    "GasManager",
    "GasPriceTooHighError",
    "TransactionBuilder",
]
