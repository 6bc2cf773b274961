"""Native coin and LP token balance queries"""

from .connection import TerraManager
from ..contracts.cw20 import CW20


class BalanceQuery:
    """Query native and LP token balances for an address"""

    def __init__(self, manager=None):
        """
        Args:
            manager: TerraManager instance (created with signer if None)
        """
        self.manager = manager or TerraManager(require_signer=True)

    def get_native_balances(self, address=None):
        """Native coins as a list of {"denom", "amount"} dicts"""
        return self.manager.get_balance(address).to_data()

    def get_native_amount(self, denom, address=None):
        """Amount of one native denom in micro-units (0 if not held)"""
        coin = self.manager.get_balance(address).get(denom)
        return int(coin.amount) if coin is not None else 0

    def get_lp_balance(self, address=None):
        """Raw LP balance response from the LP token contract"""
        token = CW20(self.manager, self.manager.lp_contract)
        return token.balance(address or self.manager.address)

    def snapshot(self, address=None):
        """
        Native coins and LP balance, as printed around provide/withdraw.

        Returns:
            Dict with address, native list and lp response
        """
        addr = address or self.manager.address
        return {
            "address": addr,
            "native": self.get_native_balances(addr),
            "lp": self.get_lp_balance(addr),
        }

    def get_all_balances(self, address=None):
        """
        Get native coins and, when LP_CONTRACT is configured, the LP balance.

        Args:
            address: Address to query (uses manager address if None)
        """
        addr = address or self.manager.address
        if not addr:
            raise ValueError("No address provided")

        result = {
            "address": addr,
            "native": self.get_native_balances(addr),
            "lp": None,
        }
        try:
            result["lp"] = self.get_lp_balance(addr)
        except Exception as e:
            result["lp"] = {"error": str(e)}
        return result
