"""Basket query operations"""

from ..core.connection import TerraManager
from ..contracts.basket import Basket


class BasketQuery:
    """Query basket contract state"""

    def __init__(self, manager=None, contract=None):
        """
        Args:
            manager: TerraManager instance (created read-only if None)
            contract: Basket contract address (defaults to CONTRACT env)
        """
        self.manager = manager or TerraManager(require_signer=False, contract=contract)
        self.basket = Basket(self.manager, contract)

    @property
    def contract(self):
        return self.basket.address

    def get_basket(self):
        """Basket state as returned by the contract"""
        return self.basket.query_basket()
