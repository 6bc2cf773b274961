"""Swap operations"""

from ..core.connection import TerraManager
from ..core.balances import BalanceQuery
from ..core.exceptions import InsufficientBalanceError
from ..contracts.basket import Basket
from ..contracts.cw20 import CW20
from ..utils.assets import asset_info, asset_label, is_native, parse_amount, parse_decimal
from ..utils.transactions import TransactionBuilder, result_to_dict


class SwapManager:
    """Swap assets through the basket contract"""

    def __init__(self, manager=None, contract=None):
        """
        Args:
            manager: TerraManager instance (created with signer if None)
            contract: Basket contract address (defaults to CONTRACT env)
        """
        self.manager = manager or TerraManager(require_signer=True, contract=contract)
        self.basket = Basket(self.manager, contract)
        self.balances = BalanceQuery(self.manager)
        self.tx_builder = TransactionBuilder(self.manager)

    def _balance_of(self, info):
        label = asset_label(info)
        if is_native(info):
            return self.balances.get_native_amount(label)
        return CW20(self.manager, label).balance_of()

    def swap(
        self,
        offer,
        ask,
        amount,
        belief_price=None,
        max_spread=None,
        to=None,
        dry_run=False,
    ):
        """
        Swap offer asset for ask asset.

        Args:
            offer: Denom or CW20 address to send (e.g. "uluna")
            ask: Denom or CW20 address to receive (e.g. "uusd")
            amount: Offer amount in micro-units
            belief_price: Optional expected price (decimal)
            max_spread: Optional max spread (decimal, e.g. "0.01")
            to: Optional recipient of the ask asset
            dry_run: Sign but do not broadcast

        Returns:
            Dict with offer/ask balances before/after, fee and tx result
        """
        offer_info = asset_info(offer)
        ask_info = asset_info(ask)
        if offer_info == ask_info:
            raise ValueError(f"Offer and ask assets must differ, got {offer} for both")

        amount = parse_amount(amount)
        belief_price = parse_decimal(belief_price, "belief_price")
        max_spread = parse_decimal(max_spread, "max_spread")

        offer_before = self._balance_of(offer_info)
        if offer_before < amount:
            raise InsufficientBalanceError(
                f"Insufficient {asset_label(offer_info)} balance. Have: {offer_before}, Need: {amount}"
            )
        ask_before = self._balance_of(ask_info)
        native_before = self.balances.get_native_balances()

        msgs = self.basket.swap_msgs(
            offer_info, ask_info, amount,
            belief_price=belief_price, max_spread=max_spread, to=to,
        )
        sent = self.tx_builder.build_and_send(msgs, "swap", dry_run=dry_run)

        result = {
            "action": "swap",
            "contract": self.basket.address,
            "sender": self.manager.address,
            "offer": {"info": offer_info, "amount": str(amount), "balance_before": str(offer_before)},
            "ask": {"info": ask_info, "balance_before": str(ask_before)},
            "belief_price": belief_price,
            "max_spread": max_spread,
            "dry_run": dry_run,
            "fee": sent["fee"],
            "fee_summary": sent["fee_summary"],
            "result": result_to_dict(sent["result"]),
            "native_before": native_before,
            "native_after": native_before,
        }

        if not dry_run:
            result["offer"]["balance_after"] = str(self._balance_of(offer_info))
            result["ask"]["balance_after"] = str(self._balance_of(ask_info))
            result["native_after"] = self.balances.get_native_balances()

        return result
