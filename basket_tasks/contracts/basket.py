"""Basket contract wrapper"""

from terra_sdk.core import Coins
from terra_sdk.core.wasm import MsgExecuteContract
from terra_sdk.exceptions import LCDResponseError

from ..core.exceptions import QueryError
from ..utils.assets import asset, is_native, asset_label
from .cw20 import CW20


class Basket:
    """Wrapper for the basket liquidity contract"""

    def __init__(self, manager, address=None):
        """
        Args:
            manager: TerraManager instance
            address: Basket contract address (defaults to manager.contract)
        """
        self.manager = manager
        self.address = address or manager.contract

    def query(self, query_msg):
        try:
            return self.manager.lcd.wasm.contract_query(self.address, query_msg)
        except LCDResponseError as e:
            raise QueryError(f"Query {list(query_msg)[0]} on {self.address} failed: {e}") from e

    def query_basket(self):
        """Full basket state"""
        return self.query({"basket": {}})

    def deposit_liquidity_msgs(self, info, amount, slippage_tolerance=None, receiver=None):
        """
        Messages depositing a single asset into the basket.

        Native assets are attached as funds. CW20 assets get an allowance
        for the basket first, in the same transaction.
        """
        deposit = {"assets": [asset(info, amount)]}
        if slippage_tolerance is not None:
            deposit["slippage_tolerance"] = slippage_tolerance
        if receiver is not None:
            deposit["receiver"] = receiver

        msgs = []
        funds = None
        if is_native(info):
            funds = Coins({asset_label(info): amount})
        else:
            token = CW20(self.manager, asset_label(info))
            msgs.append(token.increase_allowance_msg(self.address, amount))

        msgs.append(MsgExecuteContract(
            self.manager.address,
            self.address,
            {"deposit_liquidity": deposit},
            funds,
        ))
        return msgs

    def swap_msgs(self, offer_info, ask_info, amount, belief_price=None, max_spread=None, to=None):
        """
        Messages swapping offer asset for ask asset.

        Native offers call swap directly with funds attached. CW20 offers go
        through the token's send with a swap hook.
        """
        optional = {}
        if belief_price is not None:
            optional["belief_price"] = belief_price
        if max_spread is not None:
            optional["max_spread"] = max_spread
        if to is not None:
            optional["to"] = to

        if is_native(offer_info):
            swap = {
                "sender": self.manager.address,
                "offer_asset": asset(offer_info, amount),
                "ask_asset": ask_info,
            }
            swap.update(optional)
            return [MsgExecuteContract(
                self.manager.address,
                self.address,
                {"swap": swap},
                Coins({asset_label(offer_info): amount}),
            )]

        hook = {"swap": dict(optional, ask_asset=ask_info)}
        token = CW20(self.manager, asset_label(offer_info))
        return [token.send_msg(self.address, amount, hook)]

    def withdraw_liquidity_msgs(self, lp_token, info, amount):
        """Messages burning LP tokens for the given basket asset"""
        hook = {"withdraw_liquidity": {"asset": info}}
        return [lp_token.send_msg(self.address, amount, hook)]
