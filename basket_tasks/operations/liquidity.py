"""Liquidity management operations"""

from ..core.connection import TerraManager
from ..core.balances import BalanceQuery
from ..core.exceptions import InsufficientBalanceError
from ..contracts.basket import Basket
from ..contracts.cw20 import CW20
from ..utils.assets import asset_info, asset_label, is_native, parse_amount, parse_decimal
from ..utils.transactions import TransactionBuilder, result_to_dict


class LiquidityManager:
    """Provide and withdraw basket liquidity"""

    def __init__(self, manager=None, contract=None, lp_contract=None):
        """
        Args:
            manager: TerraManager instance (created with signer if None)
            contract: Basket contract address (defaults to CONTRACT env)
            lp_contract: LP token address (defaults to LP_CONTRACT env)
        """
        self.manager = manager or TerraManager(
            require_signer=True, contract=contract, lp_contract=lp_contract
        )
        self.basket = Basket(self.manager, contract)
        self.lp_token = CW20(self.manager, lp_contract or self.manager.lp_contract)
        self.balances = BalanceQuery(self.manager)
        self.tx_builder = TransactionBuilder(self.manager)

    def _check_asset_balance(self, info, amount):
        """Raise if the wallet holds less than amount of the asset"""
        label = asset_label(info)
        if is_native(info):
            have = self.balances.get_native_amount(label)
        else:
            have = CW20(self.manager, label).balance_of()
        if have < amount:
            raise InsufficientBalanceError(
                f"Insufficient {label} balance. Have: {have}, Need: {amount}"
            )

    def provide_liquidity(self, denom, amount, slippage_tolerance=None, receiver=None, dry_run=False):
        """
        Deposit a single asset into the basket.

        Args:
            denom: Native denom (e.g. "uluna") or CW20 token address
            amount: Amount in micro-units
            slippage_tolerance: Optional decimal (e.g. "0.01")
            receiver: Optional address credited with the LP tokens
            dry_run: Sign but do not broadcast

        Returns:
            Dict with balances before/after, fee and tx result
        """
        info = asset_info(denom)
        amount = parse_amount(amount)
        slippage_tolerance = parse_decimal(slippage_tolerance, "slippage_tolerance")

        before = self.balances.snapshot()
        self._check_asset_balance(info, amount)

        msgs = self.basket.deposit_liquidity_msgs(
            info, amount, slippage_tolerance=slippage_tolerance, receiver=receiver
        )
        sent = self.tx_builder.build_and_send(msgs, "deposit_liquidity", dry_run=dry_run)

        return {
            "action": "provide_liquidity",
            "contract": self.basket.address,
            "lp_contract": self.lp_token.address,
            "asset": {"info": info, "amount": str(amount)},
            "dry_run": dry_run,
            "fee": sent["fee"],
            "fee_summary": sent["fee_summary"],
            "result": result_to_dict(sent["result"]),
            "before": before,
            "after": before if dry_run else self.balances.snapshot(),
        }

    def withdraw_liquidity(self, denom, amount, dry_run=False):
        """
        Burn LP tokens for one basket asset.

        Args:
            denom: Asset to withdraw (native denom or CW20 token address)
            amount: LP tokens to send, in micro-units
            dry_run: Sign but do not broadcast

        Returns:
            Dict with balances before/after, fee and tx result
        """
        info = asset_info(denom)
        amount = parse_amount(amount)

        before = self.balances.snapshot()
        lp_have = int(before["lp"]["balance"])
        if lp_have < amount:
            raise InsufficientBalanceError(
                f"Insufficient LP balance. Have: {lp_have}, Need: {amount}"
            )

        msgs = self.basket.withdraw_liquidity_msgs(self.lp_token, info, amount)
        sent = self.tx_builder.build_and_send(msgs, "withdraw_liquidity", dry_run=dry_run)

        return {
            "action": "withdraw_liquidity",
            "contract": self.basket.address,
            "lp_contract": self.lp_token.address,
            "asset": {"info": info},
            "lp_amount": str(amount),
            "dry_run": dry_run,
            "fee": sent["fee"],
            "fee_summary": sent["fee_summary"],
            "result": result_to_dict(sent["result"]),
            "before": before,
            "after": before if dry_run else self.balances.snapshot(),
        }
