"""CW20 token contract wrapper (used for the basket LP token)"""

from terra_sdk.core.wasm import MsgExecuteContract
from terra_sdk.exceptions import LCDResponseError

from ..core.exceptions import QueryError
from ..utils.assets import encode_hook_msg


class CW20:
    """Wrapper for CW20 token interactions"""

    def __init__(self, manager, address):
        """
        Args:
            manager: TerraManager instance
            address: Token contract address
        """
        self.manager = manager
        self.address = address

    def query(self, query_msg):
        """Run a smart query against the token contract"""
        try:
            return self.manager.lcd.wasm.contract_query(self.address, query_msg)
        except LCDResponseError as e:
            raise QueryError(f"Query {list(query_msg)[0]} on {self.address} failed: {e}") from e

    def balance(self, address=None):
        """
        Raw balance response, e.g. {"balance": "1000"}.

        Args:
            address: Holder address (defaults to manager address)
        """
        addr = address or self.manager.address
        if not addr:
            raise ValueError("No address provided")
        return self.query({"balance": {"address": addr}})

    def balance_of(self, address=None):
        """Get token balance in micro-units"""
        return int(self.balance(address)["balance"])

    def increase_allowance_msg(self, spender, amount):
        """Message granting spender an allowance on the sender's tokens"""
        return MsgExecuteContract(
            self.manager.address,
            self.address,
            {"increase_allowance": {"spender": spender, "amount": str(amount)}},
        )

    def send_msg(self, contract, amount, hook_msg):
        """
        Message sending tokens to a contract together with a hook message.

        Args:
            contract: Receiving contract address
            amount: Amount in micro-units
            hook_msg: Dict delivered to the receiver (base64-encoded here)
        """
        return MsgExecuteContract(
            self.manager.address,
            self.address,
            {
                "send": {
                    "contract": contract,
                    "amount": str(amount),
                    "msg": encode_hook_msg(hook_msg),
                }
            },
        )
