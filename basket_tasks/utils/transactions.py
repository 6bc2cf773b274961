"""Transaction utilities for signing and broadcasting Terra txs"""

from terra_sdk.client.lcd.api.tx import CreateTxOptions
from terra_sdk.exceptions import LCDResponseError

from ..core.exceptions import TransactionError


class TransactionBuilder:
    """Sign and broadcast transactions with unified gas management"""

    def __init__(self, manager, gas_manager=None):
        """
        Args:
            manager: TerraManager instance (must have signer)
            gas_manager: GasManager instance (defaults to the manager's)
        """
        self.manager = manager
        self.gas_manager = gas_manager or manager.gas_manager

    def build(self, msgs, operation_type=None, memo=None):
        """
        Create and sign a transaction.

        Args:
            msgs: List of terra_sdk messages
            operation_type: Type of operation for gas limit lookup
            memo: Optional tx memo

        Returns:
            Signed Tx
        """
        if self.manager.wallet is None:
            raise TransactionError("A signing wallet is required (set MNEMONIC in wallet.env)")

        options = CreateTxOptions(
            msgs=msgs,
            memo=memo,
            gas=self.gas_manager.getGasLimit(operation_type),
            gas_adjustment=self.gas_manager.gas_adjustment,
            fee_denoms=self.gas_manager.fee_denoms,
        )
        try:
            return self.manager.wallet.create_and_sign_tx(options)
        except LCDResponseError as e:
            # Simulation failures surface the contract error here
            raise TransactionError(f"Failed to create transaction: {e}") from e

    def broadcast(self, tx):
        """
        Broadcast a signed transaction and check its result.

        Returns:
            Broadcast result (txhash, height, gas_used, raw_log, ...)

        Raises:
            TransactionError: If the node rejects the tx or execution fails
        """
        try:
            result = self.manager.lcd.tx.broadcast(tx)
        except LCDResponseError as e:
            raise TransactionError(f"Broadcast failed: {e}") from e

        if getattr(result, "code", 0):
            raise TransactionError(
                f"Transaction {result.txhash} failed with code {result.code}: {result.raw_log}"
            )
        return result

    def build_and_send(self, msgs, operation_type=None, memo=None, dry_run=False):
        """
        Sign and (unless dry_run) broadcast a transaction.

        Returns:
            Dict with the signed tx, fee and, when broadcast, the result
        """
        tx = self.build(msgs, operation_type, memo)
        fee = tx.auth_info.fee

        sent = {
            "tx": tx,
            "fee": {
                "gas_limit": int(fee.gas_limit),
                "amount": fee.amount.to_data(),
            },
            "fee_summary": self.gas_manager.formatSummary(fee),
            "result": None,
        }
        if not dry_run:
            sent["result"] = self.broadcast(tx)
        return sent


def result_to_dict(result):
    """Flatten a broadcast result into JSON-friendly fields"""
    if result is None:
        return None
    return {
        "tx_hash": result.txhash,
        "height": int(result.height) if getattr(result, "height", None) is not None else None,
        "gas_wanted": int(result.gas_wanted) if getattr(result, "gas_wanted", None) is not None else None,
        "gas_used": int(result.gas_used) if getattr(result, "gas_used", None) is not None else None,
        "raw_log": getattr(result, "raw_log", None),
    }
