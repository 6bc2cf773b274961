"""Shared fixtures: a fake TerraManager backed by mocks, no network access"""

import json
from unittest.mock import MagicMock

import pytest
from terra_sdk.core import Coins

from basket_tasks.core.config import Config

WALLET = "terra1dcegyrekltswvyy0xy69ydgxn9x8x32zdtapd8"
BASKET = "terra122dgdy3a6mwlru6deqynrsm3n7e0qax999q3za"
LP_TOKEN = "terra1x46rqay4d3cssq8gxxvqz8xt6nwlz4td20k38v"
CW20_TOKEN = "terra1qxxlalvsdjd07p07y3rc5fu6ll8k4tme6e2scc"

NETWORKS = {
    "testnet": {
        "chain_id": "bombay-12",
        "lcd_url": "https://bombay-lcd.terra.dev/",
        "gas_prices_url": "https://bombay-fcd.terra.dev/v1/txs/gas_prices",
        "gas_adjustment": "1.5",
    },
    "localterra": {
        "chain_id": "localterra",
        "lcd_url": "http://localhost:1317/",
        "gas_prices_url": None,
        "gas_prices": {"uluna": "0.15"},
        "gas_adjustment": "2",
    },
}


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Isolated config dir with networks.json, fresh Config singleton"""
    path = tmp_path / "config"
    path.mkdir()
    (path / "networks.json").write_text(json.dumps(NETWORKS))
    monkeypatch.setenv("BASKET_CONFIG_DIR", str(path))
    for var in ("TERRA_NETWORK", "LCD_URL", "CHAIN_ID"):
        monkeypatch.delenv(var, raising=False)
    Config.reset()
    yield path
    Config.reset()


class FakeManager:
    """Stands in for TerraManager: mocked lcd/wallet, in-memory balances"""

    def __init__(self, native=None, lp_balance=0, token_balances=None):
        self.address = WALLET
        self.contract = BASKET
        self.lp_contract = LP_TOKEN
        self.native = Coins(native or {})
        self.lp_balance = lp_balance
        self.token_balances = token_balances or {}

        self.lcd = MagicMock()
        self.lcd.wasm.contract_query.side_effect = self._contract_query

        self.fee = MagicMock()
        self.fee.gas_limit = 250000
        self.fee.amount = Coins({"uusd": 37500})
        self.tx = MagicMock()
        self.tx.auth_info.fee = self.fee

        self.wallet = MagicMock()
        self.wallet.create_and_sign_tx.return_value = self.tx

        self.broadcast_result = MagicMock(
            txhash="ABCDEF0123456789", height=1234, gas_wanted=300000,
            gas_used=210000, raw_log="[]", code=0,
        )
        self.lcd.tx.broadcast.return_value = self.broadcast_result

        self.gas_manager = MagicMock()
        self.gas_manager.getGasLimit.return_value = "auto"
        self.gas_manager.gas_adjustment = "1.5"
        self.gas_manager.fee_denoms = None
        self.gas_manager.formatSummary.return_value = "Fee Summary: test"

    def _contract_query(self, contract, query):
        if "balance" in query:
            if contract == LP_TOKEN:
                return {"balance": str(self.lp_balance)}
            return {"balance": str(self.token_balances.get(contract, 0))}
        if "basket" in query:
            return {"assets": [], "name": "test basket"}
        raise AssertionError(f"unexpected query {query}")

    def get_balance(self, address=None):
        return self.native

    @property
    def sent_msgs(self):
        """Messages passed to the last create_and_sign_tx call"""
        options = self.wallet.create_and_sign_tx.call_args[0][0]
        return options.msgs


@pytest.fixture
def manager():
    return FakeManager(native={"uluna": 5000000, "uusd": 2000000}, lp_balance=750000)
