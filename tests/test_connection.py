from unittest.mock import MagicMock

import pytest
from terra_sdk.core import Coins

from basket_tasks.core import connection
from basket_tasks.core.connection import TerraManager
from basket_tasks.core.exceptions import ConfigError
from conftest import BASKET, LP_TOKEN, WALLET
from test_wallet import TESTNET_MNEMONIC

GAS_PRICES = Coins({"uusd": "0.15"})


@pytest.fixture
def lcd(config_dir, monkeypatch):
    """Patched LCDClient/GasManager/MnemonicKey, clean contract and wallet env"""
    for var in ("CONTRACT", "LP_CONTRACT", "MNEMONIC", "ADDRESS"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(connection, "load_dotenv", lambda *args, **kwargs: None)

    client = MagicMock()
    monkeypatch.setattr(connection, "LCDClient", MagicMock(return_value=client))

    gas_manager = MagicMock()
    gas_manager.get_gas_prices.return_value = GAS_PRICES
    gas_manager.gas_adjustment = "1.5"
    monkeypatch.setattr(connection, "GasManager", MagicMock(return_value=gas_manager))

    key = MagicMock(acc_address=WALLET)
    monkeypatch.setattr(connection, "MnemonicKey", MagicMock(return_value=key))
    return client


def test_client_built_from_network_config(lcd):
    TerraManager()

    connection.LCDClient.assert_called_once_with(
        url="https://bombay-lcd.terra.dev/",
        chain_id="bombay-12",
        gas_prices=GAS_PRICES,
        gas_adjustment="1.5",
    )


def test_missing_contract_message(lcd):
    manager = TerraManager()

    with pytest.raises(ConfigError) as exc:
        manager.contract
    assert str(exc.value) == "Please set CONTRACT environment variable to the contract address"


def test_missing_lp_contract_message(lcd):
    manager = TerraManager()

    with pytest.raises(ConfigError) as exc:
        manager.lp_contract
    assert str(exc.value) == "Please set LP_CONTRACT environment variable to the contract address"


def test_contracts_from_env_and_arguments(lcd, monkeypatch):
    monkeypatch.setenv("CONTRACT", BASKET)
    monkeypatch.setenv("LP_CONTRACT", LP_TOKEN)

    assert TerraManager().contract == BASKET
    assert TerraManager().lp_contract == LP_TOKEN

    manager = TerraManager(contract="terra1override", lp_contract="terra1lpoverride")
    assert manager.contract == "terra1override"
    assert manager.lp_contract == "terra1lpoverride"


def test_signer_requires_mnemonic(lcd):
    with pytest.raises(ConfigError, match="MNEMONIC not found"):
        TerraManager(require_signer=True)


def test_signer_rejects_unknown_words(lcd, monkeypatch):
    monkeypatch.setenv("MNEMONIC", "notice oak worry")

    with pytest.raises(ConfigError, match="unknown words or wrong word count"):
        TerraManager(require_signer=True)


def test_signer_derives_key_and_wallet(lcd, monkeypatch):
    monkeypatch.setenv("MNEMONIC", TESTNET_MNEMONIC + "\n")
    manager = TerraManager(require_signer=True)

    connection.MnemonicKey.assert_called_once_with(mnemonic=TESTNET_MNEMONIC)
    lcd.wallet.assert_called_once_with(manager.key)
    assert manager.wallet is lcd.wallet.return_value
    assert manager.address == WALLET


def test_read_only_address_fallback(lcd, monkeypatch):
    manager = TerraManager()
    assert manager.address is None
    assert manager.wallet is None

    monkeypatch.setenv("ADDRESS", WALLET)
    assert manager.address == WALLET


def test_get_balance(lcd, monkeypatch):
    lcd.bank.balance.return_value = (Coins({"uluna": 42}), None)
    manager = TerraManager()

    with pytest.raises(ValueError, match="No address"):
        manager.get_balance()

    monkeypatch.setenv("ADDRESS", WALLET)
    assert manager.get_balance().get("uluna").amount == 42
    lcd.bank.balance.assert_called_with(WALLET)
