import json
from unittest.mock import MagicMock

import pytest
import requests

from basket_tasks.core.config import Config
from basket_tasks.core.exceptions import ConnectionError
from basket_tasks.utils.gas import GasConfig, GasManager, GasPriceTooHighError

FCD_PRICES = {"uluna": "0.01133", "uusd": "0.15", "ukrw": "169.77"}


@pytest.fixture
def no_gas_file(tmp_path, monkeypatch):
    """Run from an empty dir with an empty HOME so no gas_config.json is found"""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def make_session(prices=FCD_PRICES):
    session = MagicMock()
    session.get.return_value.json.return_value = prices
    return session


def write_gas_config(tmp_path, data):
    path = tmp_path / "gas.json"
    path.write_text(json.dumps(data))
    return GasConfig(path)


def denoms(coins):
    return {coin["denom"] for coin in coins.to_data()}


def test_gas_config_defaults(no_gas_file):
    config = GasConfig()

    assert config.gasAdjustment is None
    assert config.feeDenom is None
    assert config.maxGasPrice == {}
    assert config.getGasLimit("swap") is None


def test_gas_config_from_file(tmp_path):
    config = write_gas_config(tmp_path, {
        "gasAdjustment": "1.8",
        "feeDenom": "uusd",
        "gasLimit": {"swap": 600000, "default": 400000},
    })

    assert config.gasAdjustment == "1.8"
    assert config.feeDenom == "uusd"
    assert config.getGasLimit("swap") == 600000
    assert config.getGasLimit("deposit_liquidity") == 400000


def test_fetches_gas_prices_from_fcd(config_dir, no_gas_file):
    session = make_session()
    gas = GasManager(Config(), session=session)

    prices = gas.get_gas_prices()

    session.get.assert_called_once_with(
        "https://bombay-fcd.terra.dev/v1/txs/gas_prices", timeout=GasManager.TIMEOUT
    )
    assert denoms(prices) == {"uluna", "uusd", "ukrw"}

    # cached for the lifetime of the manager
    gas.get_gas_prices()
    assert session.get.call_count == 1


def test_static_gas_prices_when_no_fcd(config_dir, no_gas_file, monkeypatch):
    monkeypatch.setenv("TERRA_NETWORK", "localterra")
    session = make_session()
    gas = GasManager(Config(), session=session)

    assert denoms(gas.get_gas_prices()) == {"uluna"}
    session.get.assert_not_called()


def test_fcd_failure_raises_connection_error(config_dir, no_gas_file):
    session = MagicMock()
    session.get.side_effect = requests.ConnectionError("unreachable")
    gas = GasManager(Config(), session=session)

    with pytest.raises(ConnectionError, match="Failed to fetch gas prices"):
        gas.get_gas_prices()


def test_gas_price_above_cap(config_dir, tmp_path):
    gas_config = write_gas_config(tmp_path, {"maxGasPrice": {"uusd": "0.1"}})
    gas = GasManager(Config(), config=gas_config, session=make_session())

    with pytest.raises(GasPriceTooHighError, match="uusd"):
        gas.get_gas_prices()


def test_gas_price_within_cap(config_dir, tmp_path):
    gas_config = write_gas_config(tmp_path, {"maxGasPrice": {"uusd": "0.2", "uatom": "0.0001"}})
    gas = GasManager(Config(), config=gas_config, session=make_session())

    assert "uusd" in denoms(gas.get_gas_prices())


def test_gas_adjustment_precedence(config_dir, tmp_path):
    gas_config = write_gas_config(tmp_path, {"gasAdjustment": "1.8"})

    assert GasManager(Config(), gas_adjustment=2.5, config=gas_config).gas_adjustment == "2.5"
    assert GasManager(Config(), config=gas_config).gas_adjustment == "1.8"
    assert GasManager(Config(), config=write_gas_config(tmp_path, {})).gas_adjustment == "1.5"


def test_gas_limit_auto_unless_fixed(config_dir, tmp_path):
    gas_config = write_gas_config(tmp_path, {"gasLimit": {"swap": 600000}})
    gas = GasManager(Config(), config=gas_config)

    assert gas.getGasLimit("swap") == "600000"
    assert gas.getGasLimit("deposit_liquidity") == "auto"
    assert gas.fee_denoms is None


def test_fee_denoms_from_config(config_dir, tmp_path):
    gas = GasManager(Config(), config=write_gas_config(tmp_path, {"feeDenom": "uusd"}))

    assert gas.fee_denoms == ["uusd"]
