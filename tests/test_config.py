import pytest

from basket_tasks.core.config import Config
from basket_tasks.core.exceptions import ConfigError


def test_defaults_to_testnet(config_dir):
    config = Config()

    assert config.network_name == "testnet"
    assert config.chain_id == "bombay-12"
    assert config.lcd_url == "https://bombay-lcd.terra.dev/"
    assert config.gas_prices_url == "https://bombay-fcd.terra.dev/v1/txs/gas_prices"
    assert config.gas_adjustment == "1.5"


def test_config_is_singleton(config_dir):
    assert Config() is Config()


def test_network_selected_from_env(config_dir, monkeypatch):
    monkeypatch.setenv("TERRA_NETWORK", "localterra")
    config = Config()

    assert config.chain_id == "localterra"
    assert config.gas_prices_url is None
    assert config.static_gas_prices == {"uluna": "0.15"}
    assert config.gas_adjustment == "2"


def test_lcd_url_and_chain_id_overrides(config_dir, monkeypatch):
    monkeypatch.setenv("LCD_URL", "http://node:1317/")
    monkeypatch.setenv("CHAIN_ID", "custom-1")
    config = Config()

    assert config.lcd_url == "http://node:1317/"
    assert config.chain_id == "custom-1"


def test_unknown_network(config_dir, monkeypatch):
    monkeypatch.setenv("TERRA_NETWORK", "mainnet-2099")

    with pytest.raises(ConfigError, match="Unknown network"):
        Config().network


def test_missing_networks_file(tmp_path, monkeypatch):
    empty = tmp_path / "empty-config"
    empty.mkdir()
    monkeypatch.setenv("BASKET_CONFIG_DIR", str(empty))
    Config.reset()
    try:
        with pytest.raises(ConfigError, match="networks.json not found"):
            Config()
    finally:
        Config.reset()
