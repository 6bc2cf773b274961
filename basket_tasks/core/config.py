"""Configuration loading and management"""

import os
import json
from pathlib import Path
from .exceptions import ConfigError


class Config:
    """Centralized configuration manager for network settings"""

    _instance = None
    _networks = None

    DEFAULT_NETWORK = "testnet"

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Config._networks is None:
            self._load()

    @classmethod
    def reset(cls):
        """Drop the cached instance so the next Config() reloads from disk"""
        cls._instance = None
        cls._networks = None

    def _find_config_dir(self):
        """Find config directory"""
        # Check environment variable first
        env_path = os.getenv("BASKET_CONFIG_DIR")
        if env_path:
            path = Path(env_path)
            if path.exists():
                return path

        locations = [
            Path.cwd() / "config",
            Path(__file__).parent.parent.parent / "config",
            Path.home() / ".basket-tasks" / "config",
        ]

        for path in locations:
            if path.exists():
                return path

        raise ConfigError(f"Could not find config directory. Searched: {[str(p) for p in locations]}")

    def _load(self):
        """Load configuration files"""
        config_dir = self._find_config_dir()

        networks_path = config_dir / "networks.json"
        if not networks_path.exists():
            raise ConfigError(f"networks.json not found in {config_dir}")
        with open(networks_path) as f:
            Config._networks = json.load(f)

    @property
    def network_name(self):
        """Selected network (TERRA_NETWORK env, defaults to testnet)"""
        return os.getenv("TERRA_NETWORK") or self.DEFAULT_NETWORK

    @property
    def network(self):
        """Settings dict for the selected network"""
        name = self.network_name
        if name not in Config._networks:
            raise ConfigError(
                f"Unknown network: {name}. Available: {sorted(Config._networks)}"
            )
        return Config._networks[name]

    @property
    def lcd_url(self):
        return os.getenv("LCD_URL") or self.network["lcd_url"]

    @property
    def chain_id(self):
        return os.getenv("CHAIN_ID") or self.network["chain_id"]

    @property
    def gas_prices_url(self):
        """FCD gas price endpoint, None when the network uses static prices"""
        return self.network.get("gas_prices_url")

    @property
    def static_gas_prices(self):
        return self.network.get("gas_prices") or {}

    @property
    def gas_adjustment(self):
        return str(self.network.get("gas_adjustment", "1.5"))
