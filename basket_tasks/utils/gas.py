"""Gas price and fee management with user-configurable limits"""

import json
from pathlib import Path

import requests
from terra_sdk.core import Coins

from ..core.exceptions import ConnectionError


class GasPriceTooHighError(Exception):
    """Raised when the network gas price exceeds the user-specified maximum"""
    pass


class GasConfig:
    """Load and manage gas configuration from JSON file"""

    # None means "auto": simulate the tx and scale by gas adjustment
    DEFAULT_GAS_LIMITS = {
        "deposit_liquidity": None,
        "withdraw_liquidity": None,
        "swap": None,
        "default": None,
    }

    def __init__(self, config_path=None):
        """
        Load gas configuration from JSON file.

        Args:
            config_path: Path to gas_config.json (searches default locations if None)
        """
        self._config = self._load_config(config_path)

    def _load_config(self, config_path=None):
        """Load config from file or return defaults"""
        search_paths = [
            config_path,
            Path.cwd() / "gas_config.json",
            Path.home() / ".basket-tasks" / "gas_config.json",
            Path(__file__).parent.parent.parent / "gas_config.json",
        ]

        for path in search_paths:
            if path and Path(path).exists():
                with open(path) as f:
                    return json.load(f)

        return {
            "gasAdjustment": None,
            "feeDenom": None,
            "maxGasPrice": {},
            "gasLimit": self.DEFAULT_GAS_LIMITS.copy(),
        }

    @property
    def gasAdjustment(self):
        """Gas adjustment multiplier (None = use network setting)"""
        return self._config.get("gasAdjustment")

    @property
    def feeDenom(self):
        """Denom to pay fees in (None = let the client pick)"""
        return self._config.get("feeDenom")

    @property
    def maxGasPrice(self):
        """Per-denom gas price caps, e.g. {"uusd": "0.2"}"""
        return self._config.get("maxGasPrice") or {}

    def getGasLimit(self, operation_type):
        """
        Get gas limit for operation type.

        Args:
            operation_type: Transaction type (e.g., "swap", "deposit_liquidity")

        Returns:
            Gas limit in units, or None for automatic estimation
        """
        gas_limits = self._config.get("gasLimit", self.DEFAULT_GAS_LIMITS)
        return gas_limits.get(operation_type, gas_limits.get("default"))


class GasManager:
    """
    Terra gas management.

    Supports:
    - gas prices fetched from the network FCD (or static per network)
    - gasAdjustment: multiplier applied to simulated gas
    - maxGasPrice: refuse to sign when the network asks for more
    - gasLimit: fixed gas per transaction type instead of simulation
    """

    TIMEOUT = 10

    def __init__(self, network_config, gas_adjustment=None, config=None, session=None):
        """
        Args:
            network_config: core Config instance
            gas_adjustment: Gas adjustment (overrides config)
            config: GasConfig instance (created if None)
            session: requests.Session used for FCD calls (created if None)
        """
        self.network_config = network_config
        self.config = config or GasConfig()
        self.session = session or requests.Session()

        # CLI overrides take precedence over config file
        self._gas_adjustment = gas_adjustment
        self._gas_prices = None

    @property
    def gas_adjustment(self):
        """Gas adjustment (CLI override > gas_config.json > network)"""
        if self._gas_adjustment is not None:
            return str(self._gas_adjustment)
        if self.config.gasAdjustment is not None:
            return str(self.config.gasAdjustment)
        return self.network_config.gas_adjustment

    @property
    def fee_denoms(self):
        denom = self.config.feeDenom
        return [denom] if denom else None

    def fetch_gas_prices(self):
        """
        Fetch current gas prices from the FCD endpoint.

        Returns:
            Dict of denom -> price string
        """
        url = self.network_config.gas_prices_url
        if not url:
            return dict(self.network_config.static_gas_prices)

        try:
            response = self.session.get(url, timeout=self.TIMEOUT)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise ConnectionError(f"Failed to fetch gas prices from {url}: {e}") from e

    def get_gas_prices(self):
        """
        Get gas prices as Coins, validated against maxGasPrice.

        Raises:
            GasPriceTooHighError: If a capped denom is priced above its cap
        """
        if self._gas_prices is not None:
            return self._gas_prices

        prices = self.fetch_gas_prices()

        for denom, cap in self.config.maxGasPrice.items():
            if denom in prices and float(prices[denom]) > float(cap):
                raise GasPriceTooHighError(
                    f"Current gas price for {denom} ({prices[denom]}) exceeds your "
                    f"maxGasPrice ({cap}). Either raise maxGasPrice in gas_config.json "
                    f"or wait for lower network congestion."
                )

        self._gas_prices = Coins(prices)
        return self._gas_prices

    def getGasLimit(self, operation_type=None):
        """Get gas limit for operation type ("auto" when not fixed)"""
        limit = self.config.getGasLimit(operation_type or "default")
        return str(limit) if limit else "auto"

    def formatSummary(self, fee):
        """
        Format a human-readable fee summary.

        Args:
            fee: terra_sdk Fee taken from a signed tx

        Returns:
            Formatted string summary
        """
        amount = ", ".join(str(coin) for coin in fee.amount.to_list()) or "0"
        return (
            f"Fee Summary:\n"
            f"  Gas Limit:      {int(fee.gas_limit):,}\n"
            f"  Gas Adjustment: {self.gas_adjustment}\n"
            f"  Fee:            {amount}"
        )
