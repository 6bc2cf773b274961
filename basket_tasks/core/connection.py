"""LCD connection management"""

import os
from dotenv import load_dotenv
from terra_sdk.client.lcd import LCDClient
from terra_sdk.key.mnemonic import MnemonicKey
from .config import Config
from .exceptions import ConfigError
from .wallet import validate_mnemonic
from ..utils.gas import GasManager


class TerraManager:
    """Manages the LCD client, signing key and contract addresses"""

    def __init__(self, require_signer=False, contract=None, lp_contract=None, gas_manager=None):
        """
        Initialize LCD connection.

        Args:
            require_signer: If True, derives the signing key from MNEMONIC
            contract: Basket contract address (falls back to CONTRACT env)
            lp_contract: LP token contract address (falls back to LP_CONTRACT env)
            gas_manager: GasManager instance (created if None)
        """
        load_dotenv()
        load_dotenv("wallet.env")

        self.config = Config()
        self._contract = contract
        self._lp_contract = lp_contract
        self.gas_manager = gas_manager or GasManager(self.config)
        self._setup_client()

        self.key = None
        self.wallet = None
        if require_signer:
            self._setup_key()

    def _setup_client(self):
        """Setup LCD client with current gas prices"""
        self.lcd = LCDClient(
            url=self.config.lcd_url,
            chain_id=self.config.chain_id,
            gas_prices=self.gas_manager.get_gas_prices(),
            gas_adjustment=self.gas_manager.gas_adjustment,
        )

    def _setup_key(self):
        """Setup signing key from mnemonic"""
        mnemonic = os.getenv("MNEMONIC")
        if not mnemonic:
            raise ConfigError("MNEMONIC not found in wallet.env")
        if not validate_mnemonic(mnemonic):
            raise ConfigError("MNEMONIC in wallet.env has unknown words or wrong word count")

        self.key = MnemonicKey(mnemonic=mnemonic.strip())
        self.wallet = self.lcd.wallet(self.key)

    @property
    def address(self):
        """Get account address (from signer or ADDRESS in wallet.env)"""
        if self.key:
            return self.key.acc_address
        # Fall back to ADDRESS for read-only operations
        return os.getenv("ADDRESS") or None

    @property
    def contract(self):
        """Basket contract address"""
        contract = self._contract or os.getenv("CONTRACT")
        if not contract:
            raise ConfigError("Please set CONTRACT environment variable to the contract address")
        return contract

    @property
    def lp_contract(self):
        """LP token contract address"""
        lp_contract = self._lp_contract or os.getenv("LP_CONTRACT")
        if not lp_contract:
            raise ConfigError("Please set LP_CONTRACT environment variable to the contract address")
        return lp_contract

    def get_balance(self, address=None):
        """Get native coin balances as terra_sdk Coins"""
        addr = address or self.address
        if not addr:
            raise ValueError("No address provided")
        coins, _pagination = self.lcd.bank.balance(addr)
        return coins
