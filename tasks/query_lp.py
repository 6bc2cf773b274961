#!/usr/bin/env python3
"""
Query the LP token balance of the wallet in wallet.env
Usage: python tasks/query_lp.py
Requires LP_CONTRACT in the environment (or .env) and MNEMONIC in wallet.env
"""

import sys
import json

from basket_tasks.core.connection import TerraManager
from basket_tasks.core.balances import BalanceQuery


def main():
    try:
        manager = TerraManager(require_signer=True)
        print(f"contract: {manager.lp_contract}")
        print(json.dumps(BalanceQuery(manager).get_lp_balance(), indent=2))
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
