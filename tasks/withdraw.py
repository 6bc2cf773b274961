#!/usr/bin/env python3
"""
Withdraw liquidity from the basket by sending LP tokens
Usage: python tasks/withdraw.py <denom> <amount>
Example: python tasks/withdraw.py uluna 500000
"""

import sys

from basket_tasks.cli.main import main as cli_main


def main():
    if len(sys.argv) < 3:
        print("Usage: python withdraw.py <denom> <amount>")
        sys.exit(1)
    cli_main(["withdraw", sys.argv[1], sys.argv[2]])


if __name__ == "__main__":
    main()
