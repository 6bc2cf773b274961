#!/usr/bin/env python3
"""
Provide liquidity to the basket
Usage: python tasks/provide_liquidity.py <denom> <amount>
Example: python tasks/provide_liquidity.py uluna 1000000
"""

import sys

from basket_tasks.cli.main import main as cli_main


def main():
    if len(sys.argv) < 3:
        print("Usage: python provide_liquidity.py <denom> <amount>")
        sys.exit(1)
    cli_main(["provide", sys.argv[1], sys.argv[2]])


if __name__ == "__main__":
    main()
