#!/usr/bin/env python3
"""
Swap through the basket (defaults to 100000 uluna -> uusd)
Usage: python tasks/swap.py [offer_denom] [ask_denom] [amount] [--dry-run]
"""

import sys

from basket_tasks.cli.main import main as cli_main


def main():
    args = [a for a in sys.argv[1:] if a != "--dry-run"]
    offer, ask, amount = (args + ["uluna", "uusd", "100000"][len(args):])[:3]

    argv = ["swap", offer, ask, amount]
    if "--dry-run" in sys.argv:
        argv.append("--dry-run")
    cli_main(argv)


if __name__ == "__main__":
    main()
