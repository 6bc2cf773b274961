#!/usr/bin/env python3
"""
Query the basket contract state
Usage: python tasks/query_basket.py
Requires CONTRACT in the environment (or .env)
"""

import sys
import json

from basket_tasks.operations.basket import BasketQuery


def main():
    try:
        query = BasketQuery()
        print(f"contract: {query.contract}")
        print(json.dumps(query.get_basket(), indent=2))
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
