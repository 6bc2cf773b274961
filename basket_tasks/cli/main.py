"""Main CLI entry point"""

import re
import sys
import json
import argparse
from pathlib import Path

from ..core.wallet import generate_wallet
from ..core.balances import BalanceQuery
from ..core.connection import TerraManager
from ..operations.basket import BasketQuery
from ..operations.liquidity import LiquidityManager
from ..operations.swap import SwapManager


def get_results_dir():
    """Get results directory, create if needed"""
    results_dir = Path.cwd() / "results"
    results_dir.mkdir(exist_ok=True)
    return results_dir


def save_result(filename, data):
    """Save result to JSON file in results directory"""
    results_dir = get_results_dir()
    filepath = results_dir / filename
    with open(filepath, "w") as f:
        json.dump(data, f, indent=2, default=str)
    return filepath


def print_json(data):
    print(json.dumps(data, indent=2, default=str))


def print_snapshot(title, snapshot):
    """Print native coins and LP balance under a before/after heading"""
    print(f"{title}, you have:")
    print_json(snapshot["native"])
    print("LP token:")
    print_json(snapshot["lp"])


def print_tx_outcome(label, result):
    """Print fee summary and either the tx result or the dry-run notice"""
    print(f"\n{result['fee_summary']}")
    if result["dry_run"]:
        print("\n" + "=" * 60)
        print("DRY RUN RESULT - No transaction sent")
        print("=" * 60)
        print("\nTo execute, run without --dry-run")
    else:
        tx = result["result"]
        print(f"\n{label} tx result: {tx['tx_hash']}")
        print(f"Height: {tx['height']}")
        print(f"Gas used: {tx['gas_used']}")


def short(address):
    return address[:12] if address else "unknown"


def file_label(value):
    """Filename-safe prefix of a denom or address (ibc/... has slashes)"""
    return re.sub(r"[^\w-]", "_", value[:12])


def cmd_query_basket(args):
    """Query basket state"""
    query = BasketQuery(contract=args.contract)
    print(f"contract: {query.contract}")

    result = query.get_basket()
    print_json(result)
    filepath = save_result(f"basket_{short(query.contract)}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_query_lp(args):
    """Query LP token balance"""
    manager = TerraManager(require_signer=args.address is None, lp_contract=args.lp_contract)
    query = BalanceQuery(manager)
    print(f"contract: {manager.lp_contract}")

    address = args.address or manager.address
    result = query.get_lp_balance(address)
    print_json(result)
    filepath = save_result(f"lp_{short(address)}.json", {"address": address, **result})
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_query_balances(args):
    """Query native and LP balances for address"""
    manager = TerraManager(require_signer=args.address is None, lp_contract=args.lp_contract)
    query = BalanceQuery(manager)
    result = query.get_all_balances(args.address)

    print(f"Balances for {result['address']}")
    print("-" * 60)
    if not result["native"]:
        print("  (no native coins)")
    for coin in result["native"]:
        print(f"  {coin['denom']}: {coin['amount']}")
    lp = result["lp"]
    if "error" in lp:
        print(f"  LP: ERROR - {lp['error']}")
    else:
        print(f"  LP: {lp['balance']}")
    print("-" * 60)

    print("\n" + json.dumps(result, indent=2, default=str))
    filepath = save_result(f"balances_{short(result['address'])}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_provide(args):
    """Provide liquidity to the basket"""
    manager = LiquidityManager(contract=args.contract, lp_contract=args.lp_contract)
    print(f"contract: {manager.basket.address}, lpContract: {manager.lp_token.address}")

    if args.dry_run:
        print(f"[DRY RUN] Simulating provide liquidity: {args.amount} {args.denom}")

    result = manager.provide_liquidity(
        denom=args.denom,
        amount=args.amount,
        slippage_tolerance=args.slippage_tolerance,
        receiver=args.receiver,
        dry_run=args.dry_run,
    )

    print_snapshot("before provide liquidity", result["before"])
    print_tx_outcome("provide liquidity", result)
    if not args.dry_run:
        print_snapshot("after provide liquidity", result["after"])

    if args.dry_run:
        filepath = save_result(f"provide_dryrun_{file_label(args.denom)}.json", result)
    else:
        filepath = save_result(f"provide_{result['result']['tx_hash'][:10]}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_withdraw(args):
    """Withdraw liquidity from the basket"""
    manager = LiquidityManager(contract=args.contract, lp_contract=args.lp_contract)
    print(f"contract: {manager.basket.address}, lpContract: {manager.lp_token.address}")

    if args.dry_run:
        print(f"[DRY RUN] Simulating withdraw: {args.amount} LP for {args.denom}")

    result = manager.withdraw_liquidity(
        denom=args.denom,
        amount=args.amount,
        dry_run=args.dry_run,
    )

    print_snapshot("before withdraw", result["before"])
    print_tx_outcome("withdraw", result)
    if not args.dry_run:
        print_snapshot("after withdraw", result["after"])

    if args.dry_run:
        filepath = save_result(f"withdraw_dryrun_{file_label(args.denom)}.json", result)
    else:
        filepath = save_result(f"withdraw_{result['result']['tx_hash'][:10]}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_swap(args):
    """Swap assets through the basket"""
    manager = SwapManager(contract=args.contract)

    if args.dry_run:
        print(f"[DRY RUN] Simulating swap: {args.amount} {args.offer} -> {args.ask}")
    else:
        print(f"Swapping {args.amount} {args.offer} -> {args.ask}")
    print(f"contract: {manager.basket.address}")

    result = manager.swap(
        offer=args.offer,
        ask=args.ask,
        amount=args.amount,
        belief_price=args.belief_price,
        max_spread=args.max_spread,
        to=args.to,
        dry_run=args.dry_run,
    )

    print("\nBefore:")
    print_json(result["native_before"])
    print_tx_outcome("swap", result)
    if not args.dry_run:
        print("\nAfter:")
        print_json(result["native_after"])
        print(f"\n  {args.offer}: {result['offer']['balance_before']} -> {result['offer']['balance_after']}")
        print(f"  {args.ask}: {result['ask']['balance_before']} -> {result['ask']['balance_after']}")

    if args.dry_run:
        filepath = save_result(f"swap_dryrun_{file_label(args.offer)}_{file_label(args.ask)}.json", result)
    else:
        filepath = save_result(f"swap_{result['result']['tx_hash'][:10]}.json", result)
    print(f"\nSaved to {filepath}", file=sys.stderr)


def cmd_wallet_generate(args):
    """Generate a new wallet"""
    result = generate_wallet(num_accounts=args.accounts)

    print("=" * 60)
    print("WALLET GENERATED")
    print("=" * 60)
    print(f"\nRecovery Phrase ({len(result['mnemonic'].split())} words):")
    print(f"  {result['mnemonic']}\n")
    print("WARNING: Store this phrase securely and NEVER share it!")
    print("=" * 60)

    for acc in result["accounts"]:
        print(f"\nAccount {acc['index'] + 1}:")
        print(f"  Path:        {acc['path']}")
        print(f"  Address:     {acc['address']}")
        print(f"  Private Key: {acc['private_key']}")

    print("\n" + "=" * 60)

    save_data = {
        "mnemonic": result["mnemonic"],
        "accounts": result["accounts"],
        "warning": "NEVER share your mnemonic or private keys!",
    }
    filepath = save_result("wallet.json", save_data)
    print(f"Saved to {filepath}", file=sys.stderr)
    print("\nSECURITY: Keep this file safe and never share it!")


def add_contract_args(parser, lp=True):
    parser.add_argument("--contract", help="Basket contract address (default: CONTRACT env)")
    if lp:
        parser.add_argument("--lp-contract", help="LP token contract address (default: LP_CONTRACT env)")


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="basket-tasks",
        description="Basket Tasks - query and trade against a Terra liquidity basket",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""commands overview:
  query       Query basket state, LP balance, wallet balances
  provide     Deposit a native asset (or CW20) into the basket
  withdraw    Burn LP tokens for one basket asset
  swap        Swap one asset for another through the basket
  wallet      Generate new wallets

examples:
  basket-tasks query basket
  basket-tasks query lp
  basket-tasks provide uluna 1000000 --dry-run
  basket-tasks withdraw uluna 500000
  basket-tasks swap uluna uusd 100000 --max-spread 0.01

configuration:
  network      TERRA_NETWORK in .env (config/networks.json), LCD_URL / CHAIN_ID override
  contracts    CONTRACT and LP_CONTRACT in .env
  wallet       MNEMONIC in wallet.env
  gas          gas_config.json
""",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    # ── query ──────────────────────────────────────────────────────────
    query_parser = subparsers.add_parser("query", help="Query operations")
    query_sub = query_parser.add_subparsers(dest="query_type")

    basket_parser = query_sub.add_parser("basket", help="Query basket state")
    basket_parser.add_argument("--contract", help="Basket contract address (default: CONTRACT env)")
    basket_parser.set_defaults(func=cmd_query_basket)

    lp_parser = query_sub.add_parser("lp", help="Query LP token balance")
    lp_parser.add_argument("--address", help="Address to query (default: wallet from MNEMONIC)")
    lp_parser.add_argument("--lp-contract", help="LP token contract address (default: LP_CONTRACT env)")
    lp_parser.set_defaults(func=cmd_query_lp)

    balances_parser = query_sub.add_parser("balances", help="Query native and LP balances")
    balances_parser.add_argument("--address", help="Address to query (default: wallet from MNEMONIC)")
    balances_parser.add_argument("--lp-contract", help="LP token contract address (default: LP_CONTRACT env)")
    balances_parser.set_defaults(func=cmd_query_balances)

    # ── provide ────────────────────────────────────────────────────────
    provide_parser = subparsers.add_parser("provide", help="Provide liquidity")
    provide_parser.add_argument("denom", help="Native denom (e.g. uluna) or CW20 token address")
    provide_parser.add_argument("amount", help="Amount in micro-units (e.g. 1000000 = 1 LUNA)")
    provide_parser.add_argument("--slippage-tolerance", help="Slippage tolerance as decimal (e.g. 0.01)")
    provide_parser.add_argument("--receiver", help="Address to receive LP tokens")
    provide_parser.add_argument("--dry-run", action="store_true", help="Sign without broadcasting")
    add_contract_args(provide_parser)
    provide_parser.set_defaults(func=cmd_provide)

    # ── withdraw ───────────────────────────────────────────────────────
    withdraw_parser = subparsers.add_parser("withdraw", help="Withdraw liquidity")
    withdraw_parser.add_argument("denom", help="Asset to withdraw (denom or CW20 token address)")
    withdraw_parser.add_argument("amount", help="LP token amount in micro-units")
    withdraw_parser.add_argument("--dry-run", action="store_true", help="Sign without broadcasting")
    add_contract_args(withdraw_parser)
    withdraw_parser.set_defaults(func=cmd_withdraw)

    # ── swap ───────────────────────────────────────────────────────────
    swap_parser = subparsers.add_parser("swap", help="Swap assets")
    swap_parser.add_argument("offer", help="Asset to send (e.g. uluna)")
    swap_parser.add_argument("ask", help="Asset to receive (e.g. uusd)")
    swap_parser.add_argument("amount", help="Offer amount in micro-units")
    swap_parser.add_argument("--belief-price", help="Expected price as decimal")
    swap_parser.add_argument("--max-spread", help="Maximum spread as decimal (e.g. 0.01)")
    swap_parser.add_argument("--to", help="Recipient of the ask asset")
    swap_parser.add_argument("--dry-run", action="store_true", help="Sign without broadcasting")
    add_contract_args(swap_parser, lp=False)
    swap_parser.set_defaults(func=cmd_swap)

    # ── wallet ─────────────────────────────────────────────────────────
    wallet_parser = subparsers.add_parser("wallet", help="Wallet operations")
    wallet_sub = wallet_parser.add_subparsers(dest="wallet_type")

    wallet_gen_parser = wallet_sub.add_parser("generate", help="Generate new wallet")
    wallet_gen_parser.add_argument("--accounts", type=int, default=3, help="Number of accounts to derive")
    wallet_gen_parser.set_defaults(func=cmd_wallet_generate)

    # ── Parse and dispatch ─────────────────────────────────────────────
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "query" and not args.query_type:
        query_parser.print_help()
        sys.exit(1)

    if args.command == "wallet" and not args.wallet_type:
        wallet_parser.print_help()
        sys.exit(1)

    try:
        args.func(args)
    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
