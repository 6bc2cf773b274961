"""Asset JSON builders and argument parsing for basket messages"""

import re
import json
import base64
from decimal import Decimal, InvalidOperation, localcontext

# Native denoms (uluna, uusd, ibc/...) and bech32 contract addresses
DENOM_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9/:._-]{2,127}$")
CONTRACT_RE = re.compile(r"^terra1[02-9ac-hj-np-z]{38}([02-9ac-hj-np-z]{20})?$")

# Largest cosmwasm Decimal: Uint128::MAX scaled by 10^18
DECIMAL_MAX = Decimal(f"{2 ** 128 - 1}e-18")


def is_contract_address(value):
    """True for terra1... bech32 addresses (CW20 tokens)"""
    return bool(CONTRACT_RE.match(value))


def native_asset_info(denom):
    """AssetInfo for a native coin"""
    if not DENOM_RE.match(denom):
        raise ValueError(f"Invalid denom: {denom}")
    return {"native_token": {"denom": denom}}


def token_asset_info(contract_addr):
    """AssetInfo for a CW20 token"""
    if not is_contract_address(contract_addr):
        raise ValueError(f"Invalid token contract address: {contract_addr}")
    return {"token": {"contract_addr": contract_addr}}


def asset_info(denom_or_address):
    """
    Build AssetInfo from a CLI argument.

    Args:
        denom_or_address: Native denom (e.g. "uluna") or CW20 address ("terra1...")

    Returns:
        {"native_token": {...}} or {"token": {...}}
    """
    if is_contract_address(denom_or_address):
        return token_asset_info(denom_or_address)
    return native_asset_info(denom_or_address)


def asset(info, amount):
    """Asset JSON: amount as a Uint128 string plus its info"""
    return {"amount": str(amount), "info": info}


def is_native(info):
    return "native_token" in info


def asset_label(info):
    """Denom or contract address of an AssetInfo"""
    if is_native(info):
        return info["native_token"]["denom"]
    return info["token"]["contract_addr"]


def parse_amount(value):
    """
    Parse a Uint128 amount in micro-units.

    Raises:
        ValueError: If value is not a positive integer
    """
    text = str(value).strip()
    if not text.isdigit():
        raise ValueError(f"Amount must be a positive integer in micro-units, got: {value}")
    amount = int(text)
    if amount <= 0:
        raise ValueError(f"Amount must be greater than zero, got: {value}")
    if amount >= 2 ** 128:
        raise ValueError(f"Amount overflows Uint128: {value}")
    return amount


def parse_decimal(value, name="value"):
    """
    Parse a cosmwasm Decimal (non-negative, at most 18 fractional digits).

    Returns:
        Normalized decimal string, or None when value is None
    """
    if value is None:
        return None
    try:
        dec = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid {name}: {value}")
    if not dec.is_finite() or dec < 0:
        raise ValueError(f"Invalid {name}: {value}")
    if dec > DECIMAL_MAX:
        raise ValueError(f"{name} exceeds the maximum Decimal value: {value}")
    with localcontext() as ctx:
        # exact: trailing zeros dropped, no rounding
        ctx.prec = max(ctx.prec, len(dec.as_tuple().digits))
        dec = dec.normalize()
    if -dec.as_tuple().exponent > 18:
        raise ValueError(f"{name} has more than 18 decimal places: {value}")
    return format(dec, "f")


def encode_hook_msg(msg):
    """Compact JSON, base64-encoded, as expected in a CW20 send hook"""
    raw = json.dumps(msg, separators=(",", ":"))
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_hook_msg(data):
    return json.loads(base64.b64decode(data))
