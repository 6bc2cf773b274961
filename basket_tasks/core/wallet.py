"""Wallet generation operations"""

from mnemonic import Mnemonic
from terra_sdk.key.mnemonic import MnemonicKey

# Terra BIP44 coin type
COIN_TYPE = 330


def generate_wallet(num_accounts=3, strength=256):
    """
    Generate a new wallet with a BIP39 mnemonic.

    Args:
        num_accounts: Number of accounts to derive (default: 3)
        strength: Entropy bits, 256 gives the 24 words Terra wallets use

    Returns:
        Dict with mnemonic and derived accounts
    """
    mnemo = Mnemonic("english")
    mnemonic = mnemo.generate(strength=strength)

    accounts = []
    for i in range(num_accounts):
        key = MnemonicKey(mnemonic=mnemonic, account=0, index=i, coin_type=COIN_TYPE)
        accounts.append({
            "index": i,
            "path": f"m/44'/{COIN_TYPE}'/0'/0/{i}",
            "address": key.acc_address,
            "private_key": key.private_key.hex(),
        })

    return {
        "mnemonic": mnemonic,
        "accounts": accounts,
    }


def validate_mnemonic(mnemonic):
    """
    True if the phrase has a BIP39 length and only English wordlist words.

    The checksum is not enforced: keys derive from the seed either way and
    some long-lived testnet phrases predate checksum validation.
    """
    words = mnemonic.split()
    if len(words) not in (12, 15, 18, 21, 24):
        return False
    wordlist = set(Mnemonic("english").wordlist)
    return all(word in wordlist for word in words)
