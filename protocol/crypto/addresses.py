import binascii
from ..config.params import LEGACY_ADDRESS_LENGTH

def normalize_legacy_address(addr: str) -> str:
    """
    Canonical form of a legacy account address: lowercase hex, no 0x prefix,
    left-padded to LEGACY_ADDRESS_LENGTH bytes. "0x1" and "00..01" compare equal.
    """
    if not isinstance(addr, str):
        raise ValueError(f"Address must be a hex string, got {type(addr).__name__}")

    raw = addr.strip().lower()
    if raw.startswith("0x"):
        raw = raw[2:]
    if not raw:
        raise ValueError("Empty address")

    width = LEGACY_ADDRESS_LENGTH * 2
    if len(raw) > width:
        raise ValueError(f"Address longer than {LEGACY_ADDRESS_LENGTH} bytes: {addr}")

    padded = raw.rjust(width, "0")
    try:
        binascii.unhexlify(padded)
    except (binascii.Error, ValueError):
        raise ValueError(f"Invalid hex address: {addr}")
    return padded

def is_valid_legacy_address(addr: str) -> bool:
    try:
        normalize_legacy_address(addr)
        return True
    except ValueError:
        return False
