"""
Validation utility functions for Vigie.

Provides validation for EVM addresses and path parameters.
"""

import re
from typing import Optional

_ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
_DECIMAL_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_PRIVATE_KEY_RE = re.compile(r"^(0x)?[0-9a-fA-F]{64}$")


def validate_evm_address(address: str) -> bool:
    """
    Validate EVM address format (0x + 40 hex chars).

    Checksum casing is not enforced here; web3 normalizes it.

    Examples:
        >>> validate_evm_address("0x5FbDB2315678afecb367f032d93F642f64180aa3")
        True
        >>> validate_evm_address("5FbDB2315678afecb367f032d93F642f64180aa3")
        False
    """
    if not address or not isinstance(address, str):
        return False
    return bool(_ADDRESS_RE.match(address))


def parse_deal_id(raw: Optional[str]) -> Optional[int]:
    """
    Parse a deal id path segment.

    Args:
        raw: Path segment as received

    Returns:
        Non-negative integer, or None if the segment is not a base-10
        integer or is negative

    Examples:
        >>> parse_deal_id("0")
        0
        >>> parse_deal_id("42")
        42
        >>> parse_deal_id("-1") is None
        True
        >>> parse_deal_id("abc") is None
        True
    """
    if raw is None:
        return None

    text = raw.strip()
    if not _DECIMAL_INT_RE.match(text):
        return None

    value = int(text)
    if value < 0:
        return None
    return value


def validate_private_key(key: str) -> bool:
    """
    Validate a hex private key (32 bytes, optional 0x prefix).

    Examples:
        >>> validate_private_key("0x" + "ab" * 32)
        True
        >>> validate_private_key("0x1234")
        False
    """
    if not key or not isinstance(key, str):
        return False
    return bool(_PRIVATE_KEY_RE.match(key.strip()))
