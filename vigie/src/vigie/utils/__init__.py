"""
Utility functions for Vigie.
"""

from vigie.utils.units import format_ether, format_units
from vigie.utils.validation import (
    parse_deal_id,
    validate_evm_address,
    validate_private_key,
)

__all__ = [
    "format_units",
    "format_ether",
    "parse_deal_id",
    "validate_evm_address",
    "validate_private_key",
]
