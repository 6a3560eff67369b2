"""
Unit conversion helpers for Vigie.

Formats raw integer token amounts the way block explorers and ethers.js
display them: integer part, a dot, and the fraction with trailing zeros
stripped but never empty.
"""

NATIVE_DECIMALS = 18


def format_units(value: int, decimals: int) -> str:
    """
    Format an integer amount in the smallest unit as a decimal string.

    Args:
        value: Raw amount (e.g. wei)
        decimals: Token decimals (0-255)

    Returns:
        Decimal string with at least one fractional digit

    Raises:
        ValueError: If decimals is out of range

    Examples:
        >>> format_units(1500000, 6)
        '1.5'
        >>> format_units(0, 18)
        '0.0'
        >>> format_units(-25, 1)
        '-2.5'
        >>> format_units(7, 0)
        '7.0'
    """
    if not 0 <= decimals <= 255:
        raise ValueError(f"decimals out of range: {decimals}")

    sign = "-" if value < 0 else ""
    whole, fraction = divmod(abs(int(value)), 10**decimals)

    if decimals == 0:
        return f"{sign}{whole}.0"

    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0") or "0"
    return f"{sign}{whole}.{fraction_str}"


def format_ether(value: int) -> str:
    """
    Format a native-currency amount (18 decimals).

    Examples:
        >>> format_ether(10**18)
        '1.0'
        >>> format_ether(1234500000000000000)
        '1.2345'
    """
    return format_units(value, NATIVE_DECIMALS)
