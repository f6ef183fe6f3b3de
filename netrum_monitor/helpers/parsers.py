"""Parsing utilities for addresses and wei-scaled token amounts."""

import math
import re

from netrum_monitor.helpers.constants import (
    EVM_ADDRESS_PATTERN,
    TOKEN_DISPLAY_DECIMALS,
    TOKEN_SCALE,
)


_EVM_ADDRESS_RE = re.compile(EVM_ADDRESS_PATTERN)
_DECIMAL_INT_RE = re.compile(r"[+-]?[0-9]+")
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_DECIMAL_NUMBER_RE = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def is_valid_evm_address(address: str | None) -> bool:
    """Check that a string is an EVM address.

    Args:
        address: Candidate address, possibly None

    Returns:
        bool: True for "0x" followed by exactly 40 hex characters

    Example:
        >>> is_valid_evm_address("0x" + "ab" * 20)
        True
        >>> is_valid_evm_address("0x1234")
        False
    """
    if not address:
        return False
    # fullmatch, so a trailing newline does not sneak past "$"
    return _EVM_ADDRESS_RE.fullmatch(address) is not None


def parse_wei(value: str | int | None) -> int:
    """Parse a wei-scaled amount as an arbitrary-precision integer.

    Accepts signed ASCII decimal text and unsigned 0x/0o/0b literals.
    Surrounding whitespace is ignored, so blank text counts as zero.

    Args:
        value: Integer literal or integer; None and "" count as zero

    Returns:
        int: Parsed amount

    Raises:
        ValueError: If the value is not an integer literal

    Example:
        >>> parse_wei("123456789012345678901234567890")
        123456789012345678901234567890
        >>> parse_wei("0x10")
        16
        >>> parse_wei(None)
        0
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        msg = f"Cannot convert {value} to an integer amount"
        raise ValueError(msg)
    if isinstance(value, int):
        return value

    text = value.strip()
    if not text:
        return 0
    if _DECIMAL_INT_RE.fullmatch(text):
        return int(text, 10)
    if _PREFIXED_INT_RE.fullmatch(text):
        return int(text, 0)
    msg = f"Cannot convert {value} to an integer amount"
    raise ValueError(msg)


def wei_to_tokens(wei: str | int | None) -> float:
    """Convert a wei-scaled amount to whole tokens (divide by 1e18).

    Goes through a float, so very large amounts lose precision. Text that is
    not a number yields NaN rather than an error.

    Args:
        wei: Amount in wei as string or integer, or None

    Returns:
        float: Amount in tokens, 0.0 if input was None

    Example:
        >>> wei_to_tokens("1500000000000000000")
        1.5
        >>> wei_to_tokens("pending")
        nan
    """
    if wei is None:
        return 0.0
    if isinstance(wei, int):
        return float(wei) / TOKEN_SCALE

    text = wei.strip()
    if not text:
        return 0.0
    if _DECIMAL_NUMBER_RE.fullmatch(text):
        return float(text) / TOKEN_SCALE
    if _PREFIXED_INT_RE.fullmatch(text):
        return float(int(text, 0)) / TOKEN_SCALE
    return math.nan


def format_tokens(wei: str | int | None) -> str:
    """Format a wei-scaled amount for display with six decimals.

    Args:
        wei: Amount in wei as string or integer, or None

    Returns:
        str: Token amount fixed to six decimal places, or "NaN"/"Infinity"

    Example:
        >>> format_tokens("1000000000000000000")
        '1.000000'
        >>> format_tokens("0")
        '0.000000'
        >>> format_tokens("n/a")
        'NaN'
    """
    tokens = wei_to_tokens(wei)
    if math.isnan(tokens):
        return "NaN"
    if math.isinf(tokens):
        return "Infinity" if tokens > 0 else "-Infinity"
    return f"{tokens:.{TOKEN_DISPLAY_DECIMALS}f}"


__all__ = [
    "format_tokens",
    "is_valid_evm_address",
    "parse_wei",
    "wei_to_tokens",
]
