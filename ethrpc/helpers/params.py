"""Formatting utilities for positional JSON-RPC parameters."""

from typing import Any


def to_hex_quantity(value: int) -> str:
    """Encode a non-negative integer as a JSON-RPC hex quantity.

    Args:
        value: Integer to encode

    Returns:
        str: ``0x``-prefixed hex string without leading zeros

    Raises:
        TypeError: If value is a bool
        ValueError: If value is negative

    Example:
        >>> to_hex_quantity(4660)
        '0x1234'
        >>> to_hex_quantity(0)
        '0x0'
    """
    if isinstance(value, bool):
        msg = "Expected an integer quantity, got bool"
        raise TypeError(msg)
    if value < 0:
        msg = f"Quantity cannot be negative, got {value}"
        raise ValueError(msg)
    return hex(value)


def format_block_selector(block: str | int, name: str = "block") -> str:
    """Format a block selector for the wire.

    Strings (hex numbers or tags such as ``"latest"``) pass through
    unmodified. A raw integer block number is encoded as a hex quantity.

    Args:
        block: Hex block number, block tag, or integer block number
        name: Parameter name used in error messages

    Returns:
        str: Block selector as sent to the node

    Raises:
        ValueError: If the selector is missing or a negative integer
        TypeError: If the selector is neither a string nor an integer

    Example:
        >>> format_block_selector("latest")
        'latest'
        >>> format_block_selector(1000)
        '0x3e8'
    """
    return format_quantity(block, name)


def format_quantity(value: str | int, name: str = "quantity") -> str:
    """Format a hex quantity (storage position, transaction index).

    Args:
        value: Hex string or integer
        name: Parameter name used in error messages

    Returns:
        str: Hex string as sent to the node
    """
    if isinstance(value, str):
        return require_value(value, name)
    if isinstance(value, int) and not isinstance(value, bool):
        return to_hex_quantity(value)
    if value is None:
        msg = f"Missing required parameter: {name}"
        raise ValueError(msg)
    msg = f"{name} must be a hex string or an integer, got {type(value).__name__}"
    raise TypeError(msg)


def require_value(value: Any, name: str) -> str:
    """Check that a required string parameter is present.

    Args:
        value: Parameter value
        name: Parameter name used in error messages

    Returns:
        str: The value unchanged

    Raises:
        ValueError: If the value is None or empty
        TypeError: If the value is not a string
    """
    if value is None or value == "":
        msg = f"Missing required parameter: {name}"
        raise ValueError(msg)
    if not isinstance(value, str):
        msg = f"{name} must be a string, got {type(value).__name__}"
        raise TypeError(msg)
    return value


def require_flag(value: Any, name: str) -> bool:
    """Check that a flag parameter is a real boolean.

    Truthy values such as ``1`` or ``"true"`` are rejected rather than
    coerced.

    Raises:
        TypeError: If the value is not a bool
    """
    if not isinstance(value, bool):
        msg = f"{name} must be a bool, got {type(value).__name__}"
        raise TypeError(msg)
    return value


__all__ = [
    "format_block_selector",
    "format_quantity",
    "require_flag",
    "require_value",
    "to_hex_quantity",
]
