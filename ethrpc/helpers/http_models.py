"""Type definitions for JSON-RPC payloads."""

from typing import Any, TypeAlias


# JSON value type - using Any for the recursive case
# since pyright has trouble with recursive type aliases
JsonValue: TypeAlias = str | int | float | bool | dict[str, Any] | list[Any] | None

# Block selector as accepted by facades: hex string, tag, or raw block number
BlockSelector: TypeAlias = str | int

# Hex quantity as accepted by facades: hex string or raw integer
Quantity: TypeAlias = str | int

__all__ = ["BlockSelector", "JsonValue", "Quantity"]
