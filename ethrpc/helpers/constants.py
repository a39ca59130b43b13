"""Common configuration constants used across the package."""

# Endpoint
DEFAULT_RPC_URL = "http://localhost:8545"
"""Default geth-compatible JSON-RPC endpoint"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

# JSON-RPC framing
JSONRPC_VERSION = "2.0"
"""JSON-RPC protocol version sent with every request"""

DEFAULT_REQUEST_ID = 1
"""Correlation id used when the caller does not supply one"""

DEFAULT_TRANSACTION_INDEX = "0x0"
"""Transaction index used when the caller does not supply one"""


__all__ = [
    "DEFAULT_REQUEST_ID",
    "DEFAULT_RPC_URL",
    "DEFAULT_TIMEOUT",
    "DEFAULT_TRANSACTION_INDEX",
    "JSONRPC_VERSION",
]
