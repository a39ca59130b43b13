"""Exceptions raised by the JSON-RPC dispatcher."""

from typing import Any


class EthRpcError(Exception):
    """Base class for all errors raised while talking to a node."""


class TransportError(EthRpcError):
    """The HTTP exchange failed or did not produce a JSON-RPC response.

    Covers connection failures, timeouts, non-2xx statuses and bodies that
    are not a JSON-RPC response object. The underlying exception, when
    there is one, is chained as ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        url: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.url = url
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.message} (url={self.url}, status={self.status_code})"
        return f"{self.message} (url={self.url})"


class RpcError(EthRpcError):
    """The node answered with a JSON-RPC ``error`` object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        super().__init__(code, message)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self) -> str:
        return f"RPC error {self.code}: {self.message}"


__all__ = [
    "EthRpcError",
    "RpcError",
    "TransportError",
]
