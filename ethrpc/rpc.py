"""Ethereum JSON-RPC dispatcher."""

from collections.abc import Mapping, Sequence

from typing import Any

import httpx
from pydantic import ValidationError

from ethrpc.errors import RpcError, TransportError
from ethrpc.helpers.config import get_eth_rpc_timeout
from ethrpc.helpers.constants import DEFAULT_REQUEST_ID, DEFAULT_RPC_URL, DEFAULT_TIMEOUT
from ethrpc.helpers.http import post_json
from ethrpc.helpers.http_models import JsonValue
from ethrpc.helpers.logging import get_logger
from ethrpc.rpc_models import JsonRpcRequest, JsonRpcResponse


logger = get_logger(__name__)


def rpc_call(
    method: str,
    params: Sequence[Any] | None = None,
    *,
    rpc_url: str = DEFAULT_RPC_URL,
    request_id: int | str = DEFAULT_REQUEST_ID,
    timeout: float | None = None,
    client: httpx.Client | None = None,
) -> JsonValue:
    """Make a single JSON-RPC call and return its ``result``.

    Args:
        method: RPC method name (e.g., "eth_blockNumber")
        params: Positional method parameters
        rpc_url: Ethereum JSON-RPC endpoint URL
        request_id: Correlation id sent with the request
        timeout: Optional timeout override in seconds; DEFAULT_TIMEOUT when None
        client: Optional pooled HTTP client

    Returns:
        The ``result`` member unchanged; ``None`` is a valid result

    Raises:
        ValueError: If rpc_url or method is empty, or timeout is not positive
        TypeError: If params is a string, bytes or a mapping rather than a
            positional sequence
        TransportError: If the HTTP exchange fails or the body is not a
            JSON-RPC response
        RpcError: If the response contains an error

    Example:
        ```python
        from ethrpc.rpc import rpc_call

        block = rpc_call("eth_getBlockByNumber", ["latest", False])
        ```
    """
    if not rpc_url:
        msg = "RPC URL cannot be empty"
        raise ValueError(msg)
    if not method:
        msg = "RPC method cannot be empty"
        raise ValueError(msg)

    if isinstance(params, (str, bytes, Mapping)):
        msg = f"params must be a positional sequence, got {type(params).__name__}"
        raise TypeError(msg)

    timeout = DEFAULT_TIMEOUT if timeout is None else get_eth_rpc_timeout(timeout)

    request = JsonRpcRequest(method=method, params=list(params or []), id=request_id)
    logger.debug("%s -> %s params=%s", method, rpc_url, request.params)

    body = post_json(
        rpc_url,
        request.model_dump(),
        timeout=timeout,
        client=client,
    )

    if not isinstance(body, dict):
        msg = f"Expected a JSON-RPC response object, got {type(body).__name__}"
        raise TransportError(msg, url=rpc_url)

    try:
        response = JsonRpcResponse.model_validate(body)
    except ValidationError as e:
        msg = f"Malformed JSON-RPC response: {e.error_count()} validation error(s)"
        raise TransportError(msg, url=rpc_url) from e

    if response.error is not None:
        logger.debug(
            "%s <- error %s: %s", method, response.error.code, response.error.message
        )
        raise RpcError(response.error.code, response.error.message, response.error.data)

    logger.debug("%s <- ok", method)
    return response.result


__all__ = ["rpc_call"]
