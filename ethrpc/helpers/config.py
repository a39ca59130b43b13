"""Configuration management and environment variable utilities."""

import os

from dotenv import load_dotenv

from ethrpc.helpers.constants import DEFAULT_RPC_URL, DEFAULT_TIMEOUT


# Load environment variables from .env file
load_dotenv()


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_eth_rpc_url(rpc_url: str | None = None) -> str:
    """Get Ethereum RPC URL from parameter, environment, or the local default.

    Args:
        rpc_url: Optional RPC URL to use directly

    Returns:
        Ethereum RPC URL, falling back to ``ETH_RPC_URL`` and then
        ``http://localhost:8545``

    Example:
        ```python
        from ethrpc.helpers.config import get_eth_rpc_url

        # Get from environment, or the local node
        rpc_url = get_eth_rpc_url()

        # Or provide explicitly
        rpc_url = get_eth_rpc_url("https://eth.llamarpc.com")
        ```
    """
    if rpc_url:
        return rpc_url

    return get_optional_env("ETH_RPC_URL") or DEFAULT_RPC_URL


def get_eth_rpc_timeout(timeout: float | None = None) -> float:
    """Get the RPC request timeout from parameter or environment.

    Args:
        timeout: Optional timeout in seconds to use directly

    Returns:
        Timeout in seconds, falling back to ``ETH_RPC_TIMEOUT`` and then
        ``DEFAULT_TIMEOUT``

    Raises:
        ValueError: If the resolved timeout is not a positive number
    """
    if timeout is None:
        env_timeout = get_optional_env("ETH_RPC_TIMEOUT")
        if not env_timeout:
            return DEFAULT_TIMEOUT
        try:
            timeout = float(env_timeout)
        except ValueError:
            msg = f"ETH_RPC_TIMEOUT must be a number, got {env_timeout!r}"
            raise ValueError(msg) from None

    if timeout <= 0:
        msg = f"Timeout must be positive, got {timeout}"
        raise ValueError(msg)

    return timeout


__all__ = [
    "get_eth_rpc_timeout",
    "get_eth_rpc_url",
    "get_optional_env",
]
