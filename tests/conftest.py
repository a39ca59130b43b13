"""Pytest configuration and shared fixtures."""

import pytest

from ethrpc.client import EthRpcClient


@pytest.fixture
def rpc_url() -> str:
    """Endpoint served by pytest-httpx in tests."""
    return "http://node.test:8545"


@pytest.fixture
def eth(rpc_url: str) -> EthRpcClient:
    """Client pointed at the mocked endpoint."""
    return EthRpcClient(rpc_url)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove endpoint configuration from the environment."""
    monkeypatch.delenv("ETH_RPC_URL", raising=False)
    monkeypatch.delenv("ETH_RPC_TIMEOUT", raising=False)
