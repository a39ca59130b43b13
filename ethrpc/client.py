"""Ethereum JSON-RPC client with one method per supported ``eth_*`` call."""

from types import TracebackType

from typing import Any, Self

import httpx

from ethrpc.helpers.config import get_eth_rpc_timeout, get_eth_rpc_url
from ethrpc.helpers.constants import DEFAULT_REQUEST_ID, DEFAULT_TRANSACTION_INDEX
from ethrpc.helpers.http import create_http_client
from ethrpc.helpers.http_models import BlockSelector, Quantity
from ethrpc.helpers.logging import get_logger
from ethrpc.methods import get_method
from ethrpc.rpc import rpc_call
from ethrpc.rpc_models import Block, Transaction, TransactionReceipt


logger = get_logger(__name__)


class EthRpcClient:
    """Ethereum JSON-RPC client.

    Every facade validates and orders its parameters through the method
    catalog in ``ethrpc.methods`` and returns the node's ``result``
    unchanged. With ``typed=True`` block, transaction and receipt objects
    are returned as pydantic models instead of dicts; ``None`` stays ``None``.

    Used as a context manager, the client keeps a pooled ``httpx.Client``
    for its lifetime. Otherwise each call makes a one-shot request.

    Example:
        ```python
        with EthRpcClient("http://localhost:8545") as eth:
            head = eth.block_number()
            block = eth.get_block_by_number(head, False)
        ```
    """

    def __init__(
        self,
        rpc_url: str | None = None,
        timeout: float | None = None,
        *,
        typed: bool = False,
        request_id: int | str = DEFAULT_REQUEST_ID,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize RPC client.

        Args:
            rpc_url: Ethereum JSON-RPC endpoint URL; falls back to
                ``ETH_RPC_URL`` and then ``http://localhost:8545``
            timeout: Default timeout for requests in seconds; falls back to
                ``ETH_RPC_TIMEOUT`` and then 30 seconds
            typed: Return block, transaction and receipt results as models
            request_id: Correlation id sent with every request
            http_client: Optional caller-owned pooled client; never closed here

        Raises:
            ValueError: If rpc_url is given but empty, or timeout is not positive
        """
        if rpc_url is not None and not rpc_url:
            msg = "RPC URL cannot be empty"
            raise ValueError(msg)

        self.rpc_url = get_eth_rpc_url(rpc_url)
        self.timeout = get_eth_rpc_timeout(timeout)
        self.typed = typed
        self.request_id = request_id
        self._http_client = http_client
        self._owns_http_client = False

    def __enter__(self) -> Self:
        if self._http_client is None:
            self._http_client = create_http_client(timeout=self.timeout)
            self._owns_http_client = True
            logger.debug("Opened pooled HTTP client for %s", self.rpc_url)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Close the pooled HTTP client if this instance created it."""
        if self._owns_http_client and self._http_client is not None:
            self._http_client.close()
            self._http_client = None
            self._owns_http_client = False

    def request(self, method: str, *args: Any, timeout: float | None = None) -> Any:
        """Invoke a catalog method by wire or facade name.

        Args:
            method: Method name, e.g. "eth_getBalance" or "get_balance"
            *args: Positional parameters in catalog order
            timeout: Optional timeout override for this call

        Returns:
            The RPC result

        Raises:
            ValueError: If the method is unknown, a required parameter is missing,
                or the timeout is not positive
            TypeError: If a parameter has the wrong type
            TransportError: If the HTTP exchange fails
            RpcError: If the node returns an error
        """
        rpc_method = get_method(method)
        params = rpc_method.build_params(*args)
        result = rpc_call(
            rpc_method.name,
            params,
            rpc_url=self.rpc_url,
            request_id=self.request_id,
            timeout=timeout if timeout is not None else self.timeout,
            client=self._http_client,
        )
        return rpc_method.parse_result(result, typed=self.typed)

    def coinbase(self, *, timeout: float | None = None) -> str:
        """Get the client coinbase address."""
        return self.request("eth_coinbase", timeout=timeout)

    def gas_price(self, *, timeout: float | None = None) -> str:
        """Get the current price per gas in wei, as hex."""
        return self.request("eth_gasPrice", timeout=timeout)

    def accounts(self, *, timeout: float | None = None) -> list[str]:
        """Get the addresses owned by the client."""
        return self.request("eth_accounts", timeout=timeout)

    def block_number(self, *, timeout: float | None = None) -> str:
        """Get the number of the most recent block, as hex."""
        return self.request("eth_blockNumber", timeout=timeout)

    def get_balance(
        self, address: str, block: BlockSelector, *, timeout: float | None = None
    ) -> str:
        """Get the balance in wei of an address at a block, as hex."""
        return self.request("eth_getBalance", address, block, timeout=timeout)

    def get_storage_at(
        self,
        address: str,
        position: Quantity,
        block: BlockSelector,
        *,
        timeout: float | None = None,
    ) -> str:
        """Get the value at a storage position of an address."""
        return self.request(
            "eth_getStorageAt", address, position, block, timeout=timeout
        )

    def get_transaction_count(
        self, address: str, block: BlockSelector, *, timeout: float | None = None
    ) -> str:
        """Get the number of transactions sent from an address, as hex."""
        return self.request("eth_getTransactionCount", address, block, timeout=timeout)

    def get_block_transaction_count_by_hash(
        self, block_hash: str, *, timeout: float | None = None
    ) -> str | None:
        """Get the number of transactions in a block by hash, as hex."""
        return self.request(
            "eth_getBlockTransactionCountByHash", block_hash, timeout=timeout
        )

    def get_block_transaction_count_by_number(
        self, block: BlockSelector, *, timeout: float | None = None
    ) -> str | None:
        """Get the number of transactions in a block by number or tag, as hex."""
        return self.request(
            "eth_getBlockTransactionCountByNumber", block, timeout=timeout
        )

    def get_code(
        self, address: str, block: BlockSelector, *, timeout: float | None = None
    ) -> str:
        """Get the contract code at an address."""
        return self.request("eth_getCode", address, block, timeout=timeout)

    def get_block_by_hash(
        self,
        block_hash: str,
        full_transactions: bool,
        *,
        timeout: float | None = None,
    ) -> dict[str, Any] | Block | None:
        """Get a block by hash.

        Args:
            block_hash: 32 byte block hash
            full_transactions: True for full transaction objects, False for
                transaction hashes only; must be a bool
            timeout: Optional timeout override

        Returns:
            Block object, or None when no block matches
        """
        return self.request(
            "eth_getBlockByHash", block_hash, full_transactions, timeout=timeout
        )

    def get_block_by_number(
        self,
        block: BlockSelector,
        full_transactions: bool,
        *,
        timeout: float | None = None,
    ) -> dict[str, Any] | Block | None:
        """Get a block by number or tag.

        Args:
            block: Hex block number, tag ("latest", "earliest", "pending"),
                or integer block number
            full_transactions: True for full transaction objects, False for
                transaction hashes only; must be a bool
            timeout: Optional timeout override

        Returns:
            Block object, or None when no block matches
        """
        return self.request(
            "eth_getBlockByNumber", block, full_transactions, timeout=timeout
        )

    def get_transaction_by_hash(
        self, tx_hash: str, *, timeout: float | None = None
    ) -> dict[str, Any] | Transaction | None:
        """Get a transaction by hash, or None when not found."""
        return self.request("eth_getTransactionByHash", tx_hash, timeout=timeout)

    def get_transaction_by_block_hash_and_index(
        self,
        block_hash: str,
        index: Quantity = DEFAULT_TRANSACTION_INDEX,
        *,
        timeout: float | None = None,
    ) -> dict[str, Any] | Transaction | None:
        """Get a transaction by block hash and index position."""
        return self.request(
            "eth_getTransactionByBlockHashAndIndex", block_hash, index, timeout=timeout
        )

    def get_transaction_by_block_number_and_index(
        self,
        block: BlockSelector,
        index: Quantity = DEFAULT_TRANSACTION_INDEX,
        *,
        timeout: float | None = None,
    ) -> dict[str, Any] | Transaction | None:
        """Get a transaction by block number and index position."""
        return self.request(
            "eth_getTransactionByBlockNumberAndIndex", block, index, timeout=timeout
        )

    def get_transaction_receipt(
        self, tx_hash: str, *, timeout: float | None = None
    ) -> dict[str, Any] | TransactionReceipt | None:
        """Get the receipt of a transaction, or None while it is pending."""
        return self.request("eth_getTransactionReceipt", tx_hash, timeout=timeout)


__all__ = ["EthRpcClient"]
