"""Pydantic models for JSON-RPC requests, responses and result records."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ethrpc.helpers.constants import JSONRPC_VERSION


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    method: str = Field(..., description="Method name to call")
    params: list[Any] = Field(
        default_factory=list, description="Positional method parameters"
    )
    id: int | str = Field(..., description="Request ID")


class JsonRpcErrorObject(BaseModel):
    """The ``error`` member of a failed JSON-RPC response."""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Human readable error message")
    data: Any = Field(default=None, description="Optional server-defined detail")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response model.

    ``jsonrpc`` and ``id`` are optional on parse since stub servers and some
    proxies leave them out. An explicit ``"result": null`` counts as a
    result; ``"error": null`` counts as no error.
    """

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    id: int | str | None = Field(default=None, description="Echoed request ID")
    result: Any = Field(default=None, description="Result payload on success")
    error: JsonRpcErrorObject | None = Field(
        default=None, description="Error payload on failure"
    )

    @model_validator(mode="after")
    def check_result_or_error(self) -> "JsonRpcResponse":
        """Require at least one of ``result`` or ``error``."""
        if self.error is None and "result" not in self.model_fields_set:
            msg = "response carries neither 'result' nor 'error'"
            raise ValueError(msg)
        return self


class Log(BaseModel):
    """Log entry emitted by a transaction."""

    address: str | None = None
    topics: list[str] | None = None
    data: str | None = None
    block_number: str | None = Field(default=None, alias="blockNumber")
    block_hash: str | None = Field(default=None, alias="blockHash")
    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    transaction_index: str | None = Field(default=None, alias="transactionIndex")
    log_index: str | None = Field(default=None, alias="logIndex")
    removed: bool | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Transaction(BaseModel):
    """Transaction object; ``block_*`` fields are null while pending."""

    hash: str | None = Field(default=None, description="Transaction hash")
    nonce: str | None = None
    block_hash: str | None = Field(default=None, alias="blockHash")
    block_number: str | None = Field(default=None, alias="blockNumber")
    transaction_index: str | None = Field(default=None, alias="transactionIndex")
    from_: str | None = Field(default=None, alias="from")
    to: str | None = Field(
        default=None, description="Receiver, null for contract creation"
    )
    value: str | None = Field(default=None, description="Value in wei as hex")
    gas_price: str | None = Field(default=None, alias="gasPrice")
    gas: str | None = None
    input: str | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class Block(BaseModel):
    """Block object; ``number``, ``hash`` and ``nonce`` are null when pending."""

    number: str | None = Field(default=None, description="Block number as hex")
    hash: str | None = Field(default=None, description="Block hash")
    parent_hash: str | None = Field(default=None, alias="parentHash")
    nonce: str | None = None
    sha3_uncles: str | None = Field(default=None, alias="sha3Uncles")
    logs_bloom: str | None = Field(default=None, alias="logsBloom")
    transactions_root: str | None = Field(default=None, alias="transactionsRoot")
    state_root: str | None = Field(default=None, alias="stateRoot")
    receipts_root: str | None = Field(default=None, alias="receiptsRoot")
    miner: str | None = None
    difficulty: str | None = None
    total_difficulty: str | None = Field(default=None, alias="totalDifficulty")
    extra_data: str | None = Field(default=None, alias="extraData")
    size: str | None = None
    gas_limit: str | None = Field(default=None, alias="gasLimit")
    gas_used: str | None = Field(default=None, alias="gasUsed")
    timestamp: str | None = None
    base_fee_per_gas: str | None = Field(default=None, alias="baseFeePerGas")
    # Hashes, or full objects when requested with full_transactions=True
    transactions: list[str | Transaction] | None = None
    uncles: list[str] | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class TransactionReceipt(BaseModel):
    """Receipt of a mined transaction."""

    transaction_hash: str | None = Field(default=None, alias="transactionHash")
    transaction_index: str | None = Field(default=None, alias="transactionIndex")
    block_hash: str | None = Field(default=None, alias="blockHash")
    block_number: str | None = Field(default=None, alias="blockNumber")
    from_: str | None = Field(default=None, alias="from")
    to: str | None = None
    cumulative_gas_used: str | None = Field(default=None, alias="cumulativeGasUsed")
    gas_used: str | None = Field(default=None, alias="gasUsed")
    effective_gas_price: str | None = Field(default=None, alias="effectiveGasPrice")
    contract_address: str | None = Field(default=None, alias="contractAddress")
    logs: list[Log] | None = None
    logs_bloom: str | None = Field(default=None, alias="logsBloom")
    status: str | None = None
    type: str | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


__all__ = [
    "Block",
    "JsonRpcErrorObject",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "Log",
    "Transaction",
    "TransactionReceipt",
]
