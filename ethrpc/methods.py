"""Declarative catalog of the supported ``eth_*`` methods.

Each entry binds a wire method name to its ordered parameter slots and the
kind of result it returns. JSON-RPC parameters are positional, so the slot
order here is the order sent to the node.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from ethrpc.helpers.constants import DEFAULT_TRANSACTION_INDEX
from ethrpc.helpers.http_models import JsonValue
from ethrpc.helpers.params import (
    format_block_selector,
    format_quantity,
    require_flag,
    require_value,
)
from ethrpc.rpc_models import Block, Transaction, TransactionReceipt


ParamKind = Literal["address", "hash", "block", "quantity", "flag"]
ResultKind = Literal[
    "address",
    "address_list",
    "quantity",
    "data",
    "block",
    "transaction",
    "receipt",
]

RESULT_MODELS: dict[str, type[BaseModel]] = {
    "block": Block,
    "transaction": Transaction,
    "receipt": TransactionReceipt,
}


class ParamSpec(BaseModel):
    """One positional parameter slot."""

    name: str
    kind: ParamKind
    default: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def required(self) -> bool:
        return self.default is None

    def format(self, value: Any) -> JsonValue:
        """Validate a caller value and shape it for the wire."""
        if value is None:
            if self.required:
                msg = f"Missing required parameter: {self.name}"
                raise ValueError(msg)
            value = self.default

        if self.kind in {"address", "hash"}:
            return require_value(value, self.name)
        if self.kind == "block":
            return format_block_selector(value, self.name)
        if self.kind == "quantity":
            return format_quantity(value, self.name)
        return require_flag(value, self.name)


class RpcMethod(BaseModel):
    """A supported RPC method and its parameter shape."""

    name: str
    facade: str
    params: tuple[ParamSpec, ...] = ()
    result: ResultKind

    model_config = ConfigDict(frozen=True)

    @property
    def arity(self) -> int:
        return len(self.params)

    def build_params(self, *args: Any) -> list[JsonValue]:
        """Assemble the positional parameter list for this method.

        Omitted trailing arguments take their slot default; a slot is never
        dropped from the list.

        Raises:
            ValueError: On too many arguments or a missing required one
            TypeError: On a value of the wrong type
        """
        if len(args) > self.arity:
            msg = f"{self.name} takes at most {self.arity} parameters, got {len(args)}"
            raise ValueError(msg)

        values = [*args, *([None] * (self.arity - len(args)))]
        return [spec.format(value) for spec, value in zip(self.params, values, strict=True)]

    def parse_result(self, result: JsonValue, *, typed: bool = False) -> Any:
        """Return the result unchanged, or as a result model when ``typed``."""
        model = RESULT_MODELS.get(self.result)
        if not typed or model is None or not isinstance(result, dict):
            return result
        return model.model_validate(result)


ADDRESS = ParamSpec(name="address", kind="address")
BLOCK = ParamSpec(name="block", kind="block")
BLOCK_HASH = ParamSpec(name="block_hash", kind="hash")
TX_HASH = ParamSpec(name="tx_hash", kind="hash")
FULL_TRANSACTIONS = ParamSpec(name="full_transactions", kind="flag")
POSITION = ParamSpec(name="position", kind="quantity")
INDEX = ParamSpec(name="index", kind="quantity", default=DEFAULT_TRANSACTION_INDEX)


METHODS: tuple[RpcMethod, ...] = (
    RpcMethod(name="eth_coinbase", facade="coinbase", result="address"),
    RpcMethod(name="eth_gasPrice", facade="gas_price", result="quantity"),
    RpcMethod(name="eth_accounts", facade="accounts", result="address_list"),
    RpcMethod(name="eth_blockNumber", facade="block_number", result="quantity"),
    RpcMethod(
        name="eth_getBalance",
        facade="get_balance",
        params=(ADDRESS, BLOCK),
        result="quantity",
    ),
    RpcMethod(
        name="eth_getStorageAt",
        facade="get_storage_at",
        params=(ADDRESS, POSITION, BLOCK),
        result="data",
    ),
    RpcMethod(
        name="eth_getTransactionCount",
        facade="get_transaction_count",
        params=(ADDRESS, BLOCK),
        result="quantity",
    ),
    RpcMethod(
        name="eth_getBlockTransactionCountByHash",
        facade="get_block_transaction_count_by_hash",
        params=(BLOCK_HASH,),
        result="quantity",
    ),
    RpcMethod(
        name="eth_getBlockTransactionCountByNumber",
        facade="get_block_transaction_count_by_number",
        params=(BLOCK,),
        result="quantity",
    ),
    RpcMethod(
        name="eth_getCode",
        facade="get_code",
        params=(ADDRESS, BLOCK),
        result="data",
    ),
    RpcMethod(
        name="eth_getBlockByHash",
        facade="get_block_by_hash",
        params=(BLOCK_HASH, FULL_TRANSACTIONS),
        result="block",
    ),
    RpcMethod(
        name="eth_getBlockByNumber",
        facade="get_block_by_number",
        params=(BLOCK, FULL_TRANSACTIONS),
        result="block",
    ),
    RpcMethod(
        name="eth_getTransactionByHash",
        facade="get_transaction_by_hash",
        params=(TX_HASH,),
        result="transaction",
    ),
    RpcMethod(
        name="eth_getTransactionByBlockHashAndIndex",
        facade="get_transaction_by_block_hash_and_index",
        params=(BLOCK_HASH, INDEX),
        result="transaction",
    ),
    RpcMethod(
        name="eth_getTransactionByBlockNumberAndIndex",
        facade="get_transaction_by_block_number_and_index",
        params=(BLOCK, INDEX),
        result="transaction",
    ),
    RpcMethod(
        name="eth_getTransactionReceipt",
        facade="get_transaction_receipt",
        params=(TX_HASH,),
        result="receipt",
    ),
)

# Lookup by wire name ("eth_getBalance") or facade name ("get_balance")
METHODS_BY_NAME: dict[str, RpcMethod] = {
    **{method.name: method for method in METHODS},
    **{method.facade: method for method in METHODS},
}


def get_method(name: str) -> RpcMethod:
    """Look up a catalog entry by wire name or facade name.

    Raises:
        ValueError: If the method is not supported
    """
    try:
        return METHODS_BY_NAME[name]
    except KeyError:
        msg = f"Unsupported RPC method: {name}"
        raise ValueError(msg) from None


__all__ = [
    "METHODS",
    "METHODS_BY_NAME",
    "ParamSpec",
    "RpcMethod",
    "get_method",
]
