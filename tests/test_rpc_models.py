"""Tests for RPC models."""

import pytest

from pydantic import ValidationError

from ethrpc.rpc_models import (
    Block,
    JsonRpcRequest,
    JsonRpcResponse,
    Transaction,
    TransactionReceipt,
)


def test_json_rpc_request() -> None:
    """Test JsonRpcRequest model."""
    request = JsonRpcRequest(method="eth_getBalance", params=["0xabc", "latest"], id=1)
    assert request.jsonrpc == "2.0"
    assert request.method == "eth_getBalance"
    assert request.params == ["0xabc", "latest"]
    assert request.id == 1


def test_json_rpc_request_string_id() -> None:
    """Test JsonRpcRequest with string ID."""
    request = JsonRpcRequest(method="eth_blockNumber", id="abc123")
    assert request.id == "abc123"


def test_json_rpc_request_default_params() -> None:
    """Test JsonRpcRequest with default params is an empty array."""
    request = JsonRpcRequest(method="eth_blockNumber", id=1)
    assert request.params == []


def test_json_rpc_request_validation() -> None:
    """Test JsonRpcRequest requires a method."""
    with pytest.raises(ValidationError):
        JsonRpcRequest(id=1)  # type: ignore[call-arg]


def test_json_rpc_request_serialization() -> None:
    """Test JsonRpcRequest serialization."""
    request = JsonRpcRequest(method="eth_getBlockByNumber", params=["0x1", True], id=7)
    assert request.model_dump() == {
        "jsonrpc": "2.0",
        "method": "eth_getBlockByNumber",
        "params": ["0x1", True],
        "id": 7,
    }


class TestJsonRpcResponse:
    """Tests for JsonRpcResponse."""

    def test_result(self) -> None:
        response = JsonRpcResponse.model_validate(
            {"jsonrpc": "2.0", "id": 1, "result": "0x10"}
        )
        assert response.result == "0x10"
        assert response.error is None

    def test_null_result_is_a_result(self) -> None:
        response = JsonRpcResponse.model_validate({"result": None})
        assert response.result is None
        assert response.error is None

    def test_error(self) -> None:
        response = JsonRpcResponse.model_validate(
            {"id": 1, "error": {"code": -32601, "message": "method not found"}}
        )
        assert response.error is not None
        assert response.error.code == -32601
        assert response.error.message == "method not found"
        assert response.error.data is None

    def test_null_error_with_result(self) -> None:
        response = JsonRpcResponse.model_validate({"result": "0x1", "error": None})
        assert response.result == "0x1"
        assert response.error is None

    def test_neither_result_nor_error_raises(self) -> None:
        with pytest.raises(ValidationError, match="neither 'result' nor 'error'"):
            JsonRpcResponse.model_validate({"jsonrpc": "2.0", "id": 1})

    def test_malformed_error_raises(self) -> None:
        with pytest.raises(ValidationError):
            JsonRpcResponse.model_validate({"error": {"message": "no code"}})


class TestResultModels:
    """Tests for block, transaction and receipt models."""

    def test_block_round_trip_keeps_unknown_fields(self) -> None:
        payload = {
            "number": "0x1b4",
            "hash": "0xdc0818cf78f21a8e70579cb46a43643f78291264dda342ae31049421c82d21ae",
            "parentHash": "0xe99e022112df268087ea7eafaf4790497fd21dbeeb6bd7a1721df161a6657a54",
            "miner": "0xbb7b8287f3f0a933474a79eae42cbca977791171",
            "transactions": [],
            "uncles": [],
            "withdrawalsRoot": "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421",
        }

        block = Block.model_validate(payload)

        assert block.number == "0x1b4"
        assert block.parent_hash == payload["parentHash"]
        assert block.model_extra == {"withdrawalsRoot": payload["withdrawalsRoot"]}
        assert block.model_dump(by_alias=True, exclude_unset=True) == payload

    def test_block_with_full_transactions(self) -> None:
        block = Block.model_validate({
            "number": "0x1",
            "transactions": [{"hash": "0xaa", "from": "0x01", "to": None}],
        })

        assert block.transactions is not None
        tx = block.transactions[0]
        assert isinstance(tx, Transaction)
        assert tx.from_ == "0x01"
        assert tx.to is None

    def test_block_with_transaction_hashes(self) -> None:
        block = Block.model_validate({"transactions": ["0xaa", "0xbb"]})
        assert block.transactions == ["0xaa", "0xbb"]

    def test_pending_block_fields_null(self) -> None:
        block = Block.model_validate({"number": None, "hash": None, "nonce": None})
        assert block.number is None
        assert block.hash is None

    def test_transaction_populate_by_name(self) -> None:
        tx = Transaction(from_="0x01", gas_price="0x1")
        assert tx.model_dump(by_alias=True, exclude_unset=True) == {
            "from": "0x01",
            "gasPrice": "0x1",
        }

    def test_receipt_with_logs(self) -> None:
        receipt = TransactionReceipt.model_validate({
            "transactionHash": "0xaa",
            "contractAddress": None,
            "status": "0x1",
            "logs": [
                {
                    "address": "0x02",
                    "topics": ["0xddf2"],
                    "data": "0x",
                    "logIndex": "0x0",
                    "removed": False,
                }
            ],
        })

        assert receipt.transaction_hash == "0xaa"
        assert receipt.contract_address is None
        assert receipt.logs is not None
        assert receipt.logs[0].log_index == "0x0"
        assert receipt.logs[0].topics == ["0xddf2"]
