"""Tests for positional parameter formatting."""

import pytest

from ethrpc.helpers.params import (
    format_block_selector,
    format_quantity,
    require_flag,
    require_value,
    to_hex_quantity,
)


class TestToHexQuantity:
    """Tests for to_hex_quantity."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(0, "0x0"), (1, "0x1"), (4660, "0x1234"), (1_000_000, "0xf4240")],
    )
    def test_encodes(self, value: int, expected: str) -> None:
        assert to_hex_quantity(value) == expected

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="cannot be negative"):
            to_hex_quantity(-1)

    def test_bool_raises(self) -> None:
        with pytest.raises(TypeError):
            to_hex_quantity(True)


class TestFormatBlockSelector:
    """Tests for format_block_selector."""

    @pytest.mark.parametrize(
        "selector", ["latest", "earliest", "pending", "finalized", "0x3e8", "0X3E8"]
    )
    def test_strings_pass_through(self, selector: str) -> None:
        assert format_block_selector(selector) == selector

    def test_integer_becomes_hex(self) -> None:
        assert format_block_selector(1000) == "0x3e8"

    def test_none_raises(self) -> None:
        with pytest.raises(ValueError, match="Missing required parameter: block"):
            format_block_selector(None)  # type: ignore[arg-type]

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="Missing required parameter"):
            format_block_selector("")

    def test_bool_raises(self) -> None:
        with pytest.raises(TypeError, match="hex string or an integer"):
            format_block_selector(False)  # type: ignore[arg-type]

    def test_float_raises(self) -> None:
        with pytest.raises(TypeError):
            format_block_selector(1.5)  # type: ignore[arg-type]


class TestFormatQuantity:
    """Tests for format_quantity."""

    def test_hex_string_passes_through(self) -> None:
        assert format_quantity("0x0") == "0x0"

    def test_integer_becomes_hex(self) -> None:
        assert format_quantity(2, "index") == "0x2"

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError):
            format_quantity(-5, "index")


class TestRequireValue:
    """Tests for require_value."""

    def test_returns_value(self) -> None:
        assert require_value("0xabc", "address") == "0xabc"

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_raises(self, value: str | None) -> None:
        with pytest.raises(ValueError, match="Missing required parameter: address"):
            require_value(value, "address")

    def test_non_string_raises(self) -> None:
        with pytest.raises(TypeError, match="address must be a string"):
            require_value(123, "address")


class TestRequireFlag:
    """Tests for require_flag."""

    @pytest.mark.parametrize("value", [True, False])
    def test_bools_pass(self, value: bool) -> None:
        assert require_flag(value, "full_transactions") is value

    @pytest.mark.parametrize("value", [1, 0, "true", None])
    def test_non_bools_rejected(self, value: object) -> None:
        with pytest.raises(TypeError, match="full_transactions must be a bool"):
            require_flag(value, "full_transactions")
