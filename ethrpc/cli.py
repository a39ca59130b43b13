"""Command line entry point for one-off JSON-RPC calls."""

import argparse
import sys

from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from ethrpc.client import EthRpcClient
from ethrpc.errors import RpcError, TransportError
from ethrpc.helpers.logging import LOG_LEVELS, loggers, set_log_level
from ethrpc.methods import METHODS


console = Console()
err_console = Console(stderr=True)


def parse_arg(value: str) -> Any:
    """Convert a command line token into an RPC parameter.

    ``true``/``false`` become booleans and bare decimal digits become
    integers (sent as hex quantities); everything else stays a string.

    Example:
        >>> parse_arg("false")
        False
        >>> parse_arg("1000")
        1000
        >>> parse_arg("latest")
        'latest'
    """
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    if value.isdigit():
        return int(value)
    return value


def methods_table() -> Table:
    """Build a table of the supported methods."""
    table = Table(title="Supported methods")
    table.add_column("Method", style="cyan")
    table.add_column("Facade")
    table.add_column("Params")
    table.add_column("Result", style="green")
    for method in METHODS:
        params = ", ".join(
            spec.name if spec.required else f"{spec.name}={spec.default}"
            for spec in method.params
        )
        table.add_row(method.name, method.facade, params, method.result)
    return table


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ethrpc",
        description="Call an Ethereum JSON-RPC method and print the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Latest block number from the local node
  python -m ethrpc.cli eth_blockNumber

  # Balance at a block, against a remote endpoint
  python -m ethrpc.cli --rpc-url https://eth.llamarpc.com get_balance 0xabc... latest

  # Block with full transaction objects
  python -m ethrpc.cli eth_getBlockByNumber 1000 true
        """,
    )
    parser.add_argument("method", nargs="?", help="Wire or facade method name")
    parser.add_argument("params", nargs="*", help="Positional method parameters")
    parser.add_argument("--rpc-url", default=None, help="JSON-RPC endpoint URL")
    parser.add_argument(
        "--timeout", type=float, default=None, help="Request timeout in seconds"
    )
    parser.add_argument(
        "--typed", action="store_true", help="Parse objects into result models"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=sorted(LOG_LEVELS),
        help="Logging level",
    )
    parser.add_argument(
        "--list", action="store_true", help="List supported methods and exit"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        Exit code: 0 on success, 1 on an RPC error, 2 on a transport or
        usage error
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    for name in list(loggers):
        if name.startswith("ethrpc"):
            set_log_level(name, args.log_level)

    if args.list:
        console.print(methods_table())
        return 0

    if not args.method:
        parser.print_usage(sys.stderr)
        err_console.print("[red]A method name is required[/red]")
        return 2

    params = [parse_arg(value) for value in args.params]

    try:
        with EthRpcClient(args.rpc_url, args.timeout, typed=args.typed) as eth:
            result = eth.request(args.method, *params)
    except RpcError as e:
        err_console.print(f"[red]RPC error {e.code}:[/red] {e.message}")
        return 1
    except TransportError as e:
        err_console.print(f"[red]Transport error:[/red] {e}")
        return 2
    except (TypeError, ValueError) as e:
        err_console.print(f"[red]Invalid arguments:[/red] {e}")
        return 2

    if isinstance(result, BaseModel):
        result = result.model_dump(by_alias=True, exclude_unset=True)
    console.print_json(data=result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
