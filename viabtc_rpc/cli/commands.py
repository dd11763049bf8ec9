"""CLI commands for viabtc_rpc.

`call` runs one engine method and prints its result; `methods` lists the
engine's method catalogue.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from viabtc_rpc import __logo__, __version__
from viabtc_rpc.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from viabtc_rpc.config.loader import load_config
from viabtc_rpc.config.schema import EngineConfig
from viabtc_rpc.rpc.client import RpcClient
from viabtc_rpc.rpc.methods import Method, is_known_method
from viabtc_rpc.utils.exceptions import RpcCallError, sanitize_error_message

app = typer.Typer(
    name="viabtc-rpc",
    help=f"{__logo__} viabtc-rpc - ViaBTC trading engine RPC client",
    no_args_is_help=True,
)

console = Console()


def _parse_params(raw: str) -> Any:
    text = raw.strip()
    if not text:
        return None
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"PARAMS must be JSON: {exc}") from exc


def _make_client(engine: EngineConfig) -> RpcClient:
    return RpcClient.from_config(engine)


def _resolve_engine(host: str | None, port: int | None, timeout: float | None) -> EngineConfig:
    try:
        engine = load_config().engine
    except ValueError as e:
        console.print(f"[red]Config error[/red] {escape(str(e))}")
        raise typer.Exit(1)
    updates: dict[str, Any] = {}
    if host:
        updates["host"] = host
    if port is not None:
        updates["port"] = port
    if timeout is not None:
        updates["timeout"] = timeout
    try:
        return EngineConfig.model_validate({**engine.model_dump(), **updates})
    except ValidationError as exc:
        raise typer.BadParameter(f"invalid engine override: {exc}") from exc


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{__logo__} viabtc-rpc v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", callback=version_callback, is_eager=True
    ),
) -> None:
    """viabtc-rpc - ViaBTC trading engine RPC client."""
    pass


@app.command()
def call(
    method: str = typer.Argument(..., help="Engine method, e.g. market.last"),
    params: str = typer.Argument("", help="Parameters as JSON: array, object or scalar"),
    host: str | None = typer.Option(None, "--host", help="Engine host (default from config)"),
    port: int | None = typer.Option(None, "--port", help="Engine port (default from config)"),
    timeout: float | None = typer.Option(None, "--timeout", help="Request timeout in seconds"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log calls to stderr"),
) -> None:
    """Call one engine method and print its result as JSON."""
    configure_console_logging(verbose)
    ensure_rotating_log_file("cli")
    parsed = _parse_params(params)
    if not is_known_method(method):
        console.print(f"[yellow]Warning: {method!r} is not in the engine method catalogue[/yellow]")

    engine = _resolve_engine(host, port, timeout)
    logger.info(f"CLI call {method} -> {engine.base_url}")
    with _make_client(engine) as client:
        try:
            result = client.call(method, parsed)
        except RpcCallError as e:
            console.print(f"[red]Error {escape(f'[{e.code}]')}[/red] {escape(sanitize_error_message(e.message))}")
            raise typer.Exit(1)
    console.print_json(data=result)


@app.command()
def methods() -> None:
    """List the engine method catalogue."""
    table = Table(title="Engine methods")
    table.add_column("Group", style="cyan")
    table.add_column("Method")
    for m in Method:
        table.add_row(m.value.split(".", 1)[0], m.value)
    console.print(table)


if __name__ == "__main__":
    app()
