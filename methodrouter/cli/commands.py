"""CLI commands for methodrouter.

Developer tooling around a Router defined in user code: print its JSON-Schema
catalog, list its methods, or dispatch a single request from the shell.
"""

from __future__ import annotations

import json
from typing import Any

import typer
from pydantic_core import to_jsonable_python
from rich.console import Console
from rich.table import Table

from methodrouter import __version__
from methodrouter.cli.loading import load_router
from methodrouter.config.access import get_settings
from methodrouter.router.dispatch import handle_request_sync
from methodrouter.router.registry import Router
from methodrouter.router.responses import is_error
from methodrouter.utils.exceptions import MethodRouterError
from methodrouter.utils.logging import configure_logging

app = typer.Typer(
    name="methodrouter",
    help="methodrouter - validated method dispatch",
    no_args_is_help=True,
)

console = Console()

TARGET_HELP = "Router reference, e.g. myapp.rpc:router"


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"methodrouter {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """methodrouter command line."""


def _load_or_exit(target: str) -> Router[Any]:
    try:
        return load_router(target)
    except MethodRouterError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(2)


def _dump(data: Any, indent: int | None = 2) -> str:
    return json.dumps(to_jsonable_python(data, fallback=repr), indent=indent, ensure_ascii=False)


@app.command("catalog")
def catalog_command(
    target: str = typer.Argument(..., help=TARGET_HELP),
    indent: int = typer.Option(2, "--indent", help="JSON indentation"),
) -> None:
    """Print the JSON-Schema catalog of every registered method."""
    router = _load_or_exit(target)
    entries = [entry.to_dict() for entry in router.json_schema_routes]
    typer.echo(_dump(entries, indent=indent))


@app.command("methods")
def methods_command(
    target: str = typer.Argument(..., help=TARGET_HELP),
) -> None:
    """List registered methods in dispatch order."""
    router = _load_or_exit(target)
    if not router.routes:
        console.print("[yellow]No methods registered[/yellow]")
        return

    table = Table(title="Methods")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Method", style="cyan")
    table.add_column("Schema")
    for i, route in enumerate(router.routes, start=1):
        table.add_row(str(i), route.method, "yes" if route.schema is not None else "-")
    console.print(table)


@app.command("call")
def call_command(
    target: str = typer.Argument(..., help=TARGET_HELP),
    method: str = typer.Argument(..., help="Method name"),
    params: str = typer.Option(None, "--params", "-p", help="JSON-encoded params"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Print library logs to stderr"),
) -> None:
    """Dispatch one request and print the response."""
    if verbose:
        settings = get_settings()
        configure_logging(settings.log_level, settings.log_file)

    request: dict[str, Any] = {"method": method}
    if params is not None:
        try:
            request["params"] = json.loads(params)
        except json.JSONDecodeError as e:
            console.print(f"[red]--params is not valid JSON:[/red] {e}")
            raise typer.Exit(2)

    router = _load_or_exit(target)
    response = handle_request_sync(router, request)
    typer.echo(_dump(response.to_dict()))
    if is_error(response):
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
