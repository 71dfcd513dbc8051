"""Shared CLI utilities for webbuild commands.

Provides the common ``--target`` option, config loading, and standardised
error / JSON output so every command reports problems the same way.

Usage in a command::

    import typer
    from webbuild.cli import TargetOption, error_exit, get_config, json_print

    app = typer.Typer()

    @app.command()
    def main(target: str | None = TargetOption) -> None:
        cfg = get_config(target)
        ...
"""

from __future__ import annotations

import json
from typing import Any, NoReturn

import typer
from rich.console import Console

from webbuild.config import WebProjectConfig, load_config

# Re-usable Typer option for --target
TargetOption: str | None = typer.Option(
    None,
    "--target",
    "-t",
    help="Compile target, js or wasm (default: web.target from webbuild.toml).",
)

JsonOption: bool = typer.Option(False, "--json", help="Emit machine-readable JSON.")


def get_config(target: str | None = None) -> WebProjectConfig:
    """Load the project config, optionally overriding the target."""
    return load_config(target=target)


_err_console = Console(stderr=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    else:
        _err_console.print(f"[red bold]error:[/red bold] {msg}")
    raise typer.Exit(code=code)


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))
