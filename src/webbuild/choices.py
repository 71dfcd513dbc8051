"""choices.py – List the accepted wasm-opt levels and renderer modes."""

import typer
from rich.console import Console
from rich.table import Table

from webbuild.cli import JsonOption, json_print
from webbuild.cli_enum import CliEnum
from webbuild.compiler_config import WasmOptLevel
from webbuild.renderer import WebRendererMode

app = typer.Typer(
    help="List accepted values for wasm_opt and renderer.",
    rich_markup_mode="rich",
)

console = Console()

_CHOICES: list[tuple[str, type[CliEnum], CliEnum]] = [
    ("wasm_opt", WasmOptLevel, WasmOptLevel.default()),
    ("renderer", WebRendererMode, WebRendererMode.auto),
]


@app.command()
def main(json_output: bool = JsonOption) -> None:
    """List accepted values for wasm_opt and renderer, with help text."""
    if json_output:
        json_print(
            {
                key: {"default": default.cli_name, "values": enum_cls.allowed_help()}
                for key, enum_cls, default in _CHOICES
            }
        )
        return

    for key, enum_cls, default in _CHOICES:
        table = Table(title=key)
        table.add_column("Value", style="cyan")
        table.add_column("Description")
        for name, help_text in enum_cls.allowed_help().items():
            label = f"{name} (default)" if name == default.cli_name else name
            table.add_row(label, help_text)
        console.print(table)


def main_entry() -> None:
    app()
