"""flags.py – Show the compiler arguments derived from webbuild.toml.

Prints the argument list for the selected target along with its build key,
artifact cache key, and analytics values.
"""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from webbuild.cli import JsonOption, TargetOption, error_exit, get_config, json_print
from webbuild.compile_cache import artifact_cache_key
from webbuild.compiler_config import InvalidConfigurationError, JsCompilerConfig, command_options

app = typer.Typer(
    help="Show compiler arguments and build keys for the configured target.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

webbuild flags                      Arguments for web.target

webbuild flags --target wasm        Arguments for the Wasm compiler

webbuild flags --shared             JS arguments shared with the front-end pass

webbuild flags --json               Machine-readable output""",
)

console = Console()


@app.command()
def main(
    target: str | None = TargetOption,
    shared: bool = typer.Option(
        False, "--shared", help="Only the JS options shared with the front-end-only pass."
    ),
    toolchain: str = typer.Option(
        "", "--toolchain", help="Toolchain identifier folded into the artifact cache key."
    ),
    json_output: bool = JsonOption,
) -> None:
    """Show the compiler arguments derived from the project config."""
    try:
        cfg = get_config(target=target)
    except (FileNotFoundError, InvalidConfigurationError) as exc:
        error_exit(str(exc), json_mode=json_output)

    config = cfg.compiler_config
    if shared:
        if not isinstance(config, JsCompilerConfig):
            error_exit("--shared only applies to the js target", json_mode=json_output)
        args = config.to_shared_command_options()
    else:
        args = command_options(config)

    payload = {
        "target": config.compile_target.value,
        "renderer": config.renderer.cli_name,
        "args": args,
        "build_key": config.build_key,
        "cache_key": artifact_cache_key(config, toolchain),
        "analytics": config.build_event_analytics_values(),
    }
    if json_output:
        json_print(payload)
        return

    table = Table(title=f"{payload['target']} compiler", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Renderer", config.renderer.cli_name)
    table.add_row("Arguments", " ".join(args) or "[dim](none)[/dim]")
    table.add_row("Build key", config.build_key)
    table.add_row("Cache key", payload["cache_key"])
    for name, value in config.build_event_analytics_values().items():
        table.add_row(name, str(value))
    console.print(table)


def main_entry() -> None:
    app()


if __name__ == "__main__":
    main_entry()
