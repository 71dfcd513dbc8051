"""main.py – Umbrella CLI entry point for webbuild.

Registers each single-command module as a flat ``app.command()`` entry,
carrying over the module's own epilog.
"""

import typer

from webbuild import choices, flags

app = typer.Typer(
    help="Compiler configuration for JavaScript and WebAssembly web builds.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Typical workflow:[/bold]
  webbuild choices             List wasm-opt levels and renderers
  webbuild flags               Show compiler arguments for web.target
  webbuild flags -t wasm       Show compiler arguments for the Wasm backend

[dim]All subcommands read project settings from webbuild.toml.[/dim]""",
)

_SINGLE_COMMANDS = [
    ("flags", flags, "Show compiler arguments and build keys."),
    ("choices", choices, "List accepted wasm_opt and renderer values."),
]

for _name, _mod, _help in _SINGLE_COMMANDS:
    _epilog = getattr(_mod.app.info, "epilog", None)
    if not isinstance(_epilog, str):
        _epilog = None
    app.command(name=_name, help=_help, epilog=_epilog)(_mod.main)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
