from __future__ import annotations

import typer

from relkit import __version__
from relkit.cli.commands.next_cmd import next_version
from relkit.cli.commands.publish import publish


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(publish)
app.command("next")(next_version)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit.",
        callback=_print_version,
        is_eager=True,
    ),
) -> None:
    """Tag and publish GitHub patch releases."""
    del version


def main() -> None:
    app()
