"""CLI entry point — registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ._common import console

app = typer.Typer(
    name="codeowners-gen",
    help="codeowners-gen - Generate ownership files from contributor statistics",
    add_completion=False,
    rich_markup_mode="rich",
)

generate_app = typer.Typer(help="Generate ownership files", rich_markup_mode="rich")
app.add_typer(generate_app, name="generate")


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"codeowners-gen {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version",
        help="Show version and exit",
        callback=_version_callback, is_eager=True,
    ),
):
    """Generate CODEOWNERS and OWNERS files from contributor statistics."""


# Import subcommands to register them
from .codeowners import codeowners as _codeowners  # noqa: F401, E402
