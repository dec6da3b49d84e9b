"""``generate codeowners`` command."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from . import generate_app
from ._common import console, explicit_flags
from ..config import load_attribution_config
from ..exceptions import CodeownersGenError
from ..logging_config import setup_logging
from ..models import OutputOptions
from ..stats import load_file_stats
from ..writer import generate_output_file

DEFAULT_STATS_FILENAME = ".codeowners-stats.json"


@generate_app.command()
def codeowners(
    ctx: typer.Context,
    path: Path = typer.Argument(
        Path("."),
        help="Path to the repository root",
        exists=True, file_okay=False, dir_okay=True,
    ),
    stats: Optional[Path] = typer.Option(
        None, "--stats", "-s",
        help=f"Contributor statistics JSON (default: PATH/{DEFAULT_STATS_FILENAME})",
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Attribution config file (TOML format)",
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o",
        help="Output file, relative to PATH (default: CODEOWNERS, or OWNERS)",
    ),
    owners_style_file: bool = typer.Option(
        False, "--owners-style-file",
        help="Write an OWNERS file with name/email pairs instead of CODEOWNERS",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Enable verbose logging",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q",
        help="Only log errors",
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file",
        help="Also append log records to this file",
    ),
):
    """Generate a [bold]CODEOWNERS[/bold] or [bold]OWNERS[/bold] file for PATH."""
    setup_logging(verbose=verbose, quiet=quiet, log_file=str(log_file) if log_file else None)

    stats_path = stats if stats is not None else path / DEFAULT_STATS_FILENAME
    if output is None:
        output = Path("OWNERS" if owners_style_file else "CODEOWNERS")
    output_path = output if output.is_absolute() else path / output

    try:
        attribution_config = load_attribution_config(config_file=config, repo_path=path)
        file_stats = load_file_stats(stats_path)
        options = OutputOptions(
            path=path.resolve(),
            config=attribution_config,
            owners_style_file=owners_style_file,
        )
        generate_output_file(file_stats, output_path, options, explicit_flags(ctx))
    except CodeownersGenError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Wrote {escape(str(output_path))} ({len(file_stats)} files)[/green]")
