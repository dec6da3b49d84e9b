"""Shared CLI helpers."""

from typing import List, Tuple

import typer
from rich.console import Console

console = Console()


def explicit_flags(ctx: typer.Context) -> List[Tuple[str, str]]:
    """Options the user actually typed, as ``(long-name, value)`` pairs.

    Defaults and environment-provided values are skipped. Options keep their
    declaration order and booleans render as ``true``/``false``.
    """
    flags = []
    for param in ctx.command.params:
        # typer may bundle its own click, so match by name rather than class
        if param.param_type_name != "option" or param.name is None:
            continue
        source = ctx.get_parameter_source(param.name)
        if getattr(source, "name", None) != "COMMANDLINE":
            continue

        long_opts = [opt for opt in param.opts if opt.startswith("--")]
        name = (long_opts[0] if long_opts else param.opts[0]).lstrip("-")

        value = ctx.params.get(param.name)
        if isinstance(value, bool):
            value = str(value).lower()
        flags.append((name, str(value)))
    return flags
