"""Write CODEOWNERS / OWNERS files."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional, Tuple, Union

from .exceptions import DirectoryCreationError, FileCreationError, OutputWriteError
from .formatters import get_formatter
from .logging_config import get_logger
from .models import FileStats, OutputOptions

logger = get_logger(__name__)

TOOL_NAME = "codeowners-gen"

HEADER_TEMPLATE = (
    "# This file is generated automatically by {tool}. DO NOT EDIT. Stay saucy!\n"
    "#\n"
    "# Generated with command:\n"
    "{command}\n"
    "\n"
)

# Explicitly set command-line flags, as (name, value) pairs in the order given
InvokedFlags = Union[Mapping[str, object], Iterable[Tuple[str, object]]]


def _flag_pairs(invoked_flags: Optional[InvokedFlags]) -> list[tuple[str, object]]:
    if invoked_flags is None:
        return []
    if isinstance(invoked_flags, Mapping):
        return list(invoked_flags.items())
    return list(invoked_flags)


def render_generated_command(scanned_path: Union[str, Path], invoked_flags: Optional[InvokedFlags] = None) -> str:
    """Rebuild the invoking command as a comment line.

    >>> render_generated_command("repo/src", [("output", "foo.txt")])
    '# $ codeowners-gen generate codeowners src/ --output foo.txt'
    """
    command = f"# $ {TOOL_NAME} generate codeowners {Path(scanned_path).name}/"
    flags = [f"--{name} {value}" for name, value in _flag_pairs(invoked_flags)]
    if flags:
        command += " " + " ".join(flags)
    return command


def render_header(scanned_path: Union[str, Path], invoked_flags: Optional[InvokedFlags] = None) -> str:
    """Return the generated-file header, including the trailing blank line."""
    return HEADER_TEMPLATE.format(
        tool=TOOL_NAME,
        command=render_generated_command(scanned_path, invoked_flags),
    )


def generate_output_file(
    file_stats: FileStats,
    output_path: Union[str, Path],
    options: OutputOptions,
    invoked_flags: Optional[InvokedFlags] = None,
) -> None:
    """Write an ownership file for ``file_stats`` to ``output_path``.

    Files are written in lexicographic order, each as a CODEOWNERS line or an
    OWNERS block depending on ``options.owners_style_file``. The output file is
    truncated first; on a failed write whatever was written so far stays on
    disk.

    Raises:
        DirectoryCreationError: If the parent directory cannot be created
        FileCreationError: If the output file cannot be opened
        OutputWriteError: If writing the header or an entry fails
    """
    output_path = Path(output_path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(output_path, str(e)) from e

    formatter = get_formatter(options.owners_style_file, options.max_contributors)
    filenames = sorted(file_stats)

    # surrogateescape writes undecodable git path bytes back out unchanged
    try:
        handle = open(output_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n")
    except OSError as e:
        raise FileCreationError(output_path, str(e)) from e

    # Closing flushes buffered entries, so it can fail too
    try:
        with handle:
            handle.write(render_header(options.path, invoked_flags))

            for filename in filenames:
                aliases = formatter.write_chunk(file_stats[filename], options.config, handle, filename)
                logger.debug("%s -> %s", filename, ", ".join(aliases) or "(no owners)")
    except (OSError, UnicodeError) as e:
        raise OutputWriteError(output_path, str(e)) from e

    logger.info("Wrote %d entries to %s", len(filenames), output_path)
