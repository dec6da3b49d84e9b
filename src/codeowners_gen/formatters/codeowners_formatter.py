"""GitHub CODEOWNERS formatter: one ``path @owner ...`` line per file."""

from typing import List, TextIO

from ..filenames import clean_filename
from ..models import AttributionConfig, AuthorStats
from .base import BaseFormatter


class CodeownersFormatter(BaseFormatter):
    """Output GitHub ``CODEOWNERS`` lines.

    Paths are escaped with :func:`clean_filename`. A file without owners is
    still listed, with nothing after the path.
    """

    def write_chunk(
        self,
        author_stats: AuthorStats,
        config: AttributionConfig,
        stream: TextIO,
        src_filename: str,
    ) -> List[str]:
        aliases = [c.alias for c in self.top_contributors(author_stats, config)]
        pattern = clean_filename(src_filename)

        if aliases:
            stream.write(f"{pattern} {' '.join('@' + alias for alias in aliases)}\n")
        else:
            stream.write(f"{pattern}\n")

        return aliases
