"""OWNERS formatter: path line followed by name/email pairs."""

from typing import List, TextIO

from ..models import AttributionConfig, AuthorStats
from .base import BaseFormatter


class OwnersFormatter(BaseFormatter):
    """Output hierarchical ``OWNERS`` blocks::

        src/a.go
          - Alice
            - alice@example.com

    The path is written as-is. Fallback owners carry no name or email and so
    render as empty entries.
    """

    def write_chunk(
        self,
        author_stats: AuthorStats,
        config: AttributionConfig,
        stream: TextIO,
        src_filename: str,
    ) -> List[str]:
        contributors = self.top_contributors(author_stats, config)[: self.max_contributors]

        stream.write(f"{src_filename}\n")
        for contributor in contributors:
            stream.write(f"  - {contributor.name}\n")
            stream.write(f"    - {contributor.email}\n")

        return [c.alias for c in contributors]
