"""Base interface for ownership file chunk writers."""

from abc import ABC, abstractmethod
from typing import List, TextIO

from ..attribution import get_top_contributors
from ..models import AttributionConfig, AuthorStat, AuthorStats


class BaseFormatter(ABC):
    """Writes the entry for one file into an open ownership file."""

    def __init__(self, max_contributors: int = 3):
        self.max_contributors = max_contributors

    def top_contributors(self, author_stats: AuthorStats, config: AttributionConfig) -> List[AuthorStat]:
        return get_top_contributors(author_stats, self.max_contributors, config)

    @abstractmethod
    def write_chunk(
        self,
        author_stats: AuthorStats,
        config: AttributionConfig,
        stream: TextIO,
        src_filename: str,
    ) -> List[str]:
        """Write one file's entry and return the aliases attributed to it."""
