"""Resolve a file's top contributors to configured aliases."""

from __future__ import annotations

from dataclasses import replace

from .logging_config import get_logger
from .models import AttributionConfig, AuthorStat, AuthorStats, iter_author_stats

logger = get_logger(__name__)


def rank_author_stats(author_stats: AuthorStats) -> list[AuthorStat]:
    """Sort contributors by score, highest first.

    Equal scores are ordered by email, then name, so output does not depend on
    the order statistics were collected in.
    """
    stats = iter_author_stats(author_stats)
    return sorted(stats, key=lambda s: (-s.lines, s.email, s.name))


def get_top_contributors(
    author_stats: AuthorStats, max_count: int, config: AttributionConfig
) -> list[AuthorStat]:
    """Return the aliased top contributors of one file.

    The ``max_count`` highest-scoring contributors are matched by email against
    every configured alias, in configuration order. A contributor with no
    matching alias is dropped; one listed under several aliases appears once
    per alias. Returned entries are copies with ``alias`` set, the inputs are
    left untouched.

    When nothing resolves, the configured fallback aliases are returned instead
    as alias-only entries (empty name and email). An empty fallback yields an
    empty list.
    """
    ranked = rank_author_stats(author_stats)

    top_contributors: list[AuthorStat] = []
    for stat in ranked[:max_count]:
        for alias, emails in config.attributions.items():
            if stat.email in emails:
                top_contributors.append(replace(stat, alias=alias))

    if not top_contributors:
        if ranked:
            logger.debug(
                "No alias for top contributors %s, using fallback",
                ", ".join(s.email for s in ranked[:max_count]),
            )
        return [AuthorStat(alias=alias) for alias in config.fallback]

    return top_contributors
