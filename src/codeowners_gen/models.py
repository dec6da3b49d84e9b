"""Data models for contributor attribution and output options."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Union


@dataclass
class AuthorStat:
    """One author's contribution to one file."""

    name: str = ""
    email: str = ""
    lines: int = 0  # contribution score, e.g. lines changed
    alias: str = ""  # set during attribution resolution


# Per-file contributors, either a plain collection or keyed by author email
AuthorStats = Union[Iterable[AuthorStat], Mapping[str, AuthorStat]]

# file path -> contributors for that file
FileStats = Mapping[str, AuthorStats]


def iter_author_stats(author_stats: AuthorStats) -> list[AuthorStat]:
    """Flatten either shape of per-file contributors into a list."""
    if isinstance(author_stats, Mapping):
        return list(author_stats.values())
    return list(author_stats)


@dataclass(frozen=True)
class AttributionConfig:
    """Alias resolution rules.

    Attributes:
        attributions: alias -> email addresses known for that alias, in the
            order aliases are tried during resolution
        fallback: aliases used, in order, when no top contributor resolves
    """

    attributions: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    fallback: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Frozen only blocks reassignment; freeze the contents as well
        frozen = MappingProxyType({alias: tuple(emails) for alias, emails in self.attributions.items()})
        object.__setattr__(self, "attributions", frozen)
        object.__setattr__(self, "fallback", tuple(self.fallback))

    @classmethod
    def from_mapping(
        cls, attributions: Mapping[str, Iterable[str]], fallback: Iterable[str] = ()
    ) -> AttributionConfig:
        return cls(
            attributions={alias: tuple(emails) for alias, emails in attributions.items()},
            fallback=tuple(fallback),
        )

    @property
    def is_empty(self) -> bool:
        return not self.attributions and not self.fallback


@dataclass(frozen=True)
class OutputOptions:
    """How an ownership file is rendered.

    Attributes:
        path: scanned repository root, used for the generated-command header
        config: alias resolution rules
        owners_style_file: write OWNERS blocks instead of CODEOWNERS lines
        max_contributors: top contributors considered per file
    """

    path: Path
    config: AttributionConfig = field(default_factory=AttributionConfig)
    owners_style_file: bool = False
    max_contributors: int = 3

    def __post_init__(self) -> None:
        if self.max_contributors < 1:
            raise ValueError("max_contributors must be at least 1")
