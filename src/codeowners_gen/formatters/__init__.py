"""Ownership file formatters."""

from .base import BaseFormatter
from .codeowners_formatter import CodeownersFormatter
from .owners_formatter import OwnersFormatter


def get_formatter(owners_style_file: bool, max_contributors: int = 3) -> BaseFormatter:
    """Get the formatter for the requested file style.

    Args:
        owners_style_file: True for OWNERS blocks, False for CODEOWNERS lines
        max_contributors: Top contributors considered per file

    Returns:
        Formatter instance
    """
    cls = OwnersFormatter if owners_style_file else CodeownersFormatter
    return cls(max_contributors=max_contributors)


__all__ = [
    "BaseFormatter",
    "CodeownersFormatter",
    "OwnersFormatter",
    "get_formatter",
]
