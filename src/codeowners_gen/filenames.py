"""Escape file paths for line-oriented ownership files."""

import re

# Anything that is not a word char, period, quote, dash, whitespace or slash.
# ASCII so \w and \s keep the narrow meaning ownership-file parsers assume.
_SPECIAL_CHAR_RE = re.compile(r"([^\w.'\-\s/\\])", re.ASCII)


def clean_filename(filename: str) -> str:
    """Return ``filename`` safe to use as a CODEOWNERS pattern.

    Rename entries (``old new``) keep only the text before the first space,
    and every special character is prefixed with a backslash.

    >>> clean_filename("docs/[draft].md")
    'docs/\\\\[draft\\\\].md'
    >>> clean_filename("old.txt new.txt")
    'old.txt'
    """
    parsed = filename.split(" ", 1)[0]
    return _SPECIAL_CHAR_RE.sub(r"\\\1", parsed)
