"""Load contributor statistics exported by the history analysis stage.

Expected JSON shape::

    {
        "src/a.go": [
            {"name": "Alice", "email": "alice@example.com", "lines": 120}
        ],
        "src/b.go": {
            "bob@example.com": {"name": "Bob", "lines": 4}
        }
    }

Per-file contributors are either a list or an object keyed by email.
"""

import json
import math
from pathlib import Path
from typing import Any, Dict, List, Union

from .exceptions import StatsFormatError
from .logging_config import get_logger
from .models import AuthorStat

logger = get_logger(__name__)


def load_file_stats(path: Union[str, Path]) -> Dict[str, List[AuthorStat]]:
    """Read a statistics file into ``file path -> [AuthorStat]``.

    Raises:
        StatsFormatError: If the file is missing, not UTF-8 JSON, or has the wrong shape
    """
    p = Path(path)
    try:
        with open(p, encoding="utf-8") as f:
            raw = json.load(f)
    except OSError as e:
        raise StatsFormatError(p, f"cannot read file: {e}") from e
    except json.JSONDecodeError as e:
        raise StatsFormatError(p, f"invalid JSON: {e}") from e
    except UnicodeDecodeError as e:
        raise StatsFormatError(p, f"invalid encoding: {e}") from e

    file_stats = parse_file_stats(raw, source=p)
    logger.info(f"Loaded contributor statistics for {len(file_stats)} files from {p}")
    return file_stats


def parse_file_stats(raw: Any, source: Union[str, Path] = "<memory>") -> Dict[str, List[AuthorStat]]:
    """Validate an already-decoded statistics document."""
    if not isinstance(raw, dict):
        raise StatsFormatError(source, "top level must be an object of file paths")

    result: Dict[str, List[AuthorStat]] = {}
    for filename, entries in raw.items():
        if isinstance(entries, dict):
            # Keyed by email; the key fills in a missing email field
            items = [{"email": email, **_as_object(source, filename, entry)} for email, entry in entries.items()]
        elif isinstance(entries, list):
            items = [_as_object(source, filename, entry) for entry in entries]
        else:
            raise StatsFormatError(source, f"{filename}: contributors must be a list or an object")

        result[filename] = [_parse_author(source, filename, item) for item in items]

    return result


def _as_object(source: Union[str, Path], filename: str, entry: Any) -> dict:
    if not isinstance(entry, dict):
        raise StatsFormatError(source, f"{filename}: contributor entries must be objects")
    return entry


def _parse_author(source: Union[str, Path], filename: str, entry: dict) -> AuthorStat:
    lines = entry.get("lines", 0)
    # bool is an int subclass but never a meaningful score
    if isinstance(lines, bool) or not isinstance(lines, (int, float)):
        raise StatsFormatError(source, f"{filename}: 'lines' must be a number, got {lines!r}")
    if isinstance(lines, float) and not math.isfinite(lines):
        raise StatsFormatError(source, f"{filename}: 'lines' must be finite, got {lines!r}")

    name = entry.get("name", "")
    email = entry.get("email", "")
    if not isinstance(name, str) or not isinstance(email, str):
        raise StatsFormatError(source, f"{filename}: 'name' and 'email' must be strings")

    return AuthorStat(name=name, email=email, lines=lines)
