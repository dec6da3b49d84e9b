"""Attribution configuration loading for codeowners-gen.

The attribution config maps aliases (e.g. GitHub handles) to the email
addresses they commit with, plus a fallback owner list:

    attribution-fallback = ["team-default"]

    [attribution]
    alice = ["alice@example.com", "alice@users.noreply.github.com"]

Configuration is discovered in priority order, the first match wins:
    1. Explicit config file (must exist)
    2. Repository config (<repo>/.codeowners-gen.toml)
    3. Global config (~/.codeowners-gen.toml)

``CODEOWNERS_GEN_FALLBACK`` (comma-separated aliases) then replaces the
fallback list.

Example, with the file above in the current directory:
    >>> config = load_attribution_config(repo_path=Path("."))
    >>> config.fallback
    ('team-default',)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from .exceptions import ConfigurationError, InvalidConfigError
from .logging_config import get_logger
from .models import AttributionConfig

logger = get_logger(__name__)

CONFIG_FILENAME = ".codeowners-gen.toml"
FALLBACK_ENV_VAR = "CODEOWNERS_GEN_FALLBACK"


def find_config_file(
    config_file: Optional[Path] = None, repo_path: Optional[Path] = None
) -> Optional[Path]:
    """Return the config file to use, or None if there is none.

    Raises:
        ConfigurationError: If an explicit ``config_file`` does not exist
    """
    if config_file is not None:
        config_file = Path(config_file)
        if not config_file.is_file():
            raise ConfigurationError(f"Config file not found: {config_file}")
        return config_file

    candidates = []
    if repo_path is not None:
        candidates.append(Path(repo_path) / CONFIG_FILENAME)
    candidates.append(Path.home() / CONFIG_FILENAME)

    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_attribution_config(
    config_file: Optional[Path] = None, repo_path: Optional[Path] = None
) -> AttributionConfig:
    """Load attribution configuration with auto-discovery.

    Args:
        config_file: Optional explicit config file path
        repo_path: Repository root searched for a project config

    Returns:
        Validated AttributionConfig instance (empty if no file is found)

    Raises:
        ConfigurationError: If a config file cannot be read or parsed
        InvalidConfigError: If a config value has the wrong shape
    """
    path = find_config_file(config_file, repo_path)

    if path is None:
        logger.warning("No %s found, files will only get fallback owners", CONFIG_FILENAME)
        data: dict[str, Any] = {}
    else:
        try:
            data = _load_toml_file(path)
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(f"Invalid config file '{path}': {e}") from e
        logger.debug("Loaded attribution config from %s", path)

    config = parse_attribution_config(data)

    env_fallback = os.environ.get(FALLBACK_ENV_VAR)
    if env_fallback is not None:
        fallback = tuple(a.strip() for a in env_fallback.split(",") if a.strip())
        config = AttributionConfig(attributions=config.attributions, fallback=fallback)

    if not config.attributions:
        logger.warning("No attributions configured, files will only get fallback owners")

    return config


def parse_attribution_config(data: dict[str, Any]) -> AttributionConfig:
    """Validate a decoded config document.

    Raises:
        InvalidConfigError: If ``attribution`` or ``attribution-fallback`` is malformed
    """
    attribution = data.get("attribution", {})
    if not isinstance(attribution, dict):
        raise InvalidConfigError("attribution", attribution, "must be a table of alias = [emails]")

    attributions: dict[str, tuple[str, ...]] = {}
    for alias, emails in attribution.items():
        if not _is_str_list(emails):
            raise InvalidConfigError(f"attribution.{alias}", emails, "must be a list of email strings")
        attributions[alias] = tuple(emails)

    fallback = data.get("attribution-fallback", [])
    if not _is_str_list(fallback):
        raise InvalidConfigError("attribution-fallback", fallback, "must be a list of alias strings")

    return AttributionConfig(attributions=attributions, fallback=tuple(fallback))


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
