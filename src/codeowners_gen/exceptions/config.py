"""Input exceptions: attribution config and statistics documents."""

from pathlib import Path
from typing import Any, Union

from .base import CodeownersGenError


class ConfigurationError(CodeownersGenError):
    """Base class for configuration-related errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Raised when configuration values are invalid."""

    def __init__(self, key: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration for {key}: {value!r}",
            details={"key": key, "reason": reason},
        )
        self.key = key
        self.value = value
        self.reason = reason


class StatsFormatError(CodeownersGenError):
    """Raised when a contributor statistics document cannot be used."""

    def __init__(self, source: Union[str, Path], reason: str):
        super().__init__(
            f"Malformed contributor statistics: {source}",
            details={"source": str(source), "reason": reason},
        )
        self.source = source
        self.reason = reason
