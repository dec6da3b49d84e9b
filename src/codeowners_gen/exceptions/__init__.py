"""Exception hierarchy for codeowners-gen."""

from .base import CodeownersGenError
from .config import ConfigurationError, InvalidConfigError, StatsFormatError
from .output import (
    DirectoryCreationError,
    FileCreationError,
    OutputError,
    OutputWriteError,
)

__all__ = [
    "CodeownersGenError",
    "ConfigurationError",
    "InvalidConfigError",
    "StatsFormatError",
    "OutputError",
    "DirectoryCreationError",
    "FileCreationError",
    "OutputWriteError",
]
