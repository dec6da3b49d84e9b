"""Output exceptions: creating and writing the ownership file."""

from pathlib import Path

from .base import CodeownersGenError


class OutputError(CodeownersGenError):
    """Base class for failures producing the output file."""

    action = "writing"

    def __init__(self, output_path: Path, reason: str):
        super().__init__(
            f"Error {self.action} {output_path}",
            details={"path": str(output_path), "reason": reason},
        )
        self.output_path = output_path
        self.reason = reason


class DirectoryCreationError(OutputError):
    """Raised when the output file's parent directory cannot be created."""

    action = "creating directory for"


class FileCreationError(OutputError):
    """Raised when the output file cannot be opened for writing."""

    action = "creating"


class OutputWriteError(OutputError):
    """Raised when writing the header or a file entry fails."""

    action = "writing to"
