"""
Custom exceptions for actionlog2csv.

Every fatal run error derives from ExtractionError. A run reports exactly
one of them and writes no output when one is raised.
"""

from pathlib import Path
from typing import Mapping, Optional, Union


class ActionLogError(Exception):
    """Base exception for all actionlog failures."""
    pass


class ConfigurationError(ActionLogError):
    """Raised when run parameters are invalid (e.g. worker count < 1)."""
    pass


class ExtractionError(ActionLogError):
    """Base for errors that abort an extraction run."""
    pass


class MalformedLineError(ExtractionError):
    """
    Raised when a candidate line lacks one or more required fields.

    Attributes:
        fields: Captured values in fixed order (src, dst, interface, dir,
            action, rule); missing fields are empty strings.
        path: File the line came from, once attributed.
        line_number: 1-based line number, once attributed.
    """

    def __init__(
        self,
        fields: Mapping[str, str],
        path: Optional[Union[str, Path]] = None,
        line_number: Optional[int] = None,
    ):
        self.fields = dict(fields)
        self.path = Path(path) if path is not None else None
        self.line_number = line_number

        captured = ", ".join(f"{key}={value}" for key, value in self.fields.items())
        message = f"malformed log line: {captured}"
        if self.path is not None:
            location = str(self.path)
            if line_number is not None:
                location = f"{location}:{line_number}"
            message = f"{location}: {message}"
        super().__init__(message)

    @property
    def missing(self) -> list[str]:
        """Names of the fields that were not captured."""
        return [key for key, value in self.fields.items() if not value]


class FileReadError(ExtractionError):
    """Raised when a log file cannot be opened or read."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read log file {self.path}: {reason}")


class WalkError(ExtractionError):
    """Raised when the log directory tree cannot be traversed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot walk {self.path}: {reason}")


class OutputWriteError(ActionLogError):
    """Raised when the CSV output cannot be written."""
    pass
