"""Scanning-related exceptions: file access and import line parsing."""

from pathlib import Path

from .base import ImportDiagramError


class AnalysisError(ImportDiagramError):
    """Base class for errors raised while scanning source files."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a source file cannot be read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class ParseError(AnalysisError):
    """Raised when no locator can be isolated from an import line.

    Recoverable: the builder logs it and skips the line.
    """

    def __init__(self, line: str, reason: str):
        super().__init__(
            f"Cannot extract locator from import line: {line.strip()!r}",
            details={"reason": reason},
        )
        self.line = line
        self.reason = reason
