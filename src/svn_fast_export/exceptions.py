from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SvnFastExportError(Exception):
    """Base exception for errors in the svn_fast_export module."""


@dataclass(frozen=True)
class SvnToolNotFoundError(SvnFastExportError):
    """Raised when the Subversion command line tools cannot be found."""

    tool: str
    message: str = "The Subversion command line tools are not installed."


@dataclass(frozen=True)
class NotASubversionRepositoryError(SvnFastExportError):
    """Raised when the specified directory is not a Subversion repository."""

    folder: Path
    message: str = "The specified directory is not a Subversion repository."


@dataclass(frozen=True)
class SvnlookCommandError(SvnFastExportError):
    """Raised when an svnlook command fails."""

    command: str
    returncode: int
    stdout: str
    stderr: str


@dataclass(frozen=True)
class UnknownChangeStatusError(SvnFastExportError):
    """Raised when `svnlook changed` prints a line that cannot be parsed."""

    line: str


@dataclass(frozen=True)
class MarkExhaustedError(SvnFastExportError):
    """Raised when no further mark can be allocated."""

    limit: int
