from __future__ import annotations

from enum import StrEnum, auto

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_SCOPE_PREFIX = "/trunk/"
DEFAULT_BRANCH = "master"
FILE_MODE = "644"

# Marks were an `unsigned int` in the tool this stream format was first written for.
MAX_MARK = 2**32 - 1


class ChangeKind(StrEnum):
    """Kind of change recorded for one path in one revision."""

    ADDED = auto()
    MODIFIED = auto()
    DELETED = auto()


# First status column of `svnlook changed`. Property-only changes (`_`) and
# replacements (`R`) carry content that is re-exported like a modification.
SVNLOOK_STATUS: dict[str, ChangeKind] = {
    "A": ChangeKind.ADDED,
    "D": ChangeKind.DELETED,
    "U": ChangeKind.MODIFIED,
    "R": ChangeKind.MODIFIED,
    "_": ChangeKind.MODIFIED,
}


class PathChange(BaseModel):
    """One changed path of a revision.

    Attributes:
        path: Absolute path inside the repository, e.g. ``/trunk/a.txt``.
        kind: Whether the path was added, modified or deleted.
        is_directory: True when the path names a directory.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute repository path")
    kind: ChangeKind = Field(..., description="Change kind")
    is_directory: bool = Field(default=False, description="Directory flag")
