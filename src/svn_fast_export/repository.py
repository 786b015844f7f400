from __future__ import annotations

import shutil
import subprocess  # noqa: S404
from typing import TYPE_CHECKING, Protocol

from svn_fast_export.config import SVNLOOK_STATUS, PathChange
from svn_fast_export.exceptions import (
    NotASubversionRepositoryError,
    SvnlookCommandError,
    SvnToolNotFoundError,
    UnknownChangeStatusError,
)
from svn_fast_export.logging import logger

if TYPE_CHECKING:
    from pathlib import Path


class RevisionSource(Protocol):
    """Read access to the revisions of a repository."""

    def youngest_revision(self) -> int: ...

    def paths_changed(self, revision: int) -> list[PathChange]: ...

    def file_contents(self, revision: int, path: str) -> bytes: ...


def parse_changed_line(line: str) -> PathChange:
    """Parse one line of `svnlook changed` output.

    The line holds two status columns, two spaces and the path relative to the
    repository root, e.g. ``"A   trunk/a.txt"``. Directories end with ``/``.

    Args:
        line (str): a single output line, without its line terminator

    Raises:
        UnknownChangeStatusError: if the status column or the path is missing

    Returns:
        PathChange: the change, with an absolute path and no trailing ``/``
    """
    status, rel = line[:1], line[4:]
    kind = SVNLOOK_STATUS.get(status)
    if kind is None or not rel:
        raise UnknownChangeStatusError(line=line)
    is_directory = rel.endswith("/")
    path = "/" + rel.strip("/")
    return PathChange(path=path, kind=kind, is_directory=is_directory)


class SvnlookRepository:
    """Subversion repository read through the `svnlook` command line tool."""

    def __init__(self, repo: Path, svnlook: str = "svnlook") -> None:
        """Check that `svnlook` is available and that `repo` is a repository.

        Raises:
            SvnToolNotFoundError: if the `svnlook` executable cannot be found.
            NotASubversionRepositoryError: if `repo` cannot be opened.
        """
        executable = shutil.which(svnlook)
        if executable is None:
            raise SvnToolNotFoundError(tool=svnlook)
        self.repo = repo
        self.executable = executable
        try:
            uuid = self._run("uuid", str(self.repo)).decode("utf-8").strip()
        except SvnlookCommandError as e:
            logger.warning("svnlook uuid failed", repo=str(repo), stderr=e.stderr)
            raise NotASubversionRepositoryError(folder=repo) from e
        logger.debug("repository opened", repo=str(repo), uuid=uuid)

    def _run(self, subcommand: str, *args: str) -> bytes:
        cmd = [self.executable, subcommand, *args]
        out = subprocess.run(  # noqa: S603
            cmd,
            capture_output=True,
            check=False,
        )
        if out.returncode != 0:
            raise SvnlookCommandError(
                command=" ".join(cmd),
                returncode=out.returncode,
                stdout=out.stdout.decode("utf-8", errors="replace"),
                stderr=out.stderr.decode("utf-8", errors="replace"),
            )
        return out.stdout

    def youngest_revision(self) -> int:
        return int(self._run("youngest", str(self.repo)))

    def paths_changed(self, revision: int) -> list[PathChange]:
        out = self._run("changed", "-r", str(revision), str(self.repo))
        try:
            text = out.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnknownChangeStatusError(line=out.decode("utf-8", errors="replace")) from e
        changes: list[PathChange] = []
        for line in text.split("\n"):
            if not line.strip():
                continue
            changes.append(parse_changed_line(line))
        return changes

    def file_contents(self, revision: int, path: str) -> bytes:
        return self._run("cat", "-r", str(revision), str(self.repo), path)
