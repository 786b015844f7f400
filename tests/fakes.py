from __future__ import annotations

from svn_fast_export.config import ChangeKind, PathChange


class InMemoryRepository:
    """Repository whose revisions are described by plain dictionaries.

    `revisions[n]` lists the changes of revision n; `contents[(n, path)]` is the
    file content at that revision.
    """

    def __init__(
        self,
        revisions: dict[int, list[PathChange]],
        contents: dict[tuple[int, str], bytes] | None = None,
    ) -> None:
        self.revisions = revisions
        self.contents = contents or {}
        self.reads: list[tuple[int, str]] = []

    def youngest_revision(self) -> int:
        return max(self.revisions, default=0)

    def paths_changed(self, revision: int) -> list[PathChange]:
        return list(self.revisions.get(revision, []))

    def file_contents(self, revision: int, path: str) -> bytes:
        self.reads.append((revision, path))
        return self.contents[revision, path]


def added(path: str, *, is_directory: bool = False) -> PathChange:
    return PathChange(path=path, kind=ChangeKind.ADDED, is_directory=is_directory)


def modified(path: str) -> PathChange:
    return PathChange(path=path, kind=ChangeKind.MODIFIED)


def deleted(path: str, *, is_directory: bool = False) -> PathChange:
    return PathChange(path=path, kind=ChangeKind.DELETED, is_directory=is_directory)
