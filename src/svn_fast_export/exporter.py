from __future__ import annotations

from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ConfigDict, Field

from svn_fast_export.config import ChangeKind
from svn_fast_export.logging import logger
from svn_fast_export.output_construction import delete_line, modify_line

if TYPE_CHECKING:
    from types import TracebackType
    from typing import TextIO

    from svn_fast_export.marks import MarkAllocator
    from svn_fast_export.output_construction import FastImportWriter
    from svn_fast_export.repository import RevisionSource
    from svn_fast_export.scope import ScopeFilter


class ExportResult(BaseModel):
    """Outcome of exporting one revision.

    Attributes:
        revision: The revision number.
        emitted: False when the revision had nothing in scope and was skipped.
        change_count: Number of change lines in the emitted commit.
        marks: Marks allocated for the blobs of this revision.
    """

    model_config = ConfigDict(frozen=True)

    revision: int = Field(..., ge=1)
    emitted: bool
    change_count: int = Field(default=0, ge=0)
    marks: list[int] = Field(default_factory=list)


class RevisionScope:
    """Scratch state of the revision being exported, dropped on exit."""

    def __init__(self, revision: int) -> None:
        self.revision = revision
        self.change_lines: list[str] = []
        self.marks: list[int] = []

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.change_lines.clear()
        self.marks.clear()


class RevisionExporter:
    """Turn the change-set of one revision into fast-import directives."""

    def __init__(
        self,
        source: RevisionSource,
        scope: ScopeFilter,
        marks: MarkAllocator,
        writer: FastImportWriter,
        *,
        branch: str,
        progress: TextIO,
    ) -> None:
        self.source = source
        self.scope = scope
        self.marks = marks
        self.writer = writer
        self.branch = branch
        self.progress = progress

    def _report(self, text: str) -> None:
        self.progress.write(text)
        self.progress.flush()

    def export(self, revision: int) -> ExportResult:
        """Export `revision` to the writer.

        Blobs are written as soon as their mark is allocated; the commit follows
        once every change of the revision has been seen. A revision without any
        in-scope file change writes nothing to the stream.

        Args:
            revision (int): the revision number to export

        Returns:
            ExportResult: whether a commit was emitted, and what it contained
        """
        self._report(f"Exporting revision {revision}... ")
        with RevisionScope(revision) as rev:
            changes = sorted(self.source.paths_changed(revision), key=lambda c: c.path)
            for change in changes:
                if not self.scope.in_scope(change.path, is_directory=change.is_directory):
                    continue
                rel = self.scope.relativize(change.path)
                if change.kind is ChangeKind.DELETED:
                    rev.change_lines.append(delete_line(rel))
                    continue
                mark = self.marks.next_mark()
                self.writer.blob(mark, self.source.file_contents(revision, change.path))
                rev.marks.append(mark)
                rev.change_lines.append(modify_line(mark, rel))

            if not rev.change_lines:
                self._report("skipping.\n")
                logger.debug("revision skipped", revision=revision, changed=len(changes))
                return ExportResult(revision=revision, emitted=False)

            self.writer.commit(self.branch, rev.change_lines)
            self._report("done!\n")
            logger.debug(
                "revision exported",
                revision=revision,
                changes=len(rev.change_lines),
                marks=rev.marks,
            )
            return ExportResult(
                revision=revision,
                emitted=True,
                change_count=len(rev.change_lines),
                marks=list(rev.marks),
            )
