"""
svn_fast_export — Replay the history of a Subversion subtree into git.

Overview
--------
Walks every revision of a local Subversion repository, from 1 to the youngest,
and writes a stream that `git fast-import` consumes on stdout. Only files under
``/trunk/`` are exported, with that prefix stripped; directories are ignored
and revisions that touch nothing under ``/trunk/`` are skipped.

Progress is reported on stderr, one line per revision.

Usage
-----
    svn-fast-export /path/to/svn/repo | git fast-import
    uv run python -m svn_fast_export /path/to/svn/repo > history.fi
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from svn_fast_export.exceptions import SvnFastExportError
from svn_fast_export.exporter import RevisionExporter
from svn_fast_export.logging import logger, setup_logging
from svn_fast_export.marks import MarkAllocator
from svn_fast_export.output_construction import FastImportWriter
from svn_fast_export.repository import SvnlookRepository
from svn_fast_export.scope import ScopeFilter
from svn_fast_export.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import BinaryIO, TextIO

    from svn_fast_export.exporter import ExportResult
    from svn_fast_export.repository import RevisionSource


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    p = argparse.ArgumentParser(
        prog="svn-fast-export",
        add_help=False,
        description="Export a Subversion repository as a git fast-import stream.",
    )
    p.add_argument("repo", metavar="REPOS_PATH", type=Path, help="Subversion repository path.")
    args = p.parse_args(argv)
    return Settings(repo=args.repo)


def crawl_revisions(
    settings: Settings,
    source: RevisionSource,
    out: BinaryIO,
    progress: TextIO,
) -> list[ExportResult]:
    """Export every revision of `source`, oldest first.

    Args:
        settings (Settings): scope prefix and target branch of the export
        source (RevisionSource): the repository to read
        out (BinaryIO): sink for the fast-import stream
        progress (TextIO): sink for the per-revision progress lines

    Returns:
        list[ExportResult]: one result per revision, in revision order
    """
    exporter = RevisionExporter(
        source,
        ScopeFilter(settings.scope_prefix),
        MarkAllocator(),
        FastImportWriter(out),
        branch=settings.branch,
        progress=progress,
    )
    youngest = source.youngest_revision()
    logger.debug("crawling revisions", first=1, last=youngest)
    return [exporter.export(rev) for rev in range(1, youngest + 1)]


def main(argv: Sequence[str] | None = None) -> int:
    settings = parse_args(argv)
    setup_logging(settings.log_file or None, settings.log_level)

    try:
        source = SvnlookRepository(settings.repo, svnlook=settings.svnlook)
        results = crawl_revisions(settings, source, sys.stdout.buffer, sys.stderr)
    except SvnFastExportError as e:
        logger.error("export aborted", repo=str(settings.repo), error=repr(e))  # noqa: TRY400
        return 1

    logger.info(
        "export finished",
        revisions=len(results),
        commits=sum(1 for r in results if r.emitted),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
