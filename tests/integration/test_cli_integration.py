from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fakes import InMemoryRepository, added, deleted, modified

from svn_fast_export import cli
from svn_fast_export.exceptions import SvnlookCommandError

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


def history() -> InMemoryRepository:
    return InMemoryRepository(
        {
            1: [added("/trunk", is_directory=True), added("/trunk/a.txt")],
            2: [added("/other/b.txt")],
            3: [modified("/trunk/a.txt"), added("/trunk/lib/c.py")],
            4: [deleted("/trunk/a.txt")],
        },
        {
            (1, "/trunk/a.txt"): b"hi",
            (2, "/other/b.txt"): b"elsewhere",
            (3, "/trunk/a.txt"): b"hello",
            (3, "/trunk/lib/c.py"): b"print('c')\n",
        },
    )


@pytest.mark.integration
def test_main_writes_fast_import_stream(
    mocker: MockerFixture,
    capsysbinary: pytest.CaptureFixture[bytes],
) -> None:
    mocker.patch.object(cli, "SvnlookRepository", return_value=history())

    exit_code = cli.main(["/srv/svn/project"])

    assert exit_code == 0
    captured = capsysbinary.readouterr()
    assert captured.out == (
        b"blob\nmark :1\ndata 2\nhi\n"
        b"commit refs/heads/master\nM 644 :1 a.txt\n\n"
        b"blob\nmark :2\ndata 5\nhello\n"
        b"blob\nmark :3\ndata 11\nprint('c')\n\n"
        b"commit refs/heads/master\nM 644 :2 a.txt\nM 644 :3 lib/c.py\n\n"
        b"commit refs/heads/master\nD a.txt\n\n"
    )
    assert b"Exporting revision 2... skipping.\n" in captured.err


@pytest.mark.integration
def test_main_output_is_identical_across_runs(
    mocker: MockerFixture,
    capsysbinary: pytest.CaptureFixture[bytes],
) -> None:
    mocker.patch.object(cli, "SvnlookRepository", side_effect=lambda *_, **__: history())

    cli.main(["/srv/svn/project"])
    first = capsysbinary.readouterr().out
    cli.main(["/srv/svn/project"])
    second = capsysbinary.readouterr().out

    assert first
    assert first == second


@pytest.mark.integration
def test_main_aborts_on_revision_access_failure(
    mocker: MockerFixture,
    capsysbinary: pytest.CaptureFixture[bytes],
) -> None:
    repo = history()
    failure = SvnlookCommandError(command="svnlook changed", returncode=1, stdout="", stderr="corrupt")
    mocker.patch.object(repo, "paths_changed", side_effect=[repo.paths_changed(1), failure])
    mocker.patch.object(cli, "SvnlookRepository", return_value=repo)

    exit_code = cli.main(["/srv/svn/project"])

    assert exit_code == 1
    captured = capsysbinary.readouterr()
    assert captured.out.endswith(b"commit refs/heads/master\nM 644 :1 a.txt\n\n")
    assert b"Exporting revision 3" not in captured.err
