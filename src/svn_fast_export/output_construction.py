from __future__ import annotations

from typing import TYPE_CHECKING

from svn_fast_export.config import FILE_MODE

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import BinaryIO


def delete_line(path: str) -> str:
    """Build the change line removing `path` from the target tree."""
    return f"D {path}"


def modify_line(mark: int, path: str) -> str:
    """Build the change line pointing `path` at the blob registered under `mark`."""
    return f"M {FILE_MODE} :{mark} {path}"


class FastImportWriter:
    """Serialize blob and commit directives in the git fast-import format.

    Every directive is written and flushed as soon as it is built so a blob
    always reaches the stream before the commit that references its mark.

    Args:
        stream (BinaryIO): the binary sink receiving the directives, usually
            ``sys.stdout.buffer``
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def blob(self, mark: int, data: bytes) -> None:
        """Register `data` under `mark`.

        Args:
            mark (int): the mark later referenced by a ``M`` change line
            data (bytes): the file content, written verbatim after its length
        """
        self.stream.write(f"blob\nmark :{mark}\ndata {len(data)}\n".encode())
        self.stream.write(data)
        self.stream.write(b"\n")
        self.stream.flush()

    def commit(self, branch: str, change_lines: Sequence[str]) -> None:
        """Write a commit on `branch` made of `change_lines`, ended by a blank line."""
        out = [f"commit refs/heads/{branch}\n"]
        out.extend(f"{line}\n" for line in change_lines)
        out.append("\n")
        self.stream.write("".join(out).encode("utf-8"))
        self.stream.flush()
