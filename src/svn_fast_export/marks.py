from __future__ import annotations

from svn_fast_export.config import MAX_MARK
from svn_fast_export.exceptions import MarkExhaustedError


class MarkAllocator:
    """Hand out blob marks 1, 2, 3, ... for the lifetime of one export run."""

    def __init__(self, limit: int = MAX_MARK) -> None:
        self.limit = limit
        self._last = 0

    @property
    def last_mark(self) -> int:
        """Last mark handed out, 0 before the first allocation."""
        return self._last

    def next_mark(self) -> int:
        if self._last >= self.limit:
            raise MarkExhaustedError(limit=self.limit)
        self._last += 1
        return self._last
