from __future__ import annotations


class ScopeFilter:
    """Select the changed paths that belong to the exported subtree.

    The prefix is matched as a literal string and must end with ``/`` so a
    sibling such as ``/trunk2/`` never matches ``/trunk/``.
    """

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix

    def in_scope(self, path: str, *, is_directory: bool) -> bool:
        if is_directory:
            return False
        return path.startswith(self.prefix)

    def relativize(self, path: str) -> str:
        """Strip the scope prefix from an in-scope path.

        Raises:
            ValueError: if `path` is outside the scope prefix.
        """
        if not path.startswith(self.prefix):
            msg = f"{path!r} is outside {self.prefix!r}"
            raise ValueError(msg)
        return path[len(self.prefix) :]
