"""Export the history of a Subversion subtree as a git fast-import stream."""

__version__ = "0.1.0"
