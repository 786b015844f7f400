from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from svn_fast_export.config import DEFAULT_BRANCH, DEFAULT_SCOPE_PREFIX


class Settings(BaseModel):
    """Configuration settings for the svn_fast_export module."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    repo: Path = Field(..., description="Subversion repository path.")
    scope_prefix: str = Field(
        default=DEFAULT_SCOPE_PREFIX,
        description="Subtree exported, stripped from every emitted path.",
    )
    branch: str = Field(default=DEFAULT_BRANCH, description="Target branch name.")
    svnlook: str = Field(default="svnlook", description="svnlook executable.")
    log_file: str = Field(default="", description="Log file path.")
    log_level: str = Field(default="WARNING", description="Logging threshold.")

    @field_validator("scope_prefix")
    @classmethod
    def _prefix_is_a_directory(cls, value: str) -> str:
        if not value.startswith("/") or not value.endswith("/"):
            msg = f"scope prefix must start and end with '/': {value!r}"
            raise ValueError(msg)
        return value
