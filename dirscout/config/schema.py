"""Configuration schema for dirscout using Pydantic.

Groups:
- list_dir tool settings (defaults, name length bound, workspace restriction)
- logging level for the dirscout logger hierarchy
"""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

# ============================================================================
# Tool Configuration
# ============================================================================


class ListDirConfig(BaseModel):
    """Configuration for the list_dir tool."""

    enabled: bool = True
    default_limit: int = Field(2000, gt=0, description="Entries per page when limit is omitted")
    default_depth: int = Field(2, gt=0, description="Traversal depth when depth is omitted")
    max_entry_length: int = Field(500, gt=0, description="Max UTF-8 bytes per displayed entry name")
    workspace_root: str | None = Field(None, description="Restrict listings to this directory (None = anywhere)")

    @field_validator("workspace_root")
    @classmethod
    def validate_workspace_root(cls, v: str | None) -> str | None:
        """Validate workspace_root exists."""
        if v is None:
            return v
        path = Path(v).expanduser().resolve()
        if not path.exists():
            raise ValueError(f"Workspace root does not exist: {path}")
        if not path.is_dir():
            raise ValueError(f"Workspace root is not a directory: {path}")
        return str(path)


# ============================================================================
# Main Settings
# ============================================================================


class DirscoutSettings(BaseModel):
    """Main dirscout configuration.

    Configuration priority (highest to lowest):
    1. CLI overrides
    2. Project config (.dirscout/list_dir.json)
    3. User config (~/.dirscout/list_dir.json)
    4. System defaults (dirscout/config/defaults/list_dir.json)
    """

    list_dir: ListDirConfig = Field(default_factory=ListDirConfig, description="list_dir tool configuration")
    log_level: str = Field("WARNING", description="Level for the dirscout logger")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level
