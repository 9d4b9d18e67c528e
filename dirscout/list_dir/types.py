"""Request types and limits for list_dir."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from dirscout.list_dir.errors import RequestValidationError

MAX_ENTRY_LENGTH = 500
DEFAULT_OFFSET = 1
DEFAULT_LIMIT = 2000
DEFAULT_DEPTH = 2


class ListDirArgs(BaseModel):
    """Raw tool-call arguments. Omitted limit/depth fall back to config."""

    model_config = ConfigDict(strict=True)

    dir_path: str
    offset: int = DEFAULT_OFFSET
    limit: int | None = None
    depth: int | None = None


@dataclass(frozen=True)
class ListDirRequest:
    """Validated listing request."""

    dir_path: Path
    offset: int = DEFAULT_OFFSET
    limit: int = DEFAULT_LIMIT
    depth: int = DEFAULT_DEPTH


def parse_args(arguments: str | Mapping[str, Any]) -> ListDirArgs:
    """Decode a JSON payload or an already-decoded mapping."""
    try:
        if isinstance(arguments, str):
            return ListDirArgs.model_validate_json(arguments)
        return ListDirArgs.model_validate(dict(arguments))
    except (ValidationError, json.JSONDecodeError, TypeError, ValueError) as e:
        raise RequestValidationError(f"failed to parse function arguments: {e}") from e


def validate_request(
    args: ListDirArgs,
    *,
    default_limit: int = DEFAULT_LIMIT,
    default_depth: int = DEFAULT_DEPTH,
    workspace_root: Path | None = None,
) -> ListDirRequest:
    """Apply defaults and reject out-of-range values.

    Checks run in a fixed order so the first problem is the one reported.
    """
    limit = default_limit if args.limit is None else args.limit
    depth = default_depth if args.depth is None else args.depth

    if args.offset < 1:
        raise RequestValidationError("offset must be a 1-indexed entry number")
    if limit < 1:
        raise RequestValidationError("limit must be greater than zero")
    if depth < 1:
        raise RequestValidationError("depth must be greater than zero")

    if "\x00" in args.dir_path:
        raise RequestValidationError("dir_path must not contain NUL bytes")
    path = Path(args.dir_path)
    if not path.is_absolute():
        raise RequestValidationError("dir_path must be an absolute path")

    if workspace_root is not None:
        try:
            path.resolve().relative_to(workspace_root)
        except ValueError:
            raise RequestValidationError(
                f"Path outside workspace\n   Workspace: {workspace_root}\n   Attempted: {path.resolve()}"
            ) from None

    return ListDirRequest(dir_path=path, offset=args.offset, limit=limit, depth=depth)


__all__ = [
    "MAX_ENTRY_LENGTH",
    "DEFAULT_OFFSET",
    "DEFAULT_LIMIT",
    "DEFAULT_DEPTH",
    "ListDirArgs",
    "ListDirRequest",
    "parse_args",
    "validate_request",
]
