"""list_dir request cycle: decode, validate, traverse, paginate."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dirscout.interfaces.filesystem import DirectoryBackend
from dirscout.list_dir.formatter import paginate
from dirscout.list_dir.traversal import collect_entries
from dirscout.list_dir.types import MAX_ENTRY_LENGTH, parse_args, validate_request

if TYPE_CHECKING:
    from dirscout.config.schema import ListDirConfig

logger = logging.getLogger(__name__)


async def list_dir_slice(
    path: Path | str,
    offset: int,
    limit: int,
    depth: int,
    *,
    backend: DirectoryBackend | None = None,
    max_entry_length: int = MAX_ENTRY_LENGTH,
) -> list[str]:
    """Return the formatted lines for one page of a depth-bounded listing.

    Arguments are assumed validated (see ``validate_request``).
    """
    if backend is None:
        from dirscout.filesystem.local_backend import LocalBackend

        backend = LocalBackend()

    entries = await collect_entries(path, depth, backend, max_entry_length=max_entry_length)
    return paginate(entries, offset, limit)


async def handle_list_dir(
    arguments: str | Mapping[str, Any],
    *,
    config: ListDirConfig | None = None,
    backend: DirectoryBackend | None = None,
) -> str:
    """Run a full list_dir call and return newline-joined output.

    Raises:
        ListDirError: any request, traversal or pagination failure
    """
    if config is None:
        from dirscout.config.schema import ListDirConfig

        config = ListDirConfig()

    args = parse_args(arguments)
    request = validate_request(
        args,
        default_limit=config.default_limit,
        default_depth=config.default_depth,
        workspace_root=Path(config.workspace_root) if config.workspace_root else None,
    )
    logger.debug(
        "list_dir %s offset=%d limit=%d depth=%d",
        request.dir_path,
        request.offset,
        request.limit,
        request.depth,
    )

    lines = await list_dir_slice(
        request.dir_path,
        request.offset,
        request.limit,
        request.depth,
        backend=backend,
        max_entry_length=config.max_entry_length,
    )
    return "\n".join(lines)


__all__ = ["list_dir_slice", "handle_list_dir"]
