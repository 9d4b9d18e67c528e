"""Depth-bounded directory traversal.

Walks the tree with an explicit work stack instead of recursion, so stack
usage does not grow with tree depth. Every directory read and every entry
inspection is an await point; nothing outside the local stack and the entry
accumulator is touched, so cancelling at any await is safe.
"""

from __future__ import annotations

import logging
from pathlib import Path

from dirscout.interfaces.filesystem import DirectoryBackend, DirEntry, EntryKind
from dirscout.list_dir.errors import DirectoryReadError, EntryInspectError
from dirscout.list_dir.types import MAX_ENTRY_LENGTH

logger = logging.getLogger(__name__)


def take_bytes_at_char_boundary(text: str, max_bytes: int) -> str:
    """Return the longest prefix of *text* whose UTF-8 form fits *max_bytes*."""
    encoded = text.encode("utf-8", errors="surrogatepass")
    if len(encoded) <= max_bytes:
        return text
    end = max_bytes
    # back off to the lead byte of the character the cut would split
    while end > 0 and encoded[end] & 0xC0 == 0x80:
        end -= 1
    return encoded[:end].decode("utf-8", errors="surrogatepass")


def format_entry_name(name: str, max_length: int = MAX_ENTRY_LENGTH) -> str:
    return take_bytes_at_char_boundary(name, max_length)


def _join(prefix: str, name: str) -> str:
    return f"{prefix}/{name}" if prefix else name


async def collect_entries(
    root: Path | str,
    depth: int,
    backend: DirectoryBackend,
    *,
    max_entry_length: int = MAX_ENTRY_LENGTH,
) -> list[DirEntry]:
    """Collect every entry reachable from *root* within *depth* levels.

    Depth 1 lists the direct children of *root* only. A directory met with
    one level of budget left is recorded but not expanded.

    Raises:
        DirectoryReadError: a directory could not be read
        EntryInspectError: an entry's type could not be determined
    """
    entries: list[DirEntry] = []
    stack: list[tuple[str, str, int]] = [(str(root), "", depth)]

    while stack:
        current, prefix, remaining = stack.pop()

        try:
            children = await backend.read_dir(current)
        except (OSError, ValueError) as e:
            raise DirectoryReadError(f"failed to read directory: {e}") from e
        logger.debug("read %s (%d children, depth budget %d)", current, len(children), remaining)

        for child in children:
            try:
                kind = await backend.inspect(child)
            except (OSError, ValueError) as e:
                raise EntryInspectError(f"failed to inspect entry: {e}") from e

            relative = _join(prefix, child.name)
            entries.append(DirEntry(name=format_entry_name(relative, max_entry_length), kind=kind))

            if kind is EntryKind.DIRECTORY and remaining > 1:
                stack.append((child.path, relative, remaining - 1))

    logger.debug("collected %d entries under %s (depth %d)", len(entries), root, depth)
    return entries


__all__ = ["collect_entries", "format_entry_name", "take_bytes_at_char_boundary"]
