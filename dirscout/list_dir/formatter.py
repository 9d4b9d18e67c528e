"""Sorting, pagination and line rendering for list_dir output."""

from __future__ import annotations

from collections.abc import Iterable

from dirscout.interfaces.filesystem import DirEntry
from dirscout.list_dir.errors import OffsetOutOfRangeError


def sort_entries(entries: Iterable[DirEntry]) -> list[DirEntry]:
    """Order by relative path. Code-point order on str equals UTF-8 byte order."""
    return sorted(entries, key=lambda e: e.name)


def format_entry_line(ordinal: int, entry: DirEntry) -> str:
    return f"E{ordinal}: {entry.kind.label} {entry.name}"


def paginate(entries: Iterable[DirEntry], offset: int, limit: int) -> list[str]:
    """Sort *entries* and render the 1-indexed window starting at *offset*.

    Ordinals are absolute ranks in the full sorted listing, so a caller can
    line pages up across calls. An empty listing is a valid empty page.
    """
    ordered = sort_entries(entries)
    if not ordered:
        return []

    start = offset - 1
    if start >= len(ordered):
        raise OffsetOutOfRangeError("offset exceeds directory entry count")

    end = min(start + limit, len(ordered))
    return [format_entry_line(start + i + 1, entry) for i, entry in enumerate(ordered[start:end])]


__all__ = ["sort_entries", "format_entry_line", "paginate"]
