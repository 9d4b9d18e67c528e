"""Local filesystem backend - direct local I/O in worker threads."""

from __future__ import annotations

import asyncio
import os

from dirscout.interfaces.filesystem import DirectoryBackend, EntryKind, RawEntry


def _decode_name(name: str) -> str:
    """Replace undecodable bytes (surrogate-escaped by os) with U+FFFD."""
    return os.fsencode(name).decode("utf-8", errors="replace")


def _scan(path: str) -> list[RawEntry]:
    with os.scandir(path) as it:
        return [RawEntry(name=_decode_name(e.name), path=e.path, handle=e) for e in it]


def _lstat_kind(entry: RawEntry) -> EntryKind:
    if isinstance(entry.handle, os.DirEntry):
        mode = entry.handle.stat(follow_symlinks=False).st_mode
    else:
        mode = os.lstat(entry.path).st_mode
    return EntryKind.from_mode(mode)


class LocalBackend(DirectoryBackend):
    """Backend that operates directly on the local filesystem."""

    async def read_dir(self, path: str) -> list[RawEntry]:
        return await asyncio.to_thread(_scan, path)

    async def inspect(self, entry: RawEntry) -> EntryKind:
        return await asyncio.to_thread(_lstat_kind, entry)
