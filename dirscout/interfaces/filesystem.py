"""Directory backend abstraction.

Separates the I/O mechanism (how a directory is read, how an entry's type is
looked up) from the listing policy (depth bound, sorting, pagination).
"""

from __future__ import annotations

import stat
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Kind of a filesystem object, taken from its own type bits."""

    DIRECTORY = "dir"
    FILE = "file"
    SYMLINK = "symlink"
    OTHER = "other"

    @property
    def label(self) -> str:
        return f"[{self.value}]"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        """Map ``st_mode`` from an lstat-style call onto a kind.

        Symlinks are checked first so a link to a directory is never
        reported (or expanded) as a directory.
        """
        if stat.S_ISLNK(mode):
            return cls.SYMLINK
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True)
class RawEntry:
    """Child of a directory as returned by a backend, before inspection."""

    name: str
    path: str
    handle: object | None = None  # backend-private (e.g. os.DirEntry)


@dataclass(frozen=True)
class DirEntry:
    """Single listed entry: root-relative path plus kind."""

    name: str
    kind: EntryKind


class DirectoryBackend(ABC):
    """Abstract async backend for directory enumeration.

    Implementations:
    - LocalBackend: local filesystem via os.scandir in worker threads
    """

    @abstractmethod
    async def read_dir(self, path: str) -> list[RawEntry]:
        """Read the direct children of a directory.

        Args:
            path: Absolute directory path

        Returns:
            Children in backend order (unsorted)

        Raises:
            OSError: If the directory cannot be opened or enumerated
        """
        ...

    @abstractmethod
    async def inspect(self, entry: RawEntry) -> EntryKind:
        """Determine an entry's kind without following symlinks.

        Raises:
            OSError: If the entry's metadata cannot be read
        """
        ...
