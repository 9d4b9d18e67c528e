"""Backend interfaces."""

from dirscout.interfaces.filesystem import DirectoryBackend, DirEntry, EntryKind, RawEntry

__all__ = ["DirectoryBackend", "DirEntry", "EntryKind", "RawEntry"]
