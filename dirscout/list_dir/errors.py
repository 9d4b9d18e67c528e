"""Errors raised by the list_dir core.

All of them are recoverable: the middleware reports the message back to the
model instead of letting it reach the agent loop.
"""

from __future__ import annotations


class ListDirError(Exception):
    """Base class for list_dir failures."""


class RequestValidationError(ListDirError):
    """Arguments could not be decoded or failed validation."""


class DirectoryReadError(ListDirError):
    """A directory on the traversal path could not be opened or enumerated."""


class EntryInspectError(ListDirError):
    """Metadata for a discovered entry could not be retrieved."""


class OffsetOutOfRangeError(ListDirError):
    """Offset points past the end of a non-empty listing."""


__all__ = [
    "ListDirError",
    "RequestValidationError",
    "DirectoryReadError",
    "EntryInspectError",
    "OffsetOutOfRangeError",
]
