"""Filesystem backends."""

from dirscout.filesystem.local_backend import LocalBackend

__all__ = ["LocalBackend"]
