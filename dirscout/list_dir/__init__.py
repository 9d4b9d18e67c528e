"""list_dir subpackage - bounded, depth-limited directory listing."""

from dirscout.list_dir.errors import (
    DirectoryReadError,
    EntryInspectError,
    ListDirError,
    OffsetOutOfRangeError,
    RequestValidationError,
)
from dirscout.list_dir.formatter import paginate
from dirscout.list_dir.service import handle_list_dir, list_dir_slice
from dirscout.list_dir.traversal import collect_entries, take_bytes_at_char_boundary
from dirscout.list_dir.types import ListDirArgs, ListDirRequest, parse_args, validate_request

__all__ = [
    "DirectoryReadError",
    "EntryInspectError",
    "ListDirArgs",
    "ListDirError",
    "ListDirRequest",
    "OffsetOutOfRangeError",
    "RequestValidationError",
    "collect_entries",
    "handle_list_dir",
    "list_dir_slice",
    "paginate",
    "parse_args",
    "take_bytes_at_char_boundary",
    "validate_request",
]
