"""dirscout - bounded, depth-limited directory listing for agents."""

from dirscout.list_dir import handle_list_dir, list_dir_slice
from dirscout.middleware import ListDirMiddleware

__all__ = ["ListDirMiddleware", "handle_list_dir", "list_dir_slice"]

__version__ = "0.1.0"
