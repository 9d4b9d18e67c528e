"""Pytest configuration for dirscout tests.

Ensures the project root is in sys.path and provides the shared sample tree.
"""

import os
import sys
from pathlib import Path

import pytest

# Add project root to sys.path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """Create the reference tree used across list_dir tests.

    root/
      entry.txt
      link -> entry.txt
      nested/
        child.txt
        deeper/
          grandchild.txt
    """
    (tmp_path / "entry.txt").write_text("content")
    os.symlink(tmp_path / "entry.txt", tmp_path / "link")
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "child.txt").write_text("child")
    deeper = nested / "deeper"
    deeper.mkdir()
    (deeper / "grandchild.txt").write_text("grandchild")
    return tmp_path
