"""End-to-end tests for list_dir_slice and handle_list_dir on real trees."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from dirscout.config.schema import ListDirConfig
from dirscout.list_dir.errors import (
    DirectoryReadError,
    OffsetOutOfRangeError,
    RequestValidationError,
)
from dirscout.list_dir.service import handle_list_dir, list_dir_slice

EXPECTED_DEPTH_3 = [
    "E1: [file] entry.txt",
    "E2: [symlink] link",
    "E3: [dir] nested",
    "E4: [file] nested/child.txt",
    "E5: [dir] nested/deeper",
    "E6: [file] nested/deeper/grandchild.txt",
]


class TestListDirSlice:
    @pytest.mark.asyncio
    async def test_reference_tree_depth_three(self, sample_tree: Path):
        lines = await list_dir_slice(sample_tree, offset=1, limit=20, depth=3)
        assert lines == EXPECTED_DEPTH_3

    @pytest.mark.asyncio
    async def test_depth_one(self, sample_tree: Path):
        lines = await list_dir_slice(sample_tree, offset=1, limit=20, depth=1)
        assert lines == ["E1: [file] entry.txt", "E2: [symlink] link", "E3: [dir] nested"]

    @pytest.mark.asyncio
    async def test_paged(self, sample_tree: Path):
        lines = await list_dir_slice(sample_tree, offset=4, limit=2, depth=3)
        assert lines == EXPECTED_DEPTH_3[3:5]

    @pytest.mark.asyncio
    async def test_offset_past_end(self, sample_tree: Path):
        with pytest.raises(OffsetOutOfRangeError):
            await list_dir_slice(sample_tree, offset=10, limit=1, depth=1)

    @pytest.mark.asyncio
    async def test_empty_directory_any_offset(self, tmp_path: Path):
        assert await list_dir_slice(tmp_path, offset=50, limit=3, depth=4) == []

    @pytest.mark.asyncio
    async def test_idempotent(self, sample_tree: Path):
        first = await list_dir_slice(sample_tree, offset=1, limit=100, depth=3)
        second = await list_dir_slice(sample_tree, offset=1, limit=100, depth=3)
        assert first == second

    @pytest.mark.asyncio
    async def test_long_names_truncated(self, tmp_path: Path):
        name = "a" * 200
        (tmp_path / name).mkdir()
        (tmp_path / name / ("b" * 200)).mkdir()
        (tmp_path / name / ("b" * 200) / ("c" * 200)).write_text("")
        lines = await list_dir_slice(tmp_path, offset=3, limit=1, depth=3)
        assert lines == [f"E3: [file] {name}/{'b' * 200}/{'c' * 98}"]


class TestHandleListDir:
    @pytest.mark.asyncio
    async def test_json_payload(self, sample_tree: Path):
        payload = json.dumps({"dir_path": str(sample_tree), "depth": 3, "limit": 20})
        assert await handle_list_dir(payload) == "\n".join(EXPECTED_DEPTH_3)

    @pytest.mark.asyncio
    async def test_default_depth_is_two(self, sample_tree: Path):
        result = await handle_list_dir({"dir_path": str(sample_tree)})
        assert "nested/child.txt" in result
        assert "grandchild" not in result

    @pytest.mark.asyncio
    async def test_config_defaults(self, sample_tree: Path):
        config = ListDirConfig(default_limit=2, default_depth=1)
        result = await handle_list_dir({"dir_path": str(sample_tree)}, config=config)
        assert result == "E1: [file] entry.txt\nE2: [symlink] link"

    @pytest.mark.asyncio
    async def test_config_max_entry_length(self, sample_tree: Path):
        config = ListDirConfig(max_entry_length=4)
        result = await handle_list_dir({"dir_path": str(sample_tree), "depth": 1}, config=config)
        assert result.splitlines() == ["E1: [file] entr", "E2: [symlink] link", "E3: [dir] nest"]

    @pytest.mark.asyncio
    async def test_workspace_restriction(self, sample_tree: Path):
        config = ListDirConfig(workspace_root=str(sample_tree / "nested"))
        with pytest.raises(RequestValidationError, match="Path outside workspace"):
            await handle_list_dir({"dir_path": str(sample_tree)}, config=config)

    @pytest.mark.asyncio
    async def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(DirectoryReadError):
            await handle_list_dir({"dir_path": str(tmp_path / "nope")})

    @pytest.mark.asyncio
    async def test_validation_precedes_traversal(self, tmp_path: Path):
        with pytest.raises(RequestValidationError, match="limit must be greater than zero"):
            await handle_list_dir({"dir_path": str(tmp_path / "nope"), "limit": 0})
