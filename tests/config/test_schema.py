"""Tests for dirscout.config.schema."""

import pytest
from pydantic import ValidationError

from dirscout.config.schema import DirscoutSettings, ListDirConfig


class TestListDirConfig:
    """Tests for ListDirConfig."""

    def test_default_config(self):
        config = ListDirConfig()
        assert config.enabled is True
        assert config.default_limit == 2000
        assert config.default_depth == 2
        assert config.max_entry_length == 500
        assert config.workspace_root is None

    @pytest.mark.parametrize("field", ["default_limit", "default_depth", "max_entry_length"])
    def test_positive_fields(self, field):
        with pytest.raises(ValidationError):
            ListDirConfig(**{field: 0})
        with pytest.raises(ValidationError):
            ListDirConfig(**{field: -1})

    def test_workspace_root_resolved(self, tmp_path):
        config = ListDirConfig(workspace_root=str(tmp_path))
        assert config.workspace_root == str(tmp_path.resolve())

    def test_workspace_root_missing(self, tmp_path):
        with pytest.raises(ValidationError, match="does not exist"):
            ListDirConfig(workspace_root=str(tmp_path / "missing"))

    def test_workspace_root_not_directory(self, tmp_path):
        file_path = tmp_path / "file.txt"
        file_path.write_text("x")
        with pytest.raises(ValidationError, match="not a directory"):
            ListDirConfig(workspace_root=str(file_path))


class TestDirscoutSettings:
    """Tests for DirscoutSettings."""

    def test_defaults(self):
        settings = DirscoutSettings()
        assert isinstance(settings.list_dir, ListDirConfig)
        assert settings.log_level == "WARNING"

    def test_nested_dict(self):
        settings = DirscoutSettings(list_dir={"default_depth": 5})
        assert settings.list_dir.default_depth == 5
        assert settings.list_dir.default_limit == 2000

    def test_log_level_normalized(self):
        assert DirscoutSettings(log_level="debug").log_level == "DEBUG"

    def test_log_level_unknown(self):
        with pytest.raises(ValidationError, match="Unknown log level"):
            DirscoutSettings(log_level="chatty")
