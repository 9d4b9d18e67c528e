"""Layered configuration loader.

Layers, lowest to highest precedence:
packaged defaults → ~/.dirscout/list_dir.json → <workspace>/.dirscout/list_dir.json → CLI overrides
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from dirscout.config.schema import DirscoutSettings

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".dirscout"
CONFIG_FILE_NAME = "list_dir.json"


def _merge_into(base: dict[str, Any], layer: dict[str, Any]) -> dict[str, Any]:
    """Overlay *layer* onto a copy of *base*; nested objects merge, None is skipped."""
    merged = dict(base)
    for key, value in layer.items():
        if value is None and key in merged:
            continue
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _merge_into(current, value)
        else:
            merged[key] = value
    return merged


def _expand(value: Any) -> Any:
    """Expand ${VAR} and ~ inside every string of a decoded JSON value."""
    if isinstance(value, str):
        return os.path.expandvars(os.path.expanduser(value))
    if isinstance(value, dict):
        return {key: _expand(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand(item) for item in value]
    return value


class ConfigLoader:
    """Reads and merges every list_dir.json layer into DirscoutSettings."""

    def __init__(self, workspace_root: str | Path | None = None):
        self.workspace_root = Path(workspace_root).resolve() if workspace_root else None
        self._system_defaults_dir = Path(__file__).parent / "defaults"

    def layer_paths(self) -> list[Path]:
        """Config files in precedence order, lowest first."""
        paths = [
            self._system_defaults_dir / CONFIG_FILE_NAME,
            Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME,
        ]
        if self.workspace_root:
            paths.append(self.workspace_root / CONFIG_DIR_NAME / CONFIG_FILE_NAME)
        return paths

    def load(self, cli_overrides: dict[str, Any] | None = None) -> DirscoutSettings:
        merged: dict[str, Any] = {}
        for path in self.layer_paths():
            merged = _merge_into(merged, self._read_layer(path))
        if cli_overrides:
            merged = _merge_into(merged, cli_overrides)
        return DirscoutSettings(**_expand(merged))

    @staticmethod
    def _read_layer(path: Path) -> dict[str, Any]:
        """Decode one layer; a missing, unreadable or non-object file counts as empty."""
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable config %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not an object", path)
            return {}
        logger.debug("Loaded config layer %s", path)
        return data


def load_config(
    workspace_root: str | Path | None = None,
    cli_overrides: dict[str, Any] | None = None,
) -> DirscoutSettings:
    """Convenience wrapper around ConfigLoader."""
    return ConfigLoader(workspace_root=workspace_root).load(cli_overrides=cli_overrides)


def configure_logging(settings: DirscoutSettings) -> logging.Logger:
    """Apply the configured level to the dirscout logger hierarchy."""
    root = logging.getLogger("dirscout")
    root.setLevel(settings.log_level)
    return root
