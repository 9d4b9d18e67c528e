"""Configuration management for dirscout."""

from .loader import ConfigLoader, configure_logging, load_config
from .schema import DirscoutSettings, ListDirConfig

__all__ = ["ConfigLoader", "DirscoutSettings", "ListDirConfig", "configure_logging", "load_config"]
