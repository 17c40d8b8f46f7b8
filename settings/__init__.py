"""Configuration for kt-cli."""

from .config import (
    Config,
    GeneralConfig,
    GitConfig,
    ProtocolsConfig,
    ensure_config_dir,
    find_config_file,
    get_config,
    load_config,
    reload_config,
)

__all__ = [
    "Config",
    "GeneralConfig",
    "GitConfig",
    "ProtocolsConfig",
    "ensure_config_dir",
    "find_config_file",
    "get_config",
    "load_config",
    "reload_config",
]
