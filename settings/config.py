"""Configuration management for kt-cli.

Loads configuration from:
1. .kt-cli.toml in the current or a parent directory, else
   <config dir>/config.toml (defaults)
2. Environment variables (overrides)
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

CONFIG_DIR_NAME = ".kt-cli"
PROJECT_CONFIG_NAME = ".kt-cli.toml"
CONFIG_SUBDIRS = ("templates", "protocols")


@dataclass
class GeneralConfig:
    """Tool-wide settings."""

    config_dir: str = ""  # Empty = ~/.kt-cli
    log_level: str = "WARNING"


@dataclass
class ProtocolsConfig:
    """Protocol document source."""

    # Directory copied into BestPractices/Generic (empty = bundled directory)
    source_dir: str = ""


@dataclass
class GitConfig:
    """Git initialization of new projects."""

    enabled: bool = True
    commit_message: str = "feat: initial {project_name} setup with Knowledge Transfer Protocols"


@dataclass
class Config:
    """Main configuration container."""

    general: GeneralConfig = field(default_factory=GeneralConfig)
    protocols: ProtocolsConfig = field(default_factory=ProtocolsConfig)
    git: GitConfig = field(default_factory=GitConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        return cls(
            general=GeneralConfig(**data.get("general", {})),
            protocols=ProtocolsConfig(**data.get("protocols", {})),
            git=GitConfig(**data.get("git", {})),
        )

    @property
    def config_dir(self) -> Path:
        """Per-user configuration directory."""
        if self.general.config_dir:
            return Path(self.general.config_dir).expanduser()
        return Path.home() / CONFIG_DIR_NAME

    def sections(self) -> list[tuple[str, Any]]:
        return [
            ("general", self.general),
            ("protocols", self.protocols),
            ("git", self.git),
        ]


def find_config_file() -> Path | None:
    """Find the config file to load.

    Looks for .kt-cli.toml in the current and parent directories, then
    falls back to config.toml in the per-user config directory.

    Returns:
        Path to the config file or None if not found.
    """
    current = Path.cwd()

    for directory in [current, *current.parents]:
        config_path = directory / PROJECT_CONFIG_NAME
        if config_path.exists():
            return config_path

    user_config = _default_config_dir() / "config.toml"
    if user_config.exists():
        return user_config

    return None


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Optional explicit path to a config file

    Returns:
        Config object with merged settings.
    """
    # Start with defaults
    config_data: dict[str, Any] = {}

    # Load from file if available
    if config_path is None:
        config_path = find_config_file()

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path, "rb") as f:
                config_data = tomllib.load(f)

    # Apply environment variable overrides
    env_overrides = {
        "general": {
            "config_dir": os.getenv("KT_CLI_HOME"),
            "log_level": os.getenv("KT_LOG_LEVEL"),
        },
        "protocols": {
            "source_dir": os.getenv("KT_PROTOCOLS_DIR"),
        },
        "git": {
            "enabled": _bool_or_none(os.getenv("KT_GIT_ENABLED")),
        },
    }

    # Merge env overrides (only non-None values)
    for section, values in env_overrides.items():
        if section not in config_data:
            config_data[section] = {}
        for key, value in values.items():
            if value is not None:
                config_data[section][key] = value

    return Config.from_dict(config_data)


def _default_config_dir() -> Path:
    home = os.getenv("KT_CLI_HOME")
    if home:
        return Path(home).expanduser()
    return Path.home() / CONFIG_DIR_NAME


def _bool_or_none(value: str | None) -> bool | None:
    """Convert string to bool, or return None."""
    if value is None:
        return None
    lowered = value.strip().lower()
    if lowered in ("1", "true", "yes", "on"):
        return True
    if lowered in ("0", "false", "no", "off"):
        return False
    return None


def ensure_config_dir(config: Config) -> Path:
    """Create the per-user config directory on first run.

    Creates ``templates/`` and ``protocols/`` inside it. Does nothing when
    the directory already exists.

    Returns:
        Path to the config directory.
    """
    config_dir = config.config_dir
    if not config_dir.exists():
        config_dir.mkdir(parents=True)
        for subdir in CONFIG_SUBDIRS:
            (config_dir / subdir).mkdir(parents=True, exist_ok=True)
    return config_dir


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Returns:
        Config object (loaded once, cached).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Force reload of configuration.

    Returns:
        Fresh Config object.
    """
    global _config
    _config = load_config()
    return _config
