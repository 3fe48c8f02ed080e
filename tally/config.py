"""Configuration file management for tally."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from tally.store.schema import get_default_storage_path

DEFAULT_CONFIG: dict[str, Any] = {
    "currency": "$",
    "log_level": "WARNING",
}


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "tally" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    save_config(DEFAULT_CONFIG, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file, merged over the defaults.

    A missing config file yields the defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = dict(DEFAULT_CONFIG)
    if not config_path.exists():
        return config

    with open(config_path, "rb") as f:
        config.update(tomllib.load(f))
    return config


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def get_storage_path(config: dict[str, Any] | None = None) -> Path:
    """Resolve the storage file location.

    Precedence: TALLY_STORAGE environment variable, then the config's
    ``storage_path``, then the XDG data directory.

    Args:
        config: Loaded configuration. If None, loads from default location.

    Returns:
        Path to the storage file.
    """
    env_path = os.environ.get("TALLY_STORAGE")
    if env_path:
        return Path(env_path).expanduser()

    if config is None:
        config = load_config()

    configured = config.get("storage_path")
    if configured:
        return Path(configured).expanduser()

    return get_default_storage_path()


def get_currency(config: dict[str, Any] | None = None) -> str:
    """Currency symbol used when displaying amounts."""
    if config is None:
        config = load_config()
    return str(config.get("currency") or DEFAULT_CONFIG["currency"])
