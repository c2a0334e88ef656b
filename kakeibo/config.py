"""Configuration file management for kakeibo."""

import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from kakeibo.store.json_store import STORAGE_KEY, get_data_path

# Expense categories offered by the CLI; any other name is accepted too
DEFAULT_CATEGORIES = [
    "家賃",
    "光熱費",
    "食費",
    "保険",
    "日用品",
    "通信費",
    "交通費",
    "交際費",
    "その他",
]


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
    return get_xdg_config_home() / "kakeibo" / "config.toml"


def default_config() -> dict[str, Any]:
    return {
        "data_path": str(get_data_path()),
        "storage_key": STORAGE_KEY,
        "categories": list(DEFAULT_CATEGORIES),
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(default_config(), f)

    os.chmod(config_path, 0o600)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Keys missing from the file (or a missing file) fall back to defaults.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    if config_path is None:
        config_path = get_config_path()

    config = default_config()
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


def get_categories(config: dict[str, Any]) -> list[str]:
    """Expense categories from config, skipping anything that isn't a non-empty string."""
    categories = config.get("categories", DEFAULT_CATEGORIES)
    if not isinstance(categories, list):
        return list(DEFAULT_CATEGORIES)
    return [c for c in categories if isinstance(c, str) and c.strip()]


def add_category(name: str, config_path: Path | None = None) -> bool:
    """Add a category to the configured catalog.

    Args:
        name: Category name.
        config_path: Path to config file. If None, uses default location.

    Returns:
        True if the category was added, False if it was already present.
    """
    config = load_config(config_path)
    categories = get_categories(config)

    if name in categories:
        return False

    categories.append(name)
    config["categories"] = categories
    save_config(config, config_path)
    return True
