"""Configuration loading and path resolution."""

import os
from os import path

import toml
from platformdirs import user_config_dir
from textual.theme import BUILTIN_THEMES

from favdirs.variables.constants import APP_NAME, LOCATIONS_FILE, SELECT_FILE

DEFAULT_CONFIG_PATH = path.join(path.dirname(path.dirname(__file__)), "config", "config.toml")
USER_CONFIG_DIR = user_config_dir(APP_NAME)


class ConfigError(Exception):
    """Raised when the configuration or the data directory cannot be used."""


def deep_merge(base: dict, override: dict) -> dict:
    """
    Merge two dictionaries, letting values in `override` win.

    Args:
        base (dict): The default values.
        override (dict): The values to lay over the defaults.

    Returns:
        dict: A new dictionary. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def config_setup(config_dir: str = USER_CONFIG_DIR) -> str:
    """
    Make sure the user config folder and an (empty) config.toml exist.

    Returns:
        str: Path to the user config file.
    """
    user_config = path.join(config_dir, "config.toml")
    try:
        os.makedirs(config_dir, exist_ok=True)
        if not path.exists(user_config):
            with open(user_config, "w", encoding="utf-8"):
                pass
    except OSError as error:
        raise ConfigError(f"Cannot create config folder {config_dir}: {error}") from error
    return user_config


def load_config(user_config: str | None = None) -> dict:
    """
    Load the default configuration and lay the user's config.toml over it.

    Args:
        user_config (str | None): Path to the user config file. Missing files are ignored.

    Returns:
        dict: The merged configuration.
    """
    with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8") as f:
        config = toml.loads(f.read())
    if user_config is None or not path.exists(user_config):
        return config
    try:
        with open(user_config, "r", encoding="utf-8") as f:
            user = toml.loads(f.read())
    except (OSError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Cannot read {user_config}: {error}") from error
    config = deep_merge(config, user)
    validate_config(config)
    return config


def validate_config(config: dict) -> None:
    """Reject values that would only fail once the app is running."""
    theme = config["interface"]["theme"]
    if theme not in BUILTIN_THEMES:
        raise ConfigError(
            f"Unknown theme {theme!r}, expected one of: {', '.join(sorted(BUILTIN_THEMES))}"
        )
    max_width = config["interface"]["max_width"]
    if not isinstance(max_width, int) or isinstance(max_width, bool) or max_width < 1:
        raise ConfigError(f"interface.max_width must be a positive integer, got {max_width!r}")


def resolve_store_paths(config: dict) -> tuple[str, str]:
    """
    Resolve the bindings and selection artifact paths, creating the data folder.

    Args:
        config (dict): The loaded configuration.

    Returns:
        tuple[str, str]: The locations file path and the select file path.
    """
    data_dir = path.abspath(path.expanduser(config["settings"]["data_dir"]))
    try:
        os.makedirs(data_dir, exist_ok=True)
    except OSError as error:
        raise ConfigError(f"Cannot create data folder {data_dir}: {error}") from error
    return path.join(data_dir, LOCATIONS_FILE), path.join(data_dir, SELECT_FILE)
