import os
from os import path

import toml
from textual import log

from jotter.variables.maps import VAR_TO_DIR

DEFAULT_CONFIG_PATH = path.join(path.dirname(path.dirname(__file__)), "config", "config.toml")


def user_config_path() -> str:
    return path.join(VAR_TO_DIR["CONFIG"], "config.toml")


def deep_merge(base: dict, override: dict) -> dict:
    """Merge `override` into a copy of `base`, recursing into tables.

    Args:
        base (dict): The defaults.
        override (dict): Values that win over the defaults.

    Returns:
        dict: A new merged dictionary. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def validate_config(config: dict, defaults: dict) -> dict:
    """Replace settings that can't be used with their defaults.

    Args:
        config (dict): The merged configuration. Modified in place.
        defaults (dict): The bundled configuration.

    Returns:
        dict: `config`, with every table a dict and every value usable.
    """
    for table, default_table in defaults.items():
        if not isinstance(config.get(table), dict):
            log.warning(f"[{table}] is not a table, using the defaults")
            config[table] = dict(default_table)

    settings = config["settings"]
    interval = settings.get("autosave_interval")
    if (
        isinstance(interval, bool)
        or not isinstance(interval, (int, float))
        or interval <= 0
    ):
        log.warning(
            f"autosave_interval={interval!r} is not a positive number, "
            f"using {defaults['settings']['autosave_interval']}"
        )
        settings["autosave_interval"] = defaults["settings"]["autosave_interval"]
    for key in ("extension", "filename_format"):
        if not isinstance(settings.get(key), str) or not settings[key]:
            log.warning(f"{key}={settings.get(key)!r} is not text, using the default")
            settings[key] = defaults["settings"][key]
    if not settings["extension"].startswith("."):
        settings["extension"] = f".{settings['extension']}"

    interface = config["interface"]
    for key, default in defaults["interface"].items():
        if type(interface.get(key)) is not type(default):
            log.warning(f"{key}={interface.get(key)!r} is not usable, using {default!r}")
            interface[key] = default

    keybinds = config["keybinds"]
    for action, default_keys in defaults["keybinds"].items():
        keys = keybinds.get(action)
        if isinstance(keys, str):
            keys = [keys]
        if not isinstance(keys, list) or not all(isinstance(key, str) for key in keys):
            log.warning(f"keybind {action}={keys!r} is not a list of keys, using the default")
            keys = list(default_keys)
        keybinds[action] = keys
    return config


def load_config(user_path: str | None = None) -> dict:
    """
    Load the bundled configuration and layer the user's TOML file on top.

    Args:
        user_path (str | None): Path of the user config. Defaults to
            `config.toml` inside the platform config directory.

    Returns:
        dict: The merged configuration.
    """
    with open(DEFAULT_CONFIG_PATH, "r", encoding="utf-8") as f:
        defaults = toml.loads(f.read())

    user_path = user_path or user_config_path()
    try:
        with open(user_path, "r", encoding="utf-8") as f:
            user_config = toml.loads(f.read())
    except FileNotFoundError:
        user_config = {}
    except (OSError, toml.TomlDecodeError) as error:
        log.warning(f"ignoring user config {user_path}: {error}")
        user_config = {}

    return validate_config(deep_merge(defaults, user_config), defaults)


def config_setup() -> None:
    """Make sure the user config directory and file exist."""
    try:
        if not path.exists(VAR_TO_DIR["CONFIG"]):
            os.makedirs(VAR_TO_DIR["CONFIG"])
        if not path.exists(user_config_path()):
            with open(user_config_path(), "w", encoding="utf-8"):
                pass
    except OSError as error:
        log.warning(f"could not set up {VAR_TO_DIR['CONFIG']}: {error}")
