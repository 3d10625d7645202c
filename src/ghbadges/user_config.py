"""User-level defaults for ghbadges.

Reads from ~/.config/ghbadges/config.yaml and provides the initial
selection of a session. Choices made during a session are never written
back to this file.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from ghbadges.catalog import find_format_index, find_service_index
from ghbadges.errors import BadgeError
from ghbadges.models import BadgeStyle
from ghbadges.selection import SelectionState

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "ghbadges"
CONFIG_FILE = CONFIG_DIR / "config.yaml"

# Keys that map to enum types for validation
_ENUM_FIELDS: dict[str, type[Enum]] = {
    "style": BadgeStyle,
}

_STRING_FIELDS = ("format", "catalog")


def get_config_path() -> Path:
    """Return the path to the user config file."""
    return CONFIG_FILE


def load_user_config() -> dict[str, Any]:
    """Load user configuration from disk.

    Returns an empty dict if the file doesn't exist or is invalid.
    """
    config_path = get_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        logger.warning(f"Failed to load user config from {config_path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"User config is not a mapping: {config_path}")
        return {}

    validated: dict[str, Any] = {}
    for key, value in data.items():
        if value is None:
            continue
        if key in _ENUM_FIELDS:
            try:
                _ENUM_FIELDS[key](value)
            except ValueError:
                valid = [e.value for e in _ENUM_FIELDS[key]]
                logger.warning(
                    f"Invalid value '{value}' for '{key}' in user config. Valid: {valid}"
                )
                continue
        elif key in _STRING_FIELDS and not isinstance(value, str):
            logger.warning(f"Expected a string for '{key}' in user config, got {value!r}")
            continue
        elif key == "services" and not (
            isinstance(value, list) and all(isinstance(v, str) for v in value)
        ):
            logger.warning(f"Expected a list of service names for 'services', got {value!r}")
            continue
        validated[key] = value

    return validated


def get_catalog_override(user_cfg: dict[str, Any] | None = None) -> Path | None:
    """Return the custom service catalog configured by the user, if any.

    Pass an already loaded ``user_cfg`` to avoid reading the file again.
    """
    if user_cfg is None:
        user_cfg = load_user_config()
    catalog = user_cfg.get("catalog")
    return Path(catalog).expanduser() if catalog else None


def apply_user_defaults(
    selection: SelectionState, user_cfg: dict[str, Any] | None = None
) -> SelectionState:
    """Apply user defaults to a fresh selection.

    ``services`` replaces the catalog's enabled-by-default flags. Unknown
    service or format names are logged and skipped.
    """
    if user_cfg is None:
        user_cfg = load_user_config()
    if not user_cfg:
        return selection

    if "style" in user_cfg:
        selection.set_style(user_cfg["style"])

    if "format" in user_cfg:
        try:
            selection.set_format(find_format_index(user_cfg["format"], selection.formats))
        except BadgeError as e:
            logger.warning(f"Ignoring 'format' in user config: {e}")

    if "services" in user_cfg:
        wanted: set[int] = set()
        for name in user_cfg["services"]:
            try:
                wanted.add(find_service_index(name, selection.services))
            except BadgeError as e:
                logger.warning(f"Ignoring service in user config: {e}")
        for index in range(len(selection.services)):
            selection.set_service_enabled(index, index in wanted)

    return selection


def save_user_config(config: dict[str, Any]) -> Path:
    """Save configuration to the user config file.

    Returns the path written to.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        yaml.safe_dump(config, f, default_flow_style=False, sort_keys=False)
    return config_path


def get_default_config_template() -> dict[str, Any]:
    """Return an example config for scaffolding."""
    return {
        "style": "flat",
        "format": "markdown",
        "services": ["Travis CI", "Coveralls", "npm version", "License"],
    }
