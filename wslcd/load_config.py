"""Logic for loading and merging configuration files."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from wslcd.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "mount": {
        # WSL automount root; differs when /etc/wsl.conf sets [automount] root=
        "parent": "/mnt",
    },
    "display": {
        "tail_head_limit": 16,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises:
        ConfigError: The file is missing, unreadable or has invalid values.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path:
        return config

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"cannot read config {path}: {exc.strerror or exc}"
        raise ConfigError(msg) from exc
    try:
        user_config = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        msg = f"invalid YAML in {path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(user_config, dict):
        msg = f"config {path} must be a mapping"
        raise ConfigError(msg)

    config = merge_config(config, user_config)
    validate_config(config)
    return config


def merge_config(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Merge update into base section by section.

    Only sections known to the defaults are accepted; values inside a
    section replace the defaults.
    """
    result = copy.deepcopy(base)
    for section, values in update.items():
        if section not in result:
            msg = f"unknown config section: {section}"
            raise ConfigError(msg)
        if not isinstance(values, dict):
            msg = f"config section {section} must be a mapping"
            raise ConfigError(msg)
        result[section].update(values)
    return result


def validate_config(config: dict[str, Any]) -> None:
    """Check value types that the resolvers rely on."""
    parent = config["mount"]["parent"]
    if not isinstance(parent, str) or not parent:
        msg = "mount.parent must be a non-empty path"
        raise ConfigError(msg)

    limit = config["display"]["tail_head_limit"]
    if isinstance(limit, bool) or not isinstance(limit, int) or limit <= 0:
        msg = "display.tail_head_limit must be a positive integer"
        raise ConfigError(msg)

    level = config["logging"]["level"]
    if not isinstance(level, str) or not isinstance(
        logging.getLevelName(level.upper()), int
    ):
        msg = f"logging.level is not a logging level: {level}"
        raise ConfigError(msg)
