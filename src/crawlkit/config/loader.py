"""
Load Settings from an optional YAML file plus ``CRAWLKIT__`` environment
variables.

Later sources win: model defaults, then the file, then the environment.
An environment key is split on double underscores into a section and a
field, e.g. ``CRAWLKIT__CLIENT__TIMEOUT_MS=60000`` sets
``settings.client.timeout_ms``.
"""

import os
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError as PydanticValidationError

from crawlkit.config.settings import Settings
from crawlkit.core.exceptions import ConfigurationError

ENV_PREFIX = "CRAWLKIT"

# Checked in order by get_default_config_path()
CONFIG_SEARCH_PATHS = (
    Path("crawlkit.yaml"),
    Path("config") / "crawlkit.yaml",
    Path("~") / ".crawlkit" / "config.yaml",
)


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {e}", {"path": str(path)}
        ) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(
            f"Configuration file must contain a mapping, got: {type(content).__name__}",
            {"path": str(path)},
        )
    return content


def _env_value(raw: str) -> Any:
    """
    Interpret an environment string as a YAML scalar.

    ``true``/``off`` become booleans, digits become numbers and ``null`` or
    an empty string becomes None. Anything YAML cannot read stays a string.
    """
    try:
        value = yaml.safe_load(raw)
    except yaml.YAMLError:
        return raw
    if isinstance(value, (dict, list)):
        return raw
    return value


def _env_sections(environ: Mapping[str, str], prefix: str) -> dict[str, dict[str, Any]]:
    marker = f"{prefix}__"
    sections: dict[str, dict[str, Any]] = {}

    for name, raw in environ.items():
        if not name.startswith(marker):
            continue
        parts = name[len(marker):].lower().split("__")
        if len(parts) != 2 or not all(parts):
            continue
        section, field_name = parts
        sections.setdefault(section, {})[field_name] = _env_value(raw)

    return sections


def load_config(
    config_path: Path | str | None = None,
    env_prefix: str = ENV_PREFIX,
) -> Settings:
    """
    Build validated Settings.

    Args:
        config_path: YAML file to read. None skips the file.
        env_prefix: Prefix of the environment variables to apply

    Raises:
        FileNotFoundError: If config_path is given but does not exist
        ConfigurationError: If the file or the merged values are invalid
    """
    data: dict[str, Any] = {}
    if config_path is not None:
        data = _read_yaml(Path(config_path))

    for section, values in _env_sections(os.environ, env_prefix).items():
        current = data.get(section)
        data[section] = {**current, **values} if isinstance(current, dict) else values

    try:
        return Settings(**data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def get_default_config_path() -> Path | None:
    """Return the first existing file in CONFIG_SEARCH_PATHS, if any."""
    for candidate in CONFIG_SEARCH_PATHS:
        path = candidate.expanduser()
        if path.exists():
            return path
    return None
