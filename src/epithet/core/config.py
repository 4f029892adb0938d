"""Configuration loading and management."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from epithet.core.exceptions import ConfigError, ConfigNotFoundError
from epithet.core.resolver import Resolution, resolve
from epithet.core.types import EXECUTION_KEYS, Alias, AliasSet, Execution, SubAlias

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "epithet"
CONFIG_FILE_NAME = "epithet.toml"
CONFIG_ENV_VAR = "EPITHET_CONFIG"

GLOBAL_EXPANSIONS_KEY = "global_expansions"
_ALIAS_KEYS = {*EXECUTION_KEYS, "sub_aliases", "expansions"}
_SUB_ALIAS_KEYS = {*EXECUTION_KEYS, "name"}


@dataclass
class EpithetConfig:
    """Loaded configuration."""

    aliases: AliasSet = field(default_factory=dict)
    global_expansions: dict[str, str] = field(default_factory=dict)

    _source_path: Path | None = field(default=None, repr=False)

    @property
    def source_path(self) -> Path | None:
        return self._source_path

    def resolve(self, name: str, args: list[str] | tuple[str, ...]) -> Resolution:
        """Resolve an alias invocation against this configuration."""
        return resolve(self.aliases, name, args, self.global_expansions)


def default_config_path() -> Path:
    """Per-user config location (``$XDG_CONFIG_HOME`` or ``~/.config``)."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def find_config_file() -> Path | None:
    """Find configuration file in priority order.

    Search order:
    1. $EPITHET_CONFIG
    2. $XDG_CONFIG_HOME/epithet/epithet.toml
    3. ~/.config/epithet/epithet.toml
    """
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path).expanduser()

    user_config = Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME
    for candidate in dict.fromkeys([default_config_path(), user_config]):
        if candidate.exists():
            return candidate

    return None


def load_config(path: Path | str | None = None) -> EpithetConfig:
    """Load configuration from file.

    Args:
        path: Explicit config path or None to auto-discover

    Raises:
        ConfigNotFoundError: No config file exists
        ConfigError: The file is not valid TOML or not a valid alias config
    """
    if path is None:
        path = find_config_file()

    if path is None:
        raise ConfigNotFoundError(f"No configuration file found (expected {default_config_path()})")

    path = Path(path)
    logger.debug("Loading config from %s", path)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(f"Configuration file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {path}: {e}") from e

    config = parse_config(data)
    config._source_path = path
    return config


def parse_config(data: dict[str, Any]) -> EpithetConfig:
    """Build the alias data model from decoded TOML."""
    data = dict(data)
    global_expansions = _parse_expansions(data.pop(GLOBAL_EXPANSIONS_KEY, None), GLOBAL_EXPANSIONS_KEY)

    aliases: AliasSet = {}
    for name, definition in data.items():
        if not isinstance(definition, dict):
            raise ConfigError(f"Alias '{name}' must be a table")
        aliases[name] = _parse_alias(name, definition)

    return EpithetConfig(aliases=aliases, global_expansions=global_expansions)


def _parse_alias(name: str, definition: dict[str, Any]) -> Alias:
    unknown = set(definition) - _ALIAS_KEYS
    if unknown:
        raise ConfigError(f"Alias '{name}' has unknown keys: {', '.join(sorted(unknown))}")

    raw_sub_aliases = definition.get("sub_aliases", [])
    if not isinstance(raw_sub_aliases, list):
        raise ConfigError(f"Alias '{name}': sub_aliases must be an array of tables")

    sub_aliases = []
    for entry in raw_sub_aliases:
        if not isinstance(entry, dict):
            raise ConfigError(f"Alias '{name}': sub_aliases must be an array of tables")
        sub_aliases.append(_parse_sub_alias(name, entry))

    return Alias(
        name=name,
        command=_parse_execution(name, definition),
        sub_aliases=tuple(sub_aliases),
        expansions=_parse_expansions(definition.get("expansions"), name),
    )


def _parse_sub_alias(alias_name: str, entry: dict[str, Any]) -> SubAlias:
    sub_name = entry.get("name")
    if not isinstance(sub_name, str):
        raise ConfigError(f"Alias '{alias_name}': every sub-alias needs a string 'name'")

    where = f"{alias_name} {sub_name}"
    unknown = set(entry) - _SUB_ALIAS_KEYS
    if unknown:
        raise ConfigError(f"Alias '{where}' has unknown keys: {', '.join(sorted(unknown))}")

    execution = _parse_execution(where, entry)
    if execution is None:
        raise ConfigError(f"Alias '{where}' needs one of: {', '.join(EXECUTION_KEYS)}")
    return SubAlias(name=sub_name, execution=execution)


def _parse_execution(where: str, definition: dict[str, Any]) -> Execution | None:
    """Read the single execution key of an alias or sub-alias table."""
    present = [key for key in EXECUTION_KEYS if key in definition]
    if not present:
        return None
    if len(present) > 1:
        raise ConfigError(f"Alias '{where}' defines more than one of: {', '.join(present)}")

    key = present[0]
    value = definition[key]
    variant = EXECUTION_KEYS[key]

    if key == "command":
        if not isinstance(value, str):
            raise ConfigError(f"Alias '{where}': 'command' must be a string")
        return variant(value)

    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"Alias '{where}': '{key}' must be an array of strings")
    return variant(tuple(value))


def _parse_expansions(raw: Any, where: str) -> dict[str, str]:
    """Accept either a ``{key = value}`` table or an array of ``{key, value}`` tables."""
    if raw is None:
        return {}

    if isinstance(raw, dict):
        items = list(raw.items())
    elif isinstance(raw, list):
        items = []
        for entry in raw:
            if not isinstance(entry, dict) or set(entry) != {"key", "value"}:
                raise ConfigError(f"'{where}': expansion entries need exactly 'key' and 'value'")
            items.append((entry["key"], entry["value"]))
    else:
        raise ConfigError(f"'{where}': expansions must be a table or an array of tables")

    expansions: dict[str, str] = {}
    for key, value in items:
        if not isinstance(key, str) or not isinstance(value, str):
            raise ConfigError(f"'{where}': expansion keys and values must be strings")
        expansions[key] = value
    return expansions

