"""Dump configuration and YAML defaults file loading."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .exceptions import ConfigurationError, FileAccessError
from .layout import DEFAULT_GROUP_SIZE, DEFAULT_OCTETS_PER_LINE, Layout

logger = logging.getLogger(__name__)

# -e groups by 4 bytes unless -g is given explicitly
LITTLE_ENDIAN_GROUP_SIZE = 4
DEFAULT_SEEK_OFFSET = 0

CONFIG_FILE_KEYS = {
    "octets_per_line": int,
    "group_size": int,
    "seek_offset": int,
    "length": int,
    "little_endian": bool,
}


@dataclass(frozen=True)
class DumpConfiguration:
    """Immutable options for a single dump."""

    octets_per_line: int = DEFAULT_OCTETS_PER_LINE
    group_size: int = DEFAULT_GROUP_SIZE
    seek_offset: int = DEFAULT_SEEK_OFFSET
    length: Optional[int] = None  # None = dump to end of buffer

    def validate(self) -> "DumpConfiguration":
        if self.octets_per_line <= 0:
            raise ConfigurationError(
                f"octets per line must be positive, got {self.octets_per_line}"
            )
        if self.group_size <= 0:
            raise ConfigurationError(
                f"group size must be positive, got {self.group_size}"
            )
        if self.seek_offset < 0:
            raise ConfigurationError(
                f"seek offset must not be negative, got {self.seek_offset}"
            )
        if self.length is not None and self.length < 0:
            raise ConfigurationError(f"length must not be negative, got {self.length}")
        return self

    @property
    def layout(self) -> Layout:
        return Layout(octets_per_line=self.octets_per_line, group_size=self.group_size)


def resolve_group_size(group_size: Optional[int], little_endian: bool) -> int:
    if group_size is not None:
        return group_size
    if little_endian:
        return LITTLE_ENDIAN_GROUP_SIZE
    return DEFAULT_GROUP_SIZE


def load_config_file(path: Path) -> dict[str, Any]:
    """Load option defaults from a YAML mapping.

    Only the keys in CONFIG_FILE_KEYS are accepted. An empty file yields an
    empty mapping.
    """
    if not path.is_file():
        raise FileAccessError(f"Cannot open config file: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"invalid config file {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"config file {path} must contain a mapping")

    unknown = sorted(set(data) - set(CONFIG_FILE_KEYS))
    if unknown:
        raise ConfigurationError(f"unknown config keys: {', '.join(map(str, unknown))}")

    for key, value in data.items():
        expected = CONFIG_FILE_KEYS[key]
        # bool is an int subclass; reject true/false for integer keys
        if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigurationError(f"config key {key} must be an integer, got {value!r}")
        if expected is bool and not isinstance(value, bool):
            raise ConfigurationError(f"config key {key} must be true or false, got {value!r}")

    logger.debug(f"Loaded config file {path}: {data}")
    return data
