"""Hex dump formatting and revert package."""

from .config import DumpConfiguration, load_config_file
from .exceptions import (
    ConfigurationError,
    FileAccessError,
    FormatError,
    HexDumpError,
    RangeError,
)
from .formatter import DumpLine, DumpLines, format_dump
from .layout import DEFAULT_LAYOUT, LEGACY_WINDOW, HexWindow, Layout
from .reverter import revert_dump
from .roundtrip import RoundtripResult, verify_roundtrip

__all__ = [
    "ConfigurationError",
    "DEFAULT_LAYOUT",
    "DumpConfiguration",
    "DumpLine",
    "DumpLines",
    "FileAccessError",
    "FormatError",
    "HexDumpError",
    "HexWindow",
    "LEGACY_WINDOW",
    "Layout",
    "RangeError",
    "RoundtripResult",
    "format_dump",
    "load_config_file",
    "revert_dump",
    "verify_roundtrip",
]
