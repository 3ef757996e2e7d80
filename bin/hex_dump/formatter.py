"""Binary -> hex dump text formatting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

from .config import DumpConfiguration
from .exceptions import RangeError
from .layout import Layout

logger = logging.getLogger(__name__)


def is_control(byte: int) -> bool:
    # C0, DEL and C1 control codes
    return byte < 0x20 or 0x7F <= byte <= 0x9F


def render_hex(chunk: bytes, group_size: int) -> str:
    """Hex digits of a chunk with a space after every complete group."""
    parts = []
    for position, byte in enumerate(chunk):
        parts.append(f"{byte:02x}")
        if position % group_size == group_size - 1:
            parts.append(" ")
    return "".join(parts)


def render_text(chunk: bytes) -> str:
    # Latin-1 code points, one character per byte
    return "".join("." if is_control(byte) else chr(byte) for byte in chunk)


@dataclass(frozen=True)
class DumpLine:
    """One formatted line of a hex dump."""

    offset: int
    hex_field: str
    text: str
    padding: int = 0

    @property
    def offset_field(self) -> str:
        return f"{self.offset:08x}: "

    @property
    def ascii_field(self) -> str:
        return " " * self.padding + " " + self.text + "\n"

    def render(self) -> str:
        return self.offset_field + self.hex_field + self.ascii_field


class DumpLines:
    """Lazy, restartable sequence of the dump lines of a buffer range.

    The range is validated on construction so that an invalid configuration
    fails before any line is produced.
    """

    def __init__(self, buffer: bytes, config: DumpConfiguration | None = None):
        self.config = (config or DumpConfiguration()).validate()
        self.layout: Layout = self.config.layout
        self.buffer = buffer
        self.start = self.config.seek_offset
        self.length = _effective_length(len(buffer), self.config)
        self.stop = self.start + self.length

    def __iter__(self) -> Iterator[DumpLine]:
        step = self.layout.octets_per_line
        for offset in range(self.start, self.stop, step):
            chunk = self.buffer[offset:min(offset + step, self.stop)]
            yield DumpLine(
                offset=offset,
                hex_field=render_hex(chunk, self.layout.group_size),
                text=render_text(chunk),
                padding=self.layout.padding(len(chunk)),
            )

    def __len__(self) -> int:
        step = self.layout.octets_per_line
        return (self.length + step - 1) // step


def _effective_length(buffer_size: int, config: DumpConfiguration) -> int:
    if config.seek_offset > buffer_size:
        raise RangeError(
            f"seek offset {config.seek_offset} is beyond end of input ({buffer_size} bytes)"
        )
    if config.length is None:
        return buffer_size - config.seek_offset
    if config.seek_offset + config.length > buffer_size:
        raise RangeError(
            f"range {config.seek_offset}+{config.length} exceeds input size ({buffer_size} bytes)"
        )
    return config.length


def format_dump(buffer: bytes, config: DumpConfiguration | None = None) -> str:
    """Render a buffer range as hex dump text."""
    lines = DumpLines(buffer, config)
    logger.debug(
        f"Formatting {lines.length} bytes from offset {lines.start} in {len(lines)} lines"
    )
    return "".join(line.render() for line in lines)
