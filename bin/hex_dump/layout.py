"""Column layout shared by the formatter and the reverter."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .exceptions import ConfigurationError


DEFAULT_OCTETS_PER_LINE = 16
DEFAULT_GROUP_SIZE = 2

# "%08x: "
OFFSET_WIDTH = 10

# ASCII column padding per missing byte on a short line
PADDING_PER_OCTET = 2.5


@dataclass(frozen=True)
class HexWindow:
    """Character range of a dump line that holds the hex field."""

    start: int
    stop: int
    # Shorter lines are skipped; None means any line reaching past start
    min_length: Optional[int] = None

    @property
    def min_line_length(self) -> int:
        if self.min_length is None:
            return self.start + 1
        return self.min_length

    def extract(self, line: str) -> str:
        return line[self.start:self.stop]


# Legacy fixed window: characters 10..56 inclusive,
# lines shorter than 57 characters are skipped.
LEGACY_WINDOW = HexWindow(start=OFFSET_WIDTH, stop=57, min_length=57)


@dataclass(frozen=True)
class Layout:
    """Column positions of a dump produced with (octets_per_line, group_size)."""

    octets_per_line: int = DEFAULT_OCTETS_PER_LINE
    group_size: int = DEFAULT_GROUP_SIZE

    def __post_init__(self):
        if self.octets_per_line <= 0:
            raise ConfigurationError(
                f"octets per line must be positive, got {self.octets_per_line}"
            )
        if self.group_size <= 0:
            raise ConfigurationError(
                f"group size must be positive, got {self.group_size}"
            )

    @property
    def hex_width(self) -> int:
        """Width of a full line's hex field, group separators included."""
        return 2 * self.octets_per_line + self.octets_per_line // self.group_size

    def padding(self, chunk_length: int) -> int:
        shortfall = max(0, self.octets_per_line - chunk_length)
        return math.ceil(shortfall * PADDING_PER_OCTET)

    def line_length(self, chunk_length: int) -> int:
        """Length of a rendered line holding chunk_length bytes, newline excluded."""
        hex_length = 2 * chunk_length + chunk_length // self.group_size
        return OFFSET_WIDTH + hex_length + self.padding(chunk_length) + 1 + chunk_length

    def hex_window(self) -> HexWindow:
        shortest = min(
            self.line_length(n) for n in range(1, self.octets_per_line + 1)
        )
        return HexWindow(
            start=OFFSET_WIDTH,
            stop=OFFSET_WIDTH + self.hex_width,
            min_length=shortest,
        )


DEFAULT_LAYOUT = Layout()
