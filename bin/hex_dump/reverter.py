"""Hex dump text -> binary reconstruction."""

from __future__ import annotations

import logging
import re
import string
from typing import Iterator

from .exceptions import FormatError
from .layout import DEFAULT_LAYOUT, HexWindow

logger = logging.getLogger(__name__)

_LINE_SEPARATOR = re.compile(r"\r?\n")
_HEX_DIGITS = frozenset(string.hexdigits)

# The ASCII column always follows a gap of at least two spaces
_FIELD_GAP = "  "


def decode_token(token: str, line_number: int = 0) -> bytes:
    """Decode a hex group such as "41" or "4142" into bytes."""
    if len(token) % 2 != 0 or not _HEX_DIGITS.issuperset(token):
        raise FormatError(f"invalid hex byte {token!r} on line {line_number}")
    return bytes.fromhex(token)


def split_hex_field(line: str, window: HexWindow) -> list[str]:
    field = window.extract(line).strip()
    field = field.split(_FIELD_GAP, 1)[0]
    return [token for token in field.split(" ") if token]


def revert_lines(text: str, window: HexWindow | None = None) -> Iterator[bytes]:
    """Yield the decoded bytes of each retained dump line, in order."""
    window = window or DEFAULT_LAYOUT.hex_window()
    for line_number, line in enumerate(_LINE_SEPARATOR.split(text), start=1):
        if len(line) < window.min_line_length:
            if line:
                logger.debug(f"Skipping short line {line_number} ({len(line)} chars)")
            continue
        yield b"".join(
            decode_token(token, line_number) for token in split_hex_field(line, window)
        )


def revert_dump(text: str, window: HexWindow | None = None) -> bytes:
    """Reconstruct the binary content of a hex dump.

    Lines shorter than the window's minimum length are skipped. Without a
    window the default 16-octet, 2-byte-group layout is assumed; pass
    ``LEGACY_WINDOW`` for the fixed 10..56 character window.
    """
    data = b"".join(revert_lines(text, window))
    logger.debug(f"Reverted {len(data)} bytes")
    return data


def decode_dump_bytes(raw: bytes) -> str:
    return raw.decode("ascii", errors="replace")
