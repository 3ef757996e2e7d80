"""Byte-equal verification of format -> revert roundtrips."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .config import DumpConfiguration
from .formatter import format_dump
from .layout import HexWindow
from .reverter import revert_dump


@dataclass
class RoundtripResult:
    passed: bool
    reason: str
    first_mismatch_offset: int
    original_size: int = 0
    reverted_size: int = 0


def first_mismatch_offset(a: bytes, b: bytes) -> int:
    """Index of the first differing byte, or -1 when a == b."""
    if a == b:
        return -1
    return next(
        (idx for idx, (x, y) in enumerate(zip(a, b)) if x != y),
        min(len(a), len(b)),
    )


def verify_roundtrip(
    buffer: bytes,
    config: Optional[DumpConfiguration] = None,
    window: Optional[HexWindow] = None,
) -> RoundtripResult:
    """Format the selected range of ``buffer``, revert the text and compare.

    The reverter window defaults to the one derived from the configuration's
    layout, so non-default octets/group sizes are compared like for like.
    """
    config = (config or DumpConfiguration()).validate()
    if window is None:
        window = config.layout.hex_window()

    end = None if config.length is None else config.seek_offset + config.length
    expected = buffer[config.seek_offset:end]
    reverted = revert_dump(format_dump(buffer, config), window)

    mismatch = first_mismatch_offset(expected, reverted)
    return RoundtripResult(
        passed=mismatch == -1,
        reason="byte_equal" if mismatch == -1 else "byte_mismatch",
        first_mismatch_offset=mismatch,
        original_size=len(expected),
        reverted_size=len(reverted),
    )
