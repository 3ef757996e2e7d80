#!/usr/bin/env python3
"""
Hex dump CLI: render a binary file as hex + ASCII, or revert a dump.

Forward mode writes one line per `-c` bytes to stdout:
  00000000: 4142 4344 4546 4748 494a 4b4c 4d4e 4f50  ABCDEFGHIJKLMNOP

Revert mode (-r) reads a .hex dump and writes the decoded bytes to
reverted-file.bin in the current directory.

Usage examples:
  bin/hex_dump_cli.py image.bin                  # dump the whole file
  bin/hex_dump_cli.py image.bin -s 2 -l 4        # dump bytes 2..5
  bin/hex_dump_cli.py image.bin -c 8 -g 4        # 8 bytes per line, 4-byte groups
  bin/hex_dump_cli.py image.bin -o image.hex     # write the dump to a file
  bin/hex_dump_cli.py image.hex -r               # revert to reverted-file.bin
  bin/hex_dump_cli.py image.hex -r --legacy-window
  bin/hex_dump_cli.py image.bin --verify         # format + revert in memory and compare
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Path constants based on script location
_SCRIPT_DIR = Path(__file__).resolve().parent   # bin/

# Ensure bin/ is on sys.path so local package imports resolve without PYTHONPATH
if str(_SCRIPT_DIR) not in sys.path:
    sys.path.insert(0, str(_SCRIPT_DIR))

from hex_dump.config import (
    DEFAULT_SEEK_OFFSET,
    DumpConfiguration,
    load_config_file,
    resolve_group_size,
)
from hex_dump.exceptions import (
    ConfigurationError,
    FileAccessError,
    FormatError,
    HexDumpError,
)
from hex_dump.formatter import format_dump
from hex_dump.layout import DEFAULT_OCTETS_PER_LINE, LEGACY_WINDOW, HexWindow
from hex_dump.reverter import decode_dump_bytes, revert_dump
from hex_dump.roundtrip import verify_roundtrip

logger = logging.getLogger(__name__)

REVERT_EXTENSION = ".hex"
DEFAULT_REVERT_OUTPUT = Path("reverted-file.bin")


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting on bad input."""

    def error(self, message):
        raise ConfigurationError(message)


@dataclass(frozen=True)
class CliOptions:
    input_path: Path
    config: DumpConfiguration
    revert: bool = False
    output: Optional[Path] = None
    legacy_window: bool = False
    verify: bool = False
    log_level: str = "WARNING"

    @property
    def window(self) -> HexWindow:
        if self.legacy_window:
            return LEGACY_WINDOW
        return self.config.layout.hex_window()


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="hex-dump",
        description="Render a file as a hex dump, or revert a hex dump to binary",
    )
    parser.add_argument("input_path", type=Path, help="Input file path")
    parser.add_argument("-c", type=int, dest="octets_per_line", help="Octets per line (default: 16)")
    parser.add_argument("-e", action="store_true", dest="little_endian",
                        help="Use little-endian grouping (group size 4 unless -g is given)")
    parser.add_argument("-g", type=int, dest="group_size", help="Group size in bytes (default: 2)")
    parser.add_argument("-l", type=int, dest="length", help="Number of bytes to dump (default: to end of file)")
    parser.add_argument("-r", action="store_true", dest="revert",
                        help=f"Revert a {REVERT_EXTENSION} dump to binary ({DEFAULT_REVERT_OUTPUT})")
    parser.add_argument("-s", type=int, dest="seek_offset", help="Start at seek offset (default: 0)")
    parser.add_argument("-o", "--output", type=Path,
                        help=f"Output file (default: stdout, or {DEFAULT_REVERT_OUTPUT} with -r)")
    parser.add_argument("--legacy-window", action="store_true",
                        help="With -r, read hex from the fixed 10..56 character window")
    parser.add_argument("--verify", action="store_true",
                        help="Format then revert in memory and check the bytes are unchanged")
    parser.add_argument("--config", type=Path, help="YAML file with default option values")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Set the logging level (default: %(default)s)")
    return parser


def _pick(value, defaults: dict, key: str, fallback=None):
    if value is not None:
        return value
    return defaults.get(key, fallback)


def parse_arguments(
    argv: Optional[list[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> CliOptions:
    """Parse argv into CliOptions, raising ConfigurationError on bad input."""
    parser = parser or _build_parser()
    args = parser.parse_args(argv)

    defaults = load_config_file(args.config) if args.config else {}

    # -g wins over -e; a file group_size only applies when neither flag is given
    group_size = args.group_size
    if group_size is None and not args.little_endian:
        group_size = defaults.get("group_size")
    little_endian = args.little_endian or defaults.get("little_endian", False)

    config = DumpConfiguration(
        octets_per_line=_pick(args.octets_per_line, defaults, "octets_per_line", DEFAULT_OCTETS_PER_LINE),
        group_size=resolve_group_size(group_size, little_endian),
        seek_offset=_pick(args.seek_offset, defaults, "seek_offset", DEFAULT_SEEK_OFFSET),
        length=_pick(args.length, defaults, "length"),
    ).validate()

    if args.legacy_window and not args.revert:
        raise ConfigurationError("--legacy-window requires -r")
    if args.verify and args.revert:
        raise ConfigurationError("--verify cannot be combined with -r")

    return CliOptions(
        input_path=args.input_path,
        config=config,
        revert=args.revert,
        output=args.output,
        legacy_window=args.legacy_window,
        verify=args.verify,
        log_level=args.log_level,
    )


# ---------------------------------------------------------------------------
# File IO
# ---------------------------------------------------------------------------


def _read_input(path: Path) -> bytes:
    if not path.is_file():
        raise FileAccessError(f"Cannot open file: {path}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileAccessError(f"Cannot read file: {path}: {e}") from e


def _write_output(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as e:
        raise FileAccessError(f"Cannot write file: {path}: {e}") from e


# ---------------------------------------------------------------------------
# Mode runners
# ---------------------------------------------------------------------------


def _run_dump(options: CliOptions) -> int:
    buffer = _read_input(options.input_path)
    # One byte per character regardless of the console encoding
    data = format_dump(buffer, options.config).encode("latin-1")
    if options.output:
        _write_output(options.output, data)
        logger.info(f"Wrote dump of {options.input_path} to {options.output}")
    else:
        sys.stdout.flush()
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    return 0


def _run_revert(options: CliOptions) -> int:
    if options.input_path.suffix != REVERT_EXTENSION:
        raise FormatError(f"Revert operation requires a {REVERT_EXTENSION} file")

    text = decode_dump_bytes(_read_input(options.input_path))
    # Decode everything before the output file is created
    data = revert_dump(text, options.window)

    output = options.output or DEFAULT_REVERT_OUTPUT
    _write_output(output, data)
    logger.info(f"Wrote {len(data)} bytes to {output}")
    return 0


def _run_verify(options: CliOptions) -> int:
    buffer = _read_input(options.input_path)
    result = verify_roundtrip(buffer, options.config, options.window)
    if result.passed:
        print(f"[verify] passed bytes={result.original_size}")
        return 0
    print(
        f"[verify] failed reason={result.reason} mismatch_offset={result.first_mismatch_offset} "
        f"original={result.original_size} reverted={result.reverted_size}"
    )
    return 1


# ---------------------------------------------------------------------------
# main dispatch
# ---------------------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    parser = _build_parser()
    try:
        options = parse_arguments(argv, parser=parser)

        # Set up logging configuration
        logging.basicConfig(
            level=getattr(logging, options.log_level),
            format='%(levelname)s - %(filename)s:%(lineno)d - %(message)s',
            stream=sys.stderr
        )

        if options.verify:
            return _run_verify(options)
        if options.revert:
            return _run_revert(options)
        return _run_dump(options)
    except HexDumpError as e:
        logger.debug(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
