"""Error taxonomy for hex dump and revert operations."""


class HexDumpError(Exception):
    """Base class for every failure surfaced to the CLI."""


class ConfigurationError(HexDumpError):
    """Invalid, missing or unknown option value."""


class FileAccessError(HexDumpError):
    """Input file is missing or unreadable, or output cannot be written."""


class RangeError(HexDumpError):
    """Requested seek/length range exceeds the buffer size."""


class FormatError(HexDumpError):
    """Dump text is malformed or the input lacks the expected extension."""
