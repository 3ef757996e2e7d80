import pytest

from hex_dump.config import DumpConfiguration
from hex_dump.exceptions import ConfigurationError, RangeError
from hex_dump.formatter import DumpLine, DumpLines, format_dump, render_hex, render_text


FULL_LINE = bytes(range(0x41, 0x51))  # "ABCDEFGHIJKLMNOP"


def test_format_short_line_pads_ascii_column():
    text = format_dump(b"ABC", DumpConfiguration(length=3))
    assert text == "00000000: 4142 43" + " " * 33 + " ABC\n"


def test_format_full_line():
    assert format_dump(FULL_LINE) == (
        "00000000: 4142 4344 4546 4748 494a 4b4c 4d4e 4f50  ABCDEFGHIJKLMNOP\n"
    )


def test_format_multiple_lines_offsets():
    text = format_dump(bytes(40))
    lines = text.splitlines()
    assert [line[:10] for line in lines] == ["00000000: ", "00000010: ", "00000020: "]


def test_seek_and_length_select_range():
    data = bytes(range(8))
    text = format_dump(data, DumpConfiguration(seek_offset=2, length=4))
    assert text == "00000002: 0203 0405 " + " " * 30 + " ....\n"


def test_ascii_column_is_aligned_for_every_short_line():
    for n in range(1, 17):
        line = format_dump(b"A" * n)
        assert line[50] == " "
        assert line[51:] == "A" * n + "\n"


def test_control_characters_render_as_dots():
    assert render_text(bytes([0x00, 0x1F, 0x7F])) == "..."
    assert render_text(bytes([0x80, 0x85, 0x9B, 0x9F])) == "...."
    assert render_text(b"A") == "A"
    assert render_text(bytes([0x20, 0x7E])) == " ~"


def test_high_bytes_render_as_latin1():
    assert render_text(bytes([0xA0, 0xE9, 0xFF])) == "\xa0éÿ"


def test_render_hex_groups():
    assert render_hex(b"\x01\x02\x03\x04", 2) == "0102 0304 "
    assert render_hex(b"\x01\x02\x03\x04", 3) == "010203 04"
    assert render_hex(b"\xab", 1) == "ab "
    assert render_hex(b"", 2) == ""


def test_dump_line_render():
    line = DumpLine(offset=0x1F, hex_field="4142 ", text="AB", padding=1)
    assert line.offset_field == "0000001f: "
    assert line.ascii_field == "  AB\n"
    assert line.render() == "0000001f: 4142   AB\n"


def test_empty_range_produces_no_lines():
    assert format_dump(b"") == ""
    assert list(DumpLines(b"abc", DumpConfiguration(length=0))) == []
    assert list(DumpLines(b"abc", DumpConfiguration(seek_offset=3))) == []


def test_dump_lines_are_restartable():
    lines = DumpLines(bytes(range(50)))
    first = list(lines)
    assert first == list(lines)
    assert len(first) == len(lines) == 4


def test_format_is_deterministic():
    data = bytes(range(256))
    config = DumpConfiguration(octets_per_line=12, group_size=3)
    assert format_dump(data, config) == format_dump(data, config)


@pytest.mark.parametrize(
    "config",
    [
        DumpConfiguration(),
        DumpConfiguration(octets_per_line=8, group_size=4),
        DumpConfiguration(octets_per_line=7, group_size=3, seek_offset=5),
        DumpConfiguration(octets_per_line=16, group_size=1, seek_offset=10, length=33),
    ],
)
def test_lines_cover_effective_length(config):
    data = bytes(range(100))
    lines = list(DumpLines(data, config))
    covered = sum(len(line.hex_field.replace(" ", "")) // 2 for line in lines)
    expected = config.length if config.length is not None else len(data) - config.seek_offset
    assert covered == expected
    for line in lines[:-1]:
        assert len(line.hex_field.replace(" ", "")) // 2 == config.octets_per_line
    assert lines[0].offset == config.seek_offset


def test_invalid_configuration_fails_before_any_line():
    with pytest.raises(ConfigurationError):
        DumpLines(b"abc", DumpConfiguration(octets_per_line=0))
    with pytest.raises(ConfigurationError):
        format_dump(b"abc", DumpConfiguration(group_size=0))


def test_range_beyond_buffer_raises():
    with pytest.raises(RangeError, match="exceeds"):
        format_dump(bytes(8), DumpConfiguration(seek_offset=5, length=4))
    with pytest.raises(RangeError, match="beyond end"):
        format_dump(bytes(8), DumpConfiguration(seek_offset=9))
