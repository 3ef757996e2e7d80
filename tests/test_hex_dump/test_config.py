import pytest
import yaml

from hex_dump.config import DumpConfiguration, load_config_file, resolve_group_size
from hex_dump.exceptions import ConfigurationError, FileAccessError
from hex_dump.layout import Layout


def test_defaults():
    config = DumpConfiguration()
    assert config.octets_per_line == 16
    assert config.group_size == 2
    assert config.seek_offset == 0
    assert config.length is None
    assert config.layout == Layout(16, 2)


def test_validate_returns_self():
    config = DumpConfiguration(octets_per_line=8, length=0)
    assert config.validate() is config


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"octets_per_line": 0}, "octets per line"),
        ({"group_size": 0}, "group size"),
        ({"seek_offset": -1}, "seek offset"),
        ({"length": -5}, "length"),
    ],
)
def test_validate_rejects_invalid_values(kwargs, message):
    with pytest.raises(ConfigurationError, match=message):
        DumpConfiguration(**kwargs).validate()


def test_resolve_group_size():
    assert resolve_group_size(None, False) == 2
    assert resolve_group_size(None, True) == 4
    assert resolve_group_size(3, True) == 3


def test_load_config_file(tmp_path):
    path = tmp_path / "hexdump.yaml"
    path.write_text(yaml.dump({"octets_per_line": 8, "little_endian": True}), encoding="utf-8")
    assert load_config_file(path) == {"octets_per_line": 8, "little_endian": True}


def test_load_empty_config_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config_file(path) == {}


def test_load_config_file_missing(tmp_path):
    with pytest.raises(FileAccessError, match="Cannot open config file"):
        load_config_file(tmp_path / "missing.yaml")


def test_load_config_file_rejects_unknown_keys(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("columns: 8\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="unknown config keys: columns"):
        load_config_file(path)


def test_load_config_file_rejects_wrong_types(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("group_size: true\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="must be an integer"):
        load_config_file(path)

    path.write_text("little_endian: 1\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="true or false"):
        load_config_file(path)


def test_load_config_file_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="must contain a mapping"):
        load_config_file(path)


def test_load_config_file_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("octets_per_line: [8\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="invalid config file"):
        load_config_file(path)
