import json

import pytest

from touchstone_reader.config import DEFAULTS, Config, load_config


def test_defaults():
    config = load_config()
    assert config.data == DEFAULTS
    assert config.strict_option_line is False
    assert config.num_ports is None
    assert config.check_port_count is True
    assert config.encoding == "utf-8"
    assert Config().data == DEFAULTS


def test_json_then_overrides(tmp_path):
    fp = tmp_path / "reader.json"
    fp.write_text(json.dumps({"num_ports": 2, "strict_option_line": True}))
    config = load_config(str(fp), {"num_ports": 4})
    assert config.num_ports == 4
    assert config.strict_option_line is True


@pytest.mark.parametrize("overrides", [
    {"num_ports": 0},
    {"num_ports": "2"},
    {"num_ports": True},
    {"check_port_count": "yes"},
    {"encoding": ""},
    {"unknown_key": 1},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(ValueError):
        load_config(overrides=overrides)


def test_defaults_not_mutated():
    load_config(overrides={"num_ports": 3})
    assert DEFAULTS["num_ports"] is None


def test_json_must_be_object(tmp_path):
    fp = tmp_path / "reader.json"
    fp.write_text("[1, 2]")
    with pytest.raises(ValueError):
        load_config(str(fp))
