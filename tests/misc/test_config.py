import importlib
import os
import sys

sys.path.insert(1, os.path.join(sys.path[0], "../.."))

import pytest

from arbor import BTree
from arbor.config import as_bool
from arbor.config import get
from arbor.config import parse_minimum_degree
from arbor.config import parse_yaml
from arbor.exceptions import InvalidConfigurationError


def test_parse_yaml_basic():
    yaml_str = """
    ARBOR_MINIMUM_DEGREE: 3
    ARBOR_DEBUG: true
    ratio: 4.56
    name: arbor
    tags: [one, two, three]
    """
    result = parse_yaml(yaml_str)
    assert result == {
        "ARBOR_MINIMUM_DEGREE": 3,
        "ARBOR_DEBUG": True,
        "ratio": 4.56,
        "name": "arbor",
        "tags": ["one", "two", "three"],
    }


def test_parse_yaml_with_comments():
    yaml_str = """
    key1: value1 # this is a comment
    key2: 123
    # this is a whole line comment
    key3: false
    """
    result = parse_yaml(yaml_str)
    assert result == {"key1": "value1", "key2": 123, "key3": False}


def test_parse_yaml_none_value():
    assert parse_yaml("key: none") == {"key": None}


def test_parse_yaml_list_dash():
    yaml_str = """
    key:
      - item1
      - 2
      - item3
    after: 1
    """
    result = parse_yaml(yaml_str)
    assert result == {"key": ["item1", 2, "item3"], "after": 1}


def test_get_default_value():
    assert get("NON_EXISTENT_KEY", default="default_value") == "default_value"


def test_get_prefers_environment(monkeypatch):
    monkeypatch.setenv("ARBOR_TEST_SETTING", "from-env")
    assert get("ARBOR_TEST_SETTING", default="default") == "from-env"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", True),
        ("1", True),
        ("yes", True),
        ("false", False),
        ("False", False),
        ("0", False),
        ("", False),
        ("off", False),
        (True, True),
        (False, False),
        (None, False),
    ],
)
def test_as_bool(value, expected):
    assert as_bool(value) is expected


@pytest.mark.parametrize("value, expected", [(2, 2), ("3", 3), (" 4 ", 4), (5.0, 5), (64, 64)])
def test_parse_minimum_degree(value, expected):
    assert parse_minimum_degree(value) == expected


@pytest.mark.parametrize("value", [1, 0, -1, "1", "two", "", None, 2.5, True, False])
def test_parse_minimum_degree_invalid(value):
    with pytest.raises(InvalidConfigurationError) as err:
        parse_minimum_degree(value)
    assert err.value.config_item == "ARBOR_MINIMUM_DEGREE"
    assert err.value.provided_value == value


def test_invalid_configuration_message():
    err = InvalidConfigurationError(
        config_item="minimum_degree", provided_value=1, valid_value_description="at least 2."
    )
    assert str(err) == "Value of '1' for 'minimum_degree' is not valid. Value should be at least 2."


def test_invalid_configuration_message_truncated():
    err = InvalidConfigurationError(config_item="minimum_degree", provided_value="x" * 40)
    assert str(err) == f"Value of '{'x' * 32}...' for 'minimum_degree' is not valid."


@pytest.fixture
def reload_config(monkeypatch):
    """Reload the config module once a test has changed its environment."""
    import arbor.config

    monkeypatch.delenv("ARBOR_MINIMUM_DEGREE", raising=False)
    yield lambda: importlib.reload(arbor.config)

    monkeypatch.undo()
    importlib.reload(arbor.config)


def test_minimum_degree_from_environment(monkeypatch, reload_config):
    monkeypatch.setenv("ARBOR_MINIMUM_DEGREE", "3")
    reload_config()
    assert BTree().minimum_degree == 3
    assert BTree(2).minimum_degree == 2


def test_minimum_degree_from_config_file(tmp_path, monkeypatch, reload_config):
    (tmp_path / "arbor.yaml").write_text("# arbor settings\nARBOR_MINIMUM_DEGREE: 3\n")
    monkeypatch.chdir(tmp_path)
    reload_config()
    assert BTree().minimum_degree == 3


def test_environment_overrides_config_file(tmp_path, monkeypatch, reload_config):
    (tmp_path / "arbor.yaml").write_text("ARBOR_MINIMUM_DEGREE: 3\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ARBOR_MINIMUM_DEGREE", "5")
    reload_config()
    assert BTree().minimum_degree == 5


def test_invalid_minimum_degree_setting_is_raised_by_tree(monkeypatch, reload_config):
    monkeypatch.setenv("ARBOR_MINIMUM_DEGREE", "1")
    # loading the settings doesn't fail, only trees that use the setting do
    reload_config()
    assert BTree(4).minimum_degree == 4
    with pytest.raises(InvalidConfigurationError) as err:
        BTree()
    assert err.value.config_item == "ARBOR_MINIMUM_DEGREE"
    assert err.value.provided_value == "1"


if __name__ == "__main__":  # pragma: no cover
    from tests.tools import run_tests

    run_tests()
