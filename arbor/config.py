# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Configuration is read from environment variables first, then from an `arbor.yaml`
file in the working directory, and finally falls back to the defaults below.
"""

import datetime
import typing
from os import environ
from pathlib import Path

from arbor.exceptions import InvalidConfigurationError

_config_values: dict = {}

# we need a preliminary version of this variable
_ARBOR_DEBUG = environ.get("ARBOR_DEBUG") is not None

_FALSY_VALUES = {"", "0", "false", "no", "off", "none"}


def parse_yaml(yaml_str):
    def line_value(value):
        value = value.strip()
        if value.isdigit():
            value = int(value)
        elif value.replace(".", "", 1).isdigit():
            value = float(value)
        elif value.lower() == "true":
            return True
        elif value.lower() == "false":
            return False
        elif value.lower() == "none":
            return None
        elif value.startswith("["):
            return [val.strip() for val in value[1:-1].split(",")]
        return value

    result: dict = {}
    lines = yaml_str.strip().split("\n")
    value: typing.Any = ""
    in_list = False
    list_key = ""
    for line in lines:
        ## remove comments
        line = line.split("#")[0]
        line = line.strip()
        if not line:
            continue
        if in_list:
            if line.startswith("- "):
                result[list_key].append(line_value(line[2:]))
                continue
            in_list = False
        key, value = line.split(":", 1)
        if not value.strip():
            in_list = True
            list_key = key.strip()
            result[list_key] = []
        else:
            result[key.strip()] = line_value(value)
    return result


def as_bool(value) -> bool:
    """
    Environment variables are always strings, so 'false' would otherwise be truthy.
    """
    if isinstance(value, str):
        return value.strip().lower() not in _FALSY_VALUES
    return bool(value)


def parse_minimum_degree(value, config_item: str = "ARBOR_MINIMUM_DEGREE") -> int:
    """
    Validate a minimum degree.

    A degree of 1 would allow nodes with a single child and unbounded growth, so the
    smallest degree we accept is 2 (a 2-3-4 tree).

    Parameters:
        value: int or str
            The candidate degree, strings are accepted as they come from the environment.
        config_item: str
            The name to report if the value is rejected.

    Returns:
        int: the validated minimum degree
    """
    error = InvalidConfigurationError(
        config_item=config_item,
        provided_value=value,
        valid_value_description="an integer of at least 2.",
    )
    if isinstance(value, bool):
        raise error
    try:
        degree = int(value)
    except (TypeError, ValueError):
        raise error from None
    if isinstance(value, float) and degree != value:
        raise error
    if degree < 2:
        raise error
    return degree


try:
    _config_path = Path(".") / "arbor.yaml"
    if _config_path.exists():
        with open(_config_path, "r") as _config_file:
            _config_values = parse_yaml(_config_file.read())
        if _ARBOR_DEBUG:
            print(f"{datetime.datetime.now()} [LOADER] Loading config from {_config_path}")
except Exception as exception:  # pragma: no cover # it doesn't matter why - just use the defaults
    if _ARBOR_DEBUG:
        print(f"{datetime.datetime.now()} [LOADER] Config file {_config_path} not used - {exception}")


def get(key, default=None):
    value = environ.get(key)
    if value is None:
        value = _config_values.get(key, default)
    return value


# fmt:off

# debug mode
ARBOR_DEBUG: bool = as_bool(get("ARBOR_DEBUG", False))
# minimum degree (t) used when a tree is created without one, checked when the tree is created
DEFAULT_MINIMUM_DEGREE = get("ARBOR_MINIMUM_DEGREE", 2)
# check every structural invariant after each insert, slow but useful when debugging
VALIDATE_ON_INSERT: bool = as_bool(get("ARBOR_VALIDATE_ON_INSERT", ARBOR_DEBUG))

# fmt:on
