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
Bespoke error types for Arbor.

Exception Hierarchy:

Exception
 └── Error
     └── TreeError
         ├── InvalidConfigurationError
         └── InvalidInternalStateError
"""


# ======================== Begin Superclasses ========================
# These should not be thrown directly
class Error(Exception):
    """
    Exception that is the base class of all other error exceptions. You can use this to
    catch all errors with one single except statement.
    """


class TreeError(Error):
    """
    Exception raised for errors that are related to a tree, either how it was set up or
    the state it has been left in.
    """


# ======================== End Superclasses ==========================


# ======================== Begin Configuration & Internal Errors ==========================


class InvalidConfigurationError(TreeError):
    """Exception raised for invalid configuration."""

    def __init__(
        self, *, config_item: str, provided_value: str, valid_value_description: str = None
    ):
        DISPLAY_LIMIT: int = 32

        self.config_item = config_item
        self.provided_value = provided_value
        self.valid_value_description = valid_value_description

        provided_value = str(provided_value)
        message = f"Value of '{provided_value[:DISPLAY_LIMIT]}{'...' if len(provided_value) > DISPLAY_LIMIT else ''}' for '{config_item}' is not valid."
        if valid_value_description:
            message += f" Value should be {valid_value_description}"
        super().__init__(message)


class InvalidInternalStateError(TreeError):
    """
    Exception raised for invalid internal states.

    These are contract violations inside the tree, for example splitting a node which
    isn't full, rather than errors a caller can cause with valid keys.
    """


# ======================== End Configuration & Internal Errors ==========================
