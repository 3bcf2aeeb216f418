# Copyright 2026 TIER IV, inc.
#
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

"""Custom exceptions for the option grammar."""

from typing import Optional


class OptionGrammarError(Exception):
    """Base exception for option-grammar related errors."""
    pass


class SchemaDefinitionError(OptionGrammarError):
    """Exception raised when a schema declaration cannot be built."""
    pass


class CatalogError(OptionGrammarError):
    """Exception raised for catalog loading errors."""
    pass


class FormatVersionError(CatalogError):
    """Exception raised when a catalog's format version is incompatible."""
    pass


class OptionValidationError(OptionGrammarError, ValueError):
    """Exception raised when supplied option values do not match a schema."""
    pass


class FormatError(OptionValidationError):
    """A value's shape does not match a leaf or composite contract."""

    def __init__(self, expectation: str, context: str):
        self.expectation = expectation
        self.context_description = context
        super().__init__(f"expected {expectation} for {context}")


class UnexpectedOptionError(OptionValidationError):
    """A supplied top-level option has no matching schema node."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unexpected option {name}")


class UnexpectedKeyError(OptionValidationError):
    """A supplied structure key has no matching member node."""

    def __init__(self, name: str, context: str):
        self.name = name
        self.context_description = context
        super().__init__(f"unexpected key {name} for {context}")


class MissingRequiredOptionError(OptionValidationError):
    """A required top-level option was not supplied."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"missing required option {name}")


class MissingRequiredKeyError(OptionValidationError):
    """A required structure member was not supplied."""

    def __init__(self, name: str, context: Optional[str]):
        self.name = name
        self.context_description = context
        super().__init__(f"missing required key {name} for {context}")
