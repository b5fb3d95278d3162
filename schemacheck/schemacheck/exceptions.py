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

"""Custom exceptions for the schemacheck validator."""

from typing import Tuple


class SchemaCheckError(Exception):
    """Base exception for schemacheck related errors."""
    pass


class ValidationError(SchemaCheckError):
    """Exception raised when a value does not conform to its schema.

    ``path`` holds the property keys leading to the failing field, outermost
    first. It grows as the error is re-raised through nested objects.
    """

    def __init__(self, message: str, path: Tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.path = tuple(path)

    def with_context(self, key: str) -> "ValidationError":
        """Return a copy of this error prefixed with the enclosing property."""
        return ValidationError(
            f"Error in property '{key}': {self.message}",
            path=(key,) + self.path,
        )


class SchemaStructureError(ValidationError):
    """Exception raised when the schema itself is malformed."""

    def __init__(self, detail: str, path_label: str = ""):
        super().__init__(f"{path_label}: {detail}" if path_label else detail)
        self.detail = detail
        self.path_label = path_label


class RuleDefinitionError(SchemaStructureError):
    """Exception raised when a rule attached to a field has no name."""
    pass


class InvalidInputError(ValidationError):
    """Exception raised when the schema or the object to validate is missing."""
    pass


class SchemaLoadError(SchemaStructureError):
    """Exception raised when a schema document cannot be loaded."""
    pass


class FormatVersionError(SchemaLoadError):
    """Exception raised when a schema document's format version is incompatible."""
    pass
