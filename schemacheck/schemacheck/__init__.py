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

"""Recursive, declarative schema validation for mappings."""

from .exceptions import (
    FormatVersionError,
    InvalidInputError,
    RuleDefinitionError,
    SchemaCheckError,
    SchemaLoadError,
    SchemaStructureError,
    ValidationError,
)
from .fields import (
    ArrayField,
    BooleanField,
    FieldType,
    IntegerField,
    NumberField,
    ObjectField,
    StringField,
)
from .loader import SCHEMA_FORMAT_VERSION, load_schema, schema_from_document
from .rules import Rule, RuleRegistry, rule
from .structure import check_schema, normalize_schema
from .validator import validate, validate_schema

__all__ = [
    "ArrayField",
    "BooleanField",
    "FieldType",
    "FormatVersionError",
    "IntegerField",
    "InvalidInputError",
    "NumberField",
    "ObjectField",
    "Rule",
    "RuleDefinitionError",
    "RuleRegistry",
    "SCHEMA_FORMAT_VERSION",
    "SchemaCheckError",
    "SchemaLoadError",
    "SchemaStructureError",
    "StringField",
    "ValidationError",
    "check_schema",
    "load_schema",
    "normalize_schema",
    "rule",
    "schema_from_document",
    "validate",
    "validate_schema",
]
