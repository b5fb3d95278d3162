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

"""Field specifications: one frozen dataclass per supported type.

Each variant carries only the constraints that apply to its type and checks
their shape on construction, raising :class:`SchemaStructureError`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .exceptions import SchemaStructureError
from .rules import Rule


class FieldType:
    """Recognized field type tags."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def get_all_types(cls) -> Tuple[str, ...]:
        return (cls.STRING, cls.INTEGER, cls.NUMBER, cls.BOOLEAN, cls.ARRAY, cls.OBJECT)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_numeric(name: str, value: Any) -> None:
    if value is not None and not _is_number(value):
        raise SchemaStructureError(f"'{name}' must be a number, got {type(value).__name__}")


def _check_rules(rules: Any) -> None:
    if not isinstance(rules, (list, tuple)):
        raise SchemaStructureError(f"'rules' must be a sequence of Rule, got {type(rules).__name__}")
    for item in rules:
        if not isinstance(item, Rule):
            raise SchemaStructureError(f"'rules' entries must be Rule instances, got {type(item).__name__}")


@dataclass(frozen=True)
class StringField:
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional["re.Pattern[str]"] = None
    rules: Tuple[Rule, ...] = ()

    type = FieldType.STRING

    def __post_init__(self) -> None:
        _check_numeric("minLength", self.min_length)
        _check_numeric("maxLength", self.max_length)
        if self.pattern is not None and not isinstance(self.pattern, re.Pattern):
            raise SchemaStructureError("'pattern' must be a compiled regular expression")
        if self.pattern is not None and isinstance(self.pattern.pattern, bytes):
            raise SchemaStructureError("'pattern' must be a compiled str regular expression, got a bytes pattern")
        _check_rules(self.rules)


@dataclass(frozen=True)
class IntegerField:
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    rules: Tuple[Rule, ...] = ()

    type = FieldType.INTEGER

    def __post_init__(self) -> None:
        _check_numeric("minValue", self.min_value)
        _check_numeric("maxValue", self.max_value)
        _check_rules(self.rules)


@dataclass(frozen=True)
class NumberField:
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None
    rules: Tuple[Rule, ...] = ()

    type = FieldType.NUMBER

    def __post_init__(self) -> None:
        _check_numeric("minValue", self.min_value)
        _check_numeric("maxValue", self.max_value)
        _check_rules(self.rules)


@dataclass(frozen=True)
class BooleanField:
    type = FieldType.BOOLEAN


@dataclass(frozen=True)
class ArrayField:
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    typed: Optional[str] = None
    rules: Tuple[Rule, ...] = ()

    type = FieldType.ARRAY

    def __post_init__(self) -> None:
        _check_numeric("minLength", self.min_length)
        _check_numeric("maxLength", self.max_length)
        if self.typed is not None and self.typed not in FieldType.get_all_types():
            raise SchemaStructureError(f"Element type '{self.typed}' is not valid")
        _check_rules(self.rules)


@dataclass(frozen=True)
class ObjectField:
    schema: Mapping[str, Any]

    type = FieldType.OBJECT

    def __post_init__(self) -> None:
        if not isinstance(self.schema, Mapping):
            raise SchemaStructureError(f"Nested 'schema' must be a mapping, got {type(self.schema).__name__}")


FieldSpec = Union[StringField, IntegerField, NumberField, BooleanField, ArrayField, ObjectField]

_FIELD_CLASSES: Dict[str, type] = {
    FieldType.STRING: StringField,
    FieldType.INTEGER: IntegerField,
    FieldType.NUMBER: NumberField,
    FieldType.BOOLEAN: BooleanField,
    FieldType.ARRAY: ArrayField,
    FieldType.OBJECT: ObjectField,
}

# Mapping-form key -> dataclass attribute, per type
_CONSTRAINT_KEYS: Dict[str, Dict[str, str]] = {
    FieldType.STRING: {"minLength": "min_length", "maxLength": "max_length", "pattern": "pattern", "rules": "rules"},
    FieldType.INTEGER: {"minValue": "min_value", "maxValue": "max_value", "rules": "rules"},
    FieldType.NUMBER: {"minValue": "min_value", "maxValue": "max_value", "rules": "rules"},
    FieldType.BOOLEAN: {},
    FieldType.ARRAY: {"minLength": "min_length", "maxLength": "max_length", "typed": "typed", "rules": "rules"},
    FieldType.OBJECT: {"schema": "schema"},
}


def field_from_mapping(raw: Mapping[str, Any]) -> FieldSpec:
    """Build a field variant from its mapping form, e.g. ``{"type": "string", "minLength": 2}``.

    Keys that do not apply to the declared type are ignored. The nested schema
    of an object field is kept as given; the structure validator recurses into it.
    """
    field_type = raw.get("type")
    if field_type is None:
        raise SchemaStructureError("Field has no type defined")
    if field_type not in _FIELD_CLASSES:
        raise SchemaStructureError(f"Type '{field_type}' is not valid")

    if field_type == FieldType.OBJECT and raw.get("schema") is None:
        raise SchemaStructureError("Field of type 'object' has no schema defined")

    kwargs: Dict[str, Any] = {}
    for key, attr in _CONSTRAINT_KEYS[field_type].items():
        value = raw.get(key)
        if value is None:
            continue
        if attr == "rules" and isinstance(value, list):
            value = tuple(value)
        kwargs[attr] = value
    return _FIELD_CLASSES[field_type](**kwargs)
