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

"""Structural validation of schemas.

A schema maps property names to field specifications, given either as the
dataclass variants from :mod:`schemacheck.fields` or in mapping form
(``{"type": "integer", "minValue": 0}``). Structural defects are programming
errors and always raise :class:`SchemaStructureError`, whatever the caller's
throwing mode.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from .exceptions import SchemaStructureError
from .fields import (
    ArrayField,
    BooleanField,
    FieldSpec,
    IntegerField,
    NumberField,
    ObjectField,
    StringField,
    field_from_mapping,
)

PATH_SEPARATOR = "->"

_FIELD_VARIANTS = (StringField, IntegerField, NumberField, BooleanField, ArrayField, ObjectField)


def _coerce_field(key: str, raw: Any, path_label: str) -> FieldSpec:
    if isinstance(raw, _FIELD_VARIANTS):
        return raw
    if not isinstance(raw, Mapping):
        raise SchemaStructureError(
            f"Property '{key}' must be a field specification, got {type(raw).__name__}", path_label
        )
    try:
        return field_from_mapping(raw)
    except SchemaStructureError as exc:
        raise type(exc)(f"Property '{key}': {exc.detail}", path_label) from exc


def normalize_schema(schema: Any, path_label: str = "root") -> Dict[str, FieldSpec]:
    """Check ``schema`` recursively and return it with every field as a dataclass variant.

    Nested object schemas are normalized as well, with ``path_label`` extended
    by the property name (``root->address``) so errors point at the defect.
    """
    if not isinstance(path_label, str):
        raise SchemaStructureError(f"Path label must be a string, got {type(path_label).__name__}", str(path_label))
    if not isinstance(schema, Mapping):
        raise SchemaStructureError(f"Schema must be a mapping, got {type(schema).__name__}", path_label)

    normalized: Dict[str, FieldSpec] = {}
    for key, raw in schema.items():
        if not isinstance(key, str) or not key:
            raise SchemaStructureError(f"Property names must be non-empty strings, got {key!r}", path_label)

        spec = _coerce_field(key, raw, path_label)
        if isinstance(spec, ObjectField):
            nested = normalize_schema(spec.schema, f"{path_label}{PATH_SEPARATOR}{key}")
            spec = ObjectField(schema=nested)
        normalized[key] = spec
    return normalized


def check_schema(schema: Any, path_label: str = "root") -> None:
    """Raise :class:`SchemaStructureError` if ``schema`` is not well-formed."""
    normalize_schema(schema, path_label)
