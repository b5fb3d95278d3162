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

"""Validation driver: walks a schema and dispatches each property to its validator."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from .exceptions import InvalidInputError, SchemaStructureError, ValidationError
from .fields import FieldSpec, ObjectField
from .structure import normalize_schema
from .type_validators import VALIDATORS, is_object

logger = logging.getLogger(__name__)


def _validate_field(spec: FieldSpec, value: Any, throw_mode: bool) -> bool:
    if isinstance(spec, ObjectField):
        if not is_object(value):
            if throw_mode:
                raise ValidationError("Value is not an object")
            logger.debug("Value rejected: Value is not an object")
            return False
        return _validate_object(spec.schema, value, throw_mode)
    return VALIDATORS[spec.type](spec, value, throw_mode)


def _validate_object(schema: Dict[str, FieldSpec], obj: Mapping[str, Any], throw_mode: bool) -> bool:
    # Only schema keys are inspected; extra keys in obj are ignored.
    for key, spec in schema.items():
        if key not in obj:
            if throw_mode:
                raise ValidationError(f"Missing required property '{key}'", path=(key,))
            logger.debug(f"Missing required property '{key}'")
            return False
        try:
            if not _validate_field(spec, obj[key], throw_mode):
                logger.debug(f"Property '{key}' failed validation")
                return False
        except SchemaStructureError:
            raise
        except ValidationError as exc:
            raise exc.with_context(key) from None
    return True


def validate(schema: Mapping[str, Any], obj: Mapping[str, Any], throw_mode: bool = False) -> bool:
    """Validate ``obj`` against ``schema``.

    Args:
        schema: Mapping of property name to field specification.
        obj: Mapping to validate. Keys not declared in ``schema`` are ignored.
        throw_mode: Raise on the first data violation instead of returning False.

    Returns:
        True if every declared property is present and valid, False otherwise.

    Raises:
        InvalidInputError: If ``schema`` or ``obj`` is None.
        SchemaStructureError: If ``schema`` is malformed, in either mode.
        ValidationError: On the first data violation when ``throw_mode`` is set.
            The message is prefixed with every enclosing property name.
    """
    if schema is None:
        raise InvalidInputError("Schema cannot be None")
    if obj is None:
        raise InvalidInputError("Object cannot be None")

    normalized = normalize_schema(schema)

    if not is_object(obj):
        if throw_mode:
            raise ValidationError(f"Object must be a mapping, got {type(obj).__name__}")
        logger.debug(f"Object must be a mapping, got {type(obj).__name__}")
        return False

    return _validate_object(normalized, obj, throw_mode)


validate_schema = validate
