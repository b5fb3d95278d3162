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

"""Per-type value validators.

Every validator checks the value type first, then bounds, then custom rules,
and stops at the first violation. In throwing mode a violation raises
:class:`ValidationError`; otherwise the validator returns False.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict

from .exceptions import ValidationError
from .fields import ArrayField, BooleanField, FieldType, IntegerField, NumberField, StringField
from .rules import evaluate_rules

logger = logging.getLogger(__name__)


def _reject(message: str, throw_mode: bool) -> bool:
    if throw_mode:
        raise ValidationError(message)
    logger.debug(f"Value rejected: {message}")
    return False


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


TYPE_CHECKS: Dict[str, Callable[[Any], bool]] = {
    FieldType.STRING: is_string,
    FieldType.INTEGER: is_integer,
    FieldType.NUMBER: is_number,
    FieldType.BOOLEAN: is_boolean,
    FieldType.ARRAY: is_array,
    FieldType.OBJECT: is_object,
}


def validate_string(spec: StringField, value: Any, throw_mode: bool = False) -> bool:
    if not is_string(value):
        return _reject("Value is not a string", throw_mode)
    if spec.min_length is not None and len(value) < spec.min_length:
        return _reject(f"Value length {len(value)} is less than the minimum length {spec.min_length}", throw_mode)
    if spec.max_length is not None and len(value) > spec.max_length:
        return _reject(f"Value length {len(value)} is greater than the maximum length {spec.max_length}", throw_mode)
    if spec.pattern is not None and spec.pattern.search(value) is None:
        return _reject(f"Value does not match pattern '{spec.pattern.pattern}'", throw_mode)
    return evaluate_rules(spec.rules, value, throw_mode)


def _check_bounds(spec, value: Any, throw_mode: bool) -> bool:
    if spec.min_value is not None and value < spec.min_value:
        return _reject(f"Value {value} is less than the minimum allowed {spec.min_value}", throw_mode)
    if spec.max_value is not None and value > spec.max_value:
        return _reject(f"Value {value} is greater than the maximum allowed {spec.max_value}", throw_mode)
    return True


def validate_integer(spec: IntegerField, value: Any, throw_mode: bool = False) -> bool:
    if not is_integer(value):
        return _reject("Value is not an integer", throw_mode)
    if not _check_bounds(spec, value, throw_mode):
        return False
    return evaluate_rules(spec.rules, value, throw_mode)


def validate_number(spec: NumberField, value: Any, throw_mode: bool = False) -> bool:
    if not is_number(value):
        return _reject("Value is not a number", throw_mode)
    if not _check_bounds(spec, value, throw_mode):
        return False
    return evaluate_rules(spec.rules, value, throw_mode)


def validate_boolean(spec: BooleanField, value: Any, throw_mode: bool = False) -> bool:
    if not is_boolean(value):
        return _reject("Value is not a boolean", throw_mode)
    return True


def validate_array(spec: ArrayField, value: Any, throw_mode: bool = False) -> bool:
    if not is_array(value):
        return _reject("Value is not an array", throw_mode)
    if spec.min_length is not None and len(value) < spec.min_length:
        return _reject(f"Array size {len(value)} is less than the minimum size {spec.min_length}", throw_mode)
    if spec.max_length is not None and len(value) > spec.max_length:
        return _reject(f"Array size {len(value)} is greater than the maximum size {spec.max_length}", throw_mode)
    if spec.typed is not None:
        check = TYPE_CHECKS[spec.typed]
        for idx, item in enumerate(value):
            if not check(item):
                return _reject(f"Array element at index {idx} is not of type '{spec.typed}'", throw_mode)
    # Rules see the whole sequence, not individual elements.
    return evaluate_rules(spec.rules, value, throw_mode)


VALIDATORS: Dict[str, Callable[..., bool]] = {
    FieldType.STRING: validate_string,
    FieldType.INTEGER: validate_integer,
    FieldType.NUMBER: validate_number,
    FieldType.BOOLEAN: validate_boolean,
    FieldType.ARRAY: validate_array,
}
