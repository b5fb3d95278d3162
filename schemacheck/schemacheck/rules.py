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

"""Custom predicate rules attached to schema fields."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional

from .exceptions import RuleDefinitionError, SchemaStructureError, ValidationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A named predicate evaluated against a field value.

    ``message`` replaces the generated failure message when set.
    """

    name: Optional[str]
    predicate: Callable[[Any], Any]
    message: Optional[str] = None

    def __call__(self, value: Any) -> bool:
        return bool(self.predicate(value))

    def failure_message(self) -> str:
        if self.message is not None:
            return self.message
        return f"Value does not satisfy rule '{self.name}'"


def rule(name: Optional[str] = None, message: Optional[str] = None) -> Callable[[Callable[[Any], Any]], Rule]:
    """Decorator turning a predicate function into a :class:`Rule`.

    The rule name defaults to the function name.

    Example::

        @rule(message="Value must be even")
        def even(value):
            return value % 2 == 0
    """

    def _wrap(func: Callable[[Any], Any]) -> Rule:
        return Rule(name=name or func.__name__, predicate=func, message=message)

    return _wrap


def evaluate_rules(rules: Iterable[Rule], value: Any, throw_mode: bool) -> bool:
    """Run ``rules`` in order against ``value``, stopping at the first failure.

    An unnamed rule always raises :class:`RuleDefinitionError`. A failing rule
    raises :class:`ValidationError` in throwing mode and returns False otherwise.
    """
    for item in rules:
        if not item.name:
            raise RuleDefinitionError("The name of one of the rules is not defined")
        if item(value):
            continue
        message = item.failure_message()
        if throw_mode:
            raise ValidationError(message)
        logger.debug(f"Rule '{item.name}' rejected value: {message}")
        return False
    return True


class RuleRegistry:
    """Caller-owned lookup of rules by name.

    Schema documents reference rules by name; the loader resolves those names
    through a registry passed in explicitly.
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules: Dict[str, Rule] = {}
        for item in rules or ():
            self.register(item)

    def register(self, item: Rule) -> Rule:
        if not isinstance(item, Rule):
            raise SchemaStructureError(f"Only Rule instances can be registered, got {type(item).__name__}")
        if not item.name:
            raise RuleDefinitionError("Cannot register a rule without a name")
        if item.name in self._rules:
            raise SchemaStructureError(f"Rule '{item.name}' is already registered")
        self._rules[item.name] = item
        return item

    def get(self, name: str) -> Rule:
        if name not in self._rules:
            raise SchemaStructureError(f"Unknown rule '{name}'. Registered rules: {self.names()}")
        return self._rules[name]

    def names(self) -> List[str]:
        return sorted(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)
