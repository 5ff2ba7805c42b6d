"""Condition types produced by parsing a --for expression.

Exactly one of these is produced per expression. The set is closed:
code dispatching on a Condition handles all three and raises TypeError
for anything else.
"""

from dataclasses import dataclass

from kubewait.conditions.jsonpath import CompiledPath

# Expected value of a named condition when none is given.
DEFAULT_CONDITION_VALUE = "true"


@dataclass(frozen=True)
class DeletionCondition:
    """Wait until the resource no longer exists."""


@dataclass(frozen=True)
class NamedCondition:
    """Wait until a status condition of the given type has the given status.

    Attributes:
        name: Condition type, e.g. "Ready" or "Available".
        value: Expected status string, compared exactly.
    """

    name: str
    value: str = DEFAULT_CONDITION_VALUE


@dataclass(frozen=True)
class JSONPathCondition:
    """Wait until the first value selected by a jsonpath equals value."""

    path: CompiledPath
    value: str


Condition = DeletionCondition | NamedCondition | JSONPathCondition
