"""Serializer that converts Condition dataclasses back to --for strings.

Used by the CLI to echo the canonical form of what was parsed.
"""

from __future__ import annotations

from kubewait.conditions.parser import (
    CONDITION_PREFIX,
    DELETE_KEYWORD,
    JSONPATH_PREFIX,
)
from kubewait.conditions.types import (
    DEFAULT_CONDITION_VALUE,
    Condition,
    DeletionCondition,
    JSONPathCondition,
    NamedCondition,
)


def serialize_condition(condition: Condition) -> str:
    """Convert a Condition into its canonical --for expression.

    Args:
        condition: The condition to serialize.

    Returns:
        An expression that parses back to an equal condition.
    """
    if isinstance(condition, DeletionCondition):
        return DELETE_KEYWORD

    if isinstance(condition, NamedCondition):
        if condition.value == DEFAULT_CONDITION_VALUE:
            return f"{CONDITION_PREFIX}{condition.name}"
        return f"{CONDITION_PREFIX}{condition.name}={condition.value}"

    if isinstance(condition, JSONPathCondition):
        return f"{JSONPATH_PREFIX}{condition.path.template}={_quote(condition.value)}"

    raise TypeError(f"Unknown condition type: {type(condition).__name__}")


def _quote(value: str) -> str:
    """Quote values that would otherwise lose characters when re-parsed."""
    if value == "" or value[:1] in ("'", '"') or value[-1:] in ("'", '"'):
        if "'" in value:
            return f'"{value}"'
        return f"'{value}'"
    return value
