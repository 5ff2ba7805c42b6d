"""Parser for wait condition expressions.

The grammar is:

    condition         = "delete" | named_condition | jsonpath_condition
    named_condition   = "condition=" NAME ["=" VALUE]
    jsonpath_condition = "jsonpath=" PATH "=" VALUE

"delete" is matched case-insensitively; the "condition=" and "jsonpath="
prefixes are case-sensitive.
"""

from __future__ import annotations

import logging

from kubewait.conditions.errors import (
    MalformedJSONPathExpressionError,
    UnrecognizedConditionError,
)
from kubewait.conditions.jsonpath import compile_jsonpath
from kubewait.conditions.normalize import process_jsonpath_input
from kubewait.conditions.types import (
    DEFAULT_CONDITION_VALUE,
    Condition,
    DeletionCondition,
    JSONPathCondition,
    NamedCondition,
)

logger = logging.getLogger(__name__)

DELETE_KEYWORD = "delete"
CONDITION_PREFIX = "condition="
JSONPATH_PREFIX = "jsonpath="


def parse_condition(source: str) -> Condition:
    """Parse a --for expression into a Condition.

    Args:
        source: The raw expression, e.g. ``condition=Ready=False``.

    Returns:
        DeletionCondition, NamedCondition or JSONPathCondition.

    Raises:
        MalformedJSONPathExpressionError: If a jsonpath condition does not
            contain exactly one "=" after the prefix.
        EmptyExpressionError: If the jsonpath is empty.
        EmptyConditionError: If the jsonpath expected value is empty.
        ParseError: If the jsonpath is syntactically invalid.
        UnrecognizedConditionError: If no form matches.
    """
    if source.lower() == DELETE_KEYWORD:
        condition: Condition = DeletionCondition()

    elif source.startswith(CONDITION_PREFIX):
        condition = _parse_named_condition(source[len(CONDITION_PREFIX) :])

    elif source.startswith(JSONPATH_PREFIX):
        condition = _parse_jsonpath_condition(source)

    else:
        raise UnrecognizedConditionError(source)

    logger.debug("Parsed condition %r as %r", source, condition)
    return condition


def _parse_named_condition(rest: str) -> NamedCondition:
    """Split ``NAME[=VALUE]`` at the first "="."""
    name, sep, value = rest.partition("=")
    if not sep:
        return NamedCondition(name=name, value=DEFAULT_CONDITION_VALUE)
    return NamedCondition(name=name, value=value)


def _parse_jsonpath_condition(source: str) -> JSONPathCondition:
    """Parse ``jsonpath=PATH=VALUE``.

    The arity check is strict: a path containing "=" (as in a filter like
    ``[?(@.a=="x")]``) is rejected along with everything else that does
    not split into exactly three fields.
    """
    fields = source.split("=")
    if len(fields) != 3:
        raise MalformedJSONPathExpressionError(source=source)

    template, value = process_jsonpath_input(fields[1], fields[2])
    path = compile_jsonpath(template)
    return JSONPathCondition(path=path, value=value)
