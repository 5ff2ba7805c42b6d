"""Wait condition expressions.

Provides parse_condition() to convert --for expressions like
'condition=Ready' or 'jsonpath={.status.phase}=Running' into Condition
dataclasses, and serialize_condition() for the reverse operation.
"""

from kubewait.conditions.errors import (
    ConditionError,
    EmptyConditionError,
    EmptyExpressionError,
    MalformedJSONPathExpressionError,
    ParseError,
    UnrecognizedConditionError,
)
from kubewait.conditions.jsonpath import (
    CompiledPath,
    compile_jsonpath,
    relax_jsonpath_expression,
)
from kubewait.conditions.normalize import process_jsonpath_input
from kubewait.conditions.parser import parse_condition
from kubewait.conditions.serializer import serialize_condition
from kubewait.conditions.types import (
    Condition,
    DeletionCondition,
    JSONPathCondition,
    NamedCondition,
)

__all__ = [
    # Errors
    "ConditionError",
    "EmptyConditionError",
    "EmptyExpressionError",
    "MalformedJSONPathExpressionError",
    "ParseError",
    "UnrecognizedConditionError",
    # Paths
    "CompiledPath",
    "compile_jsonpath",
    "process_jsonpath_input",
    "relax_jsonpath_expression",
    # Conditions
    "Condition",
    "DeletionCondition",
    "JSONPathCondition",
    "NamedCondition",
    "parse_condition",
    "serialize_condition",
]
