"""Waiters: evaluators applied to resource snapshots by a wait loop.

Re-exports the public API.
"""

from kubewait.waiter.errors import (
    EvaluationError,
    NoMatchError,
    ResourceNotFoundError,
    is_not_found,
)
from kubewait.waiter.evaluate import (
    format_value,
    is_condition_met,
    is_deleted,
    is_jsonpath_condition_met,
    status_conditions,
)
from kubewait.waiter.factory import Waiter, build_waiter, waiter_for
from kubewait.waiter.types import (
    ConditionAccessor,
    ConditionFunc,
    ErrMatchFunc,
    EvaluationResult,
    ResourceGetter,
    ResourceInfo,
    WaitOptions,
)

__all__ = [
    # Exceptions
    "EvaluationError",
    "NoMatchError",
    "ResourceNotFoundError",
    "is_not_found",
    # Types
    "ConditionAccessor",
    "ConditionFunc",
    "ErrMatchFunc",
    "EvaluationResult",
    "ResourceGetter",
    "ResourceInfo",
    "WaitOptions",
    # Evaluation
    "format_value",
    "is_condition_met",
    "is_deleted",
    "is_jsonpath_condition_met",
    "status_conditions",
    # Factory
    "Waiter",
    "build_waiter",
    "waiter_for",
]
