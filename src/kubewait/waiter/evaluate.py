"""Condition functions applied by waiters to resource snapshots.

All functions are pure with respect to the waiter: any state they read
comes from the resource snapshot (or the getter) passed in, so they can
be called repeatedly and from several threads at once.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from kubewait.conditions.types import JSONPathCondition, NamedCondition
from kubewait.waiter.errors import NoMatchError, ResourceNotFoundError
from kubewait.waiter.types import (
    ConditionAccessor,
    EvaluationResult,
    ResourceInfo,
    WaitOptions,
)

logger = logging.getLogger(__name__)


def status_conditions(obj: Mapping[str, Any]) -> Iterable[Mapping[str, Any]]:
    """Return the entries of ``status.conditions``, or nothing if absent."""
    status = obj.get("status") or {}
    if not isinstance(status, Mapping):
        return []
    conditions = status.get("conditions") or []
    return [c for c in conditions if isinstance(c, Mapping)]


def format_value(value: Any) -> str:
    """Stringify a matched value for comparison with the expected value.

    Booleans render as ``true``/``false`` and integral floats without a
    fractional part, matching how they appear in JSON.
    """
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def current_object(
    info: ResourceInfo, options: WaitOptions
) -> Mapping[str, Any] | None:
    """Return the state to evaluate: refreshed via the getter if one is set."""
    if options.getter is None:
        return info.object
    return options.getter(info)


def is_deleted(info: ResourceInfo, options: WaitOptions) -> EvaluationResult:
    """Done once the resource is confirmed absent."""
    try:
        obj = current_object(info, options)
    except ResourceNotFoundError:
        return EvaluationResult(object=None, done=True)

    if obj is None:
        return EvaluationResult(object=None, done=True)
    return EvaluationResult(object=obj, done=False)


def is_condition_met(
    condition: NamedCondition,
    info: ResourceInfo,
    options: WaitOptions,
    accessor: ConditionAccessor = status_conditions,
    err_out: logging.Logger = logger,
) -> EvaluationResult:
    """Done once a status condition has the expected type and status.

    Both type and status are compared as exact strings. A resource with
    no conditions yet is not done.

    Raises:
        ResourceNotFoundError: If the getter reports the resource is gone.
    """
    obj = current_object(info, options)
    if obj is None:
        err_out.debug("%s: no state to evaluate yet", info.describe())
        return EvaluationResult(object=None, done=False)

    for entry in accessor(obj):
        if entry.get("type") != condition.name:
            continue
        status = entry.get("status")
        if status == condition.value:
            return EvaluationResult(object=obj, done=True)
        err_out.debug(
            "%s: condition %s is %r, waiting for %r",
            info.describe(),
            condition.name,
            status,
            condition.value,
        )

    return EvaluationResult(object=obj, done=False)


def is_jsonpath_condition_met(
    condition: JSONPathCondition,
    info: ResourceInfo,
    options: WaitOptions,
    err_out: logging.Logger = logger,
) -> EvaluationResult:
    """Done once the first value selected by the path equals the expected value.

    Raises:
        NoMatchError: If the path selects nothing in the current state.
        ResourceNotFoundError: If the getter reports the resource is gone.
    """
    obj = current_object(info, options)
    values = condition.path.find(obj) if obj is not None else []
    if not values:
        raise NoMatchError(condition.path, resource=info.describe())

    actual = format_value(values[0])
    if actual == condition.value:
        return EvaluationResult(object=obj, done=True)

    err_out.debug(
        "%s: %s is %r, waiting for %r",
        info.describe(),
        condition.path,
        actual,
        condition.value,
    )
    return EvaluationResult(object=obj, done=False)
