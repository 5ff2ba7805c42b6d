"""Construction of waiters from parsed conditions."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import partial

from kubewait.conditions.parser import parse_condition
from kubewait.conditions.types import (
    Condition,
    DeletionCondition,
    JSONPathCondition,
    NamedCondition,
)
from kubewait.logging.context import resource_context
from kubewait.waiter.errors import is_not_found
from kubewait.waiter.evaluate import (
    is_condition_met,
    is_deleted,
    is_jsonpath_condition_met,
    status_conditions,
)
from kubewait.waiter.types import (
    ConditionAccessor,
    ConditionFunc,
    ErrMatchFunc,
    EvaluationResult,
    ResourceInfo,
    WaitOptions,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Waiter:
    """Everything a wait loop needs to decide when a resource is done.

    Attributes:
        condition_fn: Called once per resource on every poll.
        ignore_error_fns: Predicates for fetch errors the resource finder
            suppresses before the wait loop starts.
        allow_no_resources: If True, finding no resources at all does not
            fail the wait.
    """

    condition_fn: ConditionFunc
    ignore_error_fns: tuple[ErrMatchFunc, ...] = field(default_factory=tuple)
    allow_no_resources: bool = False

    def evaluate(
        self, info: ResourceInfo, options: WaitOptions | None = None
    ) -> EvaluationResult:
        """Evaluate the condition against one resource.

        Log records emitted during evaluation are tagged with the resource.
        """
        with resource_context(info.describe()):
            return self.condition_fn(info, options or WaitOptions())

    def should_ignore(self, err: BaseException) -> bool:
        """Return True if any ignore predicate matches err."""
        return any(match(err) for match in self.ignore_error_fns)


def build_waiter(
    condition: Condition,
    *,
    err_out: logging.Logger | None = None,
    allow_no_resources: bool = False,
    accessor: ConditionAccessor = status_conditions,
) -> Waiter:
    """Build a Waiter for a parsed condition.

    Args:
        condition: Output of parse_condition().
        err_out: Logger receiving diagnostics about unmet conditions.
        allow_no_resources: Passed through to the Waiter.
        accessor: Reads status conditions from a resource object; only
            used for named conditions.

    Returns:
        The Waiter. Only deletion waiters ignore not-found errors.

    Raises:
        TypeError: If condition is not one of the known condition types.
    """
    sink = err_out or logger

    if isinstance(condition, DeletionCondition):
        return Waiter(
            condition_fn=is_deleted,
            ignore_error_fns=(is_not_found,),
            allow_no_resources=allow_no_resources,
        )

    if isinstance(condition, NamedCondition):
        return Waiter(
            condition_fn=partial(
                is_condition_met, condition, accessor=accessor, err_out=sink
            ),
            allow_no_resources=allow_no_resources,
        )

    if isinstance(condition, JSONPathCondition):
        return Waiter(
            condition_fn=partial(is_jsonpath_condition_met, condition, err_out=sink),
            allow_no_resources=allow_no_resources,
        )

    raise TypeError(f"Unknown condition type: {type(condition).__name__}")


def waiter_for(
    source: str,
    *,
    err_out: logging.Logger | None = None,
    allow_no_resources: bool = False,
) -> Waiter:
    """Parse a --for expression and build its Waiter.

    Raises:
        ConditionError: If the expression is invalid.
    """
    return build_waiter(
        parse_condition(source),
        err_out=err_out,
        allow_no_resources=allow_no_resources,
    )
