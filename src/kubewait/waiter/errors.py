"""Evaluation exception classes.

These are the only errors a waiter's condition function produces; all
expression errors surface earlier, while parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kubewait.conditions.jsonpath import CompiledPath
    from kubewait.waiter.types import ResourceInfo


class EvaluationError(Exception):
    """Base class for evaluation errors."""

    pass


class NoMatchError(EvaluationError):
    """The jsonpath selected nothing in the current snapshot.

    Reported per poll. Whether to keep polling is up to the caller.
    """

    def __init__(self, path: CompiledPath, resource: str | None = None) -> None:
        self.path = path
        self.resource = resource
        msg = f"given jsonpath expression does not match any value: {path}"
        if resource:
            msg += f" (resource: {resource})"
        super().__init__(msg)


class ResourceNotFoundError(EvaluationError):
    """The resource does not exist (anymore)."""

    def __init__(self, info: ResourceInfo) -> None:
        self.info = info
        super().__init__(f"{info.describe()} not found")


def is_not_found(err: BaseException) -> bool:
    """Error predicate matching ResourceNotFoundError."""
    return isinstance(err, ResourceNotFoundError)
