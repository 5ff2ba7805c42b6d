"""Data types exchanged between waiters and the code that drives them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

# Predicate deciding whether an error from fetching resources is ignored.
ErrMatchFunc = Callable[[BaseException], bool]

# Returns the status condition entries of a resource object.
ConditionAccessor = Callable[[Mapping[str, Any]], Iterable[Mapping[str, Any]]]


@dataclass(frozen=True)
class ResourceInfo:
    """Snapshot of one resource being waited on.

    Attributes:
        kind: Resource kind, e.g. "Deployment".
        name: Resource name.
        namespace: Namespace, or None for cluster-scoped resources.
        object: Serialized resource state, or None if it was not found.
    """

    kind: str
    name: str
    namespace: str | None = None
    object: Mapping[str, Any] | None = None

    def describe(self) -> str:
        """Return a short human-readable identifier like ``pod/web``."""
        ref = f"{self.kind.lower()}/{self.name}"
        if self.namespace:
            return f"{self.namespace}/{ref}"
        return ref


class ResourceGetter(Protocol):
    """Fetches the current state of a resource.

    Implementations raise ResourceNotFoundError when the resource is gone.
    """

    def __call__(self, info: ResourceInfo) -> Mapping[str, Any]: ...


@dataclass(frozen=True)
class WaitOptions:
    """Collaborators supplied by the driver on each evaluation.

    Attributes:
        getter: Refreshes a resource. When None, the snapshot carried by
            ResourceInfo.object is evaluated as-is.
    """

    getter: ResourceGetter | None = None


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating a condition against one resource.

    Attributes:
        object: The resource state that was evaluated, None once deleted.
        done: True when the condition is met. Terminal for that resource.
    """

    object: Mapping[str, Any] | None
    done: bool


ConditionFunc = Callable[[ResourceInfo, WaitOptions], EvaluationResult]
