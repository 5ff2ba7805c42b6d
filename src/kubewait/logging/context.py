"""Resource context for structured logging.

Provides context propagation using contextvars so log records emitted
while a resource is being evaluated carry its identity.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_resource: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "resource", default=None
)


def get_resource_context() -> str | None:
    """Return the resource currently being evaluated, if any."""
    return _resource.get()


@contextmanager
def resource_context(resource: str) -> Generator[None, None, None]:
    """Tag log records emitted inside the block with resource.

    Example:
        with resource_context("default/pod/web"):
            waiter.evaluate(info)
    """
    token = _resource.set(resource)
    try:
        yield
    finally:
        _resource.reset(token)


class ResourceContextFilter(logging.Filter):
    """Logging filter that injects the resource context into log records.

    Adds a ``resource`` attribute, and a ``resource_tag`` like
    ``[default/pod/web] `` for the text format.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        resource = get_resource_context()
        record.resource = resource
        record.resource_tag = f"[{resource}] " if resource else ""
        return True  # Never filter out records
