"""kubewait: parse --for wait conditions into reusable waiters."""

from kubewait.conditions import ConditionError, parse_condition
from kubewait.waiter import Waiter, build_waiter, waiter_for

__version__ = "0.1.0"

__all__ = [
    "ConditionError",
    "Waiter",
    "__version__",
    "build_waiter",
    "parse_condition",
    "waiter_for",
]
