"""Error types for wait condition expressions."""

from __future__ import annotations


class ConditionError(Exception):
    """Base class for condition expression errors."""

    def __init__(self, message: str, source: str = "") -> None:
        self.source = source
        super().__init__(message)

    def format_error(self) -> str:
        """Format error with the offending expression on its own line."""
        msg = str(self)
        if not self.source:
            return msg
        return f"{msg}\n  {self.source}"


class EmptyExpressionError(ConditionError):
    """Raised when a jsonpath expression is empty."""

    def __init__(self, source: str = "") -> None:
        super().__init__("jsonpath expression cannot be empty", source=source)


class ParseError(ConditionError):
    """Raised when a jsonpath expression cannot be parsed."""


class EmptyConditionError(ConditionError):
    """Raised when the expected value of a jsonpath condition is empty."""

    def __init__(self, source: str = "") -> None:
        super().__init__("jsonpath wait condition cannot be empty", source=source)


class MalformedJSONPathExpressionError(ConditionError):
    """Raised when a jsonpath condition does not split into path and value."""

    def __init__(self, source: str = "") -> None:
        super().__init__(
            "jsonpath wait format must be --for=jsonpath='{.status.readyReplicas}'=3",
            source=source,
        )


class UnrecognizedConditionError(ConditionError):
    """Raised when a condition matches none of the supported forms."""

    def __init__(self, condition: str) -> None:
        self.condition = condition
        super().__init__(f"unrecognized condition: {condition!r}", source=condition)
