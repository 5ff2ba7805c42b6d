"""Normalization of the two halves of a jsonpath condition."""

from __future__ import annotations

from kubewait.conditions.errors import EmptyConditionError
from kubewait.conditions.jsonpath import relax_jsonpath_expression

_QUOTES = ("'", '"')


def trim_quotes(value: str) -> str:
    """Strip one layer of surrounding quote characters.

    A single leading and a single trailing ``'`` or ``"`` are removed, so
    ``''Running''`` becomes ``'Running'``.
    """
    if value[:1] in _QUOTES:
        value = value[1:]
    if value[-1:] in _QUOTES:
        value = value[:-1]
    return value


def process_jsonpath_input(path_expr: str, cond_expr: str) -> tuple[str, str]:
    """Normalize the path and expected value of a jsonpath condition.

    Args:
        path_expr: Field path as typed by the user.
        cond_expr: Expected value, possibly quoted to survive the shell.

    Returns:
        Tuple of (canonical path template, unquoted expected value).

    Raises:
        ParseError: If the path cannot be relaxed.
        EmptyConditionError: If cond_expr is empty.
    """
    relaxed = relax_jsonpath_expression(path_expr)
    if cond_expr == "":
        raise EmptyConditionError()
    return relaxed, trim_quotes(cond_expr)
