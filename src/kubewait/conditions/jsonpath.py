"""Relaxation and compilation of jsonpath field selectors.

Users may write a field path in several shorthand forms. They are all
relaxed into the canonical template form ``{.name1.name2}`` and then
compiled with jsonpath-ng's extended parser, which also understands
filters, slices and ``len``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any

from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.ext import parse as jsonpath_parse

from kubewait.conditions.errors import EmptyExpressionError, ParseError

logger = logging.getLogger(__name__)

# Either a braced template or a bare path, each with an optional leading dot.
_RELAXED_PATH_RE = re.compile(r"^\{\.?([^{}]+)\}$|^\.?([^{}]+)$")

_RELAX_ERROR = (
    "unexpected path string, expected a 'name1.name2' or '.name1.name2' "
    "or '{name1.name2}' or '{.name1.name2}'"
)


@dataclass(frozen=True)
class CompiledPath:
    """A validated jsonpath template ready to run against resource state.

    Two compiled paths are equal when their canonical templates are equal.
    """

    template: str
    _expression: Any = field(compare=False, repr=False)

    def find(self, obj: Any) -> list[Any]:
        """Return every value the path selects from obj, in document order."""
        return [match.value for match in self._expression.find(obj)]

    def __str__(self) -> str:
        return self.template


def relax_jsonpath_expression(raw: str) -> str:
    """Convert a shorthand field path into the canonical ``{.a.b}`` form.

    Args:
        raw: Path as typed by the user, e.g. ``.status.phase``,
            ``status.phase``, ``{status.phase}`` or ``{.status.phase}``.

    Returns:
        The canonical template, or the empty string for empty input.

    Raises:
        ParseError: If the path uses nested or unbalanced braces.
    """
    if not raw:
        return raw

    m = _RELAXED_PATH_RE.match(raw)
    if m is None:
        raise ParseError(_RELAX_ERROR, source=raw)

    field_spec = m.group(1) or m.group(2)
    return f"{{.{field_spec}}}"


def compile_jsonpath(template: str) -> CompiledPath:
    """Compile a canonical jsonpath template.

    Args:
        template: Output of relax_jsonpath_expression().

    Returns:
        The compiled path.

    Raises:
        EmptyExpressionError: If template is empty.
        ParseError: If jsonpath-ng rejects the expression; the library's
            message is passed through unchanged.
    """
    if template == "":
        raise EmptyExpressionError(source=template)

    body = template
    if body.startswith("{") and body.endswith("}"):
        body = body[1:-1]
    if body.startswith("."):
        body = body[1:]
    # Bracket subscripts attach to the root directly: $[0], $['a']
    root_expr = f"${body}" if body.startswith("[") else f"$.{body}"

    try:
        expression = jsonpath_parse(root_expr)
    except JSONPathError as e:
        raise ParseError(str(e), source=template) from e

    logger.debug("Compiled jsonpath %s as %s", template, root_expr)
    return CompiledPath(template=template, _expression=expression)
