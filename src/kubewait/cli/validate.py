"""CLI command for checking a --for expression.

kubewait validate parses the expression, builds its waiter and echoes
the canonical form, without touching any resources.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import click

from kubewait.conditions import (
    ConditionError,
    DeletionCondition,
    JSONPathCondition,
    NamedCondition,
    parse_condition,
    serialize_condition,
)
from kubewait.conditions.types import Condition
from kubewait.config import get_config
from kubewait.waiter import Waiter, build_waiter

logger = logging.getLogger(__name__)


def _describe(condition: Condition, waiter: Waiter) -> dict[str, Any]:
    """Build a JSON-serializable description of a parsed condition."""
    result: dict[str, Any] = {
        "condition": serialize_condition(condition),
        "allow_no_resources": waiter.allow_no_resources,
        "ignores_not_found": bool(waiter.ignore_error_fns),
    }
    if isinstance(condition, DeletionCondition):
        result["kind"] = "delete"
    elif isinstance(condition, NamedCondition):
        result["kind"] = "condition"
        result["name"] = condition.name
        result["value"] = condition.value
    elif isinstance(condition, JSONPathCondition):
        result["kind"] = "jsonpath"
        result["path"] = condition.path.template
        result["value"] = condition.value
    return result


def _format_human(description: dict[str, Any]) -> str:
    lines = [f"{'Condition:':<20}{description['condition']}"]
    lines.append(f"{'Kind:':<20}{description['kind']}")
    if "name" in description:
        lines.append(f"{'Name:':<20}{description['name']}")
    if "path" in description:
        lines.append(f"{'Path:':<20}{description['path']}")
    if "value" in description:
        lines.append(f"{'Expected value:':<20}{description['value']!r}")
    lines.append(f"{'Allow no resources:':<20}{description['allow_no_resources']}")
    return "\n".join(lines)


@click.command("validate")
@click.option(
    "--for",
    "condition",
    required=True,
    help="Condition to wait for: delete, condition=NAME[=VALUE], "
    "or jsonpath=PATH=VALUE.",
)
@click.option(
    "--allow-no-resources/--no-allow-no-resources",
    default=None,
    help="Do not fail when no resources match.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
@click.pass_context
def validate_cmd(
    ctx: click.Context,
    condition: str,
    allow_no_resources: bool | None,
    output_format: str,
) -> None:
    """Parse a --for condition and show how it was understood.

    Examples:

        kubewait validate --for=delete

        kubewait validate --for=condition=Ready=False

        kubewait validate --for="jsonpath={.status.phase}=Running" --format json
    """
    if allow_no_resources is None:
        config = (ctx.obj or {}).get("config") or get_config()
        allow_no_resources = config.wait.allow_no_resources

    try:
        parsed = parse_condition(condition)
    except ConditionError as e:
        logger.debug("Rejected condition %r: %s", condition, e)
        raise click.UsageError(e.format_error(), ctx=ctx) from e

    waiter = build_waiter(
        parsed,
        err_out=logger,
        allow_no_resources=allow_no_resources,
    )
    description = _describe(parsed, waiter)

    if output_format == "json":
        click.echo(json.dumps(description, indent=2))
    else:
        click.echo(_format_human(description))
