"""CLI module for kubewait."""

import logging
from pathlib import Path

import click

from kubewait import __version__
from kubewait.cli.validate import validate_cmd
from kubewait.config import build_logging_config, get_config
from kubewait.config.models import VALID_LOG_FORMATS, VALID_LOG_LEVELS
from kubewait.logging import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="kubewait")
@click.option(
    "--log-level",
    type=click.Choice(sorted(VALID_LOG_LEVELS), case_sensitive=False),
    default=None,
    help="Log level (overrides KUBEWAIT_LOG_LEVEL).",
)
@click.option(
    "--log-format",
    type=click.Choice(sorted(VALID_LOG_FORMATS), case_sensitive=False),
    default=None,
    help="Log format (overrides KUBEWAIT_LOG_FORMAT).",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write logs to this file (overrides KUBEWAIT_LOG_FILE).",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_format: str | None,
    log_file: Path | None,
) -> None:
    """Parse and check wait conditions for Kubernetes resources."""
    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e

    configure_logging(
        build_logging_config(
            config.logging,
            level=log_level,
            format=log_format,
            file=log_file,
        )
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    logger.debug("Loaded configuration: %s", config)


main.add_command(validate_cmd)
