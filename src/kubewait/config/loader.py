"""Configuration loader.

Configuration is resolved with the following precedence (highest to lowest):
1. CLI arguments (applied with build_logging_config)
2. Environment variables (KUBEWAIT_*)
3. Default values

Environment variables:
- KUBEWAIT_LOG_LEVEL: debug, info, warning or error
- KUBEWAIT_LOG_FORMAT: text or json
- KUBEWAIT_LOG_FILE: Path to a log file (stderr only if unset)
- KUBEWAIT_ALLOW_NO_RESOURCES: Default for --allow-no-resources
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

from kubewait.config.env import EnvReader
from kubewait.config.models import KubewaitConfig, LoggingConfig, WaitConfig

logger = logging.getLogger(__name__)


def get_config(env: Mapping[str, str] | None = None) -> KubewaitConfig:
    """Build configuration from defaults and environment variables.

    Args:
        env: Optional mapping used instead of os.environ.

    Returns:
        The resolved configuration.

    Raises:
        ValueError: If an environment variable holds an invalid log level
            or format.
    """
    reader = EnvReader(env)
    defaults = KubewaitConfig()

    logging_config = LoggingConfig(
        level=reader.get_str("KUBEWAIT_LOG_LEVEL", defaults.logging.level),
        format=reader.get_str("KUBEWAIT_LOG_FORMAT", defaults.logging.format),
        file=reader.get_path("KUBEWAIT_LOG_FILE", defaults.logging.file),
    )
    wait_config = WaitConfig(
        allow_no_resources=reader.get_bool(
            "KUBEWAIT_ALLOW_NO_RESOURCES", defaults.wait.allow_no_resources
        ),
    )
    return KubewaitConfig(logging=logging_config, wait=wait_config)


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Build LoggingConfig by merging base config with CLI overrides.

    Any override left as None keeps the base value. Validation runs via
    LoggingConfig.__post_init__, so invalid values raise ValueError.
    """
    return LoggingConfig(
        level=level if level is not None else base.level,
        file=file if file is not None else base.file,
        format=format if format is not None else base.format,
        include_stderr=(
            include_stderr if include_stderr is not None else base.include_stderr
        ),
        max_bytes=base.max_bytes,
        backup_count=base.backup_count,
    )
