"""Configuration management for kubewait.

Configuration is resolved with precedence:
1. CLI flags (highest priority)
2. Environment variables (KUBEWAIT_*)
3. Default values (lowest priority)
"""

from kubewait.config.env import EnvReader
from kubewait.config.loader import build_logging_config, get_config
from kubewait.config.models import KubewaitConfig, LoggingConfig, WaitConfig

__all__ = [
    "EnvReader",
    "KubewaitConfig",
    "LoggingConfig",
    "WaitConfig",
    "build_logging_config",
    "get_config",
]
