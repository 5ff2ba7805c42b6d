"""Structured logging for kubewait.

Provides configurable logging with JSON format support and file rotation,
and tags records with the resource being evaluated.
"""

from kubewait.logging.config import configure_logging
from kubewait.logging.context import (
    ResourceContextFilter,
    get_resource_context,
    resource_context,
)
from kubewait.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "ResourceContextFilter",
    "configure_logging",
    "get_resource_context",
    "resource_context",
]
