"""Core business logic"""

from .exceptions import (
    StitchError,
    ConfigError,
    UpstreamError,
    EmptyReplyError,
    MalformedJsonError,
    IncompleteResultError,
)

__all__ = [
    "StitchError",
    "ConfigError",
    "UpstreamError",
    "EmptyReplyError",
    "MalformedJsonError",
    "IncompleteResultError",
]
