"""Exceptions raised by the optimization pipeline."""


class StitchError(Exception):
    """Base exception for the Stitch prompt optimizer."""

    kind = "error"


class ConfigError(StitchError):
    """Raised when the remote optimizer has no usable credentials."""

    kind = "config"


class UpstreamError(StitchError):
    """Raised when the chat-completion call fails or returns a non-2xx status."""

    kind = "upstream"

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyReplyError(StitchError):
    """Raised when the model reply has no usable text content."""

    kind = "empty_reply"


class MalformedJsonError(StitchError):
    """Raised when no parseable JSON object can be extracted from the reply."""

    kind = "malformed_json"


class IncompleteResultError(StitchError):
    """Raised when the parsed reply lacks a non-empty ``optimized`` string."""

    kind = "incomplete_result"
