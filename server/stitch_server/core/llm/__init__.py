"""LLM provider abstractions and implementations."""

from .provider import ChatMessage, ExecutionResult, LLMProvider
from .nvidia import DEFAULT_ENDPOINT, NvidiaChatProvider

__all__ = [
    "ChatMessage",
    "ExecutionResult",
    "LLMProvider",
    "DEFAULT_ENDPOINT",
    "NvidiaChatProvider",
]
