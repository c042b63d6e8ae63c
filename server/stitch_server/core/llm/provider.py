"""LLM provider protocol and data models."""

from dataclasses import dataclass
from typing import Any, Optional, Protocol


@dataclass
class ChatMessage:
    """A single chat-completion message."""

    role: str  # "system", "user", "assistant"
    content: str


@dataclass
class ExecutionResult:
    """Result from executing a chat completion against an LLM."""

    content: str
    model: str
    provider: str
    latency_ms: int
    tokens_input: Optional[int] = None
    tokens_output: Optional[int] = None
    tokens_total: Optional[int] = None


class LLMProvider(Protocol):
    """Protocol for chat-completion providers."""

    async def execute(
        self, messages: list[ChatMessage], model: str, **kwargs: Any
    ) -> ExecutionResult:
        """Execute a chat completion.

        Args:
            messages: Conversation to send, system message first
            model: The model ID to use
            **kwargs: Generation parameters (temperature, max_tokens, ...)

        Returns:
            ExecutionResult with the reply text ("" when the reply has none)

        Raises:
            ConfigError: If the provider has no credentials
            UpstreamError: If the call fails or returns a non-success status
        """
        ...
