"""NVIDIA (OpenAI-compatible) chat-completions provider."""

import logging
import time
from typing import Any

import httpx

from ..exceptions import ConfigError, UpstreamError
from .provider import ChatMessage, ExecutionResult

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://integrate.api.nvidia.com/v1/chat/completions"

# Upstream error bodies are truncated to this many characters
MAX_ERROR_BODY_CHARS = 300


class NvidiaChatProvider:
    """Provider for NVIDIA's OpenAI-compatible chat/completions endpoint."""

    def __init__(
        self,
        api_key: str | None,
        endpoint: str = DEFAULT_ENDPOINT,
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize NVIDIA provider.

        Args:
            api_key: Bearer token for the endpoint
            endpoint: Full chat/completions URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.api_key = api_key
        self.endpoint = endpoint
        self.timeout = timeout
        self._transport = transport

    async def execute(
        self, messages: list[ChatMessage], model: str, **kwargs: Any
    ) -> ExecutionResult:
        """Execute a chat completion against the configured endpoint.

        Makes exactly one HTTP request; there are no retries.

        Raises:
            ConfigError: If no API key is configured
            UpstreamError: On network failure, timeout, non-2xx status or a
                non-JSON response body
        """
        if not self.api_key or not self.api_key.strip():
            raise ConfigError("Missing NVIDIA API key")

        payload = {
            "model": model,
            **kwargs,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
        }
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        start_time = time.time()
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post(self.endpoint, json=payload, headers=headers)
        except httpx.TimeoutException as e:
            raise UpstreamError(
                f"NVIDIA API request timed out after {self.timeout}s"
            ) from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"NVIDIA API request failed: {str(e)}") from e

        latency_ms = int((time.time() - start_time) * 1000)

        if not response.is_success:
            body = response.text[:MAX_ERROR_BODY_CHARS]
            status = " ".join(
                part for part in (str(response.status_code), response.reason_phrase) if part
            )
            message = f"NVIDIA API error: {status}"
            if body:
                message += f" - {body}"
            logger.warning(f"Chat completion failed with status {response.status_code}")
            raise UpstreamError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError("NVIDIA API returned a non-JSON response") from e

        usage = data.get("usage") if isinstance(data, dict) else None
        if not isinstance(usage, dict):
            usage = {}

        logger.debug(f"Chat completion succeeded in {latency_ms}ms (model={model})")

        return ExecutionResult(
            content=_extract_content(data),
            model=model,
            provider="nvidia",
            latency_ms=latency_ms,
            tokens_input=usage.get("prompt_tokens"),
            tokens_output=usage.get("completion_tokens"),
            tokens_total=usage.get("total_tokens"),
        )


def _extract_content(data: Any) -> str:
    """Return ``choices[0].message.content`` or "" when it is missing or not a string."""
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return ""
    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else ""
