"""Model-backed prompt optimization."""

import json
import logging
from typing import Any

from ..exceptions import (
    EmptyReplyError,
    IncompleteResultError,
    MalformedJsonError,
    StitchError,
)
from ..llm.nvidia import DEFAULT_ENDPOINT, NvidiaChatProvider
from ..llm.provider import ChatMessage, LLMProvider
from .types import (
    OptimizationResult,
    RemoteFailure,
    RemoteOutcome,
    RemoteSuccess,
    normalize_category,
)

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "meta/llama-3.1-70b-instruct"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_MAX_TOKENS = 900

MAX_IMPROVEMENTS = 12

SYSTEM_PROMPT = """You are a prompt optimization assistant.
Optimize the user prompt according to Google AI Stitch prompt best practices:
- be clear and specific
- one change at a time
- focus on a specific screen/section/component when relevant
- include UI/UX vocabulary (navigation bar, call-to-action button, hero section, card layout, etc.) when appropriate
- include vibe/style adjectives (modern, minimalist, vibrant, elegant, professional, etc.) when appropriate
- keep it concise; if the prompt is too broad, propose a focused, actionable version

Return ONLY strict JSON with the following schema:
{ "optimized": string, "improvements": string[], "category": "high-level"|"detailed"|"refinement"|"theming"|"general" }
Do not wrap it in markdown."""


def build_messages(prompt: str) -> list[ChatMessage]:
    """Build the system and user messages for one optimization request."""
    return [
        ChatMessage(role="system", content=SYSTEM_PROMPT),
        ChatMessage(role="user", content=f"User prompt:\n{prompt}"),
    ]


def extract_json(reply: str) -> Any:
    """
    Parse the JSON object embedded in a model reply.

    Takes the span from the first ``{`` to the last ``}`` of the trimmed
    reply, tolerating prose or code fences around it. If either brace is
    missing the whole trimmed reply is parsed.

    Raises:
        MalformedJsonError: If the selected text is not valid JSON
    """
    trimmed = reply.strip()
    first_brace = trimmed.find("{")
    last_brace = trimmed.rfind("}")
    if first_brace != -1 and last_brace != -1:
        json_slice = trimmed[first_brace : last_brace + 1]
    else:
        json_slice = trimmed

    try:
        return json.loads(json_slice)
    except json.JSONDecodeError as e:
        raise MalformedJsonError("Model output is not valid JSON") from e


def project_result(prompt: str, parsed: Any) -> OptimizationResult:
    """
    Validate parsed model output and project it onto an OptimizationResult.

    ``optimized`` must be a non-blank string. ``improvements`` keeps only
    string entries of a list, capped at MAX_IMPROVEMENTS. ``category`` is
    normalized.

    Raises:
        IncompleteResultError: If there is no usable ``optimized`` text
    """
    if not isinstance(parsed, dict):
        raise IncompleteResultError("Model output missing optimized text")

    optimized = parsed.get("optimized")
    if not isinstance(optimized, str):
        optimized = ""
    if not optimized.strip():
        raise IncompleteResultError("Model output missing optimized text")

    raw_improvements = parsed.get("improvements")
    improvements: list[str] = []
    if isinstance(raw_improvements, list):
        improvements = [x for x in raw_improvements if isinstance(x, str)][:MAX_IMPROVEMENTS]

    return OptimizationResult(
        original=prompt,
        optimized=optimized,
        improvements=improvements,
        category=normalize_category(parsed.get("category")),
    )


class RemoteOptimizer:
    """Rewrites prompts with a chat-completion model."""

    def __init__(
        self,
        llm_provider: LLMProvider,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ):
        """
        Initialize remote optimizer.

        Args:
            llm_provider: Chat-completion provider to call
            model: Model to use (default: meta/llama-3.1-70b-instruct)
            temperature: Sampling temperature
            max_tokens: Output length ceiling
        """
        self.llm = llm_provider
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    @classmethod
    def from_credentials(
        cls,
        endpoint: str | None,
        api_key: str | None,
        timeout: float = 60.0,
    ) -> "RemoteOptimizer":
        """Create an optimizer backed by the NVIDIA chat-completions endpoint."""
        provider = NvidiaChatProvider(
            api_key=api_key,
            endpoint=endpoint or DEFAULT_ENDPOINT,
            timeout=timeout,
        )
        return cls(provider)

    async def optimize(self, prompt: str) -> OptimizationResult:
        """
        Optimize a prompt with the model.

        Performs exactly one outbound call.

        Raises:
            ConfigError: If the provider has no API key
            UpstreamError: If the call fails or returns a non-success status
            EmptyReplyError: If the reply has no text content
            MalformedJsonError: If no JSON can be parsed from the reply
            IncompleteResultError: If the JSON lacks ``optimized`` text
        """
        logger.info(f"Remote optimization requested. Prompt snippet: {prompt[:100]!r}")

        response = await self.llm.execute(
            build_messages(prompt),
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )

        if not response.content.strip():
            raise EmptyReplyError("NVIDIA API returned empty content")

        parsed = extract_json(response.content)
        result = project_result(prompt, parsed)

        logger.info(
            f"Remote optimization succeeded in {response.latency_ms}ms: "
            f"category={result.category}, improvements={len(result.improvements)}"
        )
        return result

    async def attempt(self, prompt: str) -> RemoteOutcome:
        """
        Optimize a prompt, reporting failure as a value instead of raising.

        Cancellation is not caught and still propagates to the caller.
        """
        try:
            return RemoteSuccess(await self.optimize(prompt))
        except StitchError as e:
            return RemoteFailure(kind=e.kind, message=str(e))
        except Exception as e:
            logger.error(f"Unexpected error during remote optimization: {e}", exc_info=True)
            return RemoteFailure(kind="unexpected", message=str(e) or type(e).__name__)


async def optimize_remotely(
    endpoint: str | None, api_key: str | None, prompt: str, timeout: float = 60.0
) -> OptimizationResult:
    """Optimize ``prompt`` against ``endpoint`` using ``api_key``; raises on failure."""
    return await RemoteOptimizer.from_credentials(endpoint, api_key, timeout).optimize(prompt)
