"""Unit tests for the optimization engine."""

import asyncio
from unittest.mock import MagicMock

import httpx
import pytest

from stitch_server.core.exceptions import UpstreamError
from stitch_server.core.llm import NvidiaChatProvider
from stitch_server.core.optimizer import (
    CATEGORIES,
    LocalOptimizer,
    OptimizationEngine,
    OptimizationOutcome,
    RemoteOptimizer,
)


@pytest.mark.asyncio
async def test_local_only_when_remote_not_configured():
    engine = OptimizationEngine(remote=None)

    outcome = await engine.optimize("An app for marathon runners")

    assert isinstance(outcome, OptimizationOutcome)
    assert outcome.source == "local"
    assert outcome.fallback_reason is None
    assert not outcome.degraded
    assert outcome.result.category == "high-level"


@pytest.mark.asyncio
async def test_remote_success(mock_provider, reply):
    on_fallback = MagicMock()
    engine = OptimizationEngine(
        remote=RemoteOptimizer(mock_provider(content=reply(optimized="Remote X", category="theming"))),
        on_fallback=on_fallback,
    )

    outcome = await engine.optimize("Change the colors to blue")

    assert outcome.source == "remote"
    assert outcome.fallback_reason is None
    assert outcome.result.optimized == "Remote X"
    assert outcome.result.category == "theming"
    on_fallback.assert_not_called()


@pytest.mark.asyncio
async def test_fallback_on_http_500(chat_transport):
    """An upstream 500 falls back to local heuristics and reports the reason."""
    provider = NvidiaChatProvider(
        api_key="nvapi-test",
        transport=chat_transport(lambda request: httpx.Response(500, text="upstream exploded")),
    )
    on_fallback = MagicMock()
    engine = OptimizationEngine(remote=RemoteOptimizer(provider), on_fallback=on_fallback)

    outcome = await engine.optimize("Make the homepage better")

    assert outcome.source == "local"
    assert outcome.degraded
    assert "500" in outcome.fallback_reason
    assert outcome.result is not None
    assert outcome.result.original == "Make the homepage better"
    assert outcome.result.category == "detailed"
    assert 'fix: vague term: "better"' in outcome.result.improvements
    on_fallback.assert_called_once_with(outcome.fallback_reason)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "content",
    ["", "definitely not json", '{"optimized": ""}', '{"optimized": 42, "category": "theming"}'],
)
async def test_fallback_on_unusable_reply(mock_provider, content):
    engine = OptimizationEngine(remote=RemoteOptimizer(mock_provider(content=content)))

    outcome = await engine.optimize("An app for marathon runners")

    assert outcome.source == "local"
    assert outcome.fallback_reason
    assert outcome.result == LocalOptimizer().optimize("An app for marathon runners")


@pytest.mark.asyncio
async def test_fallback_on_missing_key():
    engine = OptimizationEngine(remote=RemoteOptimizer.from_credentials(None, ""))

    outcome = await engine.optimize("Change the colors to blue")

    assert outcome.source == "local"
    assert outcome.fallback_reason == "Missing NVIDIA API key"
    assert outcome.result.category == "theming"


@pytest.mark.asyncio
async def test_fallback_reason_truncated(mock_provider):
    error = UpstreamError("NVIDIA API error: 502 Bad Gateway - " + "y" * 500, status_code=502)
    engine = OptimizationEngine(
        remote=RemoteOptimizer(mock_provider(error=error)),
        reason_max_chars=40,
    )

    outcome = await engine.optimize("Tea shop")

    assert len(outcome.fallback_reason) == 40
    assert outcome.fallback_reason.startswith("NVIDIA API error: 502")


@pytest.mark.asyncio
async def test_unexpected_error_still_falls_back(mock_provider):
    engine = OptimizationEngine(remote=RemoteOptimizer(mock_provider(error=KeyError("choices"))))

    outcome = await engine.optimize("Tea shop")

    assert outcome.source == "local"
    assert outcome.result.optimized == "Tea shop"


@pytest.mark.asyncio
async def test_cancellation_propagates(mock_provider):
    engine = OptimizationEngine(
        remote=RemoteOptimizer(mock_provider(error=asyncio.CancelledError()))
    )

    with pytest.raises(asyncio.CancelledError):
        await engine.optimize("Tea shop")


@pytest.mark.asyncio
async def test_concurrent_calls_are_independent(mock_provider, reply):
    engine = OptimizationEngine(remote=RemoteOptimizer(mock_provider(content=reply(optimized="X"))))
    prompts = [f"prompt {i}" for i in range(10)]

    outcomes = await asyncio.gather(*(engine.optimize(p) for p in prompts))

    assert [o.result.original for o in outcomes] == prompts
    assert all(o.result.category in CATEGORIES for o in outcomes)
