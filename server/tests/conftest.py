"""
Test configuration and fixtures for Stitch optimizer tests

This module provides:
- MockLLMProvider, a scripted stand-in for the chat-completions provider
- Analyzer/optimizer fixtures
- FastAPI test client with dependency overrides cleared after each test

Usage:
    def test_remote(mock_provider):
        provider = mock_provider(content='{"optimized": "X"}')
        optimizer = RemoteOptimizer(provider)
"""

import json
from typing import Any

import httpx
import pytest

from stitch_server.core.llm.provider import ChatMessage, ExecutionResult
from stitch_server.core.optimizer import HeuristicAnalyzer, LocalOptimizer


class MockLLMProvider:
    """Mock LLM provider that returns canned content or raises a given error."""

    def __init__(self, content: str = "", error: BaseException | None = None):
        self.content = content
        self.error = error
        self.calls: list[dict[str, Any]] = []

    async def execute(
        self, messages: list[ChatMessage], model: str, **kwargs: Any
    ) -> ExecutionResult:
        self.calls.append({"messages": messages, "model": model, **kwargs})
        if self.error is not None:
            raise self.error
        return ExecutionResult(
            content=self.content,
            model=model,
            provider="mock",
            latency_ms=5,
        )


def model_reply(
    optimized: Any = "Optimized prompt",
    improvements: Any = None,
    category: Any = "general",
) -> str:
    """Serialize a model reply in the shape the system prompt asks for."""
    return json.dumps(
        {
            "optimized": optimized,
            "improvements": improvements if improvements is not None else [],
            "category": category,
        }
    )


@pytest.fixture
def mock_provider():
    """Factory for MockLLMProvider instances."""
    return MockLLMProvider


@pytest.fixture
def reply():
    """Factory for JSON model replies."""
    return model_reply


@pytest.fixture
def analyzer() -> HeuristicAnalyzer:
    return HeuristicAnalyzer()


@pytest.fixture
def local_optimizer() -> LocalOptimizer:
    return LocalOptimizer()


@pytest.fixture
def chat_transport():
    """Build an httpx.MockTransport answering every request with ``handler``."""

    def _make(handler) -> httpx.MockTransport:
        return httpx.MockTransport(handler)

    return _make


@pytest.fixture
def test_client():
    """Create a FastAPI test client.

    Dependency overrides set by a test are removed afterwards.

    Example:
        def test_endpoint(test_client):
            response = test_client.get("/health")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from stitch_server.main import app

    client = TestClient(app)
    try:
        yield client
    finally:
        client.close()
        app.dependency_overrides.clear()
