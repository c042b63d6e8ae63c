"""Hybrid prompt optimization for Stitch UI prompts.

A remote optimizer rewrites prompts with a chat-completion model; a local
optimizer applies deterministic heuristics. The engine tries the model first
and falls back to the heuristics on any failure.

Example usage:
    from stitch_server.core.optimizer import OptimizationEngine, RemoteOptimizer

    remote = RemoteOptimizer.from_credentials(
        endpoint="https://integrate.api.nvidia.com/v1/chat/completions",
        api_key="nvapi-...",
    )
    engine = OptimizationEngine(remote)

    outcome = await engine.optimize("An app for marathon runners")
    print(outcome.result.optimized)
    print(outcome.source, outcome.fallback_reason)
"""

from .analyzer import HeuristicAnalyzer
from .engine import OptimizationEngine
from .lexicon import DEFAULT_LEXICON, Lexicon
from .local import LocalOptimizer
from .remote import RemoteOptimizer, optimize_remotely
from .types import (
    CATEGORIES,
    Analysis,
    Category,
    OptimizationOutcome,
    OptimizationResult,
    RemoteFailure,
    RemoteOutcome,
    RemoteSuccess,
    normalize_category,
)

__all__ = [
    # Main engine
    "OptimizationEngine",
    # Optimizers
    "HeuristicAnalyzer",
    "LocalOptimizer",
    "RemoteOptimizer",
    "optimize_remotely",
    # Lexicon
    "DEFAULT_LEXICON",
    "Lexicon",
    # Types
    "CATEGORIES",
    "Analysis",
    "Category",
    "OptimizationOutcome",
    "OptimizationResult",
    "RemoteFailure",
    "RemoteOutcome",
    "RemoteSuccess",
    "normalize_category",
]
