"""Main orchestrator for prompt optimization."""

import logging
from typing import Callable

from .local import LocalOptimizer
from .remote import RemoteOptimizer
from .types import OptimizationOutcome, RemoteSuccess

logger = logging.getLogger(__name__)

DEFAULT_REASON_MAX_CHARS = 300

FallbackCallback = Callable[[str], None]


class OptimizationEngine:
    """Tries the model first and degrades to local heuristics on any failure."""

    def __init__(
        self,
        remote: RemoteOptimizer | None = None,
        local: LocalOptimizer | None = None,
        on_fallback: FallbackCallback | None = None,
        reason_max_chars: int = DEFAULT_REASON_MAX_CHARS,
    ):
        """
        Initialize optimization engine.

        Args:
            remote: Remote optimizer, or None when the model is not configured
            local: Local optimizer (default: LocalOptimizer())
            on_fallback: Called with the failure reason whenever the remote
                path fails and the local result is used instead
            reason_max_chars: Maximum length of the surfaced failure reason
        """
        self.remote = remote
        self.local = local or LocalOptimizer()
        self.on_fallback = on_fallback
        self.reason_max_chars = reason_max_chars

    async def optimize(self, prompt: str) -> OptimizationOutcome:
        """
        Optimize a prompt.

        Process:
        1. If no remote optimizer is configured, use the local optimizer
        2. Otherwise attempt the remote optimizer
        3. On success return its result tagged "remote"
        4. On failure return the local result tagged "local" with the reason

        Never raises for ordinary errors.
        """
        if self.remote is None:
            logger.info("Remote optimizer not configured; using local heuristics")
            return OptimizationOutcome(result=self.local.optimize(prompt), source="local")

        outcome = await self.remote.attempt(prompt)
        if isinstance(outcome, RemoteSuccess):
            return OptimizationOutcome(result=outcome.result, source="remote")

        reason = outcome.message[: self.reason_max_chars]
        logger.warning(
            f"Remote optimization failed ({outcome.kind}); falling back to local heuristics: {reason}"
        )
        if self.on_fallback is not None:
            self.on_fallback(reason)

        return OptimizationOutcome(
            result=self.local.optimize(prompt),
            source="local",
            fallback_reason=reason,
        )
