"""Deterministic prompt optimization used when the model is unavailable."""

import logging

from .analyzer import HeuristicAnalyzer
from .types import OptimizationResult

logger = logging.getLogger(__name__)

MAX_SUGGESTIONS = 3

POSITIVE_FEEDBACK = (
    "Prompt is well structured",
    "Prompt contains a concrete description",
    "You can keep iterating from here",
)

HIGH_LEVEL_CLOSING = "suggest: add a description of the core features for a better starting point"
DETAILED_CLOSING = "suggest: change only one or two elements at a time for precise control"


class LocalOptimizer:
    """Builds an optimization result from heuristic analysis alone."""

    def __init__(self, analyzer: HeuristicAnalyzer | None = None):
        self.analyzer = analyzer or HeuristicAnalyzer()

    def optimize(self, prompt: str) -> OptimizationResult:
        """
        Optimize a prompt locally.

        Never raises: any string, including the empty string, yields a
        complete result with at least one improvement.

        Args:
            prompt: Raw prompt text

        Returns:
            Optimization result with the category-augmented prompt
        """
        category = self.analyzer.detect_category(prompt)
        analysis = self.analyzer.analyze(prompt)
        optimized = self.analyzer.augment(prompt, category)

        improvements = [f"fix: {issue}" for issue in analysis.issues]
        improvements.extend(
            f"suggest: {s}" for s in analysis.suggestions[:MAX_SUGGESTIONS]
        )

        if not improvements:
            improvements.extend(POSITIVE_FEEDBACK)

        lower = prompt.lower()
        if category == "high-level":
            if "features" not in lower and "functionality" not in lower:
                improvements.append(HIGH_LEVEL_CLOSING)
        elif category == "detailed":
            improvements.append(DETAILED_CLOSING)

        logger.debug(
            f"Local optimization: category={category}, "
            f"issues={len(analysis.issues)}, suggestions={len(analysis.suggestions)}"
        )

        return OptimizationResult(
            original=prompt,
            optimized=optimized,
            improvements=improvements,
            category=category,
        )
