"""Heuristic prompt analysis."""

import re

from .lexicon import DEFAULT_LEXICON, Lexicon
from .types import Analysis, Category

MAX_PROMPT_CHARS = 5000

HIGH_LEVEL_CLAUSE = (
    " with a modern, clean design featuring intuitive navigation"
    " and clear call-to-action elements."
)
DETAILED_CLAUSE = " Use a clean, professional style with consistent spacing and typography."
THEMING_CLAUSE = " Ensure all elements maintain visual consistency and accessibility standards."


def _contains_any(text: str, terms: tuple[str, ...]) -> bool:
    return any(term in text for term in terms)


class HeuristicAnalyzer:
    """Classifies prompts and detects common problems from text features alone."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        """
        Initialize the analyzer.

        Args:
            lexicon: Keyword sets to match against (default: DEFAULT_LEXICON)
        """
        self.lexicon = lexicon
        self._connector_patterns = [
            re.compile(rf"\b{re.escape(word)}\b") for word in lexicon.connector_words
        ]

    def detect_category(self, prompt: str) -> Category:
        """
        Classify a prompt.

        Keyword sets are checked in priority order: theming, then detailed,
        then high-level. A prompt matching several sets takes the first.
        """
        lower = prompt.lower()

        if _contains_any(lower, self.lexicon.theming_keywords):
            return "theming"
        if _contains_any(lower, self.lexicon.detailed_keywords):
            return "detailed"
        if _contains_any(lower, self.lexicon.high_level_keywords):
            return "high-level"
        return "general"

    def analyze(self, prompt: str) -> Analysis:
        """
        Run every check against the prompt.

        Checks are independent; their issues and suggestions accumulate in
        a fixed order (vagueness, multiple actions, length, UI vocabulary,
        adjectives, location).

        Args:
            prompt: Raw prompt text

        Returns:
            Analysis with the detected issues and suggestions
        """
        issues: list[str] = []
        suggestions: list[str] = []
        lower = prompt.lower()

        for word in self.lexicon.vague_words:
            if word in lower:
                issues.append(f'vague term: "{word}"')
                suggestions.append("replace vague terms with a concrete description")

        action_count = sum(len(p.findall(lower)) for p in self._connector_patterns)
        if action_count > 2:
            issues.append("the prompt may contain too many change requests")
            suggestions.append(
                "split the request into steps, focusing on one or two adjustments at a time"
            )

        if len(prompt) > MAX_PROMPT_CHARS:
            issues.append(f"the prompt is too long (over {MAX_PROMPT_CHARS} characters)")
            suggestions.append("shorten the prompt and refine it over several iterations")

        if not _contains_any(lower, self.lexicon.ui_vocabulary) and len(lower) > 50:
            suggestions.append(
                'use UI/UX terms such as "navigation bar" or "call-to-action button"'
            )

        if not _contains_any(lower, self.lexicon.vibe_adjectives) and "style" not in lower:
            suggestions.append('add adjectives that set the mood, such as "modern" or "minimalist"')

        if not _contains_any(lower, self.lexicon.location_words) and len(lower) > 30:
            suggestions.append('name a concrete location, such as "On the homepage" or "In the header"')

        return Analysis(issues=tuple(issues), suggestions=tuple(suggestions))

    def augment(self, prompt: str, category: Category) -> str:
        """Append the category-specific clause to the trimmed prompt, if it is missing one."""
        trimmed = prompt.strip()
        lower = trimmed.lower()

        if category == "high-level":
            if "with" not in lower and "featuring" not in lower:
                return trimmed + HIGH_LEVEL_CLAUSE
        elif category == "detailed":
            if "style" not in lower and "design" not in lower:
                return trimmed + DETAILED_CLAUSE
        elif category == "theming":
            if "ensure" not in lower and "consistent" not in lower:
                return trimmed + THEMING_CLAUSE

        return trimmed
