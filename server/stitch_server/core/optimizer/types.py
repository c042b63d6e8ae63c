"""Data models for the prompt optimization pipeline."""

from dataclasses import dataclass
from typing import Literal, get_args

from pydantic import BaseModel, Field

Category = Literal["high-level", "detailed", "refinement", "theming", "general"]

CATEGORIES: tuple[str, ...] = get_args(Category)

Source = Literal["remote", "local"]


def normalize_category(value: object) -> Category:
    """Map any value onto one of the five category literals.

    Known literals pass through unchanged; other strings and non-string
    values become ``"general"``.
    """
    if isinstance(value, str) and value in CATEGORIES:
        return value  # type: ignore[return-value]
    return "general"


class OptimizationResult(BaseModel):
    """Result of optimizing a single prompt."""

    original: str
    """The input prompt, unmodified."""

    optimized: str
    """The rewritten prompt."""

    improvements: list[str] = Field(default_factory=list)
    """Human-readable notes, in the order they were produced."""

    category: Category = "general"
    """Classification of the prompt."""


@dataclass(frozen=True)
class Analysis:
    """Issues and suggestions detected in a prompt."""

    issues: tuple[str, ...] = ()
    suggestions: tuple[str, ...] = ()


@dataclass(frozen=True)
class RemoteSuccess:
    """A remote optimization that produced a usable result."""

    result: OptimizationResult


@dataclass(frozen=True)
class RemoteFailure:
    """A remote optimization that failed.

    ``kind`` is the ``kind`` of the raised error (``"upstream"``,
    ``"malformed_json"``, ...) or ``"unexpected"`` for anything else.
    """

    kind: str
    message: str


RemoteOutcome = RemoteSuccess | RemoteFailure


@dataclass(frozen=True)
class OptimizationOutcome:
    """Result returned by the engine, tagged with the path that produced it."""

    result: OptimizationResult
    source: Source
    fallback_reason: str | None = None

    @property
    def degraded(self) -> bool:
        return self.fallback_reason is not None
