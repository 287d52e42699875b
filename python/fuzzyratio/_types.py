"""Result types returned by the batch and Polars APIs."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class MatchResult:
    """
    Result from best_matches and batch operations.

    Supports equality comparison and hashing for use in sets and as dict keys.
    """

    text: str
    score: int
    id: Optional[int] = None


@dataclass
class DeduplicationResult:
    """Result from deduplication operation."""

    groups: List[List[str]] = field(default_factory=list)
    unique: List[str] = field(default_factory=list)
    total_duplicates: int = 0


__all__ = ["MatchResult", "DeduplicationResult"]
