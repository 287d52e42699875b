"""Batch operations API for fuzzyratio.

This module provides list-based batch operations on strings. Every
function accepts a scorer name (or ``Scorer`` enum) and applies the
corresponding function from ``fuzzyratio.fuzz`` to each pair.

Example usage:
    >>> import fuzzyratio.batch as batch

    # Score a query against all strings
    >>> results = batch.similarity(["hello", "hallo", "world"], "hello")
    >>> [(r.text, r.score) for r in results]
    [('hello', 100), ('hallo', 80), ('world', 20)]

    # Find top N best matches
    >>> matches = batch.best_matches(["new york mets", "atlanta braves"], "mets", limit=1)
    >>> [(m.text, m.score) for m in matches]
    [('new york mets', 90)]

    # Find duplicate groups
    >>> result = batch.deduplicate(["New York Mets", "mets new york", "Atlanta Braves"])
    >>> result.groups
    [['New York Mets', 'mets new york']]

    # Pairwise scores between aligned lists
    >>> batch.pairwise(["hello", "world"], ["hallo", "word"])
    [80, 89]
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fuzzyratio._types import DeduplicationResult, MatchResult
from fuzzyratio._utils import check_min_score
from fuzzyratio.exceptions import ValidationError
from fuzzyratio.fuzz import get_scorer

if TYPE_CHECKING:
    from fuzzyratio.enums import Scorer

logger = logging.getLogger(__name__)

__all__ = [
    "similarity",
    "best_matches",
    "extract_one",
    "deduplicate",
    "pairwise",
    "similarity_matrix",
    "UnionFind",
]


class UnionFind:
    """Union-Find data structure for efficient clustering."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, x: int) -> int:
        if self.parent[x] != x:
            self.parent[x] = self.find(self.parent[x])
        return self.parent[x]

    def union(self, x: int, y: int) -> None:
        px, py = self.find(x), self.find(y)
        if px == py:
            return
        if self.rank[px] < self.rank[py]:
            px, py = py, px
        self.parent[py] = px
        if self.rank[px] == self.rank[py]:
            self.rank[px] += 1


def similarity(
    strings: list[str],
    query: str,
    scorer: str | Scorer = "ratio",
) -> list[MatchResult]:
    """Score a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string to match.
        scorer: Scoring function to use (string or Scorer enum), for example
            "ratio" (default), "partial_ratio", "token_sort_ratio",
            "token_set_ratio" or "wratio".

    Returns:
        List of MatchResult objects in the same order as input strings.
        Each result has `text`, `score`, and `id` fields where `id` is
        the original index in the input list.

    Raises:
        ScorerError: If the scorer name is not recognized.
    """
    score = get_scorer(scorer)
    logger.debug("scoring %d strings with %s", len(strings), score.__name__)
    return [MatchResult(text, score(query, text), idx) for idx, text in enumerate(strings)]


def best_matches(
    strings: list[str],
    query: str,
    scorer: str | Scorer = "wratio",
    limit: int = 5,
    min_score: int = 0,
) -> list[MatchResult]:
    """Find top N best matches for a query from a list of strings.

    Scores every string against the query, drops those below
    ``min_score``, sorts by score descending (ties keep input order) and
    returns at most ``limit`` results.

    Args:
        strings: List of strings to search.
        query: The query string to match.
        scorer: Scoring function to use (default: "wratio").
        limit: Maximum number of results to return (default: 5).
        min_score: Minimum score to include in results (0-100).

    Returns:
        List of MatchResult objects sorted by score descending.

    Raises:
        ValidationError: If ``limit`` is negative or ``min_score`` is out of range.
    """
    if limit < 0:
        raise ValidationError(f"limit must be non-negative, got {limit}")
    check_min_score(min_score)
    results = [r for r in similarity(strings, query, scorer) if r.score >= min_score]
    results.sort(key=lambda r: r.score, reverse=True)
    return results[:limit]


def extract_one(
    query: str,
    choices: list[str],
    scorer: str | Scorer = "wratio",
    min_score: int = 0,
) -> MatchResult | None:
    """Return the single best match for ``query``, or None if nothing qualifies."""
    matches = best_matches(choices, query, scorer=scorer, limit=1, min_score=min_score)
    return matches[0] if matches else None


def deduplicate(
    strings: list[str],
    scorer: str | Scorer = "token_sort_ratio",
    min_score: int = 90,
) -> DeduplicationResult:
    """Find duplicate groups in a list of strings.

    Every pair is scored; pairs at or above ``min_score`` are merged into
    groups with Union-Find. This is O(N^2) in the number of strings.

    Args:
        strings: List of strings to deduplicate.
        scorer: Scoring function to use (default: "token_sort_ratio").
        min_score: Minimum score to consider strings as duplicates (default: 90).

    Returns:
        DeduplicationResult with:
            - groups: List of duplicate groups, in order of first appearance
            - unique: List of strings that have no duplicates
            - total_duplicates: Total count of strings that belong to a group
    """
    check_min_score(min_score)
    score = get_scorer(scorer)
    logger.debug("deduplicating %d strings with %s", len(strings), score.__name__)

    uf = UnionFind(len(strings))
    for i in range(len(strings)):
        for j in range(i + 1, len(strings)):
            if score(strings[i], strings[j]) >= min_score:
                uf.union(i, j)

    members: dict[int, list[int]] = {}
    for idx in range(len(strings)):
        members.setdefault(uf.find(idx), []).append(idx)

    groups = []
    unique = []
    for indices in members.values():
        if len(indices) > 1:
            groups.append([strings[i] for i in indices])
        else:
            unique.append(strings[indices[0]])

    return DeduplicationResult(
        groups=groups,
        unique=unique,
        total_duplicates=sum(len(g) for g in groups),
    )


def pairwise(
    left: list[str],
    right: list[str],
    scorer: str | Scorer = "ratio",
) -> list[int]:
    """Score each pair (left[i], right[i]) of two equal-length lists.

    Raises:
        ValidationError: If left and right have different lengths.

    Example:
        >>> pairwise(["hello", "world"], ["hallo", "word"])
        [80, 89]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have equal length, got {len(left)} and {len(right)}"
        )
    score = get_scorer(scorer)
    logger.debug("scoring %d pairs with %s", len(left), score.__name__)
    return [score(a, b) for a, b in zip(left, right)]


def similarity_matrix(
    queries: list[str],
    choices: list[str],
    scorer: str | Scorer = "ratio",
) -> list[list[int]]:
    """Score every query against every choice.

    Returns:
        2D list where result[i][j] is the score of queries[i] against
        choices[j].
    """
    score = get_scorer(scorer)
    logger.debug(
        "building %d x %d score matrix with %s", len(queries), len(choices), score.__name__
    )
    return [[score(q, c) for c in choices] for q in queries]
