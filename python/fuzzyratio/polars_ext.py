"""High-level Polars DataFrame operations for fuzzyratio.

This module provides user-friendly functions for common fuzzy matching
operations on Polars DataFrames and Series, built on the scorers in
``fuzzyratio.fuzz`` and the list API in ``fuzzyratio.batch``.

Functions in This Module
------------------------
- ``match_series()``: Match query Series against target Series
- ``dedupe_series()``: Deduplicate a Series, grouping similar values
- ``fuzzy_join()``: Fuzzy join two DataFrames on one column pair

All functions compare every query against every candidate, so they are
meant for small to medium inputs.

Example Usage
-------------
>>> import polars as pl
>>> import fuzzyratio as fr
>>>
>>> left = pl.DataFrame({"team": ["NY Mets", "Atlanta Braves"]})
>>> right = pl.DataFrame({"club": ["New York Mets", "Braves of Atlanta"]})
>>> result = fr.fuzzy_join(left, right, left_on="team", right_on="club",
...                        scorer="token_set_ratio", min_score=70)

See Also
--------
- ``fuzzyratio.expr``: Polars expression namespace for column operations
- ``fuzzyratio.batch``: List-based batch operations
"""

import logging
from typing import List, Literal, Optional, Tuple, Union

import polars as pl

from fuzzyratio import batch
from fuzzyratio._utils import check_min_score
from fuzzyratio.enums import Scorer
from fuzzyratio.exceptions import ValidationError
from fuzzyratio.fuzz import get_scorer

logger = logging.getLogger(__name__)


def _to_strings(series: "pl.Series") -> List[str]:
    return [str(x) if x is not None else "" for x in series.to_list()]


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    scorer: Union[str, Scorer] = "wratio",
    min_score: int = 0,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, returns every target scoring at least ``min_score``.
    Null queries and null targets are skipped.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        scorer: Scoring function to use (string or Scorer enum)
        min_score: Minimum score threshold (0 to 100)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score

    Example:
        >>> queries = pl.Series(["mets", "braves"])
        >>> targets = pl.Series(["New York Mets", "Atlanta Braves", "Cubs"])
        >>> result = match_series(queries, targets, min_score=80)
    """
    check_min_score(min_score)
    score = get_scorer(scorer)
    queries = query_series.to_list()
    targets = target_series.to_list()
    logger.debug("matching %d queries against %d targets", len(queries), len(targets))

    results = []
    for query_idx, query in enumerate(queries):
        if query is None:
            continue
        for target_idx, target in enumerate(targets):
            if target is None:
                continue
            value = score(str(query), str(target))
            if value >= min_score:
                results.append(
                    {
                        "query_idx": query_idx,
                        "query": str(query),
                        "target_idx": target_idx,
                        "target": str(target),
                        "score": value,
                    }
                )

    return pl.DataFrame(
        results,
        schema={
            "query_idx": pl.Int64,
            "query": pl.Utf8,
            "target_idx": pl.Int64,
            "target": pl.Utf8,
            "score": pl.Int64,
        },
    )


def dedupe_series(
    series: "pl.Series",
    scorer: Union[str, Scorer] = "token_sort_ratio",
    min_score: int = 90,
) -> "pl.DataFrame":
    """
    Deduplicate a Series, grouping similar values together.

    Args:
        series: Series of strings to deduplicate
        scorer: Scoring function to use (string or Scorer enum)
        min_score: Minimum score to consider as duplicates (default: 90)

    Returns:
        DataFrame with columns:
        - value: The original string value
        - group_id: Group identifier (None for unique values)
        - is_canonical: True for the first (canonical) value in each group

    Example:
        >>> series = pl.Series(["New York Mets", "mets, new york", "Braves"])
        >>> result = dedupe_series(series)
        >>> print(result.filter(pl.col("group_id").is_not_null()))
    """
    result = batch.deduplicate(_to_strings(series), scorer=scorer, min_score=min_score)

    rows = []
    for group_id, group in enumerate(result.groups):
        for i, item in enumerate(group):
            rows.append(
                {
                    "value": item,
                    "group_id": group_id,
                    "is_canonical": i == 0,
                }
            )

    for item in result.unique:
        rows.append(
            {
                "value": item,
                "group_id": None,
                "is_canonical": True,
            }
        )

    return pl.DataFrame(
        rows,
        schema={"value": pl.Utf8, "group_id": pl.Int64, "is_canonical": pl.Boolean},
    )


def fuzzy_join(
    left: "pl.DataFrame",
    right: "pl.DataFrame",
    left_on: str,
    right_on: str,
    scorer: Union[str, Scorer] = "wratio",
    min_score: int = 80,
    how: Literal["inner", "left"] = "inner",
) -> "pl.DataFrame":
    """
    Fuzzy join two DataFrames based on string similarity.

    Each left row is joined to its single best-scoring right row, provided
    the score reaches ``min_score``. Ties go to the earliest right row.

    Args:
        left: Left DataFrame
        right: Right DataFrame
        left_on: Column name in left DataFrame
        right_on: Column name in right DataFrame
        scorer: Scoring function to use (string or Scorer enum)
        min_score: Minimum score for a match
        how: Join type - "inner" (default) or "left"

    Returns:
        Joined DataFrame with all columns from both DataFrames plus a
        'fuzzy_score' column. Right columns whose names clash with left
        columns get a '_right' suffix.

    Raises:
        ValidationError: If ``how`` is not "inner" or "left", or
            ``min_score`` is outside 0..100.
    """
    if how not in ("inner", "left"):
        raise ValidationError(f"how must be 'inner' or 'left', got {how!r}")
    check_min_score(min_score)

    score = get_scorer(scorer)
    choices = _to_strings(right[right_on])
    logger.debug("fuzzy joining %d rows against %d rows", left.height, len(choices))

    match_info: List[Tuple[int, Optional[int], Optional[int]]] = []
    for left_idx, value in enumerate(left[left_on].to_list()):
        best_idx: Optional[int] = None
        best_score = -1
        if value is not None:
            for right_idx, choice in enumerate(choices):
                s = score(str(value), choice)
                if s > best_score:
                    best_idx, best_score = right_idx, s
        if best_idx is not None and best_score >= min_score:
            match_info.append((left_idx, best_idx, best_score))
        elif how == "left":
            match_info.append((left_idx, None, None))

    matches = pl.DataFrame(
        {
            "_left_idx": [left_idx for left_idx, _, _ in match_info],
            "_right_idx": [right_idx for _, right_idx, _ in match_info],
            "fuzzy_score": [s for _, _, s in match_info],
        },
        schema={"_left_idx": pl.UInt32, "_right_idx": pl.UInt32, "fuzzy_score": pl.Int64},
    )

    # Null _right_idx rows (unmatched, how="left") keep nulls for right columns
    joined = (
        left.with_row_index("_left_idx")
        .join(matches, on="_left_idx", how="inner")
        .join(right.with_row_index("_right_idx"), on="_right_idx", how="left", suffix="_right")
        .sort("_left_idx")
        .drop(["_left_idx", "_right_idx"])
    )
    return joined.select(pl.exclude("fuzzy_score"), pl.col("fuzzy_score"))
