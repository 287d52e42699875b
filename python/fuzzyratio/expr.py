"""Polars expression namespace for fuzzy string matching.

This module registers a `.fuzzy` namespace on Polars expressions,
enabling chainable fuzzy matching operations directly in Polars
expression contexts. Values are scored element-wise with the scorers
from ``fuzzyratio.fuzz``. In ``similarity`` and ``is_similar`` null values
are compared as empty strings; ``best_match`` maps a null to null.

Warning:
    Scoring runs in Python through ``map_elements``. For large columns,
    block or pre-filter candidates before scoring.

Example:
    >>> import polars as pl
    >>> import fuzzyratio  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"team": ["New York Mets", "NY Mets", "Braves"]})
    >>> df.with_columns(
    ...     is_similar=pl.col("team").fuzzy.is_similar("new york mets", min_score=80)
    ... )
"""

from typing import List, Union

import polars as pl

from fuzzyratio import batch
from fuzzyratio._utils import check_min_score, normalize_scorer
from fuzzyratio.enums import Scorer
from fuzzyratio.fuzz import get_scorer


def _as_str(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("fuzzy")
class FuzzyExprNamespace:
    """
    Fuzzy string matching namespace for Polars expressions.

    Provides chainable methods for fuzzy matching directly on columns.
    Access via `.fuzzy` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def similarity(
        self,
        other: Union[str, pl.Expr],
        scorer: Union[str, Scorer] = "ratio",
    ) -> pl.Expr:
        """
        Calculate the score between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            scorer: Scoring function to use (string or Scorer enum)

        Returns:
            Expression producing integer scores (0 to 100)

        Raises:
            ScorerError: If the scorer name is not recognized.
            TypeError: If other is not a string or expression.

        Example:
            >>> df.with_columns(
            ...     score=pl.col("name").fuzzy.similarity("John")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name1").fuzzy.similarity(pl.col("name2"), "token_sort_ratio")
            ... )
        """
        score = get_scorer(scorer)

        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: score(_as_str(s), other),
                return_dtype=pl.Int64,
                skip_nulls=False,
            )

        if not isinstance(other, pl.Expr):
            raise TypeError(f"other must be str or polars Expr, got {type(other).__name__}")

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: score(_as_str(row["_left"]), _as_str(row["_right"])),
            return_dtype=pl.Int64,
        )

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_score: int = 80,
        scorer: Union[str, Scorer] = "ratio",
    ) -> pl.Expr:
        """
        Check if values score at least ``min_score`` against another value/column.

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").fuzzy.is_similar("John", min_score=85))
        """
        check_min_score(min_score)
        return self.similarity(other, scorer=scorer) >= min_score

    def best_match(
        self,
        choices: List[str],
        scorer: Union[str, Scorer] = "wratio",
        min_score: int = 0,
    ) -> pl.Expr:
        """
        Find the best matching string from a list of choices.

        Args:
            choices: List of strings to match against
            scorer: Scoring function to use (string or Scorer enum)
            min_score: Minimum score to return a match (otherwise null)

        Returns:
            Expression with the best matching string (or null)

        Example:
            >>> teams = ["New York Mets", "Atlanta Braves"]
            >>> df.with_columns(
            ...     team=pl.col("raw_team").fuzzy.best_match(teams)
            ... )
        """
        check_min_score(min_score)
        scorer = normalize_scorer(scorer)

        def find_best(value):
            if value is None:
                return None
            result = batch.extract_one(str(value), choices, scorer=scorer, min_score=min_score)
            return result.text if result else None

        return self._expr.map_elements(find_best, return_dtype=pl.Utf8)
