"""Enums for fuzzyratio API."""

from enum import Enum


class Scorer(str, Enum):
    """Available scoring functions.

    This enum provides type-safe scorer selection for batch and Polars
    operations. Plain strings with the same values are accepted as well.

    Example:
        >>> from fuzzyratio import Scorer, best_matches
        >>> matches = best_matches(
        ...     ["new york mets", "new york yankees", "atlanta braves"],
        ...     "mets new york",
        ...     scorer=Scorer.TOKEN_SORT_RATIO,
        ...     limit=1,
        ... )
    """

    RATIO = "ratio"
    """Ratcliff-Obershelp similarity over the full strings"""

    PARTIAL_RATIO = "partial_ratio"
    """Best ratio between the shorter string and a window of the longer one"""

    TOKEN_SORT_RATIO = "token_sort_ratio"
    """Ratio after sorting whitespace-delimited tokens"""

    PARTIAL_TOKEN_SORT_RATIO = "partial_token_sort_ratio"
    """Partial ratio after sorting tokens"""

    TOKEN_SET_RATIO = "token_set_ratio"
    """Best ratio over intersection/difference strings of the token sets"""

    PARTIAL_TOKEN_SET_RATIO = "partial_token_set_ratio"
    """Token-set ratio using partial ratio for each comparison"""

    QRATIO = "qratio"
    """Ratio after full pre-processing with ASCII forcing"""

    UQRATIO = "uqratio"
    """Ratio after full pre-processing, keeping non-ASCII characters"""

    WRATIO = "wratio"
    """Weighted best of ratio, partial and token scores"""

    UWRATIO = "uwratio"
    """Weighted ratio keeping non-ASCII characters"""


class MatchMode(str, Enum):
    """How the token wrappers compare their derived strings.

    Example:
        >>> from fuzzyratio.fuzz import token_set_score
        >>> token_set_score("mets vs braves", "braves mets", MatchMode.PARTIAL)
        100
    """

    FULL = "full"
    """Compare with ratio"""

    PARTIAL = "partial"
    """Compare with partial_ratio"""


__all__ = ["Scorer", "MatchMode"]
