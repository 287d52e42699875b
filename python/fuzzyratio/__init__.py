"""
fuzzyratio - Ratcliff-Obershelp fuzzy string matching

A pure-Python library for scoring the similarity of short text records
such as names and labels, on an integer 0-100 scale.

Example usage:
    >>> import fuzzyratio as fr

    # Global similarity
    >>> fr.ratio("hello test", "hello world")
    57

    # Containment-style matching
    >>> fr.partial_ratio("hello", "hello world")
    100

    # Token order and duplication do not matter
    >>> fr.token_set_ratio("new york mets vs atlanta braves",
    ...                    "atlanta braves vs new york mets")
    100

    # Rank choices (returns MatchResult objects)
    >>> matches = fr.best_matches(["New York Mets", "Atlanta Braves"], "mets", limit=1)
    >>> [(m.text, m.score) for m in matches]
    [('New York Mets', 90)]
"""

import logging
from importlib.metadata import version as _get_version

from fuzzyratio._matcher import Match, longest_common_substring, matching_blocks
from fuzzyratio._types import DeduplicationResult, MatchResult
from fuzzyratio._utils import ascii_only, pre_process
from fuzzyratio.batch import (
    best_matches,
    deduplicate,
    extract_one,
    pairwise,
    similarity,
    similarity_matrix,
)
from fuzzyratio.enums import MatchMode, Scorer
from fuzzyratio.exceptions import FuzzyRatioError, ScorerError, ValidationError
from fuzzyratio.fuzz import (
    get_scorer,
    partial_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    qratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
    uqratio,
    uwratio,
    wratio,
)

# Register the .fuzzy expression namespace
import fuzzyratio.expr  # noqa: F401, E402

# -----------------------------------------------------------------------------
# Polars Integration - High-Level API (polars_ext)
# -----------------------------------------------------------------------------
from fuzzyratio.polars_ext import (  # noqa: E402
    dedupe_series,
    fuzzy_join,
    match_series,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("fuzzyratio")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "FuzzyRatioError",
    "ValidationError",
    "ScorerError",
    # Result types
    "Match",
    "MatchResult",
    "DeduplicationResult",
    # Enums
    "Scorer",
    "MatchMode",
    # Matching blocks
    "longest_common_substring",
    "matching_blocks",
    # Pre-processing
    "pre_process",
    "ascii_only",
    # Scorers
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
    "qratio",
    "uqratio",
    "wratio",
    "uwratio",
    "get_scorer",
    # Batch processing
    "similarity",
    "best_matches",
    "extract_one",
    "deduplicate",
    "pairwise",
    "similarity_matrix",
    # Polars Integration
    "match_series",
    "dedupe_series",
    "fuzzy_join",
]
