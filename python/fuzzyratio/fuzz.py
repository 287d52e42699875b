"""Similarity scorers built on Ratcliff-Obershelp matching blocks.

All scorers return an integer between 0 and 100.

- ``ratio``: global similarity of two strings
- ``partial_ratio``: best similarity of the shorter string against a
  window of the longer one
- ``token_sort_ratio`` / ``partial_token_sort_ratio``: order-insensitive
  variants that sort tokens first
- ``token_set_ratio`` / ``partial_token_set_ratio``: variants that compare
  the shared tokens against what each side adds
- ``qratio`` / ``uqratio``: ``ratio`` after full pre-processing
- ``wratio`` / ``uwratio``: weighted best-of used for ranking choices

Example:
    >>> from fuzzyratio import fuzz
    >>> fuzz.ratio("hello test", "hello world")
    57
    >>> fuzz.partial_ratio("hello", "hello world")
    100
    >>> fuzz.token_sort_ratio("hello world", "world hello")
    100
"""

import functools
import math
from typing import Callable, Dict, Optional, Tuple, Union

from fuzzyratio._matcher import matching_blocks
from fuzzyratio._utils import ascii_only, normalize_scorer, pre_process, sorted_tokens, token_set
from fuzzyratio.enums import MatchMode, Scorer

ScorerFunc = Callable[[str, str], int]

# wratio weights
UNBASE_SCALE = 0.95
PARTIAL_SCALE = 0.90
LONG_PARTIAL_SCALE = 0.6


def _none_scores_zero(func):
    """Score 0 when either argument is None."""

    @functools.wraps(func)
    def wrapper(s1: Optional[str], s2: Optional[str], *args, **kwargs) -> int:
        if s1 is None or s2 is None:
            return 0
        return func(s1, s2, *args, **kwargs)

    return wrapper


def _percent(numerator: int, denominator: int) -> int:
    # round(100 * numerator / denominator), halves rounded up, in exact integers
    return (200 * numerator + denominator) // (2 * denominator)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _ordered(s1: str, s2: str) -> Tuple[str, str]:
    """Return ``(shorter, longer)``; equal lengths are ordered lexicographically."""
    if (len(s1), s1) <= (len(s2), s2):
        return s1, s2
    return s2, s1


def _prepare(s: str, force_ascii: bool, full_process: bool) -> str:
    if full_process:
        return pre_process(s, force_ascii)
    if force_ascii:
        return ascii_only(s)
    return s


def _compare(s1: str, s2: str, mode: Union[str, MatchMode]) -> int:
    if MatchMode(mode) is MatchMode.PARTIAL:
        return partial_ratio(s1, s2)
    return ratio(s1, s2)


@_none_scores_zero
def ratio(s1: str, s2: str) -> int:
    """Ratcliff-Obershelp similarity of two strings.

    Twice the number of matched characters over the combined length,
    scaled to 0-100 and rounded half up. Two empty strings score 100.

    Example:
        >>> ratio("hello bar", "hello")
        71
        >>> ratio("hellobar", "hello")
        77
    """
    total = len(s1) + len(s2)
    if not total:
        return 100
    shorter, longer = _ordered(s1, s2)
    matched = sum(block.size for block in matching_blocks(shorter, longer))
    return _percent(2 * matched, total)


@_none_scores_zero
def partial_ratio(s1: str, s2: str) -> int:
    """Best ratio of the shorter string against windows of the longer one.

    For every matching block, the window of the longer string that lines
    the block up with the shorter string is scored with ``ratio``. The
    best window wins. No common content (or an empty side) scores 0.

    Example:
        >>> partial_ratio("hello", "hello world")
        100
        >>> partial_ratio("hello", "hallo world")
        80
    """
    shorter, longer = _ordered(s1, s2)
    width = len(shorter)
    best = 0
    for i, j, k in matching_blocks(shorter, longer):
        if not k:
            continue
        start = max(0, j - i)
        score = ratio(shorter, longer[start : start + width])
        if score > 99:
            return 100
        best = max(best, score)
    return best


def token_sort_score(
    s1: str,
    s2: str,
    mode: Union[str, MatchMode] = MatchMode.FULL,
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    """Compare two strings after sorting their tokens alphabetically."""
    sorted1 = sorted_tokens(_prepare(s1, force_ascii, full_process))
    sorted2 = sorted_tokens(_prepare(s2, force_ascii, full_process))
    return _compare(sorted1, sorted2, mode)


def token_set_score(
    s1: str,
    s2: str,
    mode: Union[str, MatchMode] = MatchMode.FULL,
    force_ascii: bool = True,
    full_process: bool = True,
) -> int:
    """Compare the shared tokens of two strings against what each side adds.

    Builds three strings from the token sets: the sorted intersection, and
    the intersection followed directly by each side's sorted leftovers.
    Returns the best of the three pairwise comparisons.
    """
    p1 = _prepare(s1, force_ascii, full_process)
    p2 = _prepare(s2, force_ascii, full_process)

    tokens1 = token_set(p1)
    tokens2 = token_set(p2)
    if bool(tokens1) != bool(tokens2):
        return 0

    intersection = " ".join(sorted(tokens1 & tokens2))
    diff1to2 = " ".join(sorted(tokens1 - tokens2))
    diff2to1 = " ".join(sorted(tokens2 - tokens1))

    combined_1to2 = intersection + diff1to2 if diff1to2 else intersection
    combined_2to1 = intersection + diff2to1 if diff2to1 else intersection

    return max(
        _compare(intersection, combined_1to2, mode),
        _compare(intersection, combined_2to1, mode),
        _compare(combined_1to2, combined_2to1, mode),
    )


@_none_scores_zero
def token_sort_ratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True) -> int:
    """``ratio`` of the token-sorted strings.

    Example:
        >>> token_sort_ratio("hello world", "world hello", False, False)
        100
    """
    return token_sort_score(s1, s2, MatchMode.FULL, force_ascii, full_process)


@_none_scores_zero
def partial_token_sort_ratio(
    s1: str, s2: str, force_ascii: bool = True, full_process: bool = True
) -> int:
    """``partial_ratio`` of the token-sorted strings."""
    return token_sort_score(s1, s2, MatchMode.PARTIAL, force_ascii, full_process)


@_none_scores_zero
def token_set_ratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True) -> int:
    """Token-set similarity using ``ratio``.

    Example:
        >>> token_set_ratio(
        ...     "new york mets vs atlanta braves",
        ...     "atlanta braves vs new york mets",
        ...     False,
        ...     False,
        ... )
        100
    """
    return token_set_score(s1, s2, MatchMode.FULL, force_ascii, full_process)


@_none_scores_zero
def partial_token_set_ratio(
    s1: str, s2: str, force_ascii: bool = True, full_process: bool = True
) -> int:
    """Token-set similarity using ``partial_ratio``."""
    return token_set_score(s1, s2, MatchMode.PARTIAL, force_ascii, full_process)


@_none_scores_zero
def qratio(s1: str, s2: str, force_ascii: bool = True) -> int:
    """``ratio`` after full pre-processing of both strings."""
    return ratio(pre_process(s1, force_ascii), pre_process(s2, force_ascii))


def uqratio(s1: str, s2: str) -> int:
    """Unicode ``qratio``: pre-processing keeps non-ASCII characters."""
    return qratio(s1, s2, force_ascii=False)


@_none_scores_zero
def wratio(s1: str, s2: str, force_ascii: bool = True, full_process: bool = True) -> int:
    """Weighted best-of score for ranking choices.

    Takes the plain ratio and, depending on how different the lengths are,
    either the token scores or the partial scores scaled down so that exact
    matches still rank first.

    - Length ratio below 1.5: ``max(ratio, 0.95 * token_sort, 0.95 * token_set)``
    - Otherwise partial scores are used and scaled by 0.9 (0.6 when one
      string is more than eight times longer)

    Either side processing to an empty string scores 0.
    """
    p1 = _prepare(s1, force_ascii, full_process)
    p2 = _prepare(s2, force_ascii, full_process)
    if not p1 or not p2:
        return 0

    base = ratio(p1, p2)
    len_ratio = max(len(p1), len(p2)) / min(len(p1), len(p2))

    if len_ratio < 1.5:
        tsor = token_sort_ratio(p1, p2, force_ascii, False) * UNBASE_SCALE
        tser = token_set_ratio(p1, p2, force_ascii, False) * UNBASE_SCALE
        return _round_half_up(max(base, tsor, tser))

    partial_scale = LONG_PARTIAL_SCALE if len_ratio > 8 else PARTIAL_SCALE
    partial = partial_ratio(p1, p2) * partial_scale
    ptsor = partial_token_sort_ratio(p1, p2, force_ascii, False) * UNBASE_SCALE * partial_scale
    ptser = partial_token_set_ratio(p1, p2, force_ascii, False) * UNBASE_SCALE * partial_scale
    return _round_half_up(max(base, partial, ptsor, ptser))


def uwratio(s1: str, s2: str) -> int:
    """Unicode ``wratio``: pre-processing keeps non-ASCII characters."""
    return wratio(s1, s2, force_ascii=False)


SCORERS: Dict[str, ScorerFunc] = {
    Scorer.RATIO.value: ratio,
    Scorer.PARTIAL_RATIO.value: partial_ratio,
    Scorer.TOKEN_SORT_RATIO.value: token_sort_ratio,
    Scorer.PARTIAL_TOKEN_SORT_RATIO.value: partial_token_sort_ratio,
    Scorer.TOKEN_SET_RATIO.value: token_set_ratio,
    Scorer.PARTIAL_TOKEN_SET_RATIO.value: partial_token_set_ratio,
    Scorer.QRATIO.value: qratio,
    Scorer.UQRATIO.value: uqratio,
    Scorer.WRATIO.value: wratio,
    Scorer.UWRATIO.value: uwratio,
}


def get_scorer(scorer: Union[str, Scorer]) -> ScorerFunc:
    """Look up a scorer function by name or Scorer enum."""
    return SCORERS[normalize_scorer(scorer)]


__all__ = [
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
    "token_sort_score",
    "token_set_score",
    "qratio",
    "uqratio",
    "wratio",
    "uwratio",
    "SCORERS",
    "get_scorer",
]
