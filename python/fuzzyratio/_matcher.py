"""Ratcliff-Obershelp matching blocks.

The matcher finds the longest common substring of two strings, then
recurses into the unmatched regions on either side of it. The collected
blocks are sorted, merged where they touch in both strings and closed with
a zero-length sentinel, the same shape ``difflib.SequenceMatcher`` uses for
``get_matching_blocks()``.

Offsets are code-point offsets into Python ``str`` values, so a block can
never split a multi-byte character.

Warning:
    The substring search is brute force, roughly O(n^3) in the length of
    the shorter string. It is meant for short records such as names and
    labels. Cap input lengths at the call site when latency matters.
"""

import logging
from typing import List, NamedTuple

logger = logging.getLogger(__name__)

# Inputs longer than this are reported at debug level
LONG_INPUT_WARNING = 1000


class Match(NamedTuple):
    """A matching block: ``shorter[a:a+size] == longer[b:b+size]``."""

    a: int
    b: int
    size: int


def longest_common_substring(
    shorter: str,
    longer: str,
    low1: int,
    high1: int,
    low2: int,
    high2: int,
) -> Match:
    """Find one longest common substring of two ranges.

    Searches ``shorter[low1:high1]`` against ``longer[low2:high2]``. Among
    equally long candidates the one starting leftmost in ``shorter`` wins,
    then the leftmost occurrence in ``longer``.

    Returns:
        The match, or ``Match(low1, low2, 0)`` when the ranges share nothing.
    """
    max_size = min(high1 - low1, high2 - low2)
    for size in range(max_size, 0, -1):
        for start in range(low1, high1 - size + 1):
            j = longer.find(shorter[start : start + size], low2, high2)
            if j != -1:
                return Match(start, j, size)
    return Match(low1, low2, 0)


def matching_blocks(shorter: str, longer: str) -> List[Match]:
    """Return the merged matching blocks of two strings.

    Blocks are sorted by their offset in ``shorter``, never overlap in
    either string, and blocks adjacent in both strings are merged. The
    list always ends with ``Match(len(shorter), len(longer), 0)``.

    Example:
        >>> matching_blocks("hello", "hello world")
        [Match(a=0, b=0, size=5), Match(a=5, b=11, size=0)]
    """
    len1, len2 = len(shorter), len(longer)
    if len2 > LONG_INPUT_WARNING:
        logger.debug("matching %d x %d characters; substring search is cubic", len1, len2)

    queue = [(0, len1, 0, len2)]
    blocks = []
    while queue:
        low1, high1, low2, high2 = queue.pop()
        i, j, k = longest_common_substring(shorter, longer, low1, high1, low2, high2)
        if k:
            blocks.append(Match(i, j, k))
            if low1 < i and low2 < j:
                queue.append((low1, i, low2, j))
            if i + k < high1 and j + k < high2:
                queue.append((i + k, high1, j + k, high2))
    blocks.sort()

    i1 = j1 = k1 = 0
    non_adjacent = []
    for i2, j2, k2 in blocks:
        if i1 + k1 == i2 and j1 + k1 == j2:
            k1 += k2
        else:
            if k1:
                non_adjacent.append(Match(i1, j1, k1))
            i1, j1, k1 = i2, j2, k2
    if k1:
        non_adjacent.append(Match(i1, j1, k1))

    non_adjacent.append(Match(len1, len2, 0))
    return non_adjacent


__all__ = ["Match", "longest_common_substring", "matching_blocks", "LONG_INPUT_WARNING"]
