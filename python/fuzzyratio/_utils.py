"""Internal utilities for fuzzyratio.

String pre-processing and tokenization used by the token wrappers, plus
scorer-name and threshold validation shared by the batch and Polars layers.
"""

import re
from typing import List, Set, Union

from fuzzyratio.enums import Scorer
from fuzzyratio.exceptions import ScorerError, ValidationError

# Valid scorer names (lowercase)
VALID_SCORERS = frozenset(s.value for s in Scorer)

# Every character that is not a letter or a digit
_NON_ALNUM = re.compile(r"[\W_]")


def ascii_only(s: str) -> str:
    """Drop every character outside the 7-bit ASCII range."""
    return s.encode("ascii", "ignore").decode("ascii")


def pre_process(s: str, force_ascii: bool = False) -> str:
    """Normalize a string for comparison.

    Optionally drops non-ASCII characters, lowercases, replaces every
    non-alphanumeric character with a space and trims surrounding
    whitespace. The result is stable under a second application.

    Args:
        s: String to process.
        force_ascii: Drop non-ASCII characters first.

    Returns:
        The processed string.

    Example:
        >>> pre_process("  Hello, World!  ")
        'hello  world'
        >>> pre_process("Café au lait", force_ascii=True)
        'caf au lait'
    """
    if force_ascii:
        s = ascii_only(s)
    # Lowercase before filtering so case mappings that yield combining
    # marks are filtered too.
    s = s.lower()
    s = _NON_ALNUM.sub(" ", s)
    return s.strip()


def tokenize(s: str) -> List[str]:
    """Split on runs of whitespace, dropping empty tokens."""
    return s.split()


def sorted_tokens(s: str) -> str:
    """Return the tokens of ``s`` sorted and joined by single spaces."""
    return " ".join(sorted(tokenize(s)))


def token_set(s: str) -> Set[str]:
    """Return the distinct tokens of ``s``."""
    return set(tokenize(s))


def normalize_scorer(scorer: Union[str, Scorer]) -> str:
    """Convert Scorer enum to string, or validate string scorer name.

    Args:
        scorer: Either a Scorer enum value or a string scorer name.

    Returns:
        Lowercase string scorer name.

    Raises:
        ScorerError: If the scorer name is not recognized.
        TypeError: If scorer is not a string or Scorer enum.

    Example:
        >>> normalize_scorer(Scorer.TOKEN_SET_RATIO)
        'token_set_ratio'
        >>> normalize_scorer("WRatio")
        'wratio'
    """
    if isinstance(scorer, Scorer):
        return scorer.value

    if isinstance(scorer, str):
        name = scorer.lower()
        if name in VALID_SCORERS:
            return name
        raise ScorerError(
            f"Unknown scorer: '{scorer}'. Valid options: {sorted(VALID_SCORERS)}"
        )

    raise TypeError(f"scorer must be str or Scorer enum, got {type(scorer).__name__}")


def check_min_score(min_score: int) -> None:
    """Raise ValidationError unless ``min_score`` lies in 0..100."""
    if not 0 <= min_score <= 100:
        raise ValidationError(f"min_score must be between 0 and 100, got {min_score}")


__all__ = [
    "ascii_only",
    "pre_process",
    "tokenize",
    "sorted_tokens",
    "token_set",
    "normalize_scorer",
    "check_min_score",
    "VALID_SCORERS",
]
