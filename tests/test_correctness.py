"""Reference correctness tests.

- difflib.SequenceMatcher with junk detection disabled builds the same
  Ratcliff-Obershelp matching blocks, so ``ratio`` must agree with its
  ``ratio()`` up to integer rounding.
- RapidFuzz's ``fuzz.ratio`` counts the longest common subsequence, which
  is never shorter than the characters covered by matching blocks, so it
  is an upper bound for ``ratio``.
"""

import math
from difflib import SequenceMatcher

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

import fuzzyratio as fr

try:
    from rapidfuzz import fuzz as rf_fuzz

    HAS_RAPIDFUZZ = True
except ImportError:
    HAS_RAPIDFUZZ = False


# Strategy for ASCII strings (avoiding unicode edge cases in reference comparison)
ascii_text = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=0, max_size=40
)
non_empty_ascii = st.text(
    alphabet=st.characters(min_codepoint=32, max_codepoint=126), min_size=1, max_size=40
)


def _difflib_ratio(a: str, b: str) -> float:
    shorter, longer = sorted((a, b), key=lambda s: (len(s), s))
    return SequenceMatcher(None, shorter, longer, autojunk=False).ratio()


class TestDifflibReference:
    """Compare ratio against difflib.SequenceMatcher."""

    @given(ascii_text, ascii_text)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_ratio_matches_difflib(self, a: str, b: str):
        expected = 100 * _difflib_ratio(a, b)
        actual = fr.ratio(a, b)
        assert abs(actual - expected) <= 0.5 + 1e-9, (
            f"ratio({a!r}, {b!r}) = {actual}, difflib = {expected}"
        )

    @pytest.mark.parametrize(
        "a,b",
        [
            ("hello test", "hello world"),
            ("hello bar", "hello"),
            ("New York Mets", "New York Meats"),
            ("tide", "diet"),
        ],
    )
    def test_known_pairs(self, a: str, b: str):
        assert fr.ratio(a, b) == math.floor(100 * _difflib_ratio(a, b) + 0.5)


@pytest.mark.skipif(not HAS_RAPIDFUZZ, reason="rapidfuzz not installed")
class TestRapidFuzzBounds:
    """RapidFuzz's LCS-based scores bound the block-based scores from above."""

    @given(non_empty_ascii, non_empty_ascii)
    @settings(max_examples=300, suppress_health_check=[HealthCheck.too_slow])
    def test_ratio_bounded_by_rapidfuzz(self, a: str, b: str):
        assert fr.ratio(a, b) <= math.ceil(rf_fuzz.ratio(a, b))

    @given(non_empty_ascii)
    @settings(max_examples=100)
    def test_identity_agrees(self, s: str):
        assert fr.ratio(s, s) == round(rf_fuzz.ratio(s, s)) == 100

    @pytest.mark.parametrize(
        "a,b",
        [
            ("hello", "hello world"),
            ("test", "this is a test"),
            ("new york mets", "the new york mets won"),
        ],
    )
    def test_partial_containment_agrees(self, a: str, b: str):
        assert fr.partial_ratio(a, b) == round(rf_fuzz.partial_ratio(a, b)) == 100

    def test_token_sort_agrees_on_permutations(self):
        a, b = "new york mets vs atlanta braves", "atlanta braves vs new york mets"
        assert fr.token_sort_ratio(a, b) == round(rf_fuzz.token_sort_ratio(a, b)) == 100
