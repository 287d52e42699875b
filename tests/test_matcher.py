"""Tests for longest common substring search and matching blocks."""

import logging
from difflib import SequenceMatcher

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

import fuzzyratio as fr
from fuzzyratio._matcher import LONG_INPUT_WARNING

short_text = st.text(alphabet="abcde ", max_size=30)


class TestLongestCommonSubstring:
    """Tests for longest_common_substring."""

    def test_whole_range(self):
        assert fr.longest_common_substring("hello test", "hello world", 0, 10, 0, 11) == (0, 0, 6)

    def test_no_common_characters(self):
        """No match returns a zero-length sentinel at the range starts."""
        assert fr.longest_common_substring("abc", "xyz", 0, 3, 0, 3) == (0, 0, 0)
        assert fr.longest_common_substring("abc", "xyz", 1, 3, 2, 3) == (1, 2, 0)

    def test_sub_range_offsets_are_absolute(self):
        assert fr.longest_common_substring("abcabc", "xxabc", 3, 6, 0, 5) == (3, 2, 3)

    def test_leftmost_in_shorter_wins_ties(self):
        # "ab" and "cd" are both length 2; "ab" starts first in shorter
        assert fr.longest_common_substring("abxcd", "cdab", 0, 5, 0, 4) == (0, 2, 2)

    def test_leftmost_in_longer_wins_ties(self):
        assert fr.longest_common_substring("ab", "xabab", 0, 2, 0, 5) == (0, 1, 2)

    def test_search_stays_inside_longer_range(self):
        # "ab" occurs at 0 in longer, but the range starts at 1
        assert fr.longest_common_substring("ab", "abxab", 0, 2, 1, 5) == (0, 3, 2)

    def test_empty_ranges(self):
        assert fr.longest_common_substring("abc", "abc", 1, 1, 0, 3) == (1, 0, 0)
        assert fr.longest_common_substring("abc", "abc", 0, 3, 2, 2) == (0, 2, 0)

    def test_returns_match_tuple(self):
        match = fr.longest_common_substring("abc", "xbc", 0, 3, 0, 3)
        assert isinstance(match, fr.Match)
        assert (match.a, match.b, match.size) == (1, 1, 2)


class TestMatchingBlocks:
    """Tests for matching_blocks."""

    def test_containment(self):
        assert fr.matching_blocks("hello", "hello world") == [(0, 0, 5), (5, 11, 0)]

    def test_shared_prefix_only(self):
        assert fr.matching_blocks("hello test", "hello world") == [(0, 0, 6), (10, 11, 0)]

    def test_recurses_both_sides(self):
        # "ve caf" first, then "na" to its left
        blocks = fr.matching_blocks("naive cafe", "naïve café")
        assert blocks == [(0, 0, 2), (3, 3, 6), (10, 10, 0)]

    def test_greedy_choice(self):
        assert fr.matching_blocks("tide", "diet") == [(0, 3, 1), (4, 4, 0)]
        assert fr.matching_blocks("diet", "tide") == [(0, 2, 1), (2, 3, 1), (4, 4, 0)]

    def test_empty_strings(self):
        assert fr.matching_blocks("", "") == [(0, 0, 0)]
        assert fr.matching_blocks("", "abc") == [(0, 3, 0)]
        assert fr.matching_blocks("abc", "") == [(3, 0, 0)]

    def test_no_common_content(self):
        assert fr.matching_blocks("abc", "xyz") == [(3, 3, 0)]

    def test_multibyte_offsets_are_code_points(self):
        assert fr.matching_blocks("日本", "日本語") == [(0, 0, 2), (2, 3, 0)]

    def test_long_input_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="fuzzyratio._matcher"):
            fr.matching_blocks("a", "b" * (LONG_INPUT_WARNING + 1))
        assert "substring search is cubic" in caplog.text


class TestMatchingBlockInvariants:
    """Property tests for the matching-block sequence."""

    @given(short_text, short_text)
    @settings(max_examples=200)
    def test_blocks_are_real_matches(self, a: str, b: str):
        for i, j, k in fr.matching_blocks(a, b):
            assert a[i : i + k] == b[j : j + k]

    @given(short_text, short_text)
    @settings(max_examples=200)
    def test_sorted_non_overlapping_and_merged(self, a: str, b: str):
        blocks = fr.matching_blocks(a, b)
        real = blocks[:-1]
        assert all(k > 0 for _, _, k in real)
        for (i1, j1, k1), (i2, j2, k2) in zip(real, real[1:]):
            assert i1 + k1 <= i2
            assert j1 + k1 <= j2
            assert not (i1 + k1 == i2 and j1 + k1 == j2)

    @given(short_text, short_text)
    @settings(max_examples=200)
    def test_ends_with_sentinel(self, a: str, b: str):
        assert fr.matching_blocks(a, b)[-1] == (len(a), len(b), 0)

    @given(short_text, short_text)
    @settings(max_examples=200)
    def test_matches_difflib_without_junk(self, a: str, b: str):
        """difflib uses the same longest-match tie-breaks when junk is disabled."""
        expected = SequenceMatcher(None, a, b, autojunk=False).get_matching_blocks()
        assert fr.matching_blocks(a, b) == [tuple(m) for m in expected]


@pytest.mark.parametrize(
    "shorter,longer",
    [
        ("abcd", "abcxabcd"),
        ("abxyab", "ab12ab"),
        ("the quick brown", "quick the brown"),
    ],
)
def test_total_matched_never_exceeds_shorter(shorter, longer):
    matched = sum(k for _, _, k in fr.matching_blocks(shorter, longer))
    assert matched <= len(shorter)
