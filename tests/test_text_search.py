import pytest
from hypothesis import given, strategies as st

from cpalgos.text_search import kmp_search, lcs_length, prefix_function


def test_kmp_worked_example():
    assert kmp_search("aaba", "aabaacaadaabaaba") == [0, 9, 12]


def test_prefix_function_example():
    assert prefix_function("aaba") == [0, 1, 0, 1]


@given(st.text(alphabet="ab", max_size=30))
def test_prefix_function_values_are_borders(pattern):
    lps = prefix_function(pattern)
    assert len(lps) == len(pattern)
    for i, k in enumerate(lps):
        assert k <= i
        assert pattern[:k] == pattern[i - k + 1:i + 1]


@given(st.text(alphabet="ab", min_size=1, max_size=5), st.text(alphabet="ab", max_size=40))
def test_kmp_finds_all_occurrences(pattern, text):
    expected = [i for i in range(len(text)) if text.startswith(pattern, i)]
    assert kmp_search(pattern, text) == expected


def test_kmp_rejects_empty_pattern():
    with pytest.raises(ValueError):
        kmp_search("", "abc")


def test_lcs_example():
    assert lcs_length("ABCDGH", "AEDFHR") == 3


@given(st.text(alphabet="abc", max_size=20), st.text(alphabet="abc", max_size=20))
def test_lcs_invariants(first, second):
    result = lcs_length(first, second)
    assert result == lcs_length(second, first)
    assert result <= min(len(first), len(second))
    assert lcs_length(first, first) == len(first)
    assert lcs_length(first, "") == 0