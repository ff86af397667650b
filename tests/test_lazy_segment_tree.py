import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from cpalgos.lazy_segment_tree import LazySegmentTree


def test_initial_sums_match_list():
    values = [3, -1, 4, 1, -5, 9, 2, 6]
    tree = LazySegmentTree(values)
    for left in range(len(values)):
        for right in range(left, len(values)):
            assert tree.query(left, right) == sum(values[left:right + 1])


def test_add_then_query_single_point():
    tree = LazySegmentTree([0] * 5)
    tree.add(1, 3, 7)
    assert tree.query(2, 2) == 7
    assert tree.query(0, 0) == 0
    assert tree.query(0, 4) == 3 * 7


def test_empty_range_is_zero_and_noop():
    tree = LazySegmentTree([1, 2, 3])
    tree.add(2, 1, 100)
    assert tree.query(2, 1) == 0
    assert tree.query(0, 2) == 6


def test_out_of_range():
    tree = LazySegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(0, 3)
    with pytest.raises(IndexError):
        tree.add(-1, 1, 5)


def test_empty_tree_rejects_queries():
    tree = LazySegmentTree([])
    assert len(tree) == 0
    with pytest.raises(IndexError):
        tree.query(0, 0)


@st.composite
def scenarios(draw):
    n = draw(st.integers(1, 30))
    values = draw(st.lists(st.integers(-100, 100), min_size=n, max_size=n))
    ops = []
    for _ in range(draw(st.integers(0, 40))):
        left = draw(st.integers(0, n - 1))
        right = draw(st.integers(left, n - 1))
        kind = draw(st.sampled_from(["add", "query"]))
        ops.append((kind, left, right, draw(st.integers(-50, 50))))
    return values, ops


@settings(max_examples=80)
@given(scenarios())
def test_matches_plain_list(scenario):
    values, ops = scenario
    model = list(values)
    tree = LazySegmentTree(values)
    for kind, left, right, value in ops:
        if kind == "add":
            tree.add(left, right, value)
            model[left:right + 1] = [x + value for x in model[left:right + 1]]
        else:
            assert tree.query(left, right) == sum(model[left:right + 1])
    assert tree.query(0, len(model) - 1) == sum(model)