from collections import deque
from itertools import combinations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpalgos.contribution import (
    pairwise_abs_diff_sum,
    pairwise_xor_sum,
    subarray_sum_total,
    tree_edge_contribution,
)

ints = st.lists(st.integers(-1000, 1000), max_size=30)
naturals = st.lists(st.integers(0, 1 << 70), max_size=30)


@given(ints)
def test_subarray_sum_total_matches_enumeration(values):
    expected = sum(
        sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)
    )
    assert subarray_sum_total(values) == expected


def test_subarray_sum_total_empty():
    assert subarray_sum_total([]) == 0


@given(naturals)
def test_pairwise_xor_sum_matches_pairs(values):
    assert pairwise_xor_sum(values) == sum(a ^ b for a, b in combinations(values, 2))


def test_pairwise_xor_sum_rejects_negative():
    with pytest.raises(ValueError):
        pairwise_xor_sum([1, -2])


@given(ints)
def test_pairwise_abs_diff_sum_matches_pairs(values):
    assert pairwise_abs_diff_sum(values) == sum(
        abs(a - b) for a, b in combinations(values, 2)
    )


def test_pairwise_abs_diff_sum_ignores_order():
    assert pairwise_abs_diff_sum([5, 1, 9, 3]) == pairwise_abs_diff_sum([1, 3, 5, 9])


def _all_pairs_distance(n, edges):
    adj = {v: [] for v in range(1, n + 1)}
    for u, v in edges:
        adj[u].append(v)
        adj[v].append(u)
    total = 0
    for start in adj:
        dist = {start: 0}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for w in adj[u]:
                if w not in dist:
                    dist[w] = dist[u] + 1
                    queue.append(w)
        total += sum(dist.values())
    return total // 2


@st.composite
def trees(draw):
    n = draw(st.integers(1, 25))
    edges = [(draw(st.integers(1, v - 1)), v) for v in range(2, n + 1)]
    return n, edges


@given(trees())
def test_tree_edge_contribution_is_sum_of_distances(tree):
    n, edges = tree
    assert tree_edge_contribution(n, edges) == _all_pairs_distance(n, edges)


def test_tree_edge_contribution_star():
    edges = [(1, v) for v in range(2, 7)]
    # every edge separates one leaf from the other five nodes
    assert tree_edge_contribution(6, edges) == 5 * 5


def test_tree_edge_contribution_single_node():
    assert tree_edge_contribution(1, []) == 0


def test_tree_edge_contribution_bad_node():
    with pytest.raises(ValueError):
        tree_edge_contribution(3, [(1, 2), (2, 4)])