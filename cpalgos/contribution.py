"""Totals over all subarrays, pairs or tree paths, counted per item."""

from __future__ import annotations

from collections.abc import Iterable


def subarray_sum_total(values: Iterable[int]) -> int:
    """Sum of the sums of every contiguous subarray."""
    items = list(values)
    n = len(items)
    return sum(value * (i + 1) * (n - i) for i, value in enumerate(items))


def tree_edge_contribution(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Sum of path lengths over all unordered node pairs of a tree.

    Nodes are numbered 1..node_count; each edge adds size * (n - size),
    where size is the subtree size below it when rooted at node 1.
    """
    if node_count <= 0:
        return 0
    adj: list[list[int]] = [[] for _ in range(node_count)]
    for u, v in edges:
        for node in (u, v):
            if not 1 <= node <= node_count:
                raise ValueError(f"node {node} out of range 1..{node_count}")
        adj[u - 1].append(v - 1)
        adj[v - 1].append(u - 1)

    parent = [-1] * node_count
    seen = [False] * node_count
    seen[0] = True
    order = [0]
    for u in order:
        for w in adj[u]:
            if not seen[w]:
                seen[w] = True
                parent[w] = u
                order.append(w)

    size = [1] * node_count
    total = 0
    for u in reversed(order[1:]):
        size[parent[u]] += size[u]
        total += size[u] * (node_count - size[u])
    return total


def pairwise_xor_sum(values: Iterable[int]) -> int:
    """Sum of ``a ^ b`` over all unordered pairs of non-negative values."""
    items = list(values)
    if any(x < 0 for x in items):
        raise ValueError("values must not be negative")
    n = len(items)
    width = max((x.bit_length() for x in items), default=0)
    total = 0
    for bit in range(width):
        ones = sum((x >> bit) & 1 for x in items)
        total += (ones * (n - ones)) << bit
    return total


def pairwise_abs_diff_sum(values: Iterable[int]) -> int:
    """Sum of ``|a - b|`` over all unordered pairs."""
    items = sorted(values)
    n = len(items)
    return sum(value * (2 * i - n + 1) for i, value in enumerate(items))