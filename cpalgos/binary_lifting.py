"""Ancestor queries and lowest common ancestors on rooted trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _walk(
    adj: Sequence[Iterable[int]], roots: Iterable[int], count: int
) -> tuple[list[int | None], list[int]]:
    """Parent and depth of every node reached from ``roots``, in order."""
    parent: list[int | None] = [None] * count
    depth = [0] * count
    seen = [False] * count
    for root in roots:
        if seen[root]:
            continue
        seen[root] = True
        stack = [root]
        while stack:
            u = stack.pop()
            for w in adj[u]:
                if not seen[w]:
                    seen[w] = True
                    parent[w] = u
                    depth[w] = depth[u] + 1
                    stack.append(w)
    return parent, depth


class _AncestorTable:
    """Jump pointers: ``self._up[j][v]`` is the 2**j-th ancestor of ``v``."""

    def __init__(
        self, parent: list[int | None], depth: list[int], levels: int
    ) -> None:
        self._depth = depth
        self._up = [parent]
        for _ in range(1, levels):
            previous = self._up[-1]
            self._up.append([None if p is None else previous[p] for p in previous])

    def _lift(self, v: int, k: int) -> int | None:
        if k < 0:
            raise ValueError(f"k must not be negative, got {k}")
        if k > self._depth[v]:
            return None
        level = 0
        while k:
            if k & 1:
                v = self._up[level][v]
            k >>= 1
            level += 1
        return v

    def _lca(self, u: int, v: int) -> int | None:
        if self._depth[u] < self._depth[v]:
            u, v = v, u
        u = self._lift(u, self._depth[u] - self._depth[v])
        if u == v:
            return u
        for level in reversed(self._up):
            if level[u] != level[v]:
                u, v = level[u], level[v]
        return self._up[0][u]

    def _distance(self, u: int, v: int) -> int:
        ancestor = self._lca(u, v)
        if ancestor is None:
            raise ValueError(f"nodes {u} and {v} are in different trees")
        return self._depth[u] + self._depth[v] - 2 * self._depth[ancestor]


class BinaryLifting(_AncestorTable):
    """Binary lifting over a tree whose nodes are numbered 1..n."""

    def __init__(self, n: int, root: int, adj: Sequence[Iterable[int]]) -> None:
        if n < 1:
            raise ValueError(f"a tree needs at least one node, got {n}")
        self._n = n
        self._check(root)
        parent, depth = _walk(adj, [root], n + 1)
        super().__init__(parent, depth, n.bit_length())

    def _check(self, v: int) -> None:
        if not 1 <= v <= self._n:
            raise IndexError(f"node {v} out of range 1..{self._n}")

    def depth(self, v: int) -> int:
        """Number of edges between ``v`` and the root."""
        self._check(v)
        return self._depth[v]

    def kth_ancestor(self, v: int, k: int) -> int | None:
        """The node ``k`` steps above ``v``, or None past the root."""
        self._check(v)
        return self._lift(v, k)

    def lca(self, u: int, v: int) -> int | None:
        """Lowest common ancestor of ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        return self._lca(u, v)

    def dist(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        return self._distance(u, v)


class ForestLCA(_AncestorTable):
    """Lowest common ancestors over nodes 0..n-1.

    With ``root`` 0 every tree of the forest is covered, each rooted at its
    smallest node; with any other root only the tree holding it is.
    """

    def __init__(self, n: int, adj: Sequence[Iterable[int]], root: int = 0) -> None:
        if n < 1:
            raise ValueError(f"a forest needs at least one node, got {n}")
        self._n = n
        self._check(root)
        roots = range(n) if root == 0 else [root]
        parent, depth = _walk(adj, roots, n)
        super().__init__(parent, depth, n.bit_length())

    def _check(self, v: int) -> None:
        if not 0 <= v < self._n:
            raise IndexError(f"node {v} out of range 0..{self._n - 1}")

    def depth(self, v: int) -> int:
        """Number of edges between ``v`` and the root of its tree."""
        self._check(v)
        return self._depth[v]

    def lca(self, u: int, v: int) -> int | None:
        """Lowest common ancestor, or None for nodes in different trees."""
        self._check(u)
        self._check(v)
        return self._lca(u, v)

    def distance(self, u: int, v: int) -> int:
        """Number of edges on the path between ``u`` and ``v``."""
        self._check(u)
        self._check(v)
        return self._distance(u, v)