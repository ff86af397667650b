"""Graph algorithms: cycles, components, orderings, bridges and subtree sizes."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field


def _check_node(node: int, low: int, high: int) -> None:
    if not low <= node <= high:
        raise ValueError(f"node {node} out of range {low}..{high}")


def has_cycle(node_count: int, edges: Iterable[tuple[int, int]]) -> bool:
    """Whether an undirected graph on nodes 1..node_count contains a cycle.

    Self-loops and parallel edges count as cycles.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(node_count)]
    for index, (u, v) in enumerate(edges):
        _check_node(u, 1, node_count)
        _check_node(v, 1, node_count)
        adj[u - 1].append((v - 1, index))
        adj[v - 1].append((u - 1, index))

    seen = [False] * node_count
    for start in range(node_count):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, -1)]
        while stack:
            u, via = stack.pop()
            for v, index in adj[u]:
                if index == via:
                    continue
                if seen[v]:
                    return True
                seen[v] = True
                stack.append((v, index))
    return False


def strongly_connected_components(
    node_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Strongly connected components of a directed graph on nodes 1..node_count.

    Components come in topological order of the condensation, each listed
    in the order the reversed-graph search reaches its nodes.
    """
    adj: list[list[int]] = [[] for _ in range(node_count + 1)]
    reverse: list[list[int]] = [[] for _ in range(node_count + 1)]
    for u, v in edges:
        _check_node(u, 1, node_count)
        _check_node(v, 1, node_count)
        adj[u].append(v)
        reverse[v].append(u)

    seen = [False] * (node_count + 1)
    finish: list[int] = []
    for start in range(1, node_count + 1):
        if seen[start]:
            continue
        seen[start] = True
        stack = [(start, iter(adj[start]))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not seen[v]:
                    seen[v] = True
                    stack.append((v, iter(adj[v])))
                    break
            else:
                stack.pop()
                finish.append(u)

    seen = [False] * (node_count + 1)
    components: list[list[int]] = []
    for start in reversed(finish):
        if seen[start]:
            continue
        seen[start] = True
        component = [start]
        pending = [iter(reverse[start])]
        while pending:
            for v in pending[-1]:
                if not seen[v]:
                    seen[v] = True
                    component.append(v)
                    pending.append(iter(reverse[v]))
                    break
            else:
                pending.pop()
        components.append(component)
    return components


def topo_sort(node_count: int, adj: Sequence[Iterable[int]]) -> list[int]:
    """Kahn's topological order of a directed graph on nodes 0..node_count-1.

    Nodes on or behind a cycle never reach in-degree zero and are left out.
    """
    if len(adj) != node_count:
        raise ValueError(f"expected {node_count} adjacency lists, got {len(adj)}")
    targets = [list(row) for row in adj]
    indegree = [0] * node_count
    for row in targets:
        for v in row:
            _check_node(v, 0, node_count - 1)
            indegree[v] += 1

    queue = deque(u for u, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in targets[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order


@dataclass(frozen=True)
class BridgesAndCuts:
    """Bridges as (parent, child) pairs in the order found, and cut vertices ascending."""

    bridges: list[tuple[int, int]] = field(default_factory=list)
    cut_vertices: list[int] = field(default_factory=list)


def bridges_and_cut_vertices(adj: Sequence[Iterable[int]]) -> BridgesAndCuts:
    """Bridges and articulation points of an undirected graph on nodes 0..n-1.

    ``adj`` must list every edge from both ends.
    """
    graph = [list(row) for row in adj]
    n = len(graph)
    for row in graph:
        for v in row:
            _check_node(v, 0, n - 1)

    tin = [-1] * n
    low = [0] * n
    timer = 0
    bridges: list[tuple[int, int]] = []
    cuts: set[int] = set()

    for start in range(n):
        if tin[start] != -1:
            continue
        tin[start] = low[start] = timer
        timer += 1
        root_children = 0
        stack = [(start, -1, iter(graph[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            descended = False
            for v in neighbours:
                if v == parent:
                    continue
                if tin[v] != -1:
                    low[u] = min(low[u], tin[v])
                    continue
                tin[v] = low[v] = timer
                timer += 1
                stack.append((v, u, iter(graph[v])))
                descended = True
                break
            if descended:
                continue
            stack.pop()
            if parent == -1:
                continue
            low[parent] = min(low[parent], low[u])
            if low[u] > tin[parent]:
                bridges.append((parent, u))
            if stack[-1][1] != -1:
                if low[u] >= tin[parent]:
                    cuts.add(parent)
            else:
                root_children += 1
        if root_children > 1:
            cuts.add(start)

    return BridgesAndCuts(bridges=bridges, cut_vertices=sorted(cuts))


def subtree_sizes(
    node_count: int, edges: Iterable[tuple[int, int]], root: int = 1
) -> dict[int, int]:
    """Size of the subtree under each node 1..node_count of a tree rooted at ``root``.

    Nodes not connected to the root get size 0.
    """
    _check_node(root, 1, node_count)
    adj: list[list[int]] = [[] for _ in range(node_count + 1)]
    for u, v in edges:
        _check_node(u, 1, node_count)
        _check_node(v, 1, node_count)
        adj[u].append(v)
        adj[v].append(u)

    parent = [0] * (node_count + 1)
    seen = [False] * (node_count + 1)
    seen[root] = True
    order = [root]
    for u in order:
        for v in adj[u]:
            if not seen[v]:
                seen[v] = True
                parent[v] = u
                order.append(v)

    size = [0] * (node_count + 1)
    for u in order:
        size[u] = 1
    for u in reversed(order[1:]):
        size[parent[u]] += size[u]
    return {node: size[node] for node in range(1, node_count + 1)}