"""Graph algorithms."""

from __future__ import annotations

from collections import Counter, defaultdict, deque
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations
from math import comb


@dataclass(eq=False)
class GraphNode:
    """A vertex of an undirected graph, with its adjacency list."""

    val: int = 0
    neighbors: list[GraphNode] = field(default_factory=list, repr=False)


def clone_graph(node: GraphNode | None) -> GraphNode | None:
    """Deep copy of the connected graph reachable from ``node``."""
    if node is None:
        return None
    copies = {node: GraphNode(node.val)}
    pending = [node]
    while pending:
        original = pending.pop()
        duplicate = copies[original]
        for neighbor in original.neighbors:
            if neighbor not in copies:
                copies[neighbor] = GraphNode(neighbor.val)
                pending.append(neighbor)
            duplicate.neighbors.append(copies[neighbor])
    return copies[node]


def _find(parent: list[int], item: int) -> int:
    while parent[item] != item:
        parent[item] = parent[parent[item]]
        item = parent[item]
    return item


def _union(parent: list[int], a: int, b: int) -> bool:
    root_a, root_b = _find(parent, a), _find(parent, b)
    if root_a == root_b:
        return False
    parent[root_a] = root_b
    return True


def _is_similar(first: str, second: str) -> bool:
    return sum(a != b for a, b in zip(first, second, strict=True)) in (0, 2)


def num_similar_groups(strs: Sequence[str]) -> int:
    """Groups formed by linking strings equal up to one swap of two letters."""
    parent = list(range(len(strs)))
    groups = len(strs)
    for (i, first), (j, second) in combinations(enumerate(strs), 2):
        if _is_similar(first, second) and _union(parent, i, j):
            groups -= 1
    return groups


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Cables to move so all ``n`` computers connect, or -1 if there are too few."""
    if n > len(connections) + 1:
        return -1
    parent = list(range(n))
    components = n
    for a, b in connections:
        if _union(parent, a, b):
            components -= 1
    return components - 1


def min_reorder(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Roads of a tree to reverse so every city can reach city 0."""
    adjacency: dict[int, list[tuple[int, bool]]] = defaultdict(list)
    for a, b in connections:
        adjacency[a].append((b, True))
        adjacency[b].append((a, False))
    seen = {0}
    queue = deque([0])
    reversals = 0
    while queue:
        city = queue.popleft()
        for neighbor, away_from_zero in adjacency[city]:
            if neighbor not in seen:
                seen.add(neighbor)
                reversals += away_from_zero
                queue.append(neighbor)
    return reversals


def largest_path_value(colors: str, edges: Sequence[Sequence[int]]) -> int:
    """Most frequent colour count along any path, or -1 if the graph has a cycle."""
    size = len(colors)
    graph: list[list[int]] = [[] for _ in range(size)]
    indegree = [0] * size
    for u, v in edges:
        graph[u].append(v)
        indegree[v] += 1
    counts = [Counter({color: 1}) for color in colors]
    ready = deque(node for node, degree in enumerate(indegree) if degree == 0)
    visited = 0
    best = 0
    while ready:
        u = ready.popleft()
        visited += 1
        for v in graph[u]:
            target = counts[v]
            for color, count in counts[u].items():
                target[color] = max(target[color], count + (colors[v] == color))
            indegree[v] -= 1
            if indegree[v] == 0:
                ready.append(v)
        best = max(best, max(counts[u].values()))
    return best if visited == size else -1


def count_unreachable_pairs(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Pairs of nodes with no path between them."""
    parent = list(range(n))
    for a, b in edges:
        _union(parent, a, b)
    sizes = Counter(_find(parent, node) for node in range(n))
    return comb(n, 2) - sum(comb(size, 2) for size in sizes.values())


def longest_cycle(edges: Sequence[int]) -> int:
    """Length of the longest cycle where each node has at most one outgoing edge, or -1."""
    size = len(edges)
    indegree = [0] * size
    for target in edges:
        if target != -1:
            indegree[target] += 1
    done = [False] * size
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    while queue:
        node = queue.popleft()
        done[node] = True
        target = edges[node]
        if target != -1:
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)
    best = -1
    for start in range(size):
        length = 0
        node = start
        while not done[node]:
            done[node] = True
            length += 1
            node = edges[node]
        if length:
            best = max(best, length)
    return best


def min_score(n: int, roads: Sequence[Sequence[int]]) -> int:
    """Smallest road distance in the part of the network that contains city 1."""
    adjacency: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for a, b, distance in roads:
        if not (1 <= a <= n and 1 <= b <= n):
            raise ValueError(f"road {a}-{b} leaves the cities 1..{n}")
        adjacency[a].append((b, distance))
        adjacency[b].append((a, distance))
    if 1 not in adjacency:
        raise ValueError("city 1 has no roads")
    seen = {1}
    queue = deque([1])
    best: int | None = None
    while queue:
        city = queue.popleft()
        for neighbor, distance in adjacency[city]:
            best = distance if best is None else min(best, distance)
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    assert best is not None
    return best