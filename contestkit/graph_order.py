"""Graph ordering problems: lab scheduling, multi-source spanning cost and bipartite components."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Iterable, Sequence

from contestkit.tokens import TokenReader


def _count_switches(
    first_lab: int,
    labs: Sequence[int],
    successors: Sequence[Sequence[int]],
    indegree: Sequence[int],
) -> int:
    remaining = list(indegree)
    ready: tuple[list[int], list[int]] = ([], [])
    for node, degree in enumerate(remaining):
        if degree == 0:
            heapq.heappush(ready[labs[node] - 1], node)
    current = first_lab
    switches = 0
    while True:
        queue = ready[current]
        while queue:
            node = heapq.heappop(queue)
            for nxt in successors[node]:
                remaining[nxt] -= 1
                if remaining[nxt] == 0:
                    heapq.heappush(ready[labs[nxt] - 1], nxt)
        if not ready[0] and not ready[1]:
            return switches
        current ^= 1
        switches += 1


def min_lab_switches(labs: Sequence[int], deps: Iterable[Sequence[int]]) -> int:
    """Fewest moves between labs 1 and 2 to finish every task in dependency order.

    ``deps`` holds 1-based pairs (u, v): task u must finish before task v.
    """
    labs = list(labs)
    bad = [lab for lab in labs if lab not in (1, 2)]
    if bad:
        raise ValueError(f"lab must be 1 or 2, got {bad[0]}")
    successors: list[list[int]] = [[] for _ in labs]
    indegree = [0] * len(labs)
    for u, v in deps:
        successors[u - 1].append(v - 1)
        indegree[v - 1] += 1
    return min(_count_switches(first, labs, successors, indegree) for first in (0, 1))


def min_wiring_cost(
    n: int,
    lamp_cost: int,
    sources: Sequence[int],
    edges: Iterable[Sequence[int]],
) -> int:
    """Cheapest cable tree grown from the 1-based ``sources`` plus a lamp per other node."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for i, j, cost in edges:
        adjacency[i - 1].append((j - 1, cost))
        adjacency[j - 1].append((i - 1, cost))
    order = itertools.count()
    heap = [(0, next(order), source - 1) for source in sources]
    heapq.heapify(heap)
    visited = [False] * n
    total = 0
    while heap:
        cost, _, node = heapq.heappop(heap)
        if visited[node]:
            continue
        visited[node] = True
        total += cost
        for nxt, edge_cost in adjacency[node]:
            heapq.heappush(heap, (edge_cost, next(order), nxt))
    return total + (n - len(sources)) * lamp_cost


def bipartite_component_count(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Number of connected components, one fewer if the graph is not bipartite."""
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        adjacency[u - 1].append(v - 1)
        adjacency[v - 1].append(u - 1)
    unvisited = set(range(n))
    colour = [0] * n
    bipartite = True
    components = 0
    for start in range(n):
        if start not in unvisited:
            continue
        unvisited.discard(start)
        colour[start] = 1
        stack = [start]
        while stack:
            node = stack.pop()
            for nxt in adjacency[node]:
                if nxt in unvisited:
                    unvisited.discard(nxt)
                    stack.append(nxt)
                    colour[nxt] = -colour[node]
                elif bipartite and colour[nxt] == colour[node]:
                    bipartite = False
        components += 1
    return components if bipartite else components - 1


def run_min_lab_switches(text: str) -> str:
    reader = TokenReader(text)
    cases = reader.scan(int)
    lines = []
    for _ in range(cases):
        n, m = reader.scan(int, int)
        labs = [reader.scan(int) for _ in range(n)]
        deps = [reader.scan(int, int) for _ in range(m)]
        lines.append(f"{min_lab_switches(labs, deps)}\n")
    return "".join(lines)


def run_min_wiring_cost(text: str) -> str:
    reader = TokenReader(text)
    datasets = reader.scan(int)
    lines = []
    for _ in range(datasets):
        n, m, lamp_cost, s = reader.scan(int, int, int, int)
        sources = [reader.scan(int) for _ in range(s)]
        edges = [reader.scan(int, int, int) for _ in range(m)]
        lines.append(f"{min_wiring_cost(n, lamp_cost, sources, edges)}\n")
    return "".join(lines)


def run_bipartite_component_count(text: str) -> str:
    reader = TokenReader(text)
    n, m = reader.scan(int, int)
    edges = [reader.scan(int, int) for _ in range(m)]
    return f"{bipartite_component_count(n, edges)}\n"