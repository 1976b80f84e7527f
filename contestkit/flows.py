"""Maximum-flow problems: gcd-linked numbers and sealing a castle off from the map edge."""

from __future__ import annotations

import itertools
import math
from collections.abc import Sequence

from contestkit.tokens import TokenReader


def gcd_ext(a: int, b: int) -> tuple[int, int, int]:
    """Return (g, x, y) with a * x + b * y == g == gcd(a, b)."""
    if a < 0 or b < 0:
        raise ValueError("gcd_ext takes non-negative integers")
    if b == 0:
        return a, 1, 0
    g, x, y = gcd_ext(b, a % b)
    return g, y, x - (a // b) * y


def _augmenting_max_flow(
    adjacency: Sequence[Sequence[int]],
    residual: dict[tuple[int, int], int],
    source: int,
    sink: int,
) -> int:
    """Depth-first augmenting paths; an edge absent from ``residual`` is unlimited.

    ``residual`` is updated in place.
    """
    total = 0
    while True:
        parent: dict[int, int | None] = {}
        stack: list[tuple[int, int | None]] = [(source, None)]
        while stack:
            node, prev = stack.pop()
            if node in parent:
                continue
            parent[node] = prev
            if node == sink:
                break
            for nxt in adjacency[node]:
                if nxt in parent:
                    continue
                capacity = residual.get((node, nxt))
                if capacity is None or capacity > 0:
                    stack.append((nxt, node))
        if sink not in parent:
            return total

        path = []
        node = sink
        while node != source:
            prev = parent[node]
            path.append((prev, node))
            node = prev
        limits = [residual[edge] for edge in path if edge in residual]
        if not limits:
            raise ValueError("flow from source to sink is unbounded")
        flow = min(limits)
        total += flow
        for u, v in path:
            if (u, v) in residual:
                residual[(u, v)] -= flow
            if (v, u) in residual:
                residual[(v, u)] += flow


def max_gcd_flow(numbers: Sequence[int]) -> int:
    """Maximum flow from the smallest to the largest number.

    Two numbers are linked, in both directions, with capacity equal to
    their gcd whenever that gcd exceeds 1.
    """
    values = sorted(numbers)
    if len(values) < 2:
        raise ValueError("at least two numbers are needed")
    adjacency: list[list[int]] = [[] for _ in values]
    residual: dict[tuple[int, int], int] = {}
    for i, j in itertools.combinations(range(len(values)), 2):
        shared = math.gcd(values[i], values[j])
        if shared > 1:
            adjacency[i].append(j)
            adjacency[j].append(i)
            residual[(i, j)] = shared
            residual[(j, i)] = shared
    return _augmenting_max_flow(adjacency, residual, 0, len(values) - 1)


_FOUR_WAYS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def castle_defense_cost(grid: Sequence[Sequence[int]], castle: Sequence[int]) -> int:
    """Least total cell cost that cuts the castle off from the edge of the map.

    Each nonzero cell costs its value to block; cells holding 0 are
    impassable. ``castle`` is the 0-based (row, column) of the castle.
    """
    rows = [list(row) for row in grid]
    r = len(rows)
    c = len(rows[0]) if rows else 0
    if any(len(row) != c for row in rows):
        raise ValueError("grid rows differ in length")
    ci, cj = castle
    if not (0 <= ci < r and 0 <= cj < c):
        raise ValueError(f"castle position ({ci}, {cj}) is outside the grid")

    offset = r * c
    sink = 2 * r * c
    source = ci * c + cj
    adjacency: list[list[int]] = [[] for _ in range(sink + 1)]
    residual: dict[tuple[int, int], int] = {}
    for i, row in enumerate(rows):
        for j, cell in enumerate(row):
            if cell == 0:
                continue
            entry = i * c + j
            exit_ = entry + offset
            adjacency[entry].append(exit_)
            adjacency[exit_].append(entry)
            residual[(entry, exit_)] = cell
            residual[(exit_, entry)] = 0
            for di, dj in _FOUR_WAYS:
                ni, nj = i + di, j + dj
                if 0 <= ni < r and 0 <= nj < c:
                    if rows[ni][nj] != 0:
                        neighbour = ni * c + nj
                        adjacency[exit_].append(neighbour)
                        adjacency[neighbour].append(exit_)
                        residual[(neighbour, exit_)] = 0
                else:
                    adjacency[exit_].append(sink)
    return _augmenting_max_flow(adjacency, residual, source, sink)


def run_max_gcd_flow(text: str) -> str:
    reader = TokenReader(text)
    n = reader.scan(int)
    numbers = [reader.scan(int) for _ in range(n)]
    return f"{max_gcd_flow(numbers)}\n"


def run_castle_defense_cost(text: str) -> str:
    reader = TokenReader(text)
    r, c = reader.scan(int, int)
    grid = [[reader.scan(int) for _ in range(c)] for _ in range(r)]
    castle = reader.scan(int, int)
    return f"{castle_defense_cost(grid, castle)}\n"