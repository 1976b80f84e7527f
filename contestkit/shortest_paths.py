"""Shortest-path problems: jumping grid, cheapest descent and flower-lined routes."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence
from typing import Any

from contestkit.tokens import TokenReader


class _BucketQueue:
    """Priority queue whose entries are grouped into per-key buckets.

    Buckets are served in increasing key order; inside a bucket the most
    recently pushed item comes out first.
    """

    def __init__(self) -> None:
        self._buckets: dict[int, list[Any]] = {}
        self._keys: list[int] = []

    def __bool__(self) -> bool:
        return bool(self._keys)

    def push(self, key: int, item: Any) -> None:
        bucket = self._buckets.get(key)
        if bucket is None:
            self._buckets[key] = [item]
            heapq.heappush(self._keys, key)
        else:
            bucket.append(item)

    def pop_last(self) -> tuple[int, Any]:
        """Remove the last item of the lowest bucket."""
        key = self._keys[0]
        bucket = self._buckets[key]
        item = bucket.pop()
        if not bucket:
            del self._buckets[key]
            heapq.heappop(self._keys)
        return key, item

    def pop_bucket(self) -> tuple[int, list[Any]]:
        """Remove the whole lowest bucket."""
        key = heapq.heappop(self._keys)
        return key, self._buckets.pop(key)


def _digit_rows(grid: Sequence[str]) -> list[list[int]]:
    rows = []
    for row in grid:
        try:
            rows.append([int(c) for c in row])
        except ValueError:
            raise ValueError(f"grid row {row!r} holds a non-digit") from None
    if not rows or not rows[0]:
        raise ValueError("grid is empty")
    return rows


def jumping_grid_moves(grid: Sequence[str]) -> int | None:
    """Fewest jumps from the top-left to the bottom-right cell, or None.

    Each cell holds a digit k: from it one jumps exactly k cells up, down,
    left or right. Cells holding 0 cannot be left.
    """
    cells = _digit_rows(grid)
    n, m = len(cells), len(cells[0])
    queue = deque([(0, 0, 0)])
    while queue:
        i, j, moves = queue.popleft()
        k = cells[i][j]
        if k == 0:
            continue
        cells[i][j] = 0
        for ni, nj in ((i, j + k), (i, j - k), (i + k, j), (i - k, j)):
            if ni == n - 1 and nj == m - 1:
                return moves + 1
            if 0 <= ni < n and 0 <= nj < m and cells[ni][nj] != 0:
                queue.append((ni, nj, moves + 1))
    return None


_EIGHT_WAYS = ((0, 1), (0, -1), (1, 0), (-1, 0), (1, 1), (1, -1), (-1, 1), (-1, -1))


def cheapest_descent_path(grid: Sequence[str]) -> list[str] | None:
    """Cheapest top-to-bottom path through a digit grid, drawn as spaces.

    The path may move in all eight directions and costs the sum of the
    digits it passes. Returns the grid rows with path cells replaced by
    spaces, or None when no cell of the bottom row is reachable.
    """
    digits = _digit_rows(grid)
    rows = [str(row) for row in grid]
    h, w = len(digits), len(digits[0])
    queue = _BucketQueue()
    for j in range(w):
        queue.push(digits[0][j], (0, j, None))
    visited = [[False] * w for _ in range(h)]
    came_from: dict[tuple[int, int], tuple[int, int] | None] = {}
    while queue:
        cost, (i, j, parent) = queue.pop_last()
        if visited[i][j]:
            continue
        came_from[(i, j)] = parent
        if i == h - 1:
            drawn = [list(row) for row in rows]
            position: tuple[int, int] | None = (i, j)
            while position is not None:
                drawn[position[0]][position[1]] = " "
                position = came_from[position]
            return ["".join(row) for row in drawn]
        visited[i][j] = True
        for di, dj in _EIGHT_WAYS:
            ni, nj = i + di, j + dj
            if 0 <= ni < h and 0 <= nj < w and not visited[ni][nj]:
                queue.push(cost + digits[ni][nj], (ni, nj, (i, j)))
    return None


def flower_route_length(places: int, trails: Iterable[Sequence[int]]) -> int:
    """Twice the total length of trails lying on some shortest route from 0 to the last place.

    ``trails`` holds 0-based triples (i, j, length); loops are ignored.
    """
    if places < 1:
        raise ValueError("there must be at least one place")
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(places)]
    for i, j, length in trails:
        if i == j:
            continue
        adjacency[i].append((j, length))
        adjacency[j].append((i, length))

    dist: list[int | None] = [None] * places
    best_links: list[list[tuple[int | None, int]]] = [[] for _ in range(places)]
    queue = _BucketQueue()
    queue.push(0, (0, None, 0))
    while queue:
        d, batch = queue.pop_bucket()
        for node, parent, length in batch:
            if dist[node] is not None:
                if dist[node] == d:
                    best_links[node].append((parent, length))
                continue
            dist[node] = d
            best_links[node] = [(parent, length)]
            for nxt, step in adjacency[node]:
                queue.push(d + step, (nxt, node, step))

    reached: set[int] = set()
    pending = [places - 1]
    while pending:
        node = pending.pop()
        if node == 0 or node in reached:
            continue
        reached.add(node)
        pending.extend(parent for parent, _ in best_links[node] if parent is not None)

    total = sum(length for node in reached for _, length in best_links[node])
    return total * 2


def run_jumping_grid_moves(text: str) -> str:
    reader = TokenReader(text)
    n, _m = reader.scan(int, int)
    rows = [reader.scan(str) for _ in range(n)]
    moves = jumping_grid_moves(rows)
    return f"{-1 if moves is None else moves}\n"


def run_cheapest_descent_path(text: str) -> str:
    reader = TokenReader(text)
    parts = []
    while True:
        h, w = reader.scan(int, int)
        if h == 0 and w == 0:
            break
        rows = [reader.scan(str) for _ in range(h)]
        drawn = cheapest_descent_path(rows)
        if drawn is not None:
            parts.append("".join(f"{row}\n" for row in drawn))
        parts.append("\n")
    return "".join(parts)


def run_flower_route_length(text: str) -> str:
    reader = TokenReader(text)
    places = reader.scan(int)
    count = reader.scan(int)
    trails = [reader.scan(int, int, int) for _ in range(count)]
    return f"{flower_route_length(places, trails)}\n"