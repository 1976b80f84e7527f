"""Grid flood fills: gold collection, coastline length and the lowest passable level."""

from __future__ import annotations

from collections.abc import Sequence

from contestkit.tokens import TokenReader

MAX_LEVEL = 1_000_000


def _cell(rows: Sequence[str], i: int, j: int) -> str:
    if not (0 <= i < len(rows) and 0 <= j < len(rows[i])):
        raise ValueError(f"open cell next to the edge of the map at ({i}, {j})")
    return rows[i][j]


def collect_gold(grid: Sequence[str]) -> int:
    """Gold reachable from 'P' without stepping next to a trap 'T'."""
    rows = [str(row) for row in grid]
    start = next(
        ((i, j) for i, row in enumerate(rows) for j, c in enumerate(row) if c == "P"),
        None,
    )
    if start is None:
        raise ValueError("map has no player")
    visited: set[tuple[int, int]] = set()
    gold = 0
    stack = [start]
    while stack:
        i, j = stack.pop()
        if (i, j) in visited:
            continue
        visited.add((i, j))
        if rows[i][j] == "G":
            gold += 1
        neighbours = [(i, j + 1), (i, j - 1), (i + 1, j), (i - 1, j)]
        cells = [_cell(rows, ni, nj) for ni, nj in neighbours]
        if "T" in cells:
            continue
        stack.extend(pos for pos, c in zip(neighbours, cells) if c != "#")
    return gold


def coast_length(grid: Sequence[str]) -> int:
    """Length of the coast: land edges touching sea connected to the map border."""
    cells: list[list[str | None]] = [list(row) for row in grid]
    if not cells or not cells[0]:
        raise ValueError("map is empty")
    n, m = len(cells), len(cells[0])
    if n == 1 and m == 1:
        return 4 if cells[0][0] == "1" else 0

    count = 0
    starts = [(i, j) for j in (0, m - 1) for i in range(n)]
    starts += [(i, j) for i in (0, n - 1) for j in range(1, m - 1)]
    for start in starts:
        if cells[start[0]][start[1]] != "0":
            continue
        stack = [start]
        while stack:
            i, j = stack.pop()
            if cells[i][j] is None:
                continue
            cells[i][j] = None
            for di, dj in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                ni, nj = i + di, j + dj
                if 0 <= ni < n and 0 <= nj < m:
                    if cells[ni][nj] == "1":
                        count += 1
                    elif cells[ni][nj] == "0":
                        stack.append((ni, nj))

    count += cells[0].count("1") + cells[-1].count("1")
    count += sum((row[0] == "1") + (row[-1] == "1") for row in cells)
    return count


def can_cross(level: int, heights: Sequence[Sequence[int]]) -> bool:
    """Whether cells no higher than ``level`` link the first column to the last."""
    r = len(heights)
    c = len(heights[0]) if r else 0
    visited = [[False] * c for _ in range(r)]
    for start in range(r):
        stack = [(start, 0)] if heights[start][0] <= level else []
        while stack:
            i, j = stack.pop()
            if visited[i][j]:
                continue
            visited[i][j] = True
            for di, dj in ((0, 1), (0, -1), (1, 0), (-1, 0)):
                ni, nj = i + di, j + dj
                if 0 <= ni < r and 0 <= nj < c and heights[ni][nj] <= level:
                    if nj == c - 1:
                        return True
                    stack.append((ni, nj))
    return False


def min_passable_level(heights: Sequence[Sequence[int]]) -> int:
    """Smallest level in [0, MAX_LEVEL] at which the grid can be crossed."""
    low, high = 0, MAX_LEVEL
    while low < high:
        mid = (low + high) // 2
        if can_cross(mid, heights):
            high = mid
        else:
            low = mid + 1
    return low


def run_collect_gold(text: str) -> str:
    reader = TokenReader(text)
    _width, height = reader.scan(int, int)
    rows = [reader.scan(str) for _ in range(height)]
    return f"{collect_gold(rows)}\n"


def run_coast_length(text: str) -> str:
    reader = TokenReader(text)
    n, _m = reader.scan(int, int)
    rows = [reader.scan(str) for _ in range(n)]
    return f"{coast_length(rows)}\n"


def run_min_passable_level(text: str) -> str:
    reader = TokenReader(text)
    r, c = reader.scan(int, int)
    heights = [[reader.scan(int) for _ in range(c)] for _ in range(r)]
    return f"{min_passable_level(heights)}\n"