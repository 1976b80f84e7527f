"""Disjoint-set forest with per-component data, and the connectivity problem built on it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from contestkit.tokens import TokenReader


class UnionFind:
    """Union by size; each root carries data combined with ``merge`` on union."""

    def __init__(
        self,
        data: Iterable[Any],
        merge: Callable[[Any, Any], Any] | None = None,
    ) -> None:
        self._data = list(data)
        self._parent = list(range(len(self._data)))
        self._size = [1] * len(self._data)
        self._merge = merge if merge is not None else (lambda kept, _other: kept)

    def __len__(self) -> int:
        return len(self._parent)

    def unite(self, i: int, j: int) -> None:
        """Join the components of ``i`` and ``j``."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i == root_j:
            return
        size_i = self._size[root_i]
        size_j = self._size[root_j]
        if size_i > size_j:
            self._parent[root_j] = root_i
            self._size[root_i] = size_i + size_j
            self._data[root_i] = self._merge(self._data[root_i], self._data[root_j])
        else:
            self._parent[root_i] = root_j
            self._size[root_j] = size_i + size_j
            self._data[root_j] = self._merge(self._data[root_j], self._data[root_i])

    def find(self, i: int) -> int:
        """Root of the component holding ``i``."""
        return self.find_query(i)[0]

    def query(self, i: int) -> Any:
        """Data of the component holding ``i``."""
        return self.find_query(i)[1]

    def find_query(self, i: int) -> tuple[int, Any]:
        """Root of ``i``'s component together with its data."""
        node = i
        while self._parent[node] != node:
            node = self._parent[node]
        return node, self._data[node]


def unconnected_houses(n: int, pairs: Iterable[Sequence[int]]) -> list[int]:
    """1-based houses not connected to house 1, in increasing order."""
    forest = UnionFind([None] * n)
    for a, b in pairs:
        forest.unite(a - 1, b - 1)
    first_root = forest.find(0)
    return [house + 1 for house in range(n) if forest.find(house) != first_root]


def run_unconnected_houses(text: str) -> str:
    reader = TokenReader(text)
    n, m = reader.scan(int, int)
    pairs = [reader.scan(int, int) for _ in range(m)]
    missing = unconnected_houses(n, pairs)
    if not missing:
        return "Connected\n"
    return "".join(f"{house}\n" for house in missing)