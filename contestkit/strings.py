"""String problems: typing overlaps, answer matching, knight words and repetition compression."""

from __future__ import annotations

import random
from collections import deque
from collections.abc import Iterable, Sequence

from contestkit.tokens import TokenReader

MODULUS = (1 << 61) - 1


class RollingHasher:
    """Polynomial prefix hashes modulo 2**61 - 1 for constant-time substring hashes."""

    def __init__(self, base: int, data: Iterable[int]) -> None:
        prefix = []
        acc = 0
        for value in data:
            acc = (acc * base + value) % MODULUS
            prefix.append(acc)
        if not prefix:
            raise ValueError("cannot hash an empty sequence")
        self._prefix = prefix
        self._powers = [pow(base, k, MODULUS) for k in range(1, len(prefix))]

    def hash(self, start: int, end: int) -> int:
        """Hash of the half-open range [start, end)."""
        if not 0 <= start < end <= len(self._prefix):
            raise ValueError(f"range [{start}, {end}) is empty or out of bounds")
        value = self._prefix[end - 1]
        if start > 0:
            value = (value - self._prefix[start - 1] * self._powers[end - start - 1]) % MODULUS
        return value


def typed_length(extra: int, words: Sequence[str]) -> int:
    """Keystrokes to type ``words`` in turn, reusing each word's overlap with the next."""
    total = extra
    for current, following in zip(words, words[1:]):
        pos = 0
        while not following.startswith(current[pos:]):
            pos += 1
        total += pos
    return total


def max_possible_correct(k: int, first: str, second: str) -> int:
    """Most answers of ``second`` that can be right when ``first`` has exactly ``k`` right."""
    differing = sum(a != b for a, b in zip(first, second))
    return len(first) - abs(differing - (len(first) - k))


_TARGET = "ICPCASIASG"
_KNIGHT_MOVES = ((1, 2), (1, -2), (-1, 2), (-1, -2), (2, 1), (2, -1), (-2, 1), (-2, -1))


def has_knight_word(n: int, letters: str) -> bool:
    """Whether knight moves over the n-by-n board spell ICPCASIASG."""
    if len(letters) < n * n:
        raise ValueError("board holds fewer than n * n letters")
    queue = deque((i, j, 0) for i in range(n) for j in range(n) if letters[i * n + j] == "I")
    seen = set(queue)
    while queue:
        i, j, k = queue.popleft()
        if k == len(_TARGET) - 1:
            return True
        for di, dj in _KNIGHT_MOVES:
            ni, nj = i + di, j + dj
            if 0 <= ni < n and 0 <= nj < n and letters[ni * n + nj] == _TARGET[k + 1]:
                state = (ni, nj, k + 1)
                if state not in seen:
                    seen.add(state)
                    queue.append(state)
    return False


def min_compressed_length(s: str, base: int | None = None) -> int:
    """Shortest length of ``s`` when a substring written twice in a row counts once."""
    if base is None:
        base = random.randrange(2, 10**18)
    hasher = RollingHasher(base, (ord(c) for c in s))
    n = len(s)
    # best[l][i] describes s[i:i + l + 1] as (compressed length, representative hash).
    best: list[list[tuple[int, int]]] = [[(1, hasher.hash(i, i + 1)) for i in range(n)]]
    for length in range(1, n):
        row = []
        for i in range(n - length):
            whole = hasher.hash(i, i + length + 1)
            chosen: tuple[float, int | None] = (float("inf"), None)
            for j in range(length):
                a, left_hash = best[j][i]
                b, right_hash = best[length - j - 1][i + j + 1]
                if left_hash == right_hash:
                    if a != b:
                        raise RuntimeError("hash collision; retry with another base")
                    candidate = (a, left_hash)
                else:
                    candidate = (a + b, whole)
                if candidate[0] < chosen[0]:
                    chosen = candidate
            row.append(chosen)
        best.append(row)
    return best[n - 1][0][0]


def run_typed_length(text: str) -> str:
    reader = TokenReader(text)
    cases = reader.scan(int)
    lines = []
    for _ in range(cases):
        extra, count = reader.scan(int, int)
        words = [reader.scan(str) for _ in range(count)]
        lines.append(f"{typed_length(extra, words)}\n")
    return "".join(lines)


def run_max_possible_correct(text: str) -> str:
    reader = TokenReader(text)
    k, first, second = reader.scan(int, str, str)
    return f"{max_possible_correct(k, first, second)}\n"


def run_has_knight_word(text: str) -> str:
    reader = TokenReader(text)
    n, letters = reader.scan(int, str)
    return "YES\n" if has_knight_word(n, letters) else "NO\n"


def run_min_compressed_length(text: str) -> str:
    reader = TokenReader(text)
    s = reader.scan(str)
    return f"{min_compressed_length(s)}\n"