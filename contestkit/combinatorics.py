"""Counting problems: gear ratios, the crossing-out sieve and lattice paths."""

from __future__ import annotations

import math
from collections.abc import Iterable
from fractions import Fraction

from contestkit.tokens import TokenReader


def gear_ratios(radii: Iterable[int]) -> list[Fraction]:
    """Turns of each later gear per turn of the first, as reduced fractions."""
    values = list(radii)
    if not values:
        raise ValueError("at least one radius is needed")
    bad = [r for r in values if r <= 0]
    if bad:
        raise ValueError(f"radius must be positive, got {bad[0]}")
    first, *rest = values
    return [Fraction(first, r) for r in rest]


def kth_crossed_out(n: int, k: int) -> int | None:
    """The k-th number crossed out by the sieve of Eratosthenes on 2..n, or None."""
    crossed = bytearray(n + 1)
    count = 0
    for x in range(2, n + 1):
        if crossed[x]:
            continue
        for y in range(x, n + 1, x):
            if not crossed[y]:
                count += 1
                if count == k:
                    return y
                crossed[y] = 1
    return None


def path_count(n: int, m: int) -> int:
    """Binomial coefficient C(n, m - 1), built up one factor at a time."""
    if m - 1 > n:
        raise ValueError(f"m - 1 = {m - 1} exceeds n = {n}")
    result = 1
    for i in range(1, m):
        result = result * (n - i + 1) // i
    return result


def run_gear_ratios(text: str) -> str:
    reader = TokenReader(text)
    n = reader.scan(int)
    radii = [reader.scan(int) for _ in range(n)]
    return "".join(f"{r.numerator}/{r.denominator}\n" for r in gear_ratios(radii))


def run_kth_crossed_out(text: str) -> str:
    reader = TokenReader(text)
    n, k = reader.scan(int, int)
    result = kth_crossed_out(n, k)
    return "" if result is None else f"{result}\n"


def run_path_count(text: str) -> str:
    reader = TokenReader(text)
    cases = reader.scan(int)
    lines = []
    for _ in range(cases):
        n, m = reader.scan(int, int)
        lines.append(f"{path_count(n, m)}\n")
    return "".join(lines)