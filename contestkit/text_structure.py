"""Text structure problems: hill numbers, string powers, repeated substrings and palindrome swaps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise
from typing import Any

from contestkit.tokens import TokenReader

_DIGITS = "0123456789"


def count_hill_numbers(digits: str) -> int | None:
    """Count derived from the digit table for a rising-then-falling number.

    Returns None when the digits rise again after they have started to fall.
    """
    if not digits or any(c not in _DIGITS for c in digits):
        raise ValueError(f"{digits!r} is not a string of decimal digits")
    values = [int(c) for c in digits]
    length = len(values)

    rise_end = 1
    while rise_end < length and values[rise_end - 1] <= values[rise_end]:
        rise_end += 1
    fall_end = min(rise_end + 1, length)
    while fall_end < length and values[fall_end - 1] >= values[fall_end]:
        fall_end += 1
    if fall_end != length:
        return None

    table = [list(range(10))]
    for _ in range(1, length):
        previous = table[-1]
        row = [0]
        for d in range(1, 10):
            row.append(previous[d] + row[d - 1])
        table.append(row)
    return sum(table[length - k][values[k]] for k in range(rise_end, length))


def z_array(seq: Sequence[Any]) -> list[int]:
    """Z values for positions 1..len-1: longest common prefix of ``seq[k:]`` and ``seq``."""
    n = len(seq)
    if n == 0:
        raise ValueError("z_array needs a non-empty sequence")
    z: list[int] = []
    left, right = 0, 1
    while len(z) < n - 1:
        i = len(z) + 1
        mirror = i - left - 1
        if mirror < len(z) and z[mirror] + i < right:
            z.append(z[mirror])
        else:
            left = i
            right = max(i, right)
            while right < n and seq[right] == seq[right - left]:
                right += 1
            z.append(right - left)
    return z


def max_power(s: str) -> int:
    """Largest k such that ``s`` is some string repeated k times."""
    z = z_array(s)
    n = len(s)
    for period in range(1, n):
        if n % period == 0 and z[period - 1] + period == n:
            return n // period
    return 1


def suffix_array(seq: Sequence[Any]) -> list[int]:
    """Start positions of the suffixes of ``seq`` in sorted suffix order."""
    return sorted(range(len(seq)), key=lambda start: seq[start:])


def repeated_substring_counts(s: str) -> list[int]:
    """For lengths 1, 2, ...: how often the most frequent substring of that length occurs.

    Stops at the first length where no substring occurs twice.
    """
    suffixes = [s[start:] for start in suffix_array(s)]
    counts: list[int] = []
    for length in range(1, len(s)):
        best = 0
        run = 0
        for a, b in pairwise(suffixes):
            if len(a) >= length and len(b) >= length and a[:length] == b[:length]:
                run += 1
            else:
                best = max(best, run)
                run = 0
        best = max(best, run)
        if best == 0:
            break
        counts.append(best + 1)
    return counts


@dataclass
class _Pair:
    left: int
    right: int
    left_cost: int
    right_cost: int


def palindrome_swap_costs(s: str) -> tuple[int, int] | None:
    """Swap costs for turning ``s`` into a palindrome, or None if impossible.

    Returns (cost of moving every left letter of a pair to the front,
    greedy total cost of pairing matched letters at the ends).
    """
    positions: list[list[int]] = [[] for _ in range(26)]
    for index, c in enumerate(s):
        if not "a" <= c <= "z":
            raise ValueError(f"letter {c!r} is not lower-case a-z")
        positions[ord(c) - ord("a")].append(index)
    if sum(len(p) % 2 for p in positions) > 1:
        return None

    n = len(s)
    pairs = []
    for places in positions:
        half = len(places) // 2
        for x, y in zip(places[:half], reversed(places[-half:] if half else [])):
            pairs.append(_Pair(x, y, x, n - y - 1))
    left_total = sum(pair.left_cost for pair in pairs)

    total = 0
    while pairs:
        best = min(pairs, key=lambda pair: pair.left_cost + pair.right_cost)
        total += best.left_cost + best.right_cost
        pairs = [p for p in pairs if p.left != best.left and p.right != best.right]
        for pair in pairs:
            if best.left < pair.left < best.right:
                pair.left_cost -= 1
            elif pair.left > best.right:
                pair.left_cost -= 2
            if best.left < pair.right < best.right:
                pair.right_cost -= 1
            elif pair.right < best.left:
                pair.right_cost -= 2
    return left_total, total


def run_count_hill_numbers(text: str) -> str:
    reader = TokenReader(text)
    result = count_hill_numbers(reader.scan(str))
    return f"{-1 if result is None else result}\n"


def run_max_power(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while True:
        s = reader.scan(str)
        if s.startswith("."):
            break
        lines.append(f"{max_power(s)}\n")
    return "".join(lines)


def run_repeated_substring_counts(text: str) -> str:
    parts = []
    for line in text.splitlines():
        words = line.split()
        if not words:
            break
        counts = repeated_substring_counts("".join(words))
        parts.extend(f"{count}\n" for count in counts)
        parts.append("\n")
    return "".join(parts)


def run_palindrome_swap_costs(text: str) -> str:
    reader = TokenReader(text)
    cases = reader.scan(int)
    lines = []
    for _ in range(cases):
        result = palindrome_swap_costs(reader.scan(str))
        if result is None:
            lines.append("Impossible\n")
        else:
            left, total = result
            lines.append(f"{left}\n{total}\n")
    return "".join(lines)