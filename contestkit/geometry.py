"""Plane geometry problems: polygon area, platform supports, rope around a post and GPS error."""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal
from itertools import pairwise

from contestkit.tokens import TokenReader


def _format_float(value: float) -> str:
    """Shortest decimal text for ``value``, without exponent or trailing '.0'."""
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def polygon_area(points: Sequence[Sequence[int]]) -> float:
    """Area of the simple polygon with the given vertices (shoelace formula)."""
    if not points:
        raise ValueError("a polygon needs at least one point")
    twice = sum((x1 - x2) * (y1 + y2) for (x1, y1), (x2, y2) in pairwise(points))
    (first_x, first_y), (last_x, last_y) = points[0], points[-1]
    twice += (last_x - first_x) * (last_y + first_y)
    return abs(twice) / 2


def platform_support_length(platforms: Sequence[Sequence[int]]) -> int:
    """Total pillar length holding up platforms (h, l, r) at both ends."""
    ordered = sorted(platforms, key=lambda platform: platform[0])
    total = 0
    for index, (h, left, right) in enumerate(ordered):
        below = ordered[:index][::-1]
        left_base = next((h2 for h2, l2, r2 in below if l2 <= left < r2), 0)
        right_base = next((h2 for h2, l2, r2 in below if l2 < right <= r2), 0)
        total += (h - left_base) + (h - right_base)
    return total


def rope_length(r: float, h: float, s: float) -> float:
    """Rope needed around a post of radius r from distance h, plus s percent slack."""
    if h <= 0 or r > h:
        raise ValueError("distance must be positive and at least the radius")
    wrapped = r * (2 * math.pi - 2 * math.acos(r / h))
    tangents = 2 * math.sqrt(h * h - r * r)
    return (s / 100 + 1) * (wrapped + tangents)


def gps_error_percent(interval: int, positions: Sequence[Sequence[int]]) -> float:
    """Percentage of path length lost by sampling the run every ``interval`` time units.

    ``positions`` holds (x, y, time) checkpoints in time order.
    """
    if interval <= 0:
        raise ValueError("sampling interval must be positive")
    if not positions:
        raise ValueError("at least one position is needed")
    time = 0
    records: list[tuple[float, float]] = []
    for (x1, y1, s1), (x2, y2, s2) in pairwise(positions):
        if s2 <= s1:
            raise ValueError("checkpoint times must increase")
        while s1 <= time <= s2:
            elapsed = time - s1
            dt = s2 - s1
            records.append(((x2 - x1) / dt * elapsed + x1, (y2 - y1) / dt * elapsed + y1))
            time += interval
    last_x, last_y, _ = positions[-1]
    records.append((float(last_x), float(last_y)))

    recorded = sum(math.hypot(x1 - x2, y1 - y2) for (x1, y1), (x2, y2) in pairwise(records))
    actual = sum(
        math.sqrt((x1 - x2) ** 2 + (y1 - y2) ** 2)
        for (x1, y1, _), (x2, y2, _) in pairwise(positions)
    )
    if actual == 0:
        raise ValueError("the run covers no distance")
    return (actual - recorded) / actual * 100


def run_polygon_area(text: str) -> str:
    reader = TokenReader(text)
    cases = reader.scan(int)
    lines = []
    for _ in range(cases):
        m = reader.scan(int)
        points = [reader.scan(int, int) for _ in range(m)]
        lines.append(f"{_format_float(polygon_area(points))}\n")
    return "".join(lines)


def run_platform_support_length(text: str) -> str:
    reader = TokenReader(text)
    n = reader.scan(int)
    platforms = [reader.scan(int, int, int) for _ in range(n)]
    return f"{platform_support_length(platforms)}\n"


def run_rope_length(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while True:
        r, h, s = reader.scan(int, int, int)
        if r == 0:
            break
        lines.append(f"{rope_length(r, h, s):.2f}\n")
    return "".join(lines)


def run_gps_error_percent(text: str) -> str:
    reader = TokenReader(text)
    n, interval = reader.scan(int, int)
    positions = [reader.scan(int, int, int) for _ in range(n)]
    return f"{gps_error_percent(interval, positions):.10f}\n"