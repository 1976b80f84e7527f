"""Polygon simplification and farthest point pairs via the convex hull."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import cmp_to_key
from itertools import combinations

from contestkit.geometry import _format_float
from contestkit.tokens import TokenReader

Point = tuple[int, int]


def _acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


def _length(a: Point, b: Point) -> float:
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


def _squared(a: Point, b: Point) -> int:
    return (a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2


def simplify_polygon(points: Sequence[Sequence[int]]) -> list[Point]:
    """Repeatedly cut off the sharpest vertex while that keeps the neighbours sharper.

    Returns the remaining vertices in their original order.
    """
    pts = [(p[0], p[1]) for p in points]
    n = len(pts)
    if n < 3:
        raise ValueError("a polygon needs at least three points")
    # edges[i] runs from vertex i - 1 to vertex i.
    edges = [_length(pts[i - 1], pts[i]) for i in range(n)]
    if any(edge == 0 for edge in edges):
        raise ValueError("consecutive points coincide")
    angles = []
    for i, (x, y) in enumerate(pts):
        px, py = pts[i - 1]
        nx, ny = pts[(i + 1) % n]
        dot = (x - px) * (x - nx) + (y - py) * (y - ny)
        angles.append(_acos(dot / (edges[i] * edges[(i + 1) % n])))

    order = list(range(n))
    while len(order) > 3:
        k = len(order)
        idx = min(range(k), key=angles.__getitem__)
        angle = angles[idx]
        prev_i, next_i = (idx - 1) % k, (idx + 1) % k
        e1, e2 = edges[idx], edges[next_i]
        e3_sq = e1 * e1 + e2 * e2 - 2 * e1 * e2 * math.cos(angle)
        if e3_sq <= 0:
            break
        e3 = math.sqrt(e3_sq)
        angle1 = _acos((e3_sq + e1 * e1 - e2 * e2) / (2 * e3 * e1))
        angle2 = _acos((e3_sq + e2 * e2 - e1 * e1) / (2 * e3 * e2))
        left = angles[prev_i] - angle1
        right = angles[next_i] - angle2
        if not (left > angle and right > angle):
            break
        angles[prev_i] = left
        angles[next_i] = right
        edges[next_i] = e3
        del edges[idx], angles[idx], order[idx]
    return [pts[i] for i in order]


def _convex_hull(points: list[Point]) -> list[Point]:
    pivot = min(points, key=lambda p: (p[1], -p[0]))
    px, py = pivot
    rest = [p for p in points if p != pivot]

    def compare(a: Point, b: Point) -> int:
        dx1, dy1 = a[0] - px, a[1] - py
        dx2, dy2 = b[0] - px, b[1] - py
        if dx1 * dy2 - dx2 * dy1 == 0:
            d1, d2 = dx1 * dx1 + dy1 * dy1, dx2 * dx2 + dy2 * dy2
            return (d1 > d2) - (d1 < d2)
        a1, a2 = math.atan2(dy1, dx1), math.atan2(dy2, dx2)
        return (a1 > a2) - (a1 < a2)

    rest.sort(key=cmp_to_key(compare))
    hull = [pivot, rest[0]]
    for x3, y3 in rest[1:]:
        while len(hull) > 1:
            (x1, y1), (x2, y2) = hull[-2], hull[-1]
            if (x2 - x1) * (y3 - y1) - (y2 - y1) * (x3 - x1) <= 0:
                hull.pop()
            else:
                break
        hull.append((x3, y3))
    return hull


def farthest_pair_distance(points: Sequence[Sequence[int]]) -> float:
    """Largest distance between two of the points, found on their convex hull."""
    unique = list(dict.fromkeys((p[0], p[1]) for p in points))
    if not unique:
        raise ValueError("at least one point is needed")
    if len(unique) == 1:
        return 0.0
    if len(unique) == 2:
        return math.sqrt(_squared(unique[0], unique[1]))
    hull = _convex_hull(unique)
    n = len(hull)
    j = 2
    best = 0
    for i in range(n):
        j = (j + n - 1) % n
        farthest = _squared(hull[i], hull[j])
        while True:
            candidate = _squared(hull[i], hull[(j + 1) % n])
            if candidate <= farthest:
                break
            farthest = candidate
            j = (j + 1) % n
        best = max(best, farthest)
    return math.sqrt(best)


def farthest_pair_brute(points: Sequence[Sequence[int]]) -> float:
    """Largest distance between two of the points, checking every pair."""
    pts = [(p[0], p[1]) for p in points]
    best = max((_squared(a, b) for a, b in combinations(pts, 2)), default=0)
    return math.sqrt(best)


def run_simplify_polygon(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while True:
        n = reader.scan(int)
        if n == 0:
            break
        if n < 3:
            raise ValueError("a polygon needs at least three points")
        points = [reader.scan(int, int) for _ in range(n)]
        kept = simplify_polygon(points)
        coords = "".join(f" {x} {y}" for x, y in kept)
        lines.append(f"{len(kept)}{coords}\n")
    return "".join(lines)


def run_farthest_pair_distance(text: str) -> str:
    reader = TokenReader(text)
    c = reader.scan(int)
    points = [reader.scan(int, int) for _ in range(c)]
    return f"{_format_float(farthest_pair_distance(points))}\n"