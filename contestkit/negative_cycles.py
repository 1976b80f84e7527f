"""Cycle detection with Bellman-Ford relaxation: currency arbitrage and energy rooms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from contestkit.tokens import TokenReader


def _log_ratio(a: int, b: int) -> float:
    if a == 0 and b == 0:
        raise ValueError("exchange rate 0:0 is undefined")
    if a == 0:
        return math.inf
    if b == 0:
        return -math.inf
    return math.log(b / a)


def has_arbitrage(currencies: Sequence[str], rates: Iterable[Sequence]) -> bool:
    """Whether some chain of exchanges ends with more than it started with.

    ``rates`` holds (source, target, a, b): a units of source buy b of target.
    """
    index = {code: i for i, code in enumerate(currencies)}
    edges = []
    for source, target, a, b in rates:
        try:
            edges.append((index[source], index[target], _log_ratio(a, b)))
        except KeyError as missing:
            raise ValueError(f"unknown currency {missing.args[0]!r}") from None
    count = len(currencies)
    for start in range(count):
        dist = [-math.inf] * count
        dist[start] = 0.0
        for _ in range(count + 1):
            updated = False
            for i, j, gain in edges:
                if dist[i] + gain > dist[j]:
                    dist[j] = dist[i] + gain
                    updated = True
            if not updated:
                break
        if any(math.isnan(value) for value in dist):
            raise ValueError("exchange rates produced an undefined value")
        if dist[start] > 0.0:
            return True
    return False


def _relaxations(links: Sequence[Sequence[int]]):
    return [(i, j) for i, targets in enumerate(links) for j in targets]


def is_winnable(energies: Sequence[int], links: Sequence[Sequence[int]]) -> bool:
    """Whether a player starting in room 0 with 100 energy can reach the last room.

    Entering room j adds ``energies[j]``; energy must stay positive.
    ``links[i]`` lists the 0-based rooms reachable from room i.
    """
    n = len(energies)
    if n == 0:
        raise ValueError("there must be at least one room")
    pairs = _relaxations(links)
    energy: list[int | None] = [None] * n
    reaches_end = [False] * n
    energy[0] = 100
    reaches_end[n - 1] = True
    for rounds in range(n + 1):
        updated = False
        for i, j in pairs:
            if reaches_end[j]:
                reaches_end[i] = True
            current = energy[i]
            if current is None:
                continue
            gained = current + energies[j]
            if gained <= 0:
                continue
            if energy[j] is None:
                energy[j] = gained
            elif gained > energy[j]:
                energy[j] = gained
                updated = True
        if rounds == n:
            if not updated:
                break
            # A cycle keeps raising energy; win if it can feed the last room.
            for _ in range(n):
                for i, j in pairs:
                    current = energy[i]
                    if current is None:
                        continue
                    gained = current + energies[j]
                    if gained <= 0:
                        continue
                    if energy[j] is None:
                        energy[j] = gained
                    elif gained > energy[j]:
                        energy[j] = gained
                        if reaches_end[j]:
                            return True
            return False
    return energy[n - 1] is not None


def _parse_rate(token: str) -> tuple[int, int]:
    a, sep, b = token.partition(":")
    if not sep:
        raise ValueError(f"rate {token!r} is not of the form a:b")
    return int(a), int(b)


def run_has_arbitrage(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while True:
        count = reader.scan(int)
        if count == 0:
            break
        currencies = [reader.scan(str) for _ in range(count)]
        rate_count = reader.scan(int)
        rates = []
        for _ in range(rate_count):
            source, target, rate = reader.scan(str, str, str)
            rates.append((source, target, *_parse_rate(rate)))
        lines.append("Arbitrage\n" if has_arbitrage(currencies, rates) else "Ok\n")
    return "".join(lines)


def run_is_winnable(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while True:
        n = reader.scan(int)
        if n == -1:
            break
        energies = []
        links = []
        for _ in range(n):
            energy, m = reader.scan(int, int)
            energies.append(energy)
            links.append([reader.scan(int) - 1 for _ in range(m)])
        lines.append("winnable\n" if is_winnable(energies, links) else "hopeless\n")
    return "".join(lines)