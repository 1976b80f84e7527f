"""Number theory problems: divisor sums, coin splits, binomial divisors, elections and factorial digits."""

from __future__ import annotations

import math
from collections import Counter

from contestkit.tokens import TokenReader

MAX_FACTORIAL = 1_000_000

RECOUNT = "RECOUNT!"
CELEBRATE = "GET A CRATE OF CHAMPAGNE FROM THE BASEMENT!"
WAIT = "PATIENCE, EVERYONE!"


def prime_factors(n: int) -> list[tuple[int, int]]:
    """Prime factorisation of ``n`` as (prime, exponent) pairs in increasing order."""
    if n < 1:
        raise ValueError(f"cannot factor {n}; a positive integer is needed")
    factors: list[tuple[int, int]] = []
    twos = 0
    while n % 2 == 0:
        n //= 2
        twos += 1
    if twos:
        factors.append((2, twos))
    i = 3
    while i * i <= n:
        count = 0
        while n % i == 0:
            n //= i
            count += 1
        if count:
            factors.append((i, count))
        i += 2
    if n > 1:
        factors.append((n, 1))
    return factors


def classify_perfection(p: int) -> str:
    """'perfect', 'almost perfect' (proper divisor sum within 2) or 'not perfect'."""
    divisor_sum = math.prod(
        (prime ** (exp + 1) - 1) // (prime - 1) for prime, exp in prime_factors(p)
    )
    proper = divisor_sum - p
    if proper == p:
        return "perfect"
    if abs(proper - p) <= 2:
        return "almost perfect"
    return "not perfect"


def _cents(amount: float | str) -> int:
    value = float(amount)
    if value < 0:
        raise ValueError(f"amount {amount!r} is negative")
    return math.floor(value * 100 + 0.5)


def coin_combinations(
    total: float | str, price1: float | str, price2: float | str
) -> list[tuple[int, int]]:
    """Every (i, j) with i * price1 + j * price2 == total, by increasing i, in whole cents."""
    total_cents = _cents(total)
    first = _cents(price1)
    second = _cents(price2)
    if first == 0 or second == 0:
        raise ValueError("prices must be at least one cent")
    return [
        (i, (total_cents - i * first) // second)
        for i in range(total_cents // first + 1)
        if (total_cents - i * first) % second == 0
    ]


def binomial_divisor_count(n: int, m: int) -> int:
    """Number of divisors of the binomial coefficient C(n, m)."""
    if n < 0 or m < 0 or m > n:
        raise ValueError(f"C({n}, {m}) needs 0 <= m <= n")
    exponents: Counter[int] = Counter()
    for i in range(1, m + 1):
        for prime, exp in prime_factors(n + 1 - i):
            exponents[prime] += exp
        if i > 1:
            for prime, exp in prime_factors(i):
                exponents[prime] -= exp
    return math.prod(count + 1 for count in exponents.values())


def election_verdict(n: int, v1: int, v2: int, w: int) -> str:
    """Verdict once v1 and v2 of n votes are counted, given a w percent confidence bar."""
    if min(n, v1, v2, w) < 0 or v1 + v2 > n:
        raise ValueError("vote counts must be non-negative and at most n in total")
    half = n // 2
    if v2 > half or (v2 == half and n % 2 == 0):
        return RECOUNT
    if v1 > half:
        return CELEBRATE
    needed = half + 1 - v1
    remaining = n - v1 - v2
    favourable = sum(math.comb(remaining, i) for i in range(needed, remaining + 1))
    return CELEBRATE if favourable * 100 > (w << remaining) else WAIT


def _factorial_digits(limit: int) -> list[int]:
    """Last nonzero digit of k! for every k in 0..limit."""
    digits = [1] * (limit + 1)
    twos = 0
    rest = 1
    for i in range(2, limit + 1):
        j = i
        while j % 5 == 0:
            j //= 5
            twos -= 1
        zeros = (j & -j).bit_length() - 1
        twos += zeros
        j >>= zeros
        rest = rest * j % 10
        digits[i] = pow(2, twos, 10) * rest % 10
    return digits


def _check_factorial_argument(n: int) -> None:
    if not 1 <= n <= MAX_FACTORIAL:
        raise ValueError(f"n must lie in 1..{MAX_FACTORIAL}, got {n}")


def last_nonzero_factorial_digit(n: int) -> int:
    """Last nonzero decimal digit of n!."""
    _check_factorial_argument(n)
    return _factorial_digits(n)[n]


def run_classify_perfection(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while (p := reader.scan_optional(int)) is not None:
        lines.append(f"{p} {classify_perfection(p)}\n")
    return "".join(lines)


def run_coin_combinations(text: str) -> str:
    reader = TokenReader(text)
    total, price1, price2 = reader.scan(float, float, float)
    found = coin_combinations(total, price1, price2)
    if not found:
        return "none\n"
    return "".join(f"{i} {j}\n" for i, j in found)


def run_binomial_divisor_count(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while (n := reader.scan_optional(int)) is not None:
        m = reader.scan(int)
        lines.append(f"{binomial_divisor_count(n, m)}\n")
    return "".join(lines)


def run_election_verdict(text: str) -> str:
    reader = TokenReader(text)
    cases = reader.scan(int)
    lines = []
    for _ in range(cases):
        n, v1, v2, w = reader.scan(int, int, int, int)
        lines.append(f"{election_verdict(n, v1, v2, w)}\n")
    return "".join(lines)


def run_last_nonzero_factorial_digit(text: str) -> str:
    reader = TokenReader(text)
    queries = []
    while (n := reader.scan(int)) != 0:
        _check_factorial_argument(n)
        queries.append(n)
    if not queries:
        return ""
    digits = _factorial_digits(max(queries))
    return "".join(f"{digits[n]}\n" for n in queries)