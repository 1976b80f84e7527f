import math

import pytest

from contestkit.divisors import (
    CELEBRATE,
    RECOUNT,
    WAIT,
    binomial_divisor_count,
    classify_perfection,
    coin_combinations,
    election_verdict,
    last_nonzero_factorial_digit,
    prime_factors,
    run_binomial_divisor_count,
    run_classify_perfection,
    run_coin_combinations,
    run_election_verdict,
    run_last_nonzero_factorial_digit,
)


def _brute_last_digit(n):
    return int(str(math.factorial(n)).rstrip("0")[-1])


def _brute_divisor_count(value):
    return sum(1 for d in range(1, value + 1) if value % d == 0)


@pytest.mark.parametrize("n", range(1, 300))
def test_prime_factors_multiply_back(n):
    factors = prime_factors(n)
    assert math.prod(p**e for p, e in factors) == n
    primes = [p for p, _ in factors]
    assert primes == sorted(set(primes))
    for p in primes:
        assert all(p % d for d in range(2, math.isqrt(p) + 1))


def test_prime_factors_of_one_is_empty():
    assert prime_factors(1) == []


@pytest.mark.parametrize("n", [0, -4])
def test_prime_factors_rejects_non_positive(n):
    with pytest.raises(ValueError):
        prime_factors(n)


@pytest.mark.parametrize("p", [6, 28, 496, 8128])
def test_perfect_numbers(p):
    assert classify_perfection(p) == "perfect"


def test_only_six_and_twenty_eight_are_perfect_below_200():
    perfect = [p for p in range(2, 200) if classify_perfection(p) == "perfect"]
    assert perfect == [6, 28]


def test_primes_are_not_perfect():
    assert {classify_perfection(p) for p in (7, 11, 13, 101)} == {"not perfect"}


def test_run_classify_perfection():
    assert run_classify_perfection("6 28\n") == "6 perfect\n28 perfect\n"


def test_coin_combinations_satisfy_total():
    found = coin_combinations(1.00, 0.25, 0.50)
    assert found
    assert all(25 * i + 50 * j == 100 for i, j in found)
    assert [i for i, _ in found] == sorted(i for i, _ in found)
    assert len(found) == 3


def test_coin_combinations_none():
    assert coin_combinations(0.05, 0.03, 0.04) == []
    assert run_coin_combinations("0.05 0.03 0.04") == "none\n"


def test_run_coin_combinations_lists_pairs():
    out = run_coin_combinations("1.00 0.25 0.50")
    pairs = [tuple(map(int, line.split())) for line in out.splitlines()]
    assert pairs == coin_combinations(1.00, 0.25, 0.50)


def test_coin_combinations_rejects_zero_price():
    with pytest.raises(ValueError):
        coin_combinations(1.0, 0.0, 0.5)


@pytest.mark.parametrize("n", range(0, 13))
def test_binomial_divisor_count_matches_brute(n):
    for m in range(n + 1):
        assert binomial_divisor_count(n, m) == _brute_divisor_count(math.comb(n, m))


def test_binomial_divisor_count_symmetry():
    assert binomial_divisor_count(40, 7) == binomial_divisor_count(40, 33)


def test_binomial_divisor_count_rejects_m_above_n():
    with pytest.raises(ValueError):
        binomial_divisor_count(3, 4)


def test_run_binomial_divisor_count():
    expected = f"{binomial_divisor_count(10, 4)}\n{binomial_divisor_count(9, 0)}\n"
    assert run_binomial_divisor_count("10 4\n9 0\n") == expected


def test_election_recount_when_second_has_half():
    assert election_verdict(10, 0, 6, 50) == RECOUNT
    assert election_verdict(10, 5, 5, 50) == RECOUNT


def test_election_first_already_won():
    assert election_verdict(10, 6, 0, 50) == CELEBRATE


def test_election_threshold_boundaries():
    assert election_verdict(3, 1, 0, 0) == CELEBRATE
    assert election_verdict(3, 1, 0, 100) == WAIT


def test_election_rejects_too_many_votes():
    with pytest.raises(ValueError):
        election_verdict(5, 4, 3, 10)


def test_run_election_verdict():
    out = run_election_verdict("2\n10 0 6 50\n10 6 0 50\n")
    assert out == f"{RECOUNT}\n{CELEBRATE}\n"


@pytest.mark.parametrize("n", range(1, 80))
def test_last_nonzero_digit_matches_factorial(n):
    assert last_nonzero_factorial_digit(n) == _brute_last_digit(n)


def test_last_nonzero_digit_rejects_zero():
    with pytest.raises(ValueError):
        last_nonzero_factorial_digit(0)


def test_run_last_nonzero_digit():
    queries = [1, 3, 25, 100]
    text = " ".join(map(str, queries)) + " 0"
    expected = "".join(f"{_brute_last_digit(n)}\n" for n in queries)
    assert run_last_nonzero_factorial_digit(text) == expected