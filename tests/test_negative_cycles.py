import pytest

from contestkit.negative_cycles import (
    has_arbitrage,
    is_winnable,
    run_has_arbitrage,
    run_is_winnable,
)

GAINING = [("A", "B", 1, 2), ("B", "A", 1, 1)]
BALANCED = [("A", "B", 1, 2), ("B", "A", 2, 1)]


def test_run_arbitrage_cases():
    text = (
        "2\nA B\n2\nA B 1:2\nB A 1:1\n"
        "2\nA B\n2\nA B 1:2\nB A 2:1\n"
        "0\n"
    )
    assert run_has_arbitrage(text) == "Arbitrage\nOk\n"


def test_arbitrage_gaining_and_balanced_cycles():
    assert has_arbitrage(["A", "B"], GAINING)
    assert not has_arbitrage(["A", "B"], BALANCED)


def test_arbitrage_independent_of_currency_order():
    rates = [("X", "Y", 3, 4), ("Y", "Z", 2, 3), ("Z", "X", 5, 3)]
    results = {
        has_arbitrage(order, rates)
        for order in (["X", "Y", "Z"], ["Z", "X", "Y"], ["Y", "Z", "X"])
    }
    assert len(results) == 1


def test_no_rates_means_no_arbitrage():
    assert not has_arbitrage(["A", "B", "C"], [])


def test_unknown_currency_raises():
    with pytest.raises(ValueError):
        has_arbitrage(["A"], [("A", "Q", 1, 2)])


def test_malformed_rate_raises():
    with pytest.raises(ValueError):
        run_has_arbitrage("2\nA B\n1\nA B 12\n0\n")


def test_single_room_is_winnable():
    assert run_is_winnable("1\n0 0\n-1\n") == "winnable\n"


def test_deadly_room_is_hopeless():
    assert run_is_winnable("2\n0 1 2\n-200 0\n-1\n") == "hopeless\n"


def test_gaining_cycle_makes_the_difference():
    energies = [0, 20, -150]
    assert is_winnable(energies, [[1], [0, 2], []])
    assert not is_winnable(energies, [[1], [2], []])


def test_run_winnable_matches_function():
    text = "3\n0 1 2\n20 2 1 3\n-150 0\n3\n0 1 2\n20 1 3\n-150 0\n-1\n"
    first = is_winnable([0, 20, -150], [[1], [0, 2], []])
    second = is_winnable([0, 20, -150], [[1], [2], []])
    expected = "".join(
        "winnable\n" if result else "hopeless\n" for result in (first, second)
    )
    assert run_is_winnable(text) == expected


def test_no_rooms_raises():
    with pytest.raises(ValueError):
        is_winnable([], [])