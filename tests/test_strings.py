import random

import pytest

from contestkit.strings import (
    MODULUS,
    RollingHasher,
    has_knight_word,
    max_possible_correct,
    min_compressed_length,
    run_has_knight_word,
    run_max_possible_correct,
    run_min_compressed_length,
    run_typed_length,
    typed_length,
)

_PATH = [
    ((0, 0), "I"),
    ((1, 2), "C"),
    ((0, 4), "P"),
    ((2, 3), "C"),
    ((4, 4), "A"),
    ((3, 2), "S"),
    ((4, 0), "I"),
    ((2, 1), "A"),
    ((0, 2), "S"),
    ((1, 4), "G"),
]


def _board(include_goal=True):
    cells = [["X"] * 5 for _ in range(5)]
    for (i, j), letter in _PATH:
        if letter == "G" and not include_goal:
            continue
        cells[i][j] = letter
    return "".join("".join(row) for row in cells)


def _random_ab_strings():
    rng = random.Random(2024)
    return ["".join(rng.choice("AB") for _ in range(10)) for _ in range(100)]


def test_typed_length_overlap():
    assert typed_length(0, ["abc", "bcd"]) == 1
    assert typed_length(2, ["abc", "bcd"]) == 3


def test_typed_length_no_overlap_and_single_word():
    assert typed_length(0, ["ab", "cd"]) == 2
    assert typed_length(5, ["word"]) == 5
    assert typed_length(1, ["ab", "ab"]) == 1


def test_run_typed_length():
    assert run_typed_length("2\n2 2\nabc bcd\n0 2\nab cd\n") == "3\n2\n"


def test_max_possible_correct():
    assert max_possible_correct(3, "FTFFF", "TFTTT") == 2
    assert max_possible_correct(5, "FFFFF", "FFFFF") == 5
    assert max_possible_correct(0, "FFFFF", "FFFFF") == 0


def test_run_max_possible_correct():
    assert run_max_possible_correct("3\nFTFFF\nTFTTT\n") == "2\n"


def test_knight_word_found():
    assert has_knight_word(5, _board()) is True


def test_knight_word_missing_last_letter():
    assert has_knight_word(5, _board(include_goal=False)) is False


def test_knight_word_short_board_rejected():
    with pytest.raises(ValueError):
        has_knight_word(3, "ICPC")


def test_run_has_knight_word():
    assert run_has_knight_word(f"5\n{_board()}\n") == "YES\n"
    assert run_has_knight_word(f"5\n{_board(False)}\n") == "NO\n"


def test_hasher_single_character_is_its_code():
    hasher = RollingHasher(131, [ord(c) for c in "abc"])
    assert hasher.hash(0, 1) == ord("a")


def test_hasher_equal_substrings_have_equal_hashes():
    text = "abcabcxabc"
    hasher = RollingHasher(1_000_003, [ord(c) for c in text])
    assert hasher.hash(0, 3) == hasher.hash(3, 6) == hasher.hash(7, 10)
    assert hasher.hash(0, 3) != hasher.hash(1, 4)
    assert 0 <= hasher.hash(2, 9) < MODULUS


def test_hasher_rejects_empty_data_and_bad_ranges():
    with pytest.raises(ValueError):
        RollingHasher(7, [])
    hasher = RollingHasher(7, [1, 2, 3])
    with pytest.raises(ValueError):
        hasher.hash(2, 2)
    with pytest.raises(ValueError):
        hasher.hash(0, 4)


@pytest.mark.parametrize("s,expected", [("A", 1), ("AA", 1), ("AB", 2), ("ABAB", 2)])
def test_min_compressed_length_small(s, expected):
    assert min_compressed_length(s, base=998_244_353) == expected


def test_min_compressed_length_random_ab_strings():
    for s in _random_ab_strings():
        first = min_compressed_length(s, base=1_000_000_007)
        second = min_compressed_length(s, base=123_456_789_012_345)
        assert 1 <= first <= len(s)
        assert first == second


def test_min_compressed_length_empty_rejected():
    with pytest.raises(ValueError):
        min_compressed_length("", base=31)


def test_run_min_compressed_length():
    assert run_min_compressed_length("ABAB\n") == "2\n"