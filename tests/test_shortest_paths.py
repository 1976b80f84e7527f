import pytest

from contestkit.shortest_paths import (
    cheapest_descent_path,
    flower_route_length,
    jumping_grid_moves,
    run_cheapest_descent_path,
    run_flower_route_length,
    run_jumping_grid_moves,
)


def _transpose(grid):
    return ["".join(column) for column in zip(*grid)]


def test_jump_small_grid():
    assert jumping_grid_moves(["11", "11"]) == 2


def test_jump_unreachable_is_none():
    assert jumping_grid_moves(["1"]) is None
    assert jumping_grid_moves(["01", "11"]) is None


def test_run_jump_unreachable_prints_minus_one():
    assert run_jumping_grid_moves("1 1\n1\n") == "-1\n"


@pytest.mark.parametrize(
    "grid",
    [
        ["11", "11"],
        ["212", "111", "121"],
        ["3122", "1211", "2113", "1121"],
        ["12", "30"],
    ],
)
def test_jump_invariant_under_transpose(grid):
    assert jumping_grid_moves(grid) == jumping_grid_moves(_transpose(grid))


def test_run_jump_matches_function():
    grid = ["212", "111", "121"]
    moves = jumping_grid_moves(grid)
    assert run_jumping_grid_moves("3 3\n212\n111\n121\n") == f"{moves}\n"


def test_jump_rejects_non_digit():
    with pytest.raises(ValueError):
        jumping_grid_moves(["1a", "11"])


def test_descent_follows_zero_column():
    assert cheapest_descent_path(["909", "909", "909"]) == ["9 9", "9 9", "9 9"]


def test_descent_single_row_takes_last_cheapest_cell():
    assert cheapest_descent_path(["3141"]) == ["314 "]


@pytest.mark.parametrize(
    "grid",
    [["5173", "2864", "9312", "4455"], ["11111", "99991", "11111"], ["7"]],
)
def test_descent_path_shape(grid):
    drawn = cheapest_descent_path(grid)
    assert len(drawn) == len(grid)
    for original, row in zip(grid, drawn):
        assert len(row) == len(original)
        assert " " in row
        for before, after in zip(original, row):
            assert after in (before, " ")


def test_run_descent_format():
    rows = ["5173", "2864", "9312"]
    expected = "".join(f"{row}\n" for row in cheapest_descent_path(rows)) + "\n"
    text = "3 4\n" + "\n".join(rows) + "\n0 0\n"
    assert run_cheapest_descent_path(text) == expected


def test_run_descent_stops_at_zero_zero():
    assert run_cheapest_descent_path("0 0\n1 1\n5\n") == ""


TRAILS = [(0, 1, 2), (1, 3, 5), (0, 2, 4), (2, 3, 3), (1, 2, 9)]


def test_flower_length_positive_and_even():
    total = flower_route_length(4, TRAILS)
    assert total > 0
    assert total % 2 == 0


def test_flower_scales_with_lengths():
    scaled = [(i, j, 3 * length) for i, j, length in TRAILS]
    assert flower_route_length(4, scaled) == 3 * flower_route_length(4, TRAILS)


def test_flower_ignores_loops():
    looped = TRAILS + [(1, 1, 1), (3, 3, 2)]
    assert flower_route_length(4, looped) == flower_route_length(4, TRAILS)


def test_flower_parallel_equal_routes_add_up():
    route_a = [(0, 1, 2), (1, 3, 5)]
    route_b = [(0, 2, 4), (2, 3, 3)]
    both = flower_route_length(4, route_a + route_b)
    assert both == flower_route_length(4, route_a) + flower_route_length(4, route_b)


def test_flower_ignores_longer_detour():
    route = [(0, 1, 2), (1, 3, 5)]
    assert flower_route_length(4, route + [(0, 3, 50)]) == flower_route_length(4, route)


def test_flower_unreachable_end_matches_no_trails():
    assert flower_route_length(3, [(0, 1, 4)]) == flower_route_length(3, [])


def test_run_flower_matches_function():
    text = "4 5\n" + "".join(f"{i} {j} {l}\n" for i, j, l in TRAILS)
    assert run_flower_route_length(text) == f"{flower_route_length(4, TRAILS)}\n"


def test_flower_needs_a_place():
    with pytest.raises(ValueError):
        flower_route_length(0, [])