import pytest

from contestkit.navigation import (
    Command,
    bounce_angle_speed,
    missing_argument,
    run_bounce_angle_speed,
    run_missing_argument,
)

SQUARE = [
    (Command.FD, 10),
    (Command.LT, 90),
    (Command.FD, 10),
    (Command.LT, 90),
    (Command.FD, 10),
    (Command.LT, 90),
    (Command.FD, 10),
]


def test_command_parses_from_text():
    assert Command("fd") is Command.FD
    assert Command("rt") is Command.RT


def test_unknown_command_is_rejected():
    with pytest.raises(ValueError):
        Command("jump")


def test_forward_moves_along_heading():
    state = Command.FD.execute(10, (0.0, 0.0, 0))
    assert state.x == pytest.approx(10)
    assert state.y == pytest.approx(0)
    assert state.heading == 0


def test_forward_then_back_returns_home():
    state = Command.FD.execute(7, (1.0, 2.0, 30))
    state = Command.BK.execute(7, state)
    assert state.x == pytest.approx(1.0)
    assert state.y == pytest.approx(2.0)


def test_left_then_right_restores_heading():
    state = Command.LT.execute(123, (0.0, 0.0, 300))
    state = Command.RT.execute(123, state)
    assert state.heading == 300


@pytest.mark.parametrize("hidden", range(len(SQUARE)))
def test_missing_argument_recovers_hidden_value(hidden):
    commands = list(SQUARE)
    command, arg = commands[hidden]
    commands[hidden] = (command, None)
    assert missing_argument(commands) == arg


def test_missing_backward_argument():
    assert missing_argument([(Command.FD, 5), (Command.BK, None)]) == 5


def test_no_missing_argument_is_an_error():
    with pytest.raises(ValueError):
        missing_argument(SQUARE)


def test_two_missing_arguments_is_an_error():
    with pytest.raises(ValueError):
        missing_argument([(Command.FD, None), (Command.BK, None)])


def test_unreachable_turn_is_an_error():
    with pytest.raises(ValueError):
        missing_argument([(Command.FD, 10), (Command.LT, None)])


def test_unreachable_move_is_an_error():
    with pytest.raises(ValueError):
        missing_argument([(Command.LT, 90), (Command.FD, 10), (Command.LT, 90), (Command.FD, None)])


def test_bounce_diagonal_is_45_degrees():
    angle, _ = bounce_angle_speed(1, 1, 1, 2, 2)
    assert angle == pytest.approx(45.0)


def test_bounce_speed():
    _, speed = bounce_angle_speed(3, 4, 1, 1, 1)
    assert speed == pytest.approx(5.0)


def test_bounce_speed_halves_with_double_time():
    _, fast = bounce_angle_speed(3, 7, 1, 2, 3)
    _, slow = bounce_angle_speed(3, 7, 2, 2, 3)
    assert fast == pytest.approx(2 * slow)


def test_run_bounce_angle_speed_formats_two_decimals():
    angle, speed = bounce_angle_speed(3, 7, 5, 2, 3)
    assert run_bounce_angle_speed("3 7 5 2 3\n0 0 0 0 0\n") == f"{angle:.2f} {speed:.2f}\n"


def test_run_missing_argument():
    text = "1\n7\nfd 10\nlt 90\nfd ?\nlt 90\nfd 10\nlt 90\nfd 10\n"
    assert run_missing_argument(text) == "10\n"