"""Navigation problems: a ball's bounce angle and the turtle's missing command argument."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from enum import Enum
from functools import reduce
from typing import NamedTuple

from contestkit.tokens import TokenReader

_TOLERANCE = 1.0e-8


class TurtleState(NamedTuple):
    x: float
    y: float
    heading: int


_ORIGIN = TurtleState(0.0, 0.0, 0)


class Command(Enum):
    """A turtle command: forward, left turn, backward or right turn."""

    FD = "fd"
    LT = "lt"
    BK = "bk"
    RT = "rt"

    def execute(self, arg: int, state: Sequence) -> TurtleState:
        """State after running this command with ``arg`` from ``state`` (x, y, heading)."""
        x, y, heading = state
        if self in (Command.FD, Command.BK):
            step = arg if self is Command.FD else -arg
            angle = math.radians(heading)
            return TurtleState(x + step * math.cos(angle), y + step * math.sin(angle), heading)
        if self is Command.LT:
            return TurtleState(x, y, (heading + arg) % 360)
        return TurtleState(x, y, (heading - arg) % 360)


def bounce_angle_speed(a: float, b: float, s: float, m: int, n: int) -> tuple[float, float]:
    """Launch angle in degrees and speed of a ball bouncing m times across and n times up
    an a-by-b table in s seconds."""
    across = m * a
    up = n * b
    angle = math.degrees(math.atan2(up, across))
    speed = math.sqrt(across**2 + up**2) / s
    return angle, speed


def _trace(commands: Iterable[tuple[Command, int]]) -> TurtleState:
    return reduce(lambda state, item: item[0].execute(item[1], state), commands, _ORIGIN)


def _rotate(state: TurtleState, heading: int) -> tuple[float, float]:
    sin_h, cos_h = math.sin(math.radians(heading)), math.cos(math.radians(heading))
    return state.x * cos_h - state.y * sin_h, state.x * sin_h + state.y * cos_h


def missing_argument(commands: Sequence[tuple[Command, int | None]]) -> int:
    """Smallest argument for the one command lacking it that brings the turtle home.

    ``commands`` holds (command, argument) pairs; exactly one argument is None.
    """
    missing = [k for k, (_, arg) in enumerate(commands) if arg is None]
    if len(missing) != 1:
        raise ValueError(f"exactly one argument must be unknown, found {len(missing)}")
    k = missing[0]
    unknown = commands[k][0]
    before = _trace(commands[:k])
    after = _trace(commands[k + 1 :])

    def closes(arg: int) -> bool:
        state = unknown.execute(arg, before)
        dx, dy = _rotate(after, state.heading)
        return abs(state.x + dx) < _TOLERANCE and abs(state.y + dy) < _TOLERANCE

    if unknown in (Command.LT, Command.RT):
        candidates: Iterable[int] = range(360)
    else:
        # Moving does not turn, so the end point is linear in the argument.
        dx, dy = _rotate(after, before.heading)
        sign = 1 if unknown is Command.FD else -1
        ux = sign * math.cos(math.radians(before.heading))
        uy = sign * math.sin(math.radians(before.heading))
        target = -((before.x + dx) * ux + (before.y + dy) * uy)
        low = max(0, math.floor(target) - 1)
        high = max(0, math.ceil(target) + 1)
        candidates = range(low, high + 1)
    for arg in candidates:
        if closes(arg):
            return arg
    raise ValueError("no argument brings the turtle back to the start")


def _parse_argument(token: str) -> int | None:
    try:
        value = int(token)
    except ValueError:
        return None
    return value if value >= 0 else None


def run_bounce_angle_speed(text: str) -> str:
    reader = TokenReader(text)
    lines = []
    while True:
        a, b, s, m, n = reader.scan(int, int, int, int, int)
        if a == 0:
            break
        angle, speed = bounce_angle_speed(a, b, s, m, n)
        lines.append(f"{angle:.2f} {speed:.2f}\n")
    return "".join(lines)


def run_missing_argument(text: str) -> str:
    reader = TokenReader(text)
    cases = reader.scan(int)
    lines = []
    for _ in range(cases):
        m = reader.scan(int)
        commands = [reader.scan(Command, _parse_argument) for _ in range(m)]
        lines.append(f"{missing_argument(commands)}\n")
    return "".join(lines)