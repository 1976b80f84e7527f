"""Whitespace-separated token reading for problem input."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class TokenReader:
    """Reads whitespace-separated tokens from a block of text, one value at a time."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def _next_token(self) -> str | None:
        return next(self._tokens, None)

    def scan(self, *kinds: Callable[[str], Any]) -> Any:
        """Read one value per kind; a single kind gives a value, several give a tuple.

        Raises EOFError when the input runs out and whatever the converter
        raises (usually ValueError) when a token does not parse.
        """
        if not kinds:
            raise TypeError("scan() needs at least one kind")
        values = []
        for kind in kinds:
            token = self._next_token()
            if token is None:
                raise EOFError("input ended before all values were read")
            values.append(kind(token))
        return values[0] if len(values) == 1 else tuple(values)

    def scan_optional(self, kind: Callable[[str], Any]) -> Any:
        """Read one value, or return None when the input is exhausted."""
        token = self._next_token()
        return None if token is None else kind(token)