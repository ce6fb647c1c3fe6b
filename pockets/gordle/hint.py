"""Per-letter hints and the feedback shown after each guess."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Hint(IntEnum):
    """What a guessed letter tells about the solution."""

    ABSENT_CHARACTER = 0
    WRONG_POSITION = 1
    CORRECT_POSITION = 2

    def __str__(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {
    Hint.ABSENT_CHARACTER: "⬛",
    Hint.WRONG_POSITION: "🟡",
    Hint.CORRECT_POSITION: "💚",
}


class Feedback(tuple):
    """An immutable sequence of hints, one per letter of a guess."""

    def __new__(cls, hints: Iterable[Hint | int] = ()) -> Feedback:
        return super().__new__(cls, (Hint(hint) for hint in hints))

    def __str__(self) -> str:
        return "".join(str(hint) for hint in self)

    def __repr__(self) -> str:
        return f"Feedback({list(self)!r})"