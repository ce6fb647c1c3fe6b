"""Reading the word list a game picks its solution from."""

from __future__ import annotations

import random
from collections.abc import Sequence


class CorpusError(Exception):
    """The corpus could not be used."""


class CorpusEmptyError(CorpusError):
    """The corpus holds no words."""

    def __init__(self) -> None:
        super().__init__("corpus is empty")


def read_corpus(path: str) -> list[str]:
    """Return the whitespace-separated words of the file at ``path``."""
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError as err:
        raise CorpusError(f'unable to open "{path}" for reading: {err}') from err

    if not data:
        raise CorpusEmptyError()

    return data.decode("utf-8", errors="replace").split()


def pick_word(corpus: Sequence[str]) -> str:
    """Return a random word of ``corpus``."""
    if not corpus:
        raise CorpusEmptyError()
    return random.choice(corpus)