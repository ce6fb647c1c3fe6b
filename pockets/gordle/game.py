"""A word-guessing game played on a text stream."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from typing import TextIO

from pockets.gordle.corpus import CorpusEmptyError, CorpusError, pick_word, read_corpus
from pockets.gordle.hint import Feedback, Hint

MAX_ATTEMPTS = 6
DEFAULT_CORPUS = "corpus/english.txt"


class InvalidWordLengthError(ValueError):
    """A guess does not have as many characters as the solution."""

    def __init__(self, expected: int, got: int) -> None:
        super().__init__(
            f"expected {expected}, got {got}, invalid guess, word doesn't have "
            "the same number of characters as the solution."
        )
        self.expected = expected
        self.got = got


def _to_upper(text: str) -> str:
    # Keep one character per character: letters whose upper case expands stay as they are.
    return "".join(c.upper() if len(c.upper()) == 1 else c for c in text)


def compute_feedback(guess: str, solution: str) -> Feedback:
    """Return a hint for each character of ``guess`` against ``solution``."""
    if len(guess) != len(solution):
        raise ValueError(
            "guess and solution have different lengths: "
            f"{len(guess)} vs {len(solution)}"
        )

    result = [Hint.ABSENT_CHARACTER] * len(guess)
    used = [False] * len(solution)

    for pos, (character, target) in enumerate(zip(guess, solution)):
        if character == target:
            result[pos] = Hint.CORRECT_POSITION
            used[pos] = True

    for pos, character in enumerate(guess):
        if result[pos] != Hint.ABSENT_CHARACTER:
            continue
        for spos, target in enumerate(solution):
            if not used[spos] and character == target:
                result[pos] = Hint.WRONG_POSITION
                used[spos] = True
                break

    return Feedback(result)


class Game:
    """One game: a hidden solution, a reader of guesses and an attempt limit."""

    def __init__(self, player_input: TextIO, solution: str, max_attempts: int) -> None:
        self.reader = player_input
        self.solution = _to_upper(solution)
        self.max_attempts = max_attempts

    @classmethod
    def from_corpus(
        cls, player_input: TextIO, corpus: Sequence[str], max_attempts: int
    ) -> Game:
        """Start a game whose solution is picked at random from ``corpus``."""
        if not corpus:
            raise CorpusEmptyError()
        return cls(player_input, pick_word(corpus), max_attempts)

    def play(self) -> bool:
        """Run the game to its end; return True if the player found the word."""
        print("Welcome to Gordle !")

        for attempt in range(1, self.max_attempts + 1):
            guess = self.ask()
            print(compute_feedback(guess, self.solution))

            if guess == self.solution:
                print(
                    f"🎉 You won! You found it in {attempt} guess(es)!  "
                    f"The word was: {self.solution}."
                )
                return True
            print(f"Incorrect solution {guess} in attempt {attempt}")

        print(f"You have lost, the solution was: {self.solution}")
        return False

    def validate_guess(self, guess: str) -> None:
        """Raise InvalidWordLengthError unless ``guess`` fits the solution."""
        if len(guess) != len(self.solution):
            raise InvalidWordLengthError(len(self.solution), len(guess))

    def ask(self) -> str:
        """Read lines until one is a valid guess, and return it upper-cased."""
        print(f"Enter a {len(self.solution)}-character guess:")
        while True:
            line = self.reader.readline()
            if line == "":
                print("Gordle failed to read your guess: EOF", file=sys.stderr)
                raise EOFError("no more input to read a guess from")

            guess = _to_upper(line.rstrip("\n").rstrip("\r"))
            try:
                self.validate_guess(guess)
            except InvalidWordLengthError as err:
                print(
                    "Your attempt is invalid with Gordle's solution! "
                    f"Expected {err.expected} characters, got {err.got}.",
                    file=sys.stderr,
                )
                continue
            return guess


def main(argv: Sequence[str] | None = None) -> int:
    """Play a game against a word picked from a corpus file."""
    parser = argparse.ArgumentParser(description="Guess the hidden word.")
    parser.add_argument("corpus", nargs="?", default=DEFAULT_CORPUS)
    args = parser.parse_args(argv)

    try:
        corpus = read_corpus(args.corpus)
        game = Game.from_corpus(sys.stdin, corpus, MAX_ATTEMPTS)
    except CorpusError as err:
        print(f"unable to start game: {err}", file=sys.stderr)
        return 1

    try:
        game.play()
    except EOFError:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())