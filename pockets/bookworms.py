"""Find the books that several bookworms have on their shelves."""

from __future__ import annotations

import argparse
import json
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TextIO

DEFAULT_PATH = "testdata/bookworms.json"


@dataclass(frozen=True, order=True)
class Book:
    """A book; ordering is by author, then title."""

    author: str = ""
    title: str = ""


@dataclass
class Bookworm:
    """A reader and the books on their shelf."""

    name: str = ""
    books: list[Book] = field(default_factory=list)


def books_count(bookworms: Iterable[Bookworm]) -> Counter[Book]:
    """Count how many times each book appears across all shelves."""
    return Counter(book for bookworm in bookworms for book in bookworm.books)


def sort_books(books: list[Book]) -> list[Book]:
    """Sort ``books`` in place by author then title and return the list."""
    books.sort()
    return books


def find_common_books(bookworms: Iterable[Bookworm]) -> list[Book]:
    """Return, sorted, the books found on more than one shelf."""
    common = [book for book, count in books_count(bookworms).items() if count > 1]
    return sort_books(common)


def _string_field(data: dict, key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _object(value: object, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{what} must be an object, got {type(value).__name__}")
    return value


def _list(value: object, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{what} must be an array, got {type(value).__name__}")
    return value


def _parse_book(value: object) -> Book:
    data = _object(value, "book")
    return Book(author=_string_field(data, "author"), title=_string_field(data, "title"))


def _parse_bookworm(value: object) -> Bookworm:
    data = _object(value, "bookworm")
    books = [_parse_book(item) for item in _list(data.get("books"), "books")]
    return Bookworm(name=_string_field(data, "name"), books=books)


def load_bookworms(path: str) -> list[Bookworm]:
    """Read a JSON list of bookworms from ``path``.

    Raises OSError if the file cannot be read and ValueError if its content
    is not a valid list of bookworms.
    """
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    return [_parse_bookworm(item) for item in _list(data, "bookworms")]


def display_books(books: Iterable[Book], out: TextIO | None = None) -> None:
    """Write one line per book: ``- <title> by <author>``."""
    stream = sys.stdout if out is None else out
    for book in books:
        print("-", book.title, "by", book.author, file=stream)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the books shared by the bookworms listed in a JSON file."""
    parser = argparse.ArgumentParser(description="List books shared by bookworms.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    try:
        bookworms = load_bookworms(args.path)
    except (OSError, ValueError) as err:
        print(f"failed to load bookworms: {err}", file=sys.stderr)
        return 1

    print("Here are the common books:")
    display_books(find_common_books(bookworms))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())