"""Greet the world in one of a handful of languages."""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence

PHRASEBOOK: dict[str, str] = {
    "el": "Χαίρετε Κόσμε",  # Greek
    "en": "Hello world",  # English
    "fr": "Bonjour le monde",  # French
    "he": "שלום עולם",  # Hebrew
    "ur": "ہیلو دنیا",  # Urdu
    "vi": "Xin chào Thế Giới",  # Vietnamese
}


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def greet(lang: str) -> str:
    """Return the greeting for ``lang``, or a message saying it is unsupported."""
    try:
        return PHRASEBOOK[lang]
    except KeyError:
        return f"unsupported language: {_quote(lang)}"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the greeting for the language chosen on the command line."""
    parser = argparse.ArgumentParser(description="Print a greeting.")
    parser.add_argument(
        "-lang",
        "--lang",
        dest="lang",
        default="en",
        help="The required language, e.g. en, ur....",
    )
    args = parser.parse_args(argv)
    print(greet(args.lang))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())