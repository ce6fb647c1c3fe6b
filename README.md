# pockets

A handful of small console programs and the modules behind them:

- `pockets.hello` – greets the world in one of several languages.
- `pockets.bookworms` – loads readers and their shelves from JSON and lists
  the books that more than one reader owns.
- `pockets.pocketlog` – a tiny levelled logger (debug, info, error) with
  message options such as a level prefix or a timestamp.
- `pockets.logdemo` – a short demonstration of the logger.
- `pockets.money` – parsing of decimal quantities into integer subunits and a
  precision, with a ceiling of 10^12.
- `pockets.gordle` – a word-guessing game played on the terminal.

No third-party libraries are needed.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Commands

### Greeting

```
pockets-hello
pockets-hello --lang fr
pockets-hello -lang vi
```

Supported languages are `el`, `en`, `fr`, `he`, `ur` and `vi`; English is the
default. Any other code prints `unsupported language: "<code>"`.

### Common books

```
pockets-bookworms
pockets-bookworms path/to/bookworms.json
```

Without an argument it reads `testdata/bookworms.json` from the current
directory. The file holds a list of readers, each with a `name` and a list of
`books` (`author`, `title`):

```json
[
  {"name": "Fadi", "books": [{"author": "Margaret Atwood", "title": "The Handmaid's Tale"}]},
  {"name": "Peggy", "books": [{"author": "Margaret Atwood", "title": "The Handmaid's Tale"}]}
]
```

It prints `Here are the common books:` followed by one line
`- <title> by <author>` for each book found on more than one shelf, sorted by
author, then title. If the file cannot be read or is not such a list, it
prints `failed to load bookworms: ...` to standard error and exits with
status 1.

### Logger demo

```
pockets-logdemo
```

Writes a few messages through a debug-level logger to standard output, each
prefixed with its level, such as `[INFO]` or `[ERROR]`.

### Gordle

```
pockets-gordle
pockets-gordle path/to/words.txt
```

Picks a word at random from a file of whitespace-separated words
(`corpus/english.txt` in the current directory by default) and gives you six
attempts to find it. Guesses are read one per line and upper-cased; a line of
the wrong length is rejected with a message and you are asked again. After
each guess a row of hints is shown: 💚 for a letter in the right place, 🟡 for
a letter in the word but elsewhere, ⬛ for a letter not in the word. The
command exits with status 1 if the corpus cannot be read or is empty, or if
input ends before the game does.

## Library use

```python
from pockets.pocketlog import Level, Logger, add_prefix_based_on_level, add_date

log = Logger(Level.INFO, message_options=[add_prefix_based_on_level()])
log.infof("processed %d items", 3)   # [INFO] processed 3 items
log.debugf("not shown")
```

`Logger(threshold, output=None, message_options=None)` writes to standard
output unless given another text stream. Message options are applied in
order; `add_date()` prefixes each message with the current RFC 3339 time.

```python
from pockets.bookworms import Book, Bookworm, books_count, find_common_books

shelves = [
    Bookworm("Fadi", [Book("Margaret Atwood", "The Handmaid's Tale")]),
    Bookworm("Peggy", [Book("Margaret Atwood", "The Handmaid's Tale")]),
]
find_common_books(shelves)   # [Book(author='Margaret Atwood', title="The Handmaid's Tale")]
```

`load_bookworms(path)` reads the JSON file, raising `OSError` or `ValueError`.

```python
from pockets.money import parse_decimal

d = parse_decimal("1.52")    # Decimal(subunits=152, precision=2)
d.simplify()                 # removes trailing zeros from the subunits
```

`parse_decimal` raises `InvalidDecimalError` for text that is not a number and
`TooLargeError` above 10^12; both derive from `MoneyError` and `ValueError`.

```python
import io
from pockets.gordle.game import Game, compute_feedback
from pockets.gordle.corpus import read_corpus, pick_word

print(compute_feedback("HLLEO", "HELLO"))   # 💚🟡💚🟡💚

game = Game(io.StringIO("hello\n"), "hello", 6)
game.play()                                  # True
```

`Game.from_corpus(player_input, corpus, max_attempts)` picks the solution at
random; `read_corpus` raises `CorpusError`, or `CorpusEmptyError` for an empty
file.

## What it does not do

`pockets.money` defines `Currency` and `Amount`, but `convert(amount, to)`
performs no conversion: it has no exchange rates and always returns an empty
`Amount`.