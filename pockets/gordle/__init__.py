"""A word-guessing game with per-letter hints, played on a text stream."""