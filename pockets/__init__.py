"""Small console programs: a greeter, a common-books finder, a levelled logger, money parsing and a word game."""

__version__ = "0.1.0"