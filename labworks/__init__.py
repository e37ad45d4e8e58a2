"""Small exercises: name formatting, bit tricks, a gap sort, a card game, word dictionaries and a linked list."""

__version__ = "0.1.0"