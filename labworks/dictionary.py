"""Word dictionaries held as a sorted array and as a letter trie."""

from __future__ import annotations

import argparse
import bisect
import time
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path

MAX_NUM_WORDS = 450000
MAX_WORD_LEN = 45
NUM_LETTERS = 26
ALPHA_START = ord("a")
ROOT_LETTER = "*"
DEFAULT_WORDLIST = "wordlist.txt"


class DictArray:
    """A dictionary kept as an alphabetised list, searched by bisection."""

    def __init__(self, words: Iterable[str] = (), capacity: int = MAX_NUM_WORDS) -> None:
        self.capacity = capacity
        self._words: list[str] = []
        for word in words:
            self.add(word)

    def add(self, word: str) -> bool:
        """Add ``word``; return False if it was already present.

        Raise OverflowError if the dictionary is full.
        """
        position = bisect.bisect_left(self._words, word)
        if position < len(self._words) and self._words[position] == word:
            return False
        if len(self._words) >= self.capacity:
            raise OverflowError("dictionary array is full")
        self._words.insert(position, word)
        return True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        position = bisect.bisect_left(self._words, word)
        return position < len(self._words) and self._words[position] == word

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))


@dataclass
class TrieNode:
    """One letter of a trie, marked when a word ends here."""

    letter: str
    is_word: bool = False
    children: dict[str, TrieNode] = field(default_factory=dict)


def _check_letter(letter: str) -> None:
    if not ALPHA_START <= ord(letter) < ALPHA_START + NUM_LETTERS:
        raise ValueError(f"letter {letter!r} is not between 'a' and 'z'")


class DictTrie:
    """A dictionary of lower-case words stored letter by letter."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.root = TrieNode(ROOT_LETTER)
        for word in words:
            self.add(word)

    def add(self, word: str) -> bool:
        """Add ``word``; return False if it was already present.

        Raise ValueError for an empty word or one with letters outside a-z.
        """
        if not word:
            raise ValueError("cannot add an empty word")
        for letter in word:
            _check_letter(letter)
        node = self.root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                child = node.children[letter] = TrieNode(letter)
            node = child
        if node.is_word:
            return False
        node.is_word = True
        return True

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str) or not word:
            return False
        node = self.root
        for letter in word:
            child = node.children.get(letter)
            if child is None:
                return False
            node = child
        return node.is_word

    def words(self) -> Iterator[str]:
        """Yield every stored word in alphabetical order."""
        stack: list[tuple[TrieNode, str]] = [(self.root, "")]
        while stack:
            node, prefix = stack.pop()
            if node.is_word:
                yield prefix
            for letter in sorted(node.children, reverse=True):
                stack.append((node.children[letter], prefix + letter))


def _read_words(path: str | Path) -> Iterator[str]:
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield from line.split()


def load_dictionary_array(path: str | Path) -> DictArray:
    """Return a DictArray holding every whitespace-separated word in ``path``."""
    return DictArray(_read_words(path))


def load_dictionary_trie(path: str | Path) -> DictTrie:
    """Return a DictTrie holding every whitespace-separated word in ``path``."""
    return DictTrie(_read_words(path))


def _describe(seconds: float) -> str:
    msec = int(seconds * 1000)
    return f"{msec // 1000} seconds {msec % 1000} milliseconds"


def benchmark(path: str | Path) -> dict[str, float]:
    """Time loading ``path`` into each dictionary; print and return the seconds."""
    start = time.perf_counter()
    load_dictionary_array(path)
    array_seconds = time.perf_counter() - start
    print(f"Time taken to load array: {_describe(array_seconds)}")

    start = time.perf_counter()
    load_dictionary_trie(path)
    trie_seconds = time.perf_counter() - start
    print(f"Time taken to load trie: {_describe(trie_seconds)}")
    return {"array": array_seconds, "trie": trie_seconds}


def main(argv: list[str] | None = None) -> int:
    """Benchmark loading a word list into both dictionary forms."""
    parser = argparse.ArgumentParser(description="Time loading a word list.")
    parser.add_argument("wordlist", nargs="?", default=DEFAULT_WORDLIST)
    args = parser.parse_args(argv)
    try:
        benchmark(args.wordlist)
    except OSError as error:
        print(f"File could not be opened: {error}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())