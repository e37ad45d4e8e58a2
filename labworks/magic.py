"""Reveal the magic word hidden in the sum of two numbers."""

from __future__ import annotations

FIRST = -889262067
SECOND = 330223330

_WORD_MASK = 0xFFFFFFFF


def magic_word(a: int, b: int) -> str:
    """Return the sum of ``a`` and ``b`` as an upper-case 32-bit hex word."""
    return format((a + b) & _WORD_MASK, "X")


def say_hello(a: int, b: int) -> str:
    """Print the magic word for ``a`` and ``b`` and return the printed line."""
    line = f"The magic word is: {magic_word(a, b)}"
    print(line)
    return line


def main(argv: list[str] | None = None) -> int:
    """Announce the magic word for the built-in pair of numbers."""
    say_hello(FIRST, SECOND)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())