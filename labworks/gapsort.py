"""A gap-based compare-and-swap sort that counts its comparisons."""

from __future__ import annotations

import random
from collections.abc import MutableSequence

SMALL_SIZE = 4
MED_SIZE = 128
LARGE_SIZE = 1024
RAND_MAX = 2**31 - 1


def gap_sort(values: MutableSequence) -> int:
    """Rearrange ``values`` in place and return the number of comparisons.

    The comparison count depends only on the length of ``values``. The
    gap schedule is made for lengths that are powers of two; other lengths
    may step past the end of the sequence and raise ``IndexError``.
    """
    length = len(values)
    comparisons = 0
    left = length // 2
    while left > 0:
        q = length // 2
        r = 0
        gap = left
        while q >= left:
            # The bound moves with the gap, so the position is tracked by hand.
            i = 0
            while i < length - gap:
                comparisons += 1
                if (i & left) == r:
                    comparisons += 1
                    j = i + gap
                    if values[i] > values[j]:
                        values[i], values[j] = values[j], values[i]
                gap = q - left
                q //= 2
                r = left
                i += 1
        left //= 2
    return comparisons


def _random_values(rng: random.Random, size: int) -> list[int]:
    return [rng.randint(0, RAND_MAX) for _ in range(size)]


def main(argv: list[str] | None = None) -> int:
    """Sort random arrays of three sizes and report the comparison counts."""
    rng = random.Random()

    small = _random_values(rng, SMALL_SIZE)
    print("\nBefore Sorting:")
    for value in small:
        print(value)
    gap_sort(small)
    print("\nAfter Sorting:")
    for value in small:
        print(value)

    small = _random_values(rng, SMALL_SIZE)
    medium = _random_values(rng, MED_SIZE)
    large = _random_values(rng, LARGE_SIZE)
    large_count = gap_sort(large)
    medium_count = gap_sort(medium)
    small_count = gap_sort(small)

    print("\n---------------------\nSORTING:\n---------------------")
    print(f"Large: {LARGE_SIZE} elements {large_count} comparisons")
    print(f"Med: {MED_SIZE} elements {medium_count} comparisons")
    print(f"Small: {SMALL_SIZE} elements {small_count} comparisons")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())