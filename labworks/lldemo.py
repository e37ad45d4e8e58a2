"""A short walk through the linked list: fill, print, sort, pop and print again."""

from __future__ import annotations

from dataclasses import dataclass

from labworks.linkedlist import LinkedList

NUM_ITEMS = 15
THING_NAME = "Foobar"


@dataclass
class Thing:
    """A numbered, named payload."""

    number: int
    name: str

    def __str__(self) -> str:
        return f"[{self.name}, {self.number}]"


def compare_things(a: Thing, b: Thing) -> int:
    """Three-way comparison of two things by number."""
    if a.number == b.number:
        return 0
    return -1 if a.number < b.number else 1


def _walk(linked: LinkedList) -> list[str]:
    # Stops before the last element, as the cursor only prints while more follow.
    lines = []
    cursor = linked.iterator()
    while cursor.has_next():
        lines.append(str(cursor.payload()))
        cursor.advance()
    return lines


def run_demo() -> list[str]:
    """Run the demonstration and return the lines it produces."""
    lines = ["Creating a new LinkedList"]
    linked = LinkedList()
    for number in range(NUM_ITEMS):
        linked.insert(Thing(number, THING_NAME))
        if len(linked) != number + 1:
            raise RuntimeError("list size did not grow by one")

    lines.extend(_walk(linked))

    # Items went in at the head, so the list starts out in descending order.
    linked.sort(True, compare_things)
    popped = linked.pop()
    if popped.number != 0:
        raise RuntimeError("smallest thing was not at the head after sorting")

    lines.extend(_walk(linked))
    lines.append("done. ")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the demonstration."""
    for line in run_demo():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())