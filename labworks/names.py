"""Formatting of personal names in several conventional styles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


@dataclass(frozen=True)
class Name:
    """A person's name with an optional middle name."""

    first: str
    last: str
    middle: str | None = None
    age: int = 0


class NameStyle(Enum):
    """Output styles, each selected by a single letter in either case."""

    BIG = "b"
    LAST = "l"
    REG = "r"
    MID = "m"
    SMALL = "s"

    @classmethod
    def parse(cls, style: NameStyle | str) -> NameStyle:
        """Return the style for a style member or a format letter."""
        if isinstance(style, cls):
            return style
        try:
            return cls(str(style).lower())
        except ValueError:
            raise ValueError(f"Invalid format: {style!r}") from None


def _cap(part: str) -> str:
    return part[:1].upper() + part[1:].lower()


def big(name: Name) -> str:
    """Return "First Middle Last", or "First Last" without a middle name."""
    parts = [name.first]
    if name.middle is not None:
        parts.append(name.middle)
    parts.append(name.last)
    return " ".join(_cap(part) for part in parts)


def last(name: Name) -> str:
    """Return "Last, First"."""
    return f"{_cap(name.last)}, {_cap(name.first)}"


def reg(name: Name) -> str:
    """Return "First Last"."""
    return f"{_cap(name.first)} {_cap(name.last)}"


def mid(name: Name) -> str:
    """Return "First M. Last", or "First Last" without a middle name."""
    if name.middle is None:
        return reg(name)
    initial = name.middle[:1].upper()
    return f"{_cap(name.first)} {initial}. {_cap(name.last)}"


def small(name: Name) -> str:
    """Return the first name only."""
    return _cap(name.first)


_FORMATTERS: dict[NameStyle, Callable[[Name], str]] = {
    NameStyle.BIG: big,
    NameStyle.LAST: last,
    NameStyle.REG: reg,
    NameStyle.MID: mid,
    NameStyle.SMALL: small,
}


def fill_name(name: Name, style: NameStyle | str) -> str:
    """Return ``name`` formatted in ``style``; raise ValueError if unknown."""
    return _FORMATTERS[NameStyle.parse(style)](name)


def format_name(name: Name, style: NameStyle | str) -> None:
    """Print ``name`` formatted in ``style``."""
    print(fill_name(name, style))