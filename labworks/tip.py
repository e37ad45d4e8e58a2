"""Victory cheers and a 20% tip calculator."""

from __future__ import annotations

THE_BILL = 272
TIP_RATE = 0.2


def victory(n: int) -> list[str]:
    """Return ``n`` victory cheers, one per line."""
    return ["VICTORY!"] * n


def tip(amount: float) -> str:
    """Return a 20% tip on ``amount`` formatted as dollars and cents."""
    return f"${amount * TIP_RATE:.2f}"


def main(argv: list[str] | None = None) -> int:
    """Cheer three times, then print the tip on the standard bill."""
    for line in victory(3):
        print(line)
    print(tip(THE_BILL))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())