"""Bit display, bit toggling and packing of two characters into one word."""

from __future__ import annotations

SHORT_BITS = 16
SHORT_BYTES = SHORT_BITS // 8
_SHORT_MASK = (1 << SHORT_BITS) - 1
_BYTE_MASK = 0xFF


def display_bits(value: int) -> str:
    """Return the low 16 bits of ``value`` as two space-separated bytes."""
    text = format(value & _SHORT_MASK, f"0{SHORT_BITS}b")
    return f"{text[:8]} {text[8:]}"


def _char_code(char: str) -> int:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    code = ord(char)
    if code > _BYTE_MASK:
        raise ValueError(f"character {char!r} does not fit in one byte")
    return code


def pack_characters(a: str, b: str) -> int:
    """Pack two one-byte characters into a 16-bit word, ``a`` in the high byte."""
    return (_char_code(a) << 8) | _char_code(b)


def unpack_characters(packed: int) -> tuple[str, str]:
    """Split a packed word back into its high-byte and low-byte characters."""
    return chr((packed >> 8) & _BYTE_MASK), chr(packed & _BYTE_MASK)


def power2(num: int, power: int) -> int:
    """Return ``num`` multiplied by two to the ``power`` using a shift."""
    if power < 0:
        raise ValueError("power must not be negative")
    return num << power


def toggle_bit(bits: int, which_bit: int) -> int:
    """Return the 16-bit ``bits`` with ``which_bit`` flipped."""
    if not 0 <= which_bit < SHORT_BITS:
        raise ValueError(f"bit index {which_bit} outside 0..{SHORT_BITS - 1}")
    return (bits ^ (1 << which_bit)) & _SHORT_MASK


def get_bit(bits: int, which_bit: int) -> int:
    """Return the value (0 or 1) of ``which_bit`` in ``bits``."""
    if which_bit < 0:
        raise ValueError("bit index must not be negative")
    return (bits >> which_bit) & 1


def _describe(value: int) -> str:
    return f"{chr(value & _BYTE_MASK):>3}{value:>7} = {display_bits(value)}"


def main(argv: list[str] | None = None) -> int:
    """Demonstrate toggling, packing, unpacking and shifting."""
    print(f"An unsigned short int has {SHORT_BYTES} bytes. ")
    x = 0
    for bit in (3, 4, 6, 7, 12):
        x = toggle_bit(x, bit)
    print(_describe(x))
    print(f"Bit 12 = {get_bit(x, 12)} ")
    x = toggle_bit(x, 12)
    print(_describe(x))
    print("\n")
    for char in "Bik":
        print(_describe(ord(char)))

    print("\nUnpacked:")
    print(display_bits(ord("B")))
    print(display_bits(ord("i")))
    packed = pack_characters("B", "i")
    print("\nPacked:")
    print(display_bits(packed))
    first, second = unpack_characters(packed)
    print("\nFirst Letter:")
    print(first)
    print("\nSecond Letter:")
    print(second)

    multiple = power2(2, 2)
    print("\nInteger:")
    print(multiple)
    print("\nBits:")
    print(display_bits(multiple))
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())