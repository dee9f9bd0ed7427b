"""Helpers for reading and changing the bits of 8-bit values."""

from __future__ import annotations

_BYTE_MASK = 0xFF
_BITS = 8


def _u8(value: int) -> int:
    """Reduce *value* to an unsigned 8-bit quantity."""
    return value & _BYTE_MASK


def to_binary(byte: int) -> str:
    """Return the 8-digit binary representation of *byte*, most significant bit first."""
    return format(_u8(byte), "08b")


def shift_right(byte: int, shift: int) -> int:
    """Shift *byte* right by *shift* bits; shifts of 8 or more leave it unchanged."""
    byte, shift = _u8(byte), _u8(shift)
    if shift >= _BITS:
        return byte
    return byte >> shift


def shift_left(byte: int, shift: int) -> int:
    """Shift *byte* left by *shift* bits within 8 bits; shifts of 8 or more leave it unchanged."""
    byte, shift = _u8(byte), _u8(shift)
    if shift >= _BITS:
        return byte
    return _u8(byte << shift)


def set_mask(byte: int, mask: int) -> int:
    """Set every bit of *byte* that is set in *mask*."""
    return _u8(byte) | _u8(mask)


def clear_mask(byte: int, mask: int) -> int:
    """Clear every bit of *byte* that is set in *mask*."""
    return _u8(byte) & _u8(~mask)


def toggle_mask(byte: int, mask: int) -> int:
    """Invert every bit of *byte* that is set in *mask*."""
    return _u8(byte) ^ _u8(mask)


def set_bit(byte: int, bit: int) -> int:
    """Set bit number *bit* of *byte*; bit numbers above 7 leave it unchanged."""
    byte, bit = _u8(byte), _u8(bit)
    if bit >= _BITS:
        return byte
    return byte | (1 << bit)


def clear_bit(byte: int, bit: int) -> int:
    """Clear bit number *bit* of *byte*; bit numbers above 7 leave it unchanged."""
    byte, bit = _u8(byte), _u8(bit)
    if bit >= _BITS:
        return byte
    return byte & _u8(~(1 << bit))


def toggle_bit(byte: int, bit: int) -> int:
    """Invert bit number *bit* of *byte*; bit numbers above 7 leave it unchanged."""
    byte, bit = _u8(byte), _u8(bit)
    if bit >= _BITS:
        return byte
    return byte ^ (1 << bit)


def get_bit(byte: int, bit: int) -> int:
    """Return bit number *bit* of *byte* as 0 or 1.

    For bit numbers above 7 the byte itself is returned.
    """
    byte, bit = _u8(byte), _u8(bit)
    if bit >= _BITS:
        return byte
    return (byte >> bit) & 1


def main(argv: list[str] | None = None) -> int:
    """Print a walk through the bit helpers."""
    print("shift right 0xf0 by 8, then by 4")
    print(to_binary(shift_right(0xF0, 8)))
    print(to_binary(shift_right(0xF0, 4)))

    print("\nshift left 0x0f by 8, then by 3")
    print(to_binary(shift_left(0x0F, 8)))
    print(to_binary(shift_left(0x0F, 3)))

    for title, operation, value, mask in (
        ("set mask 0xa0 in byte 0x01", set_mask, 0x01, 0xA0),
        ("clear mask 0x03 in byte 0xff", clear_mask, 0xFF, 0x03),
        ("toggle mask 0x0f in byte 0x16", toggle_mask, 0x16, 0x0F),
    ):
        print(f"\n{title}")
        print(to_binary(value))
        print(to_binary(mask))
        print(to_binary(operation(value, mask)))

    for title, operation, value, bit in (
        ("set bit 3 in byte 0x03", set_bit, 0x03, 3),
        ("clear bit 1 in byte 0x0f", clear_bit, 0x0F, 1),
        ("toggle bit 1 in byte 0x0f", toggle_bit, 0x0F, 1),
        ("get bit 3 in byte 0x0f", get_bit, 0x0F, 3),
    ):
        print(f"\n{title}")
        print(to_binary(value))
        print(to_binary(operation(value, bit)))
    return 0