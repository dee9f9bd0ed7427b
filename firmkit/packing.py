"""Packing and unpacking little-endian fields, and a fixed-width customer record."""

from __future__ import annotations

import struct
from dataclasses import dataclass, fields

_UNPACKED = struct.Struct("<IBH")
_PACKED = struct.Struct("<IBHI")


@dataclass(frozen=True)
class PackedMessage:
    """Fields read out of an 11-byte little-endian message."""

    word1: int
    word2: int
    byte: int
    hword1: int


_CUSTOMER_LIMITS = {
    "last_name": 14,
    "first_name": 14,
    "phone_number": 10,
    "address": 49,
    "city": 14,
    "state": 2,
    "zip_code": 5,
}


@dataclass
class Customer:
    """A customer record whose text fields have fixed maximum lengths."""

    last_name: str
    first_name: str
    customer_number: int
    phone_number: str
    address: str
    city: str
    state: str
    zip_code: str

    def __post_init__(self) -> None:
        for name, limit in _CUSTOMER_LIMITS.items():
            if len(getattr(self, name)) > limit:
                raise ValueError(f"{name} must be at most {limit} characters")


def unpack_bytes(word: int, byte: int, hword: int) -> bytes:
    """Lay out the low 32 bits of *word*, *byte* and *hword* as 7 little-endian bytes."""
    return _UNPACKED.pack(word & 0xFFFFFFFF, byte & 0xFF, hword & 0xFFFF)


def pack_bytes(data: bytes | bytearray) -> PackedMessage:
    """Read an 11-byte message: word1 (0-3), byte (4), hword1 (5-6), word2 (7-10)."""
    if len(data) != _PACKED.size:
        raise ValueError(f"message must be {_PACKED.size} bytes, got {len(data)}")
    word1, byte, hword1, word2 = _PACKED.unpack(bytes(data))
    return PackedMessage(word1=word1, word2=word2, byte=byte, hword1=hword1)


def format_reversed_hex(data: bytes | bytearray) -> str:
    """Concatenate the unpadded upper-case hex of each byte, last byte first."""
    return "".join(f"{value:X}" for value in reversed(data))


def customer_report(customer: Customer) -> str:
    """List every field of *customer* twice, labelled a) onwards."""
    values = [getattr(customer, field.name) for field in fields(customer)]
    doubled = [value for value in values for _ in range(2)]
    return "\n".join(
        f"{chr(ord('a') + position)}) {value}" for position, value in enumerate(doubled)
    )


def main(argv: list[str] | None = None) -> int:
    """Print a customer report and the packing examples."""
    customer = Customer(
        last_name="Last",
        first_name="First",
        customer_number=16,
        phone_number="1234567890",
        address="Fake St",
        city="City",
        state="St",
        zip_code="ZIP",
    )
    print(customer_report(customer))

    print(format_reversed_hex(unpack_bytes(0x1011121356657887, 0x22, 0x3883)))

    message = pack_bytes(bytes(range(1, 12)))
    print(f"word1 = {message.word1:X}")
    print(f"word2 = {message.word2:X}")
    print(f"byte = {message.byte:X}")
    print(f"hword1 = {message.hword1:X}")
    return 0