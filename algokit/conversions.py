"""Conversions between binary, decimal and hexadecimal representations."""

from __future__ import annotations

_INT32_MASK = 0xFFFFFFFF
_INT32_SIGN = 0x80000000
_BINARY_DIGITS = frozenset("01")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_HEX_SYMBOLS = "0123456789ABCDEF"


def _to_int32(value: int) -> int:
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN else value


def add_binary_int(a: int, b: int) -> int:
    """Add two 32-bit integers using only XOR, AND and shifts.

    The result wraps around like a signed 32-bit integer.
    """
    a &= _INT32_MASK
    b &= _INT32_MASK
    while b:
        a, b = a ^ b, ((a & b) << 1) & _INT32_MASK
    return _to_int32(a)


def binary_string_to_int(binary: str) -> int:
    """Read a string of bits; every character other than '1' counts as 0."""
    value = 0
    for ch in binary:
        value = (value << 1) | (ch == "1")
    return value


def add_binary_string(a: str, b: str) -> str:
    """Add two binary strings and return the sum as a binary string."""
    total = binary_string_to_int(a) + binary_string_to_int(b)
    return format(total, "b")


def binary_to_int(s: str) -> int:
    """Weigh each digit of ``s`` by its power of two and sum the results.

    Digits other than 0 and 1 are weighed by their face value.
    """
    total = 0
    for exponent, ch in enumerate(reversed(s)):
        if not ("0" <= ch <= "9"):
            raise ValueError(f"invalid digit {ch!r} in {s!r}")
        total += (ord(ch) - ord("0")) * 2**exponent
    return total


def int_to_binary(x: int) -> str:
    """Return the binary digits of a positive integer, without leading zeros."""
    if x <= 0:
        raise ValueError("int_to_binary requires a positive integer")
    return format(x, "b")


def binary_to_decimal(binary: str) -> int:
    """Convert a string of 0s and 1s to its integer value."""
    value = 0
    for ch in binary:
        if ch not in _BINARY_DIGITS:
            raise ValueError(f"invalid binary input: {binary!r}")
        value = (value << 1) | (ch == "1")
    return value


def decimal_to_binary(decimal: int) -> str:
    """Return the 32-bit two's complement bit string of ``decimal``."""
    return format(decimal & _INT32_MASK, "032b")


def hex_to_binary(hex_string: str) -> str:
    """Expand each hexadecimal digit to four bits."""
    bits = []
    for ch in hex_string:
        if ch not in _HEX_DIGITS:
            raise ValueError(f"invalid hexadecimal input: {hex_string!r}")
        bits.append(format(int(ch, 16), "04b"))
    return "".join(bits)


def binary_to_hex(binary: str) -> str:
    """Convert groups of four bits to upper-case hexadecimal digits.

    Leading bits that do not fill a whole group of four are dropped.
    """
    body = binary[len(binary) % 4:]
    return "".join(
        _HEX_SYMBOLS[binary_to_decimal(body[start:start + 4])]
        for start in range(0, len(body), 4)
    )


def hex_to_decimal(hex_string: str) -> int:
    """Convert a hexadecimal string to its integer value."""
    return binary_to_decimal(hex_to_binary(hex_string))


def decimal_to_hex(decimal: int) -> str:
    """Return the eight-digit hexadecimal form of a 32-bit integer."""
    return binary_to_hex(decimal_to_binary(decimal))