from __future__ import annotations

BLOCK_SIZE = 20
BLOCK_BITS = BLOCK_SIZE * 8
_MASK_160 = (1 << BLOCK_BITS) - 1


def _as_block(value) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError("block must be bytes-like")
    block = bytes(value)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be exactly {BLOCK_SIZE} bytes, got {len(block)}")
    return block


def zero() -> bytes:
    return bytes(BLOCK_SIZE)


def rotate_left(block: bytes, bits: int) -> bytes:
    """
    Rotate all 160 bits of a block left by ``bits``.

    Byte 0 is the least significant byte, so bits shifted out of byte ``i``
    land in the low bits of byte ``i + 1`` and the carry out of byte 19
    wraps into byte 0. The shift is taken modulo 160.
    """
    bits %= BLOCK_BITS
    value = int.from_bytes(_as_block(block), byteorder="little")
    value = ((value << bits) | (value >> (BLOCK_BITS - bits))) & _MASK_160
    return value.to_bytes(BLOCK_SIZE, byteorder="little")


def reverse_bytes(block: bytes) -> bytes:
    return _as_block(block)[::-1]


def xor(left: bytes, right: bytes) -> bytes:
    a = int.from_bytes(_as_block(left), byteorder="little")
    b = int.from_bytes(_as_block(right), byteorder="little")
    return (a ^ b).to_bytes(BLOCK_SIZE, byteorder="little")


def from_byte(value: int) -> bytes:
    """Block whose least significant byte is ``value``."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value must be in 0..255, got {value}")
    return bytes([value]) + bytes(BLOCK_SIZE - 1)


def from_length(count: int) -> bytes:
    """
    Length block for a finalised (most-significant-first) block.

    The 64-bit count occupies bytes 0-7 high byte first, so once the
    digest is read in reverse index order it shows up little-endian in
    the last eight digest bytes.
    """
    return (count & 0xFFFFFFFFFFFFFFFF).to_bytes(8, byteorder="big") + bytes(BLOCK_SIZE - 8)


__all__ = [
    "BLOCK_SIZE",
    "BLOCK_BITS",
    "zero",
    "rotate_left",
    "reverse_bytes",
    "xor",
    "from_byte",
    "from_length",
]
