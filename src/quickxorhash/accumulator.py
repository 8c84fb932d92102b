from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import BinaryIO, List, Optional

from .block import BLOCK_SIZE, from_length, reverse_bytes, rotate_left, xor

BLOCK_COUNT = 8
WINDOW_SIZE = BLOCK_SIZE * BLOCK_COUNT
SHIFT = 11


def _redistribute(folded: bytes) -> List[bytes]:
    """Scatter the 160 folded bytes over eight blocks, byte i going to bit position 11 * i."""
    blocks = [bytearray(BLOCK_SIZE) for _ in range(BLOCK_COUNT)]
    for idx, value in enumerate(folded):
        position = (idx * SHIFT) % WINDOW_SIZE
        blocks[position % BLOCK_COUNT][position // BLOCK_COUNT] = value
    return [bytes(b) for b in blocks]


def _finalize(folded: bytes, count: int) -> bytes:
    blocks = _redistribute(folded)
    result = blocks[0]
    for shift in range(1, BLOCK_COUNT):
        result = xor(result, rotate_left(blocks[shift], shift))
    return xor(reverse_bytes(result), from_length(count))


@dataclass(frozen=True)
class QuickXorDigest:
    _block: bytes

    def block(self) -> bytes:
        return self._block

    def digest(self) -> bytes:
        return self._block[::-1]

    def hexdigest(self) -> str:
        return self.digest().hex()

    def base64digest(self) -> str:
        return base64.b64encode(self.digest()).decode("ascii")


class QuickXorHash:
    """
    Streaming QuickXorHash with a hashlib-style interface.

    Input is XOR-folded into a 160-byte accumulator at position
    ``length % 160``, so the result depends only on the bytes and their
    total length, never on how they were split across ``update`` calls.
    """

    name = "quickxorhash"
    digest_size = BLOCK_SIZE
    block_size = WINDOW_SIZE

    def __init__(self, data: Optional[bytes] = None):
        self._folded = bytearray(WINDOW_SIZE)
        self._length = 0
        if data is not None:
            self.update(data)

    def copy(self) -> "QuickXorHash":
        dup = self.__class__.__new__(self.__class__)
        dup._folded = bytearray(self._folded)
        dup._length = self._length
        return dup

    def update(self, data: bytes) -> "QuickXorHash":
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")

        raw = memoryview(data).cast("B")
        pos = self._length % WINDOW_SIZE
        offset = 0
        while offset < len(raw):
            take = min(WINDOW_SIZE - pos, len(raw) - offset)
            folded = int.from_bytes(self._folded[pos:pos + take], byteorder="big")
            incoming = int.from_bytes(raw[offset:offset + take], byteorder="big")
            self._folded[pos:pos + take] = (folded ^ incoming).to_bytes(take, byteorder="big")
            offset += take
            pos = 0

        self._length += len(raw)
        return self

    @property
    def length(self) -> int:
        return self._length

    def block(self) -> bytes:
        return _finalize(bytes(self._folded), self._length)

    def digest(self) -> bytes:
        return self.block()[::-1]

    def hexdigest(self) -> str:
        return self.digest().hex()

    def base64digest(self) -> str:
        return base64.b64encode(self.digest()).decode("ascii")


def quick_xor_hash(stream: BinaryIO, chunk_size: int = WINDOW_SIZE) -> QuickXorDigest:
    """
    Hash everything readable from ``stream``.

    Args:
        stream: Object with a ``read(n)`` method returning bytes; an empty
            result marks the end of the stream.
        chunk_size: Number of bytes requested per read.

    Returns:
        QuickXorDigest with block(), digest(), hexdigest() and base64digest().

    Raises:
        ValueError: If chunk_size is smaller than 1
        TypeError: If the stream yields something other than bytes
        BlockingIOError: If a non-blocking stream reports that no data is ready
    """
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    hasher = QuickXorHash()
    while True:
        chunk = stream.read(chunk_size)
        if chunk is None:
            raise BlockingIOError("stream has no data available; non-blocking streams are not supported")
        if chunk == b"":
            break
        hasher.update(chunk)
    return QuickXorDigest(hasher.block())


def quick_xor_hash_bytes(data: bytes) -> QuickXorDigest:
    return QuickXorDigest(QuickXorHash(data).block())


__all__ = [
    "BLOCK_COUNT",
    "WINDOW_SIZE",
    "QuickXorDigest",
    "QuickXorHash",
    "quick_xor_hash",
    "quick_xor_hash_bytes",
]
