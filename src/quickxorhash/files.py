from __future__ import annotations

import logging
from os import PathLike
from typing import Optional, Union

from .accumulator import WINDOW_SIZE, QuickXorDigest, QuickXorHash

logger = logging.getLogger(__name__)


def hash_file(path: Union[str, PathLike], chunk_size: Optional[int] = None) -> QuickXorDigest:
    """
    Hash the contents of a file.

    Args:
        path: File to read, opened in binary mode.
        chunk_size: Bytes per read; defaults to 64 windows.

    Returns:
        QuickXorDigest of the file contents.

    Raises:
        OSError: If the file cannot be opened or read
        ValueError: If chunk_size is smaller than 1
    """
    if chunk_size is None:
        chunk_size = WINDOW_SIZE * 64
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    hasher = QuickXorHash()
    with open(path, "rb") as f:
        # Do not read the whole file into memory at once
        while (chunk := f.read(chunk_size)):
            hasher.update(chunk)

    result = QuickXorDigest(hasher.block())
    logger.debug("Hashed %s: %d bytes, %s", path, hasher.length, result.hexdigest())
    return result


__all__ = ["hash_file"]
