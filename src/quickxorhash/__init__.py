"""
QuickXorHash, the OneDrive / SharePoint content checksum, for Python byte streams and columnar data.
"""

__version__ = "0.1.0"

from .accumulator import QuickXorDigest, QuickXorHash, quick_xor_hash, quick_xor_hash_bytes
from .files import hash_file
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "QuickXorDigest",
    "QuickXorHash",
    "quick_xor_hash",
    "quick_xor_hash_bytes",
    "hash_file",
    "hash_arrow_array",
    "hash_pandas_series",
    "hash_polars_series",
]
