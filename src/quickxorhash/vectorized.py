from __future__ import annotations

from typing import Any, Optional

from .accumulator import quick_xor_hash_bytes


def _hex_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.encode("utf-8")
    return quick_xor_hash_bytes(value).hexdigest()


def hash_pandas_series(series: Any):
    """
    Hash a pandas Series of bytes/str values into a Series of hex digests.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    def _missing(val) -> bool:
        return not isinstance(val, (bytes, bytearray, memoryview, str)) and bool(pd.isna(val))

    hashes = [None if _missing(val) else _hex_or_none(val) for val in series]
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="object")


def hash_arrow_array(array: Any):
    """
    Hash a pyarrow Array (or values coercible to one) into a string Array of hex digests.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    hashes = [
        _hex_or_none(val.as_py() if hasattr(val, "as_py") else val)
        for val in arr
    ]
    return pa.array(hashes, type=pa.string())


def hash_polars_series(series: Any):
    """
    Hash a polars Series into a Utf8 Series of hex digests.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    hashes = [_hex_or_none(val) for val in ser]
    name = getattr(ser, "name", None) or "quickxorhash"
    return pl.Series(name=name, values=hashes, dtype=pl.Utf8)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
