"""DataFrame compatibility layer for feature tables."""

from typing import Any

import narwhals as nw
import polars as pl

DataFrame = Any  # Any object implementing __arrow_c_stream__


def is_arrow_compatible(df: Any) -> bool:
    """Return True if ``df`` can be read through the Arrow PyCapsule Interface."""
    return isinstance(df, pl.DataFrame) or hasattr(df, "__arrow_c_stream__")


def to_polars(df: Any) -> pl.DataFrame:
    """Convert any Arrow-compatible DataFrame to polars.

    Parameters
    ----------
    df : Any
        Input DataFrame. Supports any object implementing the Arrow PyCapsule
        Interface (__arrow_c_stream__), including:
        - polars DataFrame
        - pandas DataFrame (2.0+)
        - duckdb results
        - pyarrow Table

    Returns
    -------
    pl.DataFrame
        Polars DataFrame.

    Raises
    ------
    TypeError
        If input doesn't implement __arrow_c_stream__.
    """
    if isinstance(df, pl.DataFrame):
        return df

    if hasattr(df, "__arrow_c_stream__"):
        return nw.from_arrow(df, backend=pl).to_native()

    msg = f"Expected object implementing '__arrow_c_stream__', got: {type(df).__name__}"
    raise TypeError(msg)


def numeric_columns(df: pl.DataFrame, exclude=None) -> list[str]:
    """Return the names of numeric columns of ``df``, skipping ``exclude``."""
    exclude = set(exclude or [])
    return [name for name, dtype in df.schema.items() if dtype.is_numeric() and name not in exclude]
