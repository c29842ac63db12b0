"""Conversion of supported input representations to a feature matrix."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple

import numpy as np
import scipy.sparse as sp

from .dataframe import is_arrow_compatible, numeric_columns, to_polars


class LabeledPoint(NamedTuple):
    """A labeled training example.

    Attributes
    ----------
    label : float
        Response value.
    features : ndarray or scipy.sparse matrix
        Feature vector (1-D array, or a sparse matrix with one row).
    offset : float
        Offset added to the linear predictor.
    weight : float
        Observation weight.
    """

    label: float
    features: Any
    offset: float = 0.0
    weight: float = 1.0


def to_feature_matrix(data, feature_cols=None, label_col=None):
    """Convert supported input data to a single feature matrix.

    Parameters
    ----------
    data : ndarray, scipy.sparse matrix, sequence or DataFrame
        Input data. One of

        - a 2-D NumPy array or SciPy sparse matrix/array,
        - a sequence of :class:`LabeledPoint`,
        - a sequence of 1-D feature vectors,
        - any Arrow-compatible DataFrame (polars, pandas, pyarrow, ...).
    feature_cols : list of str, optional
        DataFrame columns to summarize. Defaults to every numeric column
        except ``label_col``. Ignored for non-tabular input.
    label_col : str, optional
        DataFrame column holding the response, excluded from the default
        feature columns.

    Returns
    -------
    ndarray of shape (n, k) or scipy.sparse.csr_matrix
        Float64 feature matrix. Sparse input stays sparse.

    Raises
    ------
    TypeError
        If ``data`` is not a supported representation.
    ValueError
        If the data cannot form a 2-D matrix or requested columns are
        missing or non-numeric.
    """
    if sp.issparse(data):
        if data.ndim != 2:
            raise ValueError(f"Sparse input must be 2-dimensional, got {data.ndim} dimensions.")
        return sp.csr_matrix(data, dtype=np.float64)

    if isinstance(data, np.ndarray):
        if data.ndim != 2:
            raise ValueError(f"Feature matrix must be 2-dimensional, got {data.ndim} dimensions.")
        return np.asarray(data, dtype=np.float64)

    if is_arrow_compatible(data):
        return _frame_to_matrix(data, feature_cols, label_col)

    if isinstance(data, Sequence) and not isinstance(data, str):
        return _rows_to_matrix(data)

    raise TypeError(f"Unsupported input type for feature statistics: {type(data).__name__}")


def _frame_to_matrix(data, feature_cols, label_col):
    df = to_polars(data)

    if feature_cols is None:
        feature_cols = numeric_columns(df, exclude=[label_col] if label_col else None)
        if not feature_cols:
            raise ValueError("DataFrame has no numeric feature columns.")
    else:
        missing = [c for c in feature_cols if c not in df.columns]
        if missing:
            raise ValueError(f"Columns not found in DataFrame: {missing}")
        non_numeric = [c for c in feature_cols if not df.schema[c].is_numeric()]
        if non_numeric:
            raise ValueError(f"Feature columns must be numeric: {non_numeric}")

    return df.select(feature_cols).to_numpy().astype(np.float64)


def _rows_to_matrix(rows):
    if len(rows) == 0:
        raise ValueError("Cannot build a feature matrix from an empty sequence; pass a (0, k) array instead.")

    vectors = [row.features if isinstance(row, LabeledPoint) else row for row in rows]

    if any(sp.issparse(v) for v in vectors):
        blocks = [sp.csr_matrix(v, dtype=np.float64).reshape(1, -1) for v in vectors]
        widths = {b.shape[1] for b in blocks}
        if len(widths) != 1:
            raise ValueError(f"All feature vectors must have the same length, got lengths {sorted(widths)}.")
        return sp.vstack(blocks, format="csr")

    arrays = [np.asarray(v, dtype=np.float64) for v in vectors]
    if any(a.ndim != 1 for a in arrays):
        raise ValueError("Each feature vector must be 1-dimensional.")
    lengths = {a.shape[0] for a in arrays}
    if len(lengths) != 1:
        raise ValueError(f"All feature vectors must have the same length, got lengths {sorted(lengths)}.")
    return np.vstack(arrays)
