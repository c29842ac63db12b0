"""One-pass column summaries over dense and sparse feature matrices."""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
import scipy.sparse as sp


class ColumnSummary(NamedTuple):
    """Raw per-column statistics over a feature matrix.

    All vectors have one entry per feature (column).

    Attributes
    ----------
    count : int
        Number of samples (rows) observed.
    mean : ndarray
        Column means.
    variance : ndarray
        Unbiased column variances (``n - 1`` degrees of freedom).
    num_nonzeros : ndarray
        Number of non-zero entries in each column.
    max : ndarray
        Column maxima.
    min : ndarray
        Column minima.
    norm_l1 : ndarray
        Column L1 norms (sum of absolute values).
    norm_l2 : ndarray
        Column L2 norms (square root of the sum of squares).
    """

    count: int
    mean: np.ndarray
    variance: np.ndarray
    num_nonzeros: np.ndarray
    max: np.ndarray
    min: np.ndarray
    norm_l1: np.ndarray
    norm_l2: np.ndarray


class PartialSummary(NamedTuple):
    """Mergeable sufficient statistics for one partition of rows.

    Attributes
    ----------
    count : int
        Number of rows in the partition.
    mean : ndarray
        Column means of the partition.
    m2 : ndarray
        Sum of squared deviations from the partition mean.
    num_nonzeros : ndarray
        Non-zero counts per column.
    max : ndarray
        Column maxima (``-inf`` for an empty partition).
    min : ndarray
        Column minima (``+inf`` for an empty partition).
    sum_abs : ndarray
        Sum of absolute values per column.
    sum_sq : ndarray
        Sum of squares per column.
    """

    count: int
    mean: np.ndarray
    m2: np.ndarray
    num_nonzeros: np.ndarray
    max: np.ndarray
    min: np.ndarray
    sum_abs: np.ndarray
    sum_sq: np.ndarray


def empty_partial_summary(n_features):
    """Return the identity element of :func:`merge_partial_summaries`."""
    zeros = np.zeros(n_features, dtype=np.float64)
    return PartialSummary(
        count=0,
        mean=zeros.copy(),
        m2=zeros.copy(),
        num_nonzeros=zeros.copy(),
        max=np.full(n_features, -np.inf),
        min=np.full(n_features, np.inf),
        sum_abs=zeros.copy(),
        sum_sq=zeros,
    )


def partition_summary(X):
    r"""Compute mergeable column statistics for one block of rows.

    The mean and the sum of squared deviations :math:`M_2` are computed
    around the block mean so that blocks can later be combined exactly with
    :func:`merge_partial_summaries`. For sparse input the implicit zeros are
    treated as observed values.

    Parameters
    ----------
    X : ndarray of shape (n_local, k) or scipy.sparse matrix
        Feature matrix for this block.

    Returns
    -------
    PartialSummary
        Sufficient statistics of the block.
    """
    n, k = X.shape
    if n == 0:
        return empty_partial_summary(k)

    if sp.issparse(X):
        return _sparse_partition_summary(sp.csr_matrix(X, dtype=np.float64), n)

    X = np.asarray(X, dtype=np.float64)
    mean = X.mean(axis=0)
    return PartialSummary(
        count=n,
        mean=mean,
        m2=((X - mean) ** 2).sum(axis=0),
        num_nonzeros=np.count_nonzero(X, axis=0).astype(np.float64),
        max=X.max(axis=0),
        min=X.min(axis=0),
        sum_abs=np.abs(X).sum(axis=0),
        sum_sq=(X * X).sum(axis=0),
    )


def _sparse_partition_summary(X, n):
    """Partition summary for a CSR matrix without densifying it."""
    X = X.copy()
    X.sum_duplicates()
    X.eliminate_zeros()

    k = X.shape[1]
    col_sum = np.asarray(X.sum(axis=0)).ravel()
    sum_sq = np.asarray(X.multiply(X).sum(axis=0)).ravel()
    mean = col_sum / n
    nnz = np.bincount(X.indices, minlength=k).astype(np.float64)

    # Stored entries deviate by x - mean, each implicit zero by -mean.
    dev = X.data - mean[X.indices]
    m2 = np.bincount(X.indices, weights=dev * dev, minlength=k) + (n - nnz) * mean * mean

    return PartialSummary(
        count=n,
        mean=mean,
        m2=m2,
        num_nonzeros=nnz,
        max=X.max(axis=0).toarray().ravel().astype(np.float64),
        min=X.min(axis=0).toarray().ravel().astype(np.float64),
        sum_abs=np.asarray(abs(X).sum(axis=0)).ravel(),
        sum_sq=sum_sq,
    )


def merge_partial_summaries(a, b):
    r"""Combine two partial summaries into the summary of their union.

    Uses the pairwise update of Chan, Golub and LeVeque for the mean and
    :math:`M_2`:

    .. math::

        \delta = \bar{x}_b - \bar{x}_a, \quad
        M_2 = M_{2,a} + M_{2,b} + \delta^2 \frac{n_a n_b}{n_a + n_b}.

    Parameters
    ----------
    a, b : PartialSummary or None
        Summaries to merge. ``None`` operands are skipped.

    Returns
    -------
    PartialSummary or None
        The merged summary.
    """
    if a is None:
        return b
    if b is None:
        return a
    if a.count == 0:
        return b
    if b.count == 0:
        return a

    n = a.count + b.count
    delta = b.mean - a.mean
    return PartialSummary(
        count=n,
        mean=a.mean + delta * (b.count / n),
        m2=np.maximum(a.m2 + b.m2 + delta * delta * (a.count * b.count / n), 0.0),
        num_nonzeros=a.num_nonzeros + b.num_nonzeros,
        max=np.maximum(a.max, b.max),
        min=np.minimum(a.min, b.min),
        sum_abs=a.sum_abs + b.sum_abs,
        sum_sq=a.sum_sq + b.sum_sq,
    )


def reduce_partial_summaries(partials):
    """Driver-side merge of a list of partial summaries.

    Parameters
    ----------
    partials : iterable of PartialSummary or None
        Collected partition summaries.

    Returns
    -------
    PartialSummary or None
        The merged summary, or ``None`` if nothing was collected.
    """
    result = None
    for item in partials:
        result = merge_partial_summaries(result, item)
    return result


def finalize_summary(partial):
    """Turn merged sufficient statistics into a :class:`ColumnSummary`.

    Variance is unbiased and is zero when fewer than two rows were observed.
    With no rows at all, means are zero and maxima/minima are NaN.

    Parameters
    ----------
    partial : PartialSummary
        Merged statistics over all rows.

    Returns
    -------
    ColumnSummary
        Raw column summary.
    """
    n = partial.count
    if n > 1:
        variance = partial.m2 / (n - 1)
    else:
        variance = np.zeros_like(partial.m2)

    if n > 0:
        col_max, col_min = partial.max, partial.min
    else:
        col_max = np.full_like(partial.max, np.nan)
        col_min = np.full_like(partial.min, np.nan)

    return ColumnSummary(
        count=n,
        mean=partial.mean,
        variance=variance,
        num_nonzeros=partial.num_nonzeros,
        max=col_max,
        min=col_min,
        norm_l1=partial.sum_abs,
        norm_l2=np.sqrt(partial.sum_sq),
    )


def column_summary(X):
    """Compute the raw column summary of a local feature matrix.

    Parameters
    ----------
    X : ndarray of shape (n, k) or scipy.sparse matrix
        Feature matrix.

    Returns
    -------
    ColumnSummary
        Raw column summary.
    """
    return finalize_summary(partition_summary(X))
