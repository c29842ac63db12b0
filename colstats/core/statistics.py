"""Feature statistics derived from a raw column summary."""

from __future__ import annotations

import logging
from typing import NamedTuple

import numpy as np
import polars as pl

from .constants import STATISTIC_FIELDS, VARIANCE_FILL_VALUE

log = logging.getLogger("colstats.statistics")


class FeatureDataStatistics(NamedTuple):
    """Statistical summary of a feature dataset.

    Variances are unbiased (``n - 1`` degrees of freedom), except that any
    variance which is NaN, infinite or negative has been reset to 1.0 so that
    downstream scaling never divides by an invalid standard deviation.

    Attributes
    ----------
    count : int
        Number of samples in the dataset.
    mean : ndarray
        Feature means.
    variance : ndarray
        Sanitized feature variances. Every entry is finite and non-negative.
    num_nonzeros : ndarray
        Feature non-zero counts.
    max : ndarray
        Feature maxima.
    min : ndarray
        Feature minima.
    norm_l1 : ndarray
        Feature L1 norms.
    norm_l2 : ndarray
        Feature L2 norms.
    mean_abs : ndarray
        Feature mean absolute values, ``norm_l1 / count``. Equal to
        ``norm_l1`` when ``count`` is zero.
    intercept_index : int, optional
        Index of the intercept feature, if present.
    """

    count: int
    mean: np.ndarray
    variance: np.ndarray
    num_nonzeros: np.ndarray
    max: np.ndarray
    min: np.ndarray
    norm_l1: np.ndarray
    norm_l2: np.ndarray
    mean_abs: np.ndarray
    intercept_index: int | None = None

    @property
    def n_features(self):
        """Number of features summarized."""
        return len(self.mean)

    def to_polars(self):
        """Return the per-feature statistics as a polars DataFrame, one row per feature."""
        columns = {"feature": np.arange(self.n_features)}
        for name in STATISTIC_FIELDS:
            columns[name] = np.asarray(getattr(self, name), dtype=np.float64)
        return pl.DataFrame(columns)


def _scale(count, vector):
    """Divide ``vector`` by ``count``, or return it unchanged when ``count`` is not positive."""
    if count > 0:
        return vector / float(count)
    return vector


def invalid_variance_mask(variance):
    """Return a boolean mask of variances that are NaN, infinite or negative."""
    variance = np.asarray(variance, dtype=np.float64)
    return ~np.isfinite(variance) | (variance < 0)


def sanitize_variance(variance):
    """Replace NaN, infinite and negative variances with 1.0.

    Parameters
    ----------
    variance : array_like
        Raw variance vector.

    Returns
    -------
    ndarray
        Copy of ``variance`` with invalid entries set to 1.0.
    """
    variance = np.asarray(variance, dtype=np.float64)
    return np.where(invalid_variance_mask(variance), VARIANCE_FILL_VALUE, variance)


def compute_from_raw_summary(raw, intercept_index=None, logger=None):
    """Build feature statistics from a raw column summary.

    Copies the summary vectors, computes the mean absolute value of each
    feature from its L1 norm and sanitizes the variances. Every variance that
    is NaN, infinite or negative is reset to 1.0 and reported as a warning on
    ``logger``; the result is the same whether or not anything is logged.

    Parameters
    ----------
    raw : ColumnSummary
        Raw column summary. Its vectors are assumed to have equal length.
    intercept_index : int, optional
        Index of the intercept feature. Stored as given, without validation.
    logger : logging.Logger, optional
        Sink for sanitation diagnostics. Defaults to the ``colstats.statistics``
        logger.

    Returns
    -------
    FeatureDataStatistics
        Sanitized feature statistics.
    """
    logger = logger or log

    variance = np.asarray(raw.variance, dtype=np.float64)
    invalid = invalid_variance_mask(variance)
    adjusted_count = int(invalid.sum())

    for idx in np.flatnonzero(invalid):
        logger.warning("Detected invalid variance at index %d (%s)", idx, variance[idx])

    if adjusted_count > 0:
        logger.warning(
            "Found %d features where variance was either negative, not-a-number, or infinite. "
            "The variances for these features have been re-set to %s.",
            adjusted_count,
            VARIANCE_FILL_VALUE,
        )

    norm_l1 = np.asarray(raw.norm_l1, dtype=np.float64)

    return FeatureDataStatistics(
        count=raw.count,
        mean=np.asarray(raw.mean, dtype=np.float64),
        variance=np.where(invalid, VARIANCE_FILL_VALUE, variance),
        num_nonzeros=np.asarray(raw.num_nonzeros, dtype=np.float64),
        max=np.asarray(raw.max, dtype=np.float64),
        min=np.asarray(raw.min, dtype=np.float64),
        norm_l1=norm_l1,
        norm_l2=np.asarray(raw.norm_l2, dtype=np.float64),
        mean_abs=_scale(raw.count, norm_l1),
        intercept_index=intercept_index,
    )
