"""Per-feature descriptive statistics."""

from __future__ import annotations

from colstats.core.config import StatisticsConfig
from colstats.core.data import to_feature_matrix
from colstats.core.statistics import compute_from_raw_summary
from colstats.core.summary import column_summary


def feature_statistics(
    data,
    intercept_index=None,
    feature_cols=None,
    label_col=None,
    features_col=None,
    logger=None,
    client=None,
    spark=None,
    n_partitions=None,
):
    r"""Compute per-feature descriptive statistics of a dataset.

    For every feature (column) :math:`j` over :math:`n` samples this computes
    the mean, the unbiased variance

    .. math::

        s_j^2 = \frac{1}{n - 1} \sum_{i=1}^{n} (x_{ij} - \bar{x}_j)^2,

    the minimum, maximum, number of non-zero values, the L1 and L2 norms of
    the column, and the mean absolute value :math:`\|x_j\|_1 / n`.

    Variances that come out NaN, infinite or negative (degenerate or
    ill-conditioned columns) are reset to 1.0 and reported as warnings, so
    the result can be used directly to standardize features.

    Parameters
    ----------
    data : array_like, scipy.sparse matrix, sequence, or DataFrame
        Input data. Accepts a 2-D NumPy array, a SciPy sparse matrix, a
        sequence of :class:`~colstats.core.data.LabeledPoint` or of 1-D
        feature vectors, or any Arrow-compatible DataFrame (polars, pandas,
        pyarrow, ...). Dask and Spark DataFrames dispatch to the
        distributed backends.
    intercept_index : int, optional
        Index of the intercept feature. Stored on the result as given.
    feature_cols : list of str, optional
        Feature columns of tabular input. Defaults to every numeric column
        except ``label_col``.
    label_col : str, optional
        Response column, excluded from the default feature columns.
    features_col : str, optional
        Vector or array column holding whole feature vectors. Used only for
        Spark input; mutually exclusive with ``feature_cols``.
    logger : logging.Logger, optional
        Sink for variance sanitation diagnostics. Defaults to the
        ``colstats.statistics`` logger.
    client : distributed.Client, optional
        Dask client, used only for Dask input.
    spark : pyspark.sql.SparkSession, optional
        Spark session, used only for Spark input.
    n_partitions : int, optional
        Number of partitions for distributed input.

    Returns
    -------
    FeatureDataStatistics
        Sanitized feature statistics.

    Examples
    --------
    .. ipython::

        In [1]: import numpy as np
           ...: from colstats import feature_statistics
           ...:
           ...: X = np.array([[1.0, 0.0], [3.0, 2.0], [5.0, 4.0]])
           ...: stats = feature_statistics(X, intercept_index=None)
           ...: print(stats)

    See Also
    --------
    compute_from_raw_summary : Sanitize a raw column summary computed elsewhere.
    """
    if intercept_index is not None and (isinstance(intercept_index, bool) or not isinstance(intercept_index, int)):
        raise TypeError(f"intercept_index must be an integer or None, got {type(intercept_index).__name__}.")
    if n_partitions is not None and (not isinstance(n_partitions, int) or n_partitions < 1):
        raise ValueError(f"n_partitions={n_partitions} is not valid. Must be a positive integer.")
    if feature_cols is not None and isinstance(feature_cols, str):
        raise TypeError(f"feature_cols must be a list of strings, not a string. Use feature_cols=['{feature_cols}'].")
    if features_col is not None and not isinstance(features_col, str):
        raise TypeError(f"features_col must be a column name, got {type(features_col).__name__}.")

    config = StatisticsConfig(
        feature_cols=list(feature_cols) if feature_cols is not None else [],
        label_col=label_col,
        features_col=features_col,
        intercept_index=intercept_index,
        n_partitions=n_partitions,
    )

    from colstats.dask._utils import is_dask_collection

    if is_dask_collection(data):
        from colstats.dask._stats import dask_feature_statistics

        return dask_feature_statistics(
            data,
            feature_cols=config.feature_cols or None,
            label_col=config.label_col,
            intercept_index=config.intercept_index,
            client=client,
            n_partitions=config.n_partitions,
            split_every=config.split_every,
            logger=logger,
        )

    from colstats.spark._utils import is_spark_dataframe

    if is_spark_dataframe(data):
        from colstats.spark._stats import spark_feature_statistics

        return spark_feature_statistics(
            data,
            feature_cols=config.feature_cols or None,
            features_col=config.features_col,
            label_col=config.label_col,
            intercept_index=config.intercept_index,
            spark=spark,
            n_partitions=config.n_partitions,
            logger=logger,
        )

    X = to_feature_matrix(data, feature_cols=config.feature_cols or None, label_col=config.label_col)
    raw = column_summary(X)
    return compute_from_raw_summary(raw, intercept_index=config.intercept_index, logger=logger)
