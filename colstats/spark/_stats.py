"""Entry point for distributed feature statistics via Spark."""

from __future__ import annotations

import logging

from colstats.core.statistics import compute_from_raw_summary

from ._summary import distributed_column_summary
from ._utils import get_default_partitions, get_or_create_spark, numeric_spark_columns, validate_spark_input

log = logging.getLogger("colstats.spark.stats")


def spark_feature_statistics(
    data,
    feature_cols=None,
    features_col=None,
    label_col=None,
    intercept_index=None,
    spark=None,
    n_partitions=None,
    n_features=None,
    logger=None,
):
    r"""Compute feature statistics over a Spark DataFrame.

    Two layouts of the feature data are accepted and converge on the same
    computation:

    - one numeric column per feature (``feature_cols``), or
    - a single ``pyspark.ml`` or ``pyspark.mllib`` vector column, or an
      ``array<double>`` column, holding the whole feature vector of each
      row (``features_col``).

    Each partition is reduced to mergeable sufficient statistics inside
    ``mapInPandas``, the partial results are merged on the driver, and the
    variances of the raw summary are sanitized exactly as in the local path.

    Users do not need to call this function directly. Passing a Spark
    DataFrame to :func:`~colstats.feature_statistics` will automatically
    dispatch here.

    Parameters
    ----------
    data : pyspark.sql.DataFrame
        Input data with one row per sample.
    feature_cols : list of str, optional
        Feature columns. Defaults to every numeric column except ``label_col``
        when ``features_col`` is not given.
    features_col : str, optional
        Vector or array column holding the feature vectors.
    label_col : str, optional
        Response column excluded from the default feature columns.
    intercept_index : int, optional
        Index of the intercept feature, stored on the result.
    spark : pyspark.sql.SparkSession, optional
        Spark session. If None, the active session is used or a local one
        is created.
    n_partitions : int, optional
        Repartition the data to this many partitions before summarizing.
    n_features : int, optional
        Width of the vectors in ``features_col``. Vector and array column
        types do not record their length, so on a DataFrame with no rows
        the result has ``n_features`` entries per statistic, or zero
        entries when this is not given. Ignored for ``feature_cols``.
    logger : logging.Logger, optional
        Sink for variance sanitation diagnostics.

    Returns
    -------
    FeatureDataStatistics
        Sanitized feature statistics.

    See Also
    --------
    feature_statistics : Local entry point. Automatically dispatches to
        ``spark_feature_statistics`` when passed a Spark DataFrame.
    """
    from pyspark.sql import functions as F

    spark = get_or_create_spark(spark)

    if features_col is not None:
        if feature_cols is not None:
            raise ValueError("Pass either feature_cols or features_col, not both.")
        validate_spark_input(data, [features_col])
        sdf = data.select(_as_array_column(data, features_col).alias(features_col))
    else:
        if feature_cols is None:
            feature_cols = numeric_spark_columns(data, exclude=[label_col] if label_col else None)
            if not feature_cols:
                raise ValueError("Spark DataFrame has no numeric feature columns.")
        validate_spark_input(data, feature_cols)
        sdf = data.select(*[F.col(c).cast("double").alias(c) for c in feature_cols])

    if n_partitions is not None:
        sdf = sdf.repartition(n_partitions)

    log.info(
        "spark_feature_statistics: %s, default parallelism %d",
        f"vector column '{features_col}'" if features_col is not None else f"{len(feature_cols)} feature columns",
        get_default_partitions(spark),
    )
    raw = distributed_column_summary(
        sdf,
        feature_cols=list(feature_cols) if feature_cols is not None else None,
        features_col=features_col,
        n_features=n_features if features_col is not None else None,
    )
    return compute_from_raw_summary(raw, intercept_index=intercept_index, logger=logger)


def _as_array_column(sdf, name):
    """Return ``name`` as an ``array<double>`` column, converting ML vectors."""
    from pyspark.ml.functions import vector_to_array
    from pyspark.ml.linalg import VectorUDT
    from pyspark.mllib.linalg import VectorUDT as MLlibVectorUDT
    from pyspark.sql import functions as F
    from pyspark.sql.types import ArrayType

    data_type = sdf.schema[name].dataType
    if isinstance(data_type, VectorUDT | MLlibVectorUDT):
        return vector_to_array(F.col(name), dtype="float64")
    if isinstance(data_type, ArrayType):
        return F.col(name).cast("array<double>")
    raise ValueError(f"features_col '{name}' must be a vector or array column, got {data_type.simpleString()}.")
