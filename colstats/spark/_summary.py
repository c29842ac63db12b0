"""Distributed column summaries via Spark collect and driver-side reduce."""

from __future__ import annotations

import logging
import pickle

import numpy as np
import pandas as pd

from colstats.core.summary import (
    empty_partial_summary,
    finalize_summary,
    partition_summary,
    reduce_partial_summaries,
)

log = logging.getLogger("colstats.spark.summary")


def partition_summary_from_pandas(pdf, feature_cols=None, features_col=None):
    """Compute the partial column summary of one pandas batch.

    Parameters
    ----------
    pdf : pandas.DataFrame
        One Arrow batch of the Spark DataFrame.
    feature_cols : list of str, optional
        Numeric feature columns, one feature per column.
    features_col : str, optional
        A single array column holding the whole feature vector of each row.
        Takes precedence over ``feature_cols``.

    Returns
    -------
    PartialSummary
        Sufficient statistics of the batch.
    """
    if features_col is not None:
        X = np.vstack([np.asarray(v, dtype=np.float64) for v in pdf[features_col]])
    else:
        X = pdf[feature_cols].to_numpy(dtype=np.float64)
    return partition_summary(X)


def distributed_column_summary(sdf, feature_cols=None, features_col=None, n_features=None):
    r"""Compute the raw column summary of a Spark DataFrame.

    Uses ``mapInPandas`` to compute per-batch partial summaries, collects
    the small :math:`O(k)` results to the driver, and merges them.

    Parameters
    ----------
    sdf : pyspark.sql.DataFrame
        Spark DataFrame holding only the feature data.
    feature_cols : list of str, optional
        Numeric feature columns.
    features_col : str, optional
        Array column holding whole feature vectors.
    n_features : int, optional
        Number of features, used to shape the result when no rows exist.
        Defaults to ``len(feature_cols)``. An array column carries no
        width in its schema, so with ``features_col`` and no rows the
        result has zero features unless this is given.

    Returns
    -------
    ColumnSummary
        Raw column summary over all partitions.
    """
    from pyspark.sql.types import BinaryType, StructField, StructType

    out_schema = StructType([StructField("summary_bytes", BinaryType(), False)])

    def _compute_summary_udf(iterator):
        for pdf in iterator:
            if len(pdf) == 0:
                continue
            partial = partition_summary_from_pandas(pdf, feature_cols, features_col)
            yield pd.DataFrame({"summary_bytes": [pickle.dumps(partial)]})

    result_df = sdf.mapInPandas(_compute_summary_udf, schema=out_schema)
    rows = result_df.collect()
    log.info("distributed_column_summary: collected %d partial summaries", len(rows))

    partial = reduce_partial_summaries(pickle.loads(row["summary_bytes"]) for row in rows)
    if partial is None:
        if n_features is None:
            # array columns have no fixed width to read back from the schema
            n_features = len(feature_cols) if feature_cols is not None else 0
        partial = empty_partial_summary(n_features)
    return finalize_summary(partial)
