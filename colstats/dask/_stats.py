"""Entry point for distributed feature statistics on Dask."""

from __future__ import annotations

import logging

from colstats.core.constants import DEFAULT_SPLIT_EVERY
from colstats.core.statistics import compute_from_raw_summary

from ._summary import distributed_column_summary
from ._utils import get_default_partitions, get_or_create_client, numeric_dask_columns, validate_dask_input

log = logging.getLogger("colstats.dask.stats")


def dask_feature_statistics(
    data,
    feature_cols=None,
    label_col=None,
    intercept_index=None,
    client=None,
    n_partitions=None,
    split_every=DEFAULT_SPLIT_EVERY,
    logger=None,
):
    r"""Compute feature statistics over a Dask DataFrame.

    Each partition is reduced on its worker to mergeable sufficient
    statistics (count, mean, :math:`M_2`, non-zero counts, extrema and
    norms). The partial results are tree-reduced into one raw column
    summary, whose variances are then sanitized exactly as in the local
    path.

    Users do not need to call this function directly. Passing a Dask
    DataFrame to :func:`~colstats.feature_statistics` will automatically
    dispatch here.

    Parameters
    ----------
    data : dask.dataframe.DataFrame
        Input data with one row per sample.
    feature_cols : list of str, optional
        Feature columns. Defaults to every numeric column except ``label_col``.
    label_col : str, optional
        Response column excluded from the default feature columns.
    intercept_index : int, optional
        Index of the intercept feature, stored on the result.
    client : distributed.Client, optional
        Dask distributed client. If None, a local client is created.
    n_partitions : int, optional
        Repartition the data to this many partitions before summarizing. If
        None, data with fewer partitions than cluster threads is
        repartitioned to the thread count; otherwise it is left as is.
    split_every : int, default 8
        Fan-in of the tree-reduce.
    logger : logging.Logger, optional
        Sink for variance sanitation diagnostics.

    Returns
    -------
    FeatureDataStatistics
        Sanitized feature statistics.

    See Also
    --------
    feature_statistics : Local entry point. Automatically dispatches to
        ``dask_feature_statistics`` when passed a Dask DataFrame.
    """
    client = get_or_create_client(client)

    if feature_cols is None:
        feature_cols = numeric_dask_columns(data, exclude=[label_col] if label_col else None)
        if not feature_cols:
            raise ValueError("Dask DataFrame has no numeric feature columns.")
    validate_dask_input(data, feature_cols)

    if n_partitions is None:
        n_default = get_default_partitions(client)
        if data.npartitions < n_default:
            n_partitions = n_default
    if n_partitions is not None:
        data = data.repartition(npartitions=n_partitions)

    log.info("dask_feature_statistics: %d features, %d partitions", len(feature_cols), data.npartitions)
    raw = distributed_column_summary(client, data, list(feature_cols), split_every=split_every)
    return compute_from_raw_summary(raw, intercept_index=intercept_index, logger=logger)
