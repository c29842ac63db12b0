"""Distributed column summaries via tree-reduce."""

from __future__ import annotations

import logging

import numpy as np

from colstats.core.constants import DEFAULT_SPLIT_EVERY
from colstats.core.summary import finalize_summary, merge_partial_summaries, partition_summary

log = logging.getLogger("colstats.dask.summary")


def partition_summary_from_pandas(pdf, feature_cols):
    """Compute the partial column summary of one pandas partition.

    Parameters
    ----------
    pdf : pandas.DataFrame
        One partition of the Dask DataFrame.
    feature_cols : list of str
        Feature columns to summarize.

    Returns
    -------
    PartialSummary
        Sufficient statistics of the partition.
    """
    X = pdf[feature_cols].to_numpy(dtype=np.float64)
    return partition_summary(X)


def tree_reduce(client, futures, combine_fn, split_every=DEFAULT_SPLIT_EVERY):
    """Tree-reduce a list of futures with configurable fan-in.

    Groups ``split_every`` futures per reduction step and reduces each
    group in a single task on one worker. With 64 futures and
    ``split_every=8`` this produces 9 tasks (8 + 1) instead of the 63
    tasks created by pairwise reduction.

    Parameters
    ----------
    client : distributed.Client
        Dask distributed client.
    futures : list of Future
        Futures to reduce.
    combine_fn : callable
        Pairwise combiner ``(a, b) -> c``.
    split_every : int, default 8
        Number of futures to combine per reduction step.

    Returns
    -------
    result
        The fully reduced result, materialized on the driver.
    """
    if split_every < 2:
        raise ValueError(f"split_every={split_every} is not valid. Must be at least 2.")
    if not futures:
        raise ValueError("tree_reduce requires at least one future.")

    while len(futures) > 1:
        new_futures = []
        for i in range(0, len(futures), split_every):
            group = futures[i : i + split_every]
            if len(group) == 1:
                new_futures.append(group[0])
            else:
                new_futures.append(client.submit(_reduce_group, combine_fn, *group))
        futures = new_futures
    return futures[0].result()


def distributed_column_summary(client, ddf, feature_cols, split_every=DEFAULT_SPLIT_EVERY):
    """Compute the raw column summary of a Dask DataFrame.

    Submits :func:`partition_summary_from_pandas` for every partition and
    tree-reduces the partial summaries with
    :func:`~colstats.core.summary.merge_partial_summaries`. Only
    ``O(k)`` vectors per partition travel back to the driver.

    Parameters
    ----------
    client : distributed.Client
        Dask distributed client.
    ddf : dask.dataframe.DataFrame
        Input data.
    feature_cols : list of str
        Feature columns to summarize.
    split_every : int, default 8
        Fan-in of the tree-reduce.

    Returns
    -------
    ColumnSummary
        Raw column summary over all partitions.
    """
    delayed_parts = ddf[feature_cols].to_delayed()
    log.info("distributed_column_summary: %d partitions → tree-reduce", len(delayed_parts))

    pdf_futures = client.compute(delayed_parts)
    futures = [client.submit(partition_summary_from_pandas, pf, feature_cols) for pf in pdf_futures]
    partial = tree_reduce(client, futures, merge_partial_summaries, split_every=split_every)
    return finalize_summary(partial)


def _reduce_group(combine_fn, *items):
    """Reduce a group of items by applying combine_fn pairwise."""
    result = items[0]
    for item in items[1:]:
        result = combine_fn(result, item)
    return result
