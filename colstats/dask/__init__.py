"""Dask distributed backend for column statistics."""

from ._stats import dask_feature_statistics
from ._summary import distributed_column_summary, tree_reduce
from ._utils import get_default_partitions, get_or_create_client, is_dask_collection, validate_dask_input

__all__ = [
    "dask_feature_statistics",
    "distributed_column_summary",
    "get_default_partitions",
    "get_or_create_client",
    "is_dask_collection",
    "tree_reduce",
    "validate_dask_input",
]
