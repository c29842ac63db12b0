"""Core column statistics: summaries, sanitation, conversion and display."""

from .config import StatisticsConfig
from .constants import DEFAULT_SPLIT_EVERY, VARIANCE_FILL_VALUE
from .data import LabeledPoint, to_feature_matrix
from .dataframe import to_polars
from .format import format_feature_statistics
from .statistics import (
    FeatureDataStatistics,
    compute_from_raw_summary,
    invalid_variance_mask,
    sanitize_variance,
)
from .summary import (
    ColumnSummary,
    PartialSummary,
    column_summary,
    empty_partial_summary,
    finalize_summary,
    merge_partial_summaries,
    partition_summary,
    reduce_partial_summaries,
)

__all__ = [
    "DEFAULT_SPLIT_EVERY",
    "VARIANCE_FILL_VALUE",
    "ColumnSummary",
    "FeatureDataStatistics",
    "LabeledPoint",
    "PartialSummary",
    "StatisticsConfig",
    "column_summary",
    "compute_from_raw_summary",
    "empty_partial_summary",
    "finalize_summary",
    "format_feature_statistics",
    "invalid_variance_mask",
    "merge_partial_summaries",
    "partition_summary",
    "reduce_partial_summaries",
    "sanitize_variance",
    "to_feature_matrix",
    "to_polars",
]
