"""Per-feature descriptive statistics with variance sanitation."""

from colstats.core import (
    ColumnSummary,
    FeatureDataStatistics,
    LabeledPoint,
    PartialSummary,
    StatisticsConfig,
    column_summary,
    compute_from_raw_summary,
    finalize_summary,
    format_feature_statistics,
    merge_partial_summaries,
    partition_summary,
    sanitize_variance,
    to_feature_matrix,
)
from colstats.feature_statistics import feature_statistics

__version__ = "0.1.0"

__all__ = [
    "ColumnSummary",
    "FeatureDataStatistics",
    "LabeledPoint",
    "PartialSummary",
    "StatisticsConfig",
    "column_summary",
    "compute_from_raw_summary",
    "feature_statistics",
    "finalize_summary",
    "format_feature_statistics",
    "merge_partial_summaries",
    "partition_summary",
    "sanitize_variance",
    "to_feature_matrix",
]
