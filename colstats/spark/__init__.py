"""PySpark distributed backend for column statistics."""

from ._stats import spark_feature_statistics
from ._summary import distributed_column_summary
from ._utils import get_default_partitions, get_or_create_spark, is_spark_dataframe, validate_spark_input

__all__ = [
    "distributed_column_summary",
    "get_default_partitions",
    "get_or_create_spark",
    "is_spark_dataframe",
    "spark_feature_statistics",
    "validate_spark_input",
]
