"""Constants for column statistics."""

VARIANCE_FILL_VALUE = 1.0
DEFAULT_SPLIT_EVERY = 8

STATISTIC_FIELDS = (
    "mean",
    "variance",
    "num_nonzeros",
    "max",
    "min",
    "norm_l1",
    "norm_l2",
    "mean_abs",
)
