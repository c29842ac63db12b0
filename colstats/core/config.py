"""Configuration classes for feature statistics."""

from dataclasses import dataclass, field
from typing import Any

from .constants import DEFAULT_SPLIT_EVERY


@dataclass
class StatisticsConfig:
    """Feature statistics config."""

    feature_cols: list[str] = field(default_factory=list)
    label_col: str | None = None
    features_col: str | None = None
    intercept_index: int | None = None
    n_partitions: int | None = None
    split_every: int = DEFAULT_SPLIT_EVERY

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return dict(self.__dict__)
