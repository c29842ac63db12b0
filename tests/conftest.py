"""Shared test fixtures for colstats."""

import numpy as np
import pytest

from colstats.core.summary import ColumnSummary


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def dense_matrix(rng):
    X = rng.standard_normal((50, 4))
    X[::3, 1] = 0.0
    X[:, 3] = 2.5
    return X


@pytest.fixture
def make_raw_summary():
    def _make(count=10, variance=(1.0, 2.0, 3.0), norm_l1=None, **overrides):
        variance = np.asarray(variance, dtype=np.float64)
        k = len(variance)
        fields = {
            "count": count,
            "mean": np.linspace(-1.0, 1.0, k),
            "variance": variance,
            "num_nonzeros": np.full(k, float(count)),
            "max": np.arange(k, dtype=np.float64) + 5.0,
            "min": np.arange(k, dtype=np.float64) - 5.0,
            "norm_l1": np.arange(1, k + 1, dtype=np.float64) * 10.0 if norm_l1 is None else np.asarray(norm_l1),
            "norm_l2": np.arange(1, k + 1, dtype=np.float64) * 3.0,
        }
        fields.update(overrides)
        return ColumnSummary(**fields)

    return _make
