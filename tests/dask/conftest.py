"""Shared fixtures for Dask backend tests."""

import numpy as np
import pytest


@pytest.fixture(scope="module")
def dask_client():
    distributed = pytest.importorskip("distributed")
    cluster = distributed.LocalCluster(n_workers=2, threads_per_worker=1, memory_limit="512MB", processes=False)
    client = distributed.Client(cluster)
    yield client
    client.close()
    cluster.close()


@pytest.fixture
def feature_frame(rng):
    pd = pytest.importorskip("pandas")
    n = 120
    return pd.DataFrame(
        {
            "label": rng.integers(0, 2, size=n).astype(np.float64),
            "x0": rng.standard_normal(n),
            "x1": np.where(rng.random(n) < 0.3, 0.0, rng.exponential(2.0, size=n)),
            "x2": np.full(n, 4.0),
        }
    )
