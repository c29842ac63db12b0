"""Tests for feature statistics built from a raw column summary."""

import logging

import numpy as np
import polars as pl
import pytest

from colstats.core.statistics import (
    FeatureDataStatistics,
    compute_from_raw_summary,
    invalid_variance_mask,
    sanitize_variance,
)


def _warnings(caplog):
    return [r for r in caplog.records if r.name == "colstats.statistics" and r.levelno == logging.WARNING]


def test_invalid_variance_is_reset(make_raw_summary, caplog):
    caplog.set_level("WARNING")
    raw = make_raw_summary(count=10, variance=[2.0, -1.0, np.nan, 4.0])

    result = compute_from_raw_summary(raw)

    np.testing.assert_array_equal(result.variance, [2.0, 1.0, 1.0, 4.0])
    messages = [r.getMessage() for r in _warnings(caplog)]
    assert len(messages) == 3
    assert "index 1 (-1.0)" in messages[0]
    assert "index 2 (nan)" in messages[1]
    assert "Found 2 features" in messages[2]


def test_valid_variance_is_identity(make_raw_summary, caplog):
    caplog.set_level("WARNING")
    raw = make_raw_summary(variance=[1.0, 0.0, 5.5])

    result = compute_from_raw_summary(raw)

    np.testing.assert_array_equal(result.variance, [1.0, 0.0, 5.5])
    assert _warnings(caplog) == []


@pytest.mark.parametrize("bad", [np.nan, np.inf, -np.inf, -1e-12, -3.0])
def test_each_invalid_value_becomes_one(make_raw_summary, bad):
    raw = make_raw_summary(variance=[0.5, bad])
    result = compute_from_raw_summary(raw)
    assert result.variance[1] == 1.0
    assert result.variance[0] == 0.5


def test_all_variances_finite_and_non_negative(make_raw_summary, rng):
    variance = rng.standard_normal(30) * 10
    variance[::4] = np.nan
    variance[1::7] = np.inf
    result = compute_from_raw_summary(make_raw_summary(variance=variance))
    assert np.all(np.isfinite(result.variance))
    assert np.all(result.variance >= 0)
    valid = np.isfinite(variance) & (variance >= 0)
    np.testing.assert_array_equal(result.variance[valid], variance[valid])


def test_mean_abs_scaled_by_count(make_raw_summary):
    raw = make_raw_summary(count=5, variance=[1.0, 1.0], norm_l1=[10.0, 20.0])
    result = compute_from_raw_summary(raw)
    np.testing.assert_array_equal(result.mean_abs, [2.0, 4.0])


def test_mean_abs_unscaled_for_zero_count(make_raw_summary):
    raw = make_raw_summary(count=0, variance=[0.0, 0.0], norm_l1=[3.0, 6.0])
    result = compute_from_raw_summary(raw)
    np.testing.assert_array_equal(result.mean_abs, [3.0, 6.0])


def test_negative_count_passes_through(make_raw_summary):
    raw = make_raw_summary(count=-2, variance=[1.0], norm_l1=[4.0])
    result = compute_from_raw_summary(raw)
    assert result.count == -2
    np.testing.assert_array_equal(result.mean_abs, [4.0])


def test_other_fields_pass_through(make_raw_summary):
    raw = make_raw_summary(count=7, variance=[np.nan, 2.0, 3.0])
    result = compute_from_raw_summary(raw, intercept_index=2)

    assert result.count == 7
    assert result.intercept_index == 2
    for name in ("mean", "num_nonzeros", "max", "min", "norm_l1", "norm_l2"):
        np.testing.assert_array_equal(getattr(result, name), getattr(raw, name))


def test_output_lengths_match_input(make_raw_summary):
    raw = make_raw_summary(variance=np.ones(6))
    result = compute_from_raw_summary(raw)
    for name in ("mean", "variance", "num_nonzeros", "max", "min", "norm_l1", "norm_l2", "mean_abs"):
        assert len(getattr(result, name)) == 6
    assert result.n_features == 6


def test_intercept_index_not_validated(make_raw_summary):
    result = compute_from_raw_summary(make_raw_summary(variance=[1.0]), intercept_index=99)
    assert result.intercept_index == 99


def test_input_variance_not_mutated(make_raw_summary):
    raw = make_raw_summary(variance=[np.nan, -1.0])
    compute_from_raw_summary(raw)
    assert np.isnan(raw.variance[0])
    assert raw.variance[1] == -1.0


def test_injected_logger_receives_diagnostics(make_raw_summary):
    records = []

    class _Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = logging.getLogger("tests.colstats.sink")
    logger.propagate = False
    handler = _Collect()
    logger.addHandler(handler)
    try:
        compute_from_raw_summary(make_raw_summary(variance=[np.inf, 1.0]), logger=logger)
    finally:
        logger.removeHandler(handler)

    assert len(records) == 2
    assert all(r.levelno == logging.WARNING for r in records)
    assert "Found 1 features" in records[-1].getMessage()


def test_result_is_immutable(make_raw_summary):
    result = compute_from_raw_summary(make_raw_summary())
    with pytest.raises(AttributeError):
        result.count = 3


def test_invalid_variance_mask():
    mask = invalid_variance_mask([0.0, -0.5, np.nan, np.inf, 2.0])
    np.testing.assert_array_equal(mask, [False, True, True, True, False])


def test_sanitize_variance_returns_copy():
    variance = np.array([np.nan, 3.0])
    out = sanitize_variance(variance)
    np.testing.assert_array_equal(out, [1.0, 3.0])
    assert np.isnan(variance[0])


def test_to_polars(make_raw_summary):
    result = compute_from_raw_summary(make_raw_summary(count=4, variance=[1.0, -1.0]))
    df = result.to_polars()
    assert isinstance(df, pl.DataFrame)
    assert df.columns == [
        "feature",
        "mean",
        "variance",
        "num_nonzeros",
        "max",
        "min",
        "norm_l1",
        "norm_l2",
        "mean_abs",
    ]
    assert df.height == 2
    assert df["variance"].to_list() == [1.0, 1.0]


def test_feature_data_statistics_default_intercept():
    v = np.zeros(1)
    stats = FeatureDataStatistics(0, v, v, v, v, v, v, v, v)
    assert stats.intercept_index is None
