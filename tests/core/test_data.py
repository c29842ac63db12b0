"""Tests for input conversion to a feature matrix."""

import numpy as np
import pytest
import scipy.sparse as sp

from colstats.core.data import LabeledPoint, to_feature_matrix

pd = pytest.importorskip("pandas")
pl = pytest.importorskip("polars")

EXPECTED = np.array([[1.0, 0.0, 2.0], [0.0, 3.0, 4.0]])


def test_dense_array_passthrough_dtype():
    X = to_feature_matrix(np.array([[1, 2], [3, 4]]))
    assert X.dtype == np.float64
    np.testing.assert_array_equal(X, [[1.0, 2.0], [3.0, 4.0]])


def test_one_dimensional_array_raises():
    with pytest.raises(ValueError, match="2-dimensional"):
        to_feature_matrix(np.array([1.0, 2.0]))


def test_sparse_stays_sparse():
    X = to_feature_matrix(sp.coo_matrix(EXPECTED))
    assert sp.issparse(X)
    assert X.format == "csr"
    np.testing.assert_array_equal(X.toarray(), EXPECTED)


def test_labeled_points():
    points = [LabeledPoint(1.0, EXPECTED[0]), LabeledPoint(0.0, EXPECTED[1], offset=0.5, weight=2.0)]
    np.testing.assert_array_equal(to_feature_matrix(points), EXPECTED)


def test_labeled_points_with_sparse_features():
    points = [LabeledPoint(1.0, sp.csr_matrix(EXPECTED[0])), LabeledPoint(0.0, sp.csr_matrix(EXPECTED[1]))]
    X = to_feature_matrix(points)
    assert sp.issparse(X)
    np.testing.assert_array_equal(X.toarray(), EXPECTED)


def test_sequence_of_vectors():
    np.testing.assert_array_equal(to_feature_matrix([list(EXPECTED[0]), tuple(EXPECTED[1])]), EXPECTED)


def test_ragged_vectors_raise():
    with pytest.raises(ValueError, match="same length"):
        to_feature_matrix([[1.0, 2.0], [1.0]])


def test_empty_sequence_raises():
    with pytest.raises(ValueError, match="empty sequence"):
        to_feature_matrix([])


def test_polars_frame_default_columns_skip_label():
    df = pl.DataFrame({"y": [1.0, 0.0], "a": [1.0, 0.0], "b": [0.0, 3.0], "c": [2, 4], "name": ["u", "v"]})
    np.testing.assert_array_equal(to_feature_matrix(df, label_col="y"), EXPECTED)


def test_pandas_frame_selected_columns():
    df = pd.DataFrame({"a": [1.0, 0.0], "b": [0.0, 3.0], "c": [2.0, 4.0]})
    np.testing.assert_array_equal(to_feature_matrix(df, feature_cols=["a", "b", "c"]), EXPECTED)


def test_missing_column_raises():
    df = pl.DataFrame({"a": [1.0]})
    with pytest.raises(ValueError, match="Columns not found"):
        to_feature_matrix(df, feature_cols=["a", "z"])


def test_non_numeric_column_raises():
    df = pl.DataFrame({"a": [1.0], "s": ["x"]})
    with pytest.raises(ValueError, match="numeric"):
        to_feature_matrix(df, feature_cols=["a", "s"])


def test_frame_without_numeric_columns_raises():
    with pytest.raises(ValueError, match="no numeric"):
        to_feature_matrix(pl.DataFrame({"s": ["x"]}))


@pytest.mark.parametrize("obj", [42, "abc", {"a": 1}])
def test_unsupported_type_raises(obj):
    with pytest.raises(TypeError, match="Unsupported input type"):
        to_feature_matrix(obj)
