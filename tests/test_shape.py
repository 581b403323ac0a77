from __future__ import annotations

import numpy as np
import pytest

from knn_pmml.encoder.shape import as_matrix, as_target_vector, check_target_length, derive_shape
from knn_pmml.errors import MissingAttributeError, ShapeMismatchError


def test_flat_data_reshapes_by_feature_count():
    data = np.arange(6.0)
    shape = derive_shape(data, 2, n_features=2)

    assert shape == (3, 2)
    assert as_matrix(data, shape).tolist() == [[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]]


def test_two_dimensional_data_supplies_its_shape():
    assert derive_shape(np.zeros((4, 3))) == (4, 3)


def test_uneven_flat_data():
    with pytest.raises(ShapeMismatchError, match="does not reshape"):
        derive_shape(np.arange(7.0), 2, n_features=2)


def test_flat_data_without_feature_count():
    with pytest.raises(MissingAttributeError):
        derive_shape(np.arange(6.0), 2)


def test_declared_feature_count_must_match_columns():
    with pytest.raises(ShapeMismatchError):
        derive_shape(np.zeros((4, 3)), 2, n_features=2)


@pytest.mark.parametrize("data", [np.zeros((0, 3)), np.zeros((3, 0)), np.zeros((2, 2, 2))])
def test_degenerate_matrices(data):
    with pytest.raises(ShapeMismatchError):
        derive_shape(data)


def test_unsupported_rank():
    with pytest.raises(ShapeMismatchError, match="rank=3"):
        derive_shape(np.zeros((2, 2)), 3)


def test_target_length_mismatch():
    with pytest.raises(ShapeMismatchError, match="3 values"):
        check_target_length(np.array([1.0, 2.0, 3.0]), 4)


def test_single_column_target_is_flattened():
    assert as_target_vector(np.array([[1.0], [2.0]])).tolist() == [1.0, 2.0]


def test_multi_output_target_rejected():
    with pytest.raises(ShapeMismatchError):
        as_target_vector(np.zeros((3, 2)))
