from __future__ import annotations

import numpy as np

from knn_pmml.errors import MissingAttributeError, ShapeMismatchError


def derive_shape(data: np.ndarray, rank: int = 2, *, n_features: int | None = None) -> tuple[int, int]:
    """Return ``(n_instances, n_features)`` for the training feature matrix.

    Data already of the declared rank supplies its own shape. Flat data is
    partitioned row-major by ``n_features``, which must divide it exactly.
    """
    if rank != 2:
        raise ShapeMismatchError(f"only rank-2 feature matrices are supported, got rank={rank}")
    if data.ndim == rank:
        n_instances, width = (int(dim) for dim in data.shape)
        if n_features is not None and width != n_features:
            raise ShapeMismatchError(
                f"_fit_X has {width} columns but n_features_in_={n_features}"
            )
    elif data.ndim == 1:
        if n_features is None:
            raise MissingAttributeError(
                "flat _fit_X requires the feature count (n_features_in_) to reshape"
            )
        if n_features <= 0:
            raise ShapeMismatchError(f"feature count must be positive, got {n_features}")
        size = int(data.size)
        n_instances, remainder = divmod(size, n_features)
        if remainder:
            raise ShapeMismatchError(
                f"_fit_X of length {size} does not reshape into rows of {n_features} features"
            )
        width = n_features
    else:
        raise ShapeMismatchError(f"_fit_X must have rank {rank} (or be flat), got rank={data.ndim}")

    if width <= 0:
        raise ShapeMismatchError(f"_fit_X must have at least one feature, got shape={data.shape}")
    if n_instances <= 0:
        raise ShapeMismatchError("_fit_X holds no training instances")
    return n_instances, width


def as_matrix(data: np.ndarray, shape: tuple[int, int]) -> np.ndarray:
    return np.reshape(data, shape)


def as_target_vector(y: np.ndarray) -> np.ndarray:
    if y.ndim == 1:
        return y
    if y.ndim == 2 and y.shape[1] == 1:
        return y.reshape(-1)
    raise ShapeMismatchError(f"_y must be a single-output target vector, got shape={y.shape}")


def check_target_length(y: np.ndarray, n_instances: int) -> None:
    if len(y) != n_instances:
        raise ShapeMismatchError(
            f"_y has {len(y)} values but _fit_X has {n_instances} training instances"
        )
