from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any

import numpy as np

from knn_pmml.errors import InvalidConfigurationError, MissingAttributeError

AttributeStore = Mapping[str, Any]

HYPERPARAMETER_KEYS = ("n_neighbors", "weights", "metric", "p")
FIT_X_KEY = "_fit_X"
Y_KEY = "_y"
N_FEATURES_KEY = "n_features_in_"

_NUMERIC_KINDS = frozenset("iuf")


@dataclass(frozen=True)
class Hyperparameters:
    n_neighbors: int
    weights: str
    metric: str
    p: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "n_neighbors": self.n_neighbors,
            "weights": self.weights,
            "metric": self.metric,
            "p": self.p,
        }


@dataclass(frozen=True, eq=False)
class TrainedState:
    """Validated learned state of a fitted k-neighbors regressor."""

    hyperparameters: Hyperparameters
    fit_x: np.ndarray
    y: np.ndarray
    n_features_hint: int | None = None


def _require(attributes: AttributeStore, key: str) -> Any:
    value = attributes.get(key)
    if value is None:
        raise MissingAttributeError(f"missing required attribute '{key}'")
    return value


def _as_positive_int(key: str, value: object) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise InvalidConfigurationError(f"{key} must be a positive integer, got {value!r}")
    if isinstance(value, Integral):
        out = int(value)
    elif isinstance(value, Real):
        number = float(value)
        if not math.isfinite(number) or not number.is_integer():
            raise InvalidConfigurationError(f"{key} must be integral, got {value!r}")
        out = int(number)
    else:
        raise InvalidConfigurationError(
            f"{key} must be a number, got {type(value).__name__}: {value!r}"
        )
    if out <= 0:
        raise InvalidConfigurationError(f"{key} must be a positive integer, got {out}")
    return out


def _as_str(key: str, value: object) -> str:
    if not isinstance(value, str):
        raise InvalidConfigurationError(
            f"{key} must be a string, got {type(value).__name__}: {value!r}"
        )
    return str(value)


def _as_numeric_array(key: str, value: object) -> np.ndarray:
    try:
        array = np.asarray(value)
    except (TypeError, ValueError) as exc:
        raise InvalidConfigurationError(f"{key} is not an array: {exc}") from exc
    if array.dtype.kind not in _NUMERIC_KINDS:
        raise InvalidConfigurationError(f"{key} must be numeric, got dtype={array.dtype}")
    return array


def read_hyperparameters(attributes: AttributeStore) -> Hyperparameters:
    return Hyperparameters(
        n_neighbors=_as_positive_int("n_neighbors", _require(attributes, "n_neighbors")),
        weights=_as_str("weights", _require(attributes, "weights")),
        metric=_as_str("metric", _require(attributes, "metric")),
        p=_as_positive_int("p", _require(attributes, "p")),
    )


def read_trained_state(attributes: AttributeStore) -> TrainedState:
    """Read and coerce everything the encoder needs from ``attributes``.

    This is the only place where raw attribute values are inspected; later
    stages work on the typed result.
    """
    hyperparameters = read_hyperparameters(attributes)
    fit_x = _as_numeric_array(FIT_X_KEY, _require(attributes, FIT_X_KEY))
    y = _as_numeric_array(Y_KEY, _require(attributes, Y_KEY))
    hint_raw = attributes.get(N_FEATURES_KEY)
    n_features_hint = None if hint_raw is None else _as_positive_int(N_FEATURES_KEY, hint_raw)
    return TrainedState(
        hyperparameters=hyperparameters,
        fit_x=fit_x,
        y=y,
        n_features_hint=n_features_hint,
    )
