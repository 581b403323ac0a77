from __future__ import annotations

import pickle
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import joblib
from sklearn.neighbors import KNeighborsRegressor

from knn_pmml.encoder.fields import DEFAULT_TARGET_FIELD, Schema
from knn_pmml.errors import MissingAttributeError

ESTIMATOR_ATTRIBUTES = ("n_neighbors", "weights", "metric", "p", "_fit_X", "_y", "n_features_in_")
FITTED_ATTRIBUTES = ("_fit_X", "_y")


class UnsupportedEstimatorError(TypeError):
    """Object is not a k-neighbors regressor this package can encode."""


class EstimatorLoadError(ValueError):
    """File exists but does not unpickle into an estimator."""


def load_estimator(path: str | Path) -> Any:
    resolved = Path(path)
    if not resolved.exists() or not resolved.is_file():
        raise FileNotFoundError(f"estimator file does not exist: {resolved}")
    try:
        return joblib.load(resolved)
    except (pickle.UnpicklingError, EOFError, KeyError, IndexError, ValueError) as exc:
        raise EstimatorLoadError(f"cannot unpickle estimator from {resolved}: {exc!r}") from exc


def _require_regressor(estimator: object) -> KNeighborsRegressor:
    if not isinstance(estimator, KNeighborsRegressor):
        raise UnsupportedEstimatorError(
            f"expected a fitted sklearn.neighbors.KNeighborsRegressor, got {type(estimator).__name__}"
        )
    missing = [name for name in FITTED_ATTRIBUTES if getattr(estimator, name, None) is None]
    if missing:
        raise MissingAttributeError(f"estimator is not fitted (missing {missing})")
    return estimator


def attributes_from_estimator(estimator: object) -> dict[str, Any]:
    regressor = _require_regressor(estimator)
    return {name: getattr(regressor, name, None) for name in ESTIMATOR_ATTRIBUTES}


def schema_from_estimator(
    estimator: object,
    *,
    target_field: str | None = DEFAULT_TARGET_FIELD,
    active_fields: Sequence[str] | None = None,
) -> Schema:
    regressor = _require_regressor(estimator)
    if active_fields is not None:
        return Schema(target_field=target_field, active_fields=tuple(active_fields))
    names = getattr(regressor, "feature_names_in_", None)
    if names is not None:
        return Schema(target_field=target_field, active_fields=tuple(str(name) for name in names))
    return Schema.default(int(regressor.n_features_in_), target_field=target_field)
