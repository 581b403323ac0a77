from __future__ import annotations

from typing import Any

import numpy as np
import pytest


@pytest.fixture
def scenario_attributes() -> dict[str, Any]:
    """Three instances, two features, Euclidean distance."""
    return {
        "n_neighbors": 2,
        "weights": "uniform",
        "metric": "minkowski",
        "p": 2,
        "_fit_X": np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0]),
        "_y": np.array([10.0, 20.0, 30.0]),
        "n_features_in_": 2,
    }
