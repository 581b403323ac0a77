"""Export fitted k-nearest-neighbors regressors as PMML nearest neighbor models."""

from knn_pmml.encoder import NearestNeighborModel, Schema, encode_model
from knn_pmml.errors import EncodingError

__version__ = "0.1.0"

__all__ = [
    "EncodingError",
    "NearestNeighborModel",
    "Schema",
    "__version__",
    "encode_model",
]
