"""Encoding of fitted k-neighbors regressors into nearest neighbor models."""

from knn_pmml.encoder.attributes import Hyperparameters, TrainedState, read_hyperparameters, read_trained_state
from knn_pmml.encoder.fields import FieldLayout, Schema, map_fields
from knn_pmml.encoder.instances import InstanceTable, build_instance_table
from knn_pmml.encoder.measures import (
    CityBlock,
    ComparisonMeasure,
    Euclidean,
    Minkowski,
    encode_comparison_measure,
)
from knn_pmml.encoder.model import NearestNeighborModel, assemble_model, describe, encode_model
from knn_pmml.encoder.shape import check_target_length, derive_shape

__all__ = [
    "CityBlock",
    "ComparisonMeasure",
    "Euclidean",
    "FieldLayout",
    "Hyperparameters",
    "InstanceTable",
    "Minkowski",
    "NearestNeighborModel",
    "Schema",
    "TrainedState",
    "assemble_model",
    "build_instance_table",
    "check_target_length",
    "derive_shape",
    "describe",
    "encode_comparison_measure",
    "encode_model",
    "map_fields",
    "read_hyperparameters",
    "read_trained_state",
]
