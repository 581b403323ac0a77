from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from knn_pmml.encoder.attributes import AttributeStore, Hyperparameters, read_trained_state
from knn_pmml.encoder.fields import FieldLayout, Schema, map_fields
from knn_pmml.encoder.instances import InstanceTable, build_instance_table
from knn_pmml.encoder.measures import ComparisonMeasure, encode_comparison_measure
from knn_pmml.encoder.shape import as_matrix, as_target_vector, check_target_length, derive_shape
from knn_pmml.errors import UnsupportedWeightingError
from knn_pmml.formatting import DEFAULT_VALUE_FORMAT, make_value_formatter
from knn_pmml.logging_utils import get_logger

logger = get_logger(__name__)

SUPPORTED_WEIGHTS = "uniform"


class MiningFunction(str, Enum):
    REGRESSION = "regression"


class ContinuousScoringMethod(str, Enum):
    AVERAGE = "average"


@dataclass(frozen=True)
class NearestNeighborModel:
    """Portable description of a fitted k-neighbors regressor."""

    number_of_neighbors: int
    comparison_measure: ComparisonMeasure
    fields: FieldLayout
    training_instances: InstanceTable
    function_name: MiningFunction = MiningFunction.REGRESSION
    continuous_scoring_method: ContinuousScoringMethod = ContinuousScoringMethod.AVERAGE
    is_transformed: bool = True
    target_data_type: str = "double"
    feature_data_type: str = "float"

    @property
    def target_field(self) -> str | None:
        return self.fields.target_field

    @property
    def active_fields(self) -> tuple[str, ...]:
        return self.fields.input_fields

    @property
    def instance_fields(self) -> dict[str, str]:
        # field name -> InlineTable column
        return {key: key for key in self.fields.column_keys}

    def to_dict(self) -> dict[str, Any]:
        return {
            "function_name": self.function_name.value,
            "number_of_neighbors": self.number_of_neighbors,
            "continuous_scoring_method": self.continuous_scoring_method.value,
            "comparison_measure": self.comparison_measure.to_dict(),
            "target_field": self.target_field,
            "active_fields": list(self.active_fields),
            "instance_fields": self.instance_fields,
            "training_instances": {
                "is_transformed": self.is_transformed,
                **self.training_instances.to_dict(),
            },
        }


def assemble_model(
    hyperparameters: Hyperparameters,
    layout: FieldLayout,
    table: InstanceTable,
    measure: ComparisonMeasure,
) -> NearestNeighborModel:
    if hyperparameters.weights != SUPPORTED_WEIGHTS:
        raise UnsupportedWeightingError(
            f"unsupported weights '{hyperparameters.weights}'; only '{SUPPORTED_WEIGHTS}' can be encoded"
        )
    return NearestNeighborModel(
        number_of_neighbors=hyperparameters.n_neighbors,
        comparison_measure=measure,
        fields=layout,
        training_instances=table,
    )


def encode_model(
    attributes: AttributeStore,
    schema: Schema,
    *,
    value_format: str = DEFAULT_VALUE_FORMAT,
) -> NearestNeighborModel:
    """Encode the attribute store of a fitted regressor against ``schema``.

    Raises a subclass of ``knn_pmml.errors.EncodingError`` when the state
    cannot be represented; nothing is returned in that case.
    """
    formatter = make_value_formatter(value_format)
    state = read_trained_state(attributes)
    params = state.hyperparameters

    shape = derive_shape(state.fit_x, 2, n_features=state.n_features_hint)
    n_instances, n_features = shape
    y = as_target_vector(state.y)
    check_target_length(y, n_instances)
    logger.debug("encoding %d training instances with %d features", n_instances, n_features)

    layout = map_fields(schema)
    table = build_instance_table(as_matrix(state.fit_x, shape), y, layout, formatter=formatter)
    measure = encode_comparison_measure(params.metric, params.p)
    logger.debug("comparison measure: %s", measure.measure.element)

    if params.n_neighbors > n_instances:
        logger.warning(
            "n_neighbors=%d exceeds the %d training instances; scorers will see fewer neighbors",
            params.n_neighbors,
            n_instances,
        )
    return assemble_model(params, layout, table, measure)


def describe(model: NearestNeighborModel) -> Mapping[str, Any]:
    return {
        "function_name": model.function_name.value,
        "number_of_neighbors": model.number_of_neighbors,
        "measure": model.comparison_measure.measure.element,
        "instances": len(model.training_instances),
        "columns": len(model.fields.column_keys),
    }
