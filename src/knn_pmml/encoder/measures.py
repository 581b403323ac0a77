from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from knn_pmml.errors import UnsupportedMetricError

SUPPORTED_METRIC = "minkowski"


class ComparisonKind(str, Enum):
    DISTANCE = "distance"


class CompareFunction(str, Enum):
    ABS_DIFF = "absDiff"


@dataclass(frozen=True)
class CityBlock:
    element: str = field(default="cityBlock", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"measure": self.element}


@dataclass(frozen=True)
class Euclidean:
    element: str = field(default="euclidean", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"measure": self.element}


@dataclass(frozen=True)
class Minkowski:
    p_parameter: int
    element: str = field(default="minkowski", init=False)

    def to_dict(self) -> dict[str, Any]:
        return {"measure": self.element, "p_parameter": self.p_parameter}


Measure = CityBlock | Euclidean | Minkowski


@dataclass(frozen=True)
class ComparisonMeasure:
    measure: Measure
    kind: ComparisonKind = ComparisonKind.DISTANCE
    compare_function: CompareFunction = CompareFunction.ABS_DIFF

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "compare_function": self.compare_function.value,
            **self.measure.to_dict(),
        }


def encode_comparison_measure(metric: str, p: int) -> ComparisonMeasure:
    if metric != SUPPORTED_METRIC:
        raise UnsupportedMetricError(
            f"unsupported metric '{metric}'; only '{SUPPORTED_METRIC}' can be encoded"
        )
    if p == 1:
        measure: Measure = CityBlock()
    elif p == 2:
        measure = Euclidean()
    else:
        measure = Minkowski(p_parameter=p)
    return ComparisonMeasure(measure=measure)
