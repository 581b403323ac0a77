from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np

from knn_pmml.encoder.fields import FieldLayout
from knn_pmml.encoder.shape import check_target_length
from knn_pmml.errors import InvalidConfigurationError, ShapeMismatchError
from knn_pmml.formatting import ValueFormatter, format_double


@dataclass(frozen=True)
class InstanceTable:
    column_keys: tuple[str, ...]
    rows: tuple[dict[str, str], ...]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[dict[str, str]]:
        return iter(self.rows)

    def column(self, key: str) -> list[str]:
        if key not in self.column_keys:
            raise KeyError(f"unknown column '{key}'. available={list(self.column_keys)}")
        return [row[key] for row in self.rows]

    def to_dict(self) -> dict[str, Any]:
        return {
            "columns": list(self.column_keys),
            "rows": [dict(row) for row in self.rows],
        }


def build_instance_table(
    fit_x: np.ndarray,
    y: np.ndarray,
    layout: FieldLayout,
    *,
    formatter: ValueFormatter = format_double,
) -> InstanceTable:
    """Lay out one formatted row per training instance.

    ``fit_x`` is the reshaped ``(n_instances, n_features)`` matrix. A row is
    the target value (when the layout has a target field) followed by the
    instance's features, keyed by ``layout.column_keys``.
    """
    n_instances, n_features = (int(dim) for dim in fit_x.shape)
    check_target_length(y, n_instances)

    width = n_features + (1 if layout.has_target else 0)
    if width != len(layout.column_keys):
        raise ShapeMismatchError(
            f"training instances have {width} values but the schema names "
            f"{len(layout.column_keys)} columns {list(layout.column_keys)}"
        )

    rows: list[dict[str, str]] = []
    for i in range(n_instances):
        values: list[Any] = [y[i]] if layout.has_target else []
        values.extend(fit_x[i])
        try:
            cells = [formatter(value) for value in values]
        except ValueError as exc:
            raise InvalidConfigurationError(f"training instance {i}: {exc}") from exc
        rows.append(dict(zip(layout.column_keys, cells)))
    return InstanceTable(column_keys=layout.column_keys, rows=tuple(rows))
