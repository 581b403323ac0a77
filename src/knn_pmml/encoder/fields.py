from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from knn_pmml.errors import DuplicateFieldError, InvalidConfigurationError

DEFAULT_TARGET_FIELD = "y"


@dataclass(frozen=True)
class Schema:
    target_field: str | None
    active_fields: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.target_field is not None and not isinstance(self.target_field, str):
            raise InvalidConfigurationError(f"target field must be a string, got {self.target_field!r}")
        if isinstance(self.active_fields, str) or not isinstance(self.active_fields, Sequence):
            raise InvalidConfigurationError("active fields must be a sequence of names")
        object.__setattr__(self, "active_fields", tuple(str(name) for name in self.active_fields))

    @classmethod
    def default(cls, n_features: int, target_field: str | None = DEFAULT_TARGET_FIELD) -> Schema:
        return cls(
            target_field=target_field,
            active_fields=tuple(f"x{idx}" for idx in range(1, n_features + 1)),
        )


@dataclass(frozen=True)
class FieldLayout:
    """Column keys of the instance table and the fields fed to the distance."""

    target_field: str | None
    column_keys: tuple[str, ...]
    input_fields: tuple[str, ...]

    @property
    def has_target(self) -> bool:
        return self.target_field is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "target_field": self.target_field,
            "column_keys": list(self.column_keys),
            "input_fields": list(self.input_fields),
        }


def map_fields(schema: Schema) -> FieldLayout:
    keys: list[str] = []
    if schema.target_field is not None:
        keys.append(schema.target_field)
    keys.extend(schema.active_fields)

    seen: set[str] = set()
    for key in keys:
        if key in seen:
            raise DuplicateFieldError(f"field '{key}' appears more than once in {keys}")
        seen.add(key)

    return FieldLayout(
        target_field=schema.target_field,
        column_keys=tuple(keys),
        input_fields=tuple(schema.active_fields),
    )
