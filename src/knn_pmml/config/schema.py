from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from knn_pmml.config.loader import ConfigError
from knn_pmml.encoder.fields import DEFAULT_TARGET_FIELD
from knn_pmml.formatting import DEFAULT_VALUE_FORMAT, VALUE_FORMATTER_REGISTRY
from knn_pmml.logging_utils import default_log_level

OUTPUT_FORMATS = ("pmml", "json")


@dataclass(frozen=True)
class ExportConfig:
    estimator_path: Path
    output_path: Path
    output_format: str = "pmml"
    target_field: str | None = DEFAULT_TARGET_FIELD
    active_fields: tuple[str, ...] | None = None
    value_format: str = DEFAULT_VALUE_FORMAT
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        return {
            "estimator": str(self.estimator_path),
            "output": str(self.output_path),
            "format": self.output_format,
            "target_field": self.target_field,
            "active_fields": None if self.active_fields is None else list(self.active_fields),
            "value_format": self.value_format,
            "log_level": self.log_level,
        }


def _mapping(value: object) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return value
    return {}


def _normalize_field_list(value: object) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        names = [part.strip() for part in value.split(",") if part.strip()]
    elif isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        names = [str(item).strip() for item in value if str(item).strip()]
    else:
        raise ConfigError(f"active_fields must be a list or comma separated string, got {value!r}")
    return tuple(names) or None


def _normalize_target(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def build_export_config(
    *,
    payload: Mapping[str, Any],
    overrides: Mapping[str, Any] | None = None,
) -> ExportConfig:
    """Merge the ``[export]`` table of ``payload`` with non-None ``overrides``."""
    merged = {str(k): v for k, v in _mapping(payload.get("export")).items()}
    merged.update({str(k): v for k, v in _mapping(overrides).items() if v is not None})

    estimator = merged.get("estimator")
    output = merged.get("output")
    if not estimator:
        raise ConfigError("export.estimator is required")
    if not output:
        raise ConfigError("export.output is required")

    output_format = str(merged.get("format", "pmml")).lower()
    if output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"unsupported export.format='{output_format}'; use one of {list(OUTPUT_FORMATS)}")

    value_format = str(merged.get("value_format", DEFAULT_VALUE_FORMAT)).strip().lower()
    if value_format not in VALUE_FORMATTER_REGISTRY:
        raise ConfigError(
            f"unsupported export.value_format='{value_format}'; use one of {VALUE_FORMATTER_REGISTRY.list()}"
        )

    if bool(merged.get("no_target", False)):
        target_field = None
    else:
        target_field = _normalize_target(merged.get("target_field", DEFAULT_TARGET_FIELD))

    return ExportConfig(
        estimator_path=Path(str(estimator)),
        output_path=Path(str(output)),
        output_format=output_format,
        target_field=target_field,
        active_fields=_normalize_field_list(merged.get("active_fields")),
        value_format=value_format,
        log_level=str(merged.get("log_level", default_log_level())).upper(),
    )
