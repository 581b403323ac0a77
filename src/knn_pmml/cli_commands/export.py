from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from knn_pmml.config import ConfigError, ExportConfig, build_export_config, load_config
from knn_pmml.encoder import NearestNeighborModel, describe, encode_model
from knn_pmml.errors import EncodingError
from knn_pmml.estimators import (
    EstimatorLoadError,
    UnsupportedEstimatorError,
    attributes_from_estimator,
    load_estimator,
    schema_from_estimator,
)
from knn_pmml.logging_utils import get_logger, setup_logging
from knn_pmml.pmml import PMMLWriteError, write_pmml

logger = get_logger(__name__)

EXIT_ERROR = 2


def resolve_export_config(args: argparse.Namespace) -> ExportConfig:
    payload: dict[str, Any] = {}
    config_path = getattr(args, "config", None)
    if config_path:
        payload = load_config(Path(config_path))
    overrides = {
        "estimator": args.estimator,
        "output": args.output,
        "format": args.format,
        "target_field": args.target_field,
        "no_target": args.no_target,
        "active_fields": args.active_fields,
        "value_format": args.value_format,
        "log_level": args.log_level,
    }
    return build_export_config(payload=payload, overrides=overrides)


def write_json_model(path: Path, model: NearestNeighborModel) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fp:
        json.dump(model.to_dict(), fp, indent=2)
    return path


def run_export(cfg: ExportConfig) -> dict[str, Any]:
    estimator = load_estimator(cfg.estimator_path)
    schema = schema_from_estimator(
        estimator,
        target_field=cfg.target_field,
        active_fields=cfg.active_fields,
    )
    model = encode_model(attributes_from_estimator(estimator), schema, value_format=cfg.value_format)
    if cfg.output_format == "json":
        out_path = write_json_model(cfg.output_path, model)
    else:
        out_path = write_pmml(cfg.output_path, model)
    logger.info("wrote %s model to %s", cfg.output_format, out_path)
    return {"output": str(out_path), "format": cfg.output_format, **describe(model)}


def cmd_export(args: argparse.Namespace) -> int:
    try:
        cfg = resolve_export_config(args)
        setup_logging(cfg.log_level)
        summary = run_export(cfg)
    except (
        ConfigError,
        EncodingError,
        EstimatorLoadError,
        PMMLWriteError,
        UnsupportedEstimatorError,
        OSError,
    ) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    print(json.dumps(summary))
    return 0
