"""Configuration loading and normalization helpers."""

from knn_pmml.config.loader import ConfigError, load_config
from knn_pmml.config.schema import ExportConfig, build_export_config

__all__ = [
    "ConfigError",
    "ExportConfig",
    "build_export_config",
    "load_config",
]
