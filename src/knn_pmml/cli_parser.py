from __future__ import annotations

import argparse
from typing import Any

from knn_pmml import __version__
from knn_pmml.cli_commands.export import cmd_export
from knn_pmml.config.schema import OUTPUT_FORMATS
from knn_pmml.formatting import list_value_formats


def _set_command_handler(parser: argparse.ArgumentParser, handler: Any) -> None:
    parser.set_defaults(handler=handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="knn-pmml",
        description="Export fitted k-nearest-neighbors regressors as PMML.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")
    export = subparsers.add_parser("export", help="Encode a joblib-pickled KNeighborsRegressor.")
    export.add_argument("--config", help="Path to TOML/YAML/JSON config with an [export] table.")
    export.add_argument("--estimator", help="Path to the pickled estimator (joblib).")
    export.add_argument("--output", help="Destination file.")
    export.add_argument("--format", choices=list(OUTPUT_FORMATS), help="Output document format (default: pmml).")
    export.add_argument("--target-field", dest="target_field", help="Target field name (default: y).")
    export.add_argument(
        "--no-target",
        dest="no_target",
        action="store_true",
        default=None,
        help="Leave the target column out of the training instances.",
    )
    export.add_argument(
        "--active-fields",
        dest="active_fields",
        help="Comma-separated feature names (default: feature_names_in_ or x1..xn).",
    )
    export.add_argument(
        "--value-format",
        dest="value_format",
        choices=list_value_formats(),
        help="Numeric formatting of table cells (default: double).",
    )
    export.add_argument("--log-level", dest="log_level", help="Logging level (default: $KNN_PMML_LOG_LEVEL or WARNING).")
    _set_command_handler(export, cmd_export)
    return parser
