from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

try:
    import tomllib as _toml
except ModuleNotFoundError:  # pragma: no cover - Python <=3.10
    import tomli as _toml  # type: ignore[no-redef]

try:
    import yaml as _yaml  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    _yaml = None


class ConfigError(ValueError):
    """Invalid or unsupported configuration file."""


def _as_mapping(path: Path, payload: object) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"config must be a mapping: {path}")
    return {str(key): value for key, value in payload.items()}


def _read_toml(path: Path) -> object:
    with path.open("rb") as fp:
        try:
            return _toml.load(fp)
        except _toml.TOMLDecodeError as exc:
            raise ConfigError(f"invalid TOML in {path}: {exc}") from exc


def _read_yaml(path: Path) -> object:
    if _yaml is None:
        raise ConfigError("YAML parsing requires optional dependency 'pyyaml'")
    with path.open("r", encoding="utf-8") as fp:
        try:
            return _yaml.safe_load(fp)
        except _yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc


def _read_json(path: Path) -> object:
    with path.open("r", encoding="utf-8") as fp:
        try:
            return json.load(fp)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"invalid JSON in {path}: {exc}") from exc


_READERS = {
    ".toml": _read_toml,
    "": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


def load_config(path: str | Path) -> dict[str, Any]:
    cfg_path = Path(path)
    if not cfg_path.exists() or not cfg_path.is_file():
        raise ConfigError(f"config file does not exist: {cfg_path}")

    suffix = cfg_path.suffix.lower()
    reader = _READERS.get(suffix)
    if reader is None:
        raise ConfigError(f"unsupported config extension: {suffix or '<none>'}")
    return _as_mapping(cfg_path, reader(cfg_path))
