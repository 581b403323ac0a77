from __future__ import annotations

from pathlib import Path

import pytest

from knn_pmml.config import ConfigError, build_export_config, load_config


def test_load_toml(tmp_path):
    path = tmp_path / "export.toml"
    path.write_text(
        '[export]\nestimator = "model.joblib"\noutput = "model.pmml"\nactive_fields = ["a", "b"]\n',
        encoding="utf-8",
    )
    payload = load_config(path)
    assert payload["export"]["active_fields"] == ["a", "b"]


def test_load_yaml(tmp_path):
    path = tmp_path / "export.yaml"
    path.write_text("export:\n  estimator: model.joblib\n  value_format: float\n", encoding="utf-8")
    assert load_config(path) == {"export": {"estimator": "model.joblib", "value_format": "float"}}


def test_load_json(tmp_path):
    path = tmp_path / "export.json"
    path.write_text('{"export": {"format": "json"}}', encoding="utf-8")
    assert load_config(path) == {"export": {"format": "json"}}


def test_load_errors(tmp_path):
    with pytest.raises(ConfigError, match="does not exist"):
        load_config(tmp_path / "missing.toml")

    ini = tmp_path / "export.ini"
    ini.write_text("[export]\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="unsupported config extension"):
        load_config(ini)

    bad = tmp_path / "bad.toml"
    bad.write_text("export = [\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid TOML"):
        load_config(bad)

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="must be a mapping"):
        load_config(listing)


def test_defaults(monkeypatch):
    monkeypatch.delenv("KNN_PMML_LOG_LEVEL", raising=False)
    cfg = build_export_config(payload={"export": {"estimator": "m.joblib", "output": "m.pmml"}})

    assert cfg.estimator_path == Path("m.joblib")
    assert cfg.output_path == Path("m.pmml")
    assert cfg.output_format == "pmml"
    assert cfg.target_field == "y"
    assert cfg.active_fields is None
    assert cfg.value_format == "double"
    assert cfg.log_level == "WARNING"


def test_overrides_win_and_none_is_ignored():
    cfg = build_export_config(
        payload={"export": {"estimator": "m.joblib", "output": "m.pmml", "target_field": "price"}},
        overrides={"output": "other.json", "format": "JSON", "target_field": None, "active_fields": "a, b ,c"},
    )

    assert cfg.output_path == Path("other.json")
    assert cfg.output_format == "json"
    assert cfg.target_field == "price"
    assert cfg.active_fields == ("a", "b", "c")


@pytest.mark.parametrize("payload", [{"target_field": ""}, {"no_target": True}])
def test_target_can_be_dropped(payload):
    cfg = build_export_config(payload={"export": {"estimator": "m", "output": "o", **payload}})
    assert cfg.target_field is None


def test_log_level_from_environment(monkeypatch):
    monkeypatch.setenv("KNN_PMML_LOG_LEVEL", "debug")
    cfg = build_export_config(payload={}, overrides={"estimator": "m", "output": "o"})
    assert cfg.log_level == "DEBUG"


@pytest.mark.parametrize(
    ("export", "message"),
    [
        ({"output": "o"}, "estimator is required"),
        ({"estimator": "m"}, "output is required"),
        ({"estimator": "m", "output": "o", "format": "onnx"}, "unsupported export.format"),
        ({"estimator": "m", "output": "o", "value_format": "decimal"}, "unsupported export.value_format"),
        ({"estimator": "m", "output": "o", "active_fields": 3}, "active_fields"),
    ],
)
def test_invalid_export_tables(export, message):
    with pytest.raises(ConfigError, match=message):
        build_export_config(payload={"export": export})


def test_value_format_is_case_insensitive():
    cfg = build_export_config(payload={"export": {"estimator": "m", "output": "o", "value_format": "Float"}})
    assert cfg.value_format == "float"
