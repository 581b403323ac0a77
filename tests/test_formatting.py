from __future__ import annotations

import math

import numpy as np
import pytest

from knn_pmml.formatting import format_double, format_float, list_value_formats, make_value_formatter


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (10.0, "10"),
        (10, "10"),
        (np.int32(-7), "-7"),
        (np.float64(0.1), "0.1"),
        (-2.5, "-2.5"),
        (1e16, "1e+16"),
        (1.5e-7, "1.5e-07"),
        (float("nan"), "NaN"),
        (float("inf"), "INF"),
        (float("-inf"), "-INF"),
    ],
)
def test_double_format(value, expected):
    assert format_double(value) == expected


def test_double_round_trips():
    rng = np.random.default_rng(0)
    values = np.concatenate([rng.normal(size=100), rng.normal(size=100) * 1e12, rng.normal(size=100) * 1e-9])
    for value in values:
        assert float(format_double(value)) == float(value)


def test_float_format_is_shortest_at_single_precision():
    assert format_float(0.1) == "0.1"
    assert format_float(np.float32(3.25)) == "3.25"
    assert format_float(4.0) == "4"


def test_float_round_trips():
    rng = np.random.default_rng(1)
    for value in rng.normal(size=200).astype(np.float32):
        assert np.float32(format_float(value)) == value


def test_special_values_float():
    assert format_float(np.float32("nan")) == "NaN"
    assert format_float(-math.inf) == "-INF"


def test_float_overflow_rejected():
    with pytest.raises(ValueError, match="float32 range"):
        format_float(1e40)
    with pytest.raises(ValueError):
        format_float(-3.5e38)
    assert format_double(1e40) == "1e+40"
    assert format_float(math.inf) == "INF"


@pytest.mark.parametrize("value", [True, "1.0", None])
def test_non_numbers_rejected(value):
    with pytest.raises(TypeError):
        format_double(value)


def test_registry_lookup():
    assert list_value_formats() == ["double", "float"]
    assert make_value_formatter() is format_double
    assert make_value_formatter("float") is format_float
    with pytest.raises(KeyError, match="available=double, float"):
        make_value_formatter("decimal")


def test_registry_keys_ignore_case():
    assert make_value_formatter(" DOUBLE ") is format_double
