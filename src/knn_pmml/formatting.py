"""Canonical number-to-text conversion for training instance cells.

A formatter turns one numeric value into the string stored in the
``InlineTable``. The output never depends on the process locale, and parsing
it back with ``float`` (or ``numpy.float32`` for the ``"float"`` formatter)
yields the original value.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from numbers import Integral, Real

import numpy as np

from knn_pmml.registries import Registry

ValueFormatter = Callable[[object], str]
VALUE_FORMATTER_REGISTRY = Registry[ValueFormatter]("value_formatter")

DEFAULT_VALUE_FORMAT = "double"

# Integral floats at or above these magnitudes keep exponent notation.
_DOUBLE_EXACT_INT = 2**53
_FLOAT_EXACT_INT = 2**24


def _as_real(value: object) -> Real:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, Real):
        raise TypeError(f"expected a real number, got {type(value).__name__}: {value!r}")
    return value


def _special(number: float) -> str | None:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "INF" if number > 0 else "-INF"
    return None


@VALUE_FORMATTER_REGISTRY.register("double")
def format_double(value: object) -> str:
    number = _as_real(value)
    if isinstance(number, Integral):
        return str(int(number))
    as_float = float(number)
    special = _special(as_float)
    if special is not None:
        return special
    if as_float.is_integer() and abs(as_float) < _DOUBLE_EXACT_INT:
        return str(int(as_float))
    return repr(as_float)


@VALUE_FORMATTER_REGISTRY.register("float")
def format_float(value: object) -> str:
    number = _as_real(value)
    with np.errstate(over="ignore"):
        single = np.float32(number)
    as_float = float(single)
    if math.isinf(as_float) and math.isfinite(float(number)):
        raise ValueError(f"{value!r} is outside the float32 range; use the double value format")
    special = _special(as_float)
    if special is not None:
        return special
    if as_float.is_integer() and abs(as_float) < _FLOAT_EXACT_INT:
        return str(int(as_float))
    # numpy prints the shortest digits that round-trip at float32 precision
    return str(single)


def make_value_formatter(name: str = DEFAULT_VALUE_FORMAT) -> ValueFormatter:
    return VALUE_FORMATTER_REGISTRY.get(name)


def list_value_formats() -> list[str]:
    return VALUE_FORMATTER_REGISTRY.list()
