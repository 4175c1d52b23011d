"""Tests for property type classification."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from avo_forwarder.utils.property_types import PropertyType


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "null"),
        ("x", "string"),
        ("", "string"),
        (3, "int"),
        (-7, "int"),
        (3.5, "float"),
        (True, "boolean"),
        (False, "boolean"),
        ([1, 2], "list"),
        ((1, 2), "list"),
        ({"a": 1}, "object"),
    ],
)
def test_classify(value: object, expected: str) -> None:
    """Common JSON values map onto the Avo type tags."""
    assert PropertyType.classify(value) == expected


def test_integral_float_is_int() -> None:
    """3.0 renders as "3" in the partner's number format, so it is an int."""
    assert PropertyType.classify(3.0) == "int"


def test_exponent_without_fraction_is_int() -> None:
    """1e-07 has no "." in its decimal rendering."""
    assert PropertyType.classify(1e-7) == "int"
    assert PropertyType.classify(1.5e-7) == "float"


def test_non_finite_floats_are_int() -> None:
    """nan and inf render without a "."."""
    assert PropertyType.classify(float("nan")) == "int"
    assert PropertyType.classify(float("inf")) == "int"


def test_decimal_uses_its_rendering() -> None:
    """Decimal values are numbers and follow the same rule."""
    assert PropertyType.classify(Decimal("2.50")) == "float"
    assert PropertyType.classify(Decimal("2")) == "int"


def test_fallback_is_type_name() -> None:
    """Unknown values fall back to their Python type name."""
    assert PropertyType.classify(datetime(2024, 1, 1)) == "datetime"
    assert PropertyType.classify({1, 2}) == "set"
