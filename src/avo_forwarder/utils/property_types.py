"""Property value classification into Avo type tags."""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from numbers import Real
from typing import Any


class PropertyType:
    """Map Python values onto the type tags the Avo schema expects.

    The tags match the Avo Rudderstack integration, which classifies
    JavaScript values; numbers are split into ``int``/``float`` by whether
    their JavaScript decimal rendering contains a ``.``.
    """

    @staticmethod
    def number_text(value: Real | Decimal) -> str:
        """Render a number the way JavaScript's ``String(n)`` does."""
        if isinstance(value, float) and math.isfinite(value) and value.is_integer():
            # JS drops the fractional part of integral floats: 3.0 -> "3"
            return str(int(value)) if abs(value) < 1e21 else repr(value)
        return str(value)

    @staticmethod
    def classify(value: Any) -> str:
        """Return the Avo type tag for ``value``."""
        if value is None:
            return "null"
        if isinstance(value, str):
            return "string"
        # bool is an int subclass, so it must be checked before numbers.
        if isinstance(value, bool):
            return "boolean"
        if isinstance(value, (Real, Decimal)):
            return "float" if "." in PropertyType.number_text(value) else "int"
        if isinstance(value, (list, tuple)):
            return "list"
        if isinstance(value, Mapping):
            return "object"
        return type(value).__name__
