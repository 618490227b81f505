"""Canonical text rendering for dimensions and quantities."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from ..core.dimensions import DimensionVector
from ..core.quantity import Quantity
from .table import DEFAULT_TABLE, UnitTable

BASE_SYMBOLS: Tuple[str, ...] = ("s", "m", "kg", "A", "K", "mol", "cd")

_INTEGRAL_LIMIT = 1e16


def format_dimension(vector: DimensionVector, *, table: Optional[UnitTable] = None) -> str:
    """Return the named symbol for ``vector`` or a sorted product of base units.

    >>> format_dimension(DimensionVector(time=-2, length=1))
    'm s^-2'
    """

    table = table or DEFAULT_TABLE
    named = table.display_symbol(vector)
    if named is not None:
        return named

    parts: List[Tuple[str, int]] = [
        (symbol, exponent)
        for symbol, exponent in zip(BASE_SYMBOLS, vector.exponents())
        if exponent != 0
    ]
    parts.sort(key=lambda item: item[0])
    return " ".join(
        symbol if exponent == 1 else f"{symbol}^{exponent}" for symbol, exponent in parts
    )


def format_magnitude(value: float) -> str:
    if math.isfinite(value) and value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
        return str(int(value))
    return repr(value)


def format_quantity(quantity: Quantity, *, table: Optional[UnitTable] = None) -> str:
    """Render ``quantity`` as ``"<magnitude> <dimension>"``."""
    return f"{format_magnitude(quantity.magnitude)} {format_dimension(quantity.dimension, table=table)}"


__all__ = ["BASE_SYMBOLS", "format_dimension", "format_magnitude", "format_quantity"]
