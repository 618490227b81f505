"""Physical quantity value type."""

from __future__ import annotations

from dataclasses import dataclass
import math

from ..errors import AddingTwoDifferentUnits, SubtractingTwoDifferentUnits
from .dimensions import DIMENSIONLESS, DimensionVector


@dataclass(frozen=True)
class Quantity:
    """A double-precision magnitude paired with its dimension.

    Multiplication and division always succeed and follow IEEE-754 for the
    magnitude, so dividing by zero yields ``inf`` or ``nan`` rather than an
    error. Addition and subtraction require identical dimensions.
    """

    magnitude: float
    dimension: DimensionVector = DIMENSIONLESS

    def __post_init__(self) -> None:
        if not isinstance(self.dimension, DimensionVector):
            raise TypeError("dimension must be a DimensionVector instance")
        object.__setattr__(self, "magnitude", float(self.magnitude))

    def __add__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.dimension != other.dimension:
            raise AddingTwoDifferentUnits(self.dimension, other.dimension)
        return Quantity(self.magnitude + other.magnitude, self.dimension)

    def __sub__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        if self.dimension != other.dimension:
            raise SubtractingTwoDifferentUnits(self.dimension, other.dimension)
        return Quantity(self.magnitude - other.magnitude, self.dimension)

    def __mul__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(self.magnitude * other.magnitude, self.dimension * other.dimension)

    def __truediv__(self, other: Quantity) -> Quantity:
        if not isinstance(other, Quantity):
            return NotImplemented
        try:
            magnitude = self.magnitude / other.magnitude
        except ZeroDivisionError:
            magnitude = _ieee_divide_by_zero(self.magnitude, other.magnitude)
        return Quantity(magnitude, self.dimension / other.dimension)

    def is_dimensionless(self) -> bool:
        return self.dimension.is_dimensionless()

    def __str__(self) -> str:
        from ..units.formatting import format_quantity

        return format_quantity(self)


def _ieee_divide_by_zero(numerator: float, denominator: float) -> float:
    # Python raises on x / 0.0; IEEE-754 gives a signed infinity or nan.
    if math.isnan(numerator) or numerator == 0.0:
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def add(a: Quantity, b: Quantity) -> Quantity:
    return a + b


def subtract(a: Quantity, b: Quantity) -> Quantity:
    return a - b


def multiply(a: Quantity, b: Quantity) -> Quantity:
    return a * b


def divide(a: Quantity, b: Quantity) -> Quantity:
    return a / b
