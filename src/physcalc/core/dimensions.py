"""Dimensional algebra over the seven SI base quantities.

A :class:`DimensionVector` stores one signed integer exponent per base
quantity in the order ``(T, L, M, I, Θ, N, J)``: time, length, mass, electric
current, thermodynamic temperature, amount of substance and luminous
intensity. Vectors form a multiplicative group: multiplying adds exponents,
dividing subtracts them and the all-zero vector is the identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


BASE_FIELDS: Tuple[str, ...] = (
    "time",
    "length",
    "mass",
    "current",
    "temperature",
    "amount",
    "luminosity",
)


@dataclass(frozen=True)
class DimensionVector:
    """Integer exponents of the SI base quantities."""

    time: int = 0
    length: int = 0
    mass: int = 0
    current: int = 0
    temperature: int = 0
    amount: int = 0
    luminosity: int = 0

    def __post_init__(self) -> None:
        """Ensure all exponents are integers."""
        for field in BASE_FIELDS:
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Dimension exponent {field} must be an integer, got {type(value)}"
                )

    @classmethod
    def from_exponents(cls, exponents: Tuple[int, ...]) -> DimensionVector:
        if len(exponents) != len(BASE_FIELDS):
            raise ValueError(
                f"Expected {len(BASE_FIELDS)} exponents, got {len(exponents)}"
            )
        return cls(*exponents)

    @classmethod
    def dimensionless(cls) -> DimensionVector:
        """Construct the identity vector."""
        return cls()

    # -- Core algebra -----------------------------------------------------
    def __mul__(self, other: DimensionVector) -> DimensionVector:
        """Multiply two dimensions by adding their exponent vectors."""
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return DimensionVector(*[a + b for a, b in zip(self.exponents(), other.exponents())])

    def __truediv__(self, other: DimensionVector) -> DimensionVector:
        """Divide two dimensions by subtracting exponent vectors."""
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return DimensionVector(*[a - b for a, b in zip(self.exponents(), other.exponents())])

    def __pow__(self, exponent: int) -> DimensionVector:
        """Scale every exponent by an integer power."""
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            raise TypeError(f"Dimension exponent must be integer, got {type(exponent)}")
        return DimensionVector(*[value * exponent for value in self.exponents()])

    # -- Helpers ----------------------------------------------------------
    def exponents(self) -> Tuple[int, ...]:
        return tuple(getattr(self, field) for field in BASE_FIELDS)

    def as_dict(self) -> dict:
        return dict(zip(BASE_FIELDS, self.exponents()))

    def is_dimensionless(self) -> bool:
        """Return ``True`` when all exponents are zero."""
        return all(value == 0 for value in self.exponents())

    def __str__(self) -> str:
        from ..units.formatting import format_dimension

        return format_dimension(self)


def multiply(a: DimensionVector, b: DimensionVector) -> DimensionVector:
    return a * b


def divide(a: DimensionVector, b: DimensionVector) -> DimensionVector:
    return a / b


def equals(a: DimensionVector, b: DimensionVector) -> bool:
    return a == b


DIMENSIONLESS = DimensionVector.dimensionless()
TIME = DimensionVector(time=1)
LENGTH = DimensionVector(length=1)
MASS = DimensionVector(mass=1)
CURRENT = DimensionVector(current=1)
TEMPERATURE = DimensionVector(temperature=1)
AMOUNT = DimensionVector(amount=1)
LUMINOSITY = DimensionVector(luminosity=1)

FREQUENCY = DIMENSIONLESS / TIME
VELOCITY = LENGTH / TIME
ACCELERATION = LENGTH / (TIME**2)
FORCE = MASS * ACCELERATION
PRESSURE = FORCE / (LENGTH**2)
ENERGY = FORCE * LENGTH
POWER = ENERGY / TIME
CHARGE = CURRENT * TIME
VOLTAGE = POWER / CURRENT
MAGNETIC_FLUX = VOLTAGE * TIME
MAGNETIC_FLUX_DENSITY = MAGNETIC_FLUX / (LENGTH**2)
CAPACITANCE = CHARGE / VOLTAGE
RESISTANCE = VOLTAGE / CURRENT
CONDUCTANCE = CURRENT / VOLTAGE
INDUCTANCE = MAGNETIC_FLUX / CURRENT
CATALYTIC_ACTIVITY = AMOUNT / TIME
AREA = LENGTH**2
VOLUME = LENGTH**3
VOLUMETRIC_FLOW = VOLUME / TIME
MOMENTUM = MASS * VELOCITY
