"""Core value model for physcalc."""

from .dimensions import (
    ACCELERATION,
    AREA,
    BASE_FIELDS,
    DIMENSIONLESS,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    MOMENTUM,
    POWER,
    PRESSURE,
    TIME,
    VELOCITY,
    VOLUME,
    DimensionVector,
)
from .quantity import Quantity

__all__ = [
    "ACCELERATION",
    "AREA",
    "BASE_FIELDS",
    "DIMENSIONLESS",
    "ENERGY",
    "FORCE",
    "LENGTH",
    "MASS",
    "MOMENTUM",
    "POWER",
    "PRESSURE",
    "TIME",
    "VELOCITY",
    "VOLUME",
    "DimensionVector",
    "Quantity",
]
