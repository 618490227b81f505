"""Symbol table of SI base and derived units."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..core import dimensions as dims
from ..core.dimensions import DIMENSIONLESS, DimensionVector
from ..errors import UnknownUnitSymbol

logger = logging.getLogger(__name__)


_KINDS: Tuple[Tuple[str, DimensionVector], ...] = (
    ("Dimensionless", DIMENSIONLESS),
    ("Time", dims.TIME),
    ("Length", dims.LENGTH),
    ("Mass", dims.MASS),
    ("Current", dims.CURRENT),
    ("Temperature", dims.TEMPERATURE),
    ("AmountOfSubstance", dims.AMOUNT),
    ("LuminousIntensity", dims.LUMINOSITY),
    ("Frequency", dims.FREQUENCY),
    ("Force", dims.FORCE),
    ("Pressure", dims.PRESSURE),
    ("Energy", dims.ENERGY),
    ("Power", dims.POWER),
    ("ElectricCharge", dims.CHARGE),
    ("ElectricPotential", dims.VOLTAGE),
    ("MagneticFlux", dims.MAGNETIC_FLUX),
    ("MagneticFluxDensity", dims.MAGNETIC_FLUX_DENSITY),
    ("ElectricalCapacitance", dims.CAPACITANCE),
    ("ElectricalResistance", dims.RESISTANCE),
    ("ElectricalConductance", dims.CONDUCTANCE),
    ("ElectricalInductance", dims.INDUCTANCE),
    ("CatalyticActivity", dims.CATALYTIC_ACTIVITY),
    ("Area", dims.AREA),
    ("Volume", dims.VOLUME),
    ("Speed", dims.VELOCITY),
    ("Acceleration", dims.ACCELERATION),
    ("VolumetricFlow", dims.VOLUMETRIC_FLOW),
    ("Momentum", dims.MOMENTUM),
)

KIND_NAMES: Mapping[DimensionVector, str] = MappingProxyType(
    {vector: name for name, vector in _KINDS}
)


class UnitTable:
    """Read-only mapping from unit symbol to :class:`DimensionVector`.

    Parameters
    ----------
    strict:
        When ``True`` (the default) an unknown symbol raises
        :class:`~physcalc.errors.UnknownUnitSymbol`. When ``False`` the
        symbol is treated as dimensionless and a warning is logged, which
        reproduces the behaviour of older releases of the tool.
    """

    def __init__(self, *, strict: bool = True) -> None:
        self.strict = strict
        self._units: Dict[str, DimensionVector] = {}
        self._display: Dict[DimensionVector, str] = {DIMENSIONLESS: "dimensionless"}
        self._install_defaults()

    # ------------------------------------------------------------------
    def _register(self, symbol: str, vector: DimensionVector, *, aliases: Tuple[str, ...] = ()) -> None:
        for key in (symbol, *aliases):
            self._units[key] = vector
        self._display.setdefault(vector, symbol)

    def _install_defaults(self) -> None:
        self._register("s", dims.TIME)
        self._register("m", dims.LENGTH)
        self._register("kg", dims.MASS)
        self._register("A", dims.CURRENT)
        self._register("K", dims.TEMPERATURE)
        self._register("mol", dims.AMOUNT)
        self._register("cd", dims.LUMINOSITY)

        # Derived SI, exponents in (T, L, M, I, Θ, N, J) order
        self._register("Hz", DimensionVector(-1, 0, 0, 0))
        self._register("N", DimensionVector(-2, 1, 1, 0))
        self._register("Pa", DimensionVector(-2, -1, 1, 0))
        self._register("J", DimensionVector(-2, 2, 1, 0))
        self._register("W", DimensionVector(-3, 2, 1, 0))
        self._register("C", DimensionVector(1, 0, 0, 1))
        self._register("V", DimensionVector(-3, 2, 1, -1))
        self._register("Wb", DimensionVector(-2, 2, 1, -1))
        self._register("T", DimensionVector(-2, 0, 1, -1))
        self._register("F", DimensionVector(4, -2, -1, 2))
        self._register("Ω", DimensionVector(-3, 2, 1, -2), aliases=("ohm",))
        self._register("S", DimensionVector(3, -2, -1, 2))
        self._register("H", DimensionVector(-2, 2, 1, -2))
        self._register("kat", DimensionVector(-1, 0, 0, 0, 0, 1, 0))

    # ------------------------------------------------------------------
    def lookup(self, symbol: str, exponent: int = 1) -> DimensionVector:
        """Return the dimension of ``symbol`` raised to ``exponent``."""

        vector = self._units.get(symbol)
        if vector is None:
            if self.strict:
                raise UnknownUnitSymbol(symbol)
            logger.warning("Unknown unit symbol %r treated as dimensionless", symbol)
            return DIMENSIONLESS
        return vector**exponent

    def display_symbol(self, vector: DimensionVector) -> Optional[str]:
        """Return the canonical symbol whose dimension is exactly ``vector``."""
        return self._display.get(vector)

    def symbols(self) -> List[str]:
        return list(self._units)

    def items(self) -> Iterator[Tuple[str, DimensionVector]]:
        return iter(self._units.items())

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._units

    def __len__(self) -> int:
        return len(self._units)


DEFAULT_TABLE = UnitTable()
LENIENT_TABLE = UnitTable(strict=False)


def get_table(strict: bool = True) -> UnitTable:
    return DEFAULT_TABLE if strict else LENIENT_TABLE


def lookup(symbol: str, exponent: int = 1) -> DimensionVector:
    """Look ``symbol`` up in the default (strict) table."""
    return DEFAULT_TABLE.lookup(symbol, exponent)


def kind_name(vector: DimensionVector) -> Optional[str]:
    """Return the quantity-kind name of ``vector`` (``"Force"``, ``"Speed"`` ...)."""
    return KIND_NAMES.get(vector)


def describe_dimension(vector: DimensionVector) -> str:
    name = kind_name(vector)
    if name is not None:
        return f"Unit({name})"
    parts = ", ".join(
        f"{label}^{exponent}"
        for label, exponent in zip(
            (
                "Time",
                "Length",
                "Mass",
                "Current",
                "Temperature",
                "AmountOfSubstance",
                "LuminousIntensity",
            ),
            vector.exponents(),
        )
    )
    return f"Unit({parts})"


__all__ = [
    "KIND_NAMES",
    "UnitTable",
    "DEFAULT_TABLE",
    "LENIENT_TABLE",
    "get_table",
    "lookup",
    "kind_name",
    "describe_dimension",
]
