"""Tests for the unit symbol table."""

import logging

import pytest

from physcalc.core.dimensions import DIMENSIONLESS, DimensionVector
from physcalc.errors import UnknownUnitSymbol
from physcalc.units.table import (
    DEFAULT_TABLE,
    UnitTable,
    describe_dimension,
    get_table,
    kind_name,
    lookup,
)


@pytest.mark.parametrize(
    "symbol, slot",
    [("s", 0), ("m", 1), ("kg", 2), ("A", 3), ("K", 4), ("mol", 5), ("cd", 6)],
)
def test_base_units_have_single_exponent(symbol, slot):
    expected = [0] * 7
    expected[slot] = 1
    assert lookup(symbol).exponents() == tuple(expected)


@pytest.mark.parametrize(
    "symbol, exponents",
    [
        ("Hz", (-1, 0, 0, 0)),
        ("N", (-2, 1, 1, 0)),
        ("Pa", (-2, -1, 1, 0)),
        ("J", (-2, 2, 1, 0)),
        ("W", (-3, 2, 1, 0)),
        ("C", (1, 0, 0, 1)),
        ("V", (-3, 2, 1, -1)),
        ("Wb", (-2, 2, 1, -1)),
        ("T", (-2, 0, 1, -1)),
        ("F", (4, -2, -1, 2)),
        ("Ω", (-3, 2, 1, -2)),
        ("ohm", (-3, 2, 1, -2)),
        ("S", (3, -2, -1, 2)),
        ("H", (-2, 2, 1, -2)),
    ],
)
def test_derived_units(symbol, exponents):
    assert lookup(symbol) == DimensionVector(*exponents)


def test_katal_uses_amount_slot():
    assert lookup("kat").exponents() == (-1, 0, 0, 0, 0, 1, 0)


def test_exponent_scales_lookup():
    assert lookup("N", 2).exponents() == (-4, 2, 2, 0, 0, 0, 0)
    assert lookup("m", -3) == DimensionVector(length=-3)
    assert lookup("m", 0) == DIMENSIONLESS


def test_unknown_symbol_raises_in_strict_mode():
    with pytest.raises(UnknownUnitSymbol) as excinfo:
        lookup("foo")
    assert excinfo.value.symbol == "foo"
    assert excinfo.value.code == "unknown-unit"


def test_lenient_table_falls_back_to_dimensionless(caplog):
    table = UnitTable(strict=False)
    with caplog.at_level(logging.WARNING, logger="physcalc.units.table"):
        assert table.lookup("foo") == DIMENSIONLESS
    assert "foo" in caplog.text
    assert get_table(False).strict is False
    assert get_table(True) is DEFAULT_TABLE


def test_symbols_in_registration_order():
    symbols = DEFAULT_TABLE.symbols()
    assert symbols[:7] == ["s", "m", "kg", "A", "K", "mol", "cd"]
    assert symbols.index("ohm") == symbols.index("Ω") + 1
    assert len(DEFAULT_TABLE) == len(symbols) == 22
    assert "kat" in DEFAULT_TABLE
    assert "foo" not in DEFAULT_TABLE


def test_display_symbol_prefers_primary_name():
    ohm = lookup("ohm")
    assert DEFAULT_TABLE.display_symbol(ohm) == "Ω"
    assert DEFAULT_TABLE.display_symbol(DIMENSIONLESS) == "dimensionless"
    assert DEFAULT_TABLE.display_symbol(DimensionVector(length=2)) is None


def test_kind_names():
    assert kind_name(lookup("N")) == "Force"
    assert kind_name(lookup("kat")) == "CatalyticActivity"
    assert kind_name(DimensionVector(time=-1, length=1)) == "Speed"
    assert kind_name(DimensionVector(time=-1, length=3)) == "VolumetricFlow"
    assert kind_name(DimensionVector(length=7)) is None


def test_describe_dimension():
    assert describe_dimension(DIMENSIONLESS) == "Unit(Dimensionless)"
    assert describe_dimension(lookup("Pa")) == "Unit(Pressure)"
    assert describe_dimension(DimensionVector(mass=2)) == (
        "Unit(Time^0, Length^0, Mass^2, Current^0, Temperature^0, "
        "AmountOfSubstance^0, LuminousIntensity^0)"
    )
