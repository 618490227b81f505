"""Parsing of concrete numbers: a float literal followed by a compound unit."""

from __future__ import annotations

import re
from typing import Optional

from ..core.quantity import Quantity
from ..errors import ParseError
from ..units.algebra import UNIT_SEPARATOR_RE, parse_compound_unit
from ..units.table import UnitTable
from .scanner import Scanner

FLOAT_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_concrete_number(scanner: Scanner, *, table: Optional[UnitTable] = None) -> Quantity:
    """Consume ``FLOAT (WS+ compound_unit)?`` and return the quantity.

    The separator between magnitude and unit is mandatory, so ``"3m"`` stops
    after ``3`` and leaves ``m`` for the caller to reject.
    """

    literal = scanner.match(FLOAT_RE)
    if literal is None:
        raise scanner.error("Expected a number")
    magnitude = float(literal.group(0))
    if scanner.match(UNIT_SEPARATOR_RE) is None:
        return Quantity(magnitude)
    return Quantity(magnitude, parse_compound_unit(scanner, table=table))


def parse_number(text: str, *, table: Optional[UnitTable] = None) -> Quantity:
    """Parse ``text`` as a single concrete number, e.g. ``"9.81 m s^-2"``."""

    scanner = Scanner(text)
    scanner.skip_whitespace()
    quantity = parse_concrete_number(scanner, table=table)
    scanner.skip_whitespace()
    if not scanner.at_end():
        remainder = scanner.remainder()
        raise ParseError(
            f"Unexpected input after number: '{remainder}'",
            text,
            scanner.pos,
            remainder=remainder,
        )
    return quantity


__all__ = ["FLOAT_RE", "parse_concrete_number", "parse_number"]
