"""Compound unit parsing.

A compound unit is a whitespace-separated run of unit tokens, each a symbol
optionally followed by ``^`` and a signed integer exponent::

    N m        kg m^2 s^-2        W m^3

The tokens are folded left to right by multiplying their dimensions, so an
empty run is dimensionless.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from ..core.dimensions import DIMENSIONLESS, DimensionVector
from ..errors import ParseError
from ..parser.scanner import Scanner
from .table import DEFAULT_TABLE, UnitTable

SYMBOL_RE = re.compile(r"[A-Za-zΩ]+")
_CARET_RE = re.compile(r"\^")
_EXPONENT_RE = re.compile(r"[+-]?\d+(?![\d.A-Za-zΩ])", re.ASCII)
UNIT_SEPARATOR_RE = re.compile(r"\s+(?=[A-Za-zΩ])")


def parse_unit_token(scanner: Scanner) -> Tuple[str, int]:
    """Consume one ``symbol`` or ``symbol^exponent`` token."""

    symbol = scanner.match(SYMBOL_RE)
    if symbol is None:
        raise scanner.error("Expected a unit symbol")
    if scanner.match(_CARET_RE) is None:
        return symbol.group(0), 1
    exponent = scanner.match(_EXPONENT_RE)
    if exponent is None:
        raise scanner.error(
            f"Malformed exponent for unit '{symbol.group(0)}': expected an integer after '^'"
        )
    return symbol.group(0), int(exponent.group(0))


def parse_unit_tokens(scanner: Scanner) -> List[Tuple[str, int]]:
    """Consume a compound unit starting at a symbol character.

    Returns an empty list when the cursor is not on a symbol. Whitespace is
    only consumed between tokens, never after the last one.
    """

    tokens: List[Tuple[str, int]] = []
    if not scanner.check(SYMBOL_RE):
        return tokens
    tokens.append(parse_unit_token(scanner))
    while scanner.match(UNIT_SEPARATOR_RE) is not None:
        tokens.append(parse_unit_token(scanner))
    return tokens


def combine_units(tokens: List[Tuple[str, int]], *, table: Optional[UnitTable] = None) -> DimensionVector:
    table = table or DEFAULT_TABLE
    combined = DIMENSIONLESS
    for symbol, exponent in tokens:
        combined = combined * table.lookup(symbol, exponent)
    return combined


def parse_compound_unit(scanner: Scanner, *, table: Optional[UnitTable] = None) -> DimensionVector:
    return combine_units(parse_unit_tokens(scanner), table=table)


def parse_unit_expr(text: str, *, table: Optional[UnitTable] = None) -> DimensionVector:
    """Parse a standalone compound unit such as ``"kg m^2 s^-2"``."""

    scanner = Scanner(text)
    scanner.skip_whitespace()
    vector = parse_compound_unit(scanner, table=table)
    scanner.skip_whitespace()
    if not scanner.at_end():
        remainder = scanner.remainder()
        raise ParseError(
            f"Unexpected input in unit expression: '{remainder}'",
            text,
            scanner.pos,
            remainder=remainder,
        )
    return vector


__all__ = [
    "SYMBOL_RE",
    "UNIT_SEPARATOR_RE",
    "parse_unit_token",
    "parse_unit_tokens",
    "combine_units",
    "parse_compound_unit",
    "parse_unit_expr",
]
