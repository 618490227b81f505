"""Recursive-descent parser for dimensioned arithmetic expressions.

Grammar (left-associative, ``*``/``/`` bind tighter than ``+``/``-``)::

    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := concrete_number | '(' expr ')'

The whole input is treated as if it were wrapped in one outer pair of
parentheses, so the returned tree always has a :class:`Paren` at its root.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..errors import ParseError
from ..units.table import DEFAULT_TABLE, UnitTable
from .nodes import BINARY_NODES, Expr, Paren, Value
from .numbers import parse_concrete_number
from .scanner import Scanner

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 200


class ExpressionParser:
    """Parse expression text into an :class:`~physcalc.parser.nodes.Expr` tree."""

    def __init__(self, *, table: Optional[UnitTable] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self.table = table or DEFAULT_TABLE
        self.max_depth = max_depth

    def parse(self, text: str) -> Paren:
        logger.debug("parsing expression %r", text)
        scanner = Scanner(text)
        try:
            inner = self._parse_expr(scanner, depth=1)
        except RecursionError:
            raise ParseError(
                "Expression nested too deeply to parse",
                text,
                scanner.pos,
            ) from None
        scanner.skip_whitespace()
        if not scanner.at_end():
            remainder = scanner.remainder()
            raise ParseError(
                f"Unconsumed input: '{remainder}'",
                text,
                scanner.pos,
                remainder=remainder,
            )
        tree = Paren(inner)
        logger.debug("parsed expression %r", text)
        return tree

    # ------------------------------------------------------------------
    def _parse_expr(self, scanner: Scanner, depth: int) -> Expr:
        node = self._parse_term(scanner, depth)
        while True:
            scanner.skip_whitespace()
            operator = scanner.peek()
            if operator not in ("+", "-"):
                return node
            scanner.pos += 1
            node = BINARY_NODES[operator](node, self._parse_term(scanner, depth))

    def _parse_term(self, scanner: Scanner, depth: int) -> Expr:
        node = self._parse_factor(scanner, depth)
        while True:
            scanner.skip_whitespace()
            operator = scanner.peek()
            if operator not in ("*", "/"):
                return node
            scanner.pos += 1
            node = BINARY_NODES[operator](node, self._parse_factor(scanner, depth))

    def _parse_factor(self, scanner: Scanner, depth: int) -> Expr:
        scanner.skip_whitespace()
        if scanner.peek() == "(":
            if depth >= self.max_depth:
                raise scanner.error(f"Expression nested deeper than {self.max_depth} levels")
            scanner.pos += 1
            inner = self._parse_expr(scanner, depth + 1)
            scanner.skip_whitespace()
            scanner.expect(")")
            return Paren(inner)
        return Value(parse_concrete_number(scanner, table=self.table))


def parse_expression(
    text: str,
    *,
    table: Optional[UnitTable] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Paren:
    """Parse ``text`` into an expression tree rooted at the implicit outer parentheses."""
    return ExpressionParser(table=table, max_depth=max_depth).parse(text)


__all__ = ["DEFAULT_MAX_DEPTH", "ExpressionParser", "parse_expression"]
