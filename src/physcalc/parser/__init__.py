"""Parsing package exposing the expression and number parsers."""

from .expression import ExpressionParser, parse_expression
from .nodes import Add, Div, Expr, Mul, Paren, Sub, Value, render
from .numbers import parse_number

__all__ = [
    "ExpressionParser",
    "parse_expression",
    "parse_number",
    "render",
    "Expr",
    "Value",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Paren",
]
