"""Expression tree produced by the parser and consumed by the evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Union

from ..core.quantity import Quantity
from ..units.formatting import format_magnitude, format_quantity
from ..units.table import UnitTable


@dataclass(frozen=True)
class Value:
    quantity: Quantity


@dataclass(frozen=True)
class Add:
    left: Expr
    right: Expr

    symbol = "+"


@dataclass(frozen=True)
class Sub:
    left: Expr
    right: Expr

    symbol = "-"


@dataclass(frozen=True)
class Mul:
    left: Expr
    right: Expr

    symbol = "*"


@dataclass(frozen=True)
class Div:
    left: Expr
    right: Expr

    symbol = "/"


@dataclass(frozen=True)
class Paren:
    """Parenthesised sub-expression; evaluates to its inner expression."""

    inner: Expr


Expr = Union[Value, Add, Sub, Mul, Div, Paren]
BinaryOp = Union[Add, Sub, Mul, Div]

BINARY_NODES = {"+": Add, "-": Sub, "*": Mul, "/": Div}


def render(expr: Expr, *, table: Optional[UnitTable] = None) -> str:
    """Render ``expr`` back into canonical expression text.

    Pieces are emitted from an explicit stack, so long operator chains
    render without touching the interpreter recursion limit.
    """

    parts: List[str] = []
    stack: List[Union[Expr, str]] = [expr]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, Value):
            if item.quantity.is_dimensionless():
                parts.append(format_magnitude(item.quantity.magnitude))
            else:
                parts.append(format_quantity(item.quantity, table=table))
        elif isinstance(item, Paren):
            stack.extend((")", item.inner, "("))
        elif isinstance(item, (Add, Sub, Mul, Div)):
            stack.extend((item.right, f" {item.symbol} ", item.left))
        else:
            raise TypeError(f"Unsupported expression node: {type(item)!r}")
    return "".join(parts)


__all__ = [
    "Value",
    "Add",
    "Sub",
    "Mul",
    "Div",
    "Paren",
    "Expr",
    "BinaryOp",
    "BINARY_NODES",
    "render",
]
