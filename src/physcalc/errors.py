"""Error taxonomy shared by the parser, the value model and the evaluator.

Every failure surfaced by :func:`physcalc.evaluate` is an :class:`EvalError`.
The hierarchy is intentionally flat; callers dispatch on ``code`` or on the
concrete class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from .core.dimensions import DimensionVector


class EvalError(Exception):
    """Base class for every evaluation failure."""

    code = "eval-error"


class ParseError(EvalError):
    """Raised when input text does not match the expression grammar."""

    code = "parse-error"

    def __init__(
        self,
        detail: str,
        text: str = "",
        position: Optional[int] = None,
        *,
        remainder: Optional[str] = None,
    ) -> None:
        pointer = ""
        if text and position is not None and 0 <= position <= len(text):
            pointer = f"\n{text}\n{' ' * position}^"
        super().__init__(f"{detail}{pointer}")
        self.detail = detail
        self.text = text
        self.position = position
        self.remainder = remainder


class UnknownUnitSymbol(EvalError):
    """Raised when a unit token names a symbol missing from the unit table."""

    code = "unknown-unit"

    def __init__(self, symbol: str) -> None:
        super().__init__(f"Unknown unit symbol '{symbol}'")
        self.symbol = symbol


class DimensionMismatch(EvalError):
    """Raised when two quantities of different dimension are added or subtracted."""

    code = "dimension-mismatch"
    operation = "combine"

    def __init__(self, left: DimensionVector, right: DimensionVector) -> None:
        super().__init__(
            f"Cannot {self.operation} quantities with different dimensions: "
            f"{left.exponents()} vs {right.exponents()}"
        )
        self.left = left
        self.right = right


class AddingTwoDifferentUnits(DimensionMismatch):
    code = "adding-different-units"
    operation = "add"


class SubtractingTwoDifferentUnits(DimensionMismatch):
    code = "subtracting-different-units"
    operation = "subtract"


class SubExpressionError(EvalError):
    """Raised when a child of a binary node failed to evaluate.

    The inner failure is chained as ``__cause__`` but is not otherwise
    reported; the parent only knows that one of its operands failed.
    """

    code = "sub-expression"

    def __init__(self, operator: str) -> None:
        super().__init__(f"Operand of '{operator}' failed to evaluate")
        self.operator = operator


__all__ = [
    "EvalError",
    "ParseError",
    "UnknownUnitSymbol",
    "DimensionMismatch",
    "AddingTwoDifferentUnits",
    "SubtractingTwoDifferentUnits",
    "SubExpressionError",
]
