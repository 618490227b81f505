"""physcalc - arithmetic over physically dimensioned numbers."""

from .core import DimensionVector, Quantity
from .errors import (
    AddingTwoDifferentUnits,
    DimensionMismatch,
    EvalError,
    ParseError,
    SubExpressionError,
    SubtractingTwoDifferentUnits,
    UnknownUnitSymbol,
)
from .evaluator import EvaluationOutcome, evaluate, evaluate_many, try_evaluate
from .units import format_dimension, format_quantity
from .version import __version__

__all__ = [
    "DimensionVector",
    "Quantity",
    "EvalError",
    "ParseError",
    "UnknownUnitSymbol",
    "DimensionMismatch",
    "AddingTwoDifferentUnits",
    "SubtractingTwoDifferentUnits",
    "SubExpressionError",
    "EvaluationOutcome",
    "evaluate",
    "evaluate_many",
    "try_evaluate",
    "format_dimension",
    "format_quantity",
    "__version__",
]
