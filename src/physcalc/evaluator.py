"""Reduction of expression trees to quantities, and the text entry points."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Union

from .config import Settings, get_settings
from .core.quantity import Quantity
from .errors import DimensionMismatch, EvalError, SubExpressionError
from .observability import bind_evaluation_id, log_event, new_evaluation_id, reset_evaluation_id
from .parser.expression import parse_expression
from .parser.nodes import Add, Div, Expr, Mul, Paren, Sub, Value
from .units.formatting import format_dimension, format_magnitude, format_quantity
from .units.table import UnitTable, get_table, kind_name

logger = logging.getLogger(__name__)

SAMPLE_INPUTS: List[str] = [
    "3 m",
    "-4 kg",
    "(0 kg - 5 kg)",
    "5 m^2",
    "12 kg m^2",
    "12 W^1 m^2",
    "3 W * 4 m * 1 m",
    "15   N m * 12 kg *   92",
    "(15   N m * 12 kg * 92)",
    "(23 + 58)",
    "((12 + 13))",
    "(12 T * 13 m)",
    "(3 m + 4 kg)",
    "3 m @",
]

_Result = Union[Quantity, EvalError]


def _apply(node: Union[Add, Sub, Mul, Div], left: Quantity, right: Quantity) -> Quantity:
    if isinstance(node, Add):
        return left + right
    if isinstance(node, Sub):
        return left - right
    if isinstance(node, Mul):
        return left * right
    return left / right


def evaluate_tree(expr: Expr) -> Quantity:
    """Reduce ``expr`` to a single quantity.

    Children are reduced left then right. A failing child makes its parent
    fail with :class:`SubExpressionError`, whatever the child's own error
    was; a dimension mismatch raised by the node itself surfaces unchanged.
    ``Paren`` nodes pass their inner result through untouched.

    The walk is post-order over an explicit stack, so long operator chains
    are not bounded by the interpreter recursion limit.
    """

    results: List[_Result] = []
    stack: List[tuple] = [(expr, False)]
    while stack:
        node, reduced = stack.pop()
        if isinstance(node, Value):
            results.append(node.quantity)
        elif isinstance(node, Paren):
            if not reduced:
                stack.append((node, True))
                stack.append((node.inner, False))
        elif isinstance(node, (Add, Sub, Mul, Div)):
            if not reduced:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
                continue
            right = results.pop()
            left = results.pop()
            failed = next((r for r in (left, right) if isinstance(r, EvalError)), None)
            if failed is not None:
                error = SubExpressionError(node.symbol)
                error.__cause__ = failed
                results.append(error)
                continue
            try:
                results.append(_apply(node, left, right))
            except DimensionMismatch as exc:
                results.append(exc)
        else:
            raise TypeError(f"Unsupported expression node: {type(node)!r}")

    outcome = results.pop()
    if isinstance(outcome, EvalError):
        raise outcome
    return outcome


def _resolve(table: Optional[UnitTable], settings: Optional[Settings]) -> tuple:
    settings = settings or get_settings()
    return table or get_table(settings.strict_units), settings


def evaluate(
    text: str,
    *,
    table: Optional[UnitTable] = None,
    settings: Optional[Settings] = None,
) -> Quantity:
    """Parse and evaluate ``text``, raising :class:`EvalError` on failure.

    >>> str(evaluate("15 N m * 12 kg * 92"))
    '16560 kg^2 m^2 s^-2'
    """

    table, settings = _resolve(table, settings)
    tree = parse_expression(text, table=table, max_depth=settings.max_depth)
    quantity = evaluate_tree(tree)
    logger.debug("evaluated %r to %s", text, quantity)
    return quantity


def json_magnitude(value: float) -> Union[float, str]:
    """Return ``value`` unchanged when finite, else its text form (``"inf"``, ``"nan"``)."""
    return value if math.isfinite(value) else format_magnitude(value)


@dataclass
class EvaluationOutcome:
    """Result of evaluating one input without raising."""

    text: str
    quantity: Optional[Quantity] = None
    error: Optional[EvalError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def display(self) -> str:
        if self.quantity is not None:
            return format_quantity(self.quantity)
        return f"error[{self.error.code}]: {self.error}"

    def to_dict(self) -> Dict[str, Any]:
        if self.quantity is None:
            return {
                "text": self.text,
                "ok": False,
                "error": {"code": self.error.code, "message": str(self.error)},
            }
        quantity = self.quantity
        return {
            "text": self.text,
            "ok": True,
            "magnitude": json_magnitude(quantity.magnitude),
            "dimension": quantity.dimension.as_dict(),
            "unit": format_dimension(quantity.dimension),
            "kind": kind_name(quantity.dimension),
            "display": format_quantity(quantity),
        }


def try_evaluate(
    text: str,
    *,
    table: Optional[UnitTable] = None,
    settings: Optional[Settings] = None,
) -> EvaluationOutcome:
    """Evaluate ``text`` and capture any :class:`EvalError` in the outcome."""

    token = bind_evaluation_id(new_evaluation_id())
    try:
        try:
            quantity = evaluate(text, table=table, settings=settings)
        except EvalError as exc:
            log_event("evaluation.failed", text=text, code=exc.code)
            return EvaluationOutcome(text=text, error=exc)
        log_event("evaluation.ok", text=text)
        return EvaluationOutcome(text=text, quantity=quantity)
    finally:
        reset_evaluation_id(token)


def evaluate_many(
    texts: Iterable[str],
    *,
    table: Optional[UnitTable] = None,
    settings: Optional[Settings] = None,
) -> List[EvaluationOutcome]:
    return [try_evaluate(text, table=table, settings=settings) for text in texts]


__all__ = [
    "SAMPLE_INPUTS",
    "EvaluationOutcome",
    "json_magnitude",
    "evaluate_tree",
    "evaluate",
    "try_evaluate",
    "evaluate_many",
]
