"""FastAPI router exposing expression evaluation and the unit table."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from ..evaluator import EvaluationOutcome, evaluate_many, json_magnitude, try_evaluate
from ..units.formatting import format_dimension, format_quantity
from ..units.table import DEFAULT_TABLE, kind_name


router = APIRouter(prefix="/v1", tags=["evaluate"])


class EvaluateReq(BaseModel):
    text: str = Field(..., description="Expression such as '15 N m * 12 kg * 92'")


class EvaluateResp(BaseModel):
    ok: bool = True
    magnitude: Union[float, str]
    dimension: Dict[str, int]
    unit: str
    kind: Optional[str] = None
    display: str


@router.post("/evaluate", response_model=EvaluateResp)
def evaluate_expression(req: EvaluateReq) -> EvaluateResp:
    outcome = try_evaluate(req.text)
    if not outcome.ok:
        error = outcome.error
        raise HTTPException(status_code=422, detail={"code": error.code, "message": str(error)})
    quantity = outcome.quantity

    return EvaluateResp(
        magnitude=json_magnitude(quantity.magnitude),
        dimension=quantity.dimension.as_dict(),
        unit=format_dimension(quantity.dimension),
        kind=kind_name(quantity.dimension),
        display=format_quantity(quantity),
    )


class EvaluateBatchReq(BaseModel):
    texts: List[str]


class EvaluateBatchResp(BaseModel):
    results: List[Dict[str, Any]]


@router.post("/evaluate/batch", response_model=EvaluateBatchResp)
def evaluate_batch(req: EvaluateBatchReq) -> EvaluateBatchResp:
    outcomes: List[EvaluationOutcome] = evaluate_many(req.texts)
    return EvaluateBatchResp(results=[outcome.to_dict() for outcome in outcomes])


class UnitModel(BaseModel):
    symbol: str
    dimension: Dict[str, int]
    kind: Optional[str] = None


class UnitsResp(BaseModel):
    units: List[UnitModel]


@router.get("/units", response_model=UnitsResp)
def list_units() -> UnitsResp:
    units = [
        UnitModel(symbol=symbol, dimension=vector.as_dict(), kind=kind_name(vector))
        for symbol, vector in DEFAULT_TABLE.items()
    ]
    return UnitsResp(units=units)


__all__ = ["router"]
