"""HTTP application for physcalc."""

from __future__ import annotations

from fastapi import FastAPI

from ..config import get_settings
from ..observability import configure_logging
from ..version import __version__
from .routes_evaluate import router as evaluate_router

configure_logging(get_settings().log_level)

app = FastAPI(title="physcalc API", version="v1")
app.include_router(evaluate_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok", "version": __version__}
