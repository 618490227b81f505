"""Evaluation-scoped logging helpers."""

from __future__ import annotations

import logging
import uuid
from contextvars import ContextVar, Token
from typing import Optional

logger = logging.getLogger(__name__)

_evaluation_id_ctx: ContextVar[Optional[str]] = ContextVar("evaluation_id", default=None)

LOG_FORMAT = "[%(levelname)s] %(message)s"


def configure_logging(level: str = "WARNING") -> None:
    """Install a basic stderr handler; only entry points should call this."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("physcalc").setLevel(level)


def new_evaluation_id() -> str:
    """Generate a new evaluation identifier for correlating logs."""
    return str(uuid.uuid4())


def bind_evaluation_id(value: Optional[str]) -> Optional[Token]:
    """Bind an evaluation id for the current context and return the reset token."""

    if value is None:
        return None
    return _evaluation_id_ctx.set(value)


def reset_evaluation_id(token: Optional[Token]) -> None:
    if token is None:
        return
    _evaluation_id_ctx.reset(token)


def current_evaluation_id() -> Optional[str]:
    return _evaluation_id_ctx.get()


def log_event(message: str, **extra: object) -> None:
    """Log an event with the active evaluation id automatically attached."""

    payload = {"evaluation_id": current_evaluation_id(), **extra}
    logger.info("%s %s", message, payload, extra={"payload": payload})


__all__ = [
    "LOG_FORMAT",
    "configure_logging",
    "new_evaluation_id",
    "bind_evaluation_id",
    "reset_evaluation_id",
    "current_evaluation_id",
    "log_event",
]
