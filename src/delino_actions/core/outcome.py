"""Uniform outcome reporting for best-effort backend calls."""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Type, TypeVar

import requests

from ..integrations.delino.models import RpcEnvelope

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=RpcEnvelope)

# Response bodies are echoed into warnings; keep them short
_BODY_PREVIEW_CHARS = 500


@dataclass(frozen=True)
class OutcomeReport:
    """Result of one backend call. Logged, never persisted."""
    step: str
    success: bool
    message: str
    status_code: Optional[int] = None
    envelope: Optional[RpcEnvelope] = None


def _degraded(
    step: str,
    detail: str,
    log: logging.Logger,
    status_code: Optional[int] = None,
    envelope: Optional[RpcEnvelope] = None,
) -> OutcomeReport:
    log.warning(f"{step} failed: {detail}")
    return OutcomeReport(
        step=step,
        success=False,
        message=detail,
        status_code=status_code,
        envelope=envelope,
    )


def best_effort_rpc(
    step: str,
    call: Callable[[], requests.Response],
    response_model: Type[E] = RpcEnvelope,
    *,
    logger_instance: Optional[logging.Logger] = None,
) -> OutcomeReport:
    """
    Perform ``call`` and interpret the ``{success, message}`` envelope.

    Never raises. Transport errors, non-200 statuses, malformed bodies and
    ``success == false`` are logged as warnings and reported as unsuccessful.

    Args:
        step: Human-readable label used in log lines (e.g. "Branch registration")
        call: Zero-argument callable performing the HTTP request
        response_model: Envelope subclass used to parse the body
        logger_instance: Logger to use (defaults to module logger)

    Returns:
        OutcomeReport; ``envelope`` holds the parsed body whenever one was read
    """
    log = logger_instance or logger

    try:
        response = call()
    except Exception as e:
        return _degraded(step, f"{type(e).__name__}: {e}", log)

    status_code = response.status_code
    if status_code != 200:
        body = (response.text or "").strip()[:_BODY_PREVIEW_CHARS]
        detail = f"HTTP {status_code}: {body}" if body else f"HTTP {status_code}"
        return _degraded(step, detail, log, status_code=status_code)

    try:
        envelope = response_model.model_validate(response.json())
    except ValueError as e:
        # Validation errors echo input values, which may include credentials
        return _degraded(step, f"malformed response body ({type(e).__name__})", log, status_code=status_code)

    if not envelope.success:
        return _degraded(
            step,
            envelope.message or "backend reported failure",
            log,
            status_code=status_code,
            envelope=envelope,
        )

    log.info(f"{step} succeeded: {envelope.message}")
    return OutcomeReport(
        step=step,
        success=True,
        message=envelope.message,
        status_code=status_code,
        envelope=envelope,
    )
