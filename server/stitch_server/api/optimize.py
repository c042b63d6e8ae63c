"""Prompt optimization API routes"""

import logging

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from ..config import Settings, get_remote_config, get_settings
from ..core.optimizer import OptimizationEngine, OptimizationResult, RemoteOptimizer
from .schemas import ErrorResponse

router = APIRouter(prefix="/api", tags=["optimize"])
logger = logging.getLogger(__name__)

SOURCE_HEADER = "X-Optimization-Source"
FALLBACK_HEADER = "X-Optimization-Fallback-Reason"


def get_optimization_engine(
    settings: Settings = Depends(get_settings),
) -> OptimizationEngine:
    """Build an engine per request from the current configuration."""
    remote_config = get_remote_config(settings)
    remote = None
    if remote_config is not None:
        remote = RemoteOptimizer.from_credentials(
            endpoint=remote_config.endpoint,
            api_key=remote_config.api_key,
            timeout=settings.request_timeout_seconds,
        )
    return OptimizationEngine(
        remote=remote,
        reason_max_chars=settings.fallback_reason_max_chars,
    )


def _header_value(text: str) -> str:
    """Collapse whitespace and drop non-ASCII so the text fits in a header."""
    return " ".join(text.encode("ascii", "replace").decode("ascii").split())


@router.post(
    "/optimize",
    response_model=OptimizationResult,
    responses={400: {"model": ErrorResponse}},
)
async def optimize_prompt(
    request: Request,
    response: Response,
    engine: OptimizationEngine = Depends(get_optimization_engine),
):
    """Optimize a prompt with the model, falling back to local heuristics.

    The path that produced the result is reported in the
    X-Optimization-Source header; when the model failed, the reason is in
    X-Optimization-Fallback-Reason.
    """
    try:
        body = await request.json()
    except ValueError:
        body = None

    prompt = body.get("prompt") if isinstance(body, dict) else None
    if not isinstance(prompt, str) or not prompt.strip():
        logger.info("Rejected optimize request without a usable prompt")
        return JSONResponse(status_code=400, content={"error": "prompt is required"})

    outcome = await engine.optimize(prompt)

    response.headers[SOURCE_HEADER] = outcome.source
    if outcome.fallback_reason is not None:
        response.headers[FALLBACK_HEADER] = _header_value(outcome.fallback_reason)

    return outcome.result
