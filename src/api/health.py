"""Health check endpoint: Railway polls this to decide whether to restart the container."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from src.config import Settings
from src.dependencies import get_settings
from src.schemas.health import HealthErrorResponse, HealthReport
from src.services.health import build_health_report

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthReport,
    response_model_exclude_none=True,
    responses={500: {"model": HealthErrorResponse}},
)
async def health(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthReport | JSONResponse:
    """Return process health, database reachability and integration configuration.

    An unreachable database is reported in the body (``database`` /
    ``database_error``) while the endpoint still answers HTTP 200.  Only a
    failure while assembling the report itself yields HTTP 500.
    """
    try:
        return await build_health_report(settings)
    except Exception as exc:
        logger.exception("Health report assembly failed")
        body = HealthErrorResponse(error=str(exc) or type(exc).__name__)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=body.model_dump(),
        )
