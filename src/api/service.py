"""Service discovery endpoints: the root info document and the API status."""

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends

from src.config import Settings
from src.dependencies import get_settings
from src.schemas.service import ServiceEndpoints, ServiceInfo, StatusReport

root_router = APIRouter(tags=["Service"])
router = APIRouter(tags=["Service"])

SERVICE_ENDPOINTS = ServiceEndpoints(
    health="/health",
    surveys="/api/surveys",
    twilio="/api/twilio",
)


@root_router.get("/", response_model=ServiceInfo)
async def service_info(settings: Annotated[Settings, Depends(get_settings)]) -> ServiceInfo:
    """Describe the service and advertise its endpoint roots."""
    return ServiceInfo(
        name=settings.app_name,
        version=settings.version,
        status="running",
        endpoints=SERVICE_ENDPOINTS,
    )


@router.get("/status", response_model=StatusReport)
async def api_status(settings: Annotated[Settings, Depends(get_settings)]) -> StatusReport:
    return StatusReport(
        api=settings.app_name,
        status="operational",
        timestamp=datetime.now(UTC),
    )
