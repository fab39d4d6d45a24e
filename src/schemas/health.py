from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict

ServiceState = Literal["configured", "not_configured"]


class ServiceConfiguration(BaseModel):
    twilio: ServiceState
    openai: ServiceState


class HealthReport(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2026-01-01T12:00:00.000000Z",
                "environment": "production",
                "database": "disconnected",
                "database_error": "[Errno 111] Connect call failed ('127.0.0.1', 5432)",
                "services": {"twilio": "configured", "openai": "not_configured"},
            }
        }
    )

    status: Literal["healthy", "unhealthy"]
    timestamp: datetime
    environment: str
    # Omitted entirely unless DATABASE_URL is configured.
    database: Literal["connected", "disconnected"] | None = None
    database_error: str | None = None
    services: ServiceConfiguration


class HealthErrorResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "unhealthy",
                "error": "unexpected failure while building the health report",
            }
        }
    )

    status: Literal["unhealthy"] = "unhealthy"
    error: str
